from __future__ import annotations

import logging
import sqlite3
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING, AsyncIterator, Callable

import aiosqlite
from typing_extensions import Self

from .errors import ExecutionError, SchemaLookupError
from .query import CreateTableQueryBuilder, DropTableQueryBuilder
from .utils import PrimaryKey, quote_identifier

if TYPE_CHECKING:
    from .utils import Connection

__all__ = ("Database",)

logger = logging.getLogger(__name__)


class Database:
    """Schema-definition entry points on top of an ``aiosqlite`` connection.

    The database doubles as the schema that ``CREATE TABLE`` rendering
    consults when a foreign key names no column.
    """

    def __init__(self, conn: Connection) -> None:
        self.conn = conn

    @classmethod
    @asynccontextmanager
    async def connect(cls, database: str | Path, *, foreign_keys: bool = True) -> AsyncIterator[Self]:
        async with aiosqlite.connect(database) as conn:
            if foreign_keys:
                async with conn.execute("PRAGMA foreign_keys = ON"):
                    pass

            yield cls(conn)

    async def execute(self, sql: str) -> None:
        logger.debug("Executing %s", sql)

        try:
            async with self.conn.execute(sql):
                pass
        except sqlite3.Error as e:
            logger.error("Statement failed: %s", e)
            raise ExecutionError(sql, str(e)) from e

    async def primary_key(self, table: str) -> PrimaryKey | None:
        """Return the declared primary key columns of ``table``.

        Returns ``None`` when the table only has its implicit rowid. Raises
        :class:`SchemaLookupError` if the table does not exist or SQLite fails.
        """
        try:
            rows = await self.conn.execute_fetchall(f"PRAGMA table_info({quote_identifier(table)})")
        except sqlite3.Error as e:
            logger.error("Primary key lookup for %s failed: %s", table, e)
            raise SchemaLookupError(table, str(e)) from e

        if not rows:
            logger.error("Primary key lookup for %s failed: no such table", table)
            raise SchemaLookupError(table, "no such table")

        # table_info rows are (cid, name, type, notnull, dflt_value, pk)
        key_columns = sorted((row[5], row[1]) for row in rows if row[5])
        logger.debug("Primary key of %s: %s", table, [name for _, name in key_columns])

        if not key_columns:
            return None

        return PrimaryKey(tuple(name for _, name in key_columns))

    async def create_table(
        self,
        name: str,
        body: Callable[[CreateTableQueryBuilder], object],
        *,
        temporary: bool = False,
        if_not_exists: bool = False,
        without_rowid: bool = False,
    ) -> str:
        """Create a table, letting ``body`` add its columns.

        ::

            await db.create_table("book", lambda t: (
                t.column("id", ColumnType.INTEGER).primary_key(),
                t.column("author_id", ColumnType.INTEGER).references("author"),
            ))

        Returns the executed statement.
        """
        builder = CreateTableQueryBuilder(
            name,
            temporary=temporary,
            if_not_exists=if_not_exists,
            without_rowid=without_rowid,
        )
        body(builder)

        return await builder.execute(self)

    async def drop_table(self, name: str, *, if_exists: bool = False) -> str:
        return await DropTableQueryBuilder(name, if_exists=if_exists).execute(self)
