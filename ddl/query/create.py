from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..column import ColumnBuilder
from ..datatypes import ColumnType
from ..utils import PrimaryKey, quote_identifier
from .base import QueryBuilder

if TYPE_CHECKING:
    from ..utils import Schema

logger = logging.getLogger(__name__)


class PendingTableSchema:
    """Answers primary key lookups for a table that is still being created.

    Lookups of any other table go to the wrapped schema.
    """

    def __init__(self, table: CreateTableQueryBuilder, schema: Schema) -> None:
        self.table = table
        self.schema = schema

    async def primary_key(self, table: str) -> PrimaryKey | None:
        # SQLite table names are case-insensitive
        if table.lower() != self.table.name.lower():
            return await self.schema.primary_key(table)

        columns = tuple(column.name for column in self.table.columns if column.primary_key_clause is not None)

        return PrimaryKey(columns) if columns else None


class CreateTableQueryBuilder(QueryBuilder):
    """Renders a ``CREATE TABLE`` statement from columns added with :meth:`column`.

    Columns appear in the statement in the order they were added.
    """

    def __init__(
        self,
        name: str,
        *,
        temporary: bool = False,
        if_not_exists: bool = False,
        without_rowid: bool = False,
    ) -> None:
        self.name = name
        self.temporary = temporary
        self.if_not_exists = if_not_exists
        self.without_rowid = without_rowid
        self.columns: list[ColumnBuilder] = []

    def column(self, name: str, type: ColumnType) -> ColumnBuilder:
        column = ColumnBuilder(name, type)
        self.columns.append(column)

        return column

    async def build(self, schema: Schema) -> str:
        column_defs: list[str] = []
        pending = PendingTableSchema(self, schema)

        for column in self.columns:
            column_defs.append(await column.build(pending))

        query_parts: list[str] = ["CREATE"]

        if self.temporary:
            query_parts.append("TEMPORARY")

        query_parts.append("TABLE")

        if self.if_not_exists:
            query_parts.append("IF NOT EXISTS")

        query_parts.append(quote_identifier(self.name))
        query_parts.append(f"({', '.join(column_defs)})")

        if self.without_rowid:
            query_parts.append("WITHOUT ROWID")

        query = " ".join(query_parts)
        logger.debug("Rendered %s", query)

        return query
