from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from typing_extensions import Self

from .datatypes import Collation, ColumnType, ConflictResolution, ForeignKeyAction, Ordering
from .expression import ColumnRef, Expression, to_expression
from .utils import Schema, quote_identifier

__all__ = ("PrimaryKeyClause", "ForeignKeyClause", "ColumnBuilder")

logger = logging.getLogger(__name__)

ROWID = "_rowid_"


@dataclass(frozen=True)
class PrimaryKeyClause:
    ordering: Ordering | None = None
    conflict_resolution: ConflictResolution | None = None
    autoincrement: bool = False


@dataclass(frozen=True)
class ForeignKeyClause:
    table: str
    column: str | None = None
    on_delete: ForeignKeyAction | None = None
    on_update: ForeignKeyAction | None = None


class ColumnBuilder:
    """Collects the constraints of one column of a ``CREATE TABLE`` statement.

    Instances come from ``CreateTableQueryBuilder.column``. Every configurator
    overwrites what a previous call to it stored and returns the builder, so
    calls can be chained::

        table.column("id", ColumnType.INTEGER).primary_key(autoincrement=True).not_null()
    """

    def __init__(self, name: str, type: ColumnType) -> None:
        self.name = name
        self.type = type
        self.primary_key_clause: PrimaryKeyClause | None = None
        self.not_null_conflict: ConflictResolution | None = None
        self.unique_conflict: ConflictResolution | None = None
        self.check_expression: Expression | None = None
        self.default_expression: Expression | None = None
        self.collation_name: str | None = None
        self.foreign_key_clause: ForeignKeyClause | None = None

    def primary_key(
        self,
        ordering: Ordering | None = None,
        on_conflict: ConflictResolution | None = None,
        autoincrement: bool = False,
    ) -> Self:
        self.primary_key_clause = PrimaryKeyClause(ordering, on_conflict, autoincrement)
        return self

    def not_null(self, on_conflict: ConflictResolution | None = None) -> Self:
        self.not_null_conflict = on_conflict or ConflictResolution.ABORT
        return self

    def unique(self, on_conflict: ConflictResolution | None = None) -> Self:
        self.unique_conflict = on_conflict or ConflictResolution.ABORT
        return self

    def check(self, condition: Callable[[ColumnRef], Any]) -> Self:
        self.check_expression = to_expression(condition(ColumnRef(self.name)))
        return self

    def default(self, value: Any) -> Self:
        self.default_expression = to_expression(value)
        return self

    def collate(self, collation: Collation | str) -> Self:
        self.collation_name = collation.value if isinstance(collation, Collation) else collation
        return self

    def references(
        self,
        table: str,
        column: str | None = None,
        on_delete: ForeignKeyAction | None = None,
        on_update: ForeignKeyAction | None = None,
    ) -> Self:
        """Reference ``column`` of ``table``.

        Without ``column`` the referenced table's primary key is looked up when
        the statement renders, falling back to its rowid. A table that references
        itself resolves against its own primary key columns.
        """
        self.foreign_key_clause = ForeignKeyClause(table, column, on_delete, on_update)
        return self

    async def _referenced_columns(self, schema: Schema, reference: ForeignKeyClause) -> str:
        if reference.column is not None:
            return quote_identifier(reference.column)

        primary_key = await schema.primary_key(reference.table)

        if primary_key is None:
            logger.debug("%s has no explicit primary key, referencing %s", reference.table, ROWID)
            return ROWID

        return ", ".join(quote_identifier(column) for column in primary_key.columns)

    async def build(self, schema: Schema) -> str:
        parts: list[str] = [quote_identifier(self.name), self.type.value]

        if primary_key := self.primary_key_clause:
            parts.append("PRIMARY KEY")

            if primary_key.ordering is not None:
                parts.append(primary_key.ordering.value)

            if primary_key.conflict_resolution is not None:
                parts.append(f"ON CONFLICT {primary_key.conflict_resolution.value}")

            if primary_key.autoincrement:
                parts.append("AUTOINCREMENT")

        for keyword, resolution in (("NOT NULL", self.not_null_conflict), ("UNIQUE", self.unique_conflict)):
            if resolution is None:
                continue

            if resolution is ConflictResolution.ABORT:
                parts.append(keyword)
            else:
                parts.append(f"{keyword} ON CONFLICT {resolution.value}")

        # DDL can't carry bound parameters, so literals are inlined
        if (check := self.check_expression) is not None:
            parts.append(f"CHECK ({check.build(None)})")

        if (default := self.default_expression) is not None:
            parts.append(f"DEFAULT ({default.build(None)})")

        if self.collation_name is not None:
            parts.append(f"COLLATE {self.collation_name}")

        if reference := self.foreign_key_clause:
            columns = await self._referenced_columns(schema, reference)
            parts.append(f"REFERENCES {quote_identifier(reference.table)}({columns})")

            if reference.on_delete is not None:
                parts.append(f"ON DELETE {reference.on_delete.value}")

            if reference.on_update is not None:
                parts.append(f"ON UPDATE {reference.on_update.value}")

        return " ".join(parts)

    def __repr__(self) -> str:
        return f"<ColumnBuilder {self.name!r} {self.type.value}>"
