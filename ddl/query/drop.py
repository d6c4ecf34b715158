from __future__ import annotations

from typing import TYPE_CHECKING

from ..utils import quote_identifier
from .base import QueryBuilder

if TYPE_CHECKING:
    from ..utils import Schema


class DropTableQueryBuilder(QueryBuilder):
    def __init__(self, name: str, *, if_exists: bool = False) -> None:
        self.name = name
        self.if_exists = if_exists

    async def build(self, schema: Schema) -> str:
        query_parts = ["DROP TABLE"]

        if self.if_exists:
            query_parts.append("IF EXISTS")

        query_parts.append(quote_identifier(self.name))

        return " ".join(query_parts)
