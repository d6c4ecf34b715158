from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..database import Database
    from ..utils import Schema


class QueryBuilder:
    async def build(self, schema: Schema) -> str:
        raise NotImplementedError

    async def execute(self, db: Database) -> str:
        query = await self.build(db)

        await db.execute(query)

        return query
