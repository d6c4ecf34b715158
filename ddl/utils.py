from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import aiosqlite

    Connection = aiosqlite.Connection

__all__ = ("PrimaryKey", "Schema", "quote_identifier")


def quote_identifier(name: str) -> str:
    escaped = name.replace('"', '""')

    return f'"{escaped}"'


@dataclass(frozen=True)
class PrimaryKey:
    columns: tuple[str, ...]


class Schema(Protocol):
    async def primary_key(self, table: str) -> PrimaryKey | None:
        ...
