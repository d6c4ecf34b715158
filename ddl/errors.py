from __future__ import annotations

__all__ = ("DDLError", "SchemaLookupError", "ExecutionError")


class DDLError(Exception):
    pass


class SchemaLookupError(DDLError):
    def __init__(self, table: str, message: str) -> None:
        super().__init__(f"Primary key lookup for {table!r} failed: {message}")
        self.table = table


class ExecutionError(DDLError):
    def __init__(self, sql: str, message: str) -> None:
        super().__init__(f"{message} (while executing {sql!r})")
        self.sql = sql
