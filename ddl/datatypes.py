from enum import Enum

__all__ = ("ColumnType", "Ordering", "ConflictResolution", "ForeignKeyAction", "Collation")


class ColumnType(Enum):
    TEXT = "TEXT"
    INTEGER = "INTEGER"
    DOUBLE = "DOUBLE"
    NUMERIC = "NUMERIC"
    BOOLEAN = "BOOLEAN"
    BLOB = "BLOB"
    DATE = "DATE"
    DATETIME = "DATETIME"


class Ordering(Enum):
    ASC = "ASC"
    DESC = "DESC"


class ConflictResolution(Enum):
    ROLLBACK = "ROLLBACK"
    ABORT = "ABORT"
    FAIL = "FAIL"
    IGNORE = "IGNORE"
    REPLACE = "REPLACE"


class ForeignKeyAction(Enum):
    CASCADE = "CASCADE"
    RESTRICT = "RESTRICT"
    SET_NULL = "SET NULL"
    SET_DEFAULT = "SET DEFAULT"


class Collation(Enum):
    BINARY = "BINARY"
    NOCASE = "NOCASE"
    RTRIM = "RTRIM"
