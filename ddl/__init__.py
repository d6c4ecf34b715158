from .column import (
    ColumnBuilder as ColumnBuilder,
    ForeignKeyClause as ForeignKeyClause,
    PrimaryKeyClause as PrimaryKeyClause,
)
from .database import Database as Database
from .datatypes import (
    Collation as Collation,
    ColumnType as ColumnType,
    ConflictResolution as ConflictResolution,
    ForeignKeyAction as ForeignKeyAction,
    Ordering as Ordering,
)
from .errors import (
    DDLError as DDLError,
    ExecutionError as ExecutionError,
    SchemaLookupError as SchemaLookupError,
)
from .expression import ColumnRef as ColumnRef, Expression as Expression, sql as sql
from .query import (
    CreateTableQueryBuilder as CreateTableQueryBuilder,
    DropTableQueryBuilder as DropTableQueryBuilder,
)
from .utils import PrimaryKey as PrimaryKey, quote_identifier as quote_identifier
