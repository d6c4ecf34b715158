from .base import QueryBuilder as QueryBuilder
from .create import CreateTableQueryBuilder as CreateTableQueryBuilder
from .drop import DropTableQueryBuilder as DropTableQueryBuilder
