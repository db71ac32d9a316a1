"""Database layer — async SQLite connection manager and repositories."""

from userstore.db.database import ConnectionManager, ExecuteResult
from userstore.db.errors import (
    DBCloseError,
    DBConnectionError,
    DBError,
    DBQueryError,
    DBSchemaError,
)
from userstore.db.schema import SCHEMA_DDL
from userstore.db.user_repo import UserRepository

__all__ = [
    "ConnectionManager", "ExecuteResult", "UserRepository", "SCHEMA_DDL",
    "DBError", "DBConnectionError", "DBSchemaError", "DBQueryError", "DBCloseError",
]
