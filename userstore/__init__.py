"""userstore: async SQLite persistence for the users table."""

from userstore.db import ConnectionManager, ExecuteResult, UserRepository
from userstore.models import User

__all__ = ["ConnectionManager", "ExecuteResult", "UserRepository", "User", "__version__"]

__version__ = "1.0.0"
