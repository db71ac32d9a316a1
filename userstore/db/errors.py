"""Exceptions raised by the database layer."""

from __future__ import annotations

from typing import Any, Optional, Sequence


class DBError(Exception):
    """
    Base exception class for all database errors.

    Attributes:
        code: Stable error code for programmatic handling.
        message: Human-readable error message.
    """

    def __init__(self, code: str, message: str) -> None:
        self.code: str = code
        self.message: str = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.code} -> {self.message}"


class DBConnectionError(DBError):
    """Raised when the database file cannot be opened."""

    def __init__(self, path: str, original: Optional[BaseException] = None) -> None:
        self.path = path
        self.original = original
        super().__init__("DB01", f"Could not connect to database. '{path}': {original}")


class DBSchemaError(DBError):
    """Raised when the required tables or indexes cannot be created."""

    def __init__(self, original: Optional[BaseException] = None) -> None:
        self.original = original
        super().__init__("DB02", f"Could not create tables. {original}")


class DBQueryError(DBError):
    """Raised when a caller-supplied statement fails."""

    def __init__(
        self,
        sql: str,
        params: Sequence[Any] = (),
        original: Optional[BaseException] = None,
    ) -> None:
        self.sql = sql
        self.params = tuple(params)
        self.original = original
        super().__init__("DB03", f"Error running sql '{' '.join(sql.split())}': {original}")


class DBCloseError(DBError):
    """Raised when the database connection cannot be released."""

    def __init__(self, original: Optional[BaseException] = None) -> None:
        self.original = original
        super().__init__("DB04", f"Error closing database. {original}")
