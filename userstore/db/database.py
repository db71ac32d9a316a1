"""Async SQLite connection manager with lazy (re)connection."""

from __future__ import annotations

import asyncio
import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Union

import aiosqlite

from userstore.db.errors import DBCloseError, DBConnectionError, DBQueryError, DBSchemaError
from userstore.db.schema import SCHEMA_DDL

logger = logging.getLogger(__name__)

Params = Union[Sequence[Any], Mapping[str, Any]]


@dataclass(frozen=True)
class ExecuteResult:
    """Metadata returned by a mutating statement."""
    last_row_id: Optional[int]
    row_count: int


def _bind(params: Params) -> Union[tuple, Mapping[str, Any]]:
    if isinstance(params, Mapping):
        return params
    return tuple(params)


def _params_tuple(params: Params) -> tuple:
    if isinstance(params, Mapping):
        return tuple(params.items())
    return tuple(params)


class ConnectionManager:
    """
    Owner of a single SQLite connection for the application.

    The connection is opened lazily: every query helper calls
    ``ensure_connection()`` first, which runs ``initialize()`` when no handle
    is present. Construct one instance at startup and pass it to whatever
    needs storage access.
    """

    def __init__(self, path: Optional[Path | str] = None):
        if path is None:
            from userstore.config import get_db_path
            self._path: Path = Path(get_db_path())
        else:
            self._path = Path(path)
        self._conn: Optional[aiosqlite.Connection] = None
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    async def __aenter__(self) -> "ConnectionManager":
        await self.ensure_connection()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    # -- connection lifecycle --------------------------------------------------

    def _ensure_dir(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)

    async def _connect(self) -> aiosqlite.Connection:
        try:
            self._ensure_dir()
            conn = await aiosqlite.connect(str(self._path))
        except (OSError, sqlite3.Error) as e:
            logger.error(f"Could not connect to database at {self._path}: {e}")
            raise DBConnectionError(str(self._path), e) from e
        conn.row_factory = sqlite3.Row
        try:
            await conn.execute("PRAGMA foreign_keys = ON")
        except sqlite3.Error as e:
            await conn.close()
            logger.error(f"Could not configure database at {self._path}: {e}")
            raise DBConnectionError(str(self._path), e) from e
        logger.info(f"Connected to database at {self._path}")
        return conn

    async def _create_tables(self, conn: aiosqlite.Connection) -> None:
        try:
            await conn.executescript(SCHEMA_DDL)
            await conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Could not create tables: {e}")
            raise DBSchemaError(e) from e
        logger.info("Tables created or already exist")

    async def initialize(self) -> aiosqlite.Connection:
        """Open a fresh connection and apply the schema (idempotent DDL)."""
        async with self._lock:
            return await self._initialize()

    async def _initialize(self) -> aiosqlite.Connection:
        # Caller must hold self._lock; asyncio.Lock is not re-entrant.
        if self._conn is not None:
            # Re-initializing replaces the live handle rather than reusing it.
            logger.warning("initialize() called while connected; reopening")
            await self.close()

        conn = await self._connect()
        try:
            await self._create_tables(conn)
        except DBSchemaError:
            await conn.close()
            raise
        self._conn = conn
        return conn

    async def ensure_connection(self) -> None:
        """Connect on demand; concurrent callers share one attempt."""
        if self._conn is not None:
            return
        async with self._lock:
            if self._conn is None:
                await self._initialize()

    async def close(self) -> None:
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        try:
            await conn.close()
        except sqlite3.Error as e:
            logger.error(f"Error closing database: {e}")
            raise DBCloseError(e) from e
        logger.info("Database connection closed")

    def is_connected(self) -> bool:
        return self._conn is not None

    # -- query helpers ---------------------------------------------------------

    async def execute(self, sql: str, params: Params = ()) -> ExecuteResult:
        """Run an INSERT/UPDATE/DELETE and commit it."""
        await self.ensure_connection()
        conn = self._conn
        try:
            cursor = await conn.execute(sql, _bind(params))
            await conn.commit()
        except sqlite3.Error as e:
            await conn.rollback()
            logger.error(f"Error running sql {sql!r}: {e}")
            raise DBQueryError(sql, _params_tuple(params), e) from e
        result = ExecuteResult(last_row_id=cursor.lastrowid, row_count=cursor.rowcount)
        await cursor.close()
        return result

    async def fetch_one(self, sql: str, params: Params = ()) -> Optional[dict[str, Any]]:
        await self.ensure_connection()
        try:
            async with self._conn.execute(sql, _bind(params)) as cursor:
                row = await cursor.fetchone()
        except sqlite3.Error as e:
            logger.error(f"Error running sql {sql!r}: {e}")
            raise DBQueryError(sql, _params_tuple(params), e) from e
        return dict(row) if row is not None else None

    async def fetch_all(self, sql: str, params: Params = ()) -> list[dict[str, Any]]:
        await self.ensure_connection()
        try:
            async with self._conn.execute(sql, _bind(params)) as cursor:
                rows = await cursor.fetchall()
        except sqlite3.Error as e:
            logger.error(f"Error running sql {sql!r}: {e}")
            raise DBQueryError(sql, _params_tuple(params), e) from e
        return [dict(r) for r in rows]
