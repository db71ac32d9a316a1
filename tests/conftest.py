"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
import pytest_asyncio

sys.path.insert(0, str(Path(__file__).parent.parent))

from userstore.config import get_settings
from userstore.db import ConnectionManager


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Database file inside a directory that does not exist yet."""
    return tmp_path / "database" / "test.sqlite"


@pytest_asyncio.fixture
async def manager(db_path: Path):
    db = ConnectionManager(db_path)
    yield db
    await db.close()


@pytest.fixture
def env_db_path(monkeypatch, tmp_path: Path) -> Path:
    """Point DB_PATH at a temp file and reset the cached settings."""
    path = tmp_path / "env" / "configured.sqlite"
    monkeypatch.setenv("DB_PATH", str(path))
    get_settings.cache_clear()
    yield path
    get_settings.cache_clear()
