#!/usr/bin/env python3
"""Manual smoke test of the database setup.

Run with: python scripts/smoke_test.py
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from dotenv import load_dotenv

from userstore.config import get_settings
from userstore.db import ConnectionManager
from userstore.passwords import hash_password, verify_password

TEST_EMAIL = "test@example.com"
TEST_USERNAME = "testuser"
TEST_PASSWORD = "test123"


async def run_smoke_test(db: ConnectionManager) -> None:
    print("Testing database setup...\n")

    print("1. Initializing database...")
    await db.initialize()

    print("\n2. Testing connection...")
    print(f"   Connection status: {'Connected' if db.is_connected() else 'Disconnected'}")

    print("\n3. Verifying table structure...")
    table_info = await db.fetch_all(
        "SELECT name, sql FROM sqlite_master WHERE type = 'table' AND name = 'users'"
    )
    if not table_info:
        raise RuntimeError("Users table not found")
    print("   Users table exists")
    print(f"   Table schema: {table_info[0]['sql']}")

    print("\n4. Checking indexes...")
    indexes = await db.fetch_all(
        "SELECT name FROM sqlite_master WHERE type = 'index' AND tbl_name = 'users'"
    )
    print(f"   Found {len(indexes)} indexes: {[idx['name'] for idx in indexes]}")

    print("\n5. Testing user insertion...")
    result = await db.execute(
        "INSERT INTO users (email, username, password_hash) VALUES (?, ?, ?)",
        (TEST_EMAIL, TEST_USERNAME, hash_password(TEST_PASSWORD)),
    )
    print(f"   User inserted with ID: {result.last_row_id}")

    print("\n6. Testing user retrieval...")
    user = await db.fetch_one(
        "SELECT id, email, username, created_at, is_active FROM users WHERE email = ?",
        (TEST_EMAIL,),
    )
    if user is None:
        raise RuntimeError("Failed to retrieve inserted user")
    print("   User retrieved successfully:")
    print(f"   User data: {dict(user, is_active=bool(user['is_active']))}")

    print("\n7. Testing password verification...")
    row = await db.fetch_one("SELECT password_hash FROM users WHERE email = ?", (TEST_EMAIL,))
    matched = verify_password(TEST_PASSWORD, row["password_hash"])
    print(f"   Password verification: {'Success' if matched else 'Failed'}")

    print("\n8. Cleaning up test data...")
    await db.execute("DELETE FROM users WHERE email = ?", (TEST_EMAIL,))
    print("   Test user removed")

    print("\n9. Final verification...")
    count = await db.fetch_one("SELECT COUNT(*) AS count FROM users")
    print(f"   Total users in database: {count['count']}")

    print("\nAll database checks passed.\n")


async def main() -> int:
    load_dotenv()
    logging.basicConfig(
        level=get_settings().LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    db = ConnectionManager()
    try:
        await run_smoke_test(db)
    except Exception as e:
        print(f"\nDatabase test failed: {e}", file=sys.stderr)
        logging.getLogger(__name__).exception("Smoke test failed")
        return 1
    finally:
        await db.close()
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
