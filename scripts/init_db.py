#!/usr/bin/env python3
"""Initialize the database and optionally seed users from a YAML file."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from dotenv import load_dotenv

from userstore.db import ConnectionManager, DBQueryError, UserRepository
from userstore.passwords import hash_password

logger = logging.getLogger(__name__)


async def run(db_path: Path | None, seed_users: Path | None) -> None:
    async with ConnectionManager(db_path) as db:
        print(f"Database initialized at: {db.path}")
        if seed_users:
            await _seed_users(db, seed_users)
    print("Done.")


async def _seed_users(db: ConnectionManager, path: Path) -> int:
    import yaml
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    repo = UserRepository(db)
    created = 0
    for u in data.get("users", []):
        if not isinstance(u, dict):
            logger.warning(f"Skipping malformed user entry: {u!r}")
            continue
        try:
            user = await repo.create(
                username=u["username"],
                email=u["email"],
                password_hash=hash_password(str(u["password"])),
            )
        except (KeyError, DBQueryError) as e:
            logger.warning(f"Skipping {u.get('username', '?')}: {e}")
            continue
        created += 1
        print(f"  Created user: {user.username} ({user.email})")
    return created


def main():
    parser = argparse.ArgumentParser(description="Initialize the database")
    parser.add_argument("--seed-users", type=str, help="YAML file with user definitions")
    parser.add_argument("--db-path", type=str, help="Override database path")
    args = parser.parse_args()

    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run(
        Path(args.db_path) if args.db_path else None,
        Path(args.seed_users) if args.seed_users else None,
    ))


if __name__ == "__main__":
    main()
