"""Repository for the ``users`` table: typed CRUD over ``ConnectionManager``."""

from __future__ import annotations

from typing import Any, Optional

from userstore.db.database import ConnectionManager
from userstore.models.user import User


class UserRepository:
    """Maps ``users`` rows to :class:`User` records."""

    def __init__(self, db: ConnectionManager):
        self._db = db

    # -- Create ----------------------------------------------------------------

    async def create(self, username: str, email: str, password_hash: str) -> User:
        """Insert a new user. Raises ``DBQueryError`` on duplicate username/email."""
        result = await self._db.execute(
            "INSERT INTO users (username, email, password_hash) VALUES (?, ?, ?)",
            (username, email, password_hash),
        )
        return await self.get_by_id(result.last_row_id)  # type: ignore[return-value]

    # -- Read ------------------------------------------------------------------

    async def get_by_id(self, user_id: int) -> Optional[User]:
        row = await self._db.fetch_one("SELECT * FROM users WHERE id = ?", (user_id,))
        return User.from_row(row) if row else None

    async def get_by_email(self, email: str) -> Optional[User]:
        row = await self._db.fetch_one("SELECT * FROM users WHERE email = ?", (email,))
        return User.from_row(row) if row else None

    async def get_by_username(self, username: str) -> Optional[User]:
        row = await self._db.fetch_one(
            "SELECT * FROM users WHERE username = ?", (username,)
        )
        return User.from_row(row) if row else None

    async def list_all(self, active_only: bool = False) -> list[User]:
        where = " WHERE is_active = 1" if active_only else ""
        rows = await self._db.fetch_all(f"SELECT * FROM users{where} ORDER BY id")
        return [User.from_row(r) for r in rows]

    async def count(self) -> int:
        row = await self._db.fetch_one("SELECT COUNT(*) AS count FROM users")
        return row["count"] if row else 0

    # -- Update ----------------------------------------------------------------

    async def update(self, user_id: int, **fields: Any) -> Optional[User]:
        """
        Update the given columns on a user row.  Unknown keys are ignored;
        ``updated_at`` is set automatically.
        """
        allowed = {"username", "email", "password_hash", "is_active"}
        filtered = {k: v for k, v in fields.items() if k in allowed}
        if not filtered:
            return await self.get_by_id(user_id)

        set_parts = [f"{k} = ?" for k in filtered]
        set_parts.append("updated_at = CURRENT_TIMESTAMP")
        values = [int(v) if k == "is_active" else v for k, v in filtered.items()]
        values.append(user_id)

        await self._db.execute(
            f"UPDATE users SET {', '.join(set_parts)} WHERE id = ?",
            tuple(values),
        )
        return await self.get_by_id(user_id)

    async def deactivate(self, user_id: int) -> Optional[User]:
        return await self.update(user_id, is_active=False)

    async def activate(self, user_id: int) -> Optional[User]:
        return await self.update(user_id, is_active=True)

    # -- Delete ----------------------------------------------------------------

    async def delete(self, user_id: int) -> bool:
        result = await self._db.execute("DELETE FROM users WHERE id = ?", (user_id,))
        return result.row_count > 0
