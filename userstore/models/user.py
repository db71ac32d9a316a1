"""User domain model — typed view of a ``users`` row."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class User:
    """A registered account."""

    username: str
    email: str
    password_hash: str
    id: Optional[int] = None
    created_at: str = ""
    updated_at: str = ""
    is_active: bool = True

    def to_dict(self, include_password: bool = False) -> dict[str, Any]:
        data = {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "is_active": self.is_active,
        }
        if include_password:
            data["password_hash"] = self.password_hash
        return data

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "User":
        # SQLite stores BOOLEAN as 0/1
        return cls(
            id=row["id"],
            username=row["username"],
            email=row["email"],
            password_hash=row.get("password_hash", ""),
            created_at=row.get("created_at") or "",
            updated_at=row.get("updated_at") or "",
            is_active=bool(row.get("is_active", 1)),
        )
