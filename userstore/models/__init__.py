"""Domain models for userstore."""

from userstore.models.user import User

__all__ = ["User"]
