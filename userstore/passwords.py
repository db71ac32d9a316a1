"""Password hashing helpers (PBKDF2-SHA256, salted)."""

from __future__ import annotations

import hashlib
import hmac
import secrets

_ALGORITHM = "pbkdf2_sha256"
_ITERATIONS = 200_000


def _derive(password: str, salt_hex: str, iterations: int) -> str:
    salt = bytes.fromhex(salt_hex)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return dk.hex()


def hash_password(password: str, iterations: int = _ITERATIONS) -> str:
    """Return ``algorithm$iterations$salt$hash`` suitable for ``password_hash``."""
    salt_hex = secrets.token_hex(16)
    return f"{_ALGORITHM}${iterations}${salt_hex}${_derive(password, salt_hex, iterations)}"


def verify_password(password: str, encoded: str) -> bool:
    try:
        algorithm, iterations, salt_hex, expected = encoded.split("$")
        if algorithm != _ALGORITHM:
            return False
        actual = _derive(password, salt_hex, int(iterations))
    except ValueError:
        return False
    return hmac.compare_digest(actual, expected)
