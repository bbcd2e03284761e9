"""
Password hashing for login-capable user records.

Only the bcrypt hash is ever stored on a ``UserRecord``; the cost factor
comes from ``config.bcrypt_rounds`` (env var: ``BCRYPT_ROUNDS``).
"""

from __future__ import annotations

import bcrypt

from config.settings import config


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=config.bcrypt_rounds)
    return bcrypt.hashpw(password.encode(), salt).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """True if ``password`` matches ``password_hash``; False for any malformed hash."""
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except (ValueError, TypeError):
        return False
