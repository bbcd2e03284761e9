"""
JWT creation and verification.

Tokens are HS256-signed JWTs (python-jose) carrying a ``user_id`` claim and
an ``exp`` claim.  Nothing is stored server-side: a token is valid as long
as its signature checks out and it has not expired.

Secret key is loaded from ``config.jwt_secret`` (env var: ``JWT_SECRET``).
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt

from config.settings import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    """Outcome of checking a bearer token."""

    user_id: Optional[int] = None
    reason: Optional[str] = None

    @property
    def authenticated(self) -> bool:
        return self.user_id is not None

    @classmethod
    def ok(cls, user_id: int) -> "AuthResult":
        return cls(user_id=user_id)

    @classmethod
    def rejected(cls, reason: str) -> "AuthResult":
        return cls(reason=reason)


def create_token(user_id: int, expires_in: Optional[int] = None) -> str:
    """Create a signed token containing ``user_id`` and expiry."""
    lifetime = config.jwt_expiry_seconds if expires_in is None else expires_in
    payload = {
        "user_id": user_id,
        "exp": int(time.time()) + lifetime,
    }
    return jwt.encode(payload, config.jwt_secret, algorithm=config.jwt_algorithm)


def verify_token(token: Optional[str]) -> AuthResult:
    """
    Verify ``token`` and return an ``AuthResult``.

    Never raises: a missing, expired, malformed or wrongly signed token
    yields a rejected result carrying the reason.
    """
    if not token:
        return AuthResult.rejected("Missing token")
    try:
        payload = jwt.decode(token, config.jwt_secret, algorithms=[config.jwt_algorithm])
    except ExpiredSignatureError:
        return AuthResult.rejected("Token expired")
    except JWTError as exc:
        logger.debug("Token rejected: %s", exc)
        return AuthResult.rejected("Invalid token")

    user_id = payload.get("user_id")
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        return AuthResult.rejected("Invalid token")
    return AuthResult.ok(user_id)
