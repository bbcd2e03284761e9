"""
Login and registration against a ``UserStore``.
"""

from __future__ import annotations

import logging
from typing import Optional

from auth.jwt import create_token
from auth.password import hash_password, verify_password
from core.exceptions import BadRequest, DuplicateEmail, InvalidCredentials
from database.store import UserStore
from utils.schemas import AuthResponse

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, store: UserStore) -> None:
        self._store = store

    def login(self, email: Optional[str], password: Optional[str]) -> AuthResponse:
        """Check credentials and issue a token for the matching account."""
        if not email or not password:
            raise BadRequest("Email and password are required")

        user = self._store.find_by_email(email)
        if user is None or not user.can_login or not verify_password(password, user.password_hash):
            logger.info("Failed login for %s", email)
            raise InvalidCredentials()

        logger.info("Login: %s (%d)", user.name, user.id)
        return AuthResponse(token=create_token(user.id), user=user.to_public())

    def register(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> AuthResponse:
        """Create a login-capable account and issue its first token."""
        if not name or not email or not password:
            raise BadRequest("Name, email and password are required")
        # Not atomic with the insert below; concurrent registrations can race.
        if self._store.find_by_email(email) is not None:
            raise DuplicateEmail()

        user = self._store.add(name=name, email=email, password_hash=hash_password(password))
        logger.info("Registered user %s (%d)", user.name, user.id)
        return AuthResponse(token=create_token(user.id), user=user.to_public())
