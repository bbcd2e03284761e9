"""
FastAPI dependencies for authentication.

``get_current_user_id`` guards every protected route: it reads the Bearer
token, verifies it into an ``AuthResult`` and either attaches the identity
to ``request.state.user_id`` or ends the request with 401.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from auth.jwt import AuthResult, verify_token
from core.exceptions import Unauthorized

logger = logging.getLogger(__name__)

_bearer_scheme = HTTPBearer(auto_error=False, description="JWT from /api/auth/login or /register")


def authenticate(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
) -> AuthResult:
    if credentials is None:
        return AuthResult.rejected("Missing Bearer token")
    return verify_token(credentials.credentials)


async def get_current_user_id(
    request: Request,
    result: AuthResult = Depends(authenticate),
) -> int:
    """Return the authenticated user id, or raise ``Unauthorized``."""
    if not result.authenticated:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, result.reason)
        raise Unauthorized(result.reason or "Unauthorized")
    request.state.user_id = result.user_id
    return result.user_id
