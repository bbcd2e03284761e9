"""
FastAPI dependencies (shared across routes).
"""

from __future__ import annotations

from fastapi import Depends, Request

from auth.service import AuthService
from core.user_service import UserService
from database.store import UserStore


def get_store(request: Request) -> UserStore:
    """The store owned by the running app (see ``main.create_app``)."""
    return request.app.state.store


def get_user_service(store: UserStore = Depends(get_store)) -> UserService:
    return UserService(store)


def get_auth_service(store: UserStore = Depends(get_store)) -> AuthService:
    return AuthService(store)
