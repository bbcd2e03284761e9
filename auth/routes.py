"""
Auth API routes — register, login.

Route prefix: /api/auth
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from api.dependencies import get_auth_service
from auth.service import AuthService
from utils.schemas import AuthResponse, ErrorResponse, LoginRequest, RegisterRequest


router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Log in with email and password",
    responses={
        400: {"model": ErrorResponse, "description": "Email or password missing"},
        401: {"model": ErrorResponse, "description": "Invalid email or password"},
    },
)
async def login(
    req: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Return a signed token and the public profile of the account."""
    return service.login(req.email, req.password)


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
    responses={
        400: {"model": ErrorResponse, "description": "Missing field or email already registered"},
    },
)
async def register(
    req: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Register a new user and log them in."""
    return service.register(req.name, req.email, req.password)
