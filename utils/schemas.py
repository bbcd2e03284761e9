"""
Pydantic request / response schemas for the HTTP API.

Request fields are optional at the schema level; presence is checked by the
services so that missing fields surface as 400 rather than 422.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class UserPublic(BaseModel):
    id: int
    name: str
    email: str


# ── Auth ──────────────────────────────────────────────────────────────


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class AuthResponse(BaseModel):
    token: str
    user: UserPublic


# ── Users CRUD ────────────────────────────────────────────────────────


class UserCreateRequest(BaseModel):
    name: str = Field(..., examples=["Maria"])
    email: str = Field(..., examples=["maria@x.com"])


class UserUpdateRequest(BaseModel):
    """Partial update — only the fields sent are applied."""

    name: Optional[str] = None
    email: Optional[str] = None


class ErrorResponse(BaseModel):
    detail: str
