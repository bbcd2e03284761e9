"""
Stored user record.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from utils.schemas import UserPublic


class UserRecord(BaseModel):
    id: int
    name: str
    email: str
    password_hash: Optional[str] = None  # only set for accounts that can log in

    @property
    def can_login(self) -> bool:
        return bool(self.password_hash)

    def to_public(self) -> UserPublic:
        """Client-facing view with the password hash stripped."""
        return UserPublic(id=self.id, name=self.name, email=self.email)
