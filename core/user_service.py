"""
CRUD over the user store.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from core.exceptions import NotFound
from database.store import UserStore
from utils.schemas import UserPublic

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, store: UserStore) -> None:
        self._store = store

    def list(self) -> List[UserPublic]:
        return [record.to_public() for record in self._store.list()]

    def get(self, user_id: int) -> UserPublic:
        record = self._store.get(user_id)
        if record is None:
            raise NotFound("User not found")
        return record.to_public()

    def create(self, name: str, email: str) -> UserPublic:
        record = self._store.add(name=name, email=email)
        logger.info("Created user %d (%s)", record.id, record.email)
        return record.to_public()

    def update(self, user_id: int, fields: Dict[str, Any]) -> UserPublic:
        """Apply a partial update; fields not present are left as they are."""
        record = self._store.update(user_id, fields)
        if record is None:
            raise NotFound("User not found")
        logger.info("Updated user %d: %s", user_id, sorted(fields))
        return record.to_public()

    def delete(self, user_id: int) -> None:
        """Remove the user.  Deleting an unknown id is not an error."""
        if self._store.delete(user_id):
            logger.info("Deleted user %d", user_id)
        else:
            logger.debug("Delete of unknown user %d ignored", user_id)
