"""
User record storage.

Services depend on the ``UserStore`` interface only; ``InMemoryUserStore``
is the process-lifetime implementation used by the app.  Swapping in a
persistent backend means providing another ``UserStore``.
"""

from __future__ import annotations

import itertools
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from database.models import UserRecord

logger = logging.getLogger(__name__)


class UserStore(ABC):
    """Ordered collection of user records keyed by integer id."""

    @abstractmethod
    def list(self) -> List[UserRecord]:
        ...

    @abstractmethod
    def get(self, user_id: int) -> Optional[UserRecord]:
        ...

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[UserRecord]:
        ...

    @abstractmethod
    def add(self, name: str, email: str, password_hash: Optional[str] = None) -> UserRecord:
        """Append a record under the next id and return it."""

    @abstractmethod
    def update(self, user_id: int, fields: Dict[str, Any]) -> Optional[UserRecord]:
        """Overwrite ``fields`` on the record; ``None`` if it doesn't exist."""

    @abstractmethod
    def delete(self, user_id: int) -> bool:
        """Remove the record; return whether anything was removed."""


class InMemoryUserStore(UserStore):
    """List-backed store.  Ids start at 1 and are never reused."""

    _UPDATABLE = ("name", "email")

    def __init__(self) -> None:
        self._records: List[UserRecord] = []
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._records)

    def list(self) -> List[UserRecord]:
        return list(self._records)

    def get(self, user_id: int) -> Optional[UserRecord]:
        for record in self._records:
            if record.id == user_id:
                return record
        return None

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        for record in self._records:
            if record.email == email:
                return record
        return None

    def add(self, name: str, email: str, password_hash: Optional[str] = None) -> UserRecord:
        record = UserRecord(
            id=next(self._ids),
            name=name,
            email=email,
            password_hash=password_hash,
        )
        self._records.append(record)
        logger.debug("Stored user %d (%s)", record.id, record.email)
        return record

    def update(self, user_id: int, fields: Dict[str, Any]) -> Optional[UserRecord]:
        record = self.get(user_id)
        if record is None:
            return None
        for key, value in fields.items():
            if key in self._UPDATABLE:
                setattr(record, key, value)
        return record

    def delete(self, user_id: int) -> bool:
        before = len(self._records)
        self._records = [r for r in self._records if r.id != user_id]
        return len(self._records) < before
