"""
Store setup helpers.
"""

from __future__ import annotations

import logging

from auth.password import hash_password
from config.settings import config
from database.models import UserRecord
from database.store import InMemoryUserStore, UserStore

logger = logging.getLogger(__name__)


def seed_admin(store: UserStore) -> UserRecord:
    """Insert the fixed admin account, unless its email is already present."""
    existing = store.find_by_email(config.admin_email)
    if existing is not None:
        return existing
    record = store.add(
        name=config.admin_name,
        email=config.admin_email,
        password_hash=hash_password(config.admin_password),
    )
    logger.info("Seeded admin account %s (id=%d)", record.email, record.id)
    return record


def build_store() -> UserStore:
    """Fresh in-memory store with the admin account in place."""
    store = InMemoryUserStore()
    seed_admin(store)
    return store
