"""
Startup seeding of placeholder users.

Runs once from the application lifespan. Gated on an empty users table: once
any user exists (seeded or not), nothing is inserted.
"""

import logging

from sqlalchemy.orm import Session

from . import repository
from .models import User

logger = logging.getLogger(__name__)

DEFAULT_USERS = (
    (1, "default1", "User1"),
    (2, "default2", "User2"),
    (3, "default3", "User3"),
)


def seed_default_users(db: Session) -> bool:
    """Insert the default users if the store is empty. Returns True if it did."""
    existing = repository.count_users(db)
    if existing:
        logger.info("seed_skipped existing_users=%s", existing)
        return False

    for user_id, username, display_name in DEFAULT_USERS:
        repository.add_user(db, User(id=user_id, username=username, display_name=display_name))
    db.commit()
    logger.info("seed_completed inserted_users=%s", len(DEFAULT_USERS))
    return True
