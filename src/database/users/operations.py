"""Database operations for dashboard users."""

import logging

from sqlalchemy.orm import Session

from src.database.base import get_by_id
from src.database.users.models import User

logger = logging.getLogger(__name__)


def get_user_by_id(session: Session, user_id: int) -> User | None:
    """Get a user by ID.

    :param session: Database session.
    :param user_id: User ID.
    :returns: The user or None if not found.
    """
    return get_by_id(session, User, user_id)


def get_user_by_username(session: Session, username: str) -> User | None:
    """Get a user by username.

    :param session: Database session.
    :param username: The username.
    :returns: The user or None if not found.
    """
    return session.query(User).filter(User.username == username).first()


def create_user(session: Session, username: str, password: str) -> User:
    """Create a new user.

    :param session: Database session.
    :param username: Unique username.
    :param password: Stored credential.
    :returns: The created user.
    """
    user = User(username=username, password=password)
    session.add(user)
    session.flush()
    logger.info(f"Created user: id={user.id}, username={username!r}")
    return user
