"""User database models and operations."""

from src.database.users.models import User
from src.database.users.operations import create_user, get_user_by_id, get_user_by_username

__all__ = [
    "User",
    "create_user",
    "get_user_by_id",
    "get_user_by_username",
]
