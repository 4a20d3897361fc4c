"""Base database utilities and repository patterns."""

from src.database.base.repository import (
    delete_all,
    delete_by_id,
    get_by_id,
    record_exists_by_field,
    update_fields,
)

__all__ = [
    "delete_all",
    "delete_by_id",
    "get_by_id",
    "record_exists_by_field",
    "update_fields",
]
