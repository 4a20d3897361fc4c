"""Activity log database models and operations."""

from src.database.activity.models import ActivityLog
from src.database.activity.operations import (
    clear_activity_logs,
    create_activity_log,
    list_activity_logs,
)

__all__ = [
    "ActivityLog",
    "clear_activity_logs",
    "create_activity_log",
    "list_activity_logs",
]
