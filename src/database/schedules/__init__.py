"""Schedule database models and operations."""

from src.database.schedules.models import Schedule
from src.database.schedules.operations import (
    create_schedule,
    delete_schedule,
    get_schedule_by_id,
    list_schedules,
    update_schedule,
)

__all__ = [
    "Schedule",
    "create_schedule",
    "delete_schedule",
    "get_schedule_by_id",
    "list_schedules",
    "update_schedule",
]
