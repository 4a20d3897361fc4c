"""Database operations for the activity log."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from src.database.activity.models import ActivityLog
from src.database.base import delete_all

logger = logging.getLogger(__name__)


def list_activity_logs(session: Session) -> list[ActivityLog]:
    """Get all activity log entries, newest first.

    Entries without a timestamp sort last, as if written at the epoch.

    :param session: Database session.
    :returns: List of log entries.
    """
    return (
        session.query(ActivityLog)
        .order_by(ActivityLog.timestamp.is_(None).asc(), ActivityLog.timestamp.desc())
        .all()
    )


def create_activity_log(
    session: Session,
    message: str,
    log_type: str,
    details: Any | None = None,
) -> ActivityLog:
    """Append an entry to the activity log.

    :param session: Database session.
    :param message: Human-readable message.
    :param log_type: Category tag.
    :param details: Optional JSON payload.
    :returns: The created entry.
    """
    log = ActivityLog(message=message, type=log_type, details=details)
    session.add(log)
    session.flush()
    return log


def clear_activity_logs(session: Session) -> int:
    """Delete every activity log entry.

    :param session: Database session.
    :returns: Number of entries deleted.
    """
    count = delete_all(session, ActivityLog)
    logger.info(f"Cleared {count} activity logs")
    return count
