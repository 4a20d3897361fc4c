"""Database operations for recurring newsletter schedules."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from src.database.base import delete_by_id, get_by_id
from src.database.schedules.models import Schedule
from src.storage.scheduling import calculate_next_run

logger = logging.getLogger(__name__)


def list_schedules(session: Session, *, enabled_only: bool = False) -> list[Schedule]:
    """Get schedules ordered by name.

    :param session: Database session.
    :param enabled_only: Only return enabled schedules.
    :returns: List of schedules.
    """
    query = session.query(Schedule)
    if enabled_only:
        query = query.filter(Schedule.enabled.is_(True))
    return query.order_by(Schedule.name.asc()).all()


def get_schedule_by_id(session: Session, schedule_id: int) -> Schedule | None:
    """Get a schedule by ID.

    :param session: Database session.
    :param schedule_id: Schedule ID.
    :returns: The schedule or None if not found.
    """
    return get_by_id(session, Schedule, schedule_id)


def create_schedule(
    session: Session,
    name: str,
    frequency: str,
    time: str,
    news_source_url: str,
    max_articles: int | None = 5,
    auto_approve: bool = False,
    enabled: bool = True,
) -> Schedule:
    """Create a schedule and compute its first run.

    :param session: Database session.
    :param name: Schedule name.
    :param frequency: Cadence ("daily" or "weekly").
    :param time: Time of day as HH:MM.
    :param news_source_url: Feed URL to pull articles from.
    :param max_articles: Article cap per run.
    :param auto_approve: Publish without approval.
    :param enabled: Whether the schedule is active.
    :returns: The created schedule.
    :raises ValueError: If time is malformed.
    """
    schedule = Schedule(
        name=name,
        frequency=frequency,
        time=time,
        news_source_url=news_source_url,
        max_articles=max_articles,
        auto_approve=auto_approve,
        enabled=enabled,
        next_run=calculate_next_run(frequency, time),
    )
    session.add(schedule)
    session.flush()
    logger.info(f"Created schedule: id={schedule.id}, name={name!r}, next_run={schedule.next_run}")
    return schedule


def update_schedule(
    session: Session,
    schedule_id: int,
    changes: dict[str, Any],
) -> Schedule | None:
    """Update a schedule, recomputing next_run if frequency or time changed.

    :param session: Database session.
    :param schedule_id: Schedule ID.
    :param changes: Fields to change.
    :returns: The updated schedule or None if not found.
    :raises ValueError: If the resulting time is malformed.
    """
    schedule = get_schedule_by_id(session, schedule_id)
    if schedule is None:
        return None

    for name, value in changes.items():
        setattr(schedule, name, value)

    if "frequency" in changes or "time" in changes:
        schedule.next_run = calculate_next_run(schedule.frequency, schedule.time)

    session.flush()
    logger.info(f"Updated schedule: id={schedule_id}, next_run={schedule.next_run}")
    return schedule


def delete_schedule(session: Session, schedule_id: int) -> bool:
    """Delete a schedule.

    :param session: Database session.
    :param schedule_id: Schedule ID.
    :returns: True if the schedule existed.
    """
    deleted = delete_by_id(session, Schedule, schedule_id)
    if deleted:
        logger.info(f"Deleted schedule: id={schedule_id}")
    return deleted
