"""Next-run calculation for recurring schedules."""

import logging
from datetime import UTC, datetime, timedelta
from enum import StrEnum

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7


class ScheduleFrequency(StrEnum):
    """Cadences understood by the next-run calculator."""

    DAILY = "daily"
    WEEKLY = "weekly"


def parse_time_of_day(value: str) -> tuple[int, int]:
    """Parse an ``HH:MM`` string.

    :param value: Time of day in 24-hour format.
    :returns: Tuple of (hour, minute).
    :raises ValueError: If the value is not a valid time of day.
    """
    try:
        hour_text, minute_text = value.strip().split(":")
        hour, minute = int(hour_text), int(minute_text)
    except (AttributeError, ValueError) as e:
        raise ValueError(f"Invalid time of day: {value!r} (expected HH:MM)") from e

    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise ValueError(f"Invalid time of day: {value!r} (expected HH:MM)")
    return hour, minute


def calculate_next_run(frequency: str, time: str, now: datetime | None = None) -> datetime:
    """Compute the next instant a recurring schedule should fire.

    Daily schedules fire at the next occurrence of ``time``. Weekly schedules
    fire at ``time`` on the coming Sunday (a full week ahead when today is
    Sunday). Unknown frequencies are treated as daily.

    :param frequency: Schedule cadence, "daily" or "weekly".
    :param time: Time of day as ``HH:MM``.
    :param now: Current instant (defaults to now, UTC). The result uses its tzinfo.
    :returns: The next run time, always strictly after ``now``.
    :raises ValueError: If ``time`` is malformed.
    """
    if now is None:
        now = datetime.now(UTC)

    hour, minute = parse_time_of_day(time)
    next_run = now.replace(hour=hour, minute=minute, second=0, microsecond=0)

    if frequency == ScheduleFrequency.WEEKLY:
        # Sunday is day 0 of the week
        day_of_week = (next_run.weekday() + 1) % DAYS_PER_WEEK
        next_run += timedelta(days=DAYS_PER_WEEK - day_of_week)
        if next_run <= now:
            next_run += timedelta(days=DAYS_PER_WEEK)
        return next_run

    if frequency != ScheduleFrequency.DAILY:
        logger.warning(f"Unknown schedule frequency {frequency!r}, treating as daily")

    if next_run <= now:
        next_run += timedelta(days=1)
    return next_run
