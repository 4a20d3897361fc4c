"""API endpoints for recurring generation schedules."""

import logging

from fastapi import APIRouter, HTTPException, Query, status

from src.api.dependencies import StorageDep, not_found
from src.storage.models import Schedule, ScheduleCreate, ScheduleUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schedules", tags=["Schedules"])


@router.get("", response_model=list[Schedule], summary="List schedules")
def list_schedules(
    storage: StorageDep,
    enabled: bool = Query(default=False, description="Only return enabled schedules"),
) -> list[Schedule]:
    """List schedules, optionally only the enabled ones."""
    if enabled:
        return storage.get_enabled_schedules()
    return storage.get_schedules()


@router.get("/{schedule_id}", response_model=Schedule, summary="Get schedule")
def get_schedule(schedule_id: int, storage: StorageDep) -> Schedule:
    """Get a schedule by ID."""
    schedule = storage.get_schedule(schedule_id)
    if schedule is None:
        raise not_found("Schedule", schedule_id)
    return schedule


@router.post(
    "",
    response_model=Schedule,
    status_code=status.HTTP_201_CREATED,
    summary="Create schedule",
)
def create_schedule(request: ScheduleCreate, storage: StorageDep) -> Schedule:
    """Create a schedule. The next run is computed from its frequency and time."""
    try:
        schedule = storage.create_schedule(request)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    logger.info(f"Schedule created: id={schedule.id}, next_run={schedule.next_run.isoformat()}")
    return schedule


@router.patch("/{schedule_id}", response_model=Schedule, summary="Update schedule")
def update_schedule(
    schedule_id: int,
    request: ScheduleUpdate,
    storage: StorageDep,
) -> Schedule:
    """Update a schedule. Changing frequency or time recomputes the next run."""
    try:
        schedule = storage.update_schedule(schedule_id, request)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    if schedule is None:
        raise not_found("Schedule", schedule_id)
    return schedule


@router.delete(
    "/{schedule_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete schedule",
)
def delete_schedule(schedule_id: int, storage: StorageDep) -> None:
    """Delete a schedule."""
    if not storage.delete_schedule(schedule_id):
        raise not_found("Schedule", schedule_id)
