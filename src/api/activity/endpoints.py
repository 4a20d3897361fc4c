"""API endpoints for the activity log."""

from fastapi import APIRouter, status

from src.api.dependencies import StorageDep
from src.storage.models import ActivityLog, ActivityLogCreate

router = APIRouter(prefix="/activity", tags=["Activity"])


@router.get("", response_model=list[ActivityLog], summary="List activity")
def list_activity_logs(storage: StorageDep) -> list[ActivityLog]:
    """List activity log entries, newest first."""
    return storage.get_activity_logs()


@router.post(
    "",
    response_model=ActivityLog,
    status_code=status.HTTP_201_CREATED,
    summary="Record activity",
)
def create_activity_log(request: ActivityLogCreate, storage: StorageDep) -> ActivityLog:
    """Append an entry to the activity log."""
    return storage.create_activity_log(request)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT, summary="Clear activity")
def clear_activity_logs(storage: StorageDep) -> None:
    """Delete every activity log entry."""
    storage.clear_activity_logs()
