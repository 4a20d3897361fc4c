"""API endpoints for backups, export and purge."""

import logging

from fastapi import APIRouter, status

from src.api.data.models import BackupRequest
from src.api.dependencies import StorageDep, not_found
from src.storage.models import DataBackup, DataBackupCreate, DataExport

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/data", tags=["Data"])


@router.get("/backups", response_model=list[DataBackup], summary="List backups")
def list_backups(storage: StorageDep) -> list[DataBackup]:
    """List stored backups, newest first."""
    return storage.get_data_backups()


@router.post(
    "/backups",
    response_model=DataBackup,
    status_code=status.HTTP_201_CREATED,
    summary="Create backup",
)
def create_backup(request: BackupRequest, storage: StorageDep) -> DataBackup:
    """Store a backup of the supplied payload, or of a fresh export."""
    data = request.data
    if data is None:
        data = storage.export_all_data().model_dump(mode="json", by_alias=True)

    backup = storage.create_data_backup(
        DataBackupCreate(name=request.name, backup_type=request.backup_type, data=data)
    )
    logger.info(f"Backup created: id={backup.id}, name={backup.name}")
    return backup


@router.delete(
    "/backups/{backup_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete backup",
)
def delete_backup(backup_id: int, storage: StorageDep) -> None:
    """Delete a stored backup."""
    if not storage.delete_data_backup(backup_id):
        raise not_found("Backup", backup_id)


@router.post("/purge", status_code=status.HTTP_204_NO_CONTENT, summary="Purge data")
def purge_data(storage: StorageDep) -> None:
    """Delete all content. Users and settings are kept."""
    logger.warning("Purging all stored data via API")
    storage.purge_all_data()


@router.get("/export", response_model=DataExport, summary="Export data")
def export_data(storage: StorageDep) -> DataExport:
    """Export a snapshot of every entity type."""
    return storage.export_all_data()
