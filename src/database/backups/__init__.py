"""Backup database models and bulk data operations."""

from src.database.backups.models import DataBackup
from src.database.backups.operations import (
    PURGED_MODELS,
    create_data_backup,
    delete_data_backup,
    list_data_backups,
    purge_all_data,
)

__all__ = [
    "PURGED_MODELS",
    "DataBackup",
    "create_data_backup",
    "delete_data_backup",
    "list_data_backups",
    "purge_all_data",
]
