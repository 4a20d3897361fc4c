"""API endpoints for application settings."""

import logging

from fastapi import APIRouter, status

from src.api.dependencies import StorageDep
from src.storage.models import Settings, SettingsUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("", response_model=Settings, summary="Get settings")
def get_settings(storage: StorageDep) -> Settings:
    """Get the current settings, or the defaults if none were saved yet."""
    return storage.get_settings() or Settings()


@router.put(
    "",
    response_model=Settings,
    status_code=status.HTTP_200_OK,
    summary="Update settings",
)
def update_settings(request: SettingsUpdate, storage: StorageDep) -> Settings:
    """Save settings. Fields not supplied keep their current value."""
    settings = storage.update_settings(request)
    logger.info(f"Settings saved: fields={sorted(request.model_fields_set)}")
    return settings
