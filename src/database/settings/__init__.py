"""Settings database model and operations."""

from src.database.settings.models import SETTINGS_ID, AppSettings
from src.database.settings.operations import get_app_settings, save_app_settings

__all__ = [
    "SETTINGS_ID",
    "AppSettings",
    "get_app_settings",
    "save_app_settings",
]
