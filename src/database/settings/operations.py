"""Database operations for the application settings singleton."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from src.database.settings.models import SETTINGS_ID, AppSettings

logger = logging.getLogger(__name__)


def get_app_settings(session: Session) -> AppSettings | None:
    """Get the settings row.

    :param session: Database session.
    :returns: The settings or None if never saved.
    """
    return session.query(AppSettings).order_by(AppSettings.id.asc()).first()


def save_app_settings(session: Session, values: dict[str, Any]) -> AppSettings:
    """Write the settings row, creating it on first use.

    :param session: Database session.
    :param values: Column values to write. ``id`` is ignored.
    :returns: The stored settings.
    """
    values = {name: value for name, value in values.items() if name != "id"}
    settings = get_app_settings(session)
    if settings is None:
        settings = AppSettings(id=SETTINGS_ID, **values)
        session.add(settings)
        logger.info("Created settings")
    else:
        for name, value in values.items():
            setattr(settings, name, value)
        logger.info(f"Updated settings: fields={sorted(values)}")

    session.flush()
    return settings
