"""Database operations for backups and bulk data management."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from src.database.activity.models import ActivityLog
from src.database.articles.models import Article
from src.database.backups.models import DataBackup
from src.database.base import delete_all, delete_by_id
from src.database.feeds.models import FeedSource
from src.database.newsletters.models import Newsletter, SocialMediaPost
from src.database.schedules.models import Schedule

logger = logging.getLogger(__name__)

# Users and settings are never purged. Posts go before the newsletters they reference.
PURGED_MODELS: tuple[type, ...] = (
    Article,
    SocialMediaPost,
    Newsletter,
    ActivityLog,
    Schedule,
    FeedSource,
    DataBackup,
)


def list_data_backups(session: Session) -> list[DataBackup]:
    """Get all backups, newest first.

    :param session: Database session.
    :returns: List of backups.
    """
    return session.query(DataBackup).order_by(DataBackup.created_at.desc()).all()


def create_data_backup(
    session: Session,
    name: str,
    backup_type: str = "manual",
    data: Any | None = None,
) -> DataBackup:
    """Store a backup payload.

    :param session: Database session.
    :param name: Backup name.
    :param backup_type: Backup category (manual, scheduled, ...).
    :param data: JSON payload.
    :returns: The created backup.
    """
    backup = DataBackup(name=name, backup_type=backup_type, data=data, download_url=None)
    session.add(backup)
    session.flush()
    logger.info(f"Created data backup: id={backup.id}, name={name!r}")
    return backup


def delete_data_backup(session: Session, backup_id: int) -> bool:
    """Delete a backup.

    :param session: Database session.
    :param backup_id: Backup ID.
    :returns: True if the backup existed.
    """
    return delete_by_id(session, DataBackup, backup_id)


def purge_all_data(session: Session) -> dict[str, int]:
    """Delete every row except users and settings.

    :param session: Database session.
    :returns: Mapping of table name to rows deleted.
    """
    counts = {model.__tablename__: delete_all(session, model) for model in PURGED_MODELS}
    logger.warning(f"Purged all data: {counts}")
    return counts
