"""Database operations for feed sources."""

import logging
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.orm import Session

from src.database.base import delete_by_id, get_by_id, update_fields
from src.database.feeds.models import FeedSource

logger = logging.getLogger(__name__)


def list_feed_sources(session: Session, *, enabled_only: bool = False) -> list[FeedSource]:
    """Get feed sources ordered by name.

    :param session: Database session.
    :param enabled_only: Only return enabled sources.
    :returns: List of feed sources.
    """
    query = session.query(FeedSource)
    if enabled_only:
        query = query.filter(FeedSource.enabled.is_(True))
    return query.order_by(FeedSource.name.asc()).all()


def get_feed_source_by_id(session: Session, feed_source_id: int) -> FeedSource | None:
    """Get a feed source by ID.

    :param session: Database session.
    :param feed_source_id: Feed source ID.
    :returns: The feed source or None if not found.
    """
    return get_by_id(session, FeedSource, feed_source_id)


def create_feed_source(
    session: Session,
    name: str,
    url: str,
    enabled: bool = True,
    refresh_interval: int = 60,
    tags: list[str] | None = None,
) -> FeedSource:
    """Create a feed source with zeroed fetch statistics.

    :param session: Database session.
    :param name: Display name.
    :param url: Feed URL.
    :param enabled: Whether the source is polled.
    :param refresh_interval: Polling interval in minutes.
    :param tags: Optional tags.
    :returns: The created feed source.
    """
    feed_source = FeedSource(
        name=name,
        url=url,
        enabled=enabled,
        refresh_interval=refresh_interval,
        tags=list(tags or []),
        article_count=0,
        error_count=0,
    )
    session.add(feed_source)
    session.flush()
    logger.info(f"Created feed source: id={feed_source.id}, url={url}")
    return feed_source


def update_feed_source(
    session: Session,
    feed_source_id: int,
    changes: dict[str, Any],
) -> FeedSource | None:
    """Update a feed source and refresh its updated_at.

    :param session: Database session.
    :param feed_source_id: Feed source ID.
    :param changes: Fields to change.
    :returns: The updated feed source or None if not found.
    """
    return update_fields(
        session, FeedSource, feed_source_id, {**changes, "updated_at": datetime.now(UTC)}
    )


def delete_feed_source(session: Session, feed_source_id: int) -> bool:
    """Delete a feed source.

    :param session: Database session.
    :param feed_source_id: Feed source ID.
    :returns: True if the feed source existed.
    """
    deleted = delete_by_id(session, FeedSource, feed_source_id)
    if deleted:
        logger.info(f"Deleted feed source: id={feed_source_id}")
    return deleted
