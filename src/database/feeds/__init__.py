"""Feed source database models and operations."""

from src.database.feeds.models import FeedSource
from src.database.feeds.operations import (
    create_feed_source,
    delete_feed_source,
    get_feed_source_by_id,
    list_feed_sources,
    update_feed_source,
)

__all__ = [
    "FeedSource",
    "create_feed_source",
    "delete_feed_source",
    "get_feed_source_by_id",
    "list_feed_sources",
    "update_feed_source",
]
