"""API endpoints for feed sources."""

from fastapi import APIRouter, Query, status

from src.api.dependencies import StorageDep, not_found
from src.storage.models import FeedSource, FeedSourceCreate, FeedSourceUpdate

router = APIRouter(prefix="/feed-sources", tags=["Feed Sources"])


@router.get("", response_model=list[FeedSource], summary="List feed sources")
def list_feed_sources(
    storage: StorageDep,
    enabled: bool = Query(default=False, description="Only return enabled feed sources"),
) -> list[FeedSource]:
    """List feed sources, optionally only the enabled ones."""
    if enabled:
        return storage.get_enabled_feed_sources()
    return storage.get_feed_sources()


@router.get("/{feed_source_id}", response_model=FeedSource, summary="Get feed source")
def get_feed_source(feed_source_id: int, storage: StorageDep) -> FeedSource:
    """Get a feed source by ID."""
    feed_source = storage.get_feed_source(feed_source_id)
    if feed_source is None:
        raise not_found("Feed source", feed_source_id)
    return feed_source


@router.post(
    "",
    response_model=FeedSource,
    status_code=status.HTTP_201_CREATED,
    summary="Create feed source",
)
def create_feed_source(request: FeedSourceCreate, storage: StorageDep) -> FeedSource:
    return storage.create_feed_source(request)


@router.patch("/{feed_source_id}", response_model=FeedSource, summary="Update feed source")
def update_feed_source(
    feed_source_id: int,
    request: FeedSourceUpdate,
    storage: StorageDep,
) -> FeedSource:
    feed_source = storage.update_feed_source(feed_source_id, request)
    if feed_source is None:
        raise not_found("Feed source", feed_source_id)
    return feed_source


@router.delete(
    "/{feed_source_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete feed source",
)
def delete_feed_source(feed_source_id: int, storage: StorageDep) -> None:
    if not storage.delete_feed_source(feed_source_id):
        raise not_found("Feed source", feed_source_id)
