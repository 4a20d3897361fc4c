"""API endpoints for social media posts."""

import logging

from fastapi import APIRouter, status

from src.api.dependencies import StorageDep, not_found
from src.storage.base import NewsletterNotFoundError
from src.storage.models import SocialMediaPost, SocialMediaPostCreate, SocialMediaPostUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/social-posts", tags=["Social Posts"])


@router.get("", response_model=list[SocialMediaPost], summary="List social posts")
def list_social_posts(storage: StorageDep) -> list[SocialMediaPost]:
    """List every social media post, latest scheduled first."""
    return storage.get_social_media_posts()


@router.get(
    "/scheduled",
    response_model=list[SocialMediaPost],
    summary="List scheduled social posts",
)
def list_scheduled_social_posts(storage: StorageDep) -> list[SocialMediaPost]:
    """List posts still waiting to be published, soonest first."""
    return storage.get_scheduled_social_media_posts()


@router.get("/{post_id}", response_model=SocialMediaPost, summary="Get social post")
def get_social_post(post_id: int, storage: StorageDep) -> SocialMediaPost:
    """Get a social media post by ID."""
    post = storage.get_social_media_post(post_id)
    if post is None:
        raise not_found("Social media post", post_id)
    return post


@router.post(
    "",
    response_model=SocialMediaPost,
    status_code=status.HTTP_201_CREATED,
    summary="Create social post",
)
def create_social_post(request: SocialMediaPostCreate, storage: StorageDep) -> SocialMediaPost:
    """Create a social media post for an existing newsletter."""
    try:
        post = storage.create_social_media_post(request)
    except NewsletterNotFoundError as e:
        raise not_found("Newsletter", e.newsletter_id) from e
    logger.info(f"Social post created: id={post.id}, platform={post.platform}")
    return post


@router.patch("/{post_id}", response_model=SocialMediaPost, summary="Update social post")
def update_social_post(
    post_id: int,
    request: SocialMediaPostUpdate,
    storage: StorageDep,
) -> SocialMediaPost:
    """Update a social media post. Only the supplied fields change."""
    post = storage.update_social_media_post(post_id, request)
    if post is None:
        raise not_found("Social media post", post_id)
    return post


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete social post")
def delete_social_post(post_id: int, storage: StorageDep) -> None:
    """Delete a social media post."""
    if not storage.delete_social_media_post(post_id):
        raise not_found("Social media post", post_id)
