"""API endpoints for newsletters."""

import logging

from fastapi import APIRouter, HTTPException, status

from src.api.dependencies import StorageDep, not_found
from src.api.newsletters.models import NextIssueNumberResponse
from src.storage.models import Newsletter, NewsletterCreate, NewsletterUpdate, SocialMediaPost

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/newsletters", tags=["Newsletters"])


@router.get("", response_model=list[Newsletter], summary="List newsletters")
def list_newsletters(storage: StorageDep) -> list[Newsletter]:
    """List all newsletters, highest issue number first."""
    return storage.get_newsletters()


@router.get("/latest", response_model=Newsletter, summary="Get latest newsletter")
def get_latest_newsletter(storage: StorageDep) -> Newsletter:
    """Get the newsletter with the highest issue number."""
    newsletter = storage.get_latest_newsletter()
    if newsletter is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No newsletters yet")
    return newsletter


@router.get(
    "/next-issue-number",
    response_model=NextIssueNumberResponse,
    summary="Get next issue number",
)
def get_next_issue_number(storage: StorageDep) -> NextIssueNumberResponse:
    """Get the issue number the next newsletter will receive."""
    return NextIssueNumberResponse(issue_number=storage.get_next_issue_number())


@router.get("/{newsletter_id}", response_model=Newsletter, summary="Get newsletter")
def get_newsletter(newsletter_id: int, storage: StorageDep) -> Newsletter:
    """Get a newsletter by ID."""
    newsletter = storage.get_newsletter(newsletter_id)
    if newsletter is None:
        raise not_found("Newsletter", newsletter_id)
    return newsletter


@router.post(
    "",
    response_model=Newsletter,
    status_code=status.HTTP_201_CREATED,
    summary="Create newsletter",
)
def create_newsletter(request: NewsletterCreate, storage: StorageDep) -> Newsletter:
    """Store a generated newsletter under the next issue number."""
    newsletter = storage.create_newsletter(request)
    logger.info(f"Newsletter created: id={newsletter.id}, issue={newsletter.issue_number}")
    return newsletter


@router.patch("/{newsletter_id}", response_model=Newsletter, summary="Update newsletter")
def update_newsletter(
    newsletter_id: int,
    request: NewsletterUpdate,
    storage: StorageDep,
) -> Newsletter:
    """Update a newsletter. Only the supplied fields change."""
    newsletter = storage.update_newsletter(newsletter_id, request)
    if newsletter is None:
        raise not_found("Newsletter", newsletter_id)
    return newsletter


@router.delete(
    "/{newsletter_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete newsletter",
)
def delete_newsletter(newsletter_id: int, storage: StorageDep) -> None:
    """Delete a newsletter and its social media posts."""
    if not storage.delete_newsletter(newsletter_id):
        raise not_found("Newsletter", newsletter_id)


@router.get(
    "/{newsletter_id}/social-posts",
    response_model=list[SocialMediaPost],
    summary="List newsletter social posts",
)
def list_newsletter_social_posts(newsletter_id: int, storage: StorageDep) -> list[SocialMediaPost]:
    """List the social media posts promoting one newsletter."""
    return storage.get_social_media_posts_by_newsletter(newsletter_id)
