"""Database operations for newsletters and social media posts."""

import logging
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import delete
from sqlalchemy.orm import Session

from src.database.base import delete_by_id, get_by_id, record_exists_by_field, update_fields
from src.database.newsletters.models import Newsletter, SocialMediaPost
from src.database.settings.operations import get_app_settings

logger = logging.getLogger(__name__)

SCHEDULED_STATUS = "scheduled"


def list_newsletters(session: Session) -> list[Newsletter]:
    """Get all newsletters, highest issue number first.

    :param session: Database session.
    :returns: List of newsletters.
    """
    return session.query(Newsletter).order_by(Newsletter.issue_number.desc()).all()


def get_newsletter_by_id(session: Session, newsletter_id: int) -> Newsletter | None:
    """Get a newsletter by ID.

    :param session: Database session.
    :param newsletter_id: Newsletter ID.
    :returns: The newsletter or None if not found.
    """
    return get_by_id(session, Newsletter, newsletter_id)


def newsletter_exists(session: Session, newsletter_id: int) -> bool:
    """Check if a newsletter exists.

    :param session: Database session.
    :param newsletter_id: Newsletter ID.
    :returns: True if the newsletter exists.
    """
    return record_exists_by_field(session, Newsletter, "id", newsletter_id)


def get_latest_newsletter(session: Session) -> Newsletter | None:
    """Get the newsletter with the highest issue number.

    :param session: Database session.
    :returns: The latest newsletter or None if there are none.
    """
    return session.query(Newsletter).order_by(Newsletter.issue_number.desc()).first()


def get_next_issue_number(session: Session) -> int:
    """Get the issue number for the next newsletter.

    :param session: Database session.
    :returns: Latest issue number + 1, or the configured start number (default 1).
    """
    latest = get_latest_newsletter(session)
    if latest is not None:
        return latest.issue_number + 1

    settings = get_app_settings(session)
    return (settings.issue_start_number if settings else None) or 1


def create_newsletter(session: Session, title: str, **fields: Any) -> Newsletter:
    """Create a newsletter with the next issue number.

    :param session: Database session.
    :param title: Newsletter title.
    :param fields: Remaining newsletter columns (status, content, html_content, ...).
    :returns: The created newsletter.
    """
    newsletter = Newsletter(
        title=title,
        issue_number=get_next_issue_number(session),
        **fields,
    )
    session.add(newsletter)
    session.flush()
    logger.info(f"Created newsletter: id={newsletter.id}, issue_number={newsletter.issue_number}")
    return newsletter


def update_newsletter(
    session: Session,
    newsletter_id: int,
    changes: dict[str, Any],
) -> Newsletter | None:
    """Update a newsletter.

    :param session: Database session.
    :param newsletter_id: Newsletter ID.
    :param changes: Fields to change.
    :returns: The updated newsletter or None if not found.
    """
    newsletter = update_fields(session, Newsletter, newsletter_id, changes)
    if newsletter is not None:
        logger.info(f"Updated newsletter: id={newsletter_id}, fields={sorted(changes)}")
    return newsletter


def delete_newsletter(session: Session, newsletter_id: int) -> bool:
    """Delete a newsletter together with its social media posts.

    :param session: Database session.
    :param newsletter_id: Newsletter ID.
    :returns: True if the newsletter existed.
    """
    session.execute(delete(SocialMediaPost).where(SocialMediaPost.newsletter_id == newsletter_id))
    deleted = delete_by_id(session, Newsletter, newsletter_id)
    if deleted:
        logger.info(f"Deleted newsletter: id={newsletter_id}")
    return deleted


def list_social_media_posts(
    session: Session,
    newsletter_id: int | None = None,
) -> list[SocialMediaPost]:
    """Get social media posts, latest scheduled first.

    :param session: Database session.
    :param newsletter_id: Only return posts for this newsletter.
    :returns: List of posts.
    """
    query = session.query(SocialMediaPost)
    if newsletter_id is not None:
        query = query.filter(SocialMediaPost.newsletter_id == newsletter_id)
    return query.order_by(SocialMediaPost.scheduled_for.desc()).all()


def get_scheduled_social_media_posts(session: Session) -> list[SocialMediaPost]:
    """Get posts still waiting to be published, soonest first.

    :param session: Database session.
    :returns: Posts with status "scheduled".
    """
    return (
        session.query(SocialMediaPost)
        .filter(SocialMediaPost.status == SCHEDULED_STATUS)
        .order_by(SocialMediaPost.scheduled_for.asc())
        .all()
    )


def get_social_media_post_by_id(session: Session, post_id: int) -> SocialMediaPost | None:
    """Get a social media post by ID.

    :param session: Database session.
    :param post_id: Post ID.
    :returns: The post or None if not found.
    """
    return get_by_id(session, SocialMediaPost, post_id)


def create_social_media_post(
    session: Session,
    newsletter_id: int,
    platform: str,
    content: str,
    scheduled_for: datetime,
    **fields: Any,
) -> SocialMediaPost:
    """Create a social media post for a newsletter.

    The caller must check that the newsletter exists.

    :param session: Database session.
    :param newsletter_id: The newsletter being promoted.
    :param platform: Target platform.
    :param content: Post text.
    :param scheduled_for: When to publish the post.
    :param fields: Remaining post columns (hashtags, status, ...).
    :returns: The created post.
    """
    post = SocialMediaPost(
        newsletter_id=newsletter_id,
        platform=platform,
        content=content,
        scheduled_for=scheduled_for,
        **fields,
    )
    session.add(post)
    session.flush()
    logger.info(
        f"Created social media post: id={post.id}, platform={platform!r}, "
        f"newsletter_id={newsletter_id}"
    )
    return post


def update_social_media_post(
    session: Session,
    post_id: int,
    changes: dict[str, Any],
) -> SocialMediaPost | None:
    """Update a social media post and refresh its updated_at.

    :param session: Database session.
    :param post_id: Post ID.
    :param changes: Fields to change.
    :returns: The updated post or None if not found.
    """
    return update_fields(
        session, SocialMediaPost, post_id, {**changes, "updated_at": datetime.now(UTC)}
    )


def delete_social_media_post(session: Session, post_id: int) -> bool:
    """Delete a social media post.

    :param session: Database session.
    :param post_id: Post ID.
    :returns: True if the post existed.
    """
    return delete_by_id(session, SocialMediaPost, post_id)
