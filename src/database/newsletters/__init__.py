"""Newsletter database models and operations."""

from src.database.newsletters.models import Newsletter, SocialMediaPost
from src.database.newsletters.operations import (
    create_newsletter,
    create_social_media_post,
    delete_newsletter,
    delete_social_media_post,
    get_latest_newsletter,
    get_newsletter_by_id,
    get_next_issue_number,
    get_scheduled_social_media_posts,
    get_social_media_post_by_id,
    list_newsletters,
    list_social_media_posts,
    newsletter_exists,
    update_newsletter,
    update_social_media_post,
)

__all__ = [
    "Newsletter",
    "SocialMediaPost",
    "create_newsletter",
    "create_social_media_post",
    "delete_newsletter",
    "delete_social_media_post",
    "get_latest_newsletter",
    "get_newsletter_by_id",
    "get_next_issue_number",
    "get_scheduled_social_media_posts",
    "get_social_media_post_by_id",
    "list_newsletters",
    "list_social_media_posts",
    "newsletter_exists",
    "update_newsletter",
    "update_social_media_post",
]
