"""Abstract storage contract implemented by every backend.

Provides one interface over the in-memory and database backends so that the
API layer never needs to know which one is active.
"""

from abc import ABC, abstractmethod

from src.storage.models import (
    ActivityLog,
    ActivityLogCreate,
    Article,
    ArticleCreate,
    DataBackup,
    DataBackupCreate,
    DataExport,
    FeedSource,
    FeedSourceCreate,
    FeedSourceUpdate,
    Newsletter,
    NewsletterCreate,
    NewsletterUpdate,
    Schedule,
    ScheduleCreate,
    ScheduleUpdate,
    Settings,
    SettingsUpdate,
    SocialMediaPost,
    SocialMediaPostCreate,
    SocialMediaPostUpdate,
    User,
    UserCreate,
)


class StorageError(Exception):
    """Base exception for storage errors."""


class NewsletterNotFoundError(StorageError):
    """Raised when a record references a newsletter that does not exist."""

    def __init__(self, newsletter_id: int) -> None:
        """Initialise the error.

        :param newsletter_id: The missing newsletter ID.
        """
        super().__init__(f"Newsletter not found: {newsletter_id}")
        self.newsletter_id = newsletter_id


class Storage(ABC):
    """Abstract base class for storage backends.

    Lookups return None for missing records, updates return None when the
    record does not exist and deletes return False. None of them raise for a
    missing identifier.
    """

    # Users

    @abstractmethod
    def get_user(self, user_id: int) -> User | None:
        """Get a user by ID."""
        ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> User | None:
        """Get a user by username."""
        ...

    @abstractmethod
    def create_user(self, data: UserCreate) -> User:
        """Create a user."""
        ...

    # Articles

    @abstractmethod
    def get_articles(self) -> list[Article]:
        """Get all articles, newest published first."""
        ...

    @abstractmethod
    def get_article(self, article_id: int) -> Article | None:
        """Get an article by ID."""
        ...

    @abstractmethod
    def create_article(self, data: ArticleCreate) -> Article:
        """Create an article, stamping its fetch time."""
        ...

    @abstractmethod
    def update_article_selection(self, article_id: int, selected: bool) -> Article | None:
        """Set the selection flag of an article.

        :param article_id: The article ID.
        :param selected: New selection state.
        :returns: The updated article, or None if not found.
        """
        ...

    @abstractmethod
    def clear_articles(self) -> None:
        """Delete every article."""
        ...

    # Newsletters

    @abstractmethod
    def get_newsletters(self) -> list[Newsletter]:
        """Get all newsletters, highest issue number first."""
        ...

    @abstractmethod
    def get_newsletter(self, newsletter_id: int) -> Newsletter | None:
        """Get a newsletter by ID."""
        ...

    @abstractmethod
    def get_latest_newsletter(self) -> Newsletter | None:
        """Get the newsletter with the highest issue number."""
        ...

    @abstractmethod
    def create_newsletter(self, data: NewsletterCreate) -> Newsletter:
        """Create a newsletter with the next issue number."""
        ...

    @abstractmethod
    def update_newsletter(self, newsletter_id: int, updates: NewsletterUpdate) -> Newsletter | None:
        """Merge a partial update into a newsletter."""
        ...

    @abstractmethod
    def delete_newsletter(self, newsletter_id: int) -> bool:
        """Delete a newsletter and its social media posts."""
        ...

    @abstractmethod
    def get_next_issue_number(self) -> int:
        """Get the issue number the next newsletter will receive.

        :returns: Latest issue number + 1, or the configured start number
            (default 1) when no newsletter exists.
        """
        ...

    # Settings

    @abstractmethod
    def get_settings(self) -> Settings | None:
        """Get the settings singleton, or None if never written."""
        ...

    @abstractmethod
    def update_settings(self, updates: SettingsUpdate) -> Settings:
        """Create or merge into the settings singleton."""
        ...

    # Activity logs

    @abstractmethod
    def get_activity_logs(self) -> list[ActivityLog]:
        """Get all activity logs, newest first."""
        ...

    @abstractmethod
    def create_activity_log(self, data: ActivityLogCreate) -> ActivityLog:
        """Append an activity log entry."""
        ...

    @abstractmethod
    def clear_activity_logs(self) -> None:
        """Delete every activity log entry."""
        ...

    # Schedules

    @abstractmethod
    def get_schedules(self) -> list[Schedule]:
        """Get all schedules ordered by name."""
        ...

    @abstractmethod
    def get_schedule(self, schedule_id: int) -> Schedule | None:
        """Get a schedule by ID."""
        ...

    @abstractmethod
    def create_schedule(self, data: ScheduleCreate) -> Schedule:
        """Create a schedule and compute its next run."""
        ...

    @abstractmethod
    def update_schedule(self, schedule_id: int, updates: ScheduleUpdate) -> Schedule | None:
        """Merge a partial update, recomputing the next run on cadence or time changes."""
        ...

    @abstractmethod
    def delete_schedule(self, schedule_id: int) -> bool:
        """Delete a schedule."""
        ...

    @abstractmethod
    def get_enabled_schedules(self) -> list[Schedule]:
        """Get enabled schedules ordered by name."""
        ...

    # Social media posts

    @abstractmethod
    def get_social_media_posts(self) -> list[SocialMediaPost]:
        """Get all posts, latest scheduled first."""
        ...

    @abstractmethod
    def get_social_media_post(self, post_id: int) -> SocialMediaPost | None:
        """Get a post by ID."""
        ...

    @abstractmethod
    def get_social_media_posts_by_newsletter(self, newsletter_id: int) -> list[SocialMediaPost]:
        """Get the posts for one newsletter, latest scheduled first."""
        ...

    @abstractmethod
    def create_social_media_post(self, data: SocialMediaPostCreate) -> SocialMediaPost:
        """Create a post.

        :raises NewsletterNotFoundError: If the referenced newsletter does not exist.
        """
        ...

    @abstractmethod
    def update_social_media_post(
        self, post_id: int, updates: SocialMediaPostUpdate
    ) -> SocialMediaPost | None:
        """Merge a partial update into a post."""
        ...

    @abstractmethod
    def delete_social_media_post(self, post_id: int) -> bool:
        """Delete a post."""
        ...

    @abstractmethod
    def get_scheduled_social_media_posts(self) -> list[SocialMediaPost]:
        """Get posts still waiting to be published, soonest first."""
        ...

    # Feed sources

    @abstractmethod
    def get_feed_sources(self) -> list[FeedSource]:
        """Get all feed sources ordered by name."""
        ...

    @abstractmethod
    def get_feed_source(self, feed_source_id: int) -> FeedSource | None:
        """Get a feed source by ID."""
        ...

    @abstractmethod
    def create_feed_source(self, data: FeedSourceCreate) -> FeedSource:
        """Create a feed source."""
        ...

    @abstractmethod
    def update_feed_source(
        self, feed_source_id: int, updates: FeedSourceUpdate
    ) -> FeedSource | None:
        """Merge a partial update into a feed source."""
        ...

    @abstractmethod
    def delete_feed_source(self, feed_source_id: int) -> bool:
        """Delete a feed source."""
        ...

    @abstractmethod
    def get_enabled_feed_sources(self) -> list[FeedSource]:
        """Get enabled feed sources ordered by name."""
        ...

    # Data management

    @abstractmethod
    def create_data_backup(self, data: DataBackupCreate) -> DataBackup:
        """Store a backup payload."""
        ...

    @abstractmethod
    def get_data_backups(self) -> list[DataBackup]:
        """Get all backups, newest first."""
        ...

    @abstractmethod
    def delete_data_backup(self, backup_id: int) -> bool:
        """Delete a backup."""
        ...

    @abstractmethod
    def purge_all_data(self) -> None:
        """Delete every record except users and settings."""
        ...

    @abstractmethod
    def export_all_data(self) -> DataExport:
        """Snapshot every exported entity type."""
        ...
