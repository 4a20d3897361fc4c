"""Pydantic record models shared by every storage backend.

Records are what the storage contract returns. ``*Create`` models carry the
fields a caller may supply when creating a record (never the identifier) and
``*Update`` models carry partial updates: only the fields explicitly set on an
update model are merged, so a field set to ``None`` is cleared while an
omitted field keeps its current value.
"""

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_CLAUDE_MODEL = "claude-sonnet-4-20250514"
DEFAULT_NEWSLETTER_TITLE = "AI Weekly"
DEFAULT_SCHEDULE_TIME = "09:00"


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


class NewsletterStatus(StrEnum):
    """Common newsletter workflow states.

    The stored value is a free-form string; callers own the vocabulary.
    """

    DRAFT = "draft"
    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"
    PUBLISHED = "published"


class SocialPostStatus(StrEnum):
    """Common social media post states."""

    SCHEDULED = "scheduled"
    POSTED = "posted"
    FAILED = "failed"


class StorageModel(BaseModel):
    """Base for every storage model.

    Attributes are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        from_attributes=True,
    )


def reject_null(value: Any) -> Any:
    """Reject an explicit None for a field that may only be omitted."""
    if value is None:
        raise ValueError("field may be omitted but not set to null")
    return value


def merge_record[R: StorageModel](current: R, updates: BaseModel, **overrides: Any) -> R:
    """Merge the explicitly set fields of an update model into a record.

    :param current: The stored record.
    :param updates: Partial update; only fields in ``model_fields_set`` apply.
    :param overrides: Extra values applied after the update (e.g. timestamps).
    :returns: A new record with the merged values.
    """
    changes = updates.model_dump(exclude_unset=True)
    changes.update(overrides)
    return current.model_copy(update=changes)


# Users


class UserCreate(StorageModel):
    """Fields for creating a user."""

    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class User(UserCreate):
    """A dashboard user."""

    id: int


# Articles


class ArticleCreate(StorageModel):
    """Fields for creating an article."""

    title: str = Field(..., min_length=1)
    content: str | None = None
    source: str
    url: str
    published_date: datetime = Field(default_factory=utc_now)
    selected: bool = False


class Article(ArticleCreate):
    """A candidate article collected from a feed source."""

    id: int
    fetched_at: datetime


# Newsletters


class NewsletterCreate(StorageModel):
    """Fields for creating a newsletter. The issue number is assigned by the store."""

    title: str = Field(..., min_length=1)
    content: str | None = None
    status: str = NewsletterStatus.DRAFT.value
    frequency: str = "manual"
    schedule_time: str | None = None
    approval_required: bool = False
    approval_email: str | None = None
    approved_by: str | None = None
    html_content: str | None = None
    beehiiv_id: str | None = None
    beehiiv_url: str | None = None
    word_count: int | None = None


class NewsletterUpdate(StorageModel):
    """Partial update for a newsletter."""

    title: str | None = None
    content: str | None = None
    status: str | None = None
    frequency: str | None = None
    schedule_time: str | None = None
    approval_required: bool | None = None
    approval_email: str | None = None
    approved_by: str | None = None
    approved_at: datetime | None = None
    html_content: str | None = None
    beehiiv_id: str | None = None
    beehiiv_url: str | None = None
    word_count: int | None = None
    published_at: datetime | None = None

    @field_validator("title", "status", "frequency", "approval_required")
    @classmethod
    def _required_not_null(cls, value: Any) -> Any:
        return reject_null(value)


class Newsletter(NewsletterCreate):
    """A newsletter issue."""

    id: int
    issue_number: int
    approved_at: datetime | None = None
    generated_at: datetime
    published_at: datetime | None = None


# Settings


class SettingsUpdate(StorageModel):
    """Partial settings write. Unset fields keep their existing or default value."""

    claude_api_key: str | None = None
    claude_model: str | None = None
    claude_temperature: float | None = Field(default=None, ge=0, le=1)
    claude_max_tokens: int | None = Field(default=None, gt=0)
    beehiiv_api_key: str | None = None
    beehiiv_publication_id: str | None = None
    newsletter_title: str | None = None
    issue_start_number: int | None = Field(default=None, ge=1)
    default_news_source: str | None = None
    sendgrid_api_key: str | None = None
    approval_email: str | None = None
    approval_required: bool | None = None
    daily_schedule_enabled: bool | None = None
    daily_schedule_time: str | None = None
    auto_select_articles: bool | None = None
    max_daily_articles: int | None = Field(default=None, gt=0)


class Settings(StorageModel):
    """The singleton settings record."""

    id: int = 1
    claude_api_key: str | None = None
    claude_model: str | None = DEFAULT_CLAUDE_MODEL
    claude_temperature: float | None = 0.7
    claude_max_tokens: int | None = 4000
    beehiiv_api_key: str | None = None
    beehiiv_publication_id: str | None = None
    newsletter_title: str | None = DEFAULT_NEWSLETTER_TITLE
    issue_start_number: int | None = 1
    default_news_source: str | None = None
    sendgrid_api_key: str | None = None
    approval_email: str | None = None
    approval_required: bool | None = False
    daily_schedule_enabled: bool | None = False
    daily_schedule_time: str | None = DEFAULT_SCHEDULE_TIME
    auto_select_articles: bool | None = False
    max_daily_articles: int | None = 5
    updated_at: datetime = Field(default_factory=utc_now)


def merge_settings(current: Settings | None, updates: SettingsUpdate) -> Settings:
    """Apply a settings write to the existing singleton, or to the defaults.

    :param current: The stored settings, or None before the first write.
    :param updates: The settings write.
    :returns: The merged settings record.
    """
    return merge_record(current or Settings(), updates, updated_at=utc_now())


# Activity logs


class ActivityLogCreate(StorageModel):
    """Fields for creating an activity log entry."""

    message: str
    details: Any | None = None
    type: str


class ActivityLog(ActivityLogCreate):
    """An append-only activity log entry."""

    id: int
    timestamp: datetime | None = None


# Schedules


class ScheduleCreate(StorageModel):
    """Fields for creating a recurring schedule."""

    name: str = Field(..., min_length=1)
    frequency: str
    time: str = Field(..., pattern=r"^\d{1,2}:\d{2}$")
    news_source_url: str
    max_articles: int | None = 5
    auto_approve: bool = False
    enabled: bool = True


class ScheduleUpdate(StorageModel):
    """Partial update for a schedule."""

    name: str | None = None
    frequency: str | None = None
    time: str | None = Field(default=None, pattern=r"^\d{1,2}:\d{2}$")
    news_source_url: str | None = None
    max_articles: int | None = None
    auto_approve: bool | None = None
    enabled: bool | None = None
    last_run: datetime | None = None

    @field_validator("name", "frequency", "time", "news_source_url", "auto_approve", "enabled")
    @classmethod
    def _required_not_null(cls, value: Any) -> Any:
        return reject_null(value)


class Schedule(ScheduleCreate):
    """A recurring newsletter generation schedule."""

    id: int
    last_run: datetime | None = None
    next_run: datetime
    created_at: datetime


# Social media posts


class SocialMediaPostCreate(StorageModel):
    """Fields for creating a social media post."""

    newsletter_id: int
    platform: str
    content: str
    hashtags: list[str] = Field(default_factory=list)
    engagement_hook: str | None = None
    call_to_action: str | None = None
    status: str = SocialPostStatus.SCHEDULED.value
    scheduled_for: datetime


class SocialMediaPostUpdate(StorageModel):
    """Partial update for a social media post."""

    platform: str | None = None
    content: str | None = None
    hashtags: list[str] | None = None
    engagement_hook: str | None = None
    call_to_action: str | None = None
    status: str | None = None
    scheduled_for: datetime | None = None
    post_url: str | None = None
    engagement_stats: dict[str, Any] | None = None

    @field_validator("platform", "content", "hashtags", "status", "scheduled_for")
    @classmethod
    def _required_not_null(cls, value: Any) -> Any:
        return reject_null(value)


class SocialMediaPost(SocialMediaPostCreate):
    """A social media post promoting a newsletter."""

    id: int
    post_url: str | None = None
    engagement_stats: dict[str, Any] | None = None
    created_at: datetime
    updated_at: datetime


# Feed sources


class FeedSourceCreate(StorageModel):
    """Fields for creating a feed source."""

    name: str = Field(..., min_length=1)
    url: str
    enabled: bool = True
    refresh_interval: int = Field(default=60, gt=0)
    tags: list[str] = Field(default_factory=list)


class FeedSourceUpdate(StorageModel):
    """Partial update for a feed source."""

    name: str | None = None
    url: str | None = None
    enabled: bool | None = None
    refresh_interval: int | None = Field(default=None, gt=0)
    tags: list[str] | None = None
    last_fetched: datetime | None = None
    article_count: int | None = None
    error_count: int | None = None
    last_error: str | None = None

    @field_validator(
        "name", "url", "enabled", "refresh_interval", "tags", "article_count", "error_count"
    )
    @classmethod
    def _required_not_null(cls, value: Any) -> Any:
        return reject_null(value)


class FeedSource(FeedSourceCreate):
    """A syndication feed polled for candidate articles."""

    id: int
    last_fetched: datetime | None = None
    article_count: int = 0
    error_count: int = 0
    last_error: str | None = None
    created_at: datetime
    updated_at: datetime


# Data management


class DataBackupCreate(StorageModel):
    """Fields for creating a data backup."""

    name: str
    backup_type: str = "manual"
    data: Any | None = None


class DataBackup(DataBackupCreate):
    """A stored backup payload."""

    id: int
    download_url: str | None = None
    created_at: datetime


class DataExport(StorageModel):
    """Snapshot of every exported entity type."""

    articles: list[Article]
    newsletters: list[Newsletter]
    settings: Settings | None
    activity_logs: list[ActivityLog]
    schedules: list[Schedule]
    social_media_posts: list[SocialMediaPost]
    feed_sources: list[FeedSource]
    backups: list[DataBackup]
    exported_at: datetime = Field(default_factory=utc_now)
