"""In-memory storage backend for development and tests."""

import itertools
import logging
from collections.abc import Iterable
from datetime import UTC, datetime

from src.storage.base import NewsletterNotFoundError, Storage
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
    SocialPostStatus,
    StorageModel,
    User,
    UserCreate,
    merge_record,
    merge_settings,
    utc_now,
)
from src.storage.scheduling import calculate_next_run

logger = logging.getLogger(__name__)

_EPOCH = datetime.fromtimestamp(0, UTC)


def _sort_key(value: datetime | None) -> float:
    """Sortable key for a possibly missing, possibly naive datetime."""
    if value is None:
        return _EPOCH.timestamp()
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.timestamp()


def _detached[R: StorageModel](record: R | None) -> R | None:
    """Deep copy of a stored record. Callers never hold the stored instance."""
    return record.model_copy(deep=True) if record is not None else None


def _detached_all[R: StorageModel](records: Iterable[R]) -> list[R]:
    return [record.model_copy(deep=True) for record in records]


def merge_schedule(current: Schedule, updates: ScheduleUpdate) -> Schedule:
    """Merge a schedule update, recomputing next_run when frequency or time is supplied.

    :param current: The stored schedule.
    :param updates: The partial update.
    :returns: The merged schedule.
    """
    merged = merge_record(current, updates)
    if {"frequency", "time"} & updates.model_fields_set:
        merged = merged.model_copy(
            update={"next_run": calculate_next_run(merged.frequency, merged.time)}
        )
    return merged


class MemoryStorage(Storage):
    """Storage backend keeping every entity in insertion-ordered dicts.

    Each entity type has its own ID sequence owned by the instance, so
    separate instances never share state.
    """

    def __init__(self) -> None:
        """Initialise empty collections and ID sequences."""
        self._users: dict[int, User] = {}
        self._articles: dict[int, Article] = {}
        self._newsletters: dict[int, Newsletter] = {}
        self._settings: Settings | None = None
        self._activity_logs: dict[int, ActivityLog] = {}
        self._schedules: dict[int, Schedule] = {}
        self._social_media_posts: dict[int, SocialMediaPost] = {}
        self._feed_sources: dict[int, FeedSource] = {}
        self._data_backups: dict[int, DataBackup] = {}

        self._user_ids = itertools.count(1)
        self._article_ids = itertools.count(1)
        self._newsletter_ids = itertools.count(1)
        self._activity_log_ids = itertools.count(1)
        self._schedule_ids = itertools.count(1)
        self._social_media_post_ids = itertools.count(1)
        self._feed_source_ids = itertools.count(1)
        self._data_backup_ids = itertools.count(1)

    # Users

    def get_user(self, user_id: int) -> User | None:
        return _detached(self._users.get(user_id))

    def get_user_by_username(self, username: str) -> User | None:
        user = next((u for u in self._users.values() if u.username == username), None)
        return _detached(user)

    def create_user(self, data: UserCreate) -> User:
        user = User(id=next(self._user_ids), **data.model_dump())
        self._users[user.id] = user
        logger.info(f"Created user: id={user.id}, username={user.username!r}")
        return _detached(user)

    # Articles

    def get_articles(self) -> list[Article]:
        articles = sorted(
            self._articles.values(), key=lambda a: _sort_key(a.published_date), reverse=True
        )
        return _detached_all(articles)

    def get_article(self, article_id: int) -> Article | None:
        return _detached(self._articles.get(article_id))

    def create_article(self, data: ArticleCreate) -> Article:
        article = Article(id=next(self._article_ids), fetched_at=utc_now(), **data.model_dump())
        self._articles[article.id] = article
        logger.debug(f"Created article: id={article.id}, source={article.source!r}")
        return _detached(article)

    def update_article_selection(self, article_id: int, selected: bool) -> Article | None:
        article = self._articles.get(article_id)
        if article is None:
            return None

        updated = article.model_copy(update={"selected": selected})
        self._articles[article_id] = updated
        logger.debug(f"Article selection updated: id={article_id}, selected={selected}")
        return _detached(updated)

    def clear_articles(self) -> None:
        count = len(self._articles)
        self._articles.clear()
        logger.info(f"Cleared {count} articles")

    # Newsletters

    def get_newsletters(self) -> list[Newsletter]:
        newsletters = sorted(
            self._newsletters.values(), key=lambda n: n.issue_number, reverse=True
        )
        return _detached_all(newsletters)

    def get_newsletter(self, newsletter_id: int) -> Newsletter | None:
        return _detached(self._newsletters.get(newsletter_id))

    def get_latest_newsletter(self) -> Newsletter | None:
        latest = max(self._newsletters.values(), key=lambda n: n.issue_number, default=None)
        return _detached(latest)

    def create_newsletter(self, data: NewsletterCreate) -> Newsletter:
        newsletter = Newsletter(
            id=next(self._newsletter_ids),
            issue_number=self.get_next_issue_number(),
            generated_at=utc_now(),
            **data.model_dump(),
        )
        self._newsletters[newsletter.id] = newsletter
        logger.info(
            f"Created newsletter: id={newsletter.id}, issue_number={newsletter.issue_number}"
        )
        return _detached(newsletter)

    def update_newsletter(self, newsletter_id: int, updates: NewsletterUpdate) -> Newsletter | None:
        newsletter = self._newsletters.get(newsletter_id)
        if newsletter is None:
            return None

        updated = merge_record(newsletter, updates)
        self._newsletters[newsletter_id] = updated
        logger.info(
            f"Updated newsletter: id={newsletter_id}, fields={sorted(updates.model_fields_set)}"
        )
        return _detached(updated)

    def delete_newsletter(self, newsletter_id: int) -> bool:
        if self._newsletters.pop(newsletter_id, None) is None:
            return False

        orphaned = [
            post_id
            for post_id, post in self._social_media_posts.items()
            if post.newsletter_id == newsletter_id
        ]
        for post_id in orphaned:
            del self._social_media_posts[post_id]
        logger.info(f"Deleted newsletter: id={newsletter_id}, posts_removed={len(orphaned)}")
        return True

    def get_next_issue_number(self) -> int:
        latest = self.get_latest_newsletter()
        if latest is not None:
            return latest.issue_number + 1
        return (self._settings.issue_start_number if self._settings else None) or 1

    # Settings

    def get_settings(self) -> Settings | None:
        return _detached(self._settings)

    def update_settings(self, updates: SettingsUpdate) -> Settings:
        self._settings = merge_settings(self._settings, updates)
        logger.info(f"Settings updated: fields={sorted(updates.model_fields_set)}")
        return _detached(self._settings)

    # Activity logs

    def get_activity_logs(self) -> list[ActivityLog]:
        logs = sorted(
            self._activity_logs.values(), key=lambda log: _sort_key(log.timestamp), reverse=True
        )
        return _detached_all(logs)

    def create_activity_log(self, data: ActivityLogCreate) -> ActivityLog:
        log = ActivityLog(id=next(self._activity_log_ids), timestamp=utc_now(), **data.model_dump())
        self._activity_logs[log.id] = log
        return _detached(log)

    def clear_activity_logs(self) -> None:
        count = len(self._activity_logs)
        self._activity_logs.clear()
        logger.info(f"Cleared {count} activity logs")

    # Schedules

    def get_schedules(self) -> list[Schedule]:
        return _detached_all(sorted(self._schedules.values(), key=lambda s: s.name))

    def get_schedule(self, schedule_id: int) -> Schedule | None:
        return _detached(self._schedules.get(schedule_id))

    def create_schedule(self, data: ScheduleCreate) -> Schedule:
        schedule = Schedule(
            id=next(self._schedule_ids),
            next_run=calculate_next_run(data.frequency, data.time),
            created_at=utc_now(),
            **data.model_dump(),
        )
        self._schedules[schedule.id] = schedule
        logger.info(
            f"Created schedule: id={schedule.id}, name={schedule.name!r}, "
            f"next_run={schedule.next_run}"
        )
        return _detached(schedule)

    def update_schedule(self, schedule_id: int, updates: ScheduleUpdate) -> Schedule | None:
        schedule = self._schedules.get(schedule_id)
        if schedule is None:
            return None

        updated = merge_schedule(schedule, updates)
        self._schedules[schedule_id] = updated
        logger.info(f"Updated schedule: id={schedule_id}, next_run={updated.next_run}")
        return _detached(updated)

    def delete_schedule(self, schedule_id: int) -> bool:
        deleted = self._schedules.pop(schedule_id, None) is not None
        if deleted:
            logger.info(f"Deleted schedule: id={schedule_id}")
        return deleted

    def get_enabled_schedules(self) -> list[Schedule]:
        return [s for s in self.get_schedules() if s.enabled]

    # Social media posts

    def get_social_media_posts(self) -> list[SocialMediaPost]:
        return self._posts_by_schedule(self._social_media_posts.values(), newest_first=True)

    def get_social_media_post(self, post_id: int) -> SocialMediaPost | None:
        return _detached(self._social_media_posts.get(post_id))

    def get_social_media_posts_by_newsletter(self, newsletter_id: int) -> list[SocialMediaPost]:
        posts = (p for p in self._social_media_posts.values() if p.newsletter_id == newsletter_id)
        return self._posts_by_schedule(posts, newest_first=True)

    def create_social_media_post(self, data: SocialMediaPostCreate) -> SocialMediaPost:
        if data.newsletter_id not in self._newsletters:
            raise NewsletterNotFoundError(data.newsletter_id)

        now = utc_now()
        post = SocialMediaPost(
            id=next(self._social_media_post_ids),
            created_at=now,
            updated_at=now,
            **data.model_dump(),
        )
        self._social_media_posts[post.id] = post
        logger.info(
            f"Created social media post: id={post.id}, platform={post.platform!r}, "
            f"newsletter_id={post.newsletter_id}"
        )
        return _detached(post)

    def update_social_media_post(
        self, post_id: int, updates: SocialMediaPostUpdate
    ) -> SocialMediaPost | None:
        post = self._social_media_posts.get(post_id)
        if post is None:
            return None

        updated = merge_record(post, updates, updated_at=utc_now())
        self._social_media_posts[post_id] = updated
        logger.info(f"Updated social media post: id={post_id}, status={updated.status!r}")
        return _detached(updated)

    def delete_social_media_post(self, post_id: int) -> bool:
        return self._social_media_posts.pop(post_id, None) is not None

    def get_scheduled_social_media_posts(self) -> list[SocialMediaPost]:
        posts = (
            p
            for p in self._social_media_posts.values()
            if p.status == SocialPostStatus.SCHEDULED
        )
        return self._posts_by_schedule(posts, newest_first=False)

    @staticmethod
    def _posts_by_schedule(
        posts: Iterable[SocialMediaPost], *, newest_first: bool
    ) -> list[SocialMediaPost]:
        ordered = sorted(posts, key=lambda p: _sort_key(p.scheduled_for), reverse=newest_first)
        return _detached_all(ordered)

    # Feed sources

    def get_feed_sources(self) -> list[FeedSource]:
        return _detached_all(sorted(self._feed_sources.values(), key=lambda f: f.name))

    def get_feed_source(self, feed_source_id: int) -> FeedSource | None:
        return _detached(self._feed_sources.get(feed_source_id))

    def create_feed_source(self, data: FeedSourceCreate) -> FeedSource:
        now = utc_now()
        feed_source = FeedSource(
            id=next(self._feed_source_ids),
            created_at=now,
            updated_at=now,
            **data.model_dump(),
        )
        self._feed_sources[feed_source.id] = feed_source
        logger.info(f"Created feed source: id={feed_source.id}, url={feed_source.url}")
        return _detached(feed_source)

    def update_feed_source(
        self, feed_source_id: int, updates: FeedSourceUpdate
    ) -> FeedSource | None:
        feed_source = self._feed_sources.get(feed_source_id)
        if feed_source is None:
            return None

        updated = merge_record(feed_source, updates, updated_at=utc_now())
        self._feed_sources[feed_source_id] = updated
        return _detached(updated)

    def delete_feed_source(self, feed_source_id: int) -> bool:
        deleted = self._feed_sources.pop(feed_source_id, None) is not None
        if deleted:
            logger.info(f"Deleted feed source: id={feed_source_id}")
        return deleted

    def get_enabled_feed_sources(self) -> list[FeedSource]:
        return [f for f in self.get_feed_sources() if f.enabled]

    # Data management

    def create_data_backup(self, data: DataBackupCreate) -> DataBackup:
        backup = DataBackup(id=next(self._data_backup_ids), created_at=utc_now(), **data.model_dump())
        self._data_backups[backup.id] = backup
        logger.info(f"Created data backup: id={backup.id}, name={backup.name!r}")
        return _detached(backup)

    def get_data_backups(self) -> list[DataBackup]:
        backups = sorted(
            self._data_backups.values(), key=lambda b: _sort_key(b.created_at), reverse=True
        )
        return _detached_all(backups)

    def delete_data_backup(self, backup_id: int) -> bool:
        return self._data_backups.pop(backup_id, None) is not None

    def purge_all_data(self) -> None:
        for collection in (
            self._articles,
            self._newsletters,
            self._activity_logs,
            self._schedules,
            self._social_media_posts,
            self._feed_sources,
            self._data_backups,
        ):
            collection.clear()
        logger.warning("Purged all data (users and settings kept)")

    def export_all_data(self) -> DataExport:
        export = DataExport(
            articles=self.get_articles(),
            newsletters=self.get_newsletters(),
            settings=self.get_settings(),
            activity_logs=self.get_activity_logs(),
            schedules=self.get_schedules(),
            social_media_posts=self.get_social_media_posts(),
            feed_sources=self.get_feed_sources(),
            backups=self.get_data_backups(),
        )
        logger.info(f"Exported all data at {export.exported_at.isoformat()}")
        return export
