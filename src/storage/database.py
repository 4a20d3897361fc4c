"""Relational storage backend built on the SQLAlchemy operation modules."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from pydantic import BaseModel
from sqlalchemy.orm import Session, sessionmaker

from src.database import activity, articles, backups, feeds, newsletters, schedules, users
from src.database import settings as app_settings
from src.database.connection import get_session
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
    User,
    UserCreate,
    merge_settings,
)

logger = logging.getLogger(__name__)


def _changes(updates: BaseModel) -> dict:
    """Fields explicitly set on an update model."""
    return updates.model_dump(exclude_unset=True)


class DatabaseStorage(Storage):
    """Storage backend persisting every entity in the relational schema.

    Each call runs in its own session: committed on success, rolled back on
    error. Rows are converted to records before the session closes.
    """

    def __init__(self, session_factory: sessionmaker[Session] | None = None) -> None:
        """Initialise the backend.

        :param session_factory: Session factory to use. Defaults to the
            process-wide factory from the connection module.
        """
        self._session_factory = session_factory

    @contextmanager
    def _session(self) -> Iterator[Session]:
        with get_session(self._session_factory) as session:
            yield session

    # Users

    def get_user(self, user_id: int) -> User | None:
        with self._session() as session:
            user = users.get_user_by_id(session, user_id)
            return User.model_validate(user) if user else None

    def get_user_by_username(self, username: str) -> User | None:
        with self._session() as session:
            user = users.get_user_by_username(session, username)
            return User.model_validate(user) if user else None

    def create_user(self, data: UserCreate) -> User:
        with self._session() as session:
            return User.model_validate(users.create_user(session, data.username, data.password))

    # Articles

    def get_articles(self) -> list[Article]:
        with self._session() as session:
            return [Article.model_validate(a) for a in articles.list_articles(session)]

    def get_article(self, article_id: int) -> Article | None:
        with self._session() as session:
            article = articles.get_article_by_id(session, article_id)
            return Article.model_validate(article) if article else None

    def create_article(self, data: ArticleCreate) -> Article:
        with self._session() as session:
            article = articles.create_article(session, **data.model_dump())
            return Article.model_validate(article)

    def update_article_selection(self, article_id: int, selected: bool) -> Article | None:
        with self._session() as session:
            article = articles.set_article_selected(session, article_id, selected)
            return Article.model_validate(article) if article else None

    def clear_articles(self) -> None:
        with self._session() as session:
            articles.clear_articles(session)

    # Newsletters

    def get_newsletters(self) -> list[Newsletter]:
        with self._session() as session:
            return [Newsletter.model_validate(n) for n in newsletters.list_newsletters(session)]

    def get_newsletter(self, newsletter_id: int) -> Newsletter | None:
        with self._session() as session:
            newsletter = newsletters.get_newsletter_by_id(session, newsletter_id)
            return Newsletter.model_validate(newsletter) if newsletter else None

    def get_latest_newsletter(self) -> Newsletter | None:
        with self._session() as session:
            newsletter = newsletters.get_latest_newsletter(session)
            return Newsletter.model_validate(newsletter) if newsletter else None

    def create_newsletter(self, data: NewsletterCreate) -> Newsletter:
        with self._session() as session:
            newsletter = newsletters.create_newsletter(session, **data.model_dump())
            return Newsletter.model_validate(newsletter)

    def update_newsletter(self, newsletter_id: int, updates: NewsletterUpdate) -> Newsletter | None:
        with self._session() as session:
            newsletter = newsletters.update_newsletter(session, newsletter_id, _changes(updates))
            return Newsletter.model_validate(newsletter) if newsletter else None

    def delete_newsletter(self, newsletter_id: int) -> bool:
        with self._session() as session:
            return newsletters.delete_newsletter(session, newsletter_id)

    def get_next_issue_number(self) -> int:
        with self._session() as session:
            return newsletters.get_next_issue_number(session)

    # Settings

    def get_settings(self) -> Settings | None:
        with self._session() as session:
            return self._load_settings(session)

    def update_settings(self, updates: SettingsUpdate) -> Settings:
        with self._session() as session:
            merged = merge_settings(self._load_settings(session), updates)
            stored = app_settings.save_app_settings(session, merged.model_dump())
            return Settings.model_validate(stored)

    @staticmethod
    def _load_settings(session: Session) -> Settings | None:
        stored = app_settings.get_app_settings(session)
        return Settings.model_validate(stored) if stored else None

    # Activity logs

    def get_activity_logs(self) -> list[ActivityLog]:
        with self._session() as session:
            return [ActivityLog.model_validate(a) for a in activity.list_activity_logs(session)]

    def create_activity_log(self, data: ActivityLogCreate) -> ActivityLog:
        with self._session() as session:
            log = activity.create_activity_log(
                session, message=data.message, log_type=data.type, details=data.details
            )
            return ActivityLog.model_validate(log)

    def clear_activity_logs(self) -> None:
        with self._session() as session:
            activity.clear_activity_logs(session)

    # Schedules

    def get_schedules(self) -> list[Schedule]:
        with self._session() as session:
            return [Schedule.model_validate(s) for s in schedules.list_schedules(session)]

    def get_schedule(self, schedule_id: int) -> Schedule | None:
        with self._session() as session:
            schedule = schedules.get_schedule_by_id(session, schedule_id)
            return Schedule.model_validate(schedule) if schedule else None

    def create_schedule(self, data: ScheduleCreate) -> Schedule:
        with self._session() as session:
            return Schedule.model_validate(schedules.create_schedule(session, **data.model_dump()))

    def update_schedule(self, schedule_id: int, updates: ScheduleUpdate) -> Schedule | None:
        with self._session() as session:
            schedule = schedules.update_schedule(session, schedule_id, _changes(updates))
            return Schedule.model_validate(schedule) if schedule else None

    def delete_schedule(self, schedule_id: int) -> bool:
        with self._session() as session:
            return schedules.delete_schedule(session, schedule_id)

    def get_enabled_schedules(self) -> list[Schedule]:
        with self._session() as session:
            return [
                Schedule.model_validate(s)
                for s in schedules.list_schedules(session, enabled_only=True)
            ]

    # Social media posts

    def get_social_media_posts(self) -> list[SocialMediaPost]:
        with self._session() as session:
            return [
                SocialMediaPost.model_validate(p)
                for p in newsletters.list_social_media_posts(session)
            ]

    def get_social_media_post(self, post_id: int) -> SocialMediaPost | None:
        with self._session() as session:
            post = newsletters.get_social_media_post_by_id(session, post_id)
            return SocialMediaPost.model_validate(post) if post else None

    def get_social_media_posts_by_newsletter(self, newsletter_id: int) -> list[SocialMediaPost]:
        with self._session() as session:
            return [
                SocialMediaPost.model_validate(p)
                for p in newsletters.list_social_media_posts(session, newsletter_id=newsletter_id)
            ]

    def create_social_media_post(self, data: SocialMediaPostCreate) -> SocialMediaPost:
        with self._session() as session:
            if not newsletters.newsletter_exists(session, data.newsletter_id):
                raise NewsletterNotFoundError(data.newsletter_id)
            post = newsletters.create_social_media_post(session, **data.model_dump())
            return SocialMediaPost.model_validate(post)

    def update_social_media_post(
        self, post_id: int, updates: SocialMediaPostUpdate
    ) -> SocialMediaPost | None:
        with self._session() as session:
            post = newsletters.update_social_media_post(session, post_id, _changes(updates))
            return SocialMediaPost.model_validate(post) if post else None

    def delete_social_media_post(self, post_id: int) -> bool:
        with self._session() as session:
            return newsletters.delete_social_media_post(session, post_id)

    def get_scheduled_social_media_posts(self) -> list[SocialMediaPost]:
        with self._session() as session:
            return [
                SocialMediaPost.model_validate(p)
                for p in newsletters.get_scheduled_social_media_posts(session)
            ]

    # Feed sources

    def get_feed_sources(self) -> list[FeedSource]:
        with self._session() as session:
            return [FeedSource.model_validate(f) for f in feeds.list_feed_sources(session)]

    def get_feed_source(self, feed_source_id: int) -> FeedSource | None:
        with self._session() as session:
            feed_source = feeds.get_feed_source_by_id(session, feed_source_id)
            return FeedSource.model_validate(feed_source) if feed_source else None

    def create_feed_source(self, data: FeedSourceCreate) -> FeedSource:
        with self._session() as session:
            return FeedSource.model_validate(feeds.create_feed_source(session, **data.model_dump()))

    def update_feed_source(
        self, feed_source_id: int, updates: FeedSourceUpdate
    ) -> FeedSource | None:
        with self._session() as session:
            feed_source = feeds.update_feed_source(session, feed_source_id, _changes(updates))
            return FeedSource.model_validate(feed_source) if feed_source else None

    def delete_feed_source(self, feed_source_id: int) -> bool:
        with self._session() as session:
            return feeds.delete_feed_source(session, feed_source_id)

    def get_enabled_feed_sources(self) -> list[FeedSource]:
        with self._session() as session:
            return [
                FeedSource.model_validate(f)
                for f in feeds.list_feed_sources(session, enabled_only=True)
            ]

    # Data management

    def create_data_backup(self, data: DataBackupCreate) -> DataBackup:
        with self._session() as session:
            backup = backups.create_data_backup(session, **data.model_dump())
            return DataBackup.model_validate(backup)

    def get_data_backups(self) -> list[DataBackup]:
        with self._session() as session:
            return [DataBackup.model_validate(b) for b in backups.list_data_backups(session)]

    def delete_data_backup(self, backup_id: int) -> bool:
        with self._session() as session:
            return backups.delete_data_backup(session, backup_id)

    def purge_all_data(self) -> None:
        with self._session() as session:
            backups.purge_all_data(session)

    def export_all_data(self) -> DataExport:
        with self._session() as session:
            export = DataExport(
                articles=[Article.model_validate(a) for a in articles.list_articles(session)],
                newsletters=[
                    Newsletter.model_validate(n) for n in newsletters.list_newsletters(session)
                ],
                settings=self._load_settings(session),
                activity_logs=[
                    ActivityLog.model_validate(a) for a in activity.list_activity_logs(session)
                ],
                schedules=[Schedule.model_validate(s) for s in schedules.list_schedules(session)],
                social_media_posts=[
                    SocialMediaPost.model_validate(p)
                    for p in newsletters.list_social_media_posts(session)
                ],
                feed_sources=[
                    FeedSource.model_validate(f) for f in feeds.list_feed_sources(session)
                ],
                backups=[
                    DataBackup.model_validate(b) for b in backups.list_data_backups(session)
                ],
            )
        logger.info(f"Exported all data at {export.exported_at.isoformat()}")
        return export
