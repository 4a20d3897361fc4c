"""Behaviour shared by every storage backend.

Backend test cases mix ``StorageContractTests`` into ``unittest.TestCase``
and implement ``make_storage``.
"""

from datetime import UTC, datetime, timedelta

from src.storage.base import NewsletterNotFoundError, Storage
from src.storage.models import (
    ActivityLogCreate,
    ArticleCreate,
    DataBackupCreate,
    FeedSourceCreate,
    FeedSourceUpdate,
    NewsletterCreate,
    NewsletterUpdate,
    ScheduleCreate,
    ScheduleUpdate,
    SettingsUpdate,
    SocialMediaPostCreate,
    SocialMediaPostUpdate,
    UserCreate,
)


def as_utc(value: datetime) -> datetime:
    """Read a datetime back as aware UTC (SQLite drops the offset)."""
    return value if value.tzinfo else value.replace(tzinfo=UTC)


def make_article(title: str, published_date: datetime) -> ArticleCreate:
    return ArticleCreate(
        title=title,
        source="Hacker News",
        url=f"https://example.com/{title.lower().replace(' ', '-')}",
        published_date=published_date,
    )


def make_schedule(name: str, frequency: str = "daily", time: str = "09:00") -> ScheduleCreate:
    return ScheduleCreate(
        name=name,
        frequency=frequency,
        time=time,
        news_source_url="https://example.com/feed.xml",
    )


def make_post(newsletter_id: int, scheduled_for: datetime, **fields) -> SocialMediaPostCreate:
    return SocialMediaPostCreate(
        newsletter_id=newsletter_id,
        platform=fields.pop("platform", "twitter"),
        content=fields.pop("content", "New issue out now"),
        scheduled_for=scheduled_for,
        **fields,
    )


class StorageContractTests:
    """Contract tests run against each backend."""

    storage: Storage

    def make_storage(self) -> Storage:
        raise NotImplementedError

    def setUp(self) -> None:
        """Create a fresh, empty backend."""
        self.storage = self.make_storage()
        self.now = datetime.now(UTC)

    # Users

    def test_create_and_get_user(self) -> None:
        """Test a created user can be found by ID and username."""
        user = self.storage.create_user(UserCreate(username="editor", password="hashed"))

        self.assertEqual(user.id, 1)
        self.assertEqual(self.storage.get_user(user.id).username, "editor")
        self.assertEqual(self.storage.get_user_by_username("editor").id, user.id)

    def test_missing_user_returns_none(self) -> None:
        """Test lookups for unknown users return None."""
        self.assertIsNone(self.storage.get_user(99))
        self.assertIsNone(self.storage.get_user_by_username("nobody"))

    # Articles

    def test_create_article_defaults(self) -> None:
        """Test a new article is unselected and stamped with fetched_at."""
        article = self.storage.create_article(make_article("Model release", self.now))

        self.assertEqual(article.id, 1)
        self.assertFalse(article.selected)
        self.assertIsNone(article.content)
        self.assertIsNotNone(article.fetched_at)
        self.assertEqual(self.storage.get_article(article.id).title, "Model release")

    def test_articles_are_newest_published_first(self) -> None:
        """Test articles are ordered by published date descending."""
        self.storage.create_article(make_article("Old", self.now - timedelta(days=2)))
        self.storage.create_article(make_article("New", self.now))
        self.storage.create_article(make_article("Middle", self.now - timedelta(days=1)))

        titles = [a.title for a in self.storage.get_articles()]

        self.assertEqual(titles, ["New", "Middle", "Old"])

    def test_update_article_selection(self) -> None:
        """Test selecting and deselecting an article."""
        article = self.storage.create_article(make_article("Pick me", self.now))

        selected = self.storage.update_article_selection(article.id, True)
        self.assertTrue(selected.selected)
        self.assertTrue(self.storage.get_article(article.id).selected)

        deselected = self.storage.update_article_selection(article.id, False)
        self.assertFalse(deselected.selected)

    def test_update_selection_of_missing_article_returns_none(self) -> None:
        """Test selecting an unknown article returns None."""
        self.assertIsNone(self.storage.update_article_selection(42, True))

    def test_clear_articles(self) -> None:
        """Test clearing removes every article."""
        self.storage.create_article(make_article("One", self.now))
        self.storage.create_article(make_article("Two", self.now))

        self.storage.clear_articles()

        self.assertEqual(self.storage.get_articles(), [])

    # Newsletters

    def test_issue_numbers_start_at_one_and_increase(self) -> None:
        """Test the store assigns consecutive issue numbers."""
        self.assertEqual(self.storage.get_next_issue_number(), 1)

        first = self.storage.create_newsletter(NewsletterCreate(title="Issue one"))
        second = self.storage.create_newsletter(NewsletterCreate(title="Issue two"))

        self.assertEqual(first.issue_number, 1)
        self.assertEqual(second.issue_number, 2)
        self.assertEqual(self.storage.get_next_issue_number(), 3)

    def test_issue_numbers_start_at_configured_number(self) -> None:
        """Test an empty store starts from the configured issue start number."""
        self.storage.update_settings(SettingsUpdate(issue_start_number=40))

        self.assertEqual(self.storage.get_next_issue_number(), 40)
        newsletter = self.storage.create_newsletter(NewsletterCreate(title="Relaunch"))
        self.assertEqual(newsletter.issue_number, 40)
        self.assertEqual(self.storage.get_next_issue_number(), 41)

    def test_create_newsletter_defaults(self) -> None:
        """Test a new newsletter is a manual draft stamped with generated_at."""
        newsletter = self.storage.create_newsletter(NewsletterCreate(title="AI Weekly #1"))

        self.assertEqual(newsletter.status, "draft")
        self.assertEqual(newsletter.frequency, "manual")
        self.assertFalse(newsletter.approval_required)
        self.assertIsNotNone(newsletter.generated_at)
        self.assertIsNone(newsletter.published_at)

    def test_newsletters_are_highest_issue_first(self) -> None:
        """Test listing and latest both follow issue number."""
        for title in ("One", "Two", "Three"):
            self.storage.create_newsletter(NewsletterCreate(title=title))

        self.assertEqual([n.issue_number for n in self.storage.get_newsletters()], [3, 2, 1])
        self.assertEqual(self.storage.get_latest_newsletter().title, "Three")

    def test_latest_newsletter_of_empty_store_is_none(self) -> None:
        """Test there is no latest newsletter before the first one."""
        self.assertIsNone(self.storage.get_latest_newsletter())

    def test_update_newsletter_merges_only_supplied_fields(self) -> None:
        """Test omitted fields keep their value and explicit nulls clear."""
        newsletter = self.storage.create_newsletter(
            NewsletterCreate(title="Draft", content="Body", approval_email="ed@example.com")
        )

        updated = self.storage.update_newsletter(
            newsletter.id, NewsletterUpdate(status="published", approval_email=None)
        )

        self.assertEqual(updated.status, "published")
        self.assertEqual(updated.title, "Draft")
        self.assertEqual(updated.content, "Body")
        self.assertIsNone(updated.approval_email)
        self.assertEqual(updated.issue_number, newsletter.issue_number)
        self.assertEqual(self.storage.get_newsletter(newsletter.id).status, "published")

    def test_update_missing_newsletter_returns_none(self) -> None:
        """Test updating an unknown newsletter returns None."""
        self.assertIsNone(self.storage.update_newsletter(7, NewsletterUpdate(title="x")))

    def test_delete_newsletter_removes_its_posts(self) -> None:
        """Test deleting a newsletter also deletes its social media posts."""
        kept = self.storage.create_newsletter(NewsletterCreate(title="Kept"))
        doomed = self.storage.create_newsletter(NewsletterCreate(title="Doomed"))
        self.storage.create_social_media_post(make_post(kept.id, self.now))
        self.storage.create_social_media_post(make_post(doomed.id, self.now))

        self.assertTrue(self.storage.delete_newsletter(doomed.id))

        self.assertIsNone(self.storage.get_newsletter(doomed.id))
        posts = self.storage.get_social_media_posts()
        self.assertEqual([p.newsletter_id for p in posts], [kept.id])
        self.assertFalse(self.storage.delete_newsletter(doomed.id))

    # Settings

    def test_settings_absent_until_first_write(self) -> None:
        """Test there are no settings before the first write."""
        self.assertIsNone(self.storage.get_settings())

    def test_first_settings_write_fills_defaults(self) -> None:
        """Test unset fields take their defaults on the first write."""
        settings = self.storage.update_settings(SettingsUpdate(newsletter_title="Deep Dive"))

        self.assertEqual(settings.id, 1)
        self.assertEqual(settings.newsletter_title, "Deep Dive")
        self.assertEqual(settings.claude_model, "claude-sonnet-4-20250514")
        self.assertEqual(settings.claude_temperature, 0.7)
        self.assertEqual(settings.claude_max_tokens, 4000)
        self.assertEqual(settings.daily_schedule_time, "09:00")
        self.assertEqual(settings.max_daily_articles, 5)

    def test_later_settings_writes_keep_existing_values(self) -> None:
        """Test a partial write keeps every field it does not mention."""
        self.storage.update_settings(SettingsUpdate(newsletter_title="Deep Dive"))
        settings = self.storage.update_settings(SettingsUpdate(claude_max_tokens=8000))

        self.assertEqual(settings.newsletter_title, "Deep Dive")
        self.assertEqual(settings.claude_max_tokens, 8000)
        self.assertEqual(self.storage.get_settings().claude_max_tokens, 8000)

    # Activity logs

    def test_create_and_clear_activity_logs(self) -> None:
        """Test activity entries are stamped, listed and cleared."""
        log = self.storage.create_activity_log(
            ActivityLogCreate(message="Generated issue", type="newsletter", details={"issue": 1})
        )

        self.assertIsNotNone(log.timestamp)
        logs = self.storage.get_activity_logs()
        self.assertEqual(len(logs), 1)
        self.assertEqual(logs[0].details, {"issue": 1})

        self.storage.clear_activity_logs()
        self.assertEqual(self.storage.get_activity_logs(), [])

    # Schedules

    def test_create_schedule_computes_next_run(self) -> None:
        """Test a new schedule gets a next run in the future at its time of day."""
        schedule = self.storage.create_schedule(make_schedule("Morning", time="07:30"))
        next_run = as_utc(schedule.next_run)

        self.assertGreater(next_run, self.now)
        self.assertLessEqual(next_run, self.now + timedelta(days=1))
        self.assertEqual((next_run.hour, next_run.minute), (7, 30))
        self.assertTrue(schedule.enabled)
        self.assertFalse(schedule.auto_approve)
        self.assertEqual(schedule.max_articles, 5)

    def test_create_schedule_with_invalid_time_raises(self) -> None:
        """Test an out-of-range time of day is rejected."""
        with self.assertRaises(ValueError):
            self.storage.create_schedule(make_schedule("Broken", time="25:00"))

    def test_update_schedule_recomputes_next_run_on_time_change(self) -> None:
        """Test changing the time moves the next run."""
        schedule = self.storage.create_schedule(make_schedule("Morning", time="07:30"))

        updated = self.storage.update_schedule(schedule.id, ScheduleUpdate(time="18:45"))
        next_run = as_utc(updated.next_run)

        self.assertEqual((next_run.hour, next_run.minute), (18, 45))
        self.assertGreater(next_run, self.now)

    def test_update_schedule_keeps_next_run_for_other_fields(self) -> None:
        """Test renaming a schedule leaves its next run alone."""
        schedule = self.storage.create_schedule(make_schedule("Morning"))

        updated = self.storage.update_schedule(
            schedule.id, ScheduleUpdate(name="Breakfast", enabled=False)
        )

        self.assertEqual(updated.name, "Breakfast")
        self.assertFalse(updated.enabled)
        self.assertEqual(as_utc(updated.next_run), as_utc(schedule.next_run))

    def test_cadence_change_recomputes_next_run_from_existing_time(self) -> None:
        """Test switching daily to weekly moves the next run to a Sunday at the stored time."""
        schedule = self.storage.create_schedule(make_schedule("Digest", time="07:30"))

        updated = self.storage.update_schedule(schedule.id, ScheduleUpdate(frequency="weekly"))
        next_run = as_utc(updated.next_run)

        self.assertEqual(updated.frequency, "weekly")
        self.assertEqual(updated.time, "07:30")
        self.assertEqual(next_run.weekday(), 6)
        self.assertEqual((next_run.hour, next_run.minute), (7, 30))
        self.assertGreater(next_run, self.now)
        self.assertLessEqual(next_run, self.now + timedelta(days=8))

    def test_unknown_cadence_schedules_like_daily(self) -> None:
        """Test an unrecognised frequency is stored and runs within a day."""
        schedule = self.storage.create_schedule(
            make_schedule("Monthly roundup", frequency="monthly", time="06:15")
        )
        next_run = as_utc(schedule.next_run)

        self.assertEqual(schedule.frequency, "monthly")
        self.assertGreater(next_run, self.now)
        self.assertLessEqual(next_run, self.now + timedelta(days=1))
        self.assertEqual((next_run.hour, next_run.minute), (6, 15))

    def test_enabled_schedules(self) -> None:
        """Test only enabled schedules are returned, ordered by name."""
        self.storage.create_schedule(make_schedule("Weekly digest", frequency="weekly"))
        disabled = self.storage.create_schedule(make_schedule("Alpha"))
        self.storage.create_schedule(make_schedule("Daily brief"))
        self.storage.update_schedule(disabled.id, ScheduleUpdate(enabled=False))

        self.assertEqual(
            [s.name for s in self.storage.get_schedules()],
            ["Alpha", "Daily brief", "Weekly digest"],
        )
        self.assertEqual(
            [s.name for s in self.storage.get_enabled_schedules()],
            ["Daily brief", "Weekly digest"],
        )

    def test_all_schedules_are_listed_by_name(self) -> None:
        """Test get_schedules includes disabled schedules and orders by name."""
        self.storage.create_schedule(make_schedule("Zebra"))
        paused = self.storage.create_schedule(make_schedule("Midday"))
        self.storage.create_schedule(make_schedule("Anchor", frequency="weekly"))
        self.storage.update_schedule(paused.id, ScheduleUpdate(enabled=False))

        schedules = self.storage.get_schedules()

        self.assertEqual([s.name for s in schedules], ["Anchor", "Midday", "Zebra"])
        self.assertEqual([s.enabled for s in schedules], [True, False, True])

    def test_missing_schedule(self) -> None:
        """Test unknown schedule IDs are reported, not raised."""
        self.assertIsNone(self.storage.get_schedule(3))
        self.assertIsNone(self.storage.update_schedule(3, ScheduleUpdate(name="x")))
        self.assertFalse(self.storage.delete_schedule(3))

    def test_delete_schedule(self) -> None:
        """Test a deleted schedule is gone."""
        schedule = self.storage.create_schedule(make_schedule("Morning"))

        self.assertTrue(self.storage.delete_schedule(schedule.id))
        self.assertIsNone(self.storage.get_schedule(schedule.id))

    # Social media posts

    def test_create_post_for_missing_newsletter_raises(self) -> None:
        """Test a post must reference an existing newsletter."""
        with self.assertRaises(NewsletterNotFoundError) as context:
            self.storage.create_social_media_post(make_post(404, self.now))
        self.assertEqual(context.exception.newsletter_id, 404)
        self.assertEqual(self.storage.get_social_media_posts(), [])

    def test_create_post_defaults(self) -> None:
        """Test a new post is scheduled with no hashtags by default."""
        newsletter = self.storage.create_newsletter(NewsletterCreate(title="Issue"))

        post = self.storage.create_social_media_post(make_post(newsletter.id, self.now))

        self.assertEqual(post.status, "scheduled")
        self.assertEqual(post.hashtags, [])
        self.assertIsNone(post.post_url)
        self.assertEqual(self.storage.get_social_media_post(post.id).platform, "twitter")

    def test_posts_by_newsletter(self) -> None:
        """Test posts can be listed per newsletter, latest scheduled first."""
        first = self.storage.create_newsletter(NewsletterCreate(title="First"))
        second = self.storage.create_newsletter(NewsletterCreate(title="Second"))
        early = self.storage.create_social_media_post(make_post(first.id, self.now))
        late = self.storage.create_social_media_post(
            make_post(first.id, self.now + timedelta(hours=2), platform="linkedin")
        )
        self.storage.create_social_media_post(make_post(second.id, self.now))

        posts = self.storage.get_social_media_posts_by_newsletter(first.id)

        self.assertEqual([p.id for p in posts], [late.id, early.id])
        self.assertEqual(self.storage.get_social_media_posts_by_newsletter(999), [])

    def test_all_posts_are_latest_scheduled_first(self) -> None:
        """Test the unfiltered post list spans newsletters, latest scheduled first."""
        first = self.storage.create_newsletter(NewsletterCreate(title="First"))
        second = self.storage.create_newsletter(NewsletterCreate(title="Second"))
        middle = self.storage.create_social_media_post(
            make_post(first.id, self.now + timedelta(hours=1))
        )
        earliest = self.storage.create_social_media_post(make_post(second.id, self.now))
        latest = self.storage.create_social_media_post(
            make_post(second.id, self.now + timedelta(hours=3), platform="linkedin")
        )

        posts = self.storage.get_social_media_posts()

        self.assertEqual([p.id for p in posts], [latest.id, middle.id, earliest.id])

    def test_scheduled_posts_are_soonest_first(self) -> None:
        """Test only scheduled posts are returned, ordered by scheduled time."""
        newsletter = self.storage.create_newsletter(NewsletterCreate(title="Issue"))
        later = self.storage.create_social_media_post(
            make_post(newsletter.id, self.now + timedelta(days=2))
        )
        sooner = self.storage.create_social_media_post(
            make_post(newsletter.id, self.now + timedelta(days=1))
        )
        posted = self.storage.create_social_media_post(make_post(newsletter.id, self.now))
        self.storage.update_social_media_post(
            posted.id,
            SocialMediaPostUpdate(status="posted", post_url="https://x.com/p/1"),
        )

        scheduled = self.storage.get_scheduled_social_media_posts()

        self.assertEqual([p.id for p in scheduled], [sooner.id, later.id])

    def test_update_post_refreshes_updated_at(self) -> None:
        """Test a post update merges fields and bumps updated_at."""
        newsletter = self.storage.create_newsletter(NewsletterCreate(title="Issue"))
        post = self.storage.create_social_media_post(
            make_post(newsletter.id, self.now, hashtags=["ai"])
        )

        updated = self.storage.update_social_media_post(
            post.id, SocialMediaPostUpdate(engagement_stats={"likes": 12})
        )

        self.assertEqual(updated.engagement_stats, {"likes": 12})
        self.assertEqual(updated.hashtags, ["ai"])
        self.assertGreaterEqual(as_utc(updated.updated_at), as_utc(post.updated_at))

    def test_delete_post(self) -> None:
        """Test deleting posts, including unknown IDs."""
        newsletter = self.storage.create_newsletter(NewsletterCreate(title="Issue"))
        post = self.storage.create_social_media_post(make_post(newsletter.id, self.now))

        self.assertTrue(self.storage.delete_social_media_post(post.id))
        self.assertFalse(self.storage.delete_social_media_post(post.id))
        self.assertIsNone(self.storage.update_social_media_post(post.id, SocialMediaPostUpdate()))

    # Feed sources

    def test_create_feed_source_defaults(self) -> None:
        """Test a new feed source starts enabled with zeroed statistics."""
        feed = self.storage.create_feed_source(
            FeedSourceCreate(name="TechCrunch", url="https://techcrunch.com/feed/")
        )

        self.assertTrue(feed.enabled)
        self.assertEqual(feed.refresh_interval, 60)
        self.assertEqual(feed.tags, [])
        self.assertEqual(feed.article_count, 0)
        self.assertEqual(feed.error_count, 0)
        self.assertIsNone(feed.last_fetched)

    def test_enabled_feed_sources(self) -> None:
        """Test disabling a feed source hides it from the enabled list."""
        verge = self.storage.create_feed_source(
            FeedSourceCreate(name="The Verge", url="https://theverge.com/rss", tags=["tech"])
        )
        self.storage.create_feed_source(FeedSourceCreate(name="Ars", url="https://ars.com/rss"))

        updated = self.storage.update_feed_source(
            verge.id, FeedSourceUpdate(enabled=False, last_error="timeout", error_count=1)
        )

        self.assertFalse(updated.enabled)
        self.assertEqual(updated.tags, ["tech"])
        self.assertEqual(updated.error_count, 1)
        self.assertEqual([f.name for f in self.storage.get_feed_sources()], ["Ars", "The Verge"])
        self.assertEqual([f.name for f in self.storage.get_enabled_feed_sources()], ["Ars"])

    def test_missing_feed_source(self) -> None:
        """Test unknown feed source IDs are reported, not raised."""
        self.assertIsNone(self.storage.get_feed_source(5))
        self.assertIsNone(self.storage.update_feed_source(5, FeedSourceUpdate(name="x")))
        self.assertFalse(self.storage.delete_feed_source(5))

    # Data management

    def test_data_backups(self) -> None:
        """Test backups are stored, listed and deleted."""
        backup = self.storage.create_data_backup(
            DataBackupCreate(name="nightly", data={"articles": []})
        )

        self.assertEqual(backup.backup_type, "manual")
        self.assertIsNone(backup.download_url)
        self.assertEqual([b.name for b in self.storage.get_data_backups()], ["nightly"])
        self.assertTrue(self.storage.delete_data_backup(backup.id))
        self.assertFalse(self.storage.delete_data_backup(backup.id))

    def test_purge_keeps_users_and_settings(self) -> None:
        """Test purging removes content but keeps users and settings."""
        self.storage.create_user(UserCreate(username="editor", password="hashed"))
        self.storage.update_settings(SettingsUpdate(newsletter_title="Kept"))
        newsletter = self.storage.create_newsletter(NewsletterCreate(title="Issue"))
        self.storage.create_social_media_post(make_post(newsletter.id, self.now))
        self.storage.create_article(make_article("Story", self.now))
        self.storage.create_activity_log(ActivityLogCreate(message="hi", type="info"))
        self.storage.create_schedule(make_schedule("Morning"))
        self.storage.create_feed_source(FeedSourceCreate(name="Feed", url="https://f.com/rss"))
        self.storage.create_data_backup(DataBackupCreate(name="old"))

        self.storage.purge_all_data()

        export = self.storage.export_all_data()
        self.assertEqual(export.articles, [])
        self.assertEqual(export.newsletters, [])
        self.assertEqual(export.activity_logs, [])
        self.assertEqual(export.schedules, [])
        self.assertEqual(export.social_media_posts, [])
        self.assertEqual(export.feed_sources, [])
        self.assertEqual(export.backups, [])
        self.assertEqual(export.settings.newsletter_title, "Kept")
        self.assertIsNotNone(self.storage.get_user_by_username("editor"))

    def test_export_all_data(self) -> None:
        """Test the export snapshot contains every entity type."""
        newsletter = self.storage.create_newsletter(NewsletterCreate(title="Issue"))
        self.storage.create_social_media_post(make_post(newsletter.id, self.now))
        self.storage.create_article(make_article("Story", self.now))
        self.storage.create_schedule(make_schedule("Morning"))

        export = self.storage.export_all_data()

        self.assertEqual(len(export.newsletters), 1)
        self.assertEqual(len(export.social_media_posts), 1)
        self.assertEqual(len(export.articles), 1)
        self.assertEqual(len(export.schedules), 1)
        self.assertIsNone(export.settings)
        self.assertIsNotNone(export.exported_at)
        self.assertIn("socialMediaPosts", export.model_dump(mode="json", by_alias=True))

    def test_mutating_returned_records_does_not_change_the_store(self) -> None:
        """Test records handed to callers are copies of what is stored."""
        article = self.storage.create_article(make_article("Story", self.now))
        newsletter = self.storage.create_newsletter(NewsletterCreate(title="Issue"))
        post = self.storage.create_social_media_post(
            make_post(newsletter.id, self.now, hashtags=["ai"])
        )
        self.storage.update_settings(SettingsUpdate(newsletter_title="Weekly AI"))

        self.storage.get_article(article.id).selected = True
        self.storage.get_articles()[0].title = "Changed"
        self.storage.get_social_media_post(post.id).hashtags.append("leak")
        self.storage.get_settings().newsletter_title = "Changed"
        self.storage.export_all_data().settings.newsletter_title = "Changed"
        post.hashtags.append("leak")

        stored = self.storage.get_article(article.id)
        self.assertFalse(stored.selected)
        self.assertEqual(stored.title, "Story")
        self.assertEqual(self.storage.get_social_media_post(post.id).hashtags, ["ai"])
        self.assertEqual(self.storage.get_settings().newsletter_title, "Weekly AI")

    def test_ids_are_sequential_per_entity_type(self) -> None:
        """Test each entity type has its own ID sequence."""
        article = self.storage.create_article(make_article("Story", self.now))
        newsletter = self.storage.create_newsletter(NewsletterCreate(title="Issue"))
        second_article = self.storage.create_article(make_article("Other", self.now))

        self.assertEqual(article.id, 1)
        self.assertEqual(newsletter.id, 1)
        self.assertEqual(second_article.id, 2)
