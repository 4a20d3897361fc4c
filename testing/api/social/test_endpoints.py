"""Tests for social media post API endpoints."""

import unittest

from src.storage.models import NewsletterCreate
from testing.api.fixtures import StorageApiTestCase


class TestSocialPostEndpoints(StorageApiTestCase):
    """Tests for /social-posts endpoints."""

    def setUp(self) -> None:
        """Create a newsletter to attach posts to."""
        super().setUp()
        self.newsletter = self.storage.create_newsletter(NewsletterCreate(title="Issue"))

    def _create_post(self, scheduled_for: str, **extra) -> dict:
        response = self.client.post(
            "/social-posts",
            headers=self.auth_headers,
            json={
                "newsletterId": self.newsletter.id,
                "platform": "twitter",
                "content": "New issue",
                "scheduledFor": scheduled_for,
                **extra,
            },
        )
        self.assertEqual(response.status_code, 201)
        return response.json()

    def test_create_post(self) -> None:
        """Test creating a post with defaults."""
        post = self._create_post("2025-06-01T09:00:00Z", hashtags=["ai"])

        self.assertEqual(post["status"], "scheduled")
        self.assertEqual(post["hashtags"], ["ai"])
        self.assertEqual(post["newsletterId"], self.newsletter.id)

    def test_create_post_for_missing_newsletter_returns_404(self) -> None:
        """Test posts must reference an existing newsletter."""
        response = self.client.post(
            "/social-posts",
            headers=self.auth_headers,
            json={
                "newsletterId": 999,
                "platform": "twitter",
                "content": "Orphan",
                "scheduledFor": "2025-06-01T09:00:00Z",
            },
        )

        self.assertEqual(response.status_code, 404)
        self.assertIn("999", response.json()["detail"])

    def test_scheduled_posts_soonest_first(self) -> None:
        """Test the scheduled listing excludes posted items and sorts ascending."""
        later = self._create_post("2025-06-03T09:00:00Z")
        sooner = self._create_post("2025-06-02T09:00:00Z")
        done = self._create_post("2025-06-01T09:00:00Z")
        self.client.patch(
            f"/social-posts/{done['id']}", headers=self.auth_headers, json={"status": "posted"}
        )

        response = self.client.get("/social-posts/scheduled", headers=self.auth_headers)

        self.assertEqual([p["id"] for p in response.json()], [sooner["id"], later["id"]])

    def test_list_latest_scheduled_first(self) -> None:
        """Test the full listing is ordered latest scheduled first."""
        first = self._create_post("2025-06-01T09:00:00Z")
        second = self._create_post("2025-06-05T09:00:00Z")

        response = self.client.get("/social-posts", headers=self.auth_headers)

        self.assertEqual([p["id"] for p in response.json()], [second["id"], first["id"]])

    def test_update_post(self) -> None:
        """Test updating a post records engagement."""
        post = self._create_post("2025-06-01T09:00:00Z")

        response = self.client.patch(
            f"/social-posts/{post['id']}",
            headers=self.auth_headers,
            json={"postUrl": "https://x.com/p/1", "engagementStats": {"likes": 3}},
        )

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["postUrl"], "https://x.com/p/1")
        self.assertEqual(data["engagementStats"], {"likes": 3})
        self.assertEqual(data["content"], "New issue")

    def test_get_and_delete_post(self) -> None:
        """Test fetching then deleting a post."""
        post = self._create_post("2025-06-01T09:00:00Z")

        found = self.client.get(f"/social-posts/{post['id']}", headers=self.auth_headers)
        deleted = self.client.delete(f"/social-posts/{post['id']}", headers=self.auth_headers)
        missing = self.client.get(f"/social-posts/{post['id']}", headers=self.auth_headers)

        self.assertEqual(found.status_code, 200)
        self.assertEqual(deleted.status_code, 204)
        self.assertEqual(missing.status_code, 404)


if __name__ == "__main__":
    unittest.main()
