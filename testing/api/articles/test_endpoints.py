"""Tests for article API endpoints."""

import unittest
from datetime import UTC, datetime

from src.storage.models import ArticleCreate
from testing.api.fixtures import StorageApiTestCase


class TestArticleEndpoints(StorageApiTestCase):
    """Tests for /articles endpoints."""

    def _add_article(self, title: str, day: int) -> int:
        article = self.storage.create_article(
            ArticleCreate(
                title=title,
                source="Blog",
                url=f"https://example.com/{day}",
                published_date=datetime(2025, 5, day, tzinfo=UTC),
            )
        )
        return article.id

    def test_list_articles_newest_first(self) -> None:
        """Test articles are listed newest published first in camelCase."""
        self._add_article("Older", 1)
        self._add_article("Newer", 2)

        response = self.client.get("/articles", headers=self.auth_headers)

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual([a["title"] for a in data], ["Newer", "Older"])
        self.assertIn("publishedDate", data[0])
        self.assertIn("fetchedAt", data[0])

    def test_create_article(self) -> None:
        """Test creating an article from a camelCase payload."""
        response = self.client.post(
            "/articles",
            headers=self.auth_headers,
            json={
                "title": "Open weights",
                "source": "Lab blog",
                "url": "https://example.com/open",
                "publishedDate": "2025-05-03T10:00:00Z",
            },
        )

        self.assertEqual(response.status_code, 201)
        data = response.json()
        self.assertEqual(data["id"], 1)
        self.assertFalse(data["selected"])
        self.assertEqual(len(self.storage.get_articles()), 1)

    def test_create_article_requires_title(self) -> None:
        """Test a missing title is a validation error."""
        response = self.client.post(
            "/articles",
            headers=self.auth_headers,
            json={"source": "Blog", "url": "https://example.com"},
        )
        self.assertEqual(response.status_code, 422)

    def test_select_article(self) -> None:
        """Test toggling selection."""
        article_id = self._add_article("Pick", 1)

        response = self.client.patch(
            f"/articles/{article_id}/selection",
            headers=self.auth_headers,
            json={"selected": True},
        )

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["selected"])
        self.assertTrue(self.storage.get_article(article_id).selected)

    def test_select_missing_article_returns_404(self) -> None:
        """Test selecting an unknown article returns 404."""
        response = self.client.patch(
            "/articles/99/selection", headers=self.auth_headers, json={"selected": True}
        )
        self.assertEqual(response.status_code, 404)

    def test_clear_articles(self) -> None:
        """Test clearing all articles."""
        self._add_article("Gone", 1)

        response = self.client.delete("/articles", headers=self.auth_headers)

        self.assertEqual(response.status_code, 204)
        self.assertEqual(self.storage.get_articles(), [])


if __name__ == "__main__":
    unittest.main()
