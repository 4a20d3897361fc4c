"""Tests for activity log API endpoints."""

import unittest

from testing.api.fixtures import StorageApiTestCase


class TestActivityEndpoints(StorageApiTestCase):
    """Tests for /activity endpoints."""

    def test_record_and_list(self) -> None:
        """Test recording an entry and listing it back."""
        response = self.client.post(
            "/activity",
            headers=self.auth_headers,
            json={"message": "Newsletter generated", "type": "newsletter", "details": {"id": 1}},
        )

        self.assertEqual(response.status_code, 201)
        self.assertIsNotNone(response.json()["timestamp"])

        listed = self.client.get("/activity", headers=self.auth_headers).json()
        self.assertEqual([log["message"] for log in listed], ["Newsletter generated"])
        self.assertEqual(listed[0]["details"], {"id": 1})

    def test_clear(self) -> None:
        """Test clearing the activity log."""
        self.client.post(
            "/activity", headers=self.auth_headers, json={"message": "x", "type": "info"}
        )

        response = self.client.delete("/activity", headers=self.auth_headers)

        self.assertEqual(response.status_code, 204)
        self.assertEqual(self.storage.get_activity_logs(), [])


if __name__ == "__main__":
    unittest.main()
