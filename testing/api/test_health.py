"""Tests for health check endpoints."""

import unittest
from unittest.mock import MagicMock

from src.api.app import app
from src.storage.factory import get_storage
from testing.api.fixtures import StorageApiTestCase


class TestHealthEndpoint(StorageApiTestCase):
    """Tests for /health endpoint."""

    def test_health_check_returns_200(self) -> None:
        """Test that health check returns 200 OK without authentication."""
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)

    def test_health_check_returns_healthy_status(self) -> None:
        """Test that health check returns healthy status."""
        data = self.client.get("/health").json()
        self.assertEqual(data["status"], "healthy")
        self.assertEqual(data["version"], "0.1.0")

    def test_health_check_reports_memory_backend(self) -> None:
        """Test that the in-memory backend is reported."""
        data = self.client.get("/health").json()
        self.assertEqual(data["storage"], "memory")

    def test_health_check_reports_database_backend(self) -> None:
        """Test that any other backend is reported as database."""
        app.dependency_overrides[get_storage] = lambda: MagicMock()
        data = self.client.get("/health").json()
        self.assertEqual(data["storage"], "database")


if __name__ == "__main__":
    unittest.main()
