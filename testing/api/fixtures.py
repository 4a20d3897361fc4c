"""Shared test fixtures for API endpoint tests.

Endpoint tests run against a fresh in-memory backend injected through
FastAPI's dependency overrides.
"""

import os

# Set required environment variables before importing API modules
os.environ.setdefault("API_AUTH_TOKEN", "test-auth-token")

import unittest

from fastapi.testclient import TestClient

from src.api.app import app
from src.storage.factory import get_storage
from src.storage.memory import MemoryStorage


class StorageApiTestCase(unittest.TestCase):
    """Base test case with a test client bound to an in-memory backend."""

    def setUp(self) -> None:
        """Set up test client and storage override."""
        self.storage = MemoryStorage()
        app.dependency_overrides[get_storage] = lambda: self.storage
        self.client = TestClient(app)
        self.auth_headers = {"Authorization": f"Bearer {os.environ['API_AUTH_TOKEN']}"}

    def tearDown(self) -> None:
        """Remove the storage override."""
        app.dependency_overrides.clear()
