"""Storage contract, backends and shared scheduling logic.

The database backend and the backend factory live in ``src.storage.database``
and ``src.storage.factory`` and are imported from there directly.
"""

from src.storage.base import NewsletterNotFoundError, Storage, StorageError
from src.storage.memory import MemoryStorage
from src.storage.scheduling import ScheduleFrequency, calculate_next_run

__all__ = [
    "MemoryStorage",
    "NewsletterNotFoundError",
    "ScheduleFrequency",
    "Storage",
    "StorageError",
    "calculate_next_run",
]
