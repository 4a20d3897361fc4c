"""Selection of the process-wide storage backend."""

import logging
from dataclasses import dataclass, field

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from src.database.connection import create_db_engine
from src.storage.base import Storage
from src.storage.config import StorageConfig, get_storage_config
from src.storage.database import DatabaseStorage
from src.storage.memory import MemoryStorage

logger = logging.getLogger(__name__)


def create_storage(config: StorageConfig) -> Storage:
    """Create the storage backend described by the configuration.

    The in-memory backend is used when mock storage is requested or no
    database URL is configured. If the database cannot be reached the
    in-memory backend is used instead and a warning is logged.

    :param config: Storage configuration.
    :returns: The selected backend.
    """
    if config.use_mock_storage or not config.database_url:
        logger.info("Using in-memory storage for development/testing")
        return MemoryStorage()

    try:
        engine = create_db_engine(config.database_url, echo=config.database_echo)
        with engine.connect():
            pass
    except SQLAlchemyError as e:
        logger.warning(f"Database not available, falling back to in-memory storage: {e}")
        return MemoryStorage()

    logger.info(f"Using database storage: {engine.url.render_as_string(hide_password=True)}")
    return DatabaseStorage(sessionmaker(bind=engine, expire_on_commit=False))


@dataclass
class _StorageState:
    """Container for the shared storage handle."""

    storage: Storage | None = field(default=None)


_state = _StorageState()


def get_storage() -> Storage:
    """Get the storage backend for this process, creating it on first use.

    :returns: The shared storage backend.
    """
    if _state.storage is None:
        _state.storage = create_storage(get_storage_config())
    return _state.storage


def reset_storage() -> None:
    """Forget the shared storage backend so the next call re-selects it."""
    _state.storage = None
