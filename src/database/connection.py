"""Database connection and session management."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from src.storage.config import get_storage_config


def get_database_url() -> str:
    """Get the database URL from configuration.

    :returns: The database connection URL.
    :raises KeyError: If DATABASE_URL is not configured.
    """
    url = get_storage_config().database_url
    if not url:
        raise KeyError("DATABASE_URL")
    return url


def create_db_engine(url: str | None = None, *, echo: bool = False) -> Engine:
    """Create a SQLAlchemy engine for the database.

    :param url: Connection URL. Defaults to the configured DATABASE_URL.
    :param echo: If True, log all SQL statements.
    :returns: A configured SQLAlchemy engine.
    """
    return create_engine(url or get_database_url(), echo=echo, pool_pre_ping=True)


@dataclass
class _DatabaseState:
    """Container for database connection state."""

    engine: Engine | None = field(default=None)
    session_factory: sessionmaker[Session] | None = field(default=None)


_state = _DatabaseState()


def get_engine() -> Engine:
    """Get or create the database engine singleton.

    :returns: The database engine.
    """
    if _state.engine is None:
        _state.engine = create_db_engine(echo=get_storage_config().database_echo)
    return _state.engine


def get_session_factory() -> sessionmaker[Session]:
    """Get or create the session factory singleton.

    :returns: A sessionmaker bound to the database engine.
    """
    if _state.session_factory is None:
        _state.session_factory = sessionmaker(bind=get_engine(), expire_on_commit=False)
    return _state.session_factory


@contextmanager
def get_session(session_factory: sessionmaker[Session] | None = None) -> Iterator[Session]:
    """Create a new database session with automatic cleanup.

    Commits on successful completion, rolls back on exception.

    :param session_factory: Factory to open the session with. Defaults to the
        process-wide factory.
    :yields: A database session.
    """
    factory = session_factory or get_session_factory()
    session = factory()
    try:
        yield session
        session.commit()

    except Exception:
        session.rollback()
        raise

    finally:
        session.close()
