"""Configuration for storage backend selection using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.paths import PROJECT_ROOT

_ENV_FILE = PROJECT_ROOT / ".env"


class StorageConfig(BaseSettings):
    """Configuration for the storage layer.

    :param use_mock_storage: Force the in-memory backend regardless of DATABASE_URL.
    :param database_url: SQLAlchemy connection URL for the persistent backend.
    :param database_echo: Log every SQL statement.
    """

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    use_mock_storage: bool = Field(
        default=False,
        description="Use the in-memory backend",
    )
    database_url: str | None = Field(
        default=None,
        description="Database connection URL",
    )
    database_echo: bool = Field(
        default=False,
        description="Echo SQL statements to the log",
    )


@lru_cache
def get_storage_config() -> StorageConfig:
    """Get cached storage settings.

    Settings are loaded once and cached for the lifetime of the process.

    :returns: Configured StorageConfig instance.
    """
    return StorageConfig()
