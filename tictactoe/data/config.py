"""
Database configuration using pydantic-settings.

Handles environment variables and provides type-safe config access,
including basic validation of connection URLs.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_SCHEMES = ("sqlite+aiosqlite://", "postgresql+asyncpg://")


class DatabaseSettings(BaseSettings):
    """
    Database configuration loaded from environment variables.

    Env vars:
    - DATABASE_URL: async connection string (sqlite+aiosqlite://... or postgresql+asyncpg://...)
    - DB_CREATE_TABLES: create the schema at startup instead of relying on Alembic
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    database_url: str = Field(
        default="sqlite+aiosqlite:///./tictactoe.db",
        description="Async database connection URL",
    )

    # Connection pool settings (server databases only)
    db_pool_size: int = Field(default=20, ge=1, le=100)
    db_max_overflow: int = Field(default=10, ge=0, le=50)
    db_pool_timeout: int = Field(default=30, ge=1, le=120)
    db_pool_recycle: int = Field(default=3600, ge=60)

    # Echo SQL queries (debug)
    db_echo: bool = Field(default=False)

    db_create_tables: bool = Field(default=True)

    @field_validator("database_url")
    @classmethod
    def validate_async_url(cls, v: str) -> str:
        """Ensure the URL uses an async driver we ship."""
        if not v.startswith(SUPPORTED_SCHEMES):
            raise ValueError(
                "DATABASE_URL must use one of: " + ", ".join(SUPPORTED_SCHEMES)
            )
        return v

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def safe_url(self) -> str:
        """Database URL without credentials, for logging."""
        return self.database_url.split("@")[-1]

    def get_engine_kwargs(self) -> dict:
        """Return SQLAlchemy engine configuration."""
        kwargs = {"echo": self.db_echo}
        if not self.is_sqlite:
            kwargs.update(
                pool_size=self.db_pool_size,
                max_overflow=self.db_max_overflow,
                pool_timeout=self.db_pool_timeout,
                pool_recycle=self.db_pool_recycle,
                pool_pre_ping=True,  # Verify connections before using
            )
        return kwargs


@lru_cache
def get_settings() -> DatabaseSettings:
    """
    Cached settings singleton.

    Returns the same DatabaseSettings instance across the application.
    """
    return DatabaseSettings()
