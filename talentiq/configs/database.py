"""
Database configuration settings.

Manages the SQLAlchemy async connection URL and pool parameters.
PostgreSQL (asyncpg) in deployed environments, SQLite (aiosqlite) locally.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from talentiq.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Async database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DATABASE_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    url: str = Field(
        default="sqlite+aiosqlite:///./talentiq.db",
        description="SQLAlchemy async database URL (DATABASE_URL)",
    )
    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def async_database_url(self) -> str:
        """
        Normalize the configured URL to an async driver.

        Plain ``postgresql://`` / ``postgres://`` URLs are rewritten to use
        asyncpg so the same DATABASE_URL works for hosted Postgres providers.

        Returns:
            str: SQLAlchemy async-compatible database URL
        """
        url = self.url
        if url.startswith("postgres://"):
            url = "postgresql://" + url[len("postgres://"):]
        if url.startswith("postgresql://"):
            url = "postgresql+asyncpg://" + url[len("postgresql://"):]
        return url

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured backend is SQLite (no pooling options)."""
        return self.async_database_url.startswith("sqlite")
