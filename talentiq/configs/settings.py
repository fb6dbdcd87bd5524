"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from talentiq.configs.base import BaseSettings
from talentiq.configs.database import DatabaseSettings
from talentiq.configs.execution import PistonSettings
from talentiq.configs.identity import ClerkSettings, InngestSettings
from talentiq.configs.stream import StreamSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3000, description="Listen port")
    secret_key: str = Field(
        default="dev-secret-key-change-in-production",
        description="Signing secret for the cookie session middleware",
    )
    client_url: str = Field(
        default="http://localhost:5173",
        description="Allowed client origin (CORS and token azp check)",
    )
    client_dist_dir: str = Field(
        default="../frontend/dist",
        description="Pre-built client bundle served in production",
    )

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    stream: StreamSettings = Field(default_factory=StreamSettings)
    clerk: ClerkSettings = Field(default_factory=ClerkSettings)
    inngest: InngestSettings = Field(default_factory=InngestSettings)
    piston: PistonSettings = Field(default_factory=PistonSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from talentiq.configs import get_settings
        settings = get_settings()
    """
    return Settings()
