"""
Identity provider and identity-sync configuration settings.

Clerk issues the session tokens verified on every protected request.
Inngest delivers the Clerk user lifecycle events that keep the local
users table in sync.

Dependencies: pydantic_settings
System role: Identity verification and sync configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from talentiq.configs.base import BaseSettings


class ClerkSettings(BaseSettings):
    """Clerk session-token verification settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CLERK_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    jwt_key: str | None = Field(
        default=None,
        description="PEM public key for networkless token verification",
    )
    jwks_url: str | None = Field(
        default=None,
        description="JWKS endpoint, e.g. https://<frontend-api>/.well-known/jwks.json",
    )
    timeout: float = Field(default=10.0, description="JWKS fetch timeout in seconds")
    jwks_refresh_interval: float = Field(
        default=60.0,
        description="Minimum seconds between JWKS refetches for unknown key ids",
    )

    @property
    def is_configured(self) -> bool:
        return bool(self.jwt_key or self.jwks_url)


class InngestSettings(BaseSettings):
    """Inngest event bus settings for identity sync functions."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="INNGEST_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    app_id: str = Field(default="talent-iq", description="Inngest application id")
    event_key: str | None = Field(default=None, description="Inngest event key")
    signing_key: str | None = Field(default=None, description="Inngest signing key")
