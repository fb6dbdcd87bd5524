"""Tests for environment-driven settings."""

from talentiq.configs.database import DatabaseSettings
from talentiq.configs.settings import Settings


def test_defaults(monkeypatch):
    for name in ("ENV", "ENVIRONMENT", "PORT", "DATABASE_URL", "STREAM_API_KEY"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.is_production is False
    assert settings.database.is_sqlite is True
    assert settings.piston.api_url == "https://emkc.org/api/v2/piston"
    assert settings.inngest.app_id == "talent-iq"


def test_env_prefix_and_aliases(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("STREAM_API_KEY", "k")
    monkeypatch.setenv("STREAM_API_SECRET", "s")
    monkeypatch.setenv("CLERK_JWKS_URL", "https://clerk.test/.well-known/jwks.json")

    settings = Settings(_env_file=None)

    assert settings.is_production is True
    assert settings.stream.is_configured is True
    assert settings.clerk.is_configured is True


def test_postgres_url_uses_asyncpg():
    config = DatabaseSettings(url="postgres://u:p@db:5432/talentiq")

    assert config.async_database_url == "postgresql+asyncpg://u:p@db:5432/talentiq"
    assert config.is_sqlite is False
