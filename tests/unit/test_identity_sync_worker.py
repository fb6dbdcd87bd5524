"""Tests for identity sync Inngest function registration."""

from unittest.mock import MagicMock

import inngest

from talentiq.configs.settings import Settings
from talentiq.workers.identity_sync import (
    create_identity_sync_functions,
    create_inngest_client,
)


def test_client_uses_configured_app_id(monkeypatch):
    monkeypatch.delenv("ENV", raising=False)
    settings = Settings(_env_file=None)

    client = create_inngest_client(settings)

    assert isinstance(client, inngest.Inngest)
    assert client.app_id == "talent-iq"


def test_two_functions_are_registered(monkeypatch):
    monkeypatch.delenv("ENV", raising=False)
    client = create_inngest_client(Settings(_env_file=None))

    functions = create_identity_sync_functions(client, lambda: MagicMock())

    assert len(functions) == 2
    assert all(isinstance(fn, inngest.Function) for fn in functions)
