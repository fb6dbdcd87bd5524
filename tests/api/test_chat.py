"""Test suite for chat token endpoint."""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from talentiq.api.deps import get_chat_service, get_current_user
from talentiq.api.routers.chat import router as chat_router
from talentiq.api.routers.error_handling import register_exception_handlers
from talentiq.application.services import ChatService


@pytest.fixture
def app(fake_user):
    app = FastAPI()
    app.include_router(chat_router)
    register_exception_handlers(app)
    app.dependency_overrides[get_current_user] = lambda: fake_user
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


def test_get_token_returns_identity(app, client, fake_user, mock_chat):
    app.dependency_overrides[get_chat_service] = lambda: ChatService(chat=mock_chat)

    response = client.get("/chat/token")

    assert response.status_code == 200
    assert response.json() == {
        "token": "stream-user-token",
        "userId": fake_user.clerk_id,
        "name": fake_user.name,
        "image": fake_user.profile_image,
    }
    mock_chat.create_token.assert_called_once_with(fake_user.clerk_id)


def test_get_token_failure_returns_500(app, client):
    service = MagicMock()
    service.get_token.side_effect = RuntimeError("client not connected")
    app.dependency_overrides[get_chat_service] = lambda: service

    response = client.get("/chat/token")

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to generate chat token"}
