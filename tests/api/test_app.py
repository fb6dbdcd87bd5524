"""
Tests for the assembled application from create_app.

The lifespan is not entered, so no database or provider clients are
started; only routing, middleware and the client bundle are exercised.
"""

import pytest
from fastapi.middleware.cors import CORSMiddleware
from fastapi.testclient import TestClient
from starlette.middleware.sessions import SessionMiddleware

from talentiq.configs.identity import InngestSettings
from talentiq.configs.settings import Settings
from talentiq.main import create_app
from talentiq.observability.middleware import (
    CORRELATION_HEADER,
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

CLIENT_ORIGIN = "http://localhost:5173"
SIGNING_KEY = "signkey-prod-" + "ab" * 16


@pytest.fixture
def client_dist(tmp_path):
    dist = tmp_path / "dist"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text("<html>INDEX</html>")
    (dist / "assets" / "app.js").write_text("console.log('bundle')")
    (tmp_path / "secret.txt").write_text("TOP SECRET")
    return dist


def _production_settings(dist, signing_key=SIGNING_KEY) -> Settings:
    return Settings(
        _env_file=None,
        ENV="production",
        client_url=CLIENT_ORIGIN,
        client_dist_dir=str(dist),
        inngest=InngestSettings(_env_file=None, signing_key=signing_key),
    )


class TestProductionApp:
    """Production app: API routes plus the client bundle fallback."""

    @pytest.fixture
    def client(self, client_dist):
        app = create_app(_production_settings(client_dist))
        return TestClient(app)

    def test_health_returns_json(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"msg": "api is up and running"}

    def test_client_route_falls_back_to_index(self, client):
        response = client.get("/problems/two-sum")

        assert response.status_code == 200
        assert "INDEX" in response.text

    def test_assets_are_served(self, client):
        response = client.get("/assets/app.js")

        assert response.status_code == 200
        assert "bundle" in response.text

    def test_path_outside_bundle_is_not_served(self, client):
        response = client.get("/..%2Fsecret.txt")

        assert "TOP SECRET" not in response.text
        assert "INDEX" in response.text

    def test_unknown_api_path_is_not_found(self, client):
        response = client.get("/api/nope")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}
        assert "INDEX" not in response.text

    def test_cors_allows_client_origin(self, client):
        response = client.get("/api/health", headers={"Origin": CLIENT_ORIGIN})

        assert response.headers["access-control-allow-origin"] == CLIENT_ORIGIN
        assert response.headers["access-control-allow-credentials"] == "true"

    def test_correlation_id_is_echoed(self, client):
        response = client.get("/api/health", headers={CORRELATION_HEADER: "abc-123"})

        assert response.headers[CORRELATION_HEADER] == "abc-123"

    def test_middleware_stack(self, client):
        classes = {m.cls for m in client.app.user_middleware}

        assert {
            CORSMiddleware,
            SessionMiddleware,
            CorrelationMiddleware,
            RequestLoggingMiddleware,
        } <= classes


class TestAppAssembly:
    def test_development_app_has_no_client_fallback(self, client_dist):
        settings = Settings(_env_file=None, ENV="development", client_dist_dir=str(client_dist))
        client = TestClient(create_app(settings))

        assert client.get("/problems/two-sum").status_code == 404
        assert client.get("/api/health").status_code == 200

    def test_production_without_signing_key_builds_app(self, client_dist):
        app = create_app(_production_settings(client_dist, signing_key=None))

        paths = {getattr(route, "path", None) for route in app.routes}
        assert "/api/inngest" not in paths
        assert TestClient(app).get("/api/health").status_code == 200
