"""
Basic application tests.

Validates that the FastAPI app starts correctly, the health
endpoint responds, and cross-cutting middleware is active.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from account_service.core.config import Settings
from account_service.main import create_app


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self, client: TestClient) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_response_body(self, client: TestClient, settings: Settings) -> None:
        """Health endpoint must return status and version fields."""
        body = client.get("/health").json()
        assert body["status"] == "ok"
        assert body["version"] == settings.version


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    @pytest.mark.parametrize("path", ["/health", "/users", "/users/bad-id"])
    def test_security_headers_present(self, client: TestClient, path: str) -> None:
        """Security headers are set on success and error responses alike."""
        response = client.get(path)

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "Content-Security-Policy" in response.headers
        assert "Referrer-Policy" in response.headers


class TestDocs:
    def test_docs_hidden_without_debug(self, client: TestClient) -> None:
        assert client.get("/docs").status_code == 404

    def test_docs_served_in_debug(self, settings: Settings, mongo_client) -> None:
        app = create_app(settings.model_copy(update={"debug": True}), mongo_client)
        assert TestClient(app).get("/docs").status_code == 200


class TestRateLimiting:
    """Tests for rate limiting behavior."""

    def test_rate_limit_returns_429(self, settings: Settings, mongo_client) -> None:
        """Exceeding rate limit returns HTTP 429."""
        limited = settings.model_copy(
            update={"rate_limit_enabled": True, "rate_limit_default": "2/minute"}
        )
        client = TestClient(create_app(limited, mongo_client))

        statuses = [client.get("/users").status_code for _ in range(3)]

        assert statuses == [200, 200, 429]
        assert client.get("/users").json()["error"] == "Rate limit exceeded"

    def test_limit_applies_to_item_routes(self, settings: Settings, mongo_client) -> None:
        """Routes with path parameters are limited like collection routes."""
        limited = settings.model_copy(
            update={"rate_limit_enabled": True, "rate_limit_default": "1/minute"}
        )
        client = TestClient(create_app(limited, mongo_client))

        statuses = [client.get("/admins/malformed").status_code for _ in range(2)]

        assert statuses == [404, 429]

    def test_disabled_limiter_never_limits(self, settings: Settings, mongo_client) -> None:
        unlimited = settings.model_copy(update={"rate_limit_default": "1/minute"})
        client = TestClient(create_app(unlimited, mongo_client))

        assert [client.get("/users").status_code for _ in range(3)] == [200, 200, 200]


class TestLifespan:
    def test_shutdown_closes_mongo_client(self, app: FastAPI) -> None:
        closed = []
        app.state.mongo_client.close = lambda: closed.append(True)

        with TestClient(app) as client:
            assert client.get("/health").status_code == 200

        assert closed == [True]
