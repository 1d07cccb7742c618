"""
Tests for request metrics.

Checks the counter and histogram recorded by MetricsMiddleware
and the /metrics exposition endpoint.
"""

import pytest
from bson import ObjectId
from fastapi import FastAPI
from fastapi.testclient import TestClient
from prometheus_client import CollectorRegistry
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import PlainTextResponse

from account_service.core.config import Settings
from account_service.main import create_app
from account_service.shared.metrics import HttpMetrics, MetricsMiddleware

LIST_ROUTE = "/users"
ITEM_ROUTE = "/users/{account_id}"


def _registry(app: FastAPI) -> CollectorRegistry:
    return app.state.metrics.registry


def _request_count(app: FastAPI, method: str, route: str, status: str) -> float:
    value = _registry(app).get_sample_value(
        "http_requests_total", {"method": method, "route": route, "status": status}
    )
    return value or 0.0


class TestHttpMetrics:
    def test_observe_records_counter_and_histogram(self) -> None:
        metrics = HttpMetrics(CollectorRegistry())

        metrics.observe("GET", "/users", 200, 0.05)
        metrics.observe("GET", "/users", 500, 0.2)

        registry = metrics.registry
        assert registry.get_sample_value(
            "http_requests_total", {"method": "GET", "route": "/users", "status": "200"}
        ) == 1.0
        assert registry.get_sample_value(
            "http_request_duration_seconds_count", {"method": "GET", "route": "/users"}
        ) == 2.0
        assert registry.get_sample_value(
            "http_request_duration_seconds_sum", {"method": "GET", "route": "/users"}
        ) == pytest.approx(0.25)

    def test_separate_registries_do_not_collide(self) -> None:
        first = HttpMetrics(CollectorRegistry())
        second = HttpMetrics(CollectorRegistry())

        first.observe("GET", "/users", 200, 0.01)

        assert second.registry.get_sample_value(
            "http_requests_total", {"method": "GET", "route": "/users", "status": "200"}
        ) is None


class TestMetricsMiddleware:
    def test_counter_sum_equals_request_count(self, app: FastAPI, client: TestClient) -> None:
        for _ in range(4):
            client.get("/users")

        total = sum(
            _request_count(app, "GET", LIST_ROUTE, status) for status in ("200", "404", "500")
        )
        assert total == 4
        assert _registry(app).get_sample_value(
            "http_request_duration_seconds_count", {"method": "GET", "route": LIST_ROUTE}
        ) == 4

    def test_status_label_follows_response(self, app: FastAPI, client: TestClient) -> None:
        created = client.post(
            "/users", json={"email": "e", "username": "u", "passwordHash": "p"}
        ).json()["id"]
        client.get(f"/users/{created}")
        client.get(f"/users/{ObjectId()}")
        client.get("/users/malformed")

        assert _request_count(app, "POST", LIST_ROUTE, "201") == 1
        assert _request_count(app, "GET", ITEM_ROUTE, "200") == 1
        assert _request_count(app, "GET", ITEM_ROUTE, "404") == 2

    def test_routes_are_labelled_by_template(self, app: FastAPI, client: TestClient) -> None:
        client.delete(f"/users/{ObjectId()}")
        client.delete(f"/users/{ObjectId()}")

        assert _request_count(app, "DELETE", ITEM_ROUTE, "204") == 2

    def test_internal_error_is_recorded_as_500(self, app: FastAPI, client: TestClient) -> None:
        client.post("/users", content=b"{bad", headers={"Content-Type": "application/json"})
        assert _request_count(app, "POST", LIST_ROUTE, "500") == 1

    def test_metrics_and_health_are_not_recorded(self, app: FastAPI, client: TestClient) -> None:
        client.get("/metrics")
        client.get("/health")

        assert _request_count(app, "GET", "/metrics", "200") == 0
        assert _request_count(app, "GET", "/health", "200") == 0

    def test_unmatched_paths_are_not_recorded(self, app: FastAPI, client: TestClient) -> None:
        assert client.get("/nowhere").status_code == 404
        assert _request_count(app, "GET", "/nowhere", "404") == 0

    def test_rate_limited_requests_are_counted(self, settings: Settings, mongo_client) -> None:
        limited = settings.model_copy(
            update={"rate_limit_enabled": True, "rate_limit_default": "2/minute"}
        )
        app = create_app(limited, mongo_client)
        client = TestClient(app)

        statuses = [client.get("/users").status_code for _ in range(4)]

        assert statuses == [200, 200, 429, 429]
        assert _request_count(app, "GET", LIST_ROUTE, "200") == 2
        assert _request_count(app, "GET", LIST_ROUTE, "429") == 2

    def test_responses_from_inner_middleware_keep_their_route(self) -> None:
        class Busy(BaseHTTPMiddleware):
            async def dispatch(self, request, call_next):
                return PlainTextResponse("busy", status_code=503)

        metrics = HttpMetrics(CollectorRegistry())
        app = FastAPI()

        @app.get("/items/{item_id}")
        def read_item(item_id: str) -> dict:
            return {"id": item_id}

        app.add_middleware(Busy)
        app.add_middleware(MetricsMiddleware, metrics=metrics)

        client = TestClient(app)
        assert client.get("/items/1").status_code == 503
        assert client.get("/nowhere").status_code == 503

        assert metrics.registry.get_sample_value(
            "http_requests_total",
            {"method": "GET", "route": "/items/{item_id}", "status": "503"},
        ) == 1.0
        assert metrics.registry.get_sample_value(
            "http_requests_total",
            {"method": "GET", "route": "/nowhere", "status": "503"},
        ) is None


class TestMetricsEndpoint:
    def test_exposition_lists_recorded_series(self, client: TestClient) -> None:
        client.get("/users")

        response = client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert 'http_requests_total{method="GET",route="/users",status="200"} 1.0' in response.text
        assert "http_request_duration_seconds_bucket" in response.text
