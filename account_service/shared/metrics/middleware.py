"""
Request metrics middleware.

Records a request counter keyed by (method, route, status) and a
duration histogram keyed by (method, route) for every request that
matched an instrumented route. The route label is the route's path
template, so /users/{id} is one series whatever the id.
"""

import time
from collections.abc import Iterable

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import BaseRoute, Match
from starlette.types import ASGIApp

HTTP_500 = 500
DEFAULT_EXCLUDED_ROUTES = frozenset({"/metrics", "/health"})


def _match_route(request: Request) -> BaseRoute | None:
    """Find the endpoint route for a request that never reached the router.

    Responses produced by middleware short-circuit routing, so the
    matched route is not in the scope yet.
    """
    for route in request.app.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL and hasattr(route, "endpoint"):
            return route
    return None


class HttpMetrics:
    """Prometheus series for HTTP traffic, bound to one registry.

    Attributes:
        registry: The registry both series are registered on.
        requests_total: Counter of requests by method, route and status.
        request_duration: Histogram of request durations in seconds.
    """

    def __init__(
        self,
        registry: CollectorRegistry,
        buckets: Iterable[float] = Histogram.DEFAULT_BUCKETS,
    ) -> None:
        self.registry = registry
        self.requests_total = Counter(
            "http_requests_total",
            "Total number of HTTP requests",
            ["method", "route", "status"],
            registry=registry,
        )
        self.request_duration = Histogram(
            "http_request_duration_seconds",
            "Duration of HTTP requests",
            ["method", "route"],
            buckets=tuple(buckets),
            registry=registry,
        )

    def observe(self, method: str, route: str, status_code: int, duration: float) -> None:
        """Record one finished request."""
        self.requests_total.labels(method, route, str(status_code)).inc()
        self.request_duration.labels(method, route).observe(duration)

    def exposition(self) -> bytes:
        """Render the registry in the Prometheus text format."""
        return generate_latest(self.registry)


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware that feeds HttpMetrics.

    Requests are labelled by the route the router matched, or would
    have matched when a middleware answered first. Requests that match
    no route, or a route in excluded_routes, are not recorded. If the
    downstream app raises, the request is recorded with status 500 and
    the exception propagates.
    """

    def __init__(
        self,
        app: ASGIApp,
        metrics: HttpMetrics,
        excluded_routes: Iterable[str] = DEFAULT_EXCLUDED_ROUTES,
    ) -> None:
        super().__init__(app)
        self._metrics = metrics
        self._excluded_routes = frozenset(excluded_routes)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start = time.perf_counter()
        status_code = HTTP_500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration = time.perf_counter() - start
            route = self._route_template(request)
            if route is not None:
                self._metrics.observe(request.method, route, status_code, duration)

    def _route_template(self, request: Request) -> str | None:
        route = request.scope.get("route") or _match_route(request)
        template = getattr(route, "path", None)
        if template is None or template in self._excluded_routes:
            return None
        return template
