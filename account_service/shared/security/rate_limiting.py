"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client limit on every routed
endpoint. The check runs as an application-wide dependency, after
routing, so the matched endpoint is known and rate-limited responses
are attributed to their route like any other response.
"""

from fastapi import Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from account_service.core.config import Settings

HTTP_429 = 429


def build_limiter(settings: Settings) -> Limiter:
    """Create the limiter for one application instance.

    Args:
        settings: Application settings carrying the default limit
            and the enabled flag.

    Returns:
        A Limiter keyed on the client address, with in-memory storage.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def enforce_rate_limit(request: Request) -> None:
    """Apply the application's default limits to the routed request.

    Raises:
        RateLimitExceeded: If the client has used up its allowance.
    """
    limiter: Limiter = request.app.state.limiter
    route = request.scope.get("route")
    endpoint = getattr(route, "endpoint", None) or request.scope.get("endpoint")
    limiter._check_request_limit(request, endpoint, True)


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=HTTP_429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
