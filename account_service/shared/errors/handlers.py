"""
Centralized error handlers for FastAPI.

Maps application failure kinds to HTTP responses. This is the
single place where a failure becomes a status code.
Error bodies are plain text. Internal details are logged, never
exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from account_service.shared.errors.kinds import AppError, ErrorKind

logger = logging.getLogger(__name__)

HTTP_401 = 401
HTTP_404 = 404
HTTP_500 = 500

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.MISSING_REQUIRED_FIELDS: HTTP_404,
    ErrorKind.INVALID_IDENTIFIER_FORMAT: HTTP_404,
    ErrorKind.NOT_FOUND: HTTP_404,
    ErrorKind.UNAUTHORIZED: HTTP_401,
}

INTERNAL_ERROR_MESSAGE = ErrorKind.INTERNAL_ERROR.message


def error_response(error: AppError) -> PlainTextResponse:
    """Build the plain-text response for a failure.

    Kinds without an explicit status become a 500 whose body is the
    generic internal error message, whatever the original message was.
    """
    status_code = STATUS_BY_KIND.get(error.kind)
    if status_code is None:
        return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=HTTP_500)
    return PlainTextResponse(error.message, status_code=status_code)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> PlainTextResponse:
        """Translate a failure kind into its status and body."""
        if exc.kind in STATUS_BY_KIND:
            logger.warning(
                "%s %s failed: %s %s",
                request.method,
                request.url.path,
                exc.kind.name,
                exc.context,
            )
        else:
            logger.error(
                "%s %s failed: %s %s",
                request.method,
                request.url.path,
                exc.kind.name,
                exc.context,
            )
        return error_response(exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> PlainTextResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception(
            "Unexpected error on %s %s: %s",
            request.method,
            request.url.path,
            type(exc).__name__,
        )
        return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=HTTP_500)
