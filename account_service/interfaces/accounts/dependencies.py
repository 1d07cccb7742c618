"""
Dependency injection for the accounts bounded context.

Repositories are built once in create_app() and kept on app.state.
These providers hand them to the routes, and decode request bodies
into AccountPayload so malformed JSON surfaces as INVALID_BODY
rather than FastAPI's own validation response.
"""

from collections.abc import Callable

from fastapi import Request
from pydantic import ValidationError

from account_service.domain.accounts.ports import AccountRepository
from account_service.interfaces.accounts.schemas import AccountPayload
from account_service.shared.errors import AppError, ErrorKind


def repository_provider(state_key: str) -> Callable[[Request], AccountRepository]:
    """Build a dependency returning the repository stored under state_key."""

    def get_repository(request: Request) -> AccountRepository:
        return getattr(request.app.state, state_key)

    return get_repository


async def decode_account_payload(request: Request) -> AccountPayload:
    """Decode the JSON request body into an AccountPayload.

    Raises:
        AppError: INVALID_BODY if the body is not a JSON object with
            string (or null) fields.
    """
    body = await request.body()
    try:
        return AccountPayload.model_validate_json(body)
    except ValidationError as exc:
        raise AppError(
            ErrorKind.INVALID_BODY,
            {"errors": [error["type"] for error in exc.errors()]},
        ) from exc
