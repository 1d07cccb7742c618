"""
FastAPI router factory for an account collection.

Users and admins expose the same six operations, so one factory
builds a router per collection. All routes delegate to use cases;
error mapping is handled by the centralized error handlers.
"""

from dataclasses import dataclass

from fastapi import APIRouter, Depends, Response, status

from account_service.application.accounts.create_account import CreateAccountUseCase
from account_service.application.accounts.delete_account import DeleteAccountUseCase
from account_service.application.accounts.dtos import (
    AccountResult,
    CreateAccountCommand,
    DeleteAccountCommand,
    GetAccountQuery,
    UpdateAccountCommand,
)
from account_service.application.accounts.get_account import GetAccountUseCase
from account_service.application.accounts.list_accounts import ListAccountsUseCase
from account_service.application.accounts.partially_update_account import (
    PartiallyUpdateAccountUseCase,
)
from account_service.application.accounts.update_account import UpdateAccountUseCase
from account_service.domain.accounts.entities import Account, Admin, User
from account_service.domain.accounts.ports import AccountRepository
from account_service.interfaces.accounts.dependencies import (
    decode_account_payload,
    repository_provider,
)
from account_service.interfaces.accounts.schemas import (
    AccountPayload,
    AccountResponse,
    CreateAccountResponse,
)


@dataclass(frozen=True)
class AccountCollection:
    """Describes one exposed collection.

    Attributes:
        prefix: URL prefix, e.g. "/users".
        tag: OpenAPI tag.
        state_key: Attribute of app.state holding the repository.
        entity_type: Entity class stored in the collection.
    """

    prefix: str
    tag: str
    state_key: str
    entity_type: type[Account]


USERS = AccountCollection("/users", "users", "user_repository", User)
ADMINS = AccountCollection("/admins", "admins", "admin_repository", Admin)


def _to_response(result: AccountResult) -> AccountResponse:
    return AccountResponse(
        id=result.id,
        email=result.email,
        username=result.username,
        password_hash=result.password_hash,
    )


def _update_command(account_id: str, payload: AccountPayload) -> UpdateAccountCommand:
    return UpdateAccountCommand(
        account_id=account_id,
        email=payload.email,
        username=payload.username,
        password_hash=payload.password_hash,
    )


def create_account_router(collection: AccountCollection) -> APIRouter:
    """Build the CRUD router for one account collection.

    Args:
        collection: Which collection to expose and where.

    Returns:
        A router with list, create, get, update, partial update
        and delete routes mounted under collection.prefix.
    """
    router = APIRouter(prefix=collection.prefix, tags=[collection.tag])
    get_repository = repository_provider(collection.state_key)
    entity_type = collection.entity_type
    noun = entity_type.__name__.lower()

    @router.get(
        "",
        response_model=list[AccountResponse],
        summary=f"List {collection.tag}",
    )
    def list_accounts(
        repository: AccountRepository = Depends(get_repository),
    ) -> list[AccountResponse]:
        """Return every account in store order."""
        results = ListAccountsUseCase(repository).execute()
        return [_to_response(r) for r in results]

    @router.post(
        "",
        response_model=CreateAccountResponse,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create a {noun}",
    )
    def create_account(
        payload: AccountPayload = Depends(decode_account_payload),
        repository: AccountRepository = Depends(get_repository),
    ) -> CreateAccountResponse:
        """Create an account; any client-supplied id is ignored."""
        command = CreateAccountCommand(
            email=payload.email,
            username=payload.username,
            password_hash=payload.password_hash,
        )
        result = CreateAccountUseCase(repository, entity_type).execute(command)
        return CreateAccountResponse(id=result.id)

    @router.get(
        "/{account_id}",
        response_model=AccountResponse,
        summary=f"Get a {noun}",
    )
    def get_account(
        account_id: str,
        repository: AccountRepository = Depends(get_repository),
    ) -> AccountResponse:
        result = GetAccountUseCase(repository).execute(GetAccountQuery(account_id))
        return _to_response(result)

    @router.put(
        "/{account_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary=f"Replace a {noun}",
    )
    def update_account(
        account_id: str,
        payload: AccountPayload = Depends(decode_account_payload),
        repository: AccountRepository = Depends(get_repository),
    ) -> Response:
        """Overwrite all fields; fields missing from the body become empty."""
        UpdateAccountUseCase(repository, entity_type).execute(
            _update_command(account_id, payload)
        )
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.patch(
        "/{account_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary=f"Partially update a {noun}",
    )
    def partially_update_account(
        account_id: str,
        payload: AccountPayload = Depends(decode_account_payload),
        repository: AccountRepository = Depends(get_repository),
    ) -> Response:
        """Overwrite only the non-empty fields of the body."""
        PartiallyUpdateAccountUseCase(repository, entity_type).execute(
            _update_command(account_id, payload)
        )
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete(
        "/{account_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary=f"Delete a {noun}",
    )
    def delete_account(
        account_id: str,
        repository: AccountRepository = Depends(get_repository),
    ) -> Response:
        DeleteAccountUseCase(repository).execute(DeleteAccountCommand(account_id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
