"""
Use case: Read one account by identifier.

Input: GetAccountQuery (account_id)
Output: AccountResult
Side effects: None (read-only query).
Failure cases: NOT_FOUND, INTERNAL_ERROR.
"""

import logging
from typing import Generic

from account_service.application.accounts.dtos import AccountResult, GetAccountQuery
from account_service.domain.accounts.errors import (
    EntityNotFoundError,
    InvalidIdentifierError,
    StoreError,
)
from account_service.domain.accounts.ports import AccountRepository, AccountT
from account_service.shared.errors import AppError, ErrorKind

logger = logging.getLogger(__name__)


class GetAccountUseCase(Generic[AccountT]):
    """Looks up a single account.

    An identifier the store cannot parse can never match a record,
    so it is reported as NOT_FOUND like a missing record.
    """

    def __init__(self, repository: AccountRepository[AccountT]) -> None:
        self._repository = repository

    def execute(self, query: GetAccountQuery) -> AccountResult:
        """Run the get use case.

        Raises:
            AppError: NOT_FOUND if the id is unknown or malformed,
                INTERNAL_ERROR on any other store failure.
        """
        try:
            account = self._repository.find_one(query.account_id)
        except (EntityNotFoundError, InvalidIdentifierError) as exc:
            logger.warning("Account %s not found: %s", query.account_id, exc.message)
            raise AppError(ErrorKind.NOT_FOUND, {"id": query.account_id}) from exc
        except StoreError as exc:
            logger.error("Failed to find account %s: %s", query.account_id, exc.message)
            raise AppError(ErrorKind.INTERNAL_ERROR, {"cause": exc.message}) from exc

        return AccountResult.from_entity(account)
