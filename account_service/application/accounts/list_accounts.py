"""
Use case: List every account of one collection.

Input: None
Output: list[AccountResult] in store order
Side effects: None (read-only query).
Failure cases: INTERNAL_ERROR.
"""

import logging
from typing import Generic

from account_service.application.accounts.dtos import AccountResult
from account_service.domain.accounts.errors import StoreError
from account_service.domain.accounts.ports import AccountRepository, AccountT
from account_service.shared.errors import AppError, ErrorKind

logger = logging.getLogger(__name__)


class ListAccountsUseCase(Generic[AccountT]):
    """Returns all stored accounts of one kind."""

    def __init__(self, repository: AccountRepository[AccountT]) -> None:
        self._repository = repository

    def execute(self) -> list[AccountResult]:
        """Run the list use case.

        Raises:
            AppError: INTERNAL_ERROR if the store read fails.
        """
        try:
            accounts = self._repository.get_all()
        except StoreError as exc:
            logger.error("Failed to list accounts: %s", exc.message)
            raise AppError(ErrorKind.INTERNAL_ERROR, {"cause": exc.message}) from exc

        logger.info("Listed %d accounts", len(accounts))
        return [AccountResult.from_entity(account) for account in accounts]
