"""
Use case: Create an account.

Input: CreateAccountCommand (email, username, password_hash)
Output: CreateAccountResult (assigned id)
Side effects: Inserts one document.
Failure cases: MISSING_REQUIRED_FIELDS, INTERNAL_ERROR.
"""

import logging
from typing import Generic

from account_service.application.accounts.dtos import (
    CreateAccountCommand,
    CreateAccountResult,
)
from account_service.domain.accounts.errors import StoreError
from account_service.domain.accounts.ports import AccountRepository, AccountT
from account_service.shared.errors import AppError, ErrorKind

logger = logging.getLogger(__name__)


class CreateAccountUseCase(Generic[AccountT]):
    """Validates a new account and persists it.

    All three fields are required. Nothing is written when one
    of them is empty.
    """

    def __init__(
        self,
        repository: AccountRepository[AccountT],
        entity_type: type[AccountT],
    ) -> None:
        self._repository = repository
        self._entity_type = entity_type

    def execute(self, command: CreateAccountCommand) -> CreateAccountResult:
        """Run the create use case.

        Args:
            command: Fields of the new account.

        Returns:
            The identifier assigned by the store.

        Raises:
            AppError: MISSING_REQUIRED_FIELDS if a field is empty,
                INTERNAL_ERROR if the insert fails.
        """
        entity = self._entity_type(
            email=command.email,
            username=command.username,
            password_hash=command.password_hash,
        )
        missing = entity.missing_fields()
        if missing:
            raise AppError(ErrorKind.MISSING_REQUIRED_FIELDS, {"fields": missing})

        try:
            account_id = self._repository.create(entity)
        except StoreError as exc:
            logger.error("Failed to create %s: %s", self._entity_type.__name__, exc.message)
            raise AppError(ErrorKind.INTERNAL_ERROR, {"cause": exc.message}) from exc

        logger.info("Created %s with id %s", self._entity_type.__name__, account_id)
        return CreateAccountResult(id=account_id)
