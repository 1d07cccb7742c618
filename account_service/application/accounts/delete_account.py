"""
Use case: Delete an account by identifier.

Input: DeleteAccountCommand (account_id)
Output: None
Side effects: Removes at most one document.
Failure cases: INVALID_IDENTIFIER_FORMAT, INTERNAL_ERROR.

Deleting an identifier that matches nothing succeeds, so repeated
deletes of the same id behave identically.
"""

import logging
from typing import Generic

from account_service.application.accounts.dtos import DeleteAccountCommand
from account_service.domain.accounts.errors import InvalidIdentifierError, StoreError
from account_service.domain.accounts.ports import AccountRepository, AccountT
from account_service.shared.errors import AppError, ErrorKind

logger = logging.getLogger(__name__)


class DeleteAccountUseCase(Generic[AccountT]):
    """Removes an account without checking that it exists first."""

    def __init__(self, repository: AccountRepository[AccountT]) -> None:
        self._repository = repository

    def execute(self, command: DeleteAccountCommand) -> None:
        try:
            self._repository.delete(command.account_id)
        except InvalidIdentifierError as exc:
            logger.warning("Refusing to delete malformed id %r", command.account_id)
            raise AppError(
                ErrorKind.INVALID_IDENTIFIER_FORMAT, {"id": command.account_id}
            ) from exc
        except StoreError as exc:
            logger.error("Failed to delete account %s: %s", command.account_id, exc.message)
            raise AppError(ErrorKind.INTERNAL_ERROR, {"cause": exc.message}) from exc

        logger.info("Deleted account %s", command.account_id)
