"""
Use case: Replace every mutable field of an account.

Input: UpdateAccountCommand (account_id + fields)
Output: None
Side effects: One update on the stored document.
Failure cases: INVALID_IDENTIFIER_FORMAT, INTERNAL_ERROR.

Fields absent from the payload are written as empty strings.
An unknown identifier is not distinguished from success.
"""

import logging
from typing import Generic

from account_service.application.accounts.dtos import UpdateAccountCommand
from account_service.domain.accounts.errors import InvalidIdentifierError, StoreError
from account_service.domain.accounts.ports import AccountRepository, AccountT
from account_service.shared.errors import AppError, ErrorKind

logger = logging.getLogger(__name__)


class UpdateAccountUseCase(Generic[AccountT]):
    """Overwrites email, username and password hash."""

    def __init__(
        self,
        repository: AccountRepository[AccountT],
        entity_type: type[AccountT],
    ) -> None:
        self._repository = repository
        self._entity_type = entity_type

    def execute(self, command: UpdateAccountCommand) -> None:
        entity = self._entity_type(
            id=command.account_id,
            email=command.email,
            username=command.username,
            password_hash=command.password_hash,
        )
        try:
            self._repository.update(entity)
        except InvalidIdentifierError as exc:
            raise AppError(
                ErrorKind.INVALID_IDENTIFIER_FORMAT, {"id": command.account_id}
            ) from exc
        except StoreError as exc:
            logger.error("Failed to update account %s: %s", command.account_id, exc.message)
            raise AppError(ErrorKind.INTERNAL_ERROR, {"cause": exc.message}) from exc

        logger.info("Updated account %s", command.account_id)
