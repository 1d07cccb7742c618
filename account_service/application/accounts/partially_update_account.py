"""
Use case: Merge non-empty fields into an account.

Input: UpdateAccountCommand (account_id + fields)
Output: None
Side effects: At most one update on the stored document.
Failure cases: INVALID_IDENTIFIER_FORMAT, INTERNAL_ERROR.
"""

import logging
from typing import Generic

from account_service.application.accounts.dtos import UpdateAccountCommand
from account_service.domain.accounts.errors import InvalidIdentifierError, StoreError
from account_service.domain.accounts.ports import AccountRepository, AccountT
from account_service.shared.errors import AppError, ErrorKind

logger = logging.getLogger(__name__)


class PartiallyUpdateAccountUseCase(Generic[AccountT]):
    """Overwrites only the fields present and non-empty in the command.

    Empty fields leave the stored value untouched.
    """

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
            self._repository.partially_update(entity)
        except InvalidIdentifierError as exc:
            raise AppError(
                ErrorKind.INVALID_IDENTIFIER_FORMAT, {"id": command.account_id}
            ) from exc
        except StoreError as exc:
            logger.error(
                "Failed to partially update account %s: %s",
                command.account_id,
                exc.message,
            )
            raise AppError(ErrorKind.INTERNAL_ERROR, {"cause": exc.message}) from exc

        logger.info(
            "Partially updated account %s (fields=%s)",
            command.account_id,
            sorted(entity.non_empty_fields()),
        )
