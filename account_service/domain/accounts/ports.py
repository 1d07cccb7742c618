"""
Port interface for the accounts bounded context.

A single repository contract, generic over the account entity type.
Infrastructure adapters implement it once and are instantiated per
collection (users, admins). The domain never depends on the adapter.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from account_service.domain.accounts.entities import Account

AccountT = TypeVar("AccountT", bound=Account)


class AccountRepository(ABC, Generic[AccountT]):
    """Port for persisting and retrieving account records.

    Identifiers cross this boundary as strings only; the store's
    native identifier type never leaks to callers.
    """

    @abstractmethod
    def get_all(self) -> list[AccountT]:
        """Return every stored record in store order.

        Raises:
            StoreError: If the query or cursor iteration fails.
        """
        raise NotImplementedError

    @abstractmethod
    def create(self, entity: AccountT) -> str:
        """Insert a new record and return its assigned identifier.

        The entity's own id is ignored.

        Raises:
            StoreError: If the insert fails or the assigned id is unusable.
        """
        raise NotImplementedError

    @abstractmethod
    def find_one(self, entity_id: str) -> AccountT:
        """Return the record stored under entity_id.

        Raises:
            InvalidIdentifierError: If entity_id is not a valid store id.
            EntityNotFoundError: If no record matches.
            StoreError: On any other store failure.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, entity: AccountT) -> None:
        """Overwrite every mutable field of the record at entity.id."""
        raise NotImplementedError

    @abstractmethod
    def partially_update(self, entity: AccountT) -> None:
        """Overwrite only the non-empty fields of the record at entity.id."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, entity_id: str) -> None:
        """Remove the record at entity_id. Missing records are not an error."""
        raise NotImplementedError
