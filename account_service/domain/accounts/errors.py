"""
Storage errors for the accounts bounded context.

Raised by repository adapters at the port boundary and translated
into application failure kinds by the use cases.
No framework imports allowed.
"""


class AccountRepositoryError(Exception):
    """Base error for all account repository failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class EntityNotFoundError(AccountRepositoryError):
    """Raised when no document matches the requested identifier."""

    def __init__(self, entity_id: str) -> None:
        super().__init__(f"No document found for id: {entity_id}")
        self.entity_id = entity_id


class InvalidIdentifierError(AccountRepositoryError):
    """Raised when an identifier cannot be parsed into the store's format."""

    def __init__(self, entity_id: str) -> None:
        super().__init__(f"Invalid identifier format: {entity_id!r}")
        self.entity_id = entity_id


class StoreError(AccountRepositoryError):
    """Raised when the document store rejects or fails an operation."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"Store operation '{operation}' failed: {reason}")
        self.operation = operation
        self.reason = reason
