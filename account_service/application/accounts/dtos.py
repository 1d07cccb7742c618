"""
Data Transfer Objects for the accounts application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from account_service.domain.accounts.entities import Account


@dataclass(frozen=True)
class CreateAccountCommand:
    """Input DTO for creating an account.

    Attributes:
        email: Contact email. Required.
        username: Login name. Required.
        password_hash: Password hash. Required.
    """

    email: str
    username: str
    password_hash: str


@dataclass(frozen=True)
class GetAccountQuery:
    """Input DTO for reading one account by identifier."""

    account_id: str


@dataclass(frozen=True)
class UpdateAccountCommand:
    """Input DTO for full and partial updates.

    Empty strings mean "absent". A full update writes them as-is,
    a partial update skips them.

    Attributes:
        account_id: Identifier taken from the request path.
        email: New email, or empty.
        username: New username, or empty.
        password_hash: New password hash, or empty.
    """

    account_id: str
    email: str = ""
    username: str = ""
    password_hash: str = ""


@dataclass(frozen=True)
class DeleteAccountCommand:
    """Input DTO for deleting an account by identifier."""

    account_id: str


@dataclass(frozen=True)
class AccountResult:
    """Output DTO for a stored account."""

    id: str
    email: str
    username: str
    password_hash: str

    @classmethod
    def from_entity(cls, entity: Account) -> "AccountResult":
        return cls(
            id=entity.id,
            email=entity.email,
            username=entity.username,
            password_hash=entity.password_hash,
        )


@dataclass(frozen=True)
class CreateAccountResult:
    """Output DTO carrying the identifier assigned on creation."""

    id: str
