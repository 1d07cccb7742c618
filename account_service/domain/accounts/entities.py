"""
Domain entities for the accounts bounded context.

User and Admin are structurally identical records. They share
the Account base so a single repository contract covers both.
No framework imports and no IO operations.
"""

from dataclasses import dataclass

REQUIRED_FIELDS = ("email", "username", "password_hash")


@dataclass
class Account:
    """A stored account record.

    Attributes:
        id: Opaque identifier assigned by the store on creation.
            Empty until the record has been persisted.
        email: Contact email address.
        username: Login name.
        password_hash: Password hash supplied by the client. The
            service stores it as-is and never hashes it.
    """

    id: str = ""
    email: str = ""
    username: str = ""
    password_hash: str = ""

    def missing_fields(self) -> list[str]:
        """Return the names of required fields that are empty."""
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]

    def mutable_fields(self) -> dict[str, str]:
        """Return every field except the identifier."""
        return {name: getattr(self, name) for name in REQUIRED_FIELDS}

    def non_empty_fields(self) -> dict[str, str]:
        """Return the mutable fields that carry a value."""
        return {name: value for name, value in self.mutable_fields().items() if value}


@dataclass
class User(Account):
    """A regular user account."""


@dataclass
class Admin(Account):
    """An administrator account."""
