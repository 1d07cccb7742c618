"""
Tests for the accounts domain layer.

Tests entities and storage errors in isolation.
No external dependencies or IO required.
"""

from account_service.domain.accounts.entities import Account, Admin, User
from account_service.domain.accounts.errors import (
    AccountRepositoryError,
    EntityNotFoundError,
    InvalidIdentifierError,
    StoreError,
)


class TestAccountEntity:
    """Tests for the Account entity and its subclasses."""

    def test_new_account_has_empty_id(self) -> None:
        """An account that was never stored has no identifier."""
        assert User(email="a@b.c", username="ann", password_hash="h").id == ""

    def test_complete_account_has_no_missing_fields(self) -> None:
        account = Admin(email="a@b.c", username="ann", password_hash="h")
        assert account.missing_fields() == []

    def test_missing_fields_lists_every_empty_required_field(self) -> None:
        account = User(email="a@b.c")
        assert account.missing_fields() == ["username", "password_hash"]

    def test_mutable_fields_exclude_id(self) -> None:
        account = User(id="x", email="e", username="u", password_hash="p")
        assert account.mutable_fields() == {
            "email": "e",
            "username": "u",
            "password_hash": "p",
        }

    def test_non_empty_fields_skip_blank_values(self) -> None:
        account = User(id="x", email="e", username="", password_hash="")
        assert account.non_empty_fields() == {"email": "e"}

    def test_user_and_admin_share_the_account_shape(self) -> None:
        assert issubclass(User, Account)
        assert issubclass(Admin, Account)
        assert User(email="e") != Admin(email="e")


class TestStorageErrors:
    """Tests for storage error classes."""

    def test_not_found_error_carries_id(self) -> None:
        err = EntityNotFoundError("abc")
        assert err.entity_id == "abc"
        assert "abc" in err.message

    def test_invalid_identifier_error_carries_id(self) -> None:
        err = InvalidIdentifierError("not-hex")
        assert err.entity_id == "not-hex"
        assert "not-hex" in str(err)

    def test_store_error_message_names_operation(self) -> None:
        err = StoreError("insert_one", "connection reset")
        assert err.operation == "insert_one"
        assert err.reason == "connection reset"
        assert "insert_one" in err.message

    def test_all_errors_share_a_base(self) -> None:
        for err in (
            EntityNotFoundError("a"),
            InvalidIdentifierError("b"),
            StoreError("c", "d"),
        ):
            assert isinstance(err, AccountRepositoryError)
