"""Account repository protocol."""

from typing import Protocol, Optional

from customer_accounts.domain.models import Account


class AccountRepository(Protocol):
    """
    Interface for account data access.

    Implementations must enforce email uniqueness at write time and raise
    ``DuplicateEmailError`` when a write would violate it.
    """

    def create(self, account: Account) -> Account:
        """Persist a new account."""
        ...

    def get_by_id(self, account_id: str) -> Optional[Account]:
        """Retrieve account by ID."""
        ...

    def get_by_email(self, email: str) -> Optional[Account]:
        """Retrieve account by email."""
        ...

    def list_all(self) -> list[Account]:
        """List all accounts, most recently created first."""
        ...

    def update(self, account_id: str, account: Account) -> Account:
        """Replace the mutable fields of an existing account. Raises NotFoundError if absent."""
        ...

    def delete(self, account_id: str) -> None:
        """Delete an account (hard delete). Raises NotFoundError if absent."""
        ...
