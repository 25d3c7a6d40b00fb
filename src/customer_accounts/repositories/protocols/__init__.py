"""Repository protocol definitions (interfaces)."""

from customer_accounts.repositories.protocols.account_repo import AccountRepository

__all__ = [
    "AccountRepository",
]
