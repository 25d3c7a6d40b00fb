"""Repository layer - data access abstractions and implementations."""

from customer_accounts.repositories.protocols import AccountRepository

__all__ = [
    "AccountRepository",
]
