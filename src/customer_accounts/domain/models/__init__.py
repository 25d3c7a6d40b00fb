"""Domain models package."""

from customer_accounts.domain.models.account import Account, MUTABLE_FIELDS, merge

__all__ = [
    "Account",
    "MUTABLE_FIELDS",
    "merge",
]
