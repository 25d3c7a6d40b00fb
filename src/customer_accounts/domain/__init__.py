"""Domain layer - pure business models with no external dependencies."""

from customer_accounts.domain.models import Account, MUTABLE_FIELDS, merge
from customer_accounts.domain.validation import validate_create, validate_update

__all__ = [
    "Account",
    "MUTABLE_FIELDS",
    "merge",
    "validate_create",
    "validate_update",
]
