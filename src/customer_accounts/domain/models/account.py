"""Customer account domain model."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Optional

# Fields an update may touch; account_id and created_at are fixed at creation.
MUTABLE_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone_number",
    "address",
    "city",
    "state",
    "country",
)


@dataclass(frozen=True)
class Account:
    """
    Customer account record.

    Instances are immutable; updates produce a new instance via ``merge``.
    """

    account_id: str
    first_name: str
    last_name: str
    email: str
    phone_number: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    created_at: Optional[datetime] = field(default=None)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def update(self, **overrides: Any) -> "Account":
        """Return a new account with the supplied fields replaced."""
        return merge(self, overrides)


def merge(existing: Account, overrides: dict[str, Any]) -> Account:
    """
    Merge a sparse set of overrides onto an existing account.

    Only mutable fields with a non-None override are applied; everything
    else, including account_id and created_at, is carried over unchanged.
    The existing instance is never modified.
    """
    changes = {
        name: overrides[name]
        for name in MUTABLE_FIELDS
        if overrides.get(name) is not None
    }
    return replace(existing, **changes)
