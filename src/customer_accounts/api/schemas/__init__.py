"""API request/response schemas."""

from customer_accounts.api.schemas.account import (
    AccountCreateRequest,
    AccountUpdateRequest,
    AccountResponse,
    ErrorResponse,
)

__all__ = [
    "AccountCreateRequest",
    "AccountUpdateRequest",
    "AccountResponse",
    "ErrorResponse",
]
