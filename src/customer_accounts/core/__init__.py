"""Core utilities and shared functionality."""

from customer_accounts.core.timezone import (
    now_utc,
    to_utc,
    UTC,
)
from customer_accounts.core.exceptions import (
    AppError,
    ErrorKind,
    ERROR_STATUS_CODES,
    INTERNAL_ERROR_MESSAGE,
    InvalidInputError,
    NotFoundError,
    DuplicateEmailError,
)

__all__ = [
    "now_utc",
    "to_utc",
    "UTC",
    "AppError",
    "ErrorKind",
    "ERROR_STATUS_CODES",
    "INTERNAL_ERROR_MESSAGE",
    "InvalidInputError",
    "NotFoundError",
    "DuplicateEmailError",
]
