"""Application-level exceptions."""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Domain error kinds surfaced to the request layer."""

    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"


# HTTP status for each error kind; anything else is a 500.
ERROR_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.DUPLICATE_EMAIL: 409,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: ErrorKind):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return ERROR_STATUS_CODES.get(self.code, 500)


class InvalidInputError(AppError):
    """Raised when a field is missing, empty, too long or badly formatted."""

    def __init__(self, reason: str, field: Optional[str] = None):
        self.reason = reason
        self.field = field
        super().__init__(
            f"Invalid customer account: {reason}",
            code=ErrorKind.INVALID_INPUT,
        )


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, identifier: str, resource: str = "Customer account"):
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f"{resource} with ID {identifier} not found",
            code=ErrorKind.NOT_FOUND,
        )


class DuplicateEmailError(AppError):
    """Raised when an email is already used by another account."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(
            f"Customer account with email {email} already exists",
            code=ErrorKind.DUPLICATE_EMAIL,
        )
