"""Field validation rules shared by the create and update paths.

All functions are pure and raise ``InvalidInputError`` on the first failure.
"""

import re
from typing import Any, Mapping, Optional

from customer_accounts.core.exceptions import InvalidInputError

# Intentionally loose: local@domain.tld with no whitespace or extra "@".
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

MAX_LENGTHS: dict[str, int] = {
    "first_name": 255,
    "last_name": 255,
    "email": 255,
    "phone_number": 20,
    "address": 500,
    "city": 100,
    "state": 100,
    "country": 100,
}

FIELD_LABELS: dict[str, str] = {
    "first_name": "First name",
    "last_name": "Last name",
    "email": "Email",
    "phone_number": "Phone number",
    "address": "Address",
    "city": "City",
    "state": "State",
    "country": "Country",
}

REQUIRED_ON_CREATE = ("first_name", "last_name", "email")


def is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


def validate_max_length(name: str, value: Optional[str]) -> None:
    limit = MAX_LENGTHS.get(name)
    if value is not None and limit is not None and len(value) > limit:
        raise InvalidInputError(
            f"{FIELD_LABELS[name]} must be at most {limit} characters",
            field=name,
        )


def validate_email(value: str) -> None:
    if not is_valid_email(value):
        raise InvalidInputError("Invalid email format", field="email")


def validate_create(data: Mapping[str, Any]) -> None:
    """Validate a create payload: names and email are mandatory."""
    for name in REQUIRED_ON_CREATE:
        if is_blank(data.get(name)):
            raise InvalidInputError(f"{FIELD_LABELS[name]} is required", field=name)

    validate_email(data["email"])

    for name in MAX_LENGTHS:
        validate_max_length(name, data.get(name))


def validate_update(data: Mapping[str, Any]) -> None:
    """Validate a sparse update payload. Only supplied fields are checked."""
    for name in REQUIRED_ON_CREATE:
        value = data.get(name)
        if value is not None and is_blank(value):
            raise InvalidInputError(f"{FIELD_LABELS[name]} cannot be empty", field=name)

    if data.get("email") is not None:
        validate_email(data["email"])

    for name in MAX_LENGTHS:
        validate_max_length(name, data.get(name))
