"""
Unit tests for account field validation.
"""

import pytest

from customer_accounts.core.exceptions import ErrorKind, InvalidInputError
from customer_accounts.domain.validation import (
    is_valid_email,
    validate_create,
    validate_update,
)


def valid_payload(**overrides):
    payload = {
        "first_name": "John",
        "last_name": "Doe",
        "email": "john.doe@example.com",
    }
    payload.update(overrides)
    return payload


class TestEmailPattern:

    @pytest.mark.parametrize(
        "email",
        ["john.doe@example.com", "a@b.co", "first+tag@sub.domain.org"],
    )
    def test_accepts_simple_shape(self, email):
        assert is_valid_email(email)

    @pytest.mark.parametrize(
        "email",
        [
            "invalid-email",
            "no-at.example.com",
            "missing-tld@example",
            "two@@example.com",
            "space in@example.com",
            "@example.com",
            "user@.com",
            "john.doe@example.com\n",
            "\njohn.doe@example.com",
        ],
    )
    def test_rejects_malformed(self, email):
        assert not is_valid_email(email)


class TestValidateCreate:

    def test_valid_payload_passes(self):
        validate_create(valid_payload(city="Boston"))

    @pytest.mark.parametrize(
        "field, message",
        [
            ("first_name", "First name is required"),
            ("last_name", "Last name is required"),
            ("email", "Email is required"),
        ],
    )
    def test_missing_required_field(self, field, message):
        payload = valid_payload()
        del payload[field]

        with pytest.raises(InvalidInputError) as exc_info:
            validate_create(payload)

        assert exc_info.value.field == field
        assert exc_info.value.reason == message
        assert exc_info.value.code == ErrorKind.INVALID_INPUT

    @pytest.mark.parametrize("field", ["first_name", "last_name", "email"])
    def test_whitespace_only_required_field(self, field):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_create(valid_payload(**{field: "   "}))

        assert exc_info.value.field == field

    def test_malformed_email(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_create(valid_payload(email="invalid-email"))

        assert exc_info.value.reason == "Invalid email format"
        assert exc_info.value.message == "Invalid customer account: Invalid email format"

    def test_email_with_trailing_newline(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_create(valid_payload(email="john.doe@example.com\n"))

        assert exc_info.value.field == "email"
        assert exc_info.value.reason == "Invalid email format"

    @pytest.mark.parametrize(
        "field, limit",
        [
            ("first_name", 255),
            ("phone_number", 20),
            ("address", 500),
            ("city", 100),
            ("state", 100),
            ("country", 100),
        ],
    )
    def test_field_too_long(self, field, limit):
        validate_create(valid_payload(**{field: "x" * limit}))

        with pytest.raises(InvalidInputError) as exc_info:
            validate_create(valid_payload(**{field: "x" * (limit + 1)}))

        assert exc_info.value.field == field


class TestValidateUpdate:

    def test_empty_payload_passes(self):
        validate_update({})

    def test_only_supplied_fields_are_checked(self):
        validate_update({"city": "Los Angeles"})

    @pytest.mark.parametrize(
        "field, message",
        [
            ("first_name", "First name cannot be empty"),
            ("last_name", "Last name cannot be empty"),
            ("email", "Email cannot be empty"),
        ],
    )
    def test_empty_supplied_field(self, field, message):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_update({field: " "})

        assert exc_info.value.reason == message

    def test_malformed_email(self):
        with pytest.raises(InvalidInputError):
            validate_update({"email": "invalid-email"})

    def test_email_with_trailing_newline(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_update({"email": "a@b.co\n"})

        assert exc_info.value.reason == "Invalid email format"

    def test_too_long_phone_number(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_update({"phone_number": "1" * 21})

        assert exc_info.value.field == "phone_number"
