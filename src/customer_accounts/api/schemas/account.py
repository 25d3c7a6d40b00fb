"""Pydantic schemas for customer account endpoints.

Content rules (required fields, email shape, lengths) live in the domain
validation module; these schemas only fix the shape of the payload.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AccountCreateRequest(BaseModel):
    """Request schema for creating a customer account."""

    model_config = ConfigDict(extra="forbid")

    first_name: Optional[str] = Field(default=None, description="Customer first name", examples=["John"])
    last_name: Optional[str] = Field(default=None, description="Customer last name", examples=["Doe"])
    email: Optional[str] = Field(
        default=None,
        description="Customer email address (must be unique)",
        examples=["john.doe@example.com"],
    )
    phone_number: Optional[str] = Field(default=None, examples=["1234567890"])
    address: Optional[str] = Field(default=None, examples=["123 Main St"])
    city: Optional[str] = Field(default=None, examples=["New York"])
    state: Optional[str] = Field(default=None, examples=["NY"])
    country: Optional[str] = Field(default=None, examples=["USA"])


class AccountUpdateRequest(BaseModel):
    """Request schema for a partial update. Omitted fields are left unchanged."""

    model_config = ConfigDict(extra="forbid")

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None


class AccountResponse(BaseModel):
    """Response schema for a single customer account."""

    model_config = ConfigDict(from_attributes=True)

    account_id: str
    first_name: str
    last_name: str
    full_name: str
    email: str
    phone_number: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    created_at: datetime


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    error: str
    message: str
    timestamp: datetime
