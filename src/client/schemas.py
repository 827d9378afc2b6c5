"""API schemas for customer requests and responses.

Payloads use camelCase on the wire; the models expose snake_case attributes
and accept either spelling on input.
"""
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

API_MODEL_CONFIG = {"alias_generator": to_camel, "populate_by_name": True, "from_attributes": True}

OPTIONAL_TEXT_FIELDS = ("phone_number", "address", "city", "state", "country")


def _strip_name(v: str | None) -> str:
    if v is None:
        raise ValueError("Field cannot be null")
    if not v.strip():
        raise ValueError("Field cannot be blank or only whitespace")
    return v.strip()


def _blank_to_none(v):
    if isinstance(v, str):
        return v.strip() or None
    return v


class CreateCustomerRequest(BaseModel):
    """Request schema for creating a new customer."""
    first_name: str = Field(..., min_length=1, max_length=100, description="First name is required")
    last_name: str = Field(..., min_length=1, max_length=100, description="Last name is required")
    email: EmailStr = Field(..., description="Email address is required")
    phone_number: str | None = Field(default=None, max_length=50)
    address: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=100)
    country: str | None = Field(default=None, max_length=100)

    model_config = API_MODEL_CONFIG

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure name fields are not just whitespace."""
        return _strip_name(v)

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def normalize_optional(cls, v):
        """Empty optional fields are stored as no value."""
        return _blank_to_none(v)


class CustomerChanges(BaseModel):
    """
    Request schema for the body of a customer update.

    Every field is optional; only the fields present in the payload are
    applied. Required customer fields may be omitted but not sent as null.
    """
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = None
    phone_number: str | None = Field(default=None, max_length=50)
    address: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=100)
    country: str | None = Field(default=None, max_length=100)

    model_config = API_MODEL_CONFIG

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_not_blank(cls, v: str | None) -> str:
        return _strip_name(v)

    @field_validator("email")
    @classmethod
    def validate_email_not_null(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def normalize_optional(cls, v):
        return _blank_to_none(v)


class UpdateCustomerRequest(CustomerChanges):
    """Validated update: the changes plus the target id taken from the path."""
    id: UUID = Field(..., description="ID of the customer being updated")


class CustomerResponse(BaseModel):
    """Response schema for customer data returned by the API."""
    id: UUID
    first_name: str
    last_name: str
    email: EmailStr
    phone_number: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = API_MODEL_CONFIG


class PaginationMetaResponse(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    model_config = API_MODEL_CONFIG


class CustomerEnvelope(BaseModel):
    """Response envelope wrapping a single customer."""
    success: bool = True
    data: CustomerResponse

    model_config = API_MODEL_CONFIG


class CustomerListResponse(BaseModel):
    """Response envelope for a paginated list of customers."""
    success: bool = True
    data: list[CustomerResponse]
    meta: PaginationMetaResponse

    model_config = API_MODEL_CONFIG


class CustomerCount(BaseModel):
    count: int


class CustomerCountResponse(BaseModel):
    success: bool = True
    data: CustomerCount


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class FieldErrorResponse(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Envelope returned for every failed request."""
    success: bool = False
    error: str = Field(..., description="Short error label, e.g. 'Not Found'")
    message: str
    details: list[FieldErrorResponse] | None = None
