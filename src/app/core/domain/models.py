"""Domain models used in business logic."""
import math
import uuid
from datetime import datetime, UTC
from enum import StrEnum
from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator


class Customer(BaseModel):
    """Domain model for Customer used in business logic."""
    id: UUID = Field(default_factory=uuid.uuid4, description="Unique customer ID")
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr = Field(..., description="Unique email address")
    phone_number: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config = {"from_attributes": True}


# =============================================================================
# Listing
# =============================================================================

class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


class CustomerSortField(StrEnum):
    """
    Fields a customer listing may be ordered by, in API (camelCase) naming.

    Only these values are accepted for ``sortBy``; the repository translates
    each one to a storage column through a fixed mapping.
    """
    ID = "id"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    PHONE_NUMBER = "phoneNumber"
    ADDRESS = "address"
    CITY = "city"
    STATE = "state"
    COUNTRY = "country"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"


class CustomerListQuery(BaseModel):
    """Request model for a paginated, optionally searched customer listing."""
    page: int = Field(default=1, ge=1, description="1-based page number")
    limit: int = Field(default=10, ge=1, description="Page size")
    sort_by: CustomerSortField = Field(default=CustomerSortField.CREATED_AT)
    order: SortOrder = Field(default=SortOrder.DESC)
    search: str | None = Field(default=None, description="Full-text search across all textual fields")

    @field_validator("search")
    @classmethod
    def blank_search_is_none(cls, v: str | None) -> str | None:
        """A blank search term means no search."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PaginationMeta(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "PaginationMeta":
        """
        Derive page metadata from the requested window and the matching row count.

        Args:
            page: Requested 1-based page (may lie beyond the last page)
            limit: Page size, at least 1
            total: Number of rows matching the query

        Returns:
            PaginationMeta with total_pages = ceil(total / limit)
        """
        if limit < 1:
            raise ValueError("limit must be at least 1")
        total_pages = math.ceil(total / limit)
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next_page=page < total_pages,
            has_previous_page=page > 1,
        )


T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One page of results plus its pagination metadata."""
    data: list[T]
    meta: PaginationMeta
