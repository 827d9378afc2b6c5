"""Mappers for converting between domain models and API schemas."""
from src.app.core.domain.models import Customer, Page, PaginationMeta
from src.client.schemas import CustomerListResponse, CustomerResponse, PaginationMetaResponse


def to_customer_response(customer: Customer) -> CustomerResponse:
    """
    Convert a Customer domain model to CustomerResponse API schema.

    Args:
        customer: Domain model

    Returns:
        API response schema
    """
    return CustomerResponse(
        id=customer.id,
        first_name=customer.first_name,
        last_name=customer.last_name,
        email=customer.email,
        phone_number=customer.phone_number,
        address=customer.address,
        city=customer.city,
        state=customer.state,
        country=customer.country,
        created_at=customer.created_at,
        updated_at=customer.updated_at,
    )


def to_pagination_meta_response(meta: PaginationMeta) -> PaginationMetaResponse:
    return PaginationMetaResponse(
        page=meta.page,
        limit=meta.limit,
        total=meta.total,
        total_pages=meta.total_pages,
        has_next_page=meta.has_next_page,
        has_previous_page=meta.has_previous_page,
    )


def to_customer_list_response(page: Page[Customer]) -> CustomerListResponse:
    return CustomerListResponse(
        data=[to_customer_response(customer) for customer in page.data],
        meta=to_pagination_meta_response(page.meta),
    )
