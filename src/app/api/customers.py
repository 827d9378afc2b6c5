"""Customer API endpoints."""
from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, status
from dependency_injector.wiring import Provide, inject
from pydantic import BaseModel

from src.app.containers import Container
from src.app.config import Settings
from src.app.core.domain.models import CustomerListQuery, CustomerSortField, SortOrder
from src.app.core.services.customer_service import CustomerService
from src.client.schemas import (
    CreateCustomerRequest,
    CustomerChanges,
    CustomerCount,
    CustomerCountResponse,
    CustomerEnvelope,
    CustomerListResponse,
    MessageResponse,
)
from src.app.api.mappers import to_customer_list_response, to_customer_response

router = APIRouter(prefix="/customers", tags=["customers"])


def json_body(model: type[BaseModel]) -> dict[str, Any]:
    """OpenAPI request body for a route that takes a raw object and validates it in the service."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema(by_alias=True)}},
        }
    }


@router.get("", response_model=CustomerListResponse)
@inject
async def list_customers(
    page: Annotated[int, Query(ge=1, description="Page number")] = 1,
    limit: Annotated[int | None, Query(ge=1, description="Items per page")] = None,
    sort_by: Annotated[CustomerSortField, Query(alias="sortBy", description="Field to sort by")] = CustomerSortField.CREATED_AT,
    order: Annotated[SortOrder, Query(description="Sort order")] = SortOrder.DESC,
    search: Annotated[str | None, Query(description="Full-text search across all customer fields")] = None,
    service: CustomerService = Depends(Provide[Container.customer_service]),
    config: Settings = Depends(Provide[Container.config]),
) -> CustomerListResponse:
    """
    List customers with pagination, sorting and optional full-text search.

    Args:
        page: 1-based page number (default: 1)
        limit: Page size (default from config, capped by config)
        sort_by: Field to sort by (default: createdAt)
        order: asc or desc (default: desc)
        search: Optional search terms matched against every text field

    Returns:
        The requested page of customers and its pagination metadata
    """
    # Use config default if limit not specified
    effective_limit = limit if limit is not None else config.pagination.default_limit

    query = CustomerListQuery(page=page, limit=effective_limit, sort_by=sort_by, order=order, search=search)
    result = await service.list_customers(query)

    return to_customer_list_response(result)


@router.get("/count", response_model=CustomerCountResponse)
@inject
async def count_customers(
    service: CustomerService = Depends(Provide[Container.customer_service]),
) -> CustomerCountResponse:
    """Get the total number of customers."""
    count = await service.count_customers()
    return CustomerCountResponse(data=CustomerCount(count=count))


@router.get("/{customer_id}", response_model=CustomerEnvelope)
@inject
async def get_customer(
    customer_id: UUID,
    service: CustomerService = Depends(Provide[Container.customer_service]),
) -> CustomerEnvelope:
    """Get a customer by ID."""
    customer = await service.get_customer(customer_id)
    return CustomerEnvelope(data=to_customer_response(customer))


@router.post(
    "",
    response_model=CustomerEnvelope,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=json_body(CreateCustomerRequest),
)
@inject
async def create_customer(
    payload: Annotated[dict[str, Any], Body(description="Customer data")],
    service: CustomerService = Depends(Provide[Container.customer_service]),
) -> CustomerEnvelope:
    """
    Create a new customer.

    The payload is validated by the service so that field errors, the email
    uniqueness check and persistence happen in one defined order.
    """
    customer = await service.create_customer(payload)
    return CustomerEnvelope(data=to_customer_response(customer))


@router.put("/{customer_id}", response_model=CustomerEnvelope, openapi_extra=json_body(CustomerChanges))
@inject
async def update_customer(
    customer_id: UUID,
    payload: Annotated[dict[str, Any], Body(description="Fields to change")],
    service: CustomerService = Depends(Provide[Container.customer_service]),
) -> CustomerEnvelope:
    """Update the supplied fields of an existing customer."""
    customer = await service.update_customer(customer_id, payload)
    return CustomerEnvelope(data=to_customer_response(customer))


@router.delete("/{customer_id}", response_model=MessageResponse)
@inject
async def delete_customer(
    customer_id: UUID,
    service: CustomerService = Depends(Provide[Container.customer_service]),
) -> MessageResponse:
    """Delete a customer."""
    await service.delete_customer(customer_id)
    return MessageResponse(message="Customer deleted successfully")
