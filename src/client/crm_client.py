"""CRM HTTP Client for consuming the CRM API."""
from typing import Optional
from uuid import UUID

from httpx import AsyncClient, Response

from src.client.schemas import (
    CreateCustomerRequest,
    CustomerChanges,
    CustomerCountResponse,
    CustomerEnvelope,
    CustomerListResponse,
    CustomerResponse,
    MessageResponse,
)

CUSTOMERS_PATH = "/api/customers"


class CrmClient:
    """HTTP client for interacting with the CRM API."""

    def __init__(self, base_url: str, client: Optional[AsyncClient] = None):
        """
        Initialize the CRM client.

        Args:
            base_url: Base URL of the CRM API (e.g., "http://localhost:3000")
            client: Optional httpx.AsyncClient instance. If not provided, a new one will be created.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client:
            self._client = AsyncClient(base_url=self.base_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._client:
            await self._client.aclose()

    @property
    def client(self) -> AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client

    async def list_customers(
        self,
        page: int = 1,
        limit: Optional[int] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
        search: Optional[str] = None,
    ) -> CustomerListResponse:
        """
        List customers page by page.

        Args:
            page: 1-based page number
            limit: Page size (server default when omitted)
            sort_by: API field name to sort by, e.g. "lastName"
            order: "asc" or "desc"
            search: Full-text search terms

        Returns:
            The page of customers with pagination metadata

        Raises:
            httpx.HTTPStatusError: If the request fails (400 for invalid paging or sort values)
        """
        params = {"page": page, "limit": limit, "sortBy": sort_by, "order": order, "search": search}
        response: Response = await self.client.get(
            CUSTOMERS_PATH,
            params={key: value for key, value in params.items() if value is not None},
        )
        response.raise_for_status()
        return CustomerListResponse.model_validate(response.json())

    async def count_customers(self) -> int:
        """Get the total number of customers."""
        response: Response = await self.client.get(f"{CUSTOMERS_PATH}/count")
        response.raise_for_status()
        return CustomerCountResponse.model_validate(response.json()).data.count

    async def get_customer(self, customer_id: UUID) -> CustomerResponse:
        """
        Get a customer by ID.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.get(f"{CUSTOMERS_PATH}/{customer_id}")
        response.raise_for_status()
        return CustomerEnvelope.model_validate(response.json()).data

    async def create_customer(self, request: CreateCustomerRequest) -> CustomerResponse:
        """
        Create a new customer.

        Raises:
            httpx.HTTPStatusError: If the request fails (409 if the email is taken)
        """
        response: Response = await self.client.post(
            CUSTOMERS_PATH,
            json=request.model_dump(mode="json", by_alias=True, exclude_unset=True),
        )
        response.raise_for_status()
        return CustomerEnvelope.model_validate(response.json()).data

    async def update_customer(self, customer_id: UUID, changes: CustomerChanges) -> CustomerResponse:
        """
        Update the fields set on ``changes``; unset fields are left untouched.

        Raises:
            httpx.HTTPStatusError: If the request fails (404 unknown id, 409 email taken)
        """
        response: Response = await self.client.put(
            f"{CUSTOMERS_PATH}/{customer_id}",
            json=changes.model_dump(mode="json", by_alias=True, exclude_unset=True),
        )
        response.raise_for_status()
        return CustomerEnvelope.model_validate(response.json()).data

    async def delete_customer(self, customer_id: UUID) -> MessageResponse:
        """
        Delete a customer.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.delete(f"{CUSTOMERS_PATH}/{customer_id}")
        response.raise_for_status()
        return MessageResponse.model_validate(response.json())
