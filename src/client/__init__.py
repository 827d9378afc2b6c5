"""Python client for the CRM API."""
from src.client.crm_client import CrmClient
from src.client.schemas import (
    CreateCustomerRequest,
    CustomerChanges,
    CustomerListResponse,
    CustomerResponse,
    UpdateCustomerRequest,
)

__all__ = [
    "CrmClient",
    "CreateCustomerRequest",
    "CustomerChanges",
    "CustomerListResponse",
    "CustomerResponse",
    "UpdateCustomerRequest",
]
