"""Writes from another request landing between a service's read and its own write."""
import asyncio

import pytest

from src.app.core.domain.models import Customer
from src.shared.exceptions import EntityNotFound

CUSTOMERS = "/api/customers"


def run_after_read(monkeypatch, service, interleaved_write):
    """Make ``interleaved_write`` run right after the service's existence check."""
    original_get_by_id = service.repository.get_by_id

    async def get_by_id(customer_id):
        customer = await original_get_by_id(customer_id)
        await interleaved_write(customer_id)
        return customer

    monkeypatch.setattr(service.repository, "get_by_id", get_by_id)


@pytest.mark.asyncio
async def test_update_keeps_field_changed_by_another_request(
    customer_service, customer_repository, unit_of_work, monkeypatch
):
    # Arrange
    created = await customer_service.create_customer(
        {"firstName": "Ann", "lastName": "Lee", "email": "ann@x.com", "city": "Oslo", "country": "Norway"}
    )

    async def move_to_sweden(customer_id):
        async with unit_of_work:
            await unit_of_work.update_by_id(Customer, customer_id, {"country": "Sweden"})

    run_after_read(monkeypatch, customer_service, move_to_sweden)

    # Act
    updated = await customer_service.update_customer(created.id, {"city": "Bergen"})

    # Assert
    assert updated.city == "Bergen"
    assert updated.country == "Sweden"
    stored = await customer_repository.get_by_id(created.id)
    assert (stored.city, stored.country) == ("Bergen", "Sweden")


@pytest.mark.asyncio
async def test_update_of_row_deleted_by_another_request_is_not_found(customer_service, unit_of_work, monkeypatch):
    # Arrange
    created = await customer_service.create_customer({"firstName": "Ann", "lastName": "Lee", "email": "ann@x.com"})

    async def delete_row(customer_id):
        async with unit_of_work:
            await unit_of_work.delete_by_id(Customer, customer_id)

    run_after_read(monkeypatch, customer_service, delete_row)

    # Act & Assert
    with pytest.raises(EntityNotFound):
        await customer_service.update_customer(created.id, {"city": "Bergen"})

    assert await customer_service.count_customers() == 0


@pytest.mark.asyncio
async def test_simultaneous_deletes_yield_one_success_and_one_not_found(crm_client):
    created = (await crm_client.client.post(
        CUSTOMERS, json={"firstName": "Ann", "lastName": "Lee", "email": "ann@x.com"}
    )).json()["data"]

    responses = await asyncio.gather(
        crm_client.client.delete(f"{CUSTOMERS}/{created['id']}"),
        crm_client.client.delete(f"{CUSTOMERS}/{created['id']}"),
    )

    assert sorted(response.status_code for response in responses) == [200, 404]
    assert await crm_client.count_customers() == 0
