"""Fixtures for route tests that run against a mocked CustomerService."""
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from dependency_injector import providers
from httpx import ASGITransport, AsyncClient

from src.app.containers import Container
from src.app.core.services.customer_service import CustomerService
from src.app.main import create_app
from tests.conftest import noop_lifespan


@pytest.fixture
def customer_service_mock():
    return AsyncMock(spec=CustomerService)


@pytest.fixture
def routes_container(customer_service_mock):
    """Container whose customer service is replaced by the mock; the database is never touched."""
    container = Container()
    container.customer_service.override(providers.Object(customer_service_mock))
    yield container
    container.customer_service.reset_override()
    container.unwire()


@pytest_asyncio.fixture
async def http_client(routes_container):
    app = create_app(routes_container, lifespan=noop_lifespan)
    # Unhandled errors must reach the 500 handler instead of failing the test
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
