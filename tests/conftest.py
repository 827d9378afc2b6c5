"""Shared test fixtures and utilities for all tests."""
import asyncio
import os
from contextlib import asynccontextmanager

import docker
import pytest
import pytest_asyncio
from dependency_injector import providers
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from testcontainers.postgres import PostgresContainer

from src.app.containers import Container
from src.app.main import create_app
from src.client import CrmClient
from src.shared.database.database import Database, Base, DatabaseSettings
from src.shared.database.unit_of_work import UnitOfWork


def docker_available() -> bool:
    """True when a Docker daemon answers, so PostgreSQL-backed tests can run."""
    try:
        docker.from_env().ping()
    except Exception:
        return False
    return True


@asynccontextmanager
async def noop_lifespan(app: FastAPI):
    # Database tables are already created by clean_database fixture
    yield


@pytest.fixture(scope="module")
def postgres_container():
    """Start a PostgreSQL container for testing. Module-scoped for reuse."""
    if not docker_available():
        pytest.skip("Docker is not available; skipping PostgreSQL-backed tests")
    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture(scope="module")
def async_db_url(postgres_container):
    """
    Get the async database URL from the postgres container.
    Module-scoped so it can be reused across tests.
    """
    connection_url = postgres_container.get_connection_url()
    return connection_url.replace("postgresql+psycopg2://", "postgresql+asyncpg://")


@pytest.fixture(scope="module")
def test_settings_override(async_db_url):
    """
    Point application settings at the test database.
    Module-scoped to set up environment once per test module.
    """
    previous = os.environ.get("DATABASE_URL")
    os.environ["DATABASE_URL"] = async_db_url

    # Clear settings cache to force reload with new env vars
    from src.app.config import get_settings
    get_settings.cache_clear()

    yield

    if previous is None:
        os.environ.pop("DATABASE_URL", None)
    else:
        os.environ["DATABASE_URL"] = previous
    get_settings.cache_clear()


async def wait_till_db_ready(db: Database, max_attempts: int = 20):
    """
    Wait for database to be ready.

    Args:
        db: Database instance to test
        max_attempts: Maximum number of connection attempts

    Raises:
        Exception: If database is not ready after max_attempts
    """
    for attempt in range(max_attempts):
        try:
            async with db._engine.begin():
                return
        except Exception:
            await asyncio.sleep(0.2)
    raise Exception(f"Database not ready after {max_attempts} attempts")


@pytest_asyncio.fixture(scope="function")
async def db(async_db_url):
    """
    Create database instance with test database.
    Function-scoped for test isolation.
    """
    db = Database(DatabaseSettings(db_url=async_db_url))
    await wait_till_db_ready(db)
    yield db
    await db.dispose()


@pytest_asyncio.fixture(scope="function")
async def clean_database(db):
    """
    Clean the database before each test.
    Drops and recreates all tables.
    """
    async with db._engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield db


@pytest.fixture(scope="function")
def test_container(test_settings_override, clean_database):
    """
    Create a test container with database override for proper test isolation.
    Function-scoped to ensure each test gets a fresh container.
    """
    container = Container()
    container.database.override(providers.Object(clean_database))
    yield container
    container.database.reset_override()
    container.unwire()


@pytest_asyncio.fixture(scope="function")
async def test_app(test_container):
    """Create the full application (routes, middleware, error handlers) on the test container."""
    yield create_app(test_container, lifespan=noop_lifespan)


@pytest_asyncio.fixture
async def crm_client(test_app):
    """
    Create a CRM client for testing.
    test_app already depends on clean_database for test isolation.
    """
    transport = ASGITransport(app=test_app)
    http_client = AsyncClient(transport=transport, base_url="http://test")
    client = CrmClient(base_url="http://test", client=http_client)

    async with client:
        yield client
    await http_client.aclose()


@pytest_asyncio.fixture(scope="function")
async def unit_of_work(clean_database, test_container):
    """
    Fixture for a UnitOfWork instance with a clean database.
    Uses the container's entity_mapper singleton.
    """
    yield UnitOfWork(clean_database, test_container.entity_mapper())


# =========================================================================
# Common repository and service fixtures (available to all test directories)
# =========================================================================

@pytest.fixture
def customer_repository(test_container):
    """Get customer repository from container."""
    return test_container.customer_repository()


@pytest.fixture
def customer_service(test_container):
    """Get customer service from container."""
    return test_container.customer_service()
