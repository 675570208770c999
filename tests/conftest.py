"""Shared test fixtures and utilities for all tests."""
import asyncio
import os
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from dependency_injector import providers
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from testcontainers.postgres import PostgresContainer

from src.app.containers import Container
from src.app.main import create_app
from src.client import SearchClient
from src.shared.database.database import Database, Base, DatabaseSettings
from tests.builders import ENTERPRISE_A, ENTERPRISE_B, make_user
from tests.fakes import (
    InMemoryContractRepository,
    InMemoryStore,
    InMemoryUserRepository,
    InMemoryVendorRepository,
)

CALLER_A = "auth|alice"
CALLER_B = "auth|bruno"


# =========================================================================
# PostgreSQL (repository integration tests)
# =========================================================================

@pytest.fixture(scope="module")
def postgres_container():
    """Start a PostgreSQL container for testing. Module-scoped for reuse."""
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


async def wait_till_db_ready(db: Database, max_attempts: int = 20):
    """
    Wait for database to be ready.

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
    """Drop and recreate all tables before each test."""
    async with db._engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield db


# =========================================================================
# In-memory store (service and API tests)
# =========================================================================

@pytest.fixture
def store():
    """
    In-memory document store seeded with one caller per enterprise.

    CALLER_A belongs to ENTERPRISE_A, CALLER_B to ENTERPRISE_B.
    """
    return InMemoryStore(users=[
        make_user(ENTERPRISE_A, auth_subject=CALLER_A, first_name="Alice", last_name="Caller"),
        make_user(ENTERPRISE_B, auth_subject=CALLER_B, first_name="Bruno", last_name="Caller"),
    ])


@pytest.fixture
def contract_repository(store):
    return InMemoryContractRepository(store)


@pytest.fixture
def vendor_repository(store):
    return InMemoryVendorRepository(store)


@pytest.fixture
def user_repository(store):
    return InMemoryUserRepository(store)


@pytest.fixture(scope="function")
def test_container(contract_repository, vendor_repository, user_repository):
    """
    Create a test container with the repositories overridden by in-memory ones.
    Function-scoped to ensure each test gets a fresh container.
    """
    from src.app.config import get_settings
    get_settings.cache_clear()

    container = Container()
    container.contract_repository.override(providers.Object(contract_repository))
    container.vendor_repository.override(providers.Object(vendor_repository))
    container.user_repository.override(providers.Object(user_repository))

    yield container

    container.reset_override()
    container.unwire()


@pytest.fixture(scope="function")
def test_app(test_container):
    """Create the application with a lifespan that skips database setup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield

    return create_app(test_container, lifespan=lifespan)


@pytest_asyncio.fixture
async def http_client(test_app):
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def search_client(http_client):
    """Search client authenticated as CALLER_A."""
    async with SearchClient(base_url="http://test", auth_subject=CALLER_A, client=http_client) as client:
        yield client


@pytest_asyncio.fixture
async def other_tenant_client(http_client):
    """Search client authenticated as CALLER_B."""
    async with SearchClient(base_url="http://test", auth_subject=CALLER_B, client=http_client) as client:
        yield client


@pytest_asyncio.fixture
async def anonymous_client(http_client):
    async with SearchClient(base_url="http://test", client=http_client) as client:
        yield client


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep developer environment variables out of the settings under test."""
    for name in list(os.environ):
        if name.upper().startswith(("SEARCH__", "AUTOCOMPLETE__", "STORE__", "FIELD_WEIGHTS__")):
            monkeypatch.delenv(name, raising=False)
