"""Shared fixtures: a throwaway SQLite file per test."""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from clothing_store.core.database import Database
from clothing_store.db.seed import init_db
from clothing_store.main import create_app
from clothing_store.repositories import CustomerRepository


@pytest.fixture
def database_url(tmp_path) -> str:
    """URL of an empty database file in the test's temp directory."""
    return f"sqlite:///{tmp_path / 'clothing_customers.db'}"


@pytest_asyncio.fixture
async def database(database_url):
    """An initialized, unseeded store."""
    database = Database(database_url)
    await init_db(database, seed=False)
    yield database
    await database.close()


@pytest_asyncio.fixture
async def seeded_database(database_url):
    """A store holding the three sample customers."""
    database = Database(database_url)
    await init_db(database, seed=True)
    yield database
    await database.close()


@pytest.fixture
def repository(database) -> CustomerRepository:
    return CustomerRepository(database)


@pytest.fixture
def app(database_url):
    return create_app(database_url, seed=True)


@pytest.fixture
def client(app):
    """Test client with the lifespan running (seed data loaded)."""
    with TestClient(app) as client:
        yield client
