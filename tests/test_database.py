"""
Tests for store initialization and seeding.
"""

import pytest
from sqlalchemy import inspect, select

from clothing_store.core.config import get_async_database_url
from clothing_store.db.seed import SAMPLE_CUSTOMERS, init_db, seed_customers
from clothing_store.models import Customer, Order


async def table_names(database) -> list[str]:
    async with database.engine.connect() as conn:
        return await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())


async def foreign_keys(database, table: str) -> list[dict]:
    async with database.engine.connect() as conn:
        return await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_foreign_keys(table))


class TestSchema:
    """Tests for table creation."""

    @pytest.mark.asyncio
    async def test_tables_created(self, database) -> None:
        """Both tables should exist after initialization."""
        names = await table_names(database)
        assert "customers" in names
        assert "orders" in names

    @pytest.mark.asyncio
    async def test_orders_reference_customers(self, database) -> None:
        """orders.customerId should be a foreign key to customers.id."""
        fks = await foreign_keys(database, "orders")
        assert len(fks) == 1
        assert fks[0]["constrained_columns"] == ["customerId"]
        assert fks[0]["referred_table"] == "customers"
        assert fks[0]["referred_columns"] == ["id"]

    @pytest.mark.asyncio
    async def test_create_tables_is_idempotent(self, database) -> None:
        """Running initialization again should not fail or duplicate tables."""
        await database.create_tables()
        await database.create_tables()
        names = await table_names(database)
        assert names.count("customers") == 1

    @pytest.mark.asyncio
    async def test_order_defaults(self, database) -> None:
        """Orders get quantity 1, status Pending and an order date."""
        async with database.session() as session:
            customer = Customer(customerName="A", phone="1", gender="M")
            session.add(customer)
            await session.flush()
            session.add(Order(customerId=customer.id, garmentType="Shirt"))

        async with database.session() as session:
            order = (await session.execute(select(Order))).scalar_one()

        assert order.quantity == 1
        assert order.status == "Pending"
        assert order.orderDate is not None

    @pytest.mark.asyncio
    async def test_ping(self, database) -> None:
        assert await database.ping() is True


class TestSeed:
    """Tests for sample data."""

    @pytest.mark.asyncio
    async def test_seed_empty_table(self, database) -> None:
        """Seeding an empty table inserts every sample customer."""
        inserted = await seed_customers(database)
        assert inserted == len(SAMPLE_CUSTOMERS) == 3

    @pytest.mark.asyncio
    async def test_seed_only_when_empty(self, seeded_database) -> None:
        """A second seed pass should insert nothing."""
        assert await seed_customers(seeded_database) == 0
        await init_db(seeded_database, seed=True)

        async with seeded_database.session() as session:
            rows = (await session.execute(select(Customer))).scalars().all()
        assert len(rows) == 3

    @pytest.mark.asyncio
    async def test_seed_values(self, seeded_database) -> None:
        """Sample rows keep their order counts and measurement types."""
        async with seeded_database.session() as session:
            rows = (
                await session.execute(select(Customer).order_by(Customer.id))
            ).scalars().all()

        assert [c.totalOrders for c in rows] == [3, 5, 2]
        assert [c.measurementType for c in rows] == ["both", "upper", "lower"]
        assert rows[0].gender == "ប្រុស"
        assert rows[1].neck is None


class TestDatabaseUrl:
    """Tests for URL normalization."""

    def test_plain_sqlite_gets_async_driver(self) -> None:
        url = get_async_database_url("sqlite:///./clothing_customers.db")
        assert url == "sqlite+aiosqlite:///./clothing_customers.db"

    def test_async_url_unchanged(self) -> None:
        url = "sqlite+aiosqlite:///data.db"
        assert get_async_database_url(url) == url
