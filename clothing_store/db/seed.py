"""Sample customers inserted into an empty store."""

from __future__ import annotations

from sqlalchemy import func, select

from clothing_store.core.database import Database
from clothing_store.core.logging import get_logger
from clothing_store.models import Customer

logger = get_logger(__name__)

SAMPLE_CUSTOMERS = [
    {
        "customerName": "សុខ វិចិត្រ",
        "phone": "012 345 678",
        "gender": "ប្រុស",
        "chest": 95,
        "waist": 80,
        "shoulder": 45,
        "sleeveLength": 60,
        "neck": 38,
        "armhole": 45,
        "hips": 90,
        "inseam": 75,
        "thigh": 55,
        "knee": 38,
        "measurementType": "both",
        "notes": "ចូលចិត្តពណ៌ខ្មៅ",
        "totalOrders": 3,
    },
    {
        "customerName": "ចន្ទ សោភា",
        "phone": "098 765 432",
        "gender": "ស្រី",
        "chest": 85,
        "waist": 65,
        "shoulder": 38,
        "sleeveLength": 55,
        "armhole": 40,
        "measurementType": "upper",
        "notes": "កាត់ខោអាវប្រចាំសប្តាហ៍",
        "totalOrders": 5,
    },
    {
        "customerName": "រ៉ា សុភា",
        "phone": "077 888 999",
        "gender": "ប្រុស",
        "hips": 95,
        "inseam": 80,
        "thigh": 58,
        "knee": 40,
        "measurementType": "lower",
        "notes": "កាត់តែខោ",
        "totalOrders": 2,
    },
]


async def seed_customers(database: Database) -> int:
    """Insert the sample customers if the table is empty.

    Returns the number of rows inserted (0 when data already exists).
    """
    async with database.session() as session:
        count = await session.scalar(select(func.count()).select_from(Customer))
        if count:
            return 0

        session.add_all([Customer(**sample) for sample in SAMPLE_CUSTOMERS])

    logger.info("sample_data_inserted", count=len(SAMPLE_CUSTOMERS))
    return len(SAMPLE_CUSTOMERS)


async def init_db(database: Database, seed: bool = True) -> None:
    """Create tables and, if requested, seed an empty customers table."""
    await database.create_tables()
    if seed:
        await seed_customers(database)
