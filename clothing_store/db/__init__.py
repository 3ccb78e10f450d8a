"""Database module."""

from clothing_store.db.seed import SAMPLE_CUSTOMERS, init_db, seed_customers

__all__ = ["SAMPLE_CUSTOMERS", "init_db", "seed_customers"]
