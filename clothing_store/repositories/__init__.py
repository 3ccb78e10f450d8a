"""Data access layer."""

from clothing_store.repositories.customer_repository import CustomerRepository

__all__ = ["CustomerRepository"]
