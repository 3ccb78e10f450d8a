"""Dependency injection for API endpoints."""

from fastapi import Depends, Request

from clothing_store.core.database import Database
from clothing_store.repositories.customer_repository import CustomerRepository


def get_database(request: Request) -> Database:
    """The store handle opened by the application lifespan."""
    return request.app.state.database


def get_customer_repository(
    database: Database = Depends(get_database),
) -> CustomerRepository:
    """Dependency for the customer repository."""
    return CustomerRepository(database)
