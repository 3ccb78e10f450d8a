"""Pydantic schemas for API requests and responses."""

from clothing_store.schemas.customer import (
    CustomerCreate,
    CustomerCreatedResponse,
    CustomerFields,
    CustomerResponse,
    CustomerStats,
    CustomerUpdate,
    ErrorResponse,
    MessageResponse,
)

__all__ = [
    "CustomerCreate",
    "CustomerCreatedResponse",
    "CustomerFields",
    "CustomerResponse",
    "CustomerStats",
    "CustomerUpdate",
    "ErrorResponse",
    "MessageResponse",
]
