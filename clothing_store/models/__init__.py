"""Database models for the clothing store."""

from clothing_store.models.customer import (
    LOWER_BODY_FIELDS,
    UPPER_BODY_FIELDS,
    Customer,
    MeasurementType,
)
from clothing_store.models.order import DEFAULT_ORDER_STATUS, Order

__all__ = [
    "Customer",
    "DEFAULT_ORDER_STATUS",
    "LOWER_BODY_FIELDS",
    "MeasurementType",
    "Order",
    "UPPER_BODY_FIELDS",
]
