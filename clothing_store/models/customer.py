"""Customer database model with body measurements."""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import DateTime, Float, Integer, Text, func, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from clothing_store.core.database import Base

if TYPE_CHECKING:
    from clothing_store.models.order import Order


class MeasurementType(str, Enum):
    """Which measurement set applies to a customer.

    Stored as free text; these are the values the frontend offers.
    """

    upper = "upper"
    lower = "lower"
    both = "both"


UPPER_BODY_FIELDS = ("chest", "waist", "shoulder", "sleeveLength", "armhole", "neck")
LOWER_BODY_FIELDS = ("hips", "inseam", "thigh", "knee")


class Customer(Base):
    """A shop customer and their measurements (all in centimeters).

    Column names are camelCase and go over the wire unchanged.
    """

    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customerName: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(Text, nullable=False)
    gender: Mapped[str] = mapped_column(Text, nullable=False)

    # Upper body
    chest: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    waist: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    shoulder: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    sleeveLength: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    armhole: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    neck: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    # Lower body
    hips: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    inseam: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    thigh: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    knee: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    measurementType: Mapped[Optional[str]] = mapped_column(
        Text, server_default=MeasurementType.both.value
    )
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Order history, maintained outside this API
    totalOrders: Mapped[Optional[int]] = mapped_column(Integer, server_default=text("0"))
    lastOrderDate: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    createdAt: Mapped[Optional[datetime]] = mapped_column(DateTime, server_default=func.now())
    updatedAt: Mapped[Optional[datetime]] = mapped_column(DateTime, server_default=func.now())

    # No cascade: deleting a customer leaves its orders behind
    orders: Mapped[List["Order"]] = relationship("Order", back_populates="customer")

    def __repr__(self) -> str:
        return f"<Customer {self.id} {self.customerName}>"
