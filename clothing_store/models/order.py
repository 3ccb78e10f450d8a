"""Order database model."""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, Float, ForeignKey, Integer, Text, func, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from clothing_store.core.database import Base

if TYPE_CHECKING:
    from clothing_store.models.customer import Customer

DEFAULT_ORDER_STATUS = "Pending"


class Order(Base):
    """A garment order placed by a customer.

    The API exposes no order operations; rows are written by other tools.
    """

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customerId: Mapped[int] = mapped_column(
        Integer, ForeignKey("customers.id"), nullable=False
    )
    orderDate: Mapped[Optional[datetime]] = mapped_column(DateTime, server_default=func.now())

    # Garment details
    garmentType: Mapped[str] = mapped_column(Text, nullable=False)
    fabric: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    color: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    quantity: Mapped[Optional[int]] = mapped_column(Integer, server_default=text("1"))
    price: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    status: Mapped[Optional[str]] = mapped_column(Text, server_default=DEFAULT_ORDER_STATUS)
    deliveryDate: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    customer: Mapped["Customer"] = relationship("Customer", back_populates="orders")

    def __repr__(self) -> str:
        return f"<Order {self.id} - {self.status}>"
