"""Customer data access - every query binds caller values as parameters."""

from typing import Optional, Sequence

from sqlalchemy import case, delete, func, or_, select, update
from sqlalchemy.exc import SQLAlchemyError

from clothing_store.core.database import Database
from clothing_store.core.exceptions import CustomerValidationError, StorageError
from clothing_store.core.logging import get_logger
from clothing_store.models.customer import LOWER_BODY_FIELDS, UPPER_BODY_FIELDS, Customer
from clothing_store.schemas.customer import CustomerFields, CustomerStats

logger = get_logger(__name__)

REQUIRED_FIELDS = ("customerName", "phone", "gender")
MUTABLE_FIELDS = (
    *REQUIRED_FIELDS,
    *UPPER_BODY_FIELDS,
    *LOWER_BODY_FIELDS,
    "measurementType",
    "notes",
)
MISSING_FIELDS_MESSAGE = "Missing required fields (name, phone, gender)"

# Compared literally; values in other scripts are not counted
MALE = "Male"
FEMALE = "Female"

# SQLite INTEGER is a signed 64-bit value
MIN_ROW_ID = -(2**63)
MAX_ROW_ID = 2**63 - 1


def is_storable_id(customer_id: int) -> bool:
    """Ids outside the SQLite integer range cannot match any row."""
    return MIN_ROW_ID <= customer_id <= MAX_ROW_ID


def missing_required_fields(fields: CustomerFields) -> list[str]:
    """Return the required fields that are absent or empty."""
    return [name for name in REQUIRED_FIELDS if not getattr(fields, name)]


class CustomerRepository:
    """CRUD, search and aggregate queries over the customers table."""

    def __init__(self, database: Database):
        self.database = database

    async def list_customers(self, search: Optional[str] = None) -> Sequence[Customer]:
        """List customers newest first, optionally filtered by name or phone."""
        query = select(Customer)
        if search:
            query = query.where(
                or_(
                    Customer.customerName.contains(search, autoescape=True),
                    Customer.phone.contains(search, autoescape=True),
                )
            )
        query = query.order_by(Customer.id.desc())

        try:
            async with self.database.session() as session:
                result = await session.execute(query)
                return result.scalars().all()
        except SQLAlchemyError as exc:
            raise self._storage_error("list_customers", exc) from exc

    async def get_customer(self, customer_id: int) -> Optional[Customer]:
        """Get customer by ID, or None if there is no such row."""
        if not is_storable_id(customer_id):
            return None

        try:
            async with self.database.session() as session:
                result = await session.execute(
                    select(Customer).where(Customer.id == customer_id)
                )
                return result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise self._storage_error("get_customer", exc, customer_id=customer_id) from exc

    async def create_customer(self, fields: CustomerFields) -> int:
        """Insert a customer and return its new ID.

        Raises CustomerValidationError without touching the store when a
        required field is missing. Fields left unset take the column
        defaults (measurementType "both", totalOrders 0).
        """
        missing = missing_required_fields(fields)
        if missing:
            logger.info("customer_rejected", missing=missing)
            raise CustomerValidationError(MISSING_FIELDS_MESSAGE)

        values = fields.model_dump(include=set(MUTABLE_FIELDS), exclude_none=True)
        customer = Customer(**values)

        try:
            async with self.database.session() as session:
                session.add(customer)
                await session.flush()
                customer_id = customer.id
        except SQLAlchemyError as exc:
            raise self._storage_error("create_customer", exc) from exc

        logger.info("customer_created", customer_id=customer_id)
        return customer_id

    async def update_customer(self, customer_id: int, fields: CustomerFields) -> int:
        """Replace every mutable field and refresh updatedAt.

        Fields the caller left out are written as NULL. Returns the number
        of rows changed, 0 when the customer does not exist.
        """
        if not is_storable_id(customer_id):
            return 0

        values = {name: getattr(fields, name) for name in MUTABLE_FIELDS}
        statement = (
            update(Customer)
            .where(Customer.id == customer_id)
            .values(**values, updatedAt=func.now())
            .execution_options(synchronize_session=False)
        )

        try:
            async with self.database.session() as session:
                result = await session.execute(statement)
                updated = result.rowcount
        except SQLAlchemyError as exc:
            raise self._storage_error("update_customer", exc, customer_id=customer_id) from exc

        logger.info("customer_updated", customer_id=customer_id, updated=updated)
        return updated

    async def delete_customer(self, customer_id: int) -> int:
        """Delete a customer; their orders are left in place."""
        if not is_storable_id(customer_id):
            return 0

        statement = (
            delete(Customer)
            .where(Customer.id == customer_id)
            .execution_options(synchronize_session=False)
        )

        try:
            async with self.database.session() as session:
                result = await session.execute(statement)
                deleted = result.rowcount
        except SQLAlchemyError as exc:
            raise self._storage_error("delete_customer", exc, customer_id=customer_id) from exc

        logger.info("customer_deleted", customer_id=customer_id, deleted=deleted)
        return deleted

    async def compute_stats(self) -> CustomerStats:
        """Count customers by gender and sum their orders in one pass."""
        query = select(
            func.count(Customer.id),
            func.coalesce(func.sum(case((Customer.gender == MALE, 1), else_=0)), 0),
            func.coalesce(func.sum(case((Customer.gender == FEMALE, 1), else_=0)), 0),
            func.coalesce(func.sum(Customer.totalOrders), 0),
        )

        try:
            async with self.database.session() as session:
                result = await session.execute(query)
                total, male, female, orders = result.one()
        except SQLAlchemyError as exc:
            raise self._storage_error("compute_stats", exc) from exc

        return CustomerStats(
            totalCustomers=total,
            maleCustomers=male,
            femaleCustomers=female,
            totalOrders=orders,
        )

    async def export_all(self) -> Sequence[Customer]:
        """Every customer, oldest first."""
        try:
            async with self.database.session() as session:
                result = await session.execute(select(Customer).order_by(Customer.id))
                return result.scalars().all()
        except SQLAlchemyError as exc:
            raise self._storage_error("export_all", exc) from exc

    @staticmethod
    def _storage_error(operation: str, exc: SQLAlchemyError, **context) -> StorageError:
        message = str(exc.orig) if getattr(exc, "orig", None) is not None else str(exc)
        logger.error("storage_error", operation=operation, error=message, **context)
        return StorageError(message)
