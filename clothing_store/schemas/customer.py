"""Customer schemas - field names match the camelCase database columns."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CustomerFields(BaseModel):
    """Writable customer fields, shared by create and update.

    Everything is optional at the schema level: presence of the required
    fields is checked on create only, so the API can answer with its own
    400 message instead of a schema error. Numbers sent for text fields
    (a phone typed as 12345678) are kept as their string form.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    customerName: Optional[str] = None
    phone: Optional[str] = None
    gender: Optional[str] = None

    # Upper body (cm)
    chest: Optional[float] = None
    waist: Optional[float] = None
    shoulder: Optional[float] = None
    sleeveLength: Optional[float] = None
    armhole: Optional[float] = None
    neck: Optional[float] = None

    # Lower body (cm)
    hips: Optional[float] = None
    inseam: Optional[float] = None
    thigh: Optional[float] = None
    knee: Optional[float] = None

    measurementType: Optional[str] = None
    notes: Optional[str] = None


class CustomerCreate(CustomerFields):
    """Schema for creating a customer."""

    pass


class CustomerUpdate(CustomerFields):
    """Schema for replacing a customer's fields; omitted fields are cleared."""

    pass


class CustomerResponse(CustomerFields):
    """Customer response schema - a full row of the customers table."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    totalOrders: Optional[int] = None
    lastOrderDate: Optional[datetime] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


class CustomerCreatedResponse(BaseModel):
    """Response after a customer is created."""

    id: int
    message: str = "Customer created successfully"


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class CustomerStats(BaseModel):
    """Aggregate counts over all customers."""

    totalCustomers: int
    maleCustomers: int
    femaleCustomers: int
    totalOrders: int


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    error: str
