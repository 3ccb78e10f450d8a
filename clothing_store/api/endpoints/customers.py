"""Customer endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends

from clothing_store.api.deps import get_customer_repository
from clothing_store.core.exceptions import CustomerNotFoundError
from clothing_store.repositories.customer_repository import CustomerRepository
from clothing_store.schemas.customer import (
    CustomerCreate,
    CustomerCreatedResponse,
    CustomerResponse,
    CustomerUpdate,
    ErrorResponse,
    MessageResponse,
)

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Customer not found"}}


@router.get("", response_model=List[CustomerResponse])
@router.get("/", response_model=List[CustomerResponse], include_in_schema=False)
async def list_customers(
    search: Optional[str] = None,
    repository: CustomerRepository = Depends(get_customer_repository),
) -> List[CustomerResponse]:
    """List customers, newest first.

    `search` matches any part of the customer name or phone number.
    """
    customers = await repository.list_customers(search)
    return [CustomerResponse.model_validate(c) for c in customers]


@router.get("/{customer_id}", response_model=CustomerResponse, responses=NOT_FOUND)
async def get_customer(
    customer_id: int,
    repository: CustomerRepository = Depends(get_customer_repository),
) -> CustomerResponse:
    """Get customer by ID."""
    customer = await repository.get_customer(customer_id)
    if not customer:
        raise CustomerNotFoundError()
    return CustomerResponse.model_validate(customer)


@router.post(
    "",
    response_model=CustomerCreatedResponse,
    responses={400: {"model": ErrorResponse, "description": "Missing required fields"}},
)
@router.post("/", response_model=CustomerCreatedResponse, include_in_schema=False)
async def create_customer(
    request: CustomerCreate,
    repository: CustomerRepository = Depends(get_customer_repository),
) -> CustomerCreatedResponse:
    """Create a customer. Name, phone and gender are required."""
    customer_id = await repository.create_customer(request)
    return CustomerCreatedResponse(id=customer_id)


@router.put("/{customer_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def update_customer(
    customer_id: int,
    request: CustomerUpdate,
    repository: CustomerRepository = Depends(get_customer_repository),
) -> MessageResponse:
    """Replace all of a customer's fields.

    Fields missing from the body are cleared.
    """
    updated = await repository.update_customer(customer_id, request)
    if updated == 0:
        raise CustomerNotFoundError()
    return MessageResponse(message="Customer updated successfully")


@router.delete("/{customer_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_customer(
    customer_id: int,
    repository: CustomerRepository = Depends(get_customer_repository),
) -> MessageResponse:
    """Delete a customer. Their orders are kept."""
    deleted = await repository.delete_customer(customer_id)
    if deleted == 0:
        raise CustomerNotFoundError()
    return MessageResponse(message="Customer deleted successfully")
