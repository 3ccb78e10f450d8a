"""Statistics and export endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from clothing_store.api.deps import get_customer_repository
from clothing_store.repositories.customer_repository import CustomerRepository
from clothing_store.schemas.customer import CustomerResponse, CustomerStats

router = APIRouter()


@router.get("/stats", response_model=CustomerStats)
async def get_stats(
    repository: CustomerRepository = Depends(get_customer_repository),
) -> CustomerStats:
    """Customer totals, gender breakdown and summed order counts.

    Gender counts only include the exact values "Male" and "Female".
    """
    return await repository.compute_stats()


@router.get("/export", response_model=List[CustomerResponse])
async def export_customers(
    repository: CustomerRepository = Depends(get_customer_repository),
) -> List[CustomerResponse]:
    """Dump every customer in insertion order."""
    customers = await repository.export_all()
    return [CustomerResponse.model_validate(c) for c in customers]
