"""API router - combines all endpoint routers."""

from fastapi import APIRouter

from clothing_store.api.endpoints import customers, health, reports

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["Health"])
api_router.include_router(customers.router, prefix="/customers", tags=["Customers"])
api_router.include_router(reports.router, tags=["Reports"])
