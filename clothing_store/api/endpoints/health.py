"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from clothing_store import __version__
from clothing_store.api.deps import get_database
from clothing_store.core.database import Database

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: str
    version: str
    database: str


@router.get("", response_model=HealthResponse)
async def health_check(database: Database = Depends(get_database)) -> HealthResponse:
    """Health check endpoint.

    Verifies API is running and the database file answers queries.
    """
    db_status = "healthy" if await database.ping() else "unhealthy"

    return HealthResponse(
        status="healthy" if db_status == "healthy" else "degraded",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=__version__,
        database=db_status,
    )
