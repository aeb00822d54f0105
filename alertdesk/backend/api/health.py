"""
Health Endpoint
===============

API endpoint for health checks.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from alertdesk.backend.api.deps import get_database
from alertdesk.backend.schemas import HealthResponse
from alertdesk.backend.services.database import DatabaseService

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check(database: DatabaseService = Depends(get_database)):
    """
    Health check endpoint.

    Returns the health status of the API and the alerts database.
    Use this endpoint for monitoring and load balancer health checks.
    """
    database_ok = database.is_connected()

    return HealthResponse(
        status="healthy" if database_ok else "unhealthy",
        database_connected=database_ok,
        timestamp=datetime.now(timezone.utc),
    )
