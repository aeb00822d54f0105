"""
Common Schemas
==============

Shared Pydantic models used across the application.
"""

from datetime import datetime
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """API health check response."""

    status: str = Field(..., description="Health status (healthy/unhealthy)")
    database_connected: bool = Field(..., description="Alerts database connection status")
    timestamp: datetime = Field(..., description="Health check timestamp")

    class Config:
        json_schema_extra = {
            "example": {
                "status": "healthy",
                "database_connected": True,
                "timestamp": "2024-01-15T10:30:00Z",
            }
        }


class SuccessResponse(BaseModel):
    """Operation succeeded without returning a record."""

    success: bool = Field(default=True, description="Operation success status")


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    error: str = Field(..., description="Human-readable error message")
