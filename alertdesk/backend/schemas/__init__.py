"""
Schemas module - Pydantic models for request/response validation.
"""

from .alert import (
    AlertResponse,
    AlertCreate,
    AlertUpdate,
    AlertActionRequest,
    SampleAlertsRequest,
    AlertStats,
    AlertEnvelope,
    AlertListEnvelope,
    AlertStatsEnvelope,
    SampleAlertsResponse,
)
from .common import HealthResponse, SuccessResponse, ErrorResponse

__all__ = [
    # Alert schemas
    "AlertResponse",
    "AlertCreate",
    "AlertUpdate",
    "AlertActionRequest",
    "SampleAlertsRequest",
    "AlertStats",
    "AlertEnvelope",
    "AlertListEnvelope",
    "AlertStatsEnvelope",
    "SampleAlertsResponse",
    # Common schemas
    "HealthResponse",
    "SuccessResponse",
    "ErrorResponse",
]
