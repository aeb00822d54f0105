"""
Alert Endpoints
===============

API endpoints for alert management.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from alertdesk.backend.core.exceptions import InvalidRequestError
from alertdesk.backend.api.deps import get_alert_service
from alertdesk.backend.schemas import (
    AlertActionRequest,
    AlertCreate,
    AlertEnvelope,
    AlertListEnvelope,
    AlertStatsEnvelope,
    AlertUpdate,
    ErrorResponse,
    SampleAlertsRequest,
    SampleAlertsResponse,
    SuccessResponse,
)
from alertdesk.backend.services.actions import AlertAction
from alertdesk.backend.services.alerts import AlertService

router = APIRouter(responses={500: {"model": ErrorResponse}})


@router.get("", response_model=AlertListEnvelope)
def list_alerts(
    limit: int = Query(10, ge=1, le=500, description="Maximum records"),
    status: str = Query("active", description='Exact status, or "all" for any status'),
    severity: Optional[str] = Query(None, description="Filter by severity"),
    alert_type: Optional[str] = Query(None, alias="alertType", description="Filter by alert type"),
    service: AlertService = Depends(get_alert_service),
):
    """
    Get alerts.

    Returns alerts ordered by creation time (newest first). By default only
    active alerts are listed.

    Args:
        limit: Maximum number of alerts to return
        status: Status to match; "all" disables the filter
        severity: Optional filter by severity
        alert_type: Optional filter by alert type
    """
    alerts = service.list_alerts(limit=limit, status=status, severity=severity, alert_type=alert_type)
    return {"data": alerts}


@router.post("", response_model=AlertEnvelope, status_code=201)
def create_alert(payload: AlertCreate, service: AlertService = Depends(get_alert_service)):
    """
    Create an alert.

    Only ``title`` is required; classification, status, escalation and
    notification flags fall back to their defaults.
    """
    return {"data": service.create_alert(payload)}


@router.get("/stats", response_model=AlertStatsEnvelope)
def get_alert_stats(service: AlertService = Depends(get_alert_service)):
    """
    Get alert counts.

    Returns totals by status and severity, the unread count, and how many
    alerts were created today and this week (weeks start on Sunday, UTC).
    """
    return {"data": service.get_stats()}


@router.post(
    "/sample",
    response_model=SampleAlertsResponse,
    response_model_exclude_unset=True,
    responses={400: {"model": ErrorResponse}},
)
def sample_alerts(payload: SampleAlertsRequest, service: AlertService = Depends(get_alert_service)):
    """
    Create or clear demo data.

    ``{"action": "create"}`` inserts the sample alerts;
    ``{"action": "clear"}`` deletes every alert.
    """
    if payload.action == "create":
        alerts = service.create_sample_alerts()
        return {"success": True, "message": "Sample alerts created successfully", "data": alerts}
    if payload.action == "clear":
        service.clear_alerts()
        return {"success": True, "message": "All alerts cleared successfully"}
    raise InvalidRequestError('Invalid action. Use "create" or "clear"')


@router.post(
    "/actions",
    response_model=AlertEnvelope,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def perform_alert_action(payload: AlertActionRequest, service: AlertService = Depends(get_alert_service)):
    """
    Apply a named action to one alert.

    Actions: mark_read, mark_unread, resolve, dismiss, escalate, acknowledge.
    Unknown actions are rejected with 400 and nothing is changed.
    """
    action = AlertAction.parse(payload.action)
    return {"data": service.perform_action(action, payload.alertId, payload.userId)}


@router.get("/{alert_id}", response_model=AlertEnvelope, responses={404: {"model": ErrorResponse}})
def get_alert(alert_id: str, service: AlertService = Depends(get_alert_service)):
    """Get one alert by id."""
    return {"data": service.get_alert(alert_id)}


@router.put(
    "/{alert_id}",
    response_model=AlertEnvelope,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_alert(alert_id: str, payload: AlertUpdate, service: AlertService = Depends(get_alert_service)):
    """
    Update fields of one alert.

    Only the fields present in the body are written; unknown fields are
    rejected.
    """
    return {"data": service.update_alert(alert_id, payload)}


@router.delete("/{alert_id}", response_model=SuccessResponse, responses={404: {"model": ErrorResponse}})
def delete_alert(alert_id: str, service: AlertService = Depends(get_alert_service)):
    """Delete one alert."""
    service.delete_alert(alert_id)
    return {"success": True}
