"""
Alert Schemas
=============

Pydantic models for alert records, requests and envelopes.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, model_validator


class AlertResponse(BaseModel):
    """Alert record from the database."""

    id: str = Field(..., description="Store-assigned identifier")
    alert_id: Optional[str] = Field(None, description="Caller-assigned external reference")

    alert_type: str = Field(..., description="Type of alert (system, visit, vehicle, delivery, ...)")
    category: str = Field(..., description="Category (general, critical, warning, info, ...)")
    severity: str = Field(..., description="Severity (low, medium, high, critical, urgent)")
    priority: str = Field(..., description="Priority (low, medium, high, critical)")

    title: str = Field(..., description="Short headline")
    message: Optional[str] = Field(None, description="Alert message")
    description: Optional[str] = Field(None, description="Longer explanation")

    status: str = Field(..., description="Lifecycle status (active, resolved, dismissed)")
    is_read: bool = False
    is_resolved: bool = False
    resolved_at: Optional[datetime] = None
    resolved_by: Optional[str] = None
    dismissed_at: Optional[datetime] = None
    dismissed_by: Optional[str] = None

    visit_id: Optional[str] = None
    delegate_id: Optional[str] = None
    delegate_name: Optional[str] = None
    delegate_phone: Optional[str] = None
    delegate_email: Optional[str] = None
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    customer_address: Optional[str] = None
    vehicle_id: Optional[str] = None
    vehicle_plate: Optional[str] = None
    driver_name: Optional[str] = None
    driver_phone: Optional[str] = None
    location: Optional[str] = None
    scheduled_time: Optional[datetime] = None
    actual_time: Optional[datetime] = None
    delay_minutes: Optional[int] = None
    grace_period_minutes: Optional[int] = None
    escalation_threshold_minutes: Optional[int] = None

    escalation_level: str = Field("initial", description="Escalation level (initial, escalated)")
    escalation_count: int = Field(0, description="How many times the alert was escalated")
    last_escalated_at: Optional[datetime] = None
    escalation_notes: Optional[str] = None

    notify_admins: bool = True
    notify_supervisors: bool = False
    send_push_notification: bool = True
    send_email_notification: bool = False
    send_sms_notification: bool = False
    admin_notified: bool = False
    supervisor_notified: bool = False
    push_sent: bool = False
    email_sent: bool = False
    sms_sent: bool = False
    notification_sent_at: Optional[datetime] = None

    metadata: Dict[str, Any] = Field(default_factory=dict)
    tags: List[str] = Field(default_factory=list)

    source_system: Optional[str] = None
    created_by: Optional[str] = None
    assigned_to: Optional[str] = None
    acknowledged_by: Optional[str] = None
    acknowledged_at: Optional[datetime] = None

    created_at: datetime = Field(..., description="When the alert was created")
    updated_at: datetime = Field(..., description="Last mutation time")
    expires_at: Optional[datetime] = None

    class Config:
        json_schema_extra = {
            "example": {
                "id": "0b6f0c1e-8f0e-4d38-9a55-2c8f3f0a9a11",
                "alert_id": "ALERT-002",
                "alert_type": "delivery",
                "category": "warning",
                "severity": "medium",
                "priority": "medium",
                "title": "Delayed Delivery",
                "message": "Order #12345 is 30 mins behind schedule",
                "status": "active",
                "is_read": False,
                "is_resolved": False,
                "escalation_level": "initial",
                "escalation_count": 0,
                "tags": ["delivery", "delay"],
                "created_at": "2024-01-15T10:30:00Z",
                "updated_at": "2024-01-15T10:30:00Z",
            }
        }


class _AlertFields(BaseModel):
    """Caller-writable fields shared by create and update."""

    alert_id: Optional[str] = None
    message: Optional[str] = None
    description: Optional[str] = None

    visit_id: Optional[str] = None
    delegate_id: Optional[str] = None
    delegate_name: Optional[str] = None
    delegate_phone: Optional[str] = None
    delegate_email: Optional[str] = None
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    customer_address: Optional[str] = None
    vehicle_id: Optional[str] = None
    vehicle_plate: Optional[str] = None
    driver_name: Optional[str] = None
    driver_phone: Optional[str] = None
    location: Optional[str] = None
    scheduled_time: Optional[datetime] = None
    actual_time: Optional[datetime] = None
    delay_minutes: Optional[int] = None

    escalation_notes: Optional[str] = None

    source_system: Optional[str] = None
    created_by: Optional[str] = None
    assigned_to: Optional[str] = None
    expires_at: Optional[datetime] = None


class AlertCreate(_AlertFields):
    """Schema for creating a new alert. Only ``title`` is required."""

    alert_type: str = "system"
    category: str = "general"
    severity: str = "medium"
    priority: str = "medium"
    title: str = Field(..., description="Short headline")
    status: str = "active"

    grace_period_minutes: int = 10
    escalation_threshold_minutes: int = 30
    escalation_level: str = "initial"

    notify_admins: bool = True
    notify_supervisors: bool = False
    send_push_notification: bool = True
    send_email_notification: bool = False
    send_sms_notification: bool = False

    metadata: Dict[str, Any] = Field(default_factory=dict)
    tags: List[str] = Field(default_factory=list)


# Columns stored NOT NULL; an update may omit them but never clear them
NOT_NULL_UPDATE_FIELDS = frozenset({
    "alert_type", "category", "severity", "priority", "title", "status",
    "is_read", "is_resolved",
    "grace_period_minutes", "escalation_threshold_minutes", "escalation_level", "escalation_count",
    "notify_admins", "notify_supervisors",
    "send_push_notification", "send_email_notification", "send_sms_notification",
    "admin_notified", "supervisor_notified", "push_sent", "email_sent", "sms_sent",
    "metadata", "tags",
})


class AlertUpdate(_AlertFields):
    """
    Schema for a partial update.

    Only fields present in the request body are written. Unknown fields are
    rejected. ``id``, ``created_at`` and ``updated_at`` are not writable.
    """

    alert_type: Optional[str] = None
    category: Optional[str] = None
    severity: Optional[str] = None
    priority: Optional[str] = None
    title: Optional[str] = None
    status: Optional[str] = None

    is_read: Optional[bool] = None
    is_resolved: Optional[bool] = None
    resolved_at: Optional[datetime] = None
    resolved_by: Optional[str] = None
    dismissed_at: Optional[datetime] = None
    dismissed_by: Optional[str] = None

    grace_period_minutes: Optional[int] = None
    escalation_threshold_minutes: Optional[int] = None
    escalation_level: Optional[str] = None
    escalation_count: Optional[int] = None
    last_escalated_at: Optional[datetime] = None

    notify_admins: Optional[bool] = None
    notify_supervisors: Optional[bool] = None
    send_push_notification: Optional[bool] = None
    send_email_notification: Optional[bool] = None
    send_sms_notification: Optional[bool] = None
    admin_notified: Optional[bool] = None
    supervisor_notified: Optional[bool] = None
    push_sent: Optional[bool] = None
    email_sent: Optional[bool] = None
    sms_sent: Optional[bool] = None
    notification_sent_at: Optional[datetime] = None

    metadata: Optional[Dict[str, Any]] = None
    tags: Optional[List[str]] = None

    acknowledged_by: Optional[str] = None
    acknowledged_at: Optional[datetime] = None

    class Config:
        extra = "forbid"

    @model_validator(mode="after")
    def reject_null_required(self) -> "AlertUpdate":
        """Refuse an explicit null for columns that cannot be empty."""
        nulled = sorted(
            name for name in self.model_fields_set
            if name in NOT_NULL_UPDATE_FIELDS and getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"null is not allowed for: {', '.join(nulled)}")
        return self


class AlertActionRequest(BaseModel):
    """Body of ``POST /alerts/actions``."""

    action: str = Field(..., description="mark_read, mark_unread, resolve, dismiss, escalate or acknowledge")
    alertId: str = Field(..., description="Identifier of the alert to act on")
    userId: Optional[str] = Field(None, description="Actor recorded on resolve, dismiss and acknowledge")

    class Config:
        json_schema_extra = {
            "example": {"action": "resolve", "alertId": "0b6f0c1e-8f0e-4d38-9a55-2c8f3f0a9a11", "userId": "U1"}
        }


class SampleAlertsRequest(BaseModel):
    """Body of ``POST /alerts/sample``."""

    action: str = Field(..., description="create or clear")


class AlertStats(BaseModel):
    """Alert counts for the dashboard summary."""

    total: int = 0
    active: int = 0
    resolved: int = 0
    dismissed: int = 0
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    unread: int = 0
    today: int = 0
    thisWeek: int = 0


class AlertEnvelope(BaseModel):
    """Single alert wrapped in ``data``."""

    data: AlertResponse


class AlertListEnvelope(BaseModel):
    """Alert list wrapped in ``data``."""

    data: List[AlertResponse]


class AlertStatsEnvelope(BaseModel):
    """Statistics wrapped in ``data``."""

    data: AlertStats


class SampleAlertsResponse(BaseModel):
    """Result of a sample-data operation."""

    success: bool = True
    message: str
    data: Optional[List[AlertResponse]] = None
