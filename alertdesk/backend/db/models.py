"""Alert ORM model."""

import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Boolean, DateTime, Integer, String, Text, inspect
from sqlalchemy.orm import Mapped, mapped_column

from alertdesk.backend.db.base import Base
from alertdesk.backend.utils.helpers import ensure_utc


def _new_id() -> str:
    return str(uuid.uuid4())


class Alert(Base):
    """A unified alert/notification record."""

    __tablename__ = "unified_alerts_notifications"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    # External correlation key, not unique
    alert_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, index=True)

    # Classification
    alert_type: Mapped[str] = mapped_column(String(50), default="system", index=True)
    category: Mapped[str] = mapped_column(String(50), default="general")
    severity: Mapped[str] = mapped_column(String(20), default="medium", index=True)
    priority: Mapped[str] = mapped_column(String(20), default="medium")

    # Content
    title: Mapped[str] = mapped_column(String(255))
    message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Lifecycle
    status: Mapped[str] = mapped_column(String(20), default="active", index=True)
    is_read: Mapped[bool] = mapped_column(Boolean, default=False)
    is_resolved: Mapped[bool] = mapped_column(Boolean, default=False)
    resolved_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    resolved_by: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    dismissed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    dismissed_by: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # Visit / delegate
    visit_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    delegate_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    delegate_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    delegate_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    delegate_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Customer
    customer_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    customer_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    customer_address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Vehicle / driver
    vehicle_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    vehicle_plate: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    driver_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    driver_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    # Scheduling
    location: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    scheduled_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    actual_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    delay_minutes: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    grace_period_minutes: Mapped[int] = mapped_column(Integer, default=10)
    escalation_threshold_minutes: Mapped[int] = mapped_column(Integer, default=30)

    # Escalation
    escalation_level: Mapped[str] = mapped_column(String(20), default="initial")
    escalation_count: Mapped[int] = mapped_column(Integer, default=0)
    last_escalated_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    escalation_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Notification routing (flags only)
    notify_admins: Mapped[bool] = mapped_column(Boolean, default=True)
    notify_supervisors: Mapped[bool] = mapped_column(Boolean, default=False)
    send_push_notification: Mapped[bool] = mapped_column(Boolean, default=True)
    send_email_notification: Mapped[bool] = mapped_column(Boolean, default=False)
    send_sms_notification: Mapped[bool] = mapped_column(Boolean, default=False)
    admin_notified: Mapped[bool] = mapped_column(Boolean, default=False)
    supervisor_notified: Mapped[bool] = mapped_column(Boolean, default=False)
    push_sent: Mapped[bool] = mapped_column(Boolean, default=False)
    email_sent: Mapped[bool] = mapped_column(Boolean, default=False)
    sms_sent: Mapped[bool] = mapped_column(Boolean, default=False)
    notification_sent_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    # Free-form data; "metadata" is reserved on declarative classes
    metadata_: Mapped[Dict[str, Any]] = mapped_column("metadata", JSON, default=dict)
    tags: Mapped[List[str]] = mapped_column(JSON, default=list)

    # Provenance
    source_system: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    created_by: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    assigned_to: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    acknowledged_by: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    acknowledged_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    expires_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    @classmethod
    def attribute_for(cls, column_name: str) -> str:
        """Map a table column name to its mapped attribute name."""
        return "metadata_" if column_name == "metadata" else column_name

    def to_dict(self) -> Dict[str, Any]:
        """Return the record keyed by table column name, times in UTC."""
        record = {}
        for attr in inspect(self).mapper.column_attrs:
            value = getattr(self, attr.key)
            if isinstance(value, datetime):
                value = ensure_utc(value)
            record[attr.columns[0].name] = value
        return record

    def __repr__(self) -> str:
        return f"<Alert(id={self.id}, type={self.alert_type}, status={self.status})>"
