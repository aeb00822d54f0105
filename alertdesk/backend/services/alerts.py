"""
Alert Service
=============

Business operations on alerts:
- Listing with status/severity/type filters
- Create, fetch, partial update and delete
- Semantic actions (read, resolve, dismiss, escalate, acknowledge)
- Dashboard statistics and demo data

Store errors are logged and re-raised as ``OperationFailedError``; nothing is
retried.
"""

from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from alertdesk.backend.core.exceptions import AlertNotFoundError, OperationFailedError
from alertdesk.backend.core.logging import get_logger
from alertdesk.backend.db.repository import AlertRepository
from alertdesk.backend.schemas.alert import AlertCreate, AlertUpdate
from alertdesk.backend.services.actions import AlertAction, build_action_patch
from alertdesk.backend.services.sample_alerts import build_sample_alerts
from alertdesk.backend.utils.helpers import start_of_day, start_of_week, utcnow

logger = get_logger(__name__)

# Status filter value that disables status filtering
ALL_STATUSES = "all"


class AlertService:
    """
    Service class for alert operations.

    Works on one repository (and so one session); build a new instance per
    request.
    """

    def __init__(self, repository: AlertRepository, clock: Callable[[], datetime] = utcnow):
        self.repository = repository
        self.clock = clock

    def list_alerts(
        self,
        limit: int = 10,
        status: str = "active",
        severity: Optional[str] = None,
        alert_type: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        List alerts newest first.

        Args:
            limit: Maximum number of alerts to return
            status: Exact status to match, or "all" for any status; empty means "active"
            severity: Optional exact severity
            alert_type: Optional exact alert type

        Returns:
            List of alert records
        """
        filters: Dict[str, Any] = {}
        status = status or "active"
        if status != ALL_STATUSES:
            filters["status"] = status
        if severity:
            filters["severity"] = severity
        if alert_type:
            filters["alert_type"] = alert_type

        try:
            alerts = self.repository.find(filters, limit=limit)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching alerts: {e}")
            raise OperationFailedError("Failed to fetch alerts") from e
        return [a.to_dict() for a in alerts]

    def get_alert(self, alert_id: str) -> Dict[str, Any]:
        """Fetch one alert or raise ``AlertNotFoundError``."""
        try:
            alert = self.repository.get_by_id(alert_id)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching alert {alert_id}: {e}")
            raise OperationFailedError("Failed to fetch alert") from e
        if alert is None:
            raise AlertNotFoundError()
        return alert.to_dict()

    def create_alert(self, payload: AlertCreate) -> Dict[str, Any]:
        """
        Insert a new alert with creation defaults applied.

        Args:
            payload: Validated create request

        Returns:
            The created alert record
        """
        alert = self._insert(payload.model_dump())
        logger.info(f"Alert created: {alert['id']} ({alert['alert_type']}/{alert['severity']})")
        return alert

    def update_alert(self, alert_id: str, payload: AlertUpdate) -> Dict[str, Any]:
        """
        Write the fields present in ``payload`` and refresh ``updated_at``.

        Raises:
            AlertNotFoundError: If no alert has this id
            OperationFailedError: If the store rejects the update
        """
        values = payload.model_dump(exclude_unset=True)
        values["updated_at"] = self.clock()

        try:
            alert = self.repository.update(alert_id, values)
        except SQLAlchemyError as e:
            logger.error(f"Error updating alert {alert_id}: {e}")
            raise OperationFailedError("Failed to update alert") from e
        if alert is None:
            raise AlertNotFoundError()
        return alert.to_dict()

    def delete_alert(self, alert_id: str) -> None:
        """
        Delete one alert.

        Raises:
            AlertNotFoundError: If no alert has this id
        """
        try:
            deleted = self.repository.delete(alert_id)
        except SQLAlchemyError as e:
            logger.error(f"Error deleting alert {alert_id}: {e}")
            raise OperationFailedError("Failed to delete alert") from e
        if not deleted:
            raise AlertNotFoundError()
        logger.info(f"Alert deleted: {alert_id}")

    def perform_action(self, action: AlertAction, alert_id: str, user_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Apply a semantic action to one alert in a single update.

        Args:
            action: Transition to apply
            alert_id: Target alert
            user_id: Actor recorded on resolve, dismiss and acknowledge

        Returns:
            The full updated alert record

        Raises:
            AlertNotFoundError: If no alert has this id
            OperationFailedError: If the store rejects the update
        """
        patch = build_action_patch(action, user_id, self.clock())

        try:
            alert = self.repository.update(alert_id, patch.values, increments=patch.increments)
        except SQLAlchemyError as e:
            logger.error(f"Error performing alert action {action.value} on {alert_id}: {e}")
            raise OperationFailedError("Failed to perform action") from e
        if alert is None:
            raise AlertNotFoundError()

        logger.info(f"Alert {alert_id}: {action.value} by {user_id or 'unknown'}")
        return alert.to_dict()

    def get_stats(self) -> Dict[str, int]:
        """
        Count alerts by status, severity, read state and age.

        Returns:
            Dictionary matching the ``AlertStats`` schema
        """
        now = self.clock()
        count = self.repository.count

        try:
            return {
                "total": count(),
                "active": count({"status": "active"}),
                "resolved": count({"status": "resolved"}),
                "dismissed": count({"status": "dismissed"}),
                "critical": count({"severity": "critical"}),
                "high": count({"severity": "high"}),
                "medium": count({"severity": "medium"}),
                "low": count({"severity": "low"}),
                "unread": count({"is_read": False}),
                "today": count(created_since=start_of_day(now)),
                "thisWeek": count(created_since=start_of_week(now)),
            }
        except SQLAlchemyError as e:
            logger.error(f"Error fetching alert stats: {e}")
            raise OperationFailedError("Failed to fetch alert stats") from e

    def create_sample_alerts(self) -> List[Dict[str, Any]]:
        """Insert the demo alerts and return them."""
        created = []
        for sample in build_sample_alerts(self.clock()):
            # Keep sample-only columns (escalation_count, ...) the create schema ignores
            values = {**AlertCreate(**sample).model_dump(), **sample}
            alert = self._insert(values)
            logger.info(f"Sample alert created: {alert['title']}")
            created.append(alert)
        return created

    def clear_alerts(self) -> int:
        """Delete every alert and return how many were removed."""
        try:
            removed = self.repository.delete_all()
        except SQLAlchemyError as e:
            logger.error(f"Error clearing alerts: {e}")
            raise OperationFailedError("Failed to clear alerts") from e
        logger.info(f"All alerts cleared ({removed} removed)")
        return removed

    def _insert(self, values: Dict[str, Any]) -> Dict[str, Any]:
        now = self.clock()
        values = {**values, "created_at": now, "updated_at": now}
        try:
            return self.repository.add(values).to_dict()
        except SQLAlchemyError as e:
            logger.error(f"Error creating alert: {e}")
            raise OperationFailedError("Failed to create alert") from e
