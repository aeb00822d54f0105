"""Tests for the alert service."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from alertdesk.backend.core.exceptions import AlertNotFoundError, OperationFailedError
from alertdesk.backend.schemas import AlertCreate, AlertUpdate
from alertdesk.backend.services.actions import AlertAction
from alertdesk.backend.services.alerts import AlertService


def _create(service, title="Pump failure", **fields):
    return service.create_alert(AlertCreate(title=title, **fields))


class TestCreateAlert:
    """Test alert creation."""

    def test_title_only_populates_defaults(self, alert_service, clock):
        """Test every documented default is applied."""
        alert = _create(alert_service)

        assert alert["alert_type"] == "system"
        assert alert["category"] == "general"
        assert alert["severity"] == "medium"
        assert alert["priority"] == "medium"
        assert alert["status"] == "active"
        assert alert["escalation_level"] == "initial"
        assert alert["escalation_count"] == 0
        assert alert["notify_admins"] is True
        assert alert["send_push_notification"] is True
        assert alert["notify_supervisors"] is False
        assert alert["send_email_notification"] is False
        assert alert["send_sms_notification"] is False
        assert alert["is_read"] is False
        assert alert["is_resolved"] is False
        assert alert["metadata"] == {}
        assert alert["tags"] == []
        assert alert["grace_period_minutes"] == 10
        assert alert["escalation_threshold_minutes"] == 30
        assert alert["created_at"] == clock.now
        assert alert["updated_at"] == clock.now

    def test_duplicate_alert_id_allowed(self, alert_service):
        """Test the external alert_id is not unique."""
        first = _create(alert_service, alert_id="ALERT-001")
        second = _create(alert_service, alert_id="ALERT-001")

        assert first["id"] != second["id"]

    def test_store_failure(self, clock):
        """Test a store error becomes OperationFailedError."""
        repository = MagicMock()
        repository.add.side_effect = OperationalError("INSERT", {}, Exception("disk full"))
        service = AlertService(repository, clock=clock)

        with pytest.raises(OperationFailedError, match="Failed to create alert"):
            _create(service)


class TestListAlerts:
    """Test alert listing."""

    def test_default_lists_active_only(self, alert_service, clock):
        """Test the default status filter is active."""
        active = _create(alert_service, title="Active")
        clock.advance(minutes=1)
        resolved = _create(alert_service, title="Resolved")
        alert_service.perform_action(AlertAction.RESOLVE, resolved["id"], "U1")

        ids = [a["id"] for a in alert_service.list_alerts()]
        assert ids == [active["id"]]

    def test_status_all_disables_filter(self, alert_service, clock):
        """Test status=all returns alerts regardless of status."""
        for status in ("active", "resolved", "dismissed"):
            _create(alert_service, title=status, status=status)
            clock.advance(minutes=1)

        alerts = alert_service.list_alerts(status="all")
        assert {a["status"] for a in alerts} == {"active", "resolved", "dismissed"}

    def test_status_exact_match(self, alert_service):
        """Test any other status value is an exact match."""
        _create(alert_service, status="active")
        _create(alert_service, status="dismissed")

        alerts = alert_service.list_alerts(status="dismissed")
        assert [a["status"] for a in alerts] == ["dismissed"]

    def test_empty_status_falls_back_to_active(self, alert_service):
        _create(alert_service, title="Open")
        _create(alert_service, title="Closed", status="resolved")

        assert [a["title"] for a in alert_service.list_alerts(status="")] == ["Open"]

    def test_limit_newest_first(self, alert_service, clock):
        """Test limit=3 against 10 matching returns the three newest."""
        for i in range(10):
            _create(alert_service, title=f"Alert {i}")
            clock.advance(minutes=1)

        alerts = alert_service.list_alerts(limit=3)
        assert [a["title"] for a in alerts] == ["Alert 9", "Alert 8", "Alert 7"]

    def test_severity_and_type_filters(self, alert_service):
        """Test severity and alert_type are exact filters."""
        _create(alert_service, title="A", severity="high", alert_type="vehicle")
        _create(alert_service, title="B", severity="high", alert_type="delivery")
        _create(alert_service, title="C", severity="low", alert_type="vehicle")

        assert [a["title"] for a in alert_service.list_alerts(severity="high", alert_type="vehicle")] == ["A"]
        assert len(alert_service.list_alerts(severity="high")) == 2
        assert len(alert_service.list_alerts(alert_type="vehicle")) == 2

    def test_store_failure(self, clock):
        """Test a store error becomes OperationFailedError."""
        repository = MagicMock()
        repository.find.side_effect = OperationalError("SELECT", {}, Exception("gone"))
        service = AlertService(repository, clock=clock)

        with pytest.raises(OperationFailedError, match="Failed to fetch alerts"):
            service.list_alerts()


class TestPerformAction:
    """Test semantic alert actions."""

    @pytest.mark.parametrize("action, expected", [
        (AlertAction.MARK_READ, {"is_read": True}),
        (AlertAction.MARK_UNREAD, {"is_read": False}),
        (AlertAction.RESOLVE, {"is_resolved": True, "status": "resolved", "resolved_by": "U1"}),
        (AlertAction.DISMISS, {"status": "dismissed", "dismissed_by": "U1"}),
        (AlertAction.ESCALATE, {"escalation_level": "escalated", "escalation_count": 1}),
        (AlertAction.ACKNOWLEDGE, {"acknowledged_by": "U1", "is_resolved": False}),
    ])
    def test_action_patch_applied(self, alert_service, clock, action, expected):
        """Test each action writes its fields and advances updated_at."""
        alert = _create(alert_service)
        acted_at = clock.advance(minutes=5)

        updated = alert_service.perform_action(action, alert["id"], "U1")

        for field, value in expected.items():
            assert updated[field] == value
        assert updated["updated_at"] == acted_at
        assert updated["updated_at"] > alert["updated_at"]

    def test_action_timestamps(self, alert_service, clock):
        """Test resolve, dismiss, escalate and acknowledge stamp their times."""
        alert = _create(alert_service)
        now = clock.advance(minutes=1)

        assert alert_service.perform_action(AlertAction.RESOLVE, alert["id"], "U1")["resolved_at"] == now
        assert alert_service.perform_action(AlertAction.DISMISS, alert["id"], "U1")["dismissed_at"] == now
        assert alert_service.perform_action(AlertAction.ESCALATE, alert["id"], "U1")["last_escalated_at"] == now
        assert alert_service.perform_action(AlertAction.ACKNOWLEDGE, alert["id"], "U1")["acknowledged_at"] == now

    def test_mark_unread(self, alert_service):
        """Test mark_unread clears is_read."""
        alert = _create(alert_service)
        alert_service.perform_action(AlertAction.MARK_READ, alert["id"])

        updated = alert_service.perform_action(AlertAction.MARK_UNREAD, alert["id"])
        assert updated["is_read"] is False

    def test_escalate_twice(self, alert_service):
        """Test two escalations add two to the count; level stays escalated."""
        alert = _create(alert_service)

        first = alert_service.perform_action(AlertAction.ESCALATE, alert["id"], "U1")
        assert first["escalation_level"] == "escalated"
        second = alert_service.perform_action(AlertAction.ESCALATE, alert["id"], "U1")

        assert second["escalation_count"] == alert["escalation_count"] + 2
        assert second["escalation_level"] == "escalated"

    def test_no_state_guard(self, alert_service):
        """Test resolve applies even to a dismissed alert."""
        alert = _create(alert_service)
        alert_service.perform_action(AlertAction.DISMISS, alert["id"], "U1")

        updated = alert_service.perform_action(AlertAction.RESOLVE, alert["id"], "U2")
        assert updated["status"] == "resolved"
        assert updated["dismissed_by"] == "U1"

    def test_not_found(self, alert_service):
        """Test acting on an unknown id raises AlertNotFoundError."""
        with pytest.raises(AlertNotFoundError):
            alert_service.perform_action(AlertAction.RESOLVE, "missing", "U1")

    def test_store_failure(self, clock):
        """Test a store error becomes OperationFailedError."""
        repository = MagicMock()
        repository.update.side_effect = OperationalError("UPDATE", {}, Exception("locked"))
        service = AlertService(repository, clock=clock)

        with pytest.raises(OperationFailedError, match="Failed to perform action"):
            service.perform_action(AlertAction.MARK_READ, "some-id")


class TestUpdateAndDelete:
    """Test partial update, fetch and delete."""

    def test_update_writes_only_given_fields(self, alert_service, clock):
        """Test fields absent from the payload are untouched."""
        alert = _create(alert_service, message="original")
        now = clock.advance(minutes=2)

        updated = alert_service.update_alert(alert["id"], AlertUpdate(severity="critical"))

        assert updated["severity"] == "critical"
        assert updated["message"] == "original"
        assert updated["updated_at"] == now
        assert updated["created_at"] == alert["created_at"]

    def test_update_not_found(self, alert_service):
        with pytest.raises(AlertNotFoundError):
            alert_service.update_alert("missing", AlertUpdate(title="x"))

    def test_get_alert(self, alert_service):
        alert = _create(alert_service)
        assert alert_service.get_alert(alert["id"])["title"] == "Pump failure"

    def test_get_alert_not_found(self, alert_service):
        with pytest.raises(AlertNotFoundError):
            alert_service.get_alert("missing")

    def test_delete(self, alert_service):
        """Test delete removes the alert."""
        alert = _create(alert_service)
        alert_service.delete_alert(alert["id"])

        with pytest.raises(AlertNotFoundError):
            alert_service.get_alert(alert["id"])

    def test_delete_not_found(self, alert_service):
        """Test deleting a missing id is an error, not a silent success."""
        with pytest.raises(AlertNotFoundError):
            alert_service.delete_alert("missing")


class TestStatsAndSamples:
    """Test statistics and demo data."""

    def test_sample_alerts(self, alert_service):
        """Test the five demo alerts are created with their extra columns."""
        created = alert_service.create_sample_alerts()

        assert [a["alert_id"] for a in created] == [f"ALERT-00{i}" for i in range(1, 6)]
        late_visit = created[-1]
        assert late_visit["escalation_level"] == "escalated"
        assert late_visit["escalation_count"] == 1
        assert late_visit["escalation_notes"] == "Customer has been notified of delay"

    def test_clear_alerts(self, alert_service):
        alert_service.create_sample_alerts()

        assert alert_service.clear_alerts() == 5
        assert alert_service.list_alerts(status="all") == []

    def test_stats(self, alert_service, clock):
        """Test counts by status, severity, read state and age."""
        # Wednesday 2024-01-17; the week started Sunday 2024-01-14
        clock.now = datetime(2024, 1, 13, 12, 0, tzinfo=timezone.utc)
        _create(alert_service, title="Last week", severity="low")
        clock.now = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
        _create(alert_service, title="This week", severity="high")
        clock.now = datetime(2024, 1, 17, 9, 0, tzinfo=timezone.utc)
        today = _create(alert_service, title="Today", severity="critical")
        alert_service.perform_action(AlertAction.RESOLVE, today["id"], "U1")
        alert_service.perform_action(AlertAction.MARK_READ, today["id"], "U1")

        stats = alert_service.get_stats()

        assert stats == {
            "total": 3,
            "active": 2,
            "resolved": 1,
            "dismissed": 0,
            "critical": 1,
            "high": 1,
            "medium": 0,
            "low": 1,
            "unread": 2,
            "today": 1,
            "thisWeek": 2,
        }
