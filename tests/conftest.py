"""Shared test fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from alertdesk.backend.api.deps import get_alert_service
from alertdesk.backend.core.config import Settings
from alertdesk.backend.db.repository import AlertRepository
from alertdesk.backend.main import create_app
from alertdesk.backend.services.alerts import AlertService
from alertdesk.backend.services.database import DatabaseService


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings with in-memory SQLite."""
    return Settings(DATABASE_URL="sqlite://", LOG_LEVEL="DEBUG")


@pytest.fixture
def clock() -> FakeClock:
    """Clock starting on Wednesday 2024-01-17 10:30 UTC."""
    return FakeClock(datetime(2024, 1, 17, 10, 30, tzinfo=timezone.utc))


@pytest.fixture
def database(test_settings):
    """Connected database service with an empty alerts table."""
    db = DatabaseService(test_settings)
    assert db.connect()
    yield db
    db.disconnect()


@pytest.fixture
def test_session(database):
    """Create test database session."""
    with database.session() as session:
        yield session


@pytest.fixture
def repository(test_session) -> AlertRepository:
    """Alert repository over the test session."""
    return AlertRepository(test_session)


@pytest.fixture
def alert_service(repository, clock) -> AlertService:
    """Alert service driven by the fake clock."""
    return AlertService(repository, clock=clock)


@pytest.fixture
def client(test_settings, database, clock):
    """HTTP client for an app wired to the test database and clock."""
    app = create_app(test_settings, database)

    def _alert_service():
        with database.session() as session:
            yield AlertService(AlertRepository(session), clock=clock)

    app.dependency_overrides[get_alert_service] = _alert_service

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_alert_data() -> dict:
    """A delivery alert payload as the dashboard sends it."""
    return {
        "alert_id": "ALERT-002",
        "alert_type": "delivery",
        "category": "warning",
        "severity": "high",
        "priority": "high",
        "title": "Delayed Delivery",
        "message": "Order #12345 is 30 mins behind schedule",
        "customer_id": "CUST-001",
        "customer_name": "Al-Rashid Trading Co.",
        "vehicle_plate": "VH-002",
        "delay_minutes": 30,
        "metadata": {"order_id": "12345"},
        "tags": ["delivery", "delay"],
        "source_system": "delivery_tracking",
        "created_by": "system",
    }
