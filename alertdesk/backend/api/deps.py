"""
Request Dependencies
====================

FastAPI dependencies that hand each request its own session-bound services.
"""

from typing import Iterator

from fastapi import Depends, Request

from alertdesk.backend.db.repository import AlertRepository
from alertdesk.backend.services.alerts import AlertService
from alertdesk.backend.services.database import DatabaseService


def get_database(request: Request) -> DatabaseService:
    """Database service built for this application in ``create_app``."""
    return request.app.state.database


def get_alert_service(database: DatabaseService = Depends(get_database)) -> Iterator[AlertService]:
    """
    Alert service over a fresh session.

    The session commits when the endpoint returns and rolls back if it raises.

    Raises:
        StoreUnavailableError: If the database is not connected
    """
    with database.session() as session:
        yield AlertService(AlertRepository(session))
