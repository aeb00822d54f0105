"""
Exceptions
==========

Error hierarchy for the alerts backend.

Every error carries the HTTP status it maps to. The application turns any
``AlertDeskError`` into a ``{"error": message}`` JSON body with that status.
"""

from typing import Optional


class AlertDeskError(Exception):
    """Base exception for all AlertDesk errors."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class StoreUnavailableError(AlertDeskError):
    """The database was never configured or failed to connect."""

    def __init__(self, message: str = "Database connection not available") -> None:
        super().__init__(message)


class AlertNotFoundError(AlertDeskError):
    """No alert matches the requested identifier."""

    status_code = 404

    def __init__(self, message: str = "Alert not found") -> None:
        super().__init__(message)


class InvalidActionError(AlertDeskError):
    """Action name outside the recognized set."""

    status_code = 400

    def __init__(self, message: str = "Invalid action") -> None:
        super().__init__(message)


class InvalidRequestError(AlertDeskError):
    """Request body failed validation."""

    status_code = 400


class OperationFailedError(AlertDeskError):
    """The store rejected a read or write."""

    pass
