"""
Core module - Configuration, logging, errors and application setup.
"""

from .config import Settings, get_settings
from .logging import setup_logging, get_logger
from .exceptions import (
    AlertDeskError,
    AlertNotFoundError,
    InvalidActionError,
    InvalidRequestError,
    OperationFailedError,
    StoreUnavailableError,
)

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "AlertDeskError",
    "AlertNotFoundError",
    "InvalidActionError",
    "InvalidRequestError",
    "OperationFailedError",
    "StoreUnavailableError",
]
