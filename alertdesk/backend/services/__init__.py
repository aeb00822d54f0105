"""
Services module - Business logic and external service integrations.
"""

from .database import DatabaseService
from .actions import AlertAction, ActionPatch, build_action_patch
from .alerts import AlertService

__all__ = [
    "DatabaseService",
    "AlertAction",
    "ActionPatch",
    "build_action_patch",
    "AlertService",
]
