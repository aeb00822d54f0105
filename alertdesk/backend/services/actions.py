"""
Alert Actions
=============

The closed set of semantic transitions an operator can apply to an alert,
and the field patch each one produces.

Actions are not guarded by the alert's current state: resolving a dismissed
alert, or escalating a resolved one, is allowed.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Optional

from alertdesk.backend.core.exceptions import InvalidActionError


class AlertAction(str, Enum):
    """Named transitions accepted by ``POST /alerts/actions``."""

    MARK_READ = "mark_read"
    MARK_UNREAD = "mark_unread"
    RESOLVE = "resolve"
    DISMISS = "dismiss"
    ESCALATE = "escalate"
    ACKNOWLEDGE = "acknowledge"

    @classmethod
    def parse(cls, value: Any) -> "AlertAction":
        """
        Convert an untrusted action name into an ``AlertAction``.

        Raises:
            InvalidActionError: If the name is not one of the recognized actions
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidActionError() from None


@dataclass(frozen=True)
class ActionPatch:
    """
    Field changes for one action.

    ``values`` are written as-is. ``increments`` are added to the current
    column value by the store in the same statement.
    """

    values: Dict[str, Any]
    increments: Dict[str, int] = field(default_factory=dict)


def _mark_read(user_id: Optional[str], now: datetime) -> ActionPatch:
    return ActionPatch({"is_read": True})


def _mark_unread(user_id: Optional[str], now: datetime) -> ActionPatch:
    return ActionPatch({"is_read": False})


def _resolve(user_id: Optional[str], now: datetime) -> ActionPatch:
    return ActionPatch({
        "is_resolved": True,
        "status": "resolved",
        "resolved_at": now,
        "resolved_by": user_id,
    })


def _dismiss(user_id: Optional[str], now: datetime) -> ActionPatch:
    return ActionPatch({
        "status": "dismissed",
        "dismissed_at": now,
        "dismissed_by": user_id,
    })


def _escalate(user_id: Optional[str], now: datetime) -> ActionPatch:
    return ActionPatch(
        {"escalation_level": "escalated", "last_escalated_at": now},
        increments={"escalation_count": 1},
    )


def _acknowledge(user_id: Optional[str], now: datetime) -> ActionPatch:
    return ActionPatch({
        "acknowledged_by": user_id,
        "acknowledged_at": now,
    })


ACTION_BUILDERS: Dict[AlertAction, Callable[[Optional[str], datetime], ActionPatch]] = {
    AlertAction.MARK_READ: _mark_read,
    AlertAction.MARK_UNREAD: _mark_unread,
    AlertAction.RESOLVE: _resolve,
    AlertAction.DISMISS: _dismiss,
    AlertAction.ESCALATE: _escalate,
    AlertAction.ACKNOWLEDGE: _acknowledge,
}


def build_action_patch(action: AlertAction, user_id: Optional[str], now: datetime) -> ActionPatch:
    """
    Build the patch for an action.

    Every patch also refreshes ``updated_at``.

    Args:
        action: The transition to apply
        user_id: Actor recorded by resolve, dismiss and acknowledge
        now: Timestamp written into the patch

    Returns:
        ActionPatch: Values and increments for the store
    """
    patch = ACTION_BUILDERS[action](user_id, now)
    return ActionPatch({**patch.values, "updated_at": now}, dict(patch.increments))
