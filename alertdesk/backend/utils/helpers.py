"""
Helper Functions
================

Common utility functions used across the application.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def start_of_day(now: datetime) -> datetime:
    """
    Midnight at the start of the given day.

    Args:
        now: Reference time

    Returns:
        datetime: Same date at 00:00, same tzinfo
    """
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_week(now: datetime) -> datetime:
    """
    Midnight at the start of the week, weeks starting on Sunday.

    Args:
        now: Reference time

    Returns:
        datetime: Most recent Sunday (today if it is Sunday) at 00:00
    """
    days_since_sunday = (now.weekday() + 1) % 7
    return start_of_day(now) - timedelta(days=days_since_sunday)


def format_timestamp(dt: Optional[datetime]) -> Optional[str]:
    """
    Format datetime to ISO 8601 string.

    Args:
        dt: Datetime to format

    Returns:
        ISO 8601 formatted string or None
    """
    if dt is None:
        return None
    return dt.isoformat()


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Attach UTC to naive datetimes.

    Some backends (SQLite) drop the offset on storage; every stored time is UTC.

    Args:
        dt: Datetime read from the database

    Returns:
        Timezone-aware datetime or None
    """
    if dt is not None and dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt
