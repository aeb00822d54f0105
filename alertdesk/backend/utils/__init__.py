"""
Utilities module - Helper functions and common utilities.
"""

from .helpers import utcnow, ensure_utc, start_of_day, start_of_week, format_timestamp

__all__ = ["utcnow", "ensure_utc", "start_of_day", "start_of_week", "format_timestamp"]
