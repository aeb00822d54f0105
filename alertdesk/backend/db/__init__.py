"""
Database module - ORM models and repositories for the alerts store.
"""

from .base import Base
from .models import Alert
from .repository import AlertRepository

__all__ = ["Base", "Alert", "AlertRepository"]
