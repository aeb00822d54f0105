"""Alert repository."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import Session

from alertdesk.backend.db.models import Alert


class AlertRepository:
    """Record store for alerts: insert, update, delete and filtered queries."""

    model = Alert

    def __init__(self, session: Session) -> None:
        """Initialize repository with a session.

        Args:
            session: SQLAlchemy session.
        """
        self.session = session

    def get_by_id(self, id: str) -> Optional[Alert]:
        """Get an alert by its primary key.

        Args:
            id: Store-assigned alert identifier.

        Returns:
            Alert or None if not found.
        """
        return self.session.get(Alert, id, populate_existing=True)

    def find(self, filters: Optional[Dict[str, Any]] = None, limit: Optional[int] = None) -> List[Alert]:
        """Get alerts matching every filter exactly, newest first.

        Args:
            filters: Column name to required value.
            limit: Maximum number of rows.

        Returns:
            List of alerts ordered by created_at descending.
        """
        stmt = select(Alert).where(*self._conditions(filters)).order_by(Alert.created_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.scalars(stmt).all())

    def count(
        self,
        filters: Optional[Dict[str, Any]] = None,
        created_since: Optional[datetime] = None,
    ) -> int:
        """Count alerts matching the filters.

        Args:
            filters: Column name to required value.
            created_since: Only count alerts created at or after this time.

        Returns:
            Number of matching alerts.
        """
        conditions = self._conditions(filters)
        if created_since is not None:
            conditions.append(Alert.created_at >= created_since)
        stmt = select(func.count()).select_from(Alert).where(*conditions)
        return self.session.scalar(stmt) or 0

    def add(self, values: Dict[str, Any]) -> Alert:
        """Insert a new alert.

        Args:
            values: Column name to value.

        Returns:
            The inserted alert with its assigned id.
        """
        alert = Alert()
        for column, value in values.items():
            setattr(alert, Alert.attribute_for(column), value)
        self.session.add(alert)
        self.session.flush()
        return alert

    def update(
        self,
        id: str,
        values: Dict[str, Any],
        increments: Optional[Dict[str, int]] = None,
    ) -> Optional[Alert]:
        """Apply a patch to one alert in a single UPDATE statement.

        Increments are expressed as ``column = column + n`` so concurrent
        updates never lose a step.

        Args:
            id: Alert identifier.
            values: Column name to new value.
            increments: Column name to amount added server-side.

        Returns:
            The updated alert, or None if no row matched.
        """
        patch = {getattr(Alert, Alert.attribute_for(k)): v for k, v in values.items()}
        for column, amount in (increments or {}).items():
            attr = getattr(Alert, Alert.attribute_for(column))
            patch[attr] = attr + amount

        stmt = (
            update(Alert)
            .where(Alert.id == id)
            .values(patch)
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        if result.rowcount == 0:
            return None
        self.session.flush()
        return self.get_by_id(id)

    def delete(self, id: str) -> bool:
        """Delete one alert.

        Args:
            id: Alert identifier.

        Returns:
            True if a row was removed.
        """
        result = self.session.execute(delete(Alert).where(Alert.id == id))
        return result.rowcount > 0

    def delete_all(self) -> int:
        """Delete every alert.

        Returns:
            Number of rows removed.
        """
        result = self.session.execute(delete(Alert))
        return result.rowcount

    @staticmethod
    def _conditions(filters: Optional[Dict[str, Any]]) -> list:
        return [
            getattr(Alert, Alert.attribute_for(column)) == value
            for column, value in (filters or {}).items()
        ]
