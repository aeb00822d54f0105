"""AlertDesk - unified alerts and notifications service."""
