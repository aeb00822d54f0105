#!/usr/bin/env python3
"""
Alert Database Seeder
=====================

Checks the alerts database and loads or clears the demo alerts.
Useful for trying the dashboard without live alert sources.

Usage:
    python -m alertdesk.scripts.seed_alerts [--database-url URL] {check,create,clear}
"""

import argparse
import sys

from alertdesk.backend.core.config import get_settings
from alertdesk.backend.core.exceptions import AlertDeskError
from alertdesk.backend.core.logging import get_logger, setup_logging
from alertdesk.backend.db.repository import AlertRepository
from alertdesk.backend.services.alerts import AlertService
from alertdesk.backend.services.database import DatabaseService
from alertdesk.backend.utils.helpers import format_timestamp

logger = get_logger("alertdesk.seed")


def check(database: DatabaseService) -> int:
    """Report whether the alerts table is reachable and how many rows it holds."""
    if not database.is_connected():
        logger.error("Database connection failed")
        return 1
    with database.session() as session:
        stats = AlertService(AlertRepository(session)).get_stats()
    logger.info(f"Alerts table is accessible: {stats['total']} alerts ({stats['active']} active)")
    return 0


def create(database: DatabaseService) -> int:
    """Insert the demo alerts."""
    with database.session() as session:
        alerts = AlertService(AlertRepository(session)).create_sample_alerts()
    for alert in alerts:
        print(f"{alert['id']}  {alert['severity']:<8} {alert['title']}  ({format_timestamp(alert['created_at'])})")
    logger.info(f"Created {len(alerts)} sample alerts")
    return 0


def clear(database: DatabaseService) -> int:
    """Delete every alert."""
    with database.session() as session:
        removed = AlertService(AlertRepository(session)).clear_alerts()
    logger.info(f"Removed {removed} alerts")
    return 0


COMMANDS = {"check": check, "create": create, "clear": clear}


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Alert Database Seeder")
    parser.add_argument("command", choices=sorted(COMMANDS), help="Operation to run")
    parser.add_argument("--database-url", help="SQLAlchemy database URL (default: DATABASE_URL)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log SQL statements")
    args = parser.parse_args(argv)

    settings = get_settings()
    overrides = {"DATABASE_ECHO": args.verbose or settings.DATABASE_ECHO}
    if args.database_url:
        overrides["DATABASE_URL"] = args.database_url
    settings = settings.model_copy(update=overrides)

    setup_logging("DEBUG" if args.verbose else settings.LOG_LEVEL, sql_echo=settings.DATABASE_ECHO)

    database = DatabaseService(settings)
    if not database.connect():
        logger.error("Could not connect to the alerts database; set DATABASE_URL or pass --database-url")
        return 1

    try:
        return COMMANDS[args.command](database)
    except AlertDeskError as e:
        logger.error(f"{args.command} failed: {e.message}")
        return 1
    finally:
        database.disconnect()


if __name__ == "__main__":
    sys.exit(main())
