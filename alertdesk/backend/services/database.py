"""
Database Service
================

Owns the SQLAlchemy engine for the alerts store:
- Connecting and creating the schema
- Handing out per-request sessions
- Reporting connectivity for health checks

One instance is built per application and injected into request handlers;
nothing in the package holds a module-level database handle.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from alertdesk.backend.core.config import Settings
from alertdesk.backend.core.exceptions import StoreUnavailableError
from alertdesk.backend.core.logging import get_logger
from alertdesk.backend.db.base import Base

logger = get_logger(__name__)


class DatabaseService:
    """
    Service class for the relational alerts store.

    The service starts disconnected. Until ``connect`` succeeds every call to
    ``session`` raises ``StoreUnavailableError``.
    """

    def __init__(self, settings: Settings):
        """Initialize database service (not connected yet)."""
        self.settings = settings
        self.engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    def connect(self) -> bool:
        """
        Create the engine and make sure the alerts table exists.

        Returns:
            bool: True if connection successful, False otherwise
        """
        url = self.settings.DATABASE_URL
        if not url:
            logger.warning("DATABASE_URL is not set - alerts store unavailable")
            return False

        try:
            engine = create_engine(url, echo=self.settings.DATABASE_ECHO, **self._engine_options(url))
            Base.metadata.create_all(bind=engine)
        except (SQLAlchemyError, ImportError) as e:
            logger.error(f"Database connection failed: {e}")
            return False

        self.engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)
        logger.info(f"Database connected: {engine.url.render_as_string(hide_password=True)}")
        return True

    def disconnect(self) -> None:
        """Dispose of the engine and its connection pool."""
        if self.engine:
            self.engine.dispose()
            logger.info("Database disconnected")
        self.engine = None
        self._session_factory = None

    def is_connected(self) -> bool:
        """Check if the database answers a trivial query."""
        if self.engine is None:
            return False
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Database health check failed: {e}")
            return False

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Get a database session context manager.

        Yields:
            Session committed on success or rolled back on failure

        Raises:
            StoreUnavailableError: If the service is not connected
        """
        if self._session_factory is None:
            raise StoreUnavailableError()

        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    @staticmethod
    def _engine_options(url: str) -> dict:
        if not url.startswith("sqlite"):
            return {"pool_pre_ping": True}

        options: dict = {"connect_args": {"check_same_thread": False}}
        # In-memory databases live inside a single connection
        if url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url:
            options["poolclass"] = StaticPool
        return options
