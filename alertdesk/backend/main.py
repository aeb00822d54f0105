"""
AlertDesk - Backend API
=======================

This module provides the REST API backend for the unified alerts and
notifications of the logistics dashboard. It handles:
    - Storing alerts in a relational database (SQLAlchemy)
    - Listing, creating, updating and deleting alerts
    - Semantic alert actions (read, resolve, dismiss, escalate, acknowledge)
    - Dashboard statistics and demo data

Architecture Overview:
    Web Dashboard --> This Backend --> Alerts Database

Version: 1.0.0
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from alertdesk.backend.api import api_router
from alertdesk.backend.core.config import Settings, get_settings
from alertdesk.backend.core.exceptions import AlertDeskError
from alertdesk.backend.core.logging import get_logger, setup_logging
from alertdesk.backend.services.database import DatabaseService

logger = get_logger(__name__)


# =============================================================================
# ERROR HANDLERS
# =============================================================================

async def alertdesk_error_handler(request: Request, exc: AlertDeskError) -> JSONResponse:
    """Render a domain error as ``{"error": message}``."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as a 400 ``{"error": ...}`` body."""
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ())[1:])
        problems.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    message = "Invalid request: " + "; ".join(problems)
    logger.info(f"{request.method} {request.url.path} rejected: {message}")
    return JSONResponse({"error": message}, status_code=400)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for anything the service layer did not translate."""
    logger.exception(f"Unhandled error in {request.method} {request.url.path}: {exc}")
    return JSONResponse({"error": "Internal server error"}, status_code=500)


# =============================================================================
# FASTAPI APPLICATION
# =============================================================================

def create_app(
    settings: Optional[Settings] = None,
    database: Optional[DatabaseService] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Application settings (environment when omitted)
        database: Database service to use (built from settings when omitted)

    Returns:
        FastAPI: Configured application
    """
    settings = settings or get_settings()
    database = database or DatabaseService(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.

        Handles startup and shutdown events:
            - Startup: Connect to the alerts database
            - Shutdown: Dispose of the connection pool
        """
        logger.info(f"Starting {settings.APP_NAME}...")

        if database.engine is None and not database.connect():
            logger.warning("Database connection failed - alert endpoints will return errors")

        logger.info("Backend startup complete")

        yield

        logger.info("Shutting down...")
        database.disconnect()
        logger.info("Shutdown complete")

    app = FastAPI(
        title=settings.APP_NAME,
        description="""
        REST API for unified alerts and notifications.

        ## Features

        * **Alert records** with classification, context and escalation fields
        * **Filtered listing** by status, severity and type
        * **Alert actions**: mark read/unread, resolve, dismiss, escalate, acknowledge
        * **Statistics** for the dashboard summary

        ## Authentication

        Authentication is handled by the upstream user store; this API does
        not check credentials.
        """,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.database = database

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AlertDeskError, alertdesk_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    @app.get("/", tags=["General"])
    def root():
        """
        Root endpoint - API information.

        Returns basic API information and status.
        """
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "running",
            "documentation": "/docs",
        }

    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app


def _build_default_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, sql_echo=settings.DATABASE_ECHO)
    return create_app(settings)


app = _build_default_app()


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "alertdesk.backend.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
