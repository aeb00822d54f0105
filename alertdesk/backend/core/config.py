"""
Application Configuration
=========================

Centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables.

Environment Variables:
    DATABASE_URL: SQLAlchemy URL of the alerts database
    DATABASE_ECHO: Log every SQL statement
    LOG_LEVEL: Root logging level
    API_PREFIX: Prefix for all REST routes
    CORS_ORIGINS: Origins allowed to call the API from a browser
"""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic Settings for automatic environment variable parsing
    and validation.
    """

    # Application
    APP_NAME: str = "AlertDesk API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database Configuration
    # Left unset, every alert endpoint answers "Database connection not available"
    DATABASE_URL: Optional[str] = None
    DATABASE_ECHO: bool = False

    # API Settings
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to avoid reloading settings on every access.

    Returns:
        Settings: Application settings
    """
    return Settings()
