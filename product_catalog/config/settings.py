"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management for the product catalog using Pydantic Settings.

Features:
---------
- Environment variable loading with type validation
- .env file support for local development
- SQLite path helpers for the local record store

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name for the application
        app_env: Environment mode (development/staging/production)
        debug: Enable verbose logging and SQL echo
        database_url: SQLAlchemy connection string for the record store
        seed_sample_data: Insert a sample product into an empty store

    Example:
        >>> settings = Settings()
        >>> print(settings.app_name)
        'Product Catalog'
        >>> print(settings.is_production)
        False
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Product Catalog",
        description="Display name for the application"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging and SQL echo"
    )

    # =========================================================================
    # STORE SETTINGS
    # =========================================================================
    database_url: str = Field(
        default="sqlite:///./storage/db/products.db",
        description="SQLAlchemy database connection string"
    )

    seed_sample_data: bool = Field(
        default=False,
        description="Insert a sample product when the store is empty"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """
        Validate and normalize application environment.

        Unknown values fall back to 'development' with a warning.
        """
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, value: str) -> str:
        """Reject blank connection strings."""
        value = value.strip()
        if not value:
            raise ValueError("database_url must not be empty")
        return value

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def log_level(self) -> int:
        """Logging level derived from the debug flag."""
        return logging.DEBUG if self.debug else logging.INFO

    @property
    def is_in_memory(self) -> bool:
        """True for a transient in-memory SQLite database."""
        return self.database_url in ("sqlite://", "sqlite:///:memory:")

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================
    def get_database_path(self) -> Optional[Path]:
        """
        Extract database file path for SQLite databases.

        Returns:
            Path to database file, or None for in-memory and
            non-SQLite databases
        """
        if not self.database_url.startswith("sqlite") or self.is_in_memory:
            return None

        db_path = self.database_url.split(":///", 1)[-1]
        if db_path.startswith("./"):
            db_path = db_path[2:]
        return Path(db_path)

    def ensure_directories(self) -> None:
        """Create the database directory (SQLite only)."""
        db_path = self.get_database_path()
        if db_path:
            db_path.parent.mkdir(parents=True, exist_ok=True)

        logger.debug("Required directories created/verified")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"debug={self.debug})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Uses lru_cache so environment and .env are read once per process.
    Call ``get_settings.cache_clear()`` to force a reload.

    Returns:
        Global Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
