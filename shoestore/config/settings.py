"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management for the storefront client using Pydantic Settings.

A single cached Settings instance is shared across the application through
get_settings().

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

Security Considerations:
-----------------------
- Never commit .env files to version control
- Change the default administrator password immediately

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
        debug: Enable debug mode for verbose logging
        log_level: Logging level used when debug is off
        database_url: SQLAlchemy database connection string
        sql_echo: Echo SQL statements to the log
        default_admin_login: Initial administrator login
        default_admin_password: Initial administrator password
        default_admin_full_name: Initial administrator display name
        seed_demo_data: Populate reference data, users and products on startup
        currency_label: Suffix appended to formatted prices

    Example:
        >>> settings = Settings()
        >>> print(settings.app_name)
        'Shoe Store'
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
        default="Shoe Store",
        description="Display name for the application"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level when debug mode is off"
    )

    # =========================================================================
    # DATABASE SETTINGS
    # =========================================================================
    database_url: str = Field(
        default="sqlite:///./storage/db/shoestore.db",
        description="SQLAlchemy database connection string"
    )

    sql_echo: bool = Field(
        default=False,
        description="Log every SQL statement"
    )

    # =========================================================================
    # DEFAULT ADMIN SETTINGS
    # =========================================================================
    default_admin_login: str = Field(
        default="admin",
        min_length=3,
        max_length=50,
        description="Initial administrator login"
    )

    default_admin_password: str = Field(
        default="admin123",
        min_length=6,
        description="Initial administrator password"
    )

    default_admin_full_name: str = Field(
        default="Администратор системы",
        min_length=1,
        max_length=150,
        description="Initial administrator display name"
    )

    seed_demo_data: bool = Field(
        default=False,
        description="Populate demo reference data, users and products"
    )

    # =========================================================================
    # PRESENTATION SETTINGS
    # =========================================================================
    currency_label: str = Field(
        default="руб",
        description="Suffix appended to formatted prices"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """
        Validate and normalize application environment.

        Unknown values fall back to 'development'.
        """
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """
        Validate the logging level name.

        Raises:
            ValueError: If the level is not a standard logging level
        """
        supported = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        normalized = value.upper().strip()

        if normalized not in supported:
            raise ValueError(
                f"Unsupported log level: {value}. "
                f"Supported: {', '.join(sorted(supported))}"
            )

        return normalized

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def effective_log_level(self) -> int:
        """Logging level as an int, DEBUG when debug mode is on."""
        if self.debug:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================
    def get_database_path(self) -> Optional[Path]:
        """
        Extract database file path for SQLite databases.

        Returns:
            Path to database file, or None for in-memory and non-SQLite databases
        """
        if not self.database_url.startswith("sqlite:///"):
            return None

        db_path = self.database_url.replace("sqlite:///", "", 1)
        if not db_path or db_path == ":memory:":
            return None
        if db_path.startswith("./"):
            db_path = db_path[2:]
        return Path(db_path)

    def ensure_directories(self) -> None:
        """Create the database directory for file-based SQLite."""
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

    Uses lru_cache so only one Settings instance is created for the
    application lifecycle. Call get_settings.cache_clear() to reload.

    Returns:
        Global Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
