"""
Configuration management using Pydantic Settings.

Settings are loaded from environment variables prefixed with ``MONETA_``.
Nothing in the arithmetic depends on configuration; settings drive the
ambient layers (logging, display strings in serialized output).

Usage:
    from moneta.core.config import get_settings

    settings = get_settings()
    if settings.is_development:
        ...

Environment variables:
    MONETA_ENVIRONMENT        development | testing | ci | production
    MONETA_LOG_LEVEL          DEBUG | INFO | WARNING | ERROR | CRITICAL
    MONETA_DISPLAY_PRECISION  fractional digits of rendered display strings
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from moneta.core.enums import Environment

LOG_LEVELS: frozenset[str] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables (MONETA_*)
        2. Default values

    Returns:
        Settings: Configuration loaded from environment.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    display_precision: int = Field(
        default=2,
        description="Fractional digits used when rendering amounts for display",
    )

    # Application metadata
    app_name: str = Field(
        default="moneta",
        description="Name reported in structured logs",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Library version",
    )

    model_config = SettingsConfigDict(
        env_prefix="MONETA_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name (case-insensitive).

        Returns:
            str: Upper-case log level name.

        Raises:
            ValueError: If the level is not one of the five standard levels.
        """
        normalized = v.upper().strip()
        if normalized not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(LOG_LEVELS)}")
        return normalized

    @field_validator("display_precision")
    @classmethod
    def validate_display_precision(cls, v: int) -> int:
        """
        Validate display precision is within Decimal's default precision.

        Args:
            v: Number of fractional digits.

        Returns:
            int: Validated precision.

        Raises:
            ValueError: If precision is not between 0 and 28.
        """
        if not 0 <= v <= 28:
            raise ValueError("display_precision must be between 0 and 28")
        return v

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """
        Check if running in CI environment.

        Returns:
            bool: True if environment is CI, False otherwise.
        """
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.
    Call ``get_settings.cache_clear()`` after changing the environment.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
