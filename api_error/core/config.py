"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables prefixed with ``API_ERROR_``.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Every field has a default, so importing the library never requires setup

Usage:
    from api_error.core.config import settings

    # Access config
    if settings.use_json:
        ...

    # Environment detection
    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache
import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from api_error.core.constants import DEFAULT_APP_NAME, ENV_PREFIX, VERSION
from api_error.core.enums import Environment, Level


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Loads configuration from environment variables.

    Configuration precedence:
        1. Environment variables (``API_ERROR_*``)
        2. Default values

    Returns:
        Settings: Library configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )

    # Logging
    log_level: str = Field(
        default="DEBUG",
        description="Minimum level emitted (TRACE, DEBUG, INFO, WARN, ERROR, CRITICAL)",
    )
    log_json: bool | None = Field(
        default=None,
        description="Force JSON (true) or console (false) output. "
        "Unset means JSON everywhere except development.",
    )

    # Cause chain backend
    cause_chain_backend: Literal["exception", "traceback"] = Field(
        default="exception",
        description="Implementation used to wrap private errors: "
        "'exception' (native chaining) or 'traceback' (snapshot with traceback)",
    )

    # Application metadata bound onto every record
    app_name: str = Field(
        default=DEFAULT_APP_NAME,
        description="Application name",
    )
    app_version: str = Field(
        default=VERSION,
        description="Application version",
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize log level name.

        Args:
            v: Level name.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the name is neither a Level nor CRITICAL.
        """
        name = v.strip().upper()
        if name == "CRITICAL":
            return name
        return Level.parse(name).value

    @property
    def min_level(self) -> int:
        """
        Numeric level passed to the structlog filter.

        Returns:
            int: Numeric level on the stdlib scale.
        """
        if self.log_level == "CRITICAL":
            return logging.CRITICAL
        return Level.parse(self.log_level).stdlib_level

    @property
    def use_json(self) -> bool:
        """
        Resolve renderer choice.

        Returns:
            bool: True for JSON output, False for console output.
        """
        if self.log_json is not None:
            return self.log_json
        return self.environment != Environment.DEVELOPMENT

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

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
