# -*- coding: utf-8 -*-
"""
Configuration for the unit conversion engine.

Settings are read from environment variables prefixed with ``UNITCONV_``
(for example ``UNITCONV_LOG_LEVEL=DEBUG``) and cached once per process.
"""

import logging
import threading
from typing import Optional

from pydantic import Field, ValidationError as PydanticValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from unitconv.exceptions import ApplicationError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class UnitConvSettings(BaseSettings):
    """Engine and CLI settings."""

    model_config = SettingsConfigDict(env_prefix="UNITCONV_", extra="ignore")

    log_level: str = Field(
        default="WARNING",
        description="Root log level for the CLI and configure_logging()",
    )
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="logging.Formatter format string",
    )
    default_precision: int = Field(
        default=6,
        ge=0,
        le=15,
        description="Decimal places shown by the CLI",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


_settings: Optional[UnitConvSettings] = None
_lock = threading.Lock()


def get_settings() -> UnitConvSettings:
    """
    Get the process-wide settings, loading them on first use.

    Raises:
        ApplicationError: If an environment variable holds an invalid value
    """
    global _settings
    if _settings is None:
        with _lock:
            if _settings is None:
                try:
                    _settings = UnitConvSettings()
                except PydanticValidationError as e:
                    raise ApplicationError(
                        "Invalid unit converter configuration",
                        code="CONFIGURATION_ERROR",
                        cause=e,
                        context={"errors": [err["msg"] for err in e.errors()]},
                    ) from e
                logger.debug(f"Loaded settings: {_settings.model_dump()}")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings (for testing)."""
    global _settings
    with _lock:
        _settings = None
