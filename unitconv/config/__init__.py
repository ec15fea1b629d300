"""
Configuration for the unit conversion engine.

- Environment-based settings (UNITCONV_ prefix)
- Process-wide cache with a reset hook for tests
- Logging setup for applications and the CLI
"""

from unitconv.config.settings import (
    LOG_LEVELS,
    UnitConvSettings,
    get_settings,
    reset_settings,
)
from unitconv.config.logging_setup import configure_logging

__all__ = [
    "LOG_LEVELS",
    "UnitConvSettings",
    "configure_logging",
    "get_settings",
    "reset_settings",
]
