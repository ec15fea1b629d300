# -*- coding: utf-8 -*-
"""Logging setup for command-line use of the engine."""

import logging
from typing import Optional

from unitconv.config.settings import UnitConvSettings, get_settings


def configure_logging(
    settings: Optional[UnitConvSettings] = None,
    level: Optional[str] = None,
) -> None:
    """
    Apply the configured log level and format to the root logger.

    Library code only creates module loggers; applications decide whether to
    call this.

    Args:
        settings: Settings to use (process settings if omitted)
        level: Level name overriding settings.log_level
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=settings.log_format,
        force=True,
    )
