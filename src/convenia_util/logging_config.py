"""
Logging setup.
"""
import logging
from typing import Optional

import structlog

from .config import LogConfig, LogFormat


def configure_logging(config: Optional[LogConfig] = None) -> None:
    """
    Configure structlog for the host program.

    The library itself never calls this; it only emits events through
    ``structlog.get_logger()``.

    Args:
        config: Logging settings, read from the environment when omitted
    """
    config = config or LogConfig()
    renderer = (
        structlog.processors.JSONRenderer()
        if config.format == LogFormat.JSON
        else structlog.dev.ConsoleRenderer()
    )
    level = logging.getLevelName(config.level)
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
