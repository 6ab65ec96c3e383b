"""Structured logging setup built on structlog."""

import logging
import sys
from typing import Optional

import structlog

from lambda_middlewares.config import get_settings

# Silent until the application configures logging
logging.getLogger("lambda_middlewares").addHandler(logging.NullHandler())


def configure_logging(log_level: Optional[str] = None, debug: Optional[bool] = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        log_level: Minimum level name (defaults to settings.log_level)
        debug: Render human-readable console output instead of JSON
            (defaults to settings.debug)
    """
    settings = get_settings()
    if log_level is None:
        log_level = settings.log_level
    if debug is None:
        debug = settings.debug

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)

    renderer = structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a structlog logger backed by the stdlib logger of the given name."""
    return structlog.wrap_logger(logging.getLogger(name))
