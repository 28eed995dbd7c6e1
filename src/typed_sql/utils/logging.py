"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Context binding support

Configuration is loaded from typed_sql.config.settings:
- LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO

Usage:
    >>> from typed_sql.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("assembler.metadata_fetched", table="users", columns=3)
"""

import logging
import os
from typing import Any

import structlog
from structlog.types import Processor

from typed_sql.config import get_settings


def _get_log_level() -> int:
    """Get log level from settings.

    Returns:
        Logging level constant (e.g., logging.INFO, logging.DEBUG)
    """
    try:
        level_name = get_settings().LOG_LEVEL.upper()
    except Exception:
        # Invalid TYPED_SQL_* values must not prevent logging from starting
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()

    return getattr(logging, level_name, logging.INFO)


def _configure_structlog() -> None:
    """Configure structlog with JSON rendering on top of stdlib logging."""
    logging.basicConfig(
        format="%(message)s",
        level=_get_log_level(),
    )

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Configure structlog on module import
_configure_structlog()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog BoundLogger configured with JSON rendering
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Args:
        **kwargs: Context fields to bind (e.g., dialect="mysql", table="users")

    Returns:
        A BoundLogger with the specified context already bound

    Example:
        >>> logger = bind_context(dialect="sqlite", table="users")
        >>> logger.debug("assembler.where_built", predicates=2)
    """
    return structlog.get_logger().bind(**kwargs)
