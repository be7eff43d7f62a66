"""Structured logging for keyQL, built on structlog.

keyQL never configures logging on import; it only emits events through
:func:`get_logger`.  Applications that want keyQL's events rendered call
:func:`configure_logging` once at startup (or configure structlog
themselves).

Usage:
    >>> from keyql.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("statement_built", operation="insert", table="users")
"""

from __future__ import annotations

import logging
from typing import Any

import structlog
from structlog.types import Processor


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Configure stdlib logging and structlog for keyQL events.

    Sets up:
    - ISO-8601 timestamps
    - Logger name and log level
    - JSON rendering when ``json_output`` is set, console rendering otherwise

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to INFO.
        json_output: Render events as JSON lines instead of console text.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s")
    logging.getLogger().setLevel(log_level)

    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a structlog logger that writes through the stdlib logger ``name``.

    Events run through whatever processors structlog is configured with,
    then reach ``logging.getLogger(name)``.  In a process that configured
    nothing, stdlib's WARNING threshold drops keyQL's debug events.

    Args:
        name: Logger name (typically ``__name__`` of the calling module).

    Returns:
        A structlog bound logger (lazy proxy until first use).
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
