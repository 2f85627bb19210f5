"""
Centralized logging configuration for the train lookup.

Diagnostics are structured with structlog and written to stderr so they never
mix with lookup results printed on stdout.
"""
import logging
import sys
from typing import IO, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        stream: Destination stream, stderr by default
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stderr,
        format="%(message)s",  # structlog will handle formatting
        force=True,
    )

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_lookup_logger(name: str, **context: Any) -> FilteringBoundLogger:
    """
    Get a logger bound to the parameters of one lookup.

    Args:
        name: Logger name (typically __name__)
        **context: Lookup parameters to attach to every event

    Returns:
        Bound structlog logger
    """
    return get_logger(name).bind(subsystem="lookup", **context)
