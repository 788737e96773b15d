"""Logging configuration and setup."""

import logging
import sys
from enum import Enum

import structlog
from structlog.stdlib import LoggerFactory

from .correlation import RequestIDProcessor
from .formatters import ConsoleFormatter, JSONFormatter


class LogFormat(str, Enum):
    """Logging formats."""

    JSON = "json"
    CONSOLE = "console"


def setup_logging(
    level: str = "INFO",
    format_type: LogFormat | str = LogFormat.CONSOLE,
    log_file: str | None = None,
    enable_colors: bool = True,
) -> None:
    """Route structlog events through the standard library.

    The client itself only emits events; applications that want them
    rendered call this once at startup.
    """
    handler: logging.Handler = (
        logging.FileHandler(log_file) if log_file else logging.StreamHandler(sys.stdout)
    )
    logging.basicConfig(
        level=getattr(logging, str(level).upper()),
        format="%(message)s",
        handlers=[handler],
        force=True,
    )

    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        RequestIDProcessor(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if LogFormat(format_type) == LogFormat.JSON:
        processors.append(JSONFormatter())
    else:
        processors.append(ConsoleFormatter(colors=enable_colors and not log_file))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)  # type: ignore[no-any-return]
