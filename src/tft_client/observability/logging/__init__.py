"""Structured logging configuration and utilities."""

from .config import LogFormat, get_logger, setup_logging
from .correlation import RequestContext, RequestIDProcessor, get_request_id
from .formatters import ConsoleFormatter, JSONFormatter

__all__ = [
    "setup_logging",
    "LogFormat",
    "get_logger",
    "JSONFormatter",
    "ConsoleFormatter",
    "RequestContext",
    "RequestIDProcessor",
    "get_request_id",
]
