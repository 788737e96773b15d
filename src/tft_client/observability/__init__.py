"""Observability for the TFT client: structured logging with request IDs."""

from .logging import LogFormat, RequestContext, get_logger, get_request_id, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "LogFormat",
    "RequestContext",
    "get_request_id",
]
