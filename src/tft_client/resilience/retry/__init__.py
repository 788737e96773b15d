"""Retry with exponential backoff for Riot API calls.

Built on tenacity; server ``Retry-After`` hints take precedence over the
computed back-off.
"""

from .config import RetryConfig
from .decorators import retry_decorator, with_retry
from .strategies import compute_delay_ms, is_retryable_by_default, wait_retry_after

__all__ = [
    "with_retry",
    "retry_decorator",
    "RetryConfig",
    "is_retryable_by_default",
    "compute_delay_ms",
    "wait_retry_after",
]
