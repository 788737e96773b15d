"""Retryability and back-off delay for Riot API calls."""

import random

from tenacity import RetryCallState
from tenacity.wait import wait_base

from ...domain.exceptions import (
    RateLimiterDestroyedException,
    RateLimitException,
    UnknownBucketException,
)
from .config import RetryConfig

# Upper bound (exclusive) of the random jitter added to exponential delays
JITTER_MS = 500.0

TRANSIENT_NETWORK_MARKERS = (
    "fetch failed",
    "network",
    "econnreset",
    "connection reset",
    "etimedout",
    "timed out",
    "timeout",
    "socket hang up",
    "socket closed",
)


def is_retryable_by_default(error: BaseException) -> bool:
    """Retry throttling and transient network failures, nothing else."""
    if isinstance(error, RateLimitException):
        return True
    if not isinstance(error, Exception):
        return False
    # Their messages carry a bucket name, which may look like a network error.
    if isinstance(error, (UnknownBucketException, RateLimiterDestroyedException)):
        return False

    message = str(error).lower()
    return any(marker in message for marker in TRANSIENT_NETWORK_MARKERS)


def compute_delay_ms(attempt: int, config: RetryConfig, error: BaseException | None) -> float:
    """Delay before the attempt after ``attempt`` (0-based).

    A server ``Retry-After`` hint wins over exponential back-off; both are
    capped at ``max_delay_ms``.
    """
    if isinstance(error, RateLimitException) and error.retry_after_ms is not None:
        return min(error.retry_after_ms, config.max_delay_ms)

    exponential = config.base_delay_ms * 2**attempt
    jitter = random.random() * JITTER_MS
    return min(exponential + jitter, config.max_delay_ms)


class wait_retry_after(wait_base):
    """Tenacity wait strategy wrapping :func:`compute_delay_ms`."""

    def __init__(self, config: RetryConfig) -> None:
        self.config = config

    def __call__(self, retry_state: RetryCallState) -> float:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        attempt = retry_state.attempt_number - 1
        return compute_delay_ms(attempt, self.config, error) / 1000.0
