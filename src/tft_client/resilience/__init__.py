"""Request admission and retry for the TFT client.

Rate limiting keeps every caller inside Riot's request budgets; the retry
policy re-admits attempts that failed on throttling or transient network
errors.
"""

from .rate_limiting import (
    APPLICATION_BUCKET,
    BucketStatus,
    RateLimitConfig,
    RateLimiter,
    run_bounded,
)
from .retry import RetryConfig, is_retryable_by_default, retry_decorator, with_retry

__all__ = [
    "RateLimiter",
    "RateLimitConfig",
    "BucketStatus",
    "run_bounded",
    "APPLICATION_BUCKET",
    "RetryConfig",
    "with_retry",
    "retry_decorator",
    "is_retryable_by_default",
]
