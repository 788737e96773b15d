"""Rate limiting for outbound Riot API calls.

Sliding-window buckets with FIFO queues, a single cooperative drain loop
per bucket and an optional application-wide budget in front of all of them.
"""

from .bucket import Bucket, QueueItem
from .config import DEFAULT_BUFFER_RATE, BucketStatus, RateLimitConfig
from .limiter import APPLICATION_BUCKET, RateLimiter, run_bounded

__all__ = [
    "RateLimiter",
    "RateLimitConfig",
    "BucketStatus",
    "Bucket",
    "QueueItem",
    "run_bounded",
    "APPLICATION_BUCKET",
    "DEFAULT_BUFFER_RATE",
]
