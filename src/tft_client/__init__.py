"""
Rate-limited async client for the Riot Games Teamfight Tactics API.

Requests are admitted by per-method sliding-window buckets, retried on
throttling and transient network failures, and decoded into pydantic models.
"""

from .api import MatchListOptions
from .client import DEFAULT_RATE_LIMITS, TftClient
from .config import ClientSettings
from .domain import (
    ApiException,
    ConfigurationException,
    Division,
    LowerTier,
    RateLimiterDestroyedException,
    RateLimitException,
    Region,
    RegionGroup,
    TftClientException,
    Tier,
    TransportException,
    UnknownBucketException,
)
from .regions import get_region_group, get_region_group_host, get_regional_host
from .resilience import (
    BucketStatus,
    RateLimitConfig,
    RateLimiter,
    RetryConfig,
    retry_decorator,
    with_retry,
)

__version__ = "0.1.0"

__all__ = [
    "TftClient",
    "ClientSettings",
    "DEFAULT_RATE_LIMITS",
    "MatchListOptions",
    "RateLimiter",
    "RateLimitConfig",
    "BucketStatus",
    "RetryConfig",
    "with_retry",
    "retry_decorator",
    "Region",
    "RegionGroup",
    "Tier",
    "LowerTier",
    "Division",
    "get_region_group",
    "get_regional_host",
    "get_region_group_host",
    "TftClientException",
    "ConfigurationException",
    "ApiException",
    "RateLimitException",
    "TransportException",
    "UnknownBucketException",
    "RateLimiterDestroyedException",
]
