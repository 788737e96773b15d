"""Retry configuration model."""

from collections.abc import Callable

from pydantic import BaseModel, Field


class RetryConfig(BaseModel):
    """Retry configuration for Riot API calls.

    ``retry_on`` replaces the built-in retryability check entirely; it is not
    combined with it. A custom predicate that ignores network errors or
    throttling will not retry them.
    """

    max_attempts: int = Field(default=3, ge=1, description="Maximum attempts")
    base_delay_ms: float = Field(
        default=1000.0, ge=0.0, description="Base delay for exponential backoff"
    )
    max_delay_ms: float = Field(
        default=30000.0, ge=0.0, description="Upper bound for any single delay"
    )
    retry_on: Callable[[BaseException], bool] | None = Field(
        default=None, description="Custom retryability predicate"
    )
