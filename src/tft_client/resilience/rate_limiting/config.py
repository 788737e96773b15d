"""Rate limiting configuration models."""

import math
from dataclasses import dataclass

from pydantic import BaseModel, Field

from ...domain.exceptions import ConfigurationException

DEFAULT_BUFFER_RATE = 0.9


class RateLimitConfig(BaseModel):
    """Budget for one bucket: ``max_requests`` per rolling ``window_ms``."""

    max_requests: int = Field(gt=0, description="Max requests per window")
    window_ms: int = Field(gt=0, description="Window size in milliseconds")
    buffer_rate: float | None = Field(
        default=None,
        gt=0.0,
        le=1.0,
        description="Share of the nominal limit to use (defaults to the limiter's)",
    )

    def resolve(self, default_buffer_rate: float) -> "RateLimitConfig":
        """Return a copy with ``buffer_rate`` filled in."""
        if self.buffer_rate is not None:
            return self
        return self.model_copy(update={"buffer_rate": default_buffer_rate})

    @property
    def effective_max(self) -> int:
        """Nominal limit scaled down by the buffer rate.

        Only defined once ``resolve()`` has filled in the buffer rate.
        """
        if self.buffer_rate is None:
            raise ConfigurationException(
                "bufferRate is unset; resolve the config first", field="buffer_rate"
            )
        return math.floor(self.max_requests * self.buffer_rate)


@dataclass(frozen=True)
class BucketStatus:
    """Point-in-time snapshot of a bucket."""

    available: int
    queued: int
    in_flight: int
