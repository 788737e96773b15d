"""Test configuration and fixtures."""

import json
from collections.abc import Callable

import httpx
import pytest
import pytest_asyncio

from tft_client.resilience.rate_limiting import RateLimitConfig, RateLimiter
from tft_client.resilience.retry import RetryConfig


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def fake_clock():
    """Create a manually advanced clock."""
    return FakeClock()


@pytest.fixture
def fast_retry_config():
    """Retry config with millisecond back-off for testing."""
    return RetryConfig(max_attempts=3, base_delay_ms=1, max_delay_ms=5)


@pytest_asyncio.fixture
async def rate_limiter():
    """Create a rate limiter with one generous bucket, destroyed afterwards."""
    limiter = RateLimiter({"test": RateLimitConfig(max_requests=100, window_ms=1000)})
    yield limiter
    limiter.destroy()


@pytest.fixture
def json_response() -> Callable[..., httpx.Response]:
    """Build JSON responses for httpx.MockTransport handlers."""

    def build(
        payload: object,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return httpx.Response(
            status_code,
            content=json.dumps(payload).encode(),
            headers={"Content-Type": "application/json", **(headers or {})},
        )

    return build
