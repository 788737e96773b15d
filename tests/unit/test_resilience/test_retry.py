"""Tests for retry mechanisms."""

import asyncio
import time
from unittest.mock import AsyncMock, patch

import pytest

from tft_client.domain.exceptions import (
    ApiException,
    RateLimiterDestroyedException,
    RateLimitException,
    TransportException,
    UnknownBucketException,
)
from tft_client.resilience.rate_limiting import RateLimitConfig, RateLimiter
from tft_client.resilience.retry import (
    RetryConfig,
    compute_delay_ms,
    is_retryable_by_default,
    retry_decorator,
    with_retry,
)


class RecordingSleep:
    """Stand-in for asyncio.sleep that records requested delays."""

    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


class TestIsRetryableByDefault:
    """Test default retryability."""

    def test_rate_limit_is_retryable(self):
        """Test throttling is always retried."""
        assert is_retryable_by_default(RateLimitException("Rate limited"))

    @pytest.mark.parametrize(
        "message",
        [
            "fetch failed",
            "Network error requesting https://example.com",
            "read ECONNRESET",
            "connect ETIMEDOUT 1.2.3.4:443",
            "Request timed out after 30000ms: https://example.com",
            "socket hang up",
        ],
    )
    def test_transient_network_errors_are_retryable(self, message):
        """Test network failure messages are recognized case-insensitively."""
        assert is_retryable_by_default(TransportException(message))
        assert is_retryable_by_default(RuntimeError(message))

    def test_other_errors_are_not_retryable(self):
        """Test validation and server errors are not retried."""
        assert not is_retryable_by_default(ValueError("bad input"))
        assert not is_retryable_by_default(
            ApiException("API request failed: 500 Internal Server Error", 500)
        )
        assert not is_retryable_by_default(
            ApiException("API request failed: 404 Not Found", 404)
        )

    @pytest.mark.parametrize(
        "error",
        [
            UnknownBucketException("network-stats"),
            UnknownBucketException("timeout"),
            RateLimiterDestroyedException("socket closed"),
            RateLimiterDestroyedException("fetch failed"),
        ],
    )
    def test_limiter_errors_never_retryable(self, error):
        """Test bucket errors are not retried even when the name looks like a network error."""
        assert not is_retryable_by_default(error)

    def test_cancellation_is_not_retryable(self):
        """Test non-Exception errors are never retried."""
        assert not is_retryable_by_default(asyncio.CancelledError())


class TestComputeDelay:
    """Test back-off delay computation."""

    @pytest.fixture
    def config(self):
        """Create retry config for testing."""
        return RetryConfig(base_delay_ms=100, max_delay_ms=1000)

    def test_exponential_backoff(self, config):
        """Test delays double per attempt."""
        with patch("tft_client.resilience.retry.strategies.random.random", return_value=0.0):
            assert compute_delay_ms(0, config, ValueError()) == 100
            assert compute_delay_ms(1, config, ValueError()) == 200
            assert compute_delay_ms(2, config, ValueError()) == 400

    def test_jitter_bounds(self, config):
        """Test jitter adds less than half a second."""
        for _ in range(20):
            delay = compute_delay_ms(0, config, ValueError())
            assert 100 <= delay < 600

    def test_delay_capped(self, config):
        """Test delays never exceed the maximum."""
        assert compute_delay_ms(10, config, ValueError()) == 1000

    def test_retry_after_hint_wins(self, config):
        """Test the server hint replaces exponential back-off."""
        error = RateLimitException("Rate limited", retry_after_ms=250)
        assert compute_delay_ms(3, config, error) == 250

        error = RateLimitException("Rate limited", retry_after_ms=60_000)
        assert compute_delay_ms(0, config, error) == 1000

    def test_rate_limit_without_hint_backs_off(self, config):
        """Test a 429 without Retry-After uses exponential back-off."""
        with patch("tft_client.resilience.retry.strategies.random.random", return_value=0.0):
            error = RateLimitException("Rate limited")
            assert compute_delay_ms(1, config, error) == 200


class TestWithRetry:
    """Test the retry wrapper."""

    @pytest.mark.asyncio
    async def test_success_first_try(self, fast_retry_config):
        """Test a successful operation runs once."""
        operation = AsyncMock(return_value="ok")

        assert await with_retry(operation, fast_retry_config) == "ok"
        assert operation.call_count == 1

    @pytest.mark.asyncio
    async def test_retries_rate_limit_until_success(self, fast_retry_config):
        """Test throttled attempts are retried up to max attempts."""
        operation = AsyncMock(
            side_effect=[
                RateLimitException("Rate limited"),
                RateLimitException("Rate limited"),
                "ok",
            ]
        )

        assert await with_retry(operation, fast_retry_config) == "ok"
        assert operation.call_count == 3

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self):
        """Test the last error propagates once attempts run out."""
        config = RetryConfig(max_attempts=2, base_delay_ms=1, max_delay_ms=5)
        error = RateLimitException("Rate limited")
        operation = AsyncMock(side_effect=error)

        with pytest.raises(RateLimitException) as exc_info:
            await with_retry(operation, config)

        assert exc_info.value is error
        assert operation.call_count == 2

    @pytest.mark.asyncio
    async def test_non_retryable_error_not_retried(self, fast_retry_config):
        """Test errors outside the retry policy fail immediately."""
        operation = AsyncMock(side_effect=ValueError("bad input"))

        with pytest.raises(ValueError, match="bad input"):
            await with_retry(operation, fast_retry_config)

        assert operation.call_count == 1

    @pytest.mark.asyncio
    async def test_network_error_retried(self, fast_retry_config):
        """Test transient transport failures are retried."""
        operation = AsyncMock(
            side_effect=[TransportException("Network error requesting url"), "ok"]
        )

        assert await with_retry(operation, fast_retry_config) == "ok"
        assert operation.call_count == 2

    @pytest.mark.asyncio
    async def test_retry_after_hint_honored(self):
        """Test the wait before a retry follows the server hint."""
        operation = AsyncMock(
            side_effect=[RateLimitException("Rate limited", retry_after_ms=100), "ok"]
        )

        started = time.monotonic()
        assert await with_retry(operation, RetryConfig()) == "ok"

        assert time.monotonic() - started >= 0.09

    @pytest.mark.asyncio
    async def test_injected_sleep_receives_delays(self):
        """Test back-off delays are handed to the sleep function in seconds."""
        sleep = RecordingSleep()
        operation = AsyncMock(
            side_effect=[
                RateLimitException("Rate limited", retry_after_ms=1500),
                RateLimitException("Rate limited", retry_after_ms=2500),
                "ok",
            ]
        )

        assert await with_retry(operation, RetryConfig(), sleep=sleep) == "ok"
        assert sleep.delays == [1.5, 2.5]

    @pytest.mark.asyncio
    async def test_custom_predicate_replaces_default(self, fast_retry_config):
        """Test a custom predicate is the only retryability check."""
        config = fast_retry_config.model_copy(
            update={"retry_on": lambda error: isinstance(error, ValueError)}
        )

        operation = AsyncMock(side_effect=[ValueError("flaky"), "ok"])
        assert await with_retry(operation, config) == "ok"
        assert operation.call_count == 2

        operation = AsyncMock(side_effect=RateLimitException("Rate limited"))
        with pytest.raises(RateLimitException):
            await with_retry(operation, config)
        assert operation.call_count == 1

    @pytest.mark.asyncio
    async def test_unknown_bucket_surfaces_immediately(self, fast_retry_config):
        """Test a missing bucket with a network-looking name fails on the first call."""
        limiter = RateLimiter({"test": RateLimitConfig(max_requests=10, window_ms=1000)})
        sleep = RecordingSleep()
        calls = 0

        async def operation():
            nonlocal calls
            calls += 1
            return await limiter.execute("network-stats", AsyncMock(return_value="ok"))

        with pytest.raises(UnknownBucketException):
            await with_retry(operation, fast_retry_config, sleep=sleep)

        assert calls == 1
        assert sleep.delays == []

    @pytest.mark.asyncio
    async def test_destroyed_limiter_surfaces_immediately(self, fast_retry_config):
        """Test a destroyed limiter fails on the first call whatever the bucket name."""
        limiter = RateLimiter(
            {"timeout-stats": RateLimitConfig(max_requests=10, window_ms=1000)}
        )
        limiter.destroy()
        sleep = RecordingSleep()
        calls = 0

        async def operation():
            nonlocal calls
            calls += 1
            return await limiter.execute("timeout-stats", AsyncMock(return_value="ok"))

        with pytest.raises(RateLimiterDestroyedException, match="timeout-stats"):
            await with_retry(operation, fast_retry_config, sleep=sleep)

        assert calls == 1
        assert sleep.delays == []

    @pytest.mark.asyncio
    async def test_cancellation_not_retried(self, fast_retry_config):
        """Test cancellation propagates without another attempt."""
        operation = AsyncMock(side_effect=asyncio.CancelledError())

        with pytest.raises(asyncio.CancelledError):
            await with_retry(operation, fast_retry_config)

        assert operation.call_count == 1


class TestRetryDecorator:
    """Test the decorator form."""

    @pytest.mark.asyncio
    async def test_decorated_function_retried(self, fast_retry_config):
        """Test a decorated coroutine function is retried with its arguments."""
        calls = []

        @retry_decorator(fast_retry_config)
        async def fetch(match_id, *, region):
            calls.append((match_id, region))
            if len(calls) < 2:
                raise RateLimitException("Rate limited")
            return f"{region}:{match_id}"

        assert await fetch("EUW1_1", region="europe") == "europe:EUW1_1"
        assert calls == [("EUW1_1", "europe"), ("EUW1_1", "europe")]
        assert fetch.__name__ == "fetch"
