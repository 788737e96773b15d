"""TFT API client.

Ties the endpoint classes to the rate limiter, the retry policy and the
HTTP transport. Every attempt of every request is admitted separately, so a
retried request consumes budget like a fresh one.
"""

from collections.abc import Callable, Mapping, Sequence
from types import TracebackType
from typing import Any

import httpx
import structlog

from .api import LeagueApi, MatchApi, SummonerApi
from .config.settings import ClientSettings
from .domain.exceptions import ConfigurationException
from .observability.logging import RequestContext
from .resilience.rate_limiting import (
    DEFAULT_BUFFER_RATE,
    BucketStatus,
    RateLimitConfig,
    RateLimiter,
    run_bounded,
)
from .resilience.rate_limiting.limiter import validate_buffer_rate
from .resilience.retry import RetryConfig, with_retry
from .transport import DEFAULT_TIMEOUT_MS, RiotHttpTransport

logger = structlog.get_logger()

# Riot's published per-method limits. The buffer rate is applied on top.
DEFAULT_RATE_LIMITS: dict[str, RateLimitConfig] = {
    "league": RateLimitConfig(max_requests=270, window_ms=60_000),
    "match-list": RateLimitConfig(max_requests=600, window_ms=10_000),
    "match-detail": RateLimitConfig(max_requests=250, window_ms=10_000),
    "summoner": RateLimitConfig(max_requests=1600, window_ms=60_000),
}

RateLimitOverride = RateLimitConfig | Mapping[str, Any]


def _override_fields(override: RateLimitOverride) -> dict[str, Any]:
    if isinstance(override, RateLimitConfig):
        return override.model_dump(exclude_unset=True)
    return dict(override)


def merge_rate_limits(
    overrides: Mapping[str, RateLimitOverride] | None,
    buffer_rate: float,
) -> dict[str, RateLimitConfig]:
    """Apply per-bucket overrides field by field on top of the defaults.

    Buckets that are not among the defaults are added as given.
    """
    overrides = overrides or {}
    merged: dict[str, RateLimitConfig] = {}

    for name, defaults in DEFAULT_RATE_LIMITS.items():
        fields = defaults.model_dump()
        if name in overrides:
            fields.update(
                {k: v for k, v in _override_fields(overrides[name]).items() if v is not None}
            )
        merged[name] = RateLimitConfig.model_validate(fields).resolve(buffer_rate)

    for name, override in overrides.items():
        if name not in merged:
            merged[name] = RateLimitConfig.model_validate(
                _override_fields(override)
            ).resolve(buffer_rate)

    return merged


class TftClient:
    """Rate-limited client for the TFT league, match and summoner endpoints.

    Example:
        >>> async with TftClient(api_key) as client:
        ...     ladder = await client.league.get_challenger_league("KR")
    """

    def __init__(
        self,
        api_key: str,
        *,
        rate_limits: Mapping[str, RateLimitOverride] | None = None,
        app_rate_limit: RateLimitOverride | None = None,
        buffer_rate: float = DEFAULT_BUFFER_RATE,
        retry: RetryConfig | None = None,
        timeout_ms: float = DEFAULT_TIMEOUT_MS,
        batch_concurrency: int | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the client.

        Args:
            api_key: Riot API key, sent with every request
            rate_limits: Per-bucket overrides of the default limits
            app_rate_limit: Application-wide budget applied to every request
            buffer_rate: Share of each limit to use, in ``(0, 1]``
            retry: Retry configuration
            timeout_ms: Per-request timeout in milliseconds
            batch_concurrency: Worker count for batch calls (default: one per key)
            http_client: Shared httpx client; one is created if omitted

        Raises:
            ConfigurationException: Missing API key or invalid buffer rate
        """
        if not api_key or not api_key.strip():
            raise ConfigurationException("apiKey is required", field="api_key")
        validate_buffer_rate(buffer_rate)

        self._retry_config = retry or RetryConfig()
        self._batch_concurrency = batch_concurrency

        application = None
        if app_rate_limit is not None:
            application = RateLimitConfig.model_validate(
                _override_fields(app_rate_limit)
            ).resolve(buffer_rate)

        self.rate_limiter = RateLimiter(
            merge_rate_limits(rate_limits, buffer_rate),
            default_buffer_rate=buffer_rate,
            application=application,
        )
        self._transport = RiotHttpTransport(
            api_key, timeout_ms=timeout_ms, http_client=http_client
        )

        self.league = LeagueApi(self._request)
        self.match = MatchApi(self._request, self._request_batch)
        self.summoner = SummonerApi(self._request)

    @classmethod
    def from_settings(
        cls, settings: ClientSettings | None = None, **kwargs: Any
    ) -> "TftClient":
        """Build a client from ``TFT_*`` environment settings.

        Keyword arguments override the values taken from settings.
        """
        settings = settings or ClientSettings()
        options: dict[str, Any] = {
            "buffer_rate": settings.buffer_rate,
            "timeout_ms": settings.timeout_ms,
            "retry": settings.get_retry_config(),
            "app_rate_limit": settings.get_app_rate_limit(),
        }
        options.update(kwargs)
        return cls(settings.api_key, **options)

    async def _request(self, bucket_name: str, url: str) -> Any:
        with RequestContext():
            logger.debug("Requesting", bucket=bucket_name, url=url)
            return await with_retry(
                lambda: self.rate_limiter.execute(
                    bucket_name, lambda: self._transport.fetch_json(url)
                ),
                self._retry_config,
            )

    async def _request_batch(
        self,
        bucket_name: str,
        keys: Sequence[Any],
        url_fn: Callable[[Any], str],
    ) -> list[Any]:
        with RequestContext():
            logger.debug("Requesting batch", bucket=bucket_name, size=len(keys))
            return await run_bounded(
                keys,
                lambda key: self._request(bucket_name, url_fn(key)),
                self._batch_concurrency,
            )

    def get_status(self, bucket_name: str) -> BucketStatus:
        """Current availability of a bucket."""
        return self.rate_limiter.get_status(bucket_name)

    def destroy(self) -> None:
        """Fail queued requests and refuse new ones. Safe to call twice."""
        self.rate_limiter.destroy()

    async def aclose(self) -> None:
        """Destroy the limiter and close the HTTP client if this client owns it."""
        self.destroy()
        await self._transport.aclose()

    async def __aenter__(self) -> "TftClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()
