"""Exception hierarchy for the TFT client."""

from typing import Any

from .models import ErrorCode


class TftClientException(Exception):
    """Base exception for the TFT client."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ConfigurationException(TftClientException):
    """Invalid client or limiter configuration."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, {"field": field})
        self.field = field


class ApiException(TftClientException):
    """Non-success HTTP status other than 429."""

    def __init__(self, message: str, status_code: int, body: Any | None = None):
        super().__init__(message, ErrorCode.API_ERROR, {"status_code": status_code})
        self.status_code = status_code
        self.body = body


class RateLimitException(TftClientException):
    """Upstream throttled the request (HTTP 429).

    ``retry_after_ms`` carries the server's ``Retry-After`` hint converted to
    milliseconds, or ``None`` when the header was absent or unparseable.
    """

    status_code = 429

    def __init__(
        self,
        message: str,
        retry_after_ms: float | None = None,
        body: Any | None = None,
    ):
        super().__init__(
            message, ErrorCode.RATE_LIMIT_ERROR, {"retry_after_ms": retry_after_ms}
        )
        self.retry_after_ms = retry_after_ms
        self.body = body


class TransportException(TftClientException):
    """Network, timeout or connection failure below the HTTP layer."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message, ErrorCode.TRANSPORT_ERROR, {"url": url})
        self.url = url


class UnknownBucketException(TftClientException):
    """Operation referenced a bucket that was never registered."""

    def __init__(self, bucket_name: str):
        super().__init__(
            f'Unknown rate limit bucket: "{bucket_name}"',
            ErrorCode.UNKNOWN_BUCKET,
            {"bucket_name": bucket_name},
        )
        self.bucket_name = bucket_name


class RateLimiterDestroyedException(TftClientException):
    """Rate limiter was torn down; no new work is accepted."""

    def __init__(self, bucket_name: str | None = None):
        message = "RateLimiter destroyed"
        if bucket_name:
            message = f'{message} (bucket "{bucket_name}")'
        super().__init__(
            message, ErrorCode.LIMITER_DESTROYED, {"bucket_name": bucket_name}
        )
        self.bucket_name = bucket_name
