"""
Environment-driven configuration for the TFT client.

Values come from ``TFT_``-prefixed environment variables or a ``.env`` file
and are turned into the models the client consumes.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..resilience.rate_limiting.config import DEFAULT_BUFFER_RATE, RateLimitConfig
from ..resilience.retry.config import RetryConfig


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class RetrySettings(BaseSettings):
    """Retry configuration for Riot API calls."""

    model_config = SettingsConfigDict(
        env_prefix="TFT_RETRY_", env_file=".env", extra="ignore"
    )

    max_attempts: int = 3
    base_delay_ms: float = 1000.0
    max_delay_ms: float = 30000.0

    def get_config(self) -> RetryConfig:
        """Get retry configuration."""
        return RetryConfig(
            max_attempts=self.max_attempts,
            base_delay_ms=self.base_delay_ms,
            max_delay_ms=self.max_delay_ms,
        )


class ObservabilitySettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TFT_LOG_", env_file=".env", extra="ignore"
    )

    level: LogLevel = LogLevel.INFO
    format: str = "console"
    file: str | None = None


class ClientSettings(BaseSettings):
    """Main client settings."""

    model_config = SettingsConfigDict(
        env_prefix="TFT_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_key: str = ""
    buffer_rate: float = DEFAULT_BUFFER_RATE
    timeout_ms: int = 30_000

    # Application-wide budget, enabled when both values are set
    app_rate_limit_max_requests: int | None = None
    app_rate_limit_window_ms: int | None = None

    retry: RetrySettings = Field(default_factory=RetrySettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    def get_retry_config(self) -> RetryConfig:
        """Get retry configuration."""
        return self.retry.get_config()

    def get_app_rate_limit(self) -> RateLimitConfig | None:
        """Get the application-wide budget, if configured."""
        if self.app_rate_limit_max_requests is None or self.app_rate_limit_window_ms is None:
            return None
        return RateLimitConfig(
            max_requests=self.app_rate_limit_max_requests,
            window_ms=self.app_rate_limit_window_ms,
        )
