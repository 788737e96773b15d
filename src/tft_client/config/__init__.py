"""Configuration for the TFT client."""

from .settings import ClientSettings, LogLevel, ObservabilitySettings, RetrySettings

__all__ = ["ClientSettings", "RetrySettings", "ObservabilitySettings", "LogLevel"]
