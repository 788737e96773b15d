"""Retry wrapper and decorator for Riot API calls."""

import asyncio
import functools
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import structlog
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
)

from .config import RetryConfig
from .strategies import is_retryable_by_default, wait_retry_after

logger = structlog.get_logger()

T = TypeVar("T")


def _log_retry(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
    logger.warning(
        "Operation failed, retrying",
        attempt=retry_state.attempt_number,
        delay_ms=round(delay * 1000, 1),
        error_type=type(error).__name__,
        error_message=str(error),
    )


def _retry_predicate(config: RetryConfig) -> Callable[[BaseException], bool]:
    predicate = config.retry_on or is_retryable_by_default

    def should_retry(error: BaseException) -> bool:
        # Cancellation is never an operation failure
        if not isinstance(error, Exception):
            return False
        return predicate(error)

    return should_retry


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    config: RetryConfig | None = None,
    *,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Call ``operation`` until it succeeds or retries run out.

    Args:
        operation: Zero-argument coroutine function, called once per attempt
        config: Retry configuration (defaults to ``RetryConfig()``)
        sleep: Coroutine used for back-off delays, in seconds

    Returns:
        The first successful result

    Raises:
        The last error, unchanged, once attempts are exhausted or the error
        is not retryable.
    """
    config = config or RetryConfig()
    retrying = AsyncRetrying(
        stop=stop_after_attempt(config.max_attempts),
        wait=wait_retry_after(config),
        retry=retry_if_exception(_retry_predicate(config)),
        before_sleep=_log_retry,
        sleep=sleep,
        reraise=True,
    )
    return await retrying(operation)


def retry_decorator(
    config: RetryConfig | None = None,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Decorator form of :func:`with_retry` for async functions.

    Args:
        config: Retry configuration

    Returns:
        Decorator function
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            return await with_retry(lambda: func(*args, **kwargs), config)

        return wrapper

    return decorator
