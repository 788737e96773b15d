"""Per-bucket sliding-window rate limiter with queued admission."""

import asyncio
import contextvars
import time
from collections.abc import Awaitable, Callable, Coroutine, Mapping, Sequence
from typing import Any, TypeVar

import structlog

from ...domain.exceptions import (
    ConfigurationException,
    RateLimiterDestroyedException,
    UnknownBucketException,
)
from .bucket import Bucket, QueueItem
from .config import DEFAULT_BUFFER_RATE, BucketStatus, RateLimitConfig

logger = structlog.get_logger()

T = TypeVar("T")
K = TypeVar("K")

APPLICATION_BUCKET = "application"


def monotonic_ms() -> float:
    """Monotonic clock in milliseconds."""
    return time.monotonic() * 1000.0


def validate_buffer_rate(buffer_rate: float) -> float:
    """Reject buffer rates outside ``(0, 1]``."""
    if not 0 < buffer_rate <= 1:
        raise ConfigurationException(
            "bufferRate must be between 0 (exclusive) and 1 (inclusive)",
            field="buffer_rate",
        )
    return buffer_rate


async def run_bounded(
    keys: Sequence[K],
    fn: Callable[[K], Awaitable[T]],
    concurrency: int | None = None,
) -> list[T]:
    """Run ``fn`` over ``keys`` with at most ``concurrency`` calls active.

    Workers pull the next unclaimed index, so results line up with ``keys``
    whatever order the calls finish in. The first failure cancels the other
    workers and propagates unchanged.

    Args:
        keys: Inputs, one call each
        fn: Coroutine function applied to every key
        concurrency: Worker count (defaults to ``len(keys)``)

    Returns:
        Results in the order of ``keys``
    """
    if not keys:
        return []
    worker_count = len(keys) if concurrency is None else min(concurrency, len(keys))
    if worker_count < 1:
        raise ValueError("concurrency must be at least 1")

    results: list[Any] = [None] * len(keys)
    next_index = 0

    async def worker() -> None:
        nonlocal next_index
        while next_index < len(keys):
            index = next_index
            next_index += 1
            results[index] = await fn(keys[index])

    workers = [asyncio.create_task(worker()) for _ in range(worker_count)]
    try:
        await asyncio.gather(*workers)
    except BaseException:
        for task in workers:
            task.cancel()
        await asyncio.gather(*workers, return_exceptions=True)
        raise
    return results


class RateLimiter:
    """Sliding-window rate limiter over a set of named buckets.

    Work submitted to a bucket waits in that bucket's FIFO queue until a
    single drain loop per bucket admits it. When an application-wide budget
    is configured, every call is admitted by the ``"application"`` bucket
    before its own bucket.
    """

    def __init__(
        self,
        configs: Mapping[str, RateLimitConfig | Mapping[str, Any]],
        *,
        default_buffer_rate: float = DEFAULT_BUFFER_RATE,
        application: RateLimitConfig | Mapping[str, Any] | None = None,
        clock: Callable[[], float] | None = None,
    ):
        """Initialize rate limiter.

        Args:
            configs: Bucket name to rate limit configuration
            default_buffer_rate: Buffer rate for buckets that set none
            application: Optional budget shared by every bucket
            clock: Millisecond clock, monotonic by default
        """
        validate_buffer_rate(default_buffer_rate)
        self._clock = clock or monotonic_ms
        self._buckets: dict[str, Bucket] = {}
        self._tasks: set[asyncio.Task[Any]] = set()
        self._destroyed = False

        for name, config in configs.items():
            self._add_bucket(name, config, default_buffer_rate)

        self._has_application = application is not None
        if application is not None:
            self._add_bucket(APPLICATION_BUCKET, application, default_buffer_rate)

        logger.debug(
            "Rate limiter initialized",
            buckets={
                name: bucket.config.effective_max
                for name, bucket in self._buckets.items()
            },
        )

    @property
    def bucket_names(self) -> list[str]:
        return list(self._buckets)

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    async def execute(self, bucket_name: str, work: Callable[[], Awaitable[T]]) -> T:
        """Run ``work`` once the bucket (and application budget) admits it.

        Args:
            bucket_name: Registered bucket name
            work: Zero-argument coroutine function performing the request

        Returns:
            Whatever ``work`` returns

        Raises:
            RateLimiterDestroyedException: After ``destroy()``
            UnknownBucketException: For names that were never registered
        """
        if self._destroyed:
            raise RateLimiterDestroyedException(bucket_name)
        bucket = self._get_bucket(bucket_name)

        if self._has_application and bucket_name != APPLICATION_BUCKET:
            application = self._buckets[APPLICATION_BUCKET]
            return await self._submit(application, lambda: self._submit(bucket, work))
        return await self._submit(bucket, work)

    async def execute_batch(
        self,
        bucket_name: str,
        keys: Sequence[K],
        work_fn: Callable[[K], Awaitable[T]],
        concurrency: int | None = None,
    ) -> list[T]:
        """Run ``work_fn`` for every key through one bucket.

        Results are positionally aligned with ``keys``; the first failure
        fails the whole batch.
        """
        if self._destroyed:
            raise RateLimiterDestroyedException(bucket_name)
        self._get_bucket(bucket_name)

        return await run_bounded(
            keys,
            lambda key: self.execute(bucket_name, lambda: work_fn(key)),
            concurrency,
        )

    def get_status(self, bucket_name: str) -> BucketStatus:
        """Snapshot of a bucket after pruning expired timestamps."""
        bucket = self._get_bucket(bucket_name)
        return BucketStatus(
            available=bucket.available_capacity(self._clock()),
            queued=len(bucket.queue),
            in_flight=bucket.in_flight,
        )

    def destroy(self) -> None:
        """Reject queued work and refuse new work. Safe to call twice."""
        if self._destroyed:
            return
        self._destroyed = True

        rejected = 0
        for bucket in self._buckets.values():
            while bucket.queue:
                item = bucket.queue.popleft()
                if not item.future.done():
                    item.future.set_exception(
                        RateLimiterDestroyedException(bucket.name)
                    )
                    rejected += 1
            if bucket.drain_task is not None:
                bucket.drain_task.cancel()
            bucket.draining = False

        logger.info("Rate limiter destroyed", rejected=rejected)

    def _add_bucket(
        self,
        name: str,
        config: RateLimitConfig | Mapping[str, Any],
        default_buffer_rate: float,
    ) -> None:
        if not isinstance(config, RateLimitConfig):
            config = RateLimitConfig.model_validate(config)
        self._buckets[name] = Bucket(
            name=name, config=config.resolve(default_buffer_rate)
        )

    def _get_bucket(self, name: str) -> Bucket:
        bucket = self._buckets.get(name)
        if bucket is None:
            raise UnknownBucketException(name)
        return bucket

    def _submit(
        self, bucket: Bucket, work: Callable[[], Awaitable[Any]]
    ) -> asyncio.Future[Any]:
        if self._destroyed:
            raise RateLimiterDestroyedException(bucket.name)
        future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        bucket.queue.append(QueueItem(work=work, future=future))
        self._trigger_drain(bucket)
        return future

    def _trigger_drain(self, bucket: Bucket) -> None:
        # The flag is set before the task exists so that a second trigger in
        # the same tick cannot start a competing loop.
        if bucket.draining or self._destroyed:
            return
        bucket.draining = True
        bucket.drain_task = self._spawn(self._drain(bucket))

    async def _drain(self, bucket: Bucket) -> None:
        try:
            while bucket.queue:
                capacity = bucket.available_capacity(self._clock())
                if capacity <= 0:
                    wait_ms = bucket.wait_time_ms(self._clock())
                    if wait_ms <= 0:
                        # Only in-flight work holds the bucket; the next
                        # completion restarts the drain.
                        break
                    logger.debug(
                        "Bucket at capacity, waiting",
                        bucket=bucket.name,
                        wait_ms=round(wait_ms, 1),
                        queued=len(bucket.queue),
                    )
                    await asyncio.sleep(wait_ms / 1000)
                    continue

                for item in bucket.take(capacity):
                    bucket.record_admission(self._clock())
                    self._spawn(self._run(bucket, item), item.context)

                if bucket.queue:
                    wait_ms = bucket.wait_time_ms(self._clock())
                    if wait_ms > 0:
                        await asyncio.sleep(wait_ms / 1000)
        finally:
            bucket.draining = False
            bucket.drain_task = None

    async def _run(self, bucket: Bucket, item: QueueItem) -> None:
        try:
            result = await item.work()
        except asyncio.CancelledError:
            if not item.future.done():
                item.future.cancel()
            raise
        except Exception as exc:
            if not item.future.done():
                item.future.set_exception(exc)
        else:
            if not item.future.done():
                item.future.set_result(result)
        finally:
            bucket.record_completion()
            if bucket.queue and not bucket.draining:
                self._trigger_drain(bucket)

    def _spawn(
        self,
        coro: Coroutine[Any, Any, Any],
        context: contextvars.Context | None = None,
    ) -> asyncio.Task[Any]:
        task = asyncio.get_running_loop().create_task(coro, context=context)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task
