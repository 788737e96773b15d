"""Sliding-window bucket state."""

import asyncio
import contextvars
from collections import deque
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from .config import RateLimitConfig

# Added to every computed wait so the oldest timestamp is strictly outside
# the window when the drainer wakes up.
SAFETY_MARGIN_MS = 1.0


@dataclass
class QueueItem:
    """Pending unit of work and the future its caller awaits.

    ``context`` is the submitter's context; the work runs inside it rather
    than inside the drain loop's.
    """

    work: Callable[[], Awaitable[Any]]
    future: asyncio.Future[Any]
    context: contextvars.Context = field(default_factory=contextvars.copy_context)


@dataclass
class Bucket:
    """Admission state for one named budget.

    ``timestamps`` holds admission times still inside the window, oldest
    first. A request counts against the budget through its timestamp and,
    while it runs, through ``in_flight``. One admission decision admits at
    most ``effective_max - used`` requests, so neither ``len(timestamps)``
    nor ``in_flight`` ever exceeds ``config.effective_max``.
    """

    name: str
    config: RateLimitConfig
    timestamps: deque[float] = field(default_factory=deque)
    queue: deque[QueueItem] = field(default_factory=deque)
    in_flight: int = 0
    draining: bool = False
    drain_task: asyncio.Task[None] | None = None

    @property
    def used(self) -> int:
        """Timestamps in the window plus requests still running."""
        return len(self.timestamps) + self.in_flight

    def prune(self, now: float) -> None:
        """Drop timestamps that have left the window."""
        cutoff = now - self.config.window_ms
        while self.timestamps and self.timestamps[0] <= cutoff:
            self.timestamps.popleft()

    def available_capacity(self, now: float) -> int:
        """Number of requests that may be admitted right now."""
        self.prune(now)
        return max(0, self.config.effective_max - self.used)

    def wait_time_ms(self, now: float) -> float:
        """Time until the oldest timestamp exits the window.

        Returns 0 when no timestamps remain; capacity is then held only by
        in-flight work and frees up on completion rather than on a timer.
        """
        self.prune(now)
        if not self.timestamps:
            return 0.0
        expires_at = self.timestamps[0] + self.config.window_ms
        return max(0.0, expires_at - now) + SAFETY_MARGIN_MS

    def record_admission(self, now: float) -> None:
        self.timestamps.append(now)
        self.in_flight += 1

    def record_completion(self) -> None:
        self.in_flight -= 1

    def take(self, count: int) -> list[QueueItem]:
        """Pop up to ``count`` live items from the front of the queue.

        Items whose caller already gave up (cancelled future) are discarded
        without using a slot.
        """
        batch: list[QueueItem] = []
        while self.queue and len(batch) < count:
            item = self.queue.popleft()
            if item.future.done():
                continue
            batch.append(item)
        return batch
