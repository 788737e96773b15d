"""Executor signatures shared by the endpoint classes."""

from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Protocol


# (bucket_name, url) -> decoded JSON
RequestExecutor = Callable[[str, str], Awaitable[Any]]


class BatchExecutor(Protocol):
    """Fetches one URL per key through a bucket; results follow key order."""

    def __call__(
        self,
        bucket_name: str,
        keys: Sequence[Any],
        url_fn: Callable[[Any], str],
    ) -> Awaitable[list[Any]]: ...
