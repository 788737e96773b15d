"""Request ID propagation for client log events."""

import contextvars
import uuid
from typing import Any

request_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "tft_request_id", default=None
)


class RequestIDProcessor:
    """structlog processor adding the current request ID to log events."""

    def __init__(self, request_id_key: str = "request_id"):
        self.request_id_key = request_id_key

    def __call__(
        self, logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        request_id = get_request_id()
        if request_id:
            event_dict.setdefault(self.request_id_key, request_id)
        return event_dict


def get_request_id() -> str | None:
    """Get current request ID from context."""
    return request_id_var.get()


def generate_request_id() -> str:
    return uuid.uuid4().hex[:12]


class RequestContext:
    """Bind a request ID for the duration of a ``with`` block.

    An ID already bound by an outer block is kept, so retries and the
    batch items of one call share the caller's ID.
    """

    def __init__(self, request_id: str | None = None):
        self.request_id = request_id or get_request_id() or generate_request_id()
        self.token: contextvars.Token[str | None] | None = None

    def __enter__(self) -> "RequestContext":
        self.token = request_id_var.set(self.request_id)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self.token:
            request_id_var.reset(self.token)
