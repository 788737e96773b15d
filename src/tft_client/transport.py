"""HTTP transport for the Riot API.

Maps responses onto the client's error taxonomy: 429 becomes
``RateLimitException``, any other non-2xx status ``ApiException`` and
failures below HTTP ``TransportException``.
"""

import math
from typing import Any

import httpx
import structlog

from .domain.exceptions import ApiException, RateLimitException, TransportException

logger = structlog.get_logger()

DEFAULT_TIMEOUT_MS = 30_000
API_KEY_HEADER = "X-Riot-Token"


def parse_retry_after_ms(value: str | None) -> float | None:
    """Convert a ``Retry-After`` seconds header to milliseconds.

    Missing, non-numeric or negative values give ``None`` instead of
    failing the call.
    """
    if value is None or not value.strip():
        return None
    try:
        seconds = float(value)
    except ValueError:
        return None
    if not math.isfinite(seconds) or seconds < 0:
        return None
    return seconds * 1000.0


def _read_body(response: httpx.Response) -> Any | None:
    try:
        return response.json()
    except ValueError:
        return None


class RiotHttpTransport:
    """Performs authenticated GET requests and decodes JSON bodies."""

    def __init__(
        self,
        api_key: str,
        *,
        timeout_ms: float = DEFAULT_TIMEOUT_MS,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize transport.

        Args:
            api_key: Value sent in the ``X-Riot-Token`` header
            timeout_ms: Per-request timeout in milliseconds
            http_client: Shared client; one is created (and owned) if omitted
        """
        self.timeout_ms = timeout_ms
        self._headers = {API_KEY_HEADER: api_key, "Accept": "application/json"}
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient()

    async def fetch_json(self, url: str) -> Any:
        """GET ``url`` and return the decoded JSON body."""
        try:
            response = await self._client.get(
                url,
                headers=self._headers,
                timeout=httpx.Timeout(self.timeout_ms / 1000.0),
            )
        except httpx.TimeoutException as exc:
            raise TransportException(
                f"Request timed out after {self.timeout_ms:g}ms: {url}", url
            ) from exc
        except httpx.TransportError as exc:
            raise TransportException(
                f"Network error requesting {url}: {exc}", url
            ) from exc

        if response.status_code == 429:
            retry_after_ms = parse_retry_after_ms(response.headers.get("Retry-After"))
            logger.info(
                "Rate limited by upstream", url=url, retry_after_ms=retry_after_ms
            )
            raise RateLimitException(
                f"Rate limited on {url}", retry_after_ms, _read_body(response)
            )

        if not response.is_success:
            raise ApiException(
                f"API request failed: {response.status_code} {response.reason_phrase}",
                response.status_code,
                _read_body(response),
            )

        return response.json()

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()
