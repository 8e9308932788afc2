# ABOUTME: HTTP client for catalog lookup APIs, plus the reusable retry wrapper it uses.
# ABOUTME: Rate limits, retries with linear backoff, and has an injectable transport for tests.

import logging
import time
from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_RETRY_DELAY = 1.0


class LookupFetchError(Exception):
    """Raised when a request to an external lookup service fails."""


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP GET operations against JSON lookup APIs."""

    def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]: ...


def retry_call(
    fn: Callable[[], T],
    *,
    attempts: int = DEFAULT_MAX_ATTEMPTS,
    delay: float = DEFAULT_RETRY_DELAY,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Call fn, retrying on LookupFetchError with linearly increasing waits.

    The wait before retry n is ``delay * n``. The last failure is re-raised
    once all attempts are used up.
    """
    for attempt in range(1, attempts + 1):
        try:
            return fn()
        except LookupFetchError as exc:
            if attempt >= attempts:
                raise
            wait = delay * attempt
            logger.warning(
                "%s, retrying in %.1fs (attempt %d/%d)", exc, wait, attempt, attempts
            )
            sleep(wait)
    raise ValueError(f"attempts must be at least 1, got {attempts}")


class ShelfmarkHttpClient:
    """HTTP client with rate limiting and retry for lookup API calls.

    Wraps httpx.Client. Transport errors, non-2xx responses and unparseable
    bodies are all LookupFetchError and are retried; each attempt has its own
    timeout.
    """

    def __init__(
        self,
        *,
        min_request_interval: float = 0.1,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        retry_delay: float = DEFAULT_RETRY_DELAY,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": "shelfmark/0.1.0", "Accept": "application/json"},
            "timeout": timeout,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)
        self._min_interval = min_request_interval
        self._max_attempts = max_attempts
        self._retry_delay = retry_delay
        self._sleep = sleep
        self._last_request_time: float = 0.0

    def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """Send a GET request with rate limiting and retry.

        Returns:
            Parsed JSON object from the response body.

        Raises:
            LookupFetchError: When every attempt failed.
        """
        return retry_call(
            lambda: self._get_once(url, params),
            attempts=self._max_attempts,
            delay=self._retry_delay,
            sleep=self._sleep,
        )

    def close(self) -> None:
        self._client.close()

    def _get_once(self, url: str, params: dict[str, str] | None) -> dict[str, Any]:
        self._rate_limit()
        try:
            response = self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise LookupFetchError(f"Request failed: {url}: {exc}") from exc

        if not response.is_success:
            raise LookupFetchError(f"HTTP {response.status_code} from {url}")

        try:
            data = response.json()
        except ValueError as exc:
            raise LookupFetchError(f"Malformed JSON from {url}") from exc
        if not isinstance(data, dict):
            raise LookupFetchError(f"Expected a JSON object from {url}")
        return data

    def _rate_limit(self) -> None:
        """Sleep if needed to keep a minimum interval between requests."""
        if self._min_interval <= 0:
            return
        now = time.monotonic()
        elapsed = now - self._last_request_time
        if elapsed < self._min_interval and self._last_request_time > 0:
            self._sleep(self._min_interval - elapsed)
        self._last_request_time = time.monotonic()
