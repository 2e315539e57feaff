"""
Async transport for the Xtream-Codes ``player_api.php`` endpoint.

BaseApiClient paces requests through a RateLimiter, retries transient
failures, and maps panel failures onto the ExternalAPIError family.

Usage:
    class PanelClient(BaseApiClient):
        async def live_streams(self) -> list:
            return await self._get("/player_api.php", {"action": "get_live_streams"})
"""

import asyncio
import logging
import time
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_RETRY_AFTER = 60
MAX_RATE_LIMIT_WAIT = 30


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ExternalAPIError(Exception):
    """Base exception for panel API errors."""

    def __init__(
        self,
        message: str,
        code: str = "EXTERNAL_API_ERROR",
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class RateLimitError(ExternalAPIError):
    """The panel kept answering 429 until retries ran out."""

    def __init__(self, message: str, retry_after: int = DEFAULT_RETRY_AFTER):
        super().__init__(message, code="RATE_LIMITED", status_code=429)
        self.retry_after = retry_after


class AuthenticationError(ExternalAPIError):
    """Raised when the panel rejects the supplied credentials."""

    def __init__(self, message: str = "Authentication rejected by panel"):
        super().__init__(message, code="AUTH_FAILED", status_code=401)


class ResponseDecodeError(ExternalAPIError):
    """Raised when a response payload does not match its model."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message, code="DECODE_FAILED", status_code=502)
        self.cause = cause


def parse_retry_after(value: str | None, default: int = DEFAULT_RETRY_AFTER) -> int:
    """
    Seconds to wait according to a ``Retry-After`` header.

    Accepts delta-seconds or an HTTP-date; a date in the past yields 0.
    Anything unparseable falls back to ``default``.
    """
    if value is None:
        return default
    value = value.strip()
    if value.isdigit():
        return int(value)
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        logger.debug("Ignoring unparseable Retry-After %r", value)
        return default
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    delta = (when - datetime.now(timezone.utc)).total_seconds()
    return max(0, int(delta))


# ---------------------------------------------------------------------------
# Rate limiter
# ---------------------------------------------------------------------------

class RateLimiter:
    """Spaces calls evenly so at most ``requests_per_minute`` go out."""

    def __init__(self, requests_per_minute: int = 600):
        self.delay = 60.0 / requests_per_minute
        self._last_request = 0.0
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        async with self._lock:
            elapsed = time.monotonic() - self._last_request
            if elapsed < self.delay:
                await asyncio.sleep(self.delay - elapsed)
            self._last_request = time.monotonic()


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------

class BaseApiClient:
    """
    Rate-limited, retrying GET client bound to one panel.

    Use as an async context manager, or let the connection open lazily
    and call ``close()``. An ``httpx`` transport may be injected
    (e.g. ``httpx.MockTransport``).
    """

    def __init__(
        self,
        *,
        base_url: str,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
        requests_per_minute: int = 600,
        timeout: float = 30.0,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._default_headers = headers or {}
        self._default_params = params or {}
        self._rate_limiter = RateLimiter(requests_per_minute)
        self._timeout = timeout
        self._max_retries = max(1, max_retries)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    # -- Lifecycle -----------------------------------------------------------

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._default_headers,
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
        )

    async def __aenter__(self) -> "BaseApiClient":
        self._client = self._build_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = self._build_client()
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    # -- Requests ------------------------------------------------------------

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """
        GET ``path`` and return the parsed JSON body (object or array).

        Raises:
            RateLimitError: the panel answered 429 on every attempt
            ResponseDecodeError: the body is not JSON
            ExternalAPIError: any other failure, after retries where
                the failure is transient
        """
        query = {**self._default_params, **(params or {})}
        last_error: ExternalAPIError | None = None

        for attempt in range(1, self._max_retries + 1):
            final = attempt == self._max_retries
            await self._rate_limiter.acquire()
            try:
                response = await self.client.get(path, params=query)
            except httpx.RequestError as e:
                last_error = ExternalAPIError(f"Request failed: {e}")
                if not final:
                    await self._backoff(attempt, f"Request error: {e}")
                continue

            status = response.status_code
            if status == 429:
                retry_after = parse_retry_after(response.headers.get("retry-after"))
                if final:
                    raise RateLimitError(
                        f"Panel rate limit exceeded. Try again in {retry_after} seconds.",
                        retry_after=retry_after,
                    )
                wait = min(retry_after, MAX_RATE_LIMIT_WAIT)
                logger.warning(f"Rate limited by panel, waiting {wait}s (attempt {attempt})")
                await asyncio.sleep(wait)
                continue

            if status >= 400:
                last_error = ExternalAPIError(
                    f"HTTP {status}: {response.text[:200]}", status_code=status
                )
                # Only server errors are worth another attempt
                if status < 500:
                    raise last_error
                if not final:
                    await self._backoff(attempt, f"HTTP {status}")
                continue

            try:
                return response.json()
            except ValueError as e:
                raise ResponseDecodeError(
                    f"Panel returned non-JSON body: {response.text[:200]}", cause=e
                ) from e

        raise last_error or ExternalAPIError("Request failed after retries")

    @staticmethod
    async def _backoff(attempt: int, reason: str) -> None:
        wait = 2 ** (attempt - 1)
        logger.warning(f"{reason}; retrying in {wait}s")
        await asyncio.sleep(wait)
