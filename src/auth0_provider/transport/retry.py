"""Rate-limit aware retry transport for the Auth0 Management API.

Auth0 enforces per-tenant rate limits and answers with 429 once a bucket is
empty. Responses carry ``X-RateLimit-Limit``, ``X-RateLimit-Remaining`` and
``X-RateLimit-Reset`` (UNIX epoch seconds at which the bucket refills); some
edges also send a standard ``Retry-After`` header.

| Condition | Methods retried |
|-----------|-----------------|
| 429 (rate limit) | All methods |
| 502, 503, 504 | GET, HEAD, PUT, DELETE, OPTIONS, TRACE |
| Network errors | GET, HEAD, PUT, DELETE, OPTIONS, TRACE |

The wait before a 429 retry is taken from ``Retry-After``, then from
``X-RateLimit-Reset``, then from exponential backoff. Every wait is capped
at ``max_backoff``.

Example:
```python
from auth0_provider.transport.retry import RateLimitAwareRetry
import httpx

retry_transport = RateLimitAwareRetry(
    wrapped_transport=httpx.AsyncHTTPTransport(),
    max_retries=5,
    max_backoff=60,  # Cap backoff at 60 seconds
)

async with httpx.AsyncClient(transport=retry_transport) as client:
    response = await client.get("https://example.eu.auth0.com/api/v2/clients")
```
"""

import asyncio
import logging
import time
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

import httpx

logger = logging.getLogger(__name__)


class RateLimitAwareRetry(httpx.AsyncBaseTransport):
    """Retry transport for Auth0 rate limits and transient server errors.

    Args:
        wrapped_transport: The underlying transport to wrap
        max_retries: Maximum number of retry attempts (default: 5)
        backoff_factor: Multiplier for exponential backoff (default: 1.0)
        max_backoff: Maximum wait in seconds (default: 60)
        retry_5xx_status_codes: Set of 5xx codes to retry (default: 502, 503, 504)
    """

    # Safe to resend after a server error or a dropped connection
    IDEMPOTENT_METHODS: frozenset[str] = frozenset(["HEAD", "GET", "PUT", "DELETE", "OPTIONS", "TRACE"])

    DEFAULT_RETRY_5XX_STATUS_CODES: frozenset[int] = frozenset([502, 503, 504])

    def __init__(
        self,
        *,
        wrapped_transport: httpx.AsyncBaseTransport,
        max_retries: int = 5,
        backoff_factor: float = 1.0,
        max_backoff: float = 60.0,
        retry_5xx_status_codes: frozenset[int] | None = None,
    ) -> None:
        self._wrapped_transport = wrapped_transport
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.max_backoff = max_backoff
        self.retry_5xx_status_codes = retry_5xx_status_codes or self.DEFAULT_RETRY_5XX_STATUS_CODES

    async def __aenter__(self):
        await self._wrapped_transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return await self._wrapped_transport.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Send ``request``, waiting and resending while the answer is retryable.

        After ``max_retries`` resends the last response is returned as-is (or
        the last transport error re-raised) so the caller can map it to an
        APIError.
        """
        attempt = 0
        while True:
            try:
                response = await self._wrapped_transport.handle_async_request(request)
            except httpx.TransportError as e:
                if attempt >= self.max_retries or request.method not in self.IDEMPOTENT_METHODS:
                    raise
                attempt += 1
                delay = self.backoff_delay(attempt)
                logger.warning(
                    f"{request.method} {request.url} failed with {e!r}, "
                    f"retrying in {delay}s (attempt {attempt}/{self.max_retries})"
                )
                await asyncio.sleep(delay)
                continue

            delay = self.retry_delay(request, response, attempt)
            if delay is None:
                return response

            attempt += 1
            await response.aclose()
            self._log_retry(request, response, delay, attempt)
            await asyncio.sleep(delay)

    def retry_delay(self, request: httpx.Request, response: httpx.Response, attempt: int) -> float | None:
        """Seconds to wait before resending, or None if ``response`` is final.

        Args:
            request: The request that was sent
            response: The answer to it
            attempt: Number of retries already made
        """
        if attempt >= self.max_retries:
            return None

        if response.status_code == 429:
            delay = self.rate_limit_delay(response)
            return delay if delay is not None else self.backoff_delay(attempt + 1)

        if response.status_code in self.retry_5xx_status_codes and request.method in self.IDEMPOTENT_METHODS:
            return self.backoff_delay(attempt + 1)

        return None

    def rate_limit_delay(self, response: httpx.Response) -> float | None:
        """Wait announced by a 429 response, capped at ``max_backoff``.

        Returns:
            Delay in seconds, or None if neither header yields a usable wait
        """
        delay = parse_retry_after(response.headers.get("Retry-After"))
        if delay is None:
            delay = parse_rate_limit_reset(response.headers.get("X-RateLimit-Reset"))
        if delay is None:
            return None
        return min(delay, self.max_backoff)

    def backoff_delay(self, attempt: int) -> float:
        """Exponential backoff: ``backoff_factor * 2 ** (attempt - 1)``, capped.

        With the defaults this gives 1, 2, 4, 8, 16 seconds.
        """
        return min(self.backoff_factor * (2 ** (attempt - 1)), self.max_backoff)

    def _log_retry(self, request: httpx.Request, response: httpx.Response, delay: float, attempt: int) -> None:
        if response.status_code == 429:
            limit = response.headers.get("X-RateLimit-Limit", "?")
            logger.warning(
                f"Auth0 rate limit hit on {request.method} {request.url.path} (limit {limit}), "
                f"retrying in {delay}s (attempt {attempt}/{self.max_retries})"
            )
        else:
            logger.warning(
                f"{request.method} {request.url} failed with {response.status_code}, "
                f"retrying in {delay}s (attempt {attempt}/{self.max_retries})"
            )


def parse_retry_after(value: str | None) -> float | None:
    """Parse a Retry-After value in delay-seconds or HTTP-date form."""
    if not value:
        return None

    try:
        seconds = float(int(value))
    except ValueError:
        try:
            seconds = (parsedate_to_datetime(value) - datetime.now(UTC)).total_seconds()
        except (ValueError, TypeError):
            return None

    # Negative values and dates in the past (clock skew) are ignored
    return seconds if seconds >= 0 else None


def parse_rate_limit_reset(value: str | None) -> float | None:
    """Seconds until an ``X-RateLimit-Reset`` epoch timestamp."""
    if not value:
        return None

    try:
        seconds = float(value) - time.time()
    except ValueError:
        return None

    return seconds if seconds >= 0 else None
