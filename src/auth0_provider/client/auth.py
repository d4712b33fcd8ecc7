"""OAuth2 client-credentials authentication for the Management API.

The token exchange is driven through httpx's auth flow, so the token request
travels through the same transport (retries, debug hooks) as every other
request, and nothing is sent until the first real API call.

Example:
    ```python
    auth = ClientCredentialsAuth(
        token_url="https://example.eu.auth0.com/oauth/token",
        client_id="abc",
        client_secret="xyz",
        audience="https://example.eu.auth0.com/api/v2/",
    )
    async with httpx.AsyncClient(auth=auth) as client:
        await client.get("https://example.eu.auth0.com/api/v2/clients")
    ```
"""

import asyncio
import logging
import time
from collections.abc import AsyncGenerator, Callable, Generator, Mapping

import httpx

from auth0_provider.errors import APIError, raise_for_status

logger = logging.getLogger(__name__)


class ClientCredentialsAuth(httpx.Auth):
    """Fetch, cache and attach a Management API access token.

    The token is refreshed when it is about to expire (``expiry_leeway``
    seconds before ``expires_in`` runs out) and once more if the API answers
    401 for a request sent with a cached token.
    """

    requires_response_body = True

    def __init__(
        self,
        *,
        token_url: str,
        client_id: str,
        client_secret: str,
        audience: str,
        headers: Mapping[str, str] | None = None,
        expiry_leeway: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.token_url = token_url
        self.client_id = client_id
        self._client_secret = client_secret
        self.audience = audience
        self._headers = dict(headers or {})
        self.expiry_leeway = expiry_leeway
        self._clock = clock
        self._access_token: str | None = None
        self._expires_at: float | None = None
        # asyncio.Lock binds to the loop that first waits on it; keep one per loop
        self._async_lock: asyncio.Lock | None = None
        self._lock_loop: asyncio.AbstractEventLoop | None = None

    def __repr__(self) -> str:
        return f"ClientCredentialsAuth(token_url={self.token_url!r}, client_id={self.client_id!r})"

    @property
    def token_expired(self) -> bool:
        if self._access_token is None:
            return True
        if self._expires_at is None:
            return False
        return self._clock() >= self._expires_at

    def build_token_request(self) -> httpx.Request:
        return httpx.Request(
            "POST",
            self.token_url,
            headers=self._headers,
            json={
                "grant_type": "client_credentials",
                "client_id": self.client_id,
                "client_secret": self._client_secret,
                "audience": self.audience,
            },
        )

    def update_token(self, response: httpx.Response) -> None:
        """Store the access token from a token endpoint response.

        Raises:
            APIError: If the exchange was rejected or the body has no token.
        """
        raise_for_status(response)

        try:
            data = response.json()
        except ValueError as e:
            raise APIError(
                "Token response is not valid JSON", status_code=response.status_code, response=response
            ) from e

        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            raise APIError("Token response missing access_token", status_code=response.status_code, response=response)

        expires_in = data.get("expires_in")
        self._access_token = token
        if expires_in:
            self._expires_at = self._clock() + max(float(expires_in) - self.expiry_leeway, 0.0)
        else:
            self._expires_at = None
        logger.debug(f"Obtained Management API access token for client {self.client_id} (***)")

    def _refresh_lock(self) -> asyncio.Lock:
        loop = asyncio.get_running_loop()
        if self._async_lock is None or self._lock_loop is not loop:
            self._async_lock = asyncio.Lock()
            self._lock_loop = loop
        return self._async_lock

    def _authorize(self, request: httpx.Request) -> httpx.Request:
        request.headers["Authorization"] = f"Bearer {self._access_token}"
        return request

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        if self.token_expired:
            self.update_token((yield self.build_token_request()))

        response = yield self._authorize(request)

        if response.status_code == 401:
            logger.info("Access token rejected by the Management API, requesting a new one")
            self.update_token((yield self.build_token_request()))
            yield self._authorize(request)

    async def async_auth_flow(self, request: httpx.Request) -> AsyncGenerator[httpx.Request, httpx.Response]:
        if self.token_expired:
            async with self._refresh_lock():
                # Another coroutine may have refreshed while we waited
                if self.token_expired:
                    token_response = yield self.build_token_request()
                    await token_response.aread()
                    self.update_token(token_response)

        response = yield self._authorize(request)

        if response.status_code == 401:
            logger.info("Access token rejected by the Management API, requesting a new one")
            async with self._refresh_lock():
                token_response = yield self.build_token_request()
                await token_response.aread()
                self.update_token(token_response)
            yield self._authorize(request)
