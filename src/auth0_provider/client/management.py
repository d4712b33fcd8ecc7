"""The authenticated Management API client handed to resource operations."""

from typing import Any

import httpx

from auth0_provider.errors import raise_for_status


class ManagementClient:
    """Authenticated handle for the Auth0 Management API v2.

    Built once per provider by :func:`auth0_provider.client.new_management_client`
    and shared by every resource operation. The handle exposes no setters; the
    only mutable state lives inside the underlying httpx client (connection
    pool, cached access token).

    Example:
        ```python
        async with new_management_client(config, terraform_version="1.9.5") as api:
            clients = await api.get("clients", params={"fields": "client_id,name"})
        ```
    """

    __slots__ = ("_domain", "_user_agent", "_debug", "_http")

    def __init__(self, *, domain: str, user_agent: str, debug: bool, http_client: httpx.AsyncClient) -> None:
        self._domain = domain
        self._user_agent = user_agent
        self._debug = debug
        self._http = http_client

    def __repr__(self) -> str:
        return f"ManagementClient(domain={self._domain!r}, debug={self._debug!r})"

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def base_url(self) -> str:
        return str(self._http.base_url)

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def debug(self) -> bool:
        return self._debug

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Send a request relative to ``/api/v2/`` and decode the JSON answer.

        Args:
            method: HTTP method
            path: Path relative to the API base, e.g. ``"clients/abc"``
            params: Query parameters
            json: JSON body

        Returns:
            Decoded JSON body, or None for empty responses (e.g. 204)

        Raises:
            APIError subclass for error responses
        """
        response = await self._http.request(method, path, params=params, json=json)
        raise_for_status(response)
        if not response.content:
            return None
        return response.json()

    async def get(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, *, json: Any = None) -> Any:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, *, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def patch(self, path: str, *, json: Any = None) -> Any:
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "ManagementClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
