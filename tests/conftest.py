"""Pytest configuration and shared fixtures for auth0-provider tests."""

import json

import httpx
import pytest

from auth0_provider.config import ProviderConfig


class FakeAuth0:
    """In-memory stand-in for the Auth0 token endpoint and Management API.

    Use as the handler of ``httpx.MockTransport``. Management API routes are
    registered in ``routes`` as ``(method, path) -> (status, body)`` with paths
    relative to ``/api/v2/``.
    """

    def __init__(self, *, expires_in: int = 86400, token_status: int = 200):
        self.expires_in = expires_in
        self.token_status = token_status
        self.routes: dict[tuple[str, str], tuple[int, object]] = {}
        self.requests: list[httpx.Request] = []
        self.token_requests: list[dict] = []
        self.valid_tokens: set[str] = set()
        self.tokens_issued = 0

    def revoke_tokens(self) -> None:
        self.valid_tokens.clear()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.path == "/oauth/token":
            self.token_requests.append(json.loads(request.content))
            if self.token_status != 200:
                return httpx.Response(
                    self.token_status,
                    json={"error": "access_denied", "error_description": "Unauthorized"},
                )
            self.tokens_issued += 1
            token = f"token-{self.tokens_issued}"
            self.valid_tokens.add(token)
            return httpx.Response(
                200,
                json={"access_token": token, "token_type": "Bearer", "expires_in": self.expires_in},
            )

        token = request.headers.get("Authorization", "").removeprefix("Bearer ")
        if token not in self.valid_tokens:
            return httpx.Response(401, json={"statusCode": 401, "error": "Unauthorized", "message": "Invalid token."})

        key = (request.method, request.url.path.removeprefix("/api/v2/"))
        if key not in self.routes:
            return httpx.Response(
                404,
                json={
                    "statusCode": 404,
                    "error": "Not Found",
                    "message": "The resource does not exist",
                    "errorCode": "inexistent_resource",
                },
            )
        status, body = self.routes[key]
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)


@pytest.fixture
def fake_auth0():
    return FakeAuth0()


@pytest.fixture(autouse=True)
def clear_env(monkeypatch, tmp_path):
    """Auto-cleanup: Clear AUTH0_* environment variables before each test.

    Also runs each test from an empty working directory so that no stray
    .env file is picked up by configuration resolution.
    """
    import os

    for key in list(os.environ.keys()):
        if key.startswith("AUTH0_"):
            monkeypatch.delenv(key, raising=False)

    monkeypatch.chdir(tmp_path)

    yield


@pytest.fixture
def auth0_env(monkeypatch):
    """Set the three required settings in the environment."""
    monkeypatch.setenv("AUTH0_DOMAIN", "example.eu.auth0.com")
    monkeypatch.setenv("AUTH0_CLIENT_ID", "env-client-id")
    monkeypatch.setenv("AUTH0_CLIENT_SECRET", "env-client-secret")


@pytest.fixture
def provider_config():
    return ProviderConfig(
        domain="example.eu.auth0.com",
        client_id="client-id-123",
        client_secret="client-secret-456",
    )
