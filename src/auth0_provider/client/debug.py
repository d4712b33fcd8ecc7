"""Request/response logging installed when the provider runs with ``debug``."""

import logging

import httpx

logger = logging.getLogger("auth0_provider.client")

REDACTED_HEADERS: frozenset[str] = frozenset(["authorization", "cookie", "set-cookie"])

# Paths whose response bodies carry credentials
REDACTED_BODY_PATHS: frozenset[str] = frozenset(["/oauth/token"])

MAX_BODY_LENGTH = 2000


def _redact_headers(headers: httpx.Headers) -> dict[str, str]:
    return {key: "***" if key.lower() in REDACTED_HEADERS else value for key, value in headers.items()}


async def log_request(request: httpx.Request) -> None:
    logger.debug(f"--> {request.method} {request.url} headers={_redact_headers(request.headers)}")


async def log_response(response: httpx.Response) -> None:
    request = response.request
    await response.aread()

    if request.url.path in REDACTED_BODY_PATHS:
        body = "<redacted>"
    else:
        body = response.text[:MAX_BODY_LENGTH]

    logger.debug(
        f"<-- {response.status_code} {request.method} {request.url} "
        f"headers={_redact_headers(response.headers)} body={body}"
    )


def debug_event_hooks() -> dict[str, list]:
    """Event hooks for ``httpx.AsyncClient(event_hooks=...)``."""
    return {"request": [log_request], "response": [log_response]}
