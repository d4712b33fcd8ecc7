"""Error handling utilities for HTTP responses."""

import math

import httpx

from auth0_provider.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
)
from auth0_provider.errors.models import ErrorDetail
from auth0_provider.transport.retry import parse_rate_limit_reset, parse_retry_after

EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def _retry_after_seconds(response: httpx.Response) -> int | None:
    """Whole seconds until the rate limit bucket refills, if Auth0 said so."""
    delay = parse_retry_after(response.headers.get("Retry-After"))
    if delay is None:
        delay = parse_rate_limit_reset(response.headers.get("X-RateLimit-Reset"))
    if delay is None:
        return None
    return math.ceil(delay)


def raise_for_status(response: httpx.Response) -> None:
    """Raise appropriate exception for HTTP error responses.

    Parses the Auth0 JSON error body if present, otherwise uses the standard
    HTTP status code to exception mapping.

    Args:
        response: HTTP response object

    Raises:
        APIError subclass based on status code
    """
    if response.is_success:
        return

    error_detail = ErrorDetail.from_response(response)
    status_code = response.status_code

    if status_code in EXCEPTION_MAP:
        exc_class = EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = APIError

    if error_detail:
        message = error_detail.to_exception_message()
    else:
        response_text = response.text[:200]
        message = f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"

    if exc_class is RateLimitError:
        raise RateLimitError(
            message=message,
            retry_after=_retry_after_seconds(response),
            status_code=status_code,
            response=response,
            error_detail=error_detail,
        )

    raise exc_class(
        message=message,
        status_code=status_code,
        response=response,
        error_detail=error_detail,
    )
