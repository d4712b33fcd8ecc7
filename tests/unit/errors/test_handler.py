"""Tests for error handling utilities."""

import time
from datetime import UTC, datetime, timedelta

import pytest
from httpx import Response

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
from auth0_provider.errors.handler import raise_for_status


@pytest.mark.unit
def test_raise_for_status_success_response():
    """Test raise_for_status doesn't raise for successful responses."""
    response = Response(status_code=200)

    # Should not raise
    raise_for_status(response)


@pytest.mark.unit
def test_raise_for_status_no_content():
    raise_for_status(Response(status_code=204))


@pytest.mark.unit
def test_raise_for_status_400_bad_request():
    """Test raise_for_status raises BadRequestError for 400."""
    response = Response(
        status_code=400,
        headers={"content-type": "text/plain"},
        text="Bad request",
    )

    with pytest.raises(BadRequestError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 400
    assert exc_info.value.response == response
    assert "400" in str(exc_info.value)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("status_code", "exc_class"),
    [
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (409, ConflictError),
    ],
)
def test_raise_for_status_mapped_4xx(status_code, exc_class):
    response = Response(status_code=status_code, text="nope")

    with pytest.raises(exc_class) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == status_code


@pytest.mark.unit
def test_raise_for_status_429_rate_limit():
    """Test raise_for_status raises RateLimitError for 429."""
    response = Response(
        status_code=429,
        headers={"retry-after": "60"},
        text="Too many requests",
    )

    with pytest.raises(RateLimitError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 429
    assert exc_info.value.retry_after == 60


@pytest.mark.unit
def test_raise_for_status_429_with_rate_limit_reset():
    """Auth0 sends X-RateLimit-Reset (an epoch timestamp) instead of Retry-After."""
    reset = int(time.time()) + 10
    response = Response(
        status_code=429,
        headers={"x-ratelimit-reset": str(reset)},
        json={"statusCode": 429, "error": "Too Many Requests", "message": "Global limit has been reached"},
    )

    with pytest.raises(RateLimitError) as exc_info:
        raise_for_status(response)

    assert 8 <= exc_info.value.retry_after <= 10


@pytest.mark.unit
def test_raise_for_status_429_with_past_rate_limit_reset():
    response = Response(status_code=429, headers={"x-ratelimit-reset": "1700000000"})

    with pytest.raises(RateLimitError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.retry_after is None


@pytest.mark.unit
def test_raise_for_status_429_with_retry_after_http_date():
    retry_at = datetime.now(UTC) + timedelta(seconds=30)
    response = Response(
        status_code=429,
        headers={"retry-after": retry_at.strftime("%a, %d %b %Y %H:%M:%S GMT")},
    )

    with pytest.raises(RateLimitError) as exc_info:
        raise_for_status(response)

    assert 28 <= exc_info.value.retry_after <= 30


@pytest.mark.unit
def test_raise_for_status_429_without_retry_after():
    """Test raise_for_status handles 429 without retry-after header."""
    response = Response(status_code=429, text="Too many requests")

    with pytest.raises(RateLimitError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 429
    assert exc_info.value.retry_after is None


@pytest.mark.unit
def test_raise_for_status_4xx_generic():
    """Test raise_for_status raises ClientError for unmapped 4xx."""
    response = Response(status_code=418, text="I'm a teapot")

    with pytest.raises(ClientError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 418
    assert not isinstance(exc_info.value, BadRequestError)


@pytest.mark.unit
def test_raise_for_status_5xx_server_error():
    """Test raise_for_status raises ServerError for 5xx."""
    response = Response(status_code=500, text="Internal server error")

    with pytest.raises(ServerError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 500


@pytest.mark.unit
def test_raise_for_status_unexpected_status():
    response = Response(status_code=302, text="")

    with pytest.raises(APIError) as exc_info:
        raise_for_status(response)

    assert type(exc_info.value) is APIError
    assert str(exc_info.value) == "HTTP 302"


@pytest.mark.unit
def test_raise_for_status_with_management_api_error():
    """Test raise_for_status parses the Management API error body."""
    response = Response(
        status_code=404,
        json={
            "statusCode": 404,
            "error": "Not Found",
            "message": "The client does not exist",
            "errorCode": "inexistent_client",
        },
    )

    with pytest.raises(NotFoundError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.error_detail is not None
    assert exc_info.value.error_code == "inexistent_client"
    assert "The client does not exist" in str(exc_info.value)


@pytest.mark.unit
def test_raise_for_status_with_token_endpoint_error():
    response = Response(
        status_code=401,
        json={"error": "access_denied", "error_description": "Unauthorized"},
    )

    with pytest.raises(UnauthorizedError) as exc_info:
        raise_for_status(response)

    assert str(exc_info.value) == "access_denied: Unauthorized"
    assert exc_info.value.error_code == "access_denied"


@pytest.mark.unit
def test_raise_for_status_plain_text_error():
    """Test raise_for_status handles plain text errors."""
    response = Response(
        status_code=500,
        headers={"content-type": "text/plain"},
        text="Internal Server Error",
    )

    with pytest.raises(ServerError) as exc_info:
        raise_for_status(response)

    assert "500" in str(exc_info.value)
    assert "Internal Server Error" in str(exc_info.value)


@pytest.mark.unit
def test_raise_for_status_json_without_auth0_fields():
    """Test raise_for_status handles JSON errors in an unknown shape."""
    response = Response(
        status_code=400,
        json={"detail": "Something went wrong", "code": "ERR001"},
    )

    with pytest.raises(BadRequestError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.error_detail is None
    assert "400" in str(exc_info.value)
