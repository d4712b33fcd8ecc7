"""Exceptions raised for Auth0 Management API and token endpoint failures.

Resource operations branch on the class (``NotFoundError`` means the remote
object is gone) and on :attr:`APIError.error_code` for finer decisions.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from auth0_provider.errors.models import ErrorDetail


class APIError(Exception):
    """A non-2xx answer from Auth0.

    Args:
        message: Human readable description, usually from the response body.
        status_code: HTTP status of the response.
        response: The response that triggered the error.
        error_detail: Parsed Auth0 error body, when the body had one.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        error_detail: "ErrorDetail | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.error_detail = error_detail

    @property
    def error_code(self) -> str | None:
        """Auth0 ``errorCode`` (or token ``error``) from the response body."""
        if self.error_detail is None:
            return None
        return self.error_detail.error_code


class ClientError(APIError):
    """4xx answers."""


class BadRequestError(ClientError):
    """400: the payload failed Auth0's schema validation."""


class UnauthorizedError(ClientError):
    """401: bad client credentials or an expired/invalid access token."""


class ForbiddenError(ClientError):
    """403: the application lacks the Management API scope for this call."""


class NotFoundError(ClientError):
    """404: the addressed object does not exist (``inexistent_resource``)."""


class ConflictError(ClientError):
    """409: an object with the same identifier already exists."""


class RateLimitError(ClientError):
    """429: the tenant's rate limit bucket is empty.

    ``retry_after`` is the number of seconds until it refills, when Auth0
    said so.
    """

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx answers."""
