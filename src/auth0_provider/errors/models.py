"""Auth0 error body models."""

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass
class ErrorDetail:
    """Error body returned by the Auth0 APIs.

    The Management API answers with
    ``{"statusCode": 404, "error": "Not Found", "message": "...", "errorCode": "..."}``
    while the authentication endpoints (``/oauth/token``) answer with
    ``{"error": "access_denied", "error_description": "..."}``.
    """

    status_code: int | None = None  # HTTP status echoed in the body
    error: str | None = None  # Short summary or OAuth error code
    message: str | None = None  # Human-readable explanation
    error_code: str | None = None  # Machine-readable code (errorCode, or OAuth error)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorDetail | None":
        """Parse an Auth0 error body from an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            ErrorDetail object or None if the body is not an Auth0 error
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError):
            # JSON decode errors, type errors, or missing .json() method
            return None

        if not isinstance(data, dict):
            return None

        known_fields = {"statusCode", "error", "message", "errorCode", "error_description"}
        if not any(key in data for key in known_fields):
            return None

        status_code: Any = data.get("statusCode")
        error_code = data.get("errorCode")
        if error_code is None and "error_description" in data:
            # OAuth bodies: "error" is already the machine-readable code
            error_code = data.get("error")

        return cls(
            status_code=status_code if isinstance(status_code, int) else None,
            error=data.get("error"),
            message=data.get("message") or data.get("error_description"),
            error_code=error_code,
        )

    def to_exception_message(self) -> str:
        """Convert the error body to an exception message."""
        parts = []

        if self.status_code is not None:
            parts.append(str(self.status_code))
        if self.error:
            parts.append(self.error)
        head = " ".join(parts)

        if self.message and head:
            text = f"{head}: {self.message}"
        else:
            text = self.message or head

        if self.error_code and self.error_code != self.error:
            text += f" (error code: {self.error_code})"

        return text or "Unknown API error"
