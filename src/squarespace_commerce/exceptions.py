"""Custom exception hierarchy for the Squarespace Commerce client."""
from __future__ import annotations

from typing import Any


class CommerceError(RuntimeError):
    """Base error for Squarespace Commerce failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class ValidationError(CommerceError, ValueError):
    """Raised when a request fails local checks before anything is sent."""


class RequestError(CommerceError):
    """Raised when an HTTP request cannot be fulfilled."""


class APIError(RequestError):
    """Raised when the API answers with a non-success status code.

    The remote error body fields (``type``, ``subtype``, ``message``, ``detail``)
    are kept as attributes; ``str()`` renders them in a fixed order for logs.
    """

    def __init__(
        self,
        text: str,
        *,
        endpoint: str,
        url: str,
        status_code: int,
        type: str | None = None,
        subtype: str | None = None,
        message: str | None = None,
        detail: str | None = None,
        body: bytes | None = None,
    ) -> None:
        super().__init__(text, status_code=status_code, details=detail)
        self.endpoint = endpoint
        self.url = url
        self.type = type
        self.subtype = subtype
        self.message = message
        self.detail = detail
        self.body = body


class UnexpectedResponseError(CommerceError):
    """Raised when the API returns an unexpected payload structure."""
