"""Structured exceptions for Asana API calls.

Every failure raised by the request path is an :class:`AsanaError`, split into
two arms callers can match on:

- :class:`TransportError`: the request never produced a usable response
  (connection failure, undecodable body).
- :class:`APIError`: a response was received with a failing status code.
"""

from datetime import timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class AsanaError(Exception):
    """Base exception for every error raised by the client."""

    def __init__(self, message: str, request_id: str | None = None):
        super().__init__(message)
        self.request_id = request_id


class TransportError(AsanaError):
    """The request did not reach the API or its response could not be decoded."""

    pass


class APIError(AsanaError):
    """Base exception for failing API responses."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        type: str | None = None,
        phrase: str | None = None,
        help: str | None = None,
        request_id: str | None = None,
        retry_after: timedelta | None = None,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message, request_id=request_id)
        self.message = message
        self.status_code = status_code
        self.type = type
        self.phrase = phrase
        self.help = help
        self.retry_after = retry_after
        self.response = response

    def __str__(self) -> str:
        return f"{self.request_id} {self.status_code}: {self.message}"


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class PayloadTooLargeError(ClientError):
    """413 Request Entity Too Large."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    pass


class ServerError(APIError):
    """5xx server errors."""

    pass
