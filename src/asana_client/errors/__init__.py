"""Error taxonomy and response classification for the Asana client."""

from asana_client.errors.exceptions import (
    APIError,
    AsanaError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    PayloadTooLargeError,
    RateLimitError,
    ServerError,
    TransportError,
    UnauthorizedError,
)
from asana_client.errors.handler import (
    DEFAULT_RETRY_AFTER,
    UNKNOWN_ERROR_MESSAGE,
    RetryAfterPolicy,
    classify_response,
    is_auth_error,
    is_fatal,
    is_not_found,
    is_payload_too_large,
    is_rate_limited,
    is_recoverable,
    parse_retry_after,
    raise_for_status,
    retry_after,
)
from asana_client.errors.models import ErrorDetail, ErrorPayload

__all__ = [
    "DEFAULT_RETRY_AFTER",
    "UNKNOWN_ERROR_MESSAGE",
    "APIError",
    "AsanaError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "ErrorDetail",
    "ErrorPayload",
    "ForbiddenError",
    "NotFoundError",
    "PayloadTooLargeError",
    "RateLimitError",
    "RetryAfterPolicy",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "classify_response",
    "is_auth_error",
    "is_fatal",
    "is_not_found",
    "is_payload_too_large",
    "is_rate_limited",
    "is_recoverable",
    "parse_retry_after",
    "raise_for_status",
    "retry_after",
]
