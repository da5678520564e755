"""Error classification for Asana HTTP responses."""

import enum
from datetime import timedelta

import httpx

from asana_client.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    PayloadTooLargeError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
)
from asana_client.errors.models import ErrorPayload

UNKNOWN_ERROR_MESSAGE = "Unknown error"

# Wait time handed to callers for errors that carry no Retry-After
DEFAULT_RETRY_AFTER = timedelta(minutes=1)

_EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    413: PayloadTooLargeError,
    429: RateLimitError,
}


class RetryAfterPolicy(enum.Enum):
    """How the Retry-After header is turned into ``APIError.retry_after``.

    SECONDS parses the header as integer seconds. IGNORE never populates
    ``retry_after``, matching clients that discard the header entirely.
    """

    SECONDS = "seconds"
    IGNORE = "ignore"


def parse_retry_after(
    response: httpx.Response, policy: RetryAfterPolicy = RetryAfterPolicy.SECONDS
) -> timedelta | None:
    """Parse the Retry-After header as whole seconds.

    Returns None when the header is missing, is not a plain run of ASCII
    digits, or is too large for a timedelta. A bad header never raises.
    """
    if policy is RetryAfterPolicy.IGNORE:
        return None

    header = (response.headers.get("retry-after") or "").strip()
    if not (header.isascii() and header.isdigit()):
        return None

    try:
        return timedelta(seconds=int(header))
    except OverflowError:
        return None


def _exception_class(status_code: int) -> type[APIError]:
    if status_code in _EXCEPTION_MAP:
        return _EXCEPTION_MAP[status_code]
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return APIError


def classify_response(
    response: httpx.Response,
    request_id: str | None = None,
    *,
    retry_after_policy: RetryAfterPolicy = RetryAfterPolicy.SECONDS,
) -> APIError:
    """Build the typed error for a failing response.

    The first entry of the ``errors`` payload supplies the message, phrase
    and help text; without one the message is "Unknown error". The class is
    chosen from the status code alone.

    Args:
        response: HTTP response with a non-2xx status
        request_id: Correlation id of the request that produced the response
        retry_after_policy: How to read the Retry-After header

    Returns:
        APIError subclass instance (not raised)
    """
    status_code = response.status_code
    payload = ErrorPayload.from_response(response)
    detail = payload.first if payload else None

    exc_class = _exception_class(status_code)
    return exc_class(
        detail.message if detail else UNKNOWN_ERROR_MESSAGE,
        status_code,
        type=f"{status_code} {response.reason_phrase}".strip(),
        phrase=detail.phrase if detail else None,
        help=detail.help if detail else None,
        request_id=request_id,
        retry_after=parse_retry_after(response, retry_after_policy),
        response=response,
    )


def raise_for_status(
    response: httpx.Response,
    request_id: str | None = None,
    *,
    retry_after_policy: RetryAfterPolicy = RetryAfterPolicy.SECONDS,
) -> None:
    """Raise the classified exception for HTTP error responses.

    Raises:
        APIError subclass based on status code
    """
    if response.is_success:
        return
    raise classify_response(response, request_id, retry_after_policy=retry_after_policy)


def _status_code(err: BaseException | None) -> int | None:
    if isinstance(err, APIError):
        return err.status_code
    return None


def is_recoverable(err: BaseException | None) -> bool:
    """True for 5xx API errors, where retrying may succeed."""
    status_code = _status_code(err)
    return status_code is not None and status_code // 100 == 5


def is_fatal(err: BaseException | None) -> bool:
    """True for any non-5xx API error."""
    status_code = _status_code(err)
    return status_code is not None and status_code // 100 != 5


def is_not_found(err: BaseException | None) -> bool:
    return _status_code(err) == 404


def is_auth_error(err: BaseException | None) -> bool:
    return _status_code(err) == 401


def is_rate_limited(err: BaseException | None) -> bool:
    return _status_code(err) == 429


def is_payload_too_large(err: BaseException | None) -> bool:
    return _status_code(err) == 413


def retry_after(err: BaseException | None) -> timedelta:
    """Return how long to wait before retrying.

    Rate-limited errors return their parsed Retry-After (zero when the header
    was missing). Anything else returns DEFAULT_RETRY_AFTER.
    """
    if isinstance(err, APIError) and is_rate_limited(err):
        return err.retry_after or timedelta(0)
    return DEFAULT_RETRY_AFTER
