"""Caller-side retry for Asana calls.

The client itself never retries. This helper wraps any coroutine-producing
callable and decides from the error classification whether to try again:

| Error | Retried | Delay |
|-------|---------|-------|
| 429 rate limited | yes | ``Retry-After`` (exponential backoff when absent) |
| 5xx recoverable | yes | exponential backoff |
| transport failure | yes | exponential backoff |
| other 4xx | no | - |

```python
from asana_client.retry import call_with_retry

user = await call_with_retry(lambda: users.get_user(client, "123"), max_retries=3)
```
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from asana_client.errors import AsanaError, TransportError, is_rate_limited, is_recoverable, retry_after

logger = logging.getLogger(__name__)

T = TypeVar("T")


def should_retry(err: BaseException) -> bool:
    return isinstance(err, TransportError) or is_recoverable(err) or is_rate_limited(err)


def calculate_backoff_delay(retry_number: int, *, backoff_factor: float = 1.0, max_backoff: float = 60.0) -> float:
    """Exponential backoff capped at ``max_backoff``.

    Uses formula: min(backoff_factor * (2 ** (retry_number - 1)), max_backoff)
    Default backoff sequence: 1, 2, 4, 8, 16 seconds

    Args:
        retry_number: Current retry attempt (1-indexed)
    """
    return min(backoff_factor * (2 ** (retry_number - 1)), max_backoff)


def retry_delay(err: BaseException, retry_number: int, *, backoff_factor: float = 1.0, max_backoff: float = 60.0) -> float:
    """Seconds to wait before the given retry of a failed call."""
    if is_rate_limited(err):
        wait = retry_after(err).total_seconds()
        if wait > 0:
            return min(wait, max_backoff)
    return calculate_backoff_delay(retry_number, backoff_factor=backoff_factor, max_backoff=max_backoff)


async def call_with_retry(
    call: Callable[[], Awaitable[T]],
    *,
    max_retries: int = 5,
    backoff_factor: float = 1.0,
    max_backoff: float = 60.0,
    sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
) -> T:
    """Await ``call()`` and retry it on retryable Asana errors.

    Args:
        call: Zero-argument callable returning a fresh awaitable per attempt
        max_retries: Maximum number of retry attempts (default: 5)
        backoff_factor: Multiplier for exponential backoff (default: 1.0)
        max_backoff: Maximum delay in seconds (default: 60)
        sleep: Awaitable sleep function, replaceable in tests

    Raises:
        AsanaError: The last error once retries are exhausted, or the first
            non-retryable one.
    """
    retries = 0

    while True:
        try:
            return await call()
        except AsanaError as e:
            if retries >= max_retries or not should_retry(e):
                raise

            retries += 1
            delay = retry_delay(e, retries, backoff_factor=backoff_factor, max_backoff=max_backoff)
            logger.warning(f"Request failed with {e}, retrying in {delay}s (attempt {retries}/{max_retries})")
            await sleep(delay)
