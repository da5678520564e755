"""Request/response logging around any async transport.

Example:
    ```python
    import httpx

    from asana_client.transport import LoggingTransport

    transport = LoggingTransport(wrapped_transport=httpx.AsyncHTTPTransport())

    async with httpx.AsyncClient(transport=transport) as client:
        response = await client.get("https://app.asana.com/api/1.0/users/me")
    ```
"""

import logging
import time

import httpx

logger = logging.getLogger(__name__)


class LoggingTransport(httpx.AsyncBaseTransport):
    """Log every request and its outcome, then pass the response through.

    Non-2xx responses are logged at WARNING, everything else at DEBUG. The
    transport never alters or retries a request; transport failures are
    logged and re-raised unchanged.

    Args:
        wrapped_transport: The underlying transport to wrap
    """

    def __init__(self, *, wrapped_transport: httpx.AsyncBaseTransport) -> None:
        self._wrapped_transport = wrapped_transport

    async def __aenter__(self):
        """Enter async context, delegating to wrapped transport."""
        await self._wrapped_transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context, delegating to wrapped transport."""
        return await self._wrapped_transport.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        started = time.monotonic()
        logger.debug(f"--> {request.method} {request.url}")

        try:
            response = await self._wrapped_transport.handle_async_request(request)
        except httpx.TransportError as e:
            elapsed = time.monotonic() - started
            logger.warning(f"<-- {request.method} {request.url} failed after {elapsed:.3f}s: {e!r}")
            raise

        elapsed = time.monotonic() - started
        if response.is_success:
            logger.debug(f"<-- {response.status_code} {request.method} {request.url} ({elapsed:.3f}s)")
        else:
            logger.warning(f"<-- {response.status_code} {request.method} {request.url} ({elapsed:.3f}s)")
        return response
