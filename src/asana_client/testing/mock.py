"""Scripted transport double with request capture.

:class:`MockTransport` plugs into ``httpx.Client`` / ``httpx.AsyncClient``
(or :class:`asana_client.AsanaClient`) in place of the network transport. It
answers every request from a fixed response or a handler callable and keeps
an ordered log of what was sent.
"""

import json
import threading
from collections.abc import Callable
from typing import Any

import httpx

FEATURE_HEADER = "Asana-Enable"

Handler = Callable[[httpx.Request], httpx.Response]


def _encode_body(body: Any) -> bytes:
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    return json.dumps({"data": body}).encode("utf-8")


def mock_response(status: int, body: Any = None, headers: dict[str, str] | None = None) -> httpx.Response:
    """Build a response the way the API would send it.

    ``str`` and ``bytes`` bodies are sent verbatim; anything else is wrapped
    as ``{"data": body}`` and JSON encoded.

    Example:
        ```python
        mock_response(200, {"gid": "123", "name": "Ann"})
        mock_response(500, '{"errors": [{"message": "Server Error"}]}')
        ```
    """
    response_headers = {"content-type": "application/json"}
    response_headers.update(headers or {})
    return httpx.Response(status, headers=response_headers, content=_encode_body(body))


class RequestAssertion:
    """Read-only view over one captured request."""

    def __init__(self, request: httpx.Request):
        self.request = request

    @property
    def method(self) -> str:
        return self.request.method

    @property
    def path(self) -> str:
        return self.request.url.path

    @property
    def query(self) -> httpx.QueryParams:
        return self.request.url.params

    def header(self, name: str) -> str | None:
        return self.request.headers.get(name)

    def json(self) -> Any:
        """Decode the request body as JSON.

        The body is buffered on first read, so this can be called any number
        of times and the request stays readable for the code under test.
        Returns None for an empty body.
        """
        content = self.request.read()
        if not content:
            return None
        return json.loads(content)

    def has_feature(self, feature: str) -> bool:
        """Check whether ``feature`` is listed in the Asana-Enable header."""
        header = self.header(FEATURE_HEADER)
        if not header:
            return False
        return feature in {token.strip() for token in header.split(",")}


class MockTransport(httpx.BaseTransport, httpx.AsyncBaseTransport):
    """Transport that answers from a script and records every request.

    Args:
        status: Status code of the fixed response (default: 200)
        body: Body of the fixed response, see :func:`mock_response`
        headers: Extra headers for the fixed response
        handler: Callable building the response for each request. Use it to
            vary behavior between calls or to raise transport errors. Cannot
            be combined with ``body`` or ``headers``.

    Example:
        ```python
        transport = MockTransport(200, {"gid": "123", "name": "Ann"})

        async with AsanaClient(transport=transport) as client:
            user = await users.get_user(client, "123")

        assert transport.last_request.path == "/api/1.0/users/123"
        ```
    """

    def __init__(
        self,
        status: int = 200,
        body: Any = None,
        *,
        headers: dict[str, str] | None = None,
        handler: Handler | None = None,
    ) -> None:
        if handler is not None and (body is not None or headers is not None):
            raise ValueError("handler cannot be combined with a fixed body or headers")

        if handler is None:
            content = _encode_body(body)

            def fixed_response(request: httpx.Request) -> httpx.Response:
                return mock_response(status, content, headers)

            handler = fixed_response

        self._handler = handler
        self._requests: list[httpx.Request] = []
        self._lock = threading.Lock()

    @property
    def requests(self) -> tuple[httpx.Request, ...]:
        """Snapshot of every request sent so far, oldest first."""
        with self._lock:
            return tuple(self._requests)

    @property
    def last_request(self) -> RequestAssertion | None:
        """The most recent request, or None when nothing was sent."""
        with self._lock:
            if not self._requests:
                return None
            return RequestAssertion(self._requests[-1])

    def assert_request(self, index: int) -> RequestAssertion:
        """View over the request at ``index`` (negative indexes allowed)."""
        with self._lock:
            return RequestAssertion(self._requests[index])

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        with self._lock:
            self._requests.append(request)
            request.read()
            return self._handler(request)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        # aread() swaps in a replayable stream; it must not await under the lock
        await request.aread()
        with self._lock:
            self._requests.append(request)
            return self._handler(request)
