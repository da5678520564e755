"""Request execution for the Asana API."""

import logging
import uuid
from dataclasses import dataclass, replace
from typing import Any

import httpx

from asana_client.config import ClientConfig
from asana_client.errors import TransportError, classify_response
from asana_client.options import Options, merge_options
from asana_client.pagination import NextPage
from asana_client.transport import create_transport

logger = logging.getLogger(__name__)

USER_AGENT = "asana-client-python"


@dataclass(frozen=True)
class Envelope:
    """Decoded success body: ``{"data": ..., "next_page": ...}``."""

    data: Any
    next_page: NextPage | None = None


class AsanaClient:
    """Async client that sends requests through a pluggable transport.

    Successful responses are unwrapped from their ``data`` envelope. Failing
    responses raise an :class:`~asana_client.errors.APIError` subclass;
    connection and decode failures raise
    :class:`~asana_client.errors.TransportError`. The client never retries;
    see :mod:`asana_client.retry` for an opt-in helper.

    Args:
        config: Client settings. Defaults to ``ClientConfig.from_env()``.
        transport: Transport to send requests through. Defaults to the
            network transport wrapped in logging.
        **overrides: Field overrides applied on top of ``config``.

    Example:
        ```python
        async with AsanaClient(token="0/abc123") as client:
            me = await users.current_user(client)
        ```
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        **overrides: Any,
    ) -> None:
        if config is None:
            config = ClientConfig.from_env(**overrides)
        elif overrides:
            config = replace(config, **overrides)
        self.config = config

        headers = {"Accept": "application/json", "User-Agent": USER_AGENT}
        if config.token:
            headers["Authorization"] = f"Bearer {config.token}"

        self._http = httpx.AsyncClient(
            base_url=config.base_url.rstrip("/") + "/",
            headers=headers,
            timeout=config.timeout,
            transport=transport or create_transport(),
        )
        self._default_options = Options(enable=config.enable)

    async def __aenter__(self) -> "AsanaClient":
        await self._http.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self._http.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def get(
        self,
        path: str,
        *,
        query: dict[str, Any] | None = None,
        options: Options | None = None,
    ) -> tuple[Any, NextPage | None]:
        """GET ``path`` and return ``(data, next_page)``."""
        envelope = await self.request("GET", path, query=query, options=options)
        return envelope.data, envelope.next_page

    async def post(self, path: str, data: Any = None, *, options: Options | None = None) -> Any:
        envelope = await self.request("POST", path, data=data, options=options)
        return envelope.data

    async def put(self, path: str, data: Any = None, *, options: Options | None = None) -> Any:
        envelope = await self.request("PUT", path, data=data, options=options)
        return envelope.data

    async def delete(self, path: str, *, options: Options | None = None) -> Any:
        envelope = await self.request("DELETE", path, options=options)
        return envelope.data

    async def request(
        self,
        method: str,
        path: str,
        *,
        query: dict[str, Any] | None = None,
        data: Any = None,
        options: Options | None = None,
    ) -> Envelope:
        """Send one request and decode its envelope.

        Args:
            method: HTTP method
            path: Path relative to the base URL, e.g. ``/users/me``
            query: Extra query parameters; None values are dropped
            data: Body for POST/PUT, sent as ``{"data": data}``
            options: Per-request options merged over the client defaults

        Raises:
            APIError: The API answered with a non-2xx status
            TransportError: No response was received or it could not be decoded
        """
        request_id = uuid.uuid4().hex
        merged = merge_options(self._default_options, options)

        params = {key: _query_value(value) for key, value in (query or {}).items() if value is not None}
        params.update(merged.params())

        request = self._http.build_request(
            method,
            path.lstrip("/"),
            params=params,
            headers=merged.headers(),
            json={"data": data} if method in ("POST", "PUT") and data is not None else None,
        )
        logger.debug(f"{method} {request.url} (request {request_id})")

        try:
            response = await self._http.send(request)
        except httpx.TransportError as e:
            logger.error(f"{method} {request.url} failed (request {request_id}): {e!r}")
            raise TransportError(f"{method} {request.url} failed: {e}", request_id=request_id) from e

        if not response.is_success:
            error = classify_response(response, request_id, retry_after_policy=self.config.retry_after_policy)
            logger.warning(f"{method} {request.url} returned {error.type} (request {request_id}): {error.message}")
            raise error

        return _decode_envelope(response, request_id)


def _decode_envelope(response: httpx.Response, request_id: str) -> Envelope:
    if not response.content:
        return Envelope(data=None)

    try:
        body = response.json()
    except ValueError as e:
        raise TransportError(f"Unable to decode response body: {e}", request_id=request_id) from e

    if not isinstance(body, dict) or "data" not in body:
        raise TransportError("Response body is not a data envelope", request_id=request_id)

    return Envelope(data=body["data"], next_page=NextPage.from_dict(body.get("next_page")))


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)
