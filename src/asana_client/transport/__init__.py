"""Transport layer for the Asana client.

Any ``httpx.AsyncBaseTransport`` can sit under :class:`asana_client.AsanaClient`:
the production network transport, :class:`asana_client.testing.MockTransport`,
or a stack of wrappers around either.

Example:
    ```python
    from asana_client.transport import create_transport

    transport = create_transport(enable_logging=True)
    ```
"""

import httpx

from asana_client.transport.logging import LoggingTransport


def create_transport(
    *,
    wrapped_transport: httpx.AsyncBaseTransport | None = None,
    enable_logging: bool = True,
) -> httpx.AsyncBaseTransport:
    """Build the default transport stack.

    Args:
        wrapped_transport: Innermost transport. Defaults to a real
            ``httpx.AsyncHTTPTransport``.
        enable_logging: Wrap the transport in :class:`LoggingTransport`.
    """
    transport = wrapped_transport or httpx.AsyncHTTPTransport()
    if enable_logging:
        transport = LoggingTransport(wrapped_transport=transport)
    return transport


__all__ = ["LoggingTransport", "create_transport"]
