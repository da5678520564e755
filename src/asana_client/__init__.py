"""Asana Client - typed async Python client for the Asana REST API.

This library provides:
- A request layer over a pluggable httpx transport
- Cursor pagination that walks whole collections lazily
- An error taxonomy separating API errors from transport failures
- A scripted mock transport with request capture for tests

Example:
    ```python
    from asana_client import AsanaClient, is_rate_limited, retry_after
    from asana_client.resources import users

    async with AsanaClient() as client:  # token from ASANA_ACCESS_TOKEN
        me = await users.current_user(client)
        everyone = await users.all_users(client, me.workspaces[0].gid)
    ```
"""

from asana_client.client import AsanaClient
from asana_client.config import ClientConfig, ConfigurationError
from asana_client.errors import (
    APIError,
    AsanaError,
    RetryAfterPolicy,
    TransportError,
    is_auth_error,
    is_fatal,
    is_not_found,
    is_payload_too_large,
    is_rate_limited,
    is_recoverable,
    retry_after,
)
from asana_client.options import Options
from asana_client.pagination import NextPage, Page, Pager

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "AsanaClient",
    "AsanaError",
    "ClientConfig",
    "ConfigurationError",
    "NextPage",
    "Options",
    "Page",
    "Pager",
    "RetryAfterPolicy",
    "TransportError",
    "__version__",
    "is_auth_error",
    "is_fatal",
    "is_not_found",
    "is_payload_too_large",
    "is_rate_limited",
    "is_recoverable",
    "retry_after",
]
