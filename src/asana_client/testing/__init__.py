"""Testing utilities for code built on the Asana client.

Example:
    ```python
    from asana_client import AsanaClient
    from asana_client.resources import users
    from asana_client.testing import MockTransport


    async def test_fetch_user():
        transport = MockTransport(200, {"gid": "123", "name": "Ann"})
        async with AsanaClient(transport=transport) as client:
            user = await users.get_user(client, "123")

        assert user.name == "Ann"
        assert transport.last_request.method == "GET"
    ```
"""

from asana_client.testing.mock import (
    FEATURE_HEADER,
    MockTransport,
    RequestAssertion,
    mock_response,
)

__all__ = [
    "FEATURE_HEADER",
    "MockTransport",
    "RequestAssertion",
    "mock_response",
]
