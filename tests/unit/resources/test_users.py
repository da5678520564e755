"""Tests for user resource helpers."""

import json

import httpx
import pytest

from asana_client import AsanaClient, ClientConfig
from asana_client.errors import ServerError
from asana_client.resources import users
from asana_client.testing import MockTransport, mock_response


def paged_handler(pages: dict[str | None, tuple[list[dict], str | None]]):
    """Serve one page per offset, the way the users endpoint does."""

    def handler(request: httpx.Request) -> httpx.Response:
        items, next_offset = pages[request.url.params.get("offset")]
        next_page = {"offset": next_offset, "path": f"/users?offset={next_offset}"} if next_offset else None
        return mock_response(200, json.dumps({"data": items, "next_page": next_page}))

    return handler


async def test_current_user(config):
    transport = MockTransport(
        200,
        {
            "gid": "12345",
            "name": "Greg Sanchez",
            "email": "gsanchez@example.com",
            "photo": {"image_21x21": "https://example.com/21.png"},
            "workspaces": [{"gid": "1331", "name": "My Company Workspace"}],
        },
    )

    async with AsanaClient(config, transport=transport) as client:
        me = await users.current_user(client)

    assert transport.last_request.path == "/api/1.0/users/me"
    assert me.email == "gsanchez@example.com"
    assert me.photo["image_21x21"].endswith("21.png")
    assert me.workspaces[0].gid == "1331"
    assert me.workspaces[0].name == "My Company Workspace"


async def test_get_user_requires_gid(config):
    async with AsanaClient(config, transport=MockTransport(200, {})) as client:
        with pytest.raises(ValueError):
            await users.get_user(client, "")


async def test_list_users_returns_one_page(config):
    transport = MockTransport(handler=paged_handler({None: ([{"gid": "1", "name": "Ann"}], "next-1")}))

    async with AsanaClient(config, transport=transport) as client:
        page = await users.list_users(client, "1331")

    assert [u.name for u in page.items] == ["Ann"]
    assert page.next_page.offset == "next-1"
    assert transport.last_request.query["workspace"] == "1331"


async def test_all_users_walks_every_page(config):
    transport = MockTransport(
        handler=paged_handler(
            {
                None: ([{"gid": "1"}, {"gid": "2"}], "off-a"),
                "off-a": ([{"gid": "3"}], "off-b"),
                "off-b": ([{"gid": "4"}], None),
            }
        )
    )

    async with AsanaClient(config, transport=transport) as client:
        everyone = await users.all_users(client, "1331")

    assert [u.gid for u in everyone] == ["1", "2", "3", "4"]
    assert len(transport.requests) == 3

    first, second, third = (transport.assert_request(i) for i in range(3))
    assert "offset" not in first.query
    assert second.query["offset"] == "off-a"
    assert third.query["offset"] == "off-b"
    assert all(r.query["limit"] == "50" and r.query["workspace"] == "1331" for r in (first, second, third))


async def test_all_users_uses_configured_page_size():
    transport = MockTransport(handler=paged_handler({None: ([], None)}))

    async with AsanaClient(ClientConfig(token="t", page_size=100), transport=transport) as client:
        await users.all_users(client, "1331")

    assert transport.last_request.query["limit"] == "100"


async def test_all_users_fails_fast(config):
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        if calls == 1:
            return mock_response(200, json.dumps({"data": [{"gid": "1"}], "next_page": {"offset": "x"}}))
        return mock_response(500, '{"errors": [{"message": "Server Error", "phrase": "6 sad squid"}]}')

    async with AsanaClient(config, transport=MockTransport(handler=handler)) as client:
        with pytest.raises(ServerError) as exc_info:
            await users.all_users(client, "1331")

    assert exc_info.value.phrase == "6 sad squid"
    assert calls == 2


async def test_favorites(config):
    transport = MockTransport(200, [{"gid": "1", "name": "Roadmap", "resource_type": "project"}])

    async with AsanaClient(config, transport=transport) as client:
        favs = await users.favorites(client, "me", resource_type="project", workspace_gid="1331")

    assert favs == [{"gid": "1", "name": "Roadmap", "resource_type": "project"}]
    request = transport.last_request
    assert request.path == "/api/1.0/users/me/favorites"
    assert request.query["resource_type"] == "project"
    assert request.query["workspace"] == "1331"


@pytest.mark.parametrize(("resource_type", "workspace_gid"), [("", "1331"), ("project", "")])
async def test_favorites_requires_query(config, resource_type, workspace_gid):
    transport = MockTransport(200, [])

    async with AsanaClient(config, transport=transport) as client:
        with pytest.raises(ValueError, match="resource_type and workspace_gid"):
            await users.favorites(client, "me", resource_type=resource_type, workspace_gid=workspace_gid)

    assert transport.last_request is None
