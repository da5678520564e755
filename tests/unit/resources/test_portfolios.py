"""Tests for portfolio helpers."""

import json

import httpx

from asana_client import AsanaClient
from asana_client.resources.portfolios import all_portfolios, list_portfolios
from asana_client.testing import MockTransport, mock_response


async def test_list_portfolios_defaults_to_owner_me(config):
    transport = MockTransport(200, [{"gid": "p1", "name": "Q3 Bets", "resource_type": "portfolio"}])

    async with AsanaClient(config, transport=transport) as client:
        page = await list_portfolios(client, "1331")

    assert page.items[0].name == "Q3 Bets"
    request = transport.last_request
    assert request.path == "/api/1.0/portfolios"
    assert request.query["workspace"] == "1331"
    assert request.query["owner"] == "me"


async def test_all_portfolios_two_pages(config):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.params.get("offset") is None:
            body = {"data": [{"gid": "p1"}], "next_page": {"offset": "o1"}}
        else:
            body = {"data": [{"gid": "p2"}], "next_page": None}
        return mock_response(200, json.dumps(body))

    transport = MockTransport(handler=handler)

    async with AsanaClient(config, transport=transport) as client:
        portfolios = await all_portfolios(client, "1331", owner="42")

    assert [p.gid for p in portfolios] == ["p1", "p2"]
    assert len(transport.requests) == 2
    assert all(transport.assert_request(i).query["owner"] == "42" for i in range(2))
