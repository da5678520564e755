"""Portfolios."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from asana_client.options import Options, merge_options
from asana_client.pagination import Page
from asana_client.resources.base import pager, require, to_page

if TYPE_CHECKING:
    from asana_client.client import AsanaClient

logger = logging.getLogger(__name__)


@dataclass
class Portfolio:
    gid: str
    name: str | None = None
    resource_type: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Portfolio":
        return cls(gid=data["gid"], name=data.get("name"), resource_type=data.get("resource_type"))


async def list_portfolios(
    client: "AsanaClient",
    workspace_gid: str,
    *,
    owner: str = "me",
    options: Options | None = None,
) -> Page[Portfolio]:
    """Fetch one page of portfolios in a workspace owned by ``owner``."""
    require(workspace_gid, "workspace_gid")
    logger.debug(f"Listing portfolios in workspace {workspace_gid} owned by {owner!r}")
    data, next_page = await client.get(
        "/portfolios", options=merge_options(options, Options(workspace=workspace_gid, owner=owner))
    )
    return to_page(data, next_page, Portfolio.from_dict)


async def all_portfolios(
    client: "AsanaClient",
    workspace_gid: str,
    *,
    owner: str = "me",
    options: Options | None = None,
) -> list[Portfolio]:
    return await pager(
        client,
        lambda page_options: list_portfolios(client, workspace_gid, owner=owner, options=page_options),
        options,
    ).all()
