"""Users and workspaces.

A user is an account that can be given access to workspaces, projects and
tasks. The special identifier ``me`` refers to the authenticated user.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from asana_client.options import Options, merge_options
from asana_client.pagination import Page
from asana_client.resources.base import pager, require, to_page

if TYPE_CHECKING:
    from asana_client.client import AsanaClient

logger = logging.getLogger(__name__)


@dataclass
class Workspace:
    gid: str
    name: str | None = None
    is_organization: bool | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Workspace":
        return cls(gid=data["gid"], name=data.get("name"), is_organization=data.get("is_organization"))


@dataclass
class User:
    """An Asana account.

    Attributes:
        gid: Globally unique ID of the user.
        name: Display name.
        email: Email address (only visible to users sharing a workspace).
        photo: Profile photo URLs keyed by size, e.g. ``image_60x60``.
        workspaces: Workspaces the user may access that also contain the
            authenticated user.
    """

    gid: str
    name: str | None = None
    email: str | None = None
    photo: dict[str, str] | None = None
    workspaces: list[Workspace] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        return cls(
            gid=data["gid"],
            name=data.get("name"),
            email=data.get("email"),
            photo=data.get("photo"),
            workspaces=[Workspace.from_dict(w) for w in data.get("workspaces") or []],
        )


async def current_user(client: "AsanaClient", options: Options | None = None) -> User:
    """Fetch the user the client is authenticated as."""
    data, _ = await client.get("/users/me", options=options)
    return User.from_dict(data)


async def get_user(client: "AsanaClient", user_gid: str, options: Options | None = None) -> User:
    require(user_gid, "user_gid")
    logger.debug(f"Loading details for user {user_gid!r}")
    data, _ = await client.get(f"/users/{user_gid}", options=options)
    return User.from_dict(data)


async def list_users(client: "AsanaClient", workspace_gid: str, options: Options | None = None) -> Page[User]:
    """Fetch one page of the compact user records in a workspace."""
    require(workspace_gid, "workspace_gid")
    logger.debug(f"Listing users in workspace {workspace_gid}")
    data, next_page = await client.get("/users", options=merge_options(Options(workspace=workspace_gid), options))
    return to_page(data, next_page, User.from_dict)


async def all_users(client: "AsanaClient", workspace_gid: str, options: Options | None = None) -> list[User]:
    """Page through every user in a workspace."""
    return await pager(client, lambda page_options: list_users(client, workspace_gid, page_options), options).all()


async def favorites(
    client: "AsanaClient",
    user_gid: str,
    *,
    resource_type: str,
    workspace_gid: str,
    options: Options | None = None,
) -> list[dict[str, Any]]:
    """List a user's favorites of one resource type, in sidebar order.

    The API only returns favorites for the authenticated user, so
    ``user_gid`` is normally ``"me"``.
    """
    if not resource_type or not workspace_gid:
        raise ValueError("invalid query: resource_type and workspace_gid must be provided")
    require(user_gid, "user_gid")

    logger.debug(f"Listing favorites for user {user_gid!r}")
    data, _ = await client.get(
        f"/users/{user_gid}/favorites",
        query={"resource_type": resource_type, "workspace": workspace_gid},
        options=options,
    )
    return list(data or [])
