"""Project memberships.

A membership ties a member (a user or a team) to a project with an access
level.
"""

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from asana_client.options import Options
from asana_client.pagination import Page
from asana_client.resources.base import pager, require, to_page

if TYPE_CHECKING:
    from asana_client.client import AsanaClient

logger = logging.getLogger(__name__)


class AccessLevel(str, enum.Enum):
    ADMIN = "admin"
    EDITOR = "editor"
    COMMENTER = "commenter"
    VIEWER = "viewer"


@dataclass
class Project:
    gid: str
    name: str | None = None
    resource_type: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Project":
        return cls(gid=data["gid"], name=data.get("name"), resource_type=data.get("resource_type"))


@dataclass
class ProjectMember:
    """Either a user or a team; ``resource_type`` tells which."""

    gid: str
    name: str | None = None
    resource_type: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProjectMember":
        return cls(gid=data["gid"], name=data.get("name"), resource_type=data.get("resource_type"))


@dataclass
class ProjectMembership:
    gid: str
    resource_type: str | None = None
    resource_subtype: str | None = None
    parent: Project | None = None
    member: ProjectMember | None = None
    access_level: AccessLevel | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProjectMembership":
        parent = data.get("parent")
        member = data.get("member")
        access_level = data.get("access_level")
        return cls(
            gid=data["gid"],
            resource_type=data.get("resource_type"),
            resource_subtype=data.get("resource_subtype"),
            parent=Project.from_dict(parent) if parent else None,
            member=ProjectMember.from_dict(member) if member else None,
            access_level=AccessLevel(access_level) if access_level else None,
        )


async def list_project_memberships(
    client: "AsanaClient",
    project_gid: str,
    *,
    member_gid: str | None = None,
    options: Options | None = None,
) -> Page[ProjectMembership]:
    """Fetch one page of memberships on a project, optionally for one member."""
    require(project_gid, "project_gid")
    logger.debug(f"Listing memberships in project {project_gid}")
    data, next_page = await client.get(
        "/memberships", query={"parent": project_gid, "member": member_gid}, options=options
    )
    return to_page(data, next_page, ProjectMembership.from_dict)


async def all_project_memberships(
    client: "AsanaClient",
    project_gid: str,
    *,
    member_gid: str | None = None,
    options: Options | None = None,
) -> list[ProjectMembership]:
    return await pager(
        client,
        lambda page_options: list_project_memberships(
            client, project_gid, member_gid=member_gid, options=page_options
        ),
        options,
    ).all()


async def create_project_membership(
    client: "AsanaClient",
    project_gid: str,
    member_gid: str,
    *,
    access_level: AccessLevel | str | None = None,
    options: Options | None = None,
) -> ProjectMembership:
    """Give a user or team access to a project."""
    require(project_gid, "project_gid")
    require(member_gid, "member_gid")
    logger.info(f"Creating membership for {member_gid!r} in project {project_gid!r}")

    body: dict[str, Any] = {"member": member_gid, "parent": project_gid}
    if access_level is not None:
        body["access_level"] = AccessLevel(access_level).value

    data = await client.post("/memberships", body, options=options)
    return ProjectMembership.from_dict(data)
