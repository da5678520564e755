"""Custom fields and their project settings.

Custom fields hold user-specified metadata on tasks. A custom field setting
attaches a field to a project; fields can be shared across a workspace or
created local to one project. Users can lock custom fields, in which case
editing them returns 403 Forbidden.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from asana_client.options import Options
from asana_client.pagination import Page
from asana_client.resources.base import pager, require, to_page
from asana_client.resources.memberships import Project

if TYPE_CHECKING:
    from asana_client.client import AsanaClient

logger = logging.getLogger(__name__)

# Passed as insert_before / insert_after to send an explicit null
EXPLICIT_NULL = "-"


class FieldType(str, enum.Enum):
    TEXT = "text"
    NUMBER = "number"
    ENUM = "enum"
    MULTI_ENUM = "multi_enum"
    DATE = "date"
    BOOLEAN = "boolean"
    PEOPLE = "people"


class Format(str, enum.Enum):
    CURRENCY = "currency"
    IDENTIFIER = "identifier"
    PERCENTAGE = "percentage"
    CUSTOM = "custom"
    NONE = "none"


@dataclass
class EnumValue:
    name: str
    gid: str | None = None
    color: str | None = None
    enabled: bool | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EnumValue":
        return cls(name=data.get("name", ""), gid=data.get("gid"), color=data.get("color"), enabled=data.get("enabled"))

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"name": self.name}
        if self.color:
            body["color"] = self.color
        return body


@dataclass
class CustomField:
    """Metadata describing one custom field.

    ``precision`` only applies to number fields (0-6 places after the
    decimal); ``enum_options`` only to enum and multi_enum fields;
    ``currency_code`` and ``custom_label`` only to the matching formats.
    """

    name: str
    resource_subtype: FieldType
    gid: str | None = None
    description: str | None = None
    format: Format | None = None
    precision: int | None = None
    currency_code: str | None = None
    custom_label: str | None = None
    custom_label_position: str | None = None
    has_notifications_enabled: bool | None = None
    is_global_to_workspace: bool | None = None
    enabled: bool | None = None
    enum_options: list[EnumValue] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CustomField":
        fmt = data.get("format")
        return cls(
            gid=data.get("gid"),
            name=data.get("name", ""),
            resource_subtype=FieldType(data.get("resource_subtype") or data.get("type") or FieldType.TEXT),
            description=data.get("description"),
            format=Format(fmt) if fmt else None,
            precision=data.get("precision"),
            currency_code=data.get("currency_code"),
            custom_label=data.get("custom_label"),
            custom_label_position=data.get("custom_label_position"),
            has_notifications_enabled=data.get("has_notifications_enabled"),
            is_global_to_workspace=data.get("is_global_to_workspace"),
            enabled=data.get("enabled"),
            enum_options=[EnumValue.from_dict(o) for o in data.get("enum_options") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        """Body for creating this field; read-only attributes are left out."""
        body: dict[str, Any] = {"name": self.name, "resource_subtype": FieldType(self.resource_subtype).value}
        optional = {
            "description": self.description,
            "format": Format(self.format).value if self.format else None,
            "precision": self.precision,
            "currency_code": self.currency_code,
            "custom_label": self.custom_label,
            "custom_label_position": self.custom_label_position,
            "has_notifications_enabled": self.has_notifications_enabled,
        }
        body.update({key: value for key, value in optional.items() if value is not None})
        if self.enum_options:
            body["enum_options"] = [option.to_dict() for option in self.enum_options]
        return body


@dataclass
class CustomFieldSetting:
    gid: str
    custom_field: CustomField | None = None
    project: Project | None = None
    is_important: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CustomFieldSetting":
        custom_field = data.get("custom_field")
        project = data.get("project")
        return cls(
            gid=data["gid"],
            custom_field=CustomField.from_dict(custom_field) if custom_field else None,
            project=Project.from_dict(project) if project else None,
            is_important=bool(data.get("is_important")),
        )


async def get_custom_field(client: "AsanaClient", custom_field_gid: str, options: Options | None = None) -> CustomField:
    require(custom_field_gid, "custom_field_gid")
    logger.debug(f"Loading details for custom field {custom_field_gid!r}")
    data, _ = await client.get(f"/custom_fields/{custom_field_gid}", options=options)
    return CustomField.from_dict(data)


async def list_custom_fields(
    client: "AsanaClient", workspace_gid: str, options: Options | None = None
) -> Page[CustomField]:
    """Fetch one page of the compact custom field records in a workspace."""
    require(workspace_gid, "workspace_gid")
    logger.debug(f"Listing custom fields in workspace {workspace_gid}")
    data, next_page = await client.get(f"/workspaces/{workspace_gid}/custom_fields", options=options)
    return to_page(data, next_page, CustomField.from_dict)


async def all_custom_fields(
    client: "AsanaClient", workspace_gid: str, options: Options | None = None
) -> list[CustomField]:
    return await pager(
        client, lambda page_options: list_custom_fields(client, workspace_gid, page_options), options
    ).all()


async def create_custom_field(
    client: "AsanaClient", workspace_gid: str, custom_field: CustomField, options: Options | None = None
) -> CustomField:
    require(workspace_gid, "workspace_gid")
    logger.debug(f"Creating custom field {custom_field.name!r} in workspace {workspace_gid}")
    body = {**custom_field.to_dict(), "workspace": workspace_gid}
    data = await client.post("/custom_fields", body, options=options)
    return CustomField.from_dict(data)


def _position(body: dict[str, Any], key: str, value: str | None) -> None:
    if value == EXPLICIT_NULL:
        body[key] = None
    elif value:
        body[key] = value


async def add_custom_field_setting(
    client: "AsanaClient",
    project_gid: str,
    custom_field: str | CustomField,
    *,
    is_important: bool = False,
    insert_before: str | None = None,
    insert_after: str | None = None,
    options: Options | None = None,
) -> CustomFieldSetting:
    """Attach a custom field to a project.

    Args:
        custom_field: gid of an existing field, or a :class:`CustomField`
            to create as a field local to the project
        insert_before: Setting gid to insert before; ``"-"`` sends null
        insert_after: Setting gid to insert after; ``"-"`` sends null
    """
    require(project_gid, "project_gid")
    if isinstance(custom_field, CustomField):
        field_value: Any = custom_field.to_dict()
        label = custom_field.name
    else:
        field_value = require(custom_field, "custom_field")
        label = custom_field
    logger.debug(f"Attaching custom field {label!r} to project {project_gid!r}")

    body: dict[str, Any] = {"custom_field": field_value, "is_important": is_important}
    _position(body, "insert_before", insert_before)
    _position(body, "insert_after", insert_after)

    data = await client.post(f"/projects/{project_gid}/addCustomFieldSetting", body, options=options)
    return CustomFieldSetting.from_dict(data)


async def remove_custom_field_setting(
    client: "AsanaClient", project_gid: str, custom_field_gid: str, options: Options | None = None
) -> None:
    require(project_gid, "project_gid")
    require(custom_field_gid, "custom_field_gid")
    logger.debug(f"Removing custom field {custom_field_gid!r} from project {project_gid!r}")
    await client.post(
        f"/projects/{project_gid}/removeCustomFieldSetting", {"custom_field": custom_field_gid}, options=options
    )
