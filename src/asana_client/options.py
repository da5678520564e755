"""Per-request options shared by every resource helper."""

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any

ENABLE_HEADER = "Asana-Enable"
DISABLE_HEADER = "Asana-Disable"

_LIST_FIELDS = ("fields", "enable", "disable")


@dataclass(frozen=True)
class Options:
    """Query parameters and headers that can accompany any request.

    Several Options can be combined with :meth:`merge`; later values win and
    feature flag lists are concatenated.

    Attributes:
        limit: Page size for list endpoints.
        offset: Cursor from a previous page's ``next_page.offset``.
        workspace: Workspace gid filter.
        owner: Owner filter (``"me"`` for the authenticated user).
        fields: Extra fields to include (``opt_fields``).
        pretty: Ask for indented JSON (``opt_pretty``).
        enable: Feature flags to opt into (``Asana-Enable``).
        disable: Feature flags to opt out of (``Asana-Disable``).
    """

    limit: int | None = None
    offset: str | None = None
    workspace: str | None = None
    owner: str | None = None
    fields: tuple[str, ...] = ()
    pretty: bool = False
    enable: tuple[str, ...] = ()
    disable: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in _LIST_FIELDS:
            object.__setattr__(self, name, _as_tuple(getattr(self, name)))

    def merge(self, other: "Options | None") -> "Options":
        if other is None:
            return self
        changes: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            value = getattr(other, f.name)
            if f.name in _LIST_FIELDS:
                changes[f.name] = _unique(getattr(self, f.name) + value)
            elif f.name == "pretty":
                changes[f.name] = self.pretty or value
            elif value is not None:
                changes[f.name] = value
        return replace(self, **changes)

    def params(self) -> dict[str, str]:
        """Query string parameters for these options."""
        params: dict[str, str] = {}
        if self.limit is not None:
            params["limit"] = str(self.limit)
        if self.offset:
            params["offset"] = self.offset
        if self.workspace:
            params["workspace"] = self.workspace
        if self.owner:
            params["owner"] = self.owner
        if self.fields:
            params["opt_fields"] = ",".join(self.fields)
        if self.pretty:
            params["opt_pretty"] = "true"
        return params

    def headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self.enable:
            headers[ENABLE_HEADER] = ",".join(self.enable)
        if self.disable:
            headers[DISABLE_HEADER] = ",".join(self.disable)
        return headers


def merge_options(*options: Options | None) -> Options:
    result = Options()
    for option in options:
        result = result.merge(option)
    return result


def _as_tuple(value: str | Iterable[str] | None) -> tuple[str, ...]:
    # A bare string is one entry, not a sequence of characters
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def _unique(values: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))
