"""Plumbing shared by the resource modules."""

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeVar

from asana_client.options import Options, merge_options
from asana_client.pagination import NextPage, Page, Pager

if TYPE_CHECKING:
    from asana_client.client import AsanaClient

T = TypeVar("T")


def require(value: str | None, name: str) -> str:
    """Reject empty identifiers before they turn into a malformed URL."""
    if not value:
        raise ValueError(f"{name} must be provided")
    return value


def to_page(data: Any, next_page: NextPage | None, from_dict: Callable[[dict[str, Any]], T]) -> Page[T]:
    return Page(items=[from_dict(record) for record in data or []], next_page=next_page)


def pager(
    client: "AsanaClient",
    list_page: Callable[[Options], Awaitable[Page[T]]],
    options: Options | None = None,
) -> Pager[T]:
    """Build a Pager over a list helper.

    ``list_page`` receives the caller's options with ``limit`` and ``offset``
    set for the page being fetched.
    """

    async def fetch_page(offset: str | None, limit: int) -> Page[T]:
        return await list_page(merge_options(options, Options(limit=limit, offset=offset)))

    return Pager(fetch_page, page_size=client.config.page_size)
