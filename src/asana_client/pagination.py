"""Cursor-based pagination for Asana collections.

Asana list endpoints return at most ``limit`` records plus a ``next_page``
object whose ``offset`` is echoed back to fetch the following page. When
``next_page`` is null the collection is exhausted.

:class:`Pager` turns a single-page fetch into a lazy walk over the whole
collection:

```python
from asana_client.pagination import Pager
from asana_client.resources import users

pager = Pager(lambda offset, limit: users.list_users(client, "1234", offset=offset, limit=limit))

async for user in pager:
    print(user.name)

everyone = await pager.all()
```
"""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 50


@dataclass(frozen=True)
class NextPage:
    """Cursor pointing at the next page of a collection."""

    offset: str
    path: str | None = None
    uri: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "NextPage | None":
        """Build a cursor from the envelope's ``next_page`` value.

        Returns None for a null value or one without an offset.
        """
        if not isinstance(data, dict) or not data.get("offset"):
            return None
        return cls(offset=str(data["offset"]), path=data.get("path"), uri=data.get("uri"))


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results and the cursor for the page after it."""

    items: list[T] = field(default_factory=list)
    next_page: NextPage | None = None


PageFetcher = Callable[[str | None, int], Awaitable[Page[T]]]


class Pager(Generic[T]):
    """Drive a page-fetch callable across an entire collection.

    The fetcher is called with ``(offset, limit)``; the first call gets
    ``offset=None``. Pages are requested strictly one after another since each
    offset comes from the previous response. Every iteration starts a fresh
    walk, so a Pager can be iterated more than once.

    Args:
        fetch_page: Async callable returning a :class:`Page`
        page_size: Value passed as ``limit`` on every call (default: 50)
    """

    def __init__(self, fetch_page: PageFetcher[T], *, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self._fetch_page = fetch_page
        self.page_size = page_size

    async def pages(self) -> AsyncIterator[Page[T]]:
        """Yield each page in the order the API returns them."""
        offset: str | None = None
        page_number = 0

        while True:
            page_number += 1
            logger.debug(f"Fetching page {page_number} (offset={offset}, limit={self.page_size})")
            page = await self._fetch_page(offset, self.page_size)
            yield page

            if page.next_page is None:
                return
            offset = page.next_page.offset

    async def __aiter__(self) -> AsyncIterator[T]:
        async for page in self.pages():
            for item in page.items:
                yield item

    async def all(self) -> list[T]:
        """Fetch every page and return the concatenated items.

        Any error from the fetcher propagates; items gathered before it are
        dropped.
        """
        results: list[T] = []
        async for page in self.pages():
            results.extend(page.items)
        return results
