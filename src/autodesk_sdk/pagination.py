"""Offset/limit pagination helpers.

Autodesk collection endpoints answer with a body shaped like::

    {
        "pagination": {"limit": 20, "offset": 0, "totalResults": 45, ...},
        "results": [...]
    }

`Page` models one such response and `PageWalker` turns a page-fetching
coroutine into a single async iterator over every item of the collection.

Enumeration is best-effort: when items are added or removed on the server
while a walk is in progress, `totalResults` may change between pages and
the walk can skip or repeat items. It is not a consistent snapshot.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Awaitable, Callable, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .errors import EmptyResponseError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20


class Pagination(BaseModel):
    """The `pagination` block of a collection response."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    limit: Optional[int] = None
    offset: int = 0
    total_results: Optional[int] = Field(default=None, alias="totalResults")
    next_url: Optional[str] = Field(default=None, alias="nextUrl")
    previous_url: Optional[str] = Field(default=None, alias="previousUrl")


@dataclass
class Page(Generic[T]):
    """One fetched batch of a paginated collection."""

    results: list[T] = field(default_factory=list)
    limit: int | None = None
    offset: int = 0
    total_results: int | None = None

    def __len__(self) -> int:
        return len(self.results)

    @classmethod
    def from_response(
        cls,
        payload: dict[str, Any] | None,
        *,
        results_key: str = "results",
        item_parser: Callable[[Any], T] | None = None,
    ) -> "Page[T] | None":
        """Build a page from a decoded response body.

        Returns None when the body itself is missing, which the walker
        reports as `EmptyResponseError`.
        """
        if payload is None:
            return None
        meta = Pagination.model_validate(payload.get("pagination") or {})
        raw = payload.get(results_key) or []
        items = [item_parser(item) for item in raw] if item_parser else list(raw)
        return cls(
            results=items,
            limit=meta.limit,
            offset=meta.offset,
            total_results=meta.total_results,
        )


PageFetcher = Callable[[int], Awaitable[Optional[Page[T]]]]


@dataclass
class WalkState:
    """Bookkeeping for a single walk. Never shared between walks."""

    offset: int = 0
    total_results: int | None = None
    pages: int = 0


class PageWalker(Generic[T]):
    """Lazily enumerate every item of an offset-paginated collection.

    Usage:
        async def fetch(offset: int) -> Page[dict] | None:
            body = await api.get(path, params={"offset": offset, "limit": 20})
            return Page.from_response(body)

        async for item in PageWalker(fetch, limit=20):
            ...

    Each iteration is a fresh walk starting at offset 0. Pages are fetched
    one at a time in increasing offset order; the next page is requested
    only after the consumer has taken every item of the current one.

    Cancellation: set the `cancel` event, or stop iterating and close the
    generator. The flag is checked before each item and before each fetch.
    """

    def __init__(
        self,
        fetch: PageFetcher[T],
        *,
        limit: int = DEFAULT_PAGE_SIZE,
        cancel: asyncio.Event | None = None,
        max_pages: int | None = None,
    ):
        if limit <= 0:
            raise ValueError("limit must be positive")
        if max_pages is not None and max_pages <= 0:
            raise ValueError("max_pages must be positive")
        self._fetch = fetch
        self.limit = limit
        self.cancel = cancel
        self.max_pages = max_pages

    def _cancelled(self) -> bool:
        return self.cancel is not None and self.cancel.is_set()

    def __aiter__(self) -> AsyncIterator[T]:
        return self.walk()

    async def walk(self) -> AsyncIterator[T]:
        state = WalkState()

        while True:
            if self._cancelled():
                return

            page = await self._fetch(state.offset)
            state.pages += 1
            if page is None:
                raise EmptyResponseError(offset=state.offset)

            total = page.total_results
            if total is not None and total < 0:
                total = 0
            if (
                state.total_results is not None
                and total is not None
                and total != state.total_results
            ):
                logger.debug(
                    "totalResults changed mid-walk (%s -> %s)", state.total_results, total
                )
            state.total_results = total
            logger.debug(
                "Fetched page offset=%s items=%s total=%s",
                state.offset, len(page.results), total,
            )

            for item in page.results:
                if self._cancelled():
                    return
                yield item

            if self._cancelled():
                return

            if total is None:
                # No total reported: a short page is the last one.
                if len(page.results) < self.limit:
                    return
            elif state.offset + self.limit >= total:
                return

            if self.max_pages is not None and state.pages >= self.max_pages:
                logger.warning(
                    "Stopping walk after %s pages (offset=%s, total=%s)",
                    state.pages, state.offset, total,
                )
                return

            state.offset += self.limit

    async def collect(self) -> list[T]:
        """Run one walk to completion and return every item."""
        return [item async for item in self.walk()]


def walk_pages(
    fetch: PageFetcher[T],
    *,
    limit: int = DEFAULT_PAGE_SIZE,
    cancel: asyncio.Event | None = None,
    max_pages: int | None = None,
) -> AsyncIterator[T]:
    """Shorthand for `PageWalker(fetch, ...).walk()`."""
    return PageWalker(fetch, limit=limit, cancel=cancel, max_pages=max_pages).walk()
