"""High-level Data Connector helpers."""

from __future__ import annotations

import asyncio
from typing import Any, AsyncIterator, TYPE_CHECKING

from ..ids import normalize_account_id
from ..pagination import DEFAULT_PAGE_SIZE, Page, PageWalker

if TYPE_CHECKING:
    from ..base import BaseAPIClient


class DataConnectorClientHelper:
    """Convenience operations layered over the raw endpoints."""

    def __init__(self, api: "BaseAPIClient"):
        self._api = api

    def get_all_requests(
        self, account_id: str, cancel: asyncio.Event | None = None
    ) -> AsyncIterator[dict[str, Any]]:
        """Every data request of an account, walking the server's default page size.

        Only `offset` is sent; the endpoint pages by 20 unless told otherwise.
        """
        path = f"/data-connector/v1/accounts/{normalize_account_id(account_id)}/requests"

        async def fetch(offset: int) -> Page | None:
            body = await self._api.get(path, offset=offset)
            return Page.from_response(body)

        return PageWalker(fetch, limit=DEFAULT_PAGE_SIZE, cancel=cancel).walk()
