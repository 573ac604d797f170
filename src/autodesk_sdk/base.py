"""Base API client shared by every product client.

Wraps one `httpx.AsyncClient` (owned or caller-supplied) and a
`TokenAuthAdapter`, and exposes the HTTP verbs the managers build on.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, AsyncIterator, Callable

import httpx

from .auth import AccessTokenProvider, TokenAuthAdapter
from .config import SDKSettings, settings as default_settings
from .errors import EmptyResponseError
from .pagination import Page, PageWalker
from .transport import RequestConfiguration, create_http_client

logger = logging.getLogger(__name__)


class BaseAPIClient:
    """Authenticated JSON client rooted at a product base URL.

    Usage:
        api = BaseAPIClient(get_token, base_url="https://developer.api.autodesk.com")
        async with api:
            body = await api.get("/construction/admin/v1/accounts/{id}/projects")
    """

    def __init__(
        self,
        get_access_token: AccessTokenProvider,
        http_client: httpx.AsyncClient | None = None,
        *,
        base_url: str | None = None,
        settings: SDKSettings | None = None,
    ):
        self.settings = settings or default_settings
        self.base_url = (base_url or self.settings.base_url).rstrip("/")
        self.auth = TokenAuthAdapter(get_access_token)
        self._owns_client = http_client is None
        self._client = http_client or create_http_client(settings=self.settings)

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._client

    async def __aenter__(self) -> "BaseAPIClient":
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_client:
            await self._client.aclose()

    def _url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        config: RequestConfiguration | None = None,
    ) -> httpx.Response:
        """Send a request and raise for non-success statuses."""
        query: dict[str, Any] = {}
        headers: dict[str, str] = {}
        if config is not None:
            query.update(config.to_params())
            headers.update(config.headers)
        if params:
            query.update({k: v for k, v in params.items() if v is not None})

        url = self._url(path)
        logger.debug("%s %s params=%s", method, url, query)
        resp = await self._client.request(
            method,
            url,
            params=query or None,
            json=json,
            headers=headers or None,
            auth=self.auth,
        )
        resp.raise_for_status()
        return resp

    @staticmethod
    def _decode(resp: httpx.Response) -> Any:
        if resp.status_code == 204 or not resp.content:
            return None
        return resp.json()

    async def get(self, path: str, config: RequestConfiguration | None = None, **params) -> Any:
        """Make GET request."""
        resp = await self.request("GET", path, params=params, config=config)
        return self._decode(resp)

    async def post(self, path: str, data: Any = None, config: RequestConfiguration | None = None) -> Any:
        """Make POST request."""
        resp = await self.request("POST", path, json=data, config=config)
        return self._decode(resp)

    async def put(self, path: str, data: Any = None, config: RequestConfiguration | None = None) -> Any:
        """Make PUT request."""
        resp = await self.request("PUT", path, json=data, config=config)
        return self._decode(resp)

    async def patch(self, path: str, data: Any = None, config: RequestConfiguration | None = None) -> Any:
        """Make PATCH request."""
        resp = await self.request("PATCH", path, json=data, config=config)
        return self._decode(resp)

    async def delete(self, path: str, config: RequestConfiguration | None = None) -> Any:
        """Make DELETE request."""
        resp = await self.request("DELETE", path, config=config)
        return self._decode(resp)

    # Pagination
    async def get_page(
        self,
        path: str,
        *,
        offset: int = 0,
        limit: int | None = None,
        config: RequestConfiguration | None = None,
        results_key: str = "results",
        item_parser: Callable[[Any], Any] | None = None,
    ) -> Page:
        """GET one page of a collection endpoint."""
        paged = (config or RequestConfiguration()).with_paging(offset, limit)
        body = await self.get(path, paged)
        page = Page.from_response(body, results_key=results_key, item_parser=item_parser)
        if page is None:
            raise EmptyResponseError(f"Empty response from {path}", offset=offset)
        return page

    def walk(
        self,
        path: str,
        *,
        limit: int | None = None,
        config: RequestConfiguration | None = None,
        results_key: str = "results",
        item_parser: Callable[[Any], Any] | None = None,
        cancel: asyncio.Event | None = None,
        max_pages: int | None = None,
    ) -> AsyncIterator[Any]:
        """Iterate every item of a collection endpoint, page by page."""
        page_size = limit or self.settings.page_size

        async def fetch(offset: int) -> Page | None:
            return await self.get_page(
                path,
                offset=offset,
                limit=page_size,
                config=config,
                results_key=results_key,
                item_parser=item_parser,
            )

        return PageWalker(fetch, limit=page_size, cancel=cancel, max_pages=max_pages).walk()


class ApiSection:
    """Shortcut to one API family below the client base URL.

    `acc.issues.get("/projects/{id}/issues")` requests
    `<base>/construction/issues/v1/projects/{id}/issues`.
    """

    def __init__(self, api: BaseAPIClient, prefix: str):
        self._api = api
        self.prefix = "/" + prefix.strip("/")

    def __repr__(self) -> str:
        return f"ApiSection({self.prefix!r})"

    def path(self, path: str = "") -> str:
        if not path:
            return self.prefix
        return f"{self.prefix}/{path.lstrip('/')}"

    async def get(self, path: str = "", config: RequestConfiguration | None = None, **params) -> Any:
        return await self._api.get(self.path(path), config, **params)

    async def post(self, path: str = "", data: Any = None, config: RequestConfiguration | None = None) -> Any:
        return await self._api.post(self.path(path), data, config)

    async def put(self, path: str = "", data: Any = None, config: RequestConfiguration | None = None) -> Any:
        return await self._api.put(self.path(path), data, config)

    async def patch(self, path: str = "", data: Any = None, config: RequestConfiguration | None = None) -> Any:
        return await self._api.patch(self.path(path), data, config)

    async def delete(self, path: str = "", config: RequestConfiguration | None = None) -> Any:
        return await self._api.delete(self.path(path), config)

    def walk(self, path: str = "", **kwargs) -> AsyncIterator[Any]:
        return self._api.walk(self.path(path), **kwargs)


class ProductClient:
    """Common facade plumbing: one `BaseAPIClient` plus lifecycle."""

    def __init__(
        self,
        get_access_token: AccessTokenProvider,
        http_client: httpx.AsyncClient | None = None,
        *,
        base_url: str | None = None,
        settings: SDKSettings | None = None,
    ):
        self.api = BaseAPIClient(
            get_access_token, http_client, base_url=base_url, settings=settings
        )

    def _section(self, prefix: str) -> ApiSection:
        return ApiSection(self.api, prefix)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    async def aclose(self) -> None:
        await self.api.aclose()
