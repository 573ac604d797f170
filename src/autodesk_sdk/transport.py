"""HTTP transport construction and per-request configuration."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from .config import SDKSettings, settings as default_settings

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


@dataclass
class RequestConfiguration:
    """Optional knobs for a single API call.

    Usage:
        config = RequestConfiguration(
            filters={"status": "open", "projectId": project_id},
            sort=["createdAt desc"],
            headers={"Region": "EMEA"},
        )
        await client.data_connector.requests.list_requests(account_id, config)
    """

    filters: dict[str, Any] = field(default_factory=dict)
    sort: str | list[str] | None = None
    fields: list[str] | None = None
    query: dict[str, Any] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)

    def to_params(self) -> dict[str, Any]:
        """Render as query parameters (`filter[name]=value`, comma lists)."""
        params: dict[str, Any] = {}
        for name, value in self.filters.items():
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                value = ",".join(str(v) for v in value)
            params[f"filter[{name}]"] = value
        if self.sort:
            params["sort"] = self.sort if isinstance(self.sort, str) else ",".join(self.sort)
        if self.fields:
            params["fields"] = ",".join(self.fields)
        for name, value in self.query.items():
            if value is not None:
                params[name] = value
        return params

    def with_paging(self, offset: int, limit: int | None = None) -> "RequestConfiguration":
        """Copy with `offset` (and optionally `limit`) set."""
        config = copy.deepcopy(self)
        config.query["offset"] = offset
        if limit is not None:
            config.query["limit"] = limit
        return config


class QueryParameterHandler:
    """Request hook merging extra query parameters into outgoing requests.

    Parameters set here overwrite same-named parameters already on the URL.
    A request can carry its own set under the `query_parameters` extension,
    which replaces the handler defaults for that request only.
    """

    EXTENSION = "query_parameters"

    def __init__(self, query_parameters: dict[str, Any] | None = None):
        self.query_parameters = dict(query_parameters or {})

    async def __call__(self, request: httpx.Request) -> None:
        params = request.extensions.get(self.EXTENSION)
        if params is None:
            params = self.query_parameters
        if not params:
            return
        url = request.url
        for key, value in params.items():
            url = url.copy_set_param(key, value)
        request.url = url


def create_http_client(
    *,
    base_url: str | None = None,
    timeout: float | None = None,
    query_parameters: dict[str, Any] | None = None,
    settings: SDKSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Build the default `httpx.AsyncClient` used by the SDK clients.

    Authentication is not installed on the client; `BaseAPIClient` passes its
    auth adapter per request so one transport can serve several credentials.
    """
    cfg = settings or default_settings
    kwargs: dict[str, Any] = {
        "timeout": timeout if timeout is not None else cfg.timeout,
        "headers": {**DEFAULT_HEADERS, "User-Agent": cfg.user_agent},
        "event_hooks": {"request": [QueryParameterHandler(query_parameters)]},
    }
    if base_url:
        kwargs["base_url"] = base_url
    if transport is not None:
        kwargs["transport"] = transport
    logger.debug("Creating HTTP client (timeout=%s)", kwargs["timeout"])
    return httpx.AsyncClient(**kwargs)
