"""Bearer authentication adapter for the httpx transport.

Bridges a caller-supplied token getter into ``httpx.Auth``. The getter is
invoked once per outgoing request; nothing is cached, so refreshing an
expired credential is entirely the getter's business.
"""

from __future__ import annotations

import inspect
import logging
from typing import AsyncGenerator, Awaitable, Callable, Generator, Union

import httpx

logger = logging.getLogger(__name__)

AccessTokenProvider = Callable[[], Union[Awaitable[str], str]]


class TokenAuthAdapter(httpx.Auth):
    """Attach ``Authorization: Bearer <token>`` to every request.

    Usage:
        async def get_token() -> str:
            return await my_identity_service.fetch_token()

        auth = TokenAuthAdapter(get_token)
        async with httpx.AsyncClient(auth=auth) as http:
            await http.get("https://developer.api.autodesk.com/...")

    Errors raised by the getter propagate unmodified to whoever issued the
    request. No retry is performed here.
    """

    requires_request_body = False
    requires_response_body = False

    def __init__(self, get_access_token: AccessTokenProvider):
        if not callable(get_access_token):
            raise TypeError("get_access_token must be callable")
        self._get_access_token = get_access_token

    async def get_authorization_token(self, request: httpx.Request | None = None) -> str:
        """Produce the bearer token for this request."""
        token = self._get_access_token()
        if inspect.isawaitable(token):
            token = await token
        return token

    async def async_auth_flow(
        self, request: httpx.Request
    ) -> AsyncGenerator[httpx.Request, httpx.Response]:
        token = await self.get_authorization_token(request)
        request.headers["Authorization"] = f"Bearer {token}"
        logger.debug("Authorized %s %s", request.method, request.url.path)
        yield request

    def sync_auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        raise RuntimeError("TokenAuthAdapter requires an async transport (httpx.AsyncClient)")
