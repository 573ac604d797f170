"""Python clients for Autodesk cloud APIs (ACC, BIM 360, Vault, Data Connector).

Usage:
    from autodesk_sdk import DataConnectorClient

    async def get_token() -> str:
        return await my_oauth.get_access_token()

    async with DataConnectorClient(get_token) as dc:
        async for request in dc.requests.iter_requests(hub_id):
            print(request["description"])

Every client takes an async token getter, invoked once per request, and
optionally a shared `httpx.AsyncClient`.
"""

from .account_admin import AccountAdminClient
from .acc import ACCClient
from .auth import TokenAuthAdapter, env_token, static_token
from .base import ApiSection, BaseAPIClient
from .bim360 import BIM360Client
from .config import SDKSettings
from .dataconnector import DataConnectorClient
from .errors import AuthenticationError, EmptyResponseError, SDKError, TransportError
from .pagination import Page, PageWalker, walk_pages
from .transport import QueryParameterHandler, RequestConfiguration, create_http_client
from .vault import VaultClient

__all__ = [
    "ACCClient",
    "AccountAdminClient",
    "ApiSection",
    "AuthenticationError",
    "BaseAPIClient",
    "BIM360Client",
    "DataConnectorClient",
    "EmptyResponseError",
    "Page",
    "PageWalker",
    "QueryParameterHandler",
    "RequestConfiguration",
    "SDKError",
    "SDKSettings",
    "TokenAuthAdapter",
    "TransportError",
    "VaultClient",
    "create_http_client",
    "env_token",
    "static_token",
    "walk_pages",
]
