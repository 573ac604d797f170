"""Data Connector client - scheduled data extracts for ACC/BIM 360 accounts."""

from __future__ import annotations

import httpx

from ..auth import AccessTokenProvider
from ..base import ProductClient
from ..config import SDKSettings
from .helper import DataConnectorClientHelper
from .managers import DataManager, JobsManager, RequestsManager


class DataConnectorClient(ProductClient):
    """Autodesk Data Connector client.

    Usage:
        async with DataConnectorClient(get_token) as dc:
            async for request in dc.helper.get_all_requests(hub_id):
                jobs = await dc.requests.list_request_jobs(hub_id, request["id"])

    Account ids may be given as hub ids (`b.` prefix is stripped).
    """

    def __init__(
        self,
        get_access_token: AccessTokenProvider,
        http_client: httpx.AsyncClient | None = None,
        *,
        settings: SDKSettings | None = None,
    ):
        super().__init__(get_access_token, http_client, settings=settings)
        self.requests = RequestsManager(self.api)
        self.jobs = JobsManager(self.api)
        self.data = DataManager(self.api)
        self.helper = DataConnectorClientHelper(self.api)
