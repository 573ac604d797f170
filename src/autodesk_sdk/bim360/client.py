"""BIM 360 client - shortcuts to BIM 360 API families."""

from __future__ import annotations

import httpx

from ..auth import AccessTokenProvider
from ..base import ApiSection, ProductClient
from ..config import SDKSettings


class BIM360Client(ProductClient):
    """BIM 360 client.

    Usage:
        async with BIM360Client(get_token) as bim:
            account = await bim.accounts.get(f"/{account_id}")
            checklists = await bim.checklists.get(f"/containers/{container_id}/instances")
    """

    SECTIONS = {
        "accounts": "/hq/v1/accounts",
        "accounts_eu_v1": "/hq/v1/regions/eu/accounts",
        "accounts_eu_v2": "/hq/v2/regions/eu/accounts",
        "admin": "/construction/admin/v1",
        "assets": "/bim360/assets/v1",
        "checklists": "/bim360/checklists/v1",
        "clash": "/bim360/clash/v3",
        "cost": "/cost/v1",
        "data_connector": "/data-connector/v1",
        "docs": "/bim360/docs/v1",
        "index": "/construction/index/v2",
        "issues": "/issues/v2",
        "model_set": "/bim360/modelset/v3",
        "projects": "/bim360/relationship/v2",
        "relationships": "/bim360/relationship/v2",
        "rfis": "/bim360/rfis/v2",
    }

    def __init__(
        self,
        get_access_token: AccessTokenProvider,
        http_client: httpx.AsyncClient | None = None,
        *,
        settings: SDKSettings | None = None,
    ):
        super().__init__(get_access_token, http_client, settings=settings)
        for name, prefix in self.SECTIONS.items():
            setattr(self, name, self._section(prefix))

    accounts: ApiSection
    accounts_eu_v1: ApiSection
    accounts_eu_v2: ApiSection
    admin: ApiSection
    assets: ApiSection
    checklists: ApiSection
    clash: ApiSection
    cost: ApiSection
    data_connector: ApiSection
    docs: ApiSection
    index: ApiSection
    issues: ApiSection
    model_set: ApiSection
    projects: ApiSection
    relationships: ApiSection
    rfis: ApiSection
