"""ACC client - shortcuts to Autodesk Construction Cloud API families."""

from __future__ import annotations

import httpx

from ..auth import AccessTokenProvider
from ..base import ApiSection, ProductClient
from ..config import SDKSettings


class ACCClient(ProductClient):
    """Autodesk Construction Cloud client.

    Usage:
        async with ACCClient(get_token) as acc:
            issues = await acc.issues.get(f"/projects/{project_id}/issues")

            async for sheet in acc.sheets.walk(f"/projects/{project_id}/sheets"):
                print(sheet["title"])
    """

    SECTIONS = {
        "accounts": "/hq/v1/accounts",
        "projects": "/bim360/relationship/v2",
        "clash": "/bim360/clash/v3",
        "docs": "/bim360/docs/v1",
        "model_set": "/bim360/modelset/v3",
        "auto_specs": "/construction/autospecs/v1",
        "admin": "/construction/admin/v1",
        "issues": "/construction/issues/v1",
        "sheets": "/construction/sheets/v1",
        "forms": "/construction/forms/v1",
        "files": "/construction/files/v1",
        "index": "/construction/index/v2",
        "cost": "/cost/v1",
        "data_connector": "/data-connector/v1",
        "submittals": "/construction/submittals/v2",
        "rfis": "/construction/rfis/v3",
        "locations": "/construction/locations/v2",
        "packages": "/construction/packages/v1",
        "reviews": "/construction/reviews/v1",
        "photos": "/construction/photos/v1",
        "takeoff": "/construction/takeoff/v1",
        "transmittals": "/construction/transmittals/v1",
        "rcm": "/construction/rcm/v1",
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
    projects: ApiSection
    clash: ApiSection
    docs: ApiSection
    model_set: ApiSection
    auto_specs: ApiSection
    admin: ApiSection
    issues: ApiSection
    sheets: ApiSection
    forms: ApiSection
    files: ApiSection
    index: ApiSection
    cost: ApiSection
    data_connector: ApiSection
    submittals: ApiSection
    rfis: ApiSection
    locations: ApiSection
    packages: ApiSection
    reviews: ApiSection
    photos: ApiSection
    takeoff: ApiSection
    transmittals: ApiSection
    rcm: ApiSection
