"""Vault client - Vault Gateway REST API (v2)."""

from __future__ import annotations

import httpx

from ..auth import AccessTokenProvider
from ..base import ProductClient
from ..config import SDKSettings, settings as default_settings
from .managers import InformationalManager, JobsManager, SearchManager


class VaultClient(ProductClient):
    """Autodesk Vault client.

    Usage (3-legged token):
        async with VaultClient(get_token, "vault.example.com") as vault:
            vaults = await vault.informational.get_vaults()

    With a 2-legged token, pass the email of the user to impersonate as
    `user_id`.
    """

    def __init__(
        self,
        get_access_token: AccessTokenProvider,
        vault_server: str,
        user_id: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        *,
        settings: SDKSettings | None = None,
    ):
        if not vault_server or not vault_server.strip():
            raise ValueError("vault_server cannot be empty")
        cfg = (settings or default_settings).model_copy(update={"vault_server": vault_server})
        super().__init__(
            get_access_token, http_client, base_url=cfg.vault_base_url, settings=settings
        )
        self.vault_server = vault_server.strip()
        self.user_id = user_id

        self.informational = InformationalManager(self.api)
        self.search = SearchManager(self.api)
        self.jobs = JobsManager(self.api)
