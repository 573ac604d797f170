"""Vault managers - server information, search and jobs."""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

from ..transport import RequestConfiguration

if TYPE_CHECKING:
    from ..base import BaseAPIClient


def _required(value: str, name: str) -> str:
    if not value:
        raise ValueError(f"{name} required")
    return value


class InformationalManager:
    """Server info and the vaults hosted by the server."""

    def __init__(self, api: "BaseAPIClient"):
        self._api = api

    async def get_server_info(self, config: RequestConfiguration | None = None) -> dict[str, Any]:
        return await self._api.get("/server-info", config)

    async def get_vaults(self, config: RequestConfiguration | None = None) -> dict[str, Any]:
        return await self._api.get("/vaults", config)

    async def get_vault(self, vault_id: str, config: RequestConfiguration | None = None) -> dict[str, Any]:
        return await self._api.get(f"/vaults/{_required(vault_id, 'vault_id')}", config)


class SearchManager:
    """Basic and advanced search within a vault."""

    def __init__(self, api: "BaseAPIClient"):
        self._api = api

    async def get_search_results(
        self, vault_id: str, config: RequestConfiguration | None = None
    ) -> dict[str, Any]:
        """Basic search; pass `q`, `limit` etc. through `config.query`."""
        return await self._api.get(
            f"/vaults/{_required(vault_id, 'vault_id')}/search-results", config
        )

    async def advanced_search(
        self,
        vault_id: str,
        criteria: dict[str, Any],
        config: RequestConfiguration | None = None,
    ) -> dict[str, Any]:
        return await self._api.post(
            f"/vaults/{_required(vault_id, 'vault_id')}:advanced-search", criteria, config
        )


class JobsManager:
    """Job queue of a vault."""

    def __init__(self, api: "BaseAPIClient"):
        self._api = api

    async def create_job(
        self, vault_id: str, job: dict[str, Any], config: RequestConfiguration | None = None
    ) -> dict[str, Any]:
        return await self._api.post(f"/vaults/{_required(vault_id, 'vault_id')}/jobs", job, config)

    async def get_job_queue_enabled(
        self, vault_id: str, config: RequestConfiguration | None = None
    ) -> bool | None:
        return await self._api.get(
            f"/vaults/{_required(vault_id, 'vault_id')}/jobs/job-queue-enabled", config
        )

    async def get_job(
        self, vault_id: str, job_id: str, config: RequestConfiguration | None = None
    ) -> dict[str, Any]:
        return await self._api.get(
            f"/vaults/{_required(vault_id, 'vault_id')}/jobs/{_required(job_id, 'job_id')}", config
        )
