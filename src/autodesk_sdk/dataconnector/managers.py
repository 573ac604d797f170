"""Data Connector managers - requests, jobs and data extracts.

The user must have executive overview or project administrator
permissions for every call in this module.
"""

from __future__ import annotations

import asyncio
from typing import Any, AsyncIterator, TYPE_CHECKING

from ..ids import normalize_account_id, parse_guid
from ..transport import RequestConfiguration

if TYPE_CHECKING:
    from ..base import BaseAPIClient

BASE_PATH = "/data-connector/v1/accounts"


class _Manager:
    def __init__(self, api: "BaseAPIClient"):
        self._api = api

    @staticmethod
    def _account(account_id: str) -> str:
        return f"{BASE_PATH}/{normalize_account_id(account_id)}"


class RequestsManager(_Manager):
    """Data requests.

    Usage:
        async with DataConnectorClient(get_token) as dc:
            created = await dc.requests.create_request(hub_id, {
                "description": "Weekly extract",
                "scheduleInterval": "WEEK",
                "reoccuringInterval": 1,
                "effectiveFrom": "2024-01-01T00:00:00Z",
                "serviceGroups": ["admin", "issues"],
            })

            async for request in dc.requests.iter_requests(hub_id):
                print(request["id"], request["description"])
    """

    async def create_request(
        self, account_id: str, data: dict[str, Any], config: RequestConfiguration | None = None
    ) -> dict[str, Any]:
        """Create a data request, optionally limited to one project."""
        return await self._api.post(f"{self._account(account_id)}/requests", data, config)

    async def list_requests(
        self, account_id: str, config: RequestConfiguration | None = None
    ) -> dict[str, Any]:
        """One page of the data requests the user created in the account."""
        return await self._api.get(f"{self._account(account_id)}/requests", config)

    async def get_request(
        self, account_id: str, request_id: str, config: RequestConfiguration | None = None
    ) -> dict[str, Any]:
        rid = parse_guid(request_id, "request_id")
        return await self._api.get(f"{self._account(account_id)}/requests/{rid}", config)

    async def update_request(
        self,
        account_id: str,
        request_id: str,
        data: dict[str, Any],
        config: RequestConfiguration | None = None,
    ) -> dict[str, Any]:
        rid = parse_guid(request_id, "request_id")
        return await self._api.patch(f"{self._account(account_id)}/requests/{rid}", data, config)

    async def delete_request(
        self, account_id: str, request_id: str, config: RequestConfiguration | None = None
    ) -> None:
        rid = parse_guid(request_id, "request_id")
        await self._api.delete(f"{self._account(account_id)}/requests/{rid}", config)

    async def list_request_jobs(
        self, account_id: str, request_id: str, config: RequestConfiguration | None = None
    ) -> dict[str, Any]:
        """One page of the jobs spawned by a request."""
        rid = parse_guid(request_id, "request_id")
        return await self._api.get(f"{self._account(account_id)}/requests/{rid}/jobs", config)

    def iter_requests(
        self,
        account_id: str,
        config: RequestConfiguration | None = None,
        *,
        limit: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        """Every data request in the account, across all pages."""
        return self._api.walk(
            f"{self._account(account_id)}/requests", limit=limit, config=config, cancel=cancel
        )

    def iter_request_jobs(
        self,
        account_id: str,
        request_id: str,
        config: RequestConfiguration | None = None,
        *,
        limit: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        rid = parse_guid(request_id, "request_id")
        return self._api.walk(
            f"{self._account(account_id)}/requests/{rid}/jobs",
            limit=limit,
            config=config,
            cancel=cancel,
        )


class JobsManager(_Manager):
    """Jobs spawned by data requests."""

    async def list_jobs(
        self, account_id: str, config: RequestConfiguration | None = None
    ) -> dict[str, Any]:
        """One page of jobs, optionally filtered to a project via `config.query`."""
        return await self._api.get(f"{self._account(account_id)}/jobs", config)

    async def get_job(
        self, account_id: str, job_id: str, config: RequestConfiguration | None = None
    ) -> dict[str, Any]:
        jid = parse_guid(job_id, "job_id")
        return await self._api.get(f"{self._account(account_id)}/jobs/{jid}", config)

    async def cancel_job(
        self, account_id: str, job_id: str, config: RequestConfiguration | None = None
    ) -> None:
        """Cancel a running job."""
        jid = parse_guid(job_id, "job_id")
        await self._api.delete(f"{self._account(account_id)}/jobs/{jid}", config)

    async def get_job_data_listing(
        self, account_id: str, job_id: str, config: RequestConfiguration | None = None
    ) -> list[dict[str, Any]]:
        """Files contained in the data extract produced by a job."""
        jid = parse_guid(job_id, "job_id")
        return await self._api.get(f"{self._account(account_id)}/jobs/{jid}/data-listing", config)

    def iter_jobs(
        self,
        account_id: str,
        config: RequestConfiguration | None = None,
        *,
        limit: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        return self._api.walk(
            f"{self._account(account_id)}/jobs", limit=limit, config=config, cancel=cancel
        )


class DataManager(_Manager):
    """Data extract files."""

    async def get_job_data_file(
        self, account_id: str, job_id: str, name: str, config: RequestConfiguration | None = None
    ) -> dict[str, Any]:
        """Signed download URL for one extract file (schema, CSV data or metadata).

        Returns:
            {"name": ..., "signedUrl": ...}
        """
        jid = parse_guid(job_id, "job_id")
        if not name:
            raise ValueError("name required")
        return await self._api.get(f"{self._account(account_id)}/jobs/{jid}/data/{name}", config)
