"""ACC Account Admin managers - projects and project users."""

from __future__ import annotations

import asyncio
from typing import Any, AsyncIterator, TYPE_CHECKING

from ..ids import normalize_account_id, parse_guid
from ..transport import RequestConfiguration

if TYPE_CHECKING:
    from ..base import BaseAPIClient

ADMIN_PATH = "/construction/admin/v1"


class ProjectsManager:
    """Projects of an ACC account.

    Usage:
        async with AccountAdminClient(get_token) as admin:
            config = RequestConfiguration(filters={"status": "active"}, sort="name")
            async for project in admin.projects.iter_projects(hub_id, config):
                print(project["name"])
    """

    def __init__(self, api: "BaseAPIClient"):
        self._api = api

    @staticmethod
    def _projects(account_id: str) -> str:
        return f"{ADMIN_PATH}/accounts/{normalize_account_id(account_id)}/projects"

    async def list_projects(
        self, account_id: str, config: RequestConfiguration | None = None
    ) -> dict[str, Any]:
        return await self._api.get(self._projects(account_id), config)

    async def get_project(
        self, project_id: str, config: RequestConfiguration | None = None
    ) -> dict[str, Any]:
        pid = parse_guid(project_id, "project_id")
        return await self._api.get(f"{ADMIN_PATH}/projects/{pid}", config)

    def iter_projects(
        self,
        account_id: str,
        config: RequestConfiguration | None = None,
        *,
        limit: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        return self._api.walk(self._projects(account_id), limit=limit, config=config, cancel=cancel)


class ProjectUsersManager:
    """Members of an ACC project."""

    def __init__(self, api: "BaseAPIClient"):
        self._api = api

    @staticmethod
    def _users(project_id: str) -> str:
        return f"{ADMIN_PATH}/projects/{parse_guid(project_id, 'project_id')}/users"

    async def list_project_users(
        self, project_id: str, config: RequestConfiguration | None = None
    ) -> dict[str, Any]:
        return await self._api.get(self._users(project_id), config)

    async def get_project_user(
        self, project_id: str, user_id: str, config: RequestConfiguration | None = None
    ) -> dict[str, Any]:
        if not user_id:
            raise ValueError("user_id required")
        return await self._api.get(f"{self._users(project_id)}/{user_id}", config)

    def iter_project_users(
        self,
        project_id: str,
        config: RequestConfiguration | None = None,
        *,
        limit: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        return self._api.walk(self._users(project_id), limit=limit, config=config, cancel=cancel)
