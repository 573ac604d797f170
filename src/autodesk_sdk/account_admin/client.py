"""Account Admin client - ACC projects and project membership."""

from __future__ import annotations

import httpx

from ..auth import AccessTokenProvider
from ..base import ProductClient
from ..config import SDKSettings
from .managers import ProjectUsersManager, ProjectsManager


class AccountAdminClient(ProductClient):
    """ACC Account Admin client."""

    def __init__(
        self,
        get_access_token: AccessTokenProvider,
        http_client: httpx.AsyncClient | None = None,
        *,
        settings: SDKSettings | None = None,
    ):
        super().__init__(get_access_token, http_client, settings=settings)
        self.projects = ProjectsManager(self.api)
        self.project_users = ProjectUsersManager(self.api)
