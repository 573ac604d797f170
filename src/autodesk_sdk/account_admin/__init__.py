from .client import AccountAdminClient
from .managers import ProjectUsersManager, ProjectsManager

__all__ = ["AccountAdminClient", "ProjectUsersManager", "ProjectsManager"]
