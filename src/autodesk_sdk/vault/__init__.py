from .client import VaultClient
from .managers import InformationalManager, JobsManager, SearchManager

__all__ = ["VaultClient", "InformationalManager", "JobsManager", "SearchManager"]
