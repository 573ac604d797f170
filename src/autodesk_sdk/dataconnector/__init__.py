from .client import DataConnectorClient
from .helper import DataConnectorClientHelper
from .managers import DataManager, JobsManager, RequestsManager

__all__ = [
    "DataConnectorClient",
    "DataConnectorClientHelper",
    "DataManager",
    "JobsManager",
    "RequestsManager",
]
