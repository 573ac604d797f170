from .client import ACCClient

__all__ = ["ACCClient"]
