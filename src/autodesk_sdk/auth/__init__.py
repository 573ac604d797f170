"""Authentication for Autodesk API clients.

Usage:
    from autodesk_sdk.auth import TokenAuthAdapter, env_token

    auth = TokenAuthAdapter(env_token())
"""

from .provider import AccessTokenProvider, TokenAuthAdapter
from .sources import NoTokenError, env_token, static_token

__all__ = [
    "AccessTokenProvider",
    "TokenAuthAdapter",
    "NoTokenError",
    "env_token",
    "static_token",
]
