"""Ready-made token getters for TokenAuthAdapter."""

from __future__ import annotations

import os
from typing import Awaitable, Callable

from ..errors import AuthenticationError


class NoTokenError(AuthenticationError):
    """Raised when no access token is configured."""

    def __init__(self, message: str | None = None):
        default_msg = (
            "No access token available.\n\n"
            "Options:\n"
            "  1. Pass an async token getter to the client constructor (recommended)\n"
            "  2. Set APS_ACCESS_TOKEN in the environment or .env file"
        )
        super().__init__(message or default_msg)


def static_token(token: str) -> Callable[[], Awaitable[str]]:
    """Wrap a fixed token string (tests, short-lived scripts)."""
    if not token:
        raise NoTokenError("token must be a non-empty string")

    async def _get() -> str:
        return token

    return _get


def env_token(var: str = "APS_ACCESS_TOKEN") -> Callable[[], Awaitable[str]]:
    """Read the token from the environment on every call.

    Falls back to the `access_token` setting (which also reads `.env`).
    """

    async def _get() -> str:
        value = os.environ.get(var)
        if isinstance(value, str) and value.strip():
            return value.strip()

        from ..config import settings

        if settings.access_token and settings.access_token.strip():
            return settings.access_token.strip()
        raise NoTokenError()

    return _get
