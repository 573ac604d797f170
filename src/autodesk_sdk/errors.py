"""Exception types raised by the SDK.

Transport failures are not wrapped: any ``httpx.HTTPError`` (timeouts,
connection errors, ``HTTPStatusError`` from a non-success status) reaches
the caller unchanged. ``TransportError`` names that family for callers who
want a single ``except`` clause.
"""

from __future__ import annotations

import httpx

TransportError = httpx.HTTPError


class SDKError(Exception):
    """Base class for errors raised by the SDK itself."""


class EmptyResponseError(SDKError):
    """Raised when an endpoint returned no page at all."""

    def __init__(self, message: str | None = None, offset: int | None = None):
        super().__init__(message or "No results found.")
        self.offset = offset


class AuthenticationError(SDKError):
    """Raised when no access token can be produced."""
