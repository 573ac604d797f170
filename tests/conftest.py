"""Shared test fixtures for the autodesk_sdk test suite."""

import json

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock
from typing import Any

# Sample IDs used across tests
SAMPLE_ACCOUNT_ID = "8f2c4d6e-1a3b-4c5d-9e7f-0a1b2c3d4e5f"
SAMPLE_HUB_ID = f"b.{SAMPLE_ACCOUNT_ID}"
SAMPLE_PROJECT_ID = "1d2e3f40-5a6b-4c7d-8e9f-a0b1c2d3e4f5"
SAMPLE_REQUEST_ID = "3a4b5c6d-7e8f-4a0b-9c1d-2e3f4a5b6c7d"
SAMPLE_JOB_ID = "5c6d7e8f-9a0b-4c1d-8e2f-3a4b5c6d7e8f"
SAMPLE_USER_ID = "PER8KQPK2JRT"
SAMPLE_VAULT_SERVER = "vault.example.com"
SAMPLE_VAULT_ID = "117"
SAMPLE_TOKEN = "test_token_abc123"

BASE_URL = "https://developer.api.autodesk.com"


# ============================================================================
# Mock Response Data
# ============================================================================

MOCK_DATA_REQUEST = {
    "id": SAMPLE_REQUEST_ID,
    "accountId": SAMPLE_ACCOUNT_ID,
    "description": "Weekly extract",
    "isActive": True,
    "scheduleInterval": "WEEK",
    "reoccuringInterval": 1,
    "serviceGroups": ["admin", "issues"],
    "createdAt": "2024-01-15T10:00:00Z",
}

MOCK_JOB = {
    "id": SAMPLE_JOB_ID,
    "requestId": SAMPLE_REQUEST_ID,
    "accountId": SAMPLE_ACCOUNT_ID,
    "status": "complete",
    "completionStatus": "success",
    "startedAt": "2024-01-15T10:05:00Z",
    "completedAt": "2024-01-15T10:20:00Z",
}

MOCK_PROJECT = {
    "id": SAMPLE_PROJECT_ID,
    "name": "Hospital Wing B",
    "status": "active",
    "accountId": SAMPLE_ACCOUNT_ID,
}


def make_items(count: int, start: int = 0) -> list[dict[str, Any]]:
    """Numbered result items."""
    return [{"id": f"item_{i}", "index": i} for i in range(start, start + count)]


def page_payload(
    results: list[Any], offset: int = 0, limit: int = 20, total: int | None = None
) -> dict[str, Any]:
    """Collection response body as returned by the Autodesk APIs."""
    pagination: dict[str, Any] = {"limit": limit, "offset": offset}
    if total is not None:
        pagination["totalResults"] = total
    return {"pagination": pagination, "results": results}


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def token_getter():
    """Async token getter returning SAMPLE_TOKEN."""
    return AsyncMock(return_value=SAMPLE_TOKEN)


@pytest.fixture
def mock_response():
    """Factory fixture to create mock HTTP responses."""
    def _create_response(data: Any, status_code: int = 200):
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = data
        response.content = b"" if data is None else json.dumps(data).encode()
        response.raise_for_status = MagicMock()
        if status_code >= 400:
            response.raise_for_status.side_effect = httpx.HTTPStatusError(
                f"HTTP {status_code}", request=MagicMock(), response=response
            )
        return response
    return _create_response


@pytest.fixture
def mock_http_client(mock_response):
    """Create a mock httpx.AsyncClient."""
    client = AsyncMock()
    client.request = AsyncMock(return_value=mock_response({}))
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def mock_error_response():
    """Factory fixture to create common error responses."""
    def _create_error(error_type: str):
        error_configs = {
            "not_found": {
                "status_code": 404,
                "data": {"code": "ERR_NOT_FOUND", "message": "Request not found"},
            },
            "unauthorized": {
                "status_code": 401,
                "data": {"code": "AUTH-001", "message": "The token is invalid"},
            },
            "forbidden": {
                "status_code": 403,
                "data": {"code": "ERR_ACCESS_DENIED", "message": "Insufficient permissions"},
            },
            "rate_limit": {
                "status_code": 429,
                "data": {"code": "ERR_TOO_MANY_REQUESTS", "message": "Too many requests"},
            },
            "server_error": {
                "status_code": 500,
                "data": {"code": "ERR_INTERNAL", "message": "An unexpected error occurred"},
            },
        }

        config = error_configs.get(error_type, error_configs["server_error"])
        response = MagicMock()
        response.status_code = config["status_code"]
        response.json.return_value = config["data"]
        response.text = str(config["data"])
        response.raise_for_status = MagicMock(
            side_effect=httpx.HTTPStatusError(
                f"HTTP {config['status_code']}",
                request=MagicMock(),
                response=response,
            )
        )
        return response
    return _create_error


@pytest.fixture
def recorded_transport():
    """httpx.AsyncClient over a MockTransport that records every request.

    Usage:
        client, seen = recorded_transport(lambda request: httpx.Response(200, json={}))
    """
    def _create(handler):
        seen: list[httpx.Request] = []

        def _handle(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(_handle))
        return client, seen

    return _create
