"""Tests for BaseAPIClient, ApiSection and the ACC/BIM 360 facades."""

import httpx
import pytest
from unittest.mock import AsyncMock

from autodesk_sdk import ACCClient, BIM360Client
from autodesk_sdk.auth import TokenAuthAdapter
from autodesk_sdk.base import ApiSection, BaseAPIClient
from autodesk_sdk.errors import EmptyResponseError
from autodesk_sdk.transport import RequestConfiguration

from tests.conftest import BASE_URL, SAMPLE_PROJECT_ID, SAMPLE_TOKEN, make_items, page_payload


def paged_handler(total: int):
    """MockTransport handler serving a collection of `total` items."""
    items = make_items(total)

    def _handle(request: httpx.Request) -> httpx.Response:
        offset = int(request.url.params.get("offset", 0))
        limit = int(request.url.params.get("limit", 20))
        return httpx.Response(
            200, json=page_payload(items[offset:offset + limit], offset, limit, total)
        )

    return _handle


class TestBaseAPIClient:
    """Tests for BaseAPIClient."""

    @pytest.mark.asyncio
    async def test_get_builds_url_and_params(self, token_getter, mock_http_client, mock_response):
        mock_http_client.request = AsyncMock(return_value=mock_response({"ok": True}))
        api = BaseAPIClient(token_getter, mock_http_client)

        result = await api.get("/construction/admin/v1/projects", limit=5, skipped=None)

        assert result == {"ok": True}
        args, kwargs = mock_http_client.request.call_args
        assert args == ("GET", f"{BASE_URL}/construction/admin/v1/projects")
        assert kwargs["params"] == {"limit": 5}
        assert isinstance(kwargs["auth"], TokenAuthAdapter)

    @pytest.mark.asyncio
    async def test_config_params_and_headers(self, token_getter, mock_http_client):
        api = BaseAPIClient(token_getter, mock_http_client)
        config = RequestConfiguration(filters={"status": "active"}, headers={"Region": "EMEA"})

        await api.get("/items", config)

        kwargs = mock_http_client.request.call_args.kwargs
        assert kwargs["params"] == {"filter[status]": "active"}
        assert kwargs["headers"] == {"Region": "EMEA"}

    @pytest.mark.asyncio
    async def test_post_sends_json(self, token_getter, mock_http_client):
        api = BaseAPIClient(token_getter, mock_http_client)

        await api.post("/items", {"name": "x"})

        args, kwargs = mock_http_client.request.call_args
        assert args[0] == "POST"
        assert kwargs["json"] == {"name": "x"}

    @pytest.mark.asyncio
    async def test_empty_body_decodes_to_none(self, token_getter, mock_http_client, mock_response):
        mock_http_client.request = AsyncMock(return_value=mock_response(None, status_code=204))
        api = BaseAPIClient(token_getter, mock_http_client)

        assert await api.delete("/items/1") is None

    @pytest.mark.asyncio
    async def test_status_error_propagates(self, token_getter, mock_http_client, mock_error_response):
        mock_http_client.request = AsyncMock(return_value=mock_error_response("forbidden"))
        api = BaseAPIClient(token_getter, mock_http_client)

        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await api.get("/items")

        assert exc_info.value.response.status_code == 403

    @pytest.mark.asyncio
    async def test_absolute_url_passthrough(self, token_getter, mock_http_client):
        api = BaseAPIClient(token_getter, mock_http_client)

        await api.get("https://other.example.com/next?offset=20")

        assert mock_http_client.request.call_args.args[1] == "https://other.example.com/next?offset=20"

    @pytest.mark.asyncio
    async def test_get_page_empty_body(self, token_getter, mock_http_client, mock_response):
        mock_http_client.request = AsyncMock(return_value=mock_response(None))
        api = BaseAPIClient(token_getter, mock_http_client)

        with pytest.raises(EmptyResponseError):
            await api.get_page("/items")

    @pytest.mark.asyncio
    async def test_walk_end_to_end(self, token_getter, recorded_transport):
        http, seen = recorded_transport(paged_handler(45))
        api = BaseAPIClient(token_getter, http)

        items = [item async for item in api.walk("/items", limit=20)]

        assert len(items) == 45
        assert [r.url.params["offset"] for r in seen] == ["0", "20", "40"]
        assert all(r.url.params["limit"] == "20" for r in seen)
        assert all(r.headers["Authorization"] == f"Bearer {SAMPLE_TOKEN}" for r in seen)
        assert token_getter.await_count == 3

    @pytest.mark.asyncio
    async def test_walk_uses_settings_page_size(self, token_getter, recorded_transport):
        from autodesk_sdk.config import SDKSettings

        http, seen = recorded_transport(paged_handler(12))
        api = BaseAPIClient(token_getter, http, settings=SDKSettings(_env_file=None, page_size=5))

        items = [item async for item in api.walk("/items")]

        assert len(items) == 12
        assert [r.url.params["offset"] for r in seen] == ["0", "5", "10"]

    @pytest.mark.asyncio
    async def test_shared_transport_keeps_credentials_apart(self, recorded_transport):
        http, seen = recorded_transport(lambda request: httpx.Response(200, json={}))
        first = BaseAPIClient(AsyncMock(return_value="token-a"), http)
        second = BaseAPIClient(AsyncMock(return_value="token-b"), http)

        await first.get("/a")
        await second.get("/b")

        assert [r.headers["Authorization"] for r in seen] == ["Bearer token-a", "Bearer token-b"]

    @pytest.mark.asyncio
    async def test_caller_owned_client_not_closed(self, token_getter, mock_http_client):
        async with BaseAPIClient(token_getter, mock_http_client):
            pass
        mock_http_client.aclose.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_owned_client_closed(self, token_getter):
        api = BaseAPIClient(token_getter)
        await api.aclose()
        assert api.http_client.is_closed


class TestApiSection:
    """Tests for ApiSection."""

    def test_path(self, token_getter, mock_http_client):
        section = ApiSection(BaseAPIClient(token_getter, mock_http_client), "construction/issues/v1/")

        assert section.prefix == "/construction/issues/v1"
        assert section.path() == "/construction/issues/v1"
        assert section.path("/projects/p1/issues") == "/construction/issues/v1/projects/p1/issues"

    @pytest.mark.asyncio
    async def test_verbs_delegate(self, token_getter, mock_http_client):
        section = ApiSection(BaseAPIClient(token_getter, mock_http_client), "/cost/v1")

        await section.patch("/containers/c1/budgets/b1", {"name": "Budget"})

        args, kwargs = mock_http_client.request.call_args
        assert args == ("PATCH", f"{BASE_URL}/cost/v1/containers/c1/budgets/b1")
        assert kwargs["json"] == {"name": "Budget"}


class TestProductFacades:
    """Tests for ACCClient and BIM360Client."""

    @pytest.mark.asyncio
    async def test_acc_issues_section(self, token_getter, mock_http_client):
        acc = ACCClient(token_getter, mock_http_client)

        await acc.issues.get(f"/projects/{SAMPLE_PROJECT_ID}/issues")

        assert mock_http_client.request.call_args.args[1] == (
            f"{BASE_URL}/construction/issues/v1/projects/{SAMPLE_PROJECT_ID}/issues"
        )

    def test_acc_sections(self, token_getter, mock_http_client):
        acc = ACCClient(token_getter, mock_http_client)

        assert acc.data_connector.prefix == "/data-connector/v1"
        assert acc.submittals.prefix == "/construction/submittals/v2"
        assert acc.projects.prefix == "/bim360/relationship/v2"
        assert all(isinstance(getattr(acc, name), ApiSection) for name in ACCClient.SECTIONS)

    def test_bim360_sections(self, token_getter, mock_http_client):
        bim = BIM360Client(token_getter, mock_http_client)

        assert bim.accounts_eu_v2.prefix == "/hq/v2/regions/eu/accounts"
        assert bim.issues.prefix == "/issues/v2"
        assert bim.rfis.prefix == "/bim360/rfis/v2"

    @pytest.mark.asyncio
    async def test_bim360_section_walk(self, token_getter, recorded_transport):
        http, seen = recorded_transport(paged_handler(3))
        bim = BIM360Client(token_getter, http)

        items = [item async for item in bim.checklists.walk("/containers/c1/instances", limit=2)]

        assert len(items) == 3
        assert seen[0].url.path == "/bim360/checklists/v1/containers/c1/instances"
