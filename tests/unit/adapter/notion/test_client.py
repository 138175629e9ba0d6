"""Unit tests for the Notion API client."""

import json

import httpx
import pytest

from chatly.adapter.notion.client import NotionAPIError, NotionClient


def make_client(handler) -> NotionClient:
    return NotionClient(
        api_key="secret_test",
        base_url="https://notion.test/v1",
        notion_version="2022-06-28",
        transport=httpx.MockTransport(handler),
    )


class TestRequests:
    """Tests for request construction."""

    @pytest.mark.asyncio
    async def test_sends_auth_and_version_headers(self):
        """Every request carries the integration key and API version."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"id": "page-1"})

        client = make_client(handler)
        await client.retrieve_page("page-1")
        await client.aclose()

        request = seen[0]
        assert request.method == "GET"
        assert request.url == "https://notion.test/v1/pages/page-1"
        assert request.headers["Authorization"] == "Bearer secret_test"
        assert request.headers["Notion-Version"] == "2022-06-28"

    @pytest.mark.asyncio
    async def test_query_database_body(self):
        """Only the given query options are sent."""
        bodies: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/v1/databases/db-1/query"
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={"results": [], "has_more": False})

        client = make_client(handler)
        await client.query_database("db-1", page_size=5)
        await client.query_database(
            "db-1",
            filter={"property": "Post", "relation": {"contains": "p"}},
            sorts=[{"timestamp": "created_time", "direction": "ascending"}],
            start_cursor="cursor-2",
        )
        await client.aclose()

        assert bodies[0] == {"page_size": 5}
        assert bodies[1]["start_cursor"] == "cursor-2"
        assert bodies[1]["filter"]["property"] == "Post"
        assert "page_size" not in bodies[1]

    @pytest.mark.asyncio
    async def test_create_and_archive_page(self):
        """Pages are created under a database and archived with a PATCH."""
        requests: list[tuple[str, str, dict]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(
                (request.method, request.url.path, json.loads(request.content))
            )
            return httpx.Response(200, json={"id": "page-9"})

        client = make_client(handler)
        await client.create_page("db-1", {"Title": {"title": []}})
        await client.archive_page("page-9")
        await client.aclose()

        assert requests[0] == (
            "POST",
            "/v1/pages",
            {"parent": {"database_id": "db-1"}, "properties": {"Title": {"title": []}}},
        )
        assert requests[1] == ("PATCH", "/v1/pages/page-9", {"archived": True})


class TestErrors:
    """Tests for error mapping."""

    @pytest.mark.asyncio
    async def test_error_response_carries_status_and_code(self):
        """Non-2xx responses raise NotionAPIError with status and code."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                404,
                json={
                    "object": "error",
                    "status": 404,
                    "code": "object_not_found",
                    "message": "Could not find page",
                },
            )

        client = make_client(handler)
        with pytest.raises(NotionAPIError) as exc_info:
            await client.retrieve_page("missing")
        await client.aclose()

        assert exc_info.value.status == 404
        assert exc_info.value.code == "object_not_found"
        assert "Could not find page" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_non_json_error_body(self):
        """Gateway errors without JSON still map to a status."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="<html>Bad Gateway</html>")

        client = make_client(handler)
        with pytest.raises(NotionAPIError) as exc_info:
            await client.retrieve_page("page-1")
        await client.aclose()

        assert exc_info.value.status == 502
        assert exc_info.value.code is None

    @pytest.mark.asyncio
    async def test_non_json_success_body(self):
        """A 2xx response that is not JSON is still a NotionAPIError."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>maintenance</html>")

        client = make_client(handler)
        with pytest.raises(NotionAPIError) as exc_info:
            await client.retrieve_page("page-1")
        await client.aclose()

        assert exc_info.value.status == 200
        assert exc_info.value.code is None

    @pytest.mark.asyncio
    async def test_transport_failure_has_no_status(self):
        """Connection failures raise NotionAPIError without a status."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)
        with pytest.raises(NotionAPIError) as exc_info:
            await client.retrieve_page("page-1")
        await client.aclose()

        assert exc_info.value.status is None
