"""Notion REST API client.

Thin async wrapper over the endpoints Chatly uses:
- POST  /databases/{id}/query
- POST  /pages
- GET   /pages/{id}
- PATCH /pages/{id}

Retries are not handled here; callers wrap each call with
``chatly.util.retry.with_retry``, which reads ``NotionAPIError.status``.
"""

from typing import Any

import httpx
import logfire

from chatly.adapter.error import ProviderError


class NotionAPIError(ProviderError):
    """Notion API call failed.

    ``status`` is the HTTP status code, or None for transport failures
    (connection refused, timeout) which are not retried.
    """

    def __init__(
        self, message: str, status: int | None = None, code: str | None = None
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code


class NotionClient:
    """Async Notion API client."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.notion.com/v1",
        notion_version: str = "2022-06-28",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Notion client.

        Args:
            api_key: Integration secret (server-side only)
            base_url: API root
            notion_version: Value of the Notion-Version header
            timeout: Per-request timeout in seconds
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/") + "/",
            headers={
                "Authorization": f"Bearer {api_key}",
                "Notion-Version": notion_version,
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._http.aclose()

    async def query_database(
        self,
        database_id: str,
        filter: dict[str, Any] | None = None,
        sorts: list[dict[str, Any]] | None = None,
        page_size: int | None = None,
        start_cursor: str | None = None,
    ) -> dict[str, Any]:
        """Query a database.

        Args:
            database_id: Database to query
            filter: Notion filter object
            sorts: Notion sort objects
            page_size: Maximum results (Notion caps this at 100)
            start_cursor: Cursor from a previous response's ``next_cursor``

        Returns:
            Response with ``results``, ``has_more`` and ``next_cursor``
        """
        body: dict[str, Any] = {}
        if filter is not None:
            body["filter"] = filter
        if sorts is not None:
            body["sorts"] = sorts
        if page_size is not None:
            body["page_size"] = page_size
        if start_cursor:
            body["start_cursor"] = start_cursor
        return await self._request("POST", f"databases/{database_id}/query", body)

    async def create_page(
        self, database_id: str, properties: dict[str, Any]
    ) -> dict[str, Any]:
        """Create a page (row) in a database.

        Args:
            database_id: Parent database
            properties: Property values keyed by property name

        Returns:
            Created page object
        """
        return await self._request(
            "POST",
            "pages",
            {"parent": {"database_id": database_id}, "properties": properties},
        )

    async def retrieve_page(self, page_id: str) -> dict[str, Any]:
        """Retrieve a page.

        Args:
            page_id: Page ID

        Returns:
            Page object
        """
        return await self._request("GET", f"pages/{page_id}")

    async def update_page(
        self, page_id: str, properties: dict[str, Any]
    ) -> dict[str, Any]:
        """Update page properties.

        Args:
            page_id: Page ID
            properties: Property values to overwrite

        Returns:
            Updated page object
        """
        return await self._request("PATCH", f"pages/{page_id}", {"properties": properties})

    async def archive_page(self, page_id: str) -> dict[str, Any]:
        """Archive (soft delete) a page. Archiving twice is harmless.

        Args:
            page_id: Page ID

        Returns:
            Archived page object
        """
        return await self._request("PATCH", f"pages/{page_id}", {"archived": True})

    async def _request(
        self, method: str, path: str, body: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Send a request and decode the JSON response.

        Raises:
            NotionAPIError: On non-2xx responses or transport failures
        """
        try:
            response = await self._http.request(method, path, json=body)
        except httpx.HTTPError as e:
            logfire.error("Notion request failed", method=method, path=path, error=str(e))
            raise NotionAPIError(f"Notion request failed: {e}") from e

        if response.is_success:
            try:
                return response.json()
            except ValueError as e:
                logfire.error(
                    "Notion response is not JSON",
                    method=method,
                    path=path,
                    status_code=response.status_code,
                )
                raise NotionAPIError(
                    f"Notion returned a non-JSON body ({response.status_code})",
                    status=response.status_code,
                ) from e

        code = None
        message = response.text
        try:
            error_body = response.json()
            code = error_body.get("code")
            message = error_body.get("message", message)
        except ValueError:
            # Not JSON (e.g. gateway error page)
            pass

        logfire.warn(
            "Notion API error",
            method=method,
            path=path,
            status_code=response.status_code,
            code=code,
        )
        raise NotionAPIError(
            f"Notion API error {response.status_code}: {message}",
            status=response.status_code,
            code=code,
        )
