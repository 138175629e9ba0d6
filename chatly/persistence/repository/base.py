"""Shared plumbing for Notion-backed repositories."""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from chatly.adapter.notion.client import NotionClient
from chatly.util.retry import RetryPolicy, with_retry

T = TypeVar("T")


class NotionRepository:
    """Base for repositories backed by one Notion database.

    Every API call goes through ``with_retry`` so 429 and 5xx responses are
    retried with backoff before an error reaches the domain layer.
    """

    def __init__(
        self,
        client: NotionClient,
        database_id: str,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        """Initialize repository.

        Args:
            client: Notion API client
            database_id: Database holding this repository's pages
            retry_policy: Retry budget for each API call
        """
        self.client = client
        self.database_id = database_id
        self.retry_policy = retry_policy or RetryPolicy()

    async def _call(self, operation: Callable[[], Awaitable[T]]) -> T:
        return await with_retry(operation, self.retry_policy)
