"""Notion infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire

from chatly.adapter.notion import NotionClient
from chatly.config import NotionSettings
from chatly.domain.repository import (
    CommentRepository,
    PostRepository,
    VoteRepository,
)
from chatly.persistence.repository import (
    NotionCommentRepository,
    NotionPostRepository,
    NotionVoteRepository,
)
from chatly.util.di.base import ProviderBase
from chatly.util.error import ConfigurationError
from chatly.util.retry import RetryPolicy


class NotionProvider(ProviderBase):
    """Notion component base."""

    __mock_component__ = "notion"


class ProdNotionProvider(NotionProvider):
    """Production Notion provider."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_notion_client(
        self, notion_settings: NotionSettings
    ) -> AsyncIterator[NotionClient]:
        """Provide Notion client shared by all requests.

        The connection pool is closed when the container shuts down.

        Raises:
            ConfigurationError: If the API key or a database id is not set
        """
        if not notion_settings.is_configured:
            raise ConfigurationError(
                "Notion is not configured; set NOTION__API_KEY and the "
                "NOTION__*_DB_ID variables"
            )

        client = NotionClient(
            api_key=notion_settings.api_key,
            base_url=notion_settings.base_url,
            notion_version=notion_settings.version,
            timeout=notion_settings.timeout_seconds,
        )
        logfire.info("Notion client created", base_url=notion_settings.base_url)
        yield client
        await client.aclose()

    @provide(scope=Scope.REQUEST)
    def get_post_repository(
        self,
        client: NotionClient,
        notion_settings: NotionSettings,
        retry_policy: RetryPolicy,
    ) -> PostRepository:
        """Provide Post repository."""
        return NotionPostRepository(client, notion_settings.posts_db_id, retry_policy)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(
        self,
        client: NotionClient,
        notion_settings: NotionSettings,
        retry_policy: RetryPolicy,
    ) -> CommentRepository:
        """Provide Comment repository."""
        return NotionCommentRepository(
            client, notion_settings.comments_db_id, retry_policy
        )

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(
        self,
        client: NotionClient,
        notion_settings: NotionSettings,
        retry_policy: RetryPolicy,
    ) -> VoteRepository:
        """Provide Vote repository."""
        return NotionVoteRepository(client, notion_settings.upvotes_db_id, retry_policy)
