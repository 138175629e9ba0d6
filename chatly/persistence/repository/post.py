"""Notion implementation of Post repository."""

from chatly.domain.model import Post, PostPage
from chatly.domain.repository import PostRepository
from chatly.domain.value import Author, PostId
from chatly.persistence import mappers, schema
from chatly.persistence.mappers import number, page_to_post, read_number, rich_text
from chatly.persistence.repository.base import NotionRepository


class NotionPostRepository(NotionRepository, PostRepository):
    """Posts stored as pages of the Notion Posts database."""

    async def find_page(self, limit: int = 20, cursor: str | None = None) -> PostPage:
        """Find posts, newest first."""
        response = await self._call(
            lambda: self.client.query_database(
                self.database_id,
                sorts=schema.CREATED_TIME_DESC,
                page_size=min(limit, 100),
                start_cursor=cursor,
            )
        )
        has_more = bool(response.get("has_more"))
        return PostPage(
            posts=[page_to_post(page) for page in response.get("results", [])],
            next_cursor=response.get("next_cursor") if has_more else None,
            has_more=has_more,
        )

    async def create(self, title: str, content: str, author: Author) -> Post:
        """Create a post page with an upvote count of zero."""
        page = await self._call(
            lambda: self.client.create_page(
                self.database_id,
                {
                    schema.TITLE: mappers.title(title),
                    schema.CONTENT: rich_text(content),
                    schema.AUTHOR_NAME: rich_text(author.name),
                    schema.AUTHOR_ID: rich_text(author.id),
                    schema.UPVOTES_COUNT: number(0),
                },
            )
        )
        return page_to_post(page)

    async def get_upvotes_count(self, post_id: PostId) -> int:
        """Read the Upvotes Count property."""
        page = await self._call(lambda: self.client.retrieve_page(post_id))
        return read_number(page, schema.UPVOTES_COUNT)

    async def set_upvotes_count(self, post_id: PostId, count: int) -> None:
        """Overwrite the Upvotes Count property."""
        await self._call(
            lambda: self.client.update_page(
                post_id, {schema.UPVOTES_COUNT: number(count)}
            )
        )
