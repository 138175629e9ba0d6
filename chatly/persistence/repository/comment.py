"""Notion implementation of Comment repository."""

from typing import Any, Optional

from chatly.adapter.notion.client import NotionAPIError
from chatly.domain.model import Comment
from chatly.domain.repository import CommentRepository
from chatly.domain.value import Author, CommentId, PostId
from chatly.persistence import schema
from chatly.persistence.mappers import page_to_comment, relation, rich_text
from chatly.persistence.repository.base import NotionRepository

INVALID_ID = "validation_error"


def _post_filter(post_id: PostId) -> dict[str, Any]:
    return {"property": schema.POST, "relation": {"contains": post_id}}


class NotionCommentRepository(NotionRepository, CommentRepository):
    """Comments stored as pages of the Notion Comments database."""

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Notion answers 404 for an unknown id and 400 ``validation_error``
        for one that is not a page id at all; both mean no such comment.
        """
        try:
            page = await self._call(lambda: self.client.retrieve_page(comment_id))
        except NotionAPIError as e:
            if e.status == 404 or e.code == INVALID_ID:
                return None
            raise
        if page.get("archived"):
            return None
        return page_to_comment(page)

    async def find_by_post(self, post_id: PostId, limit: int = 100) -> list[Comment]:
        """Find comments on a post, oldest first (single page)."""
        response = await self._call(
            lambda: self.client.query_database(
                self.database_id,
                filter=_post_filter(post_id),
                sorts=schema.CREATED_TIME_ASC,
                page_size=min(limit, 100),
            )
        )
        return [page_to_comment(page) for page in response.get("results", [])]

    async def count_by_post(self, post_id: PostId, limit: int = 1) -> int:
        """Count comments on a post within one page of ``limit`` results."""
        response = await self._call(
            lambda: self.client.query_database(
                self.database_id,
                filter=_post_filter(post_id),
                page_size=min(limit, 100),
            )
        )
        return len(response.get("results", []))

    async def create(
        self,
        post_id: PostId,
        content: str,
        author: Author,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment page linked to its post (and parent)."""
        properties = {
            schema.CONTENT: rich_text(content),
            schema.POST: relation(post_id),
            schema.AUTHOR_NAME: rich_text(author.name),
            schema.AUTHOR_ID: rich_text(author.id),
        }
        if parent_id:
            properties[schema.PARENT] = relation(parent_id)

        page = await self._call(
            lambda: self.client.create_page(self.database_id, properties)
        )
        return page_to_comment(page)
