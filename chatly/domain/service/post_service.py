"""Post domain service."""

import logfire

from chatly.domain.error import ValidationError
from chatly.domain.model.post import Post, PostPage
from chatly.domain.repository import PostRepository
from chatly.domain.value import Author, PostId

from .base import Service, store_operation

MAX_PAGE_SIZE = 100


def apply_delta(current: int, delta: int) -> int:
    """Apply a delta to a counter, never going below zero."""
    return max(0, current + delta)


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def list_posts(self, limit: int = 20, cursor: str | None = None) -> PostPage:
        """List posts, newest first.

        Args:
            limit: Requested page size (capped at 100)
            cursor: Cursor from a previous page

        Returns:
            Page of posts (comment counts not filled in)

        Raises:
            OperationFailedError: If the store query fails
        """
        page_size = max(1, min(limit, MAX_PAGE_SIZE))
        with logfire.span("post_service.list_posts", limit=page_size, cursor=cursor):
            with store_operation("fetch posts"):
                page = await self.post_repository.find_page(limit=page_size, cursor=cursor)
            logfire.info("Posts listed", count=len(page.posts), has_more=page.has_more)
            return page

    async def create_post(self, title: str, content: str, author: Author) -> Post:
        """Create a post.

        Args:
            title: Post title
            content: Post body
            author: Resolved author

        Returns:
            Created post

        Raises:
            ValidationError: If title or content is blank
            OperationFailedError: If the store write fails
        """
        title = (title or "").strip()
        content = (content or "").strip()
        if not title or not content:
            raise ValidationError("Missing title or content")

        with logfire.span(
            "post_service.create_post", title=title, author_id=author.id
        ):
            with store_operation("create post"):
                post = await self.post_repository.create(title, content, author)
            logfire.info("Post created", post_id=post.id, author_id=author.id)
            return post

    async def get_upvotes_count(self, post_id: PostId) -> int:
        """Read a post's upvote counter.

        Args:
            post_id: Post ID

        Returns:
            Current counter value
        """
        with logfire.span("post_service.get_upvotes_count", post_id=post_id):
            return await self.post_repository.get_upvotes_count(post_id)

    async def adjust_upvotes_count(self, post_id: PostId, delta: int) -> int:
        """Apply a delta to a post's upvote counter.

        Non-atomic read-modify-write: two concurrent adjustments can read the
        same value, and one of them is then lost. The store offers no atomic
        increment, so this is accepted for low-traffic boards.

        Args:
            post_id: Post ID
            delta: +1 or -1

        Returns:
            The value written
        """
        with logfire.span(
            "post_service.adjust_upvotes_count", post_id=post_id, delta=delta
        ):
            current = await self.post_repository.get_upvotes_count(post_id)
            updated = apply_delta(current, delta)
            await self.post_repository.set_upvotes_count(post_id, updated)
            logfire.info(
                "Upvotes count adjusted",
                post_id=post_id,
                previous=current,
                updated=updated,
            )
            return updated

    async def set_upvotes_count(self, post_id: PostId, count: int) -> None:
        """Overwrite a post's upvote counter.

        Args:
            post_id: Post ID
            count: New value (clamped at zero)
        """
        with logfire.span("post_service.set_upvotes_count", post_id=post_id):
            await self.post_repository.set_upvotes_count(post_id, max(0, count))
