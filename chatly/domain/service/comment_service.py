"""Comment domain service."""

import logfire

from chatly.adapter.error import AdapterError
from chatly.domain.error import ValidationError
from chatly.domain.model.comment import Comment
from chatly.domain.repository import CommentRepository
from chatly.domain.value import Author, CommentId, PostId

from .base import Service, store_operation

MAX_COMMENTS = 100


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        post_id: PostId,
        content: str,
        author: Author,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            content: Comment text
            author: Resolved author
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is blank or parent comment invalid
            OperationFailedError: If the store fails
        """
        content = (content or "").strip()
        if not content:
            raise ValidationError("Missing content")

        with logfire.span(
            "comment_service.create_comment",
            post_id=post_id,
            author_id=author.id,
            parent_id=parent_id,
        ):
            with store_operation("create comment", post_id=post_id):
                if parent_id:
                    parent = await self.comment_repository.find_by_id(parent_id)
                    if not parent:
                        logfire.warn(
                            "Parent comment not found",
                            parent_id=parent_id,
                            post_id=post_id,
                        )
                        raise ValidationError("Parent comment not found")
                    if parent.post_id != post_id:
                        logfire.warn(
                            "Parent comment does not belong to post",
                            parent_id=parent_id,
                            parent_post_id=parent.post_id,
                            target_post_id=post_id,
                        )
                        raise ValidationError(
                            "Parent comment does not belong to this post"
                        )

                comment = await self.comment_repository.create(
                    post_id=post_id,
                    content=content,
                    author=author,
                    parent_id=parent_id,
                )

            logfire.info(
                "Comment created",
                comment_id=comment.id,
                post_id=post_id,
                author_id=author.id,
            )
            return comment

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get comments on a post in creation order (up to 100).

        Args:
            post_id: Post ID

        Returns:
            List of comments, oldest first

        Raises:
            OperationFailedError: If the store query fails
        """
        with logfire.span("comment_service.get_comments_for_post", post_id=post_id):
            with store_operation("fetch comments", post_id=post_id):
                comments = await self.comment_repository.find_by_post(
                    post_id, limit=MAX_COMMENTS
                )
            logfire.info("Comments fetched", post_id=post_id, count=len(comments))
            return comments

    async def count_comments(self, post_id: PostId) -> int:
        """Approximate comment count shown in post listings.

        Only probes for a single comment, so the result is 0 or 1. A failed
        probe counts as 0 rather than failing the whole listing.

        Args:
            post_id: Post ID

        Returns:
            0 or 1
        """
        try:
            return await self.comment_repository.count_by_post(post_id, limit=1)
        except AdapterError as e:
            logfire.warn("Comment count probe failed", post_id=post_id, error=str(e))
            return 0
