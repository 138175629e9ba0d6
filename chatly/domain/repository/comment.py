"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from chatly.domain.model.comment import Comment
from chatly.domain.value import Author, CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId, limit: int = 100) -> list[Comment]:
        """Find comments on a post, oldest first.

        Args:
            post_id: The post ID
            limit: Maximum number of comments to return

        Returns:
            List of comments in creation order
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId, limit: int = 1) -> int:
        """Count comments on a post, looking at no more than ``limit`` of them.

        The store has no count primitive, so this is a bounded probe.

        Args:
            post_id: The post ID
            limit: Upper bound on the comments examined

        Returns:
            Number of comments found, at most ``limit``
        """
        pass

    @abstractmethod
    async def create(
        self,
        post_id: PostId,
        content: str,
        author: Author,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post.

        Args:
            post_id: The post ID
            content: Comment body
            author: Resolved author
            parent_id: Parent comment for replies

        Returns:
            The created comment
        """
        pass
