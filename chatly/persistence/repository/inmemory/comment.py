"""In-memory comment repository for testing."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from chatly.domain.model.comment import Comment
from chatly.domain.repository.comment import CommentRepository
from chatly.domain.value import Author, CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: list[Comment] = []

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        for comment in self._comments:
            if comment.id == comment_id:
                return comment
        return None

    async def find_by_post(self, post_id: PostId, limit: int = 100) -> list[Comment]:
        """Find comments on a post, oldest first."""
        return [c for c in self._comments if c.post_id == post_id][:limit]

    async def count_by_post(self, post_id: PostId, limit: int = 1) -> int:
        """Count comments on a post, up to ``limit``."""
        return len(await self.find_by_post(post_id, limit=limit))

    async def create(
        self,
        post_id: PostId,
        content: str,
        author: Author,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment with a generated id."""
        comment = Comment(
            id=CommentId(str(uuid4())),
            post_id=post_id,
            content=content,
            author_name=author.name,
            author_id=author.id,
            parent_id=parent_id,
            created_at=datetime.now(timezone.utc),
        )
        self._comments.append(comment)
        return comment
