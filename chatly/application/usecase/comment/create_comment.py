"""Create comment use case."""

from pydantic import BaseModel

from chatly.application.usecase.base import BaseUseCase
from chatly.application.usecase.comment.get_comments import CommentItem
from chatly.domain.error import ValidationError
from chatly.domain.service import CommentService
from chatly.domain.value import Author, CommentId, PostId, VerifiedIdentity


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str
    content: str = ""
    author_name: str | None = None  # Used when not signed in
    author_id: str | None = None  # Used when not signed in
    parent_id: str | None = None  # Parent comment ID for replies
    identity: VerifiedIdentity | None = None


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post or replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Raises:
            ValidationError: If post_id or content is blank, or the parent is invalid
            OperationFailedError: If the store write fails
        """
        if not request.post_id.strip():
            raise ValidationError("Missing postId")

        author = Author.resolve(
            request.identity, request.author_name, request.author_id
        )
        parent_id = CommentId(request.parent_id) if request.parent_id else None
        comment = await self.comment_service.create_comment(
            post_id=PostId(request.post_id.strip()),
            content=request.content,
            author=author,
            parent_id=parent_id,
        )
        return CommentItem.from_comment(comment)
