"""Get comments use case."""

from datetime import datetime

from pydantic import BaseModel

from chatly.application.usecase.base import BaseUseCase, ResponseModel
from chatly.domain.error import ValidationError
from chatly.domain.model.comment import Comment
from chatly.domain.service import CommentService
from chatly.domain.value import PostId


class CommentItem(ResponseModel):
    """Comment in responses."""

    id: str
    content: str
    author_name: str
    author_id: str
    parent_id: str | None
    created_at: datetime | None

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        """Build a response item from a Comment."""
        return cls(
            id=comment.id,
            content=comment.content,
            author_name=comment.author_name,
            author_id=comment.author_id,
            parent_id=comment.parent_id,
            created_at=comment.created_at,
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str


class GetCommentsResponse(ResponseModel):
    """Get comments response."""

    results: list[CommentItem]


class GetCommentsUseCase(BaseUseCase):
    """Use case for listing a post's comments in creation order."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            ValidationError: If post_id is blank
            OperationFailedError: If the store query fails
        """
        if not request.post_id.strip():
            raise ValidationError("Missing postId")

        comments = await self.comment_service.get_comments_for_post(
            PostId(request.post_id.strip())
        )
        return GetCommentsResponse(
            results=[CommentItem.from_comment(c) for c in comments]
        )
