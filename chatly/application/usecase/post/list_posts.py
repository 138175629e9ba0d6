"""List posts use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from chatly.application.usecase.base import BaseUseCase, ResponseModel
from chatly.domain.model.post import Post
from chatly.domain.service import CommentService, PostService


class PostItem(ResponseModel):
    """Post in responses."""

    id: str
    title: str
    content: str
    author_name: str
    author_id: str
    created_at: datetime | None
    upvotes_count: int
    comments_count: int

    @classmethod
    def from_post(cls, post: Post) -> "PostItem":
        """Build a response item from a Post."""
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            author_name=post.author_name,
            author_id=post.author_id,
            created_at=post.created_at,
            upvotes_count=post.upvotes_count,
            comments_count=post.comments_count,
        )


class ListPostsRequest(BaseModel):
    """List posts request."""

    limit: int = Field(default=20, ge=1)
    cursor: str | None = None


class ListPostsResponse(ResponseModel):
    """List posts response."""

    results: list[PostItem]
    next_cursor: str | None
    has_more: bool


class ListPostsUseCase(BaseUseCase):
    """Use case for listing posts newest first with cursor pagination."""

    def __init__(
        self, post_service: PostService, comment_service: CommentService
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Comment counts are probed one post at a time to stay under the
        store's rate limit.

        Args:
            request: List posts request

        Returns:
            Page of posts with comment counts

        Raises:
            OperationFailedError: If the post query fails
        """
        with logfire.span("list_posts.execute", limit=request.limit):
            page = await self.post_service.list_posts(
                limit=request.limit, cursor=request.cursor
            )

            items = []
            for post in page.posts:
                comments_count = await self.comment_service.count_comments(post.id)
                items.append(
                    PostItem.from_post(
                        post.model_copy(update={"comments_count": comments_count})
                    )
                )

            return ListPostsResponse(
                results=items,
                next_cursor=page.next_cursor,
                has_more=page.has_more,
            )
