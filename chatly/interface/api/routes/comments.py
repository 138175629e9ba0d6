"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status

from chatly.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from chatly.domain.error import DomainError
from chatly.domain.service import IdentityService
from chatly.interface.api.schema import APIRequest
from chatly.interface.error import http_error

router = APIRouter(prefix="/api/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(APIRequest):
    """API request for creating a comment."""

    content: str = ""
    author_name: str | None = None
    author_id: str | None = None
    parent_id: str | None = None  # Parent comment ID for replies


@router.get("/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get comments for a post, oldest first.

    Args:
        post_id: Post ID
        get_comments_use_case: Get comments use case from DI

    Returns:
        Up to 100 comments; replies reference their parent by ``parentId``

    Raises:
        HTTPException: 500 if the store query fails
    """
    try:
        return await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))
    except DomainError as e:
        raise http_error(e) from e


@router.post(
    "/{post_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Create a comment on a post.

    Args:
        post_id: Post ID
        request: Comment data
        create_comment_use_case: Create comment use case from DI
        identity_service: Identity service from DI
        authorization: Optional ``Bearer <Firebase ID token>`` header

    Returns:
        Created comment

    Raises:
        HTTPException: 400 on missing content or a bad parent, 500 if the store write fails
    """
    identity = await identity_service.identify(authorization)

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=post_id,
                content=request.content,
                author_name=request.author_name,
                author_id=request.author_id,
                parent_id=request.parent_id,
                identity=identity,
            )
        )
    except DomainError as e:
        raise http_error(e) from e
