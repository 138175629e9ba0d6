"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status

from chatly.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostItem,
)
from chatly.domain.error import DomainError
from chatly.domain.service import IdentityService
from chatly.interface.api.schema import APIRequest
from chatly.interface.error import http_error

router = APIRouter(prefix="/api/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(APIRequest):
    """API request for creating a post."""

    title: str = ""
    content: str = ""
    author_name: str | None = None
    author_id: str | None = None


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    limit: int = Query(default=20, ge=1),
    cursor: str | None = Query(default=None),
) -> ListPostsResponse:
    """List posts, newest first.

    Args:
        list_posts_use_case: List posts use case from DI
        limit: Page size (capped at 100)
        cursor: ``nextCursor`` from the previous page

    Returns:
        Posts with upvote and comment counts, plus pagination state

    Raises:
        HTTPException: 500 if the store query fails
    """
    try:
        return await list_posts_use_case.execute(
            ListPostsRequest(limit=limit, cursor=cursor or None)
        )
    except DomainError as e:
        raise http_error(e) from e


@router.post("", response_model=PostItem, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
) -> PostItem:
    """Create a new post.

    Signed-in callers post under their verified identity; anyone else posts
    under ``authorName``/``authorId`` or as Anonymous.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI
        identity_service: Identity service from DI
        authorization: Optional ``Bearer <Firebase ID token>`` header

    Returns:
        Created post

    Raises:
        HTTPException: 400 on missing fields, 500 if the store write fails
    """
    identity = await identity_service.identify(authorization)

    try:
        post = await create_post_use_case.execute(
            CreatePostRequest(
                title=request.title,
                content=request.content,
                author_name=request.author_name,
                author_id=request.author_id,
                identity=identity,
            )
        )
    except DomainError as e:
        raise http_error(e) from e

    logfire.info("Post created via API", post_id=post.id, signed_in=identity is not None)
    return post
