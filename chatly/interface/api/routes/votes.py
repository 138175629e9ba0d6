"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from chatly.application.usecase.vote import (
    ToggleUpvoteRequest,
    ToggleUpvoteResponse,
    ToggleUpvoteUseCase,
)
from chatly.domain.error import DomainError
from chatly.domain.service import IdentityService
from chatly.interface.error import http_error

router = APIRouter(prefix="/api/posts", tags=["votes"], route_class=DishkaRoute)


@router.post("/{post_id}/upvote", response_model=ToggleUpvoteResponse)
async def toggle_upvote(
    post_id: str,
    toggle_upvote_use_case: FromDishka[ToggleUpvoteUseCase],
    identity_service: FromDishka[IdentityService],
    authorization: str | None = Header(default=None),
) -> ToggleUpvoteResponse:
    """Toggle the caller's upvote on a post.

    A first call upvotes, the next call removes the upvote.

    Args:
        post_id: Post ID
        toggle_upvote_use_case: Toggle upvote use case from DI
        identity_service: Identity service from DI
        authorization: ``Bearer <Firebase ID token>`` header

    Returns:
        Whether the post is now upvoted and its upvote count

    Raises:
        HTTPException: 401 if not signed in, 500 if the store fails
    """
    identity = await identity_service.identify(authorization)

    try:
        return await toggle_upvote_use_case.execute(
            ToggleUpvoteRequest(post_id=post_id, identity=identity)
        )
    except DomainError as e:
        raise http_error(e) from e
