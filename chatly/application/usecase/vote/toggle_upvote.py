"""Toggle upvote use case."""

from pydantic import BaseModel

from chatly.application.usecase.base import BaseUseCase, ResponseModel
from chatly.domain.service import VoteService
from chatly.domain.value import VerifiedIdentity


class ToggleUpvoteRequest(BaseModel):
    """Toggle upvote request."""

    post_id: str | None
    identity: VerifiedIdentity | None = None  # None when verification failed


class ToggleUpvoteResponse(ResponseModel):
    """Toggle upvote response."""

    upvoted: bool
    upvotes_count: int


class ToggleUpvoteUseCase(BaseUseCase):
    """Use case for toggling the caller's upvote on a post."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize toggle upvote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: ToggleUpvoteRequest) -> ToggleUpvoteResponse:
        """Execute toggle upvote flow.

        Args:
            request: Toggle upvote request

        Returns:
            New upvote state and the post's upvote counter

        Raises:
            ValidationError: If post_id is missing
            AuthorizationError: If the caller is not signed in
            OperationFailedError: If the store fails
        """
        result = await self.vote_service.toggle_upvote(
            request.post_id, request.identity
        )
        return ToggleUpvoteResponse(
            upvoted=result.upvoted, upvotes_count=result.upvotes_count
        )
