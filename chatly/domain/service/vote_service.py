"""Vote domain service."""

from typing import Literal

import logfire

from chatly.domain.error import AuthorizationError, ValidationError
from chatly.domain.model.vote import UpvoteToggle
from chatly.domain.repository import VoteRepository
from chatly.domain.value import PostId, UserId, VerifiedIdentity

from .base import Service, store_operation
from .post_service import PostService

CounterMode = Literal["read_modify_write", "recount"]


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        counter_mode: CounterMode = "read_modify_write",
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
            counter_mode: How the post's upvote counter is maintained
        """
        self.vote_repository = vote_repository
        self.post_service = post_service
        self.counter_mode = counter_mode

    async def toggle_upvote(
        self, post_id: str | None, identity: VerifiedIdentity | None
    ) -> UpvoteToggle:
        """Toggle the caller's upvote on a post.

        Steps:
        1. Probe for the user's active vote on the post
        2. Archive it (un-upvote) or create one (upvote)
        3. Adjust the post's upvote counter by -1 or +1
        4. Re-read the counter and return it

        Each step is a separate store call with no lock or transaction around
        the sequence. Concurrent toggles on one post can interleave, so the
        counter may drift from the number of active votes, and the value
        returned may already include another request's write. If step 3
        fails after step 2 succeeded, the vote and the counter disagree; this
        is not repaired.

        Args:
            post_id: Post ID from the request path
            identity: Verified caller identity, None if verification failed

        Returns:
            Whether the post is now upvoted, and the post's counter

        Raises:
            ValidationError: If post_id is missing (no store calls made)
            AuthorizationError: If there is no verified identity (no store calls made)
            OperationFailedError: If any store call fails after retries
        """
        if not post_id or not post_id.strip():
            raise ValidationError("Missing postId")
        if identity is None:
            raise AuthorizationError("You must be signed in to upvote")

        post = PostId(post_id.strip())
        user_id = UserId(identity.uid)

        with logfire.span(
            "vote_service.toggle_upvote",
            post_id=post,
            user_id=user_id,
            counter_mode=self.counter_mode,
        ):
            with store_operation("toggle upvote", post_id=post, user_id=user_id):
                existing = await self.vote_repository.find_active(post, user_id)

                if existing:
                    await self.vote_repository.archive(existing.id)
                    upvoted = False
                    delta = -1
                else:
                    await self.vote_repository.create(post, user_id)
                    upvoted = True
                    delta = 1

                await self._update_counter(post, delta)

                upvotes_count = await self.post_service.get_upvotes_count(post)

            logfire.info(
                "Upvote toggled",
                post_id=post,
                user_id=user_id,
                upvoted=upvoted,
                upvotes_count=upvotes_count,
            )
            return UpvoteToggle(upvoted=upvoted, upvotes_count=upvotes_count)

    async def _update_counter(self, post_id: PostId, delta: int) -> None:
        """Bring the post's counter in line after a vote was created or archived."""
        if self.counter_mode == "recount":
            # Still a plain write: narrows the race window, does not close it
            active = await self.vote_repository.count_active_by_post(post_id)
            await self.post_service.set_upvotes_count(post_id, active)
        else:
            await self.post_service.adjust_upvotes_count(post_id, delta)
