"""Vote entity.

A vote records that a user upvoted a post. At most one active vote should
exist per (post, user); this is upheld by the vote service's
check-then-act sequence, not by the store, so it is best-effort under
concurrent requests.
"""

from datetime import datetime

from chatly.domain.model.common import DomainModel
from chatly.domain.value import PostId, UserId, VoteId, VoteState


class Vote(DomainModel):
    """Upvote record."""

    id: VoteId
    post_id: PostId
    user_id: UserId
    state: VoteState = VoteState.ACTIVE
    created_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        """Whether the vote still counts towards the post's upvotes."""
        return self.state == VoteState.ACTIVE


class UpvoteToggle(DomainModel):
    """Outcome of toggling a user's upvote on a post."""

    upvoted: bool
    upvotes_count: int
