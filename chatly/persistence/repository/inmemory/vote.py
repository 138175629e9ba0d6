"""In-memory vote repository for testing."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from chatly.domain.model.vote import Vote
from chatly.domain.repository.vote import VoteRepository
from chatly.domain.value import PostId, UserId, VoteId, VoteState


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Archived votes are kept, as in the real store, but never matched.
    """

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_active(self, post_id: PostId, user_id: UserId) -> Optional[Vote]:
        """Find the user's active vote on a post."""
        for vote in self._votes:
            if vote.is_active and vote.post_id == post_id and vote.user_id == user_id:
                return vote
        return None

    async def create(self, post_id: PostId, user_id: UserId) -> Vote:
        """Create an active vote."""
        vote = Vote(
            id=VoteId(str(uuid4())),
            post_id=post_id,
            user_id=user_id,
            state=VoteState.ACTIVE,
            created_at=datetime.now(timezone.utc),
        )
        self._votes.append(vote)
        return vote

    async def archive(self, vote_id: VoteId) -> None:
        """Archive a vote."""
        self._votes = [
            v.model_copy(update={"state": VoteState.ARCHIVED}) if v.id == vote_id else v
            for v in self._votes
        ]

    async def count_active_by_post(self, post_id: PostId) -> int:
        """Count active votes on a post."""
        return sum(1 for v in self._votes if v.is_active and v.post_id == post_id)

    async def find_all(self) -> list[Vote]:
        """All vote records, archived included (test inspection)."""
        return list(self._votes)
