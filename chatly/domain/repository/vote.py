"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from chatly.domain.model.vote import Vote
from chatly.domain.value import PostId, UserId, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Votes are soft-deleted: ``archive`` hides a record from every query
    without removing it.
    """

    @abstractmethod
    async def find_active(self, post_id: PostId, user_id: UserId) -> Optional[Vote]:
        """Find the user's active vote on a post.

        Existence probe: at most one record is requested.

        Args:
            post_id: The post ID
            user_id: The voter's user ID

        Returns:
            The active vote if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, post_id: PostId, user_id: UserId) -> Vote:
        """Create an active vote.

        No uniqueness check is made here.

        Args:
            post_id: The post ID
            user_id: The voter's user ID

        Returns:
            The created vote
        """
        pass

    @abstractmethod
    async def archive(self, vote_id: VoteId) -> None:
        """Archive a vote. Archiving an archived vote is a no-op.

        Args:
            vote_id: The vote ID
        """
        pass

    @abstractmethod
    async def count_active_by_post(self, post_id: PostId) -> int:
        """Count all active votes on a post.

        Args:
            post_id: The post ID

        Returns:
            Number of active votes
        """
        pass
