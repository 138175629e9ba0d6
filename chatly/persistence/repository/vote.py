"""Notion implementation of Vote repository."""

from typing import Any, Optional

from chatly.domain.model import Vote
from chatly.domain.repository import VoteRepository
from chatly.domain.value import PostId, UserId, VoteId
from chatly.persistence import schema
from chatly.persistence.mappers import page_to_vote, relation, rich_text
from chatly.persistence.repository.base import NotionRepository


def _post_filter(post_id: PostId) -> dict[str, Any]:
    return {"property": schema.POST, "relation": {"contains": post_id}}


class NotionVoteRepository(NotionRepository, VoteRepository):
    """Votes stored as pages of the Notion Upvotes database.

    Database queries never return archived pages, so every query here only
    sees active votes.
    """

    async def find_active(self, post_id: PostId, user_id: UserId) -> Optional[Vote]:
        """Probe for the user's active vote on a post (page_size=1)."""
        response = await self._call(
            lambda: self.client.query_database(
                self.database_id,
                filter={
                    "and": [
                        {"property": schema.USER_ID, "rich_text": {"equals": user_id}},
                        _post_filter(post_id),
                    ]
                },
                page_size=1,
            )
        )
        results = response.get("results", [])
        return page_to_vote(results[0]) if results else None

    async def create(self, post_id: PostId, user_id: UserId) -> Vote:
        """Create an upvote page."""
        page = await self._call(
            lambda: self.client.create_page(
                self.database_id,
                {
                    schema.USER_ID: rich_text(user_id),
                    schema.POST: relation(post_id),
                },
            )
        )
        return page_to_vote(page)

    async def archive(self, vote_id: VoteId) -> None:
        """Archive the upvote page."""
        await self._call(lambda: self.client.archive_page(vote_id))

    async def count_active_by_post(self, post_id: PostId) -> int:
        """Count active votes on a post, following pagination to the end."""
        total = 0
        cursor: str | None = None
        while True:
            response = await self._call(
                lambda: self.client.query_database(
                    self.database_id,
                    filter=_post_filter(post_id),
                    page_size=100,
                    start_cursor=cursor,
                )
            )
            total += len(response.get("results", []))
            if not response.get("has_more"):
                return total
            cursor = response.get("next_cursor")
