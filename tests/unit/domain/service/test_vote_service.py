"""Unit tests for VoteService."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from chatly.domain.error import AuthorizationError, OperationFailedError, ValidationError
from chatly.domain.repository import PostRepository, VoteRepository
from chatly.domain.service import PostService, VoteService
from chatly.domain.value import PostId, UserId, VerifiedIdentity
from chatly.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryVoteRepository,
)
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

ALICE = VerifiedIdentity(uid="alice", email="alice@example.com", name="Alice")
BOB = VerifiedIdentity(uid="bob", email="bob@example.com", name="Bob")


class YieldingPostRepository(InMemoryPostRepository):
    """Post repository that yields to the event loop between read and return.

    Mimics the network round trip of a real store so concurrent toggles
    interleave.
    """

    async def get_upvotes_count(self, post_id: PostId) -> int:
        count = await super().get_upvotes_count(post_id)
        await asyncio.sleep(0)
        return count


def build_vote_service(
    post_repo: PostRepository | None = None,
    vote_repo: VoteRepository | None = None,
    counter_mode: str = "read_modify_write",
) -> VoteService:
    return VoteService(
        vote_repository=vote_repo or InMemoryVoteRepository(),
        post_service=PostService(post_repository=post_repo or InMemoryPostRepository()),
        counter_mode=counter_mode,
    )


class TestToggleUpvote:
    """Tests for toggle_upvote."""

    @pytest.mark.asyncio
    async def test_first_toggle_upvotes(self, unit_env):
        """Toggling with no active vote should create one and add 1."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        vote_repo = await unit_env.get(VoteRepository)
        post = await post_repo.save(make_post(upvotes_count=3))

        # Act
        result = await vote_service.toggle_upvote(post.id, ALICE)

        # Assert
        assert result.upvoted is True
        assert result.upvotes_count == 4
        vote = await vote_repo.find_active(post.id, UserId("alice"))
        assert vote is not None

    @pytest.mark.asyncio
    async def test_second_toggle_removes_upvote(self, unit_env):
        """Toggling again should archive the vote and subtract 1."""
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        vote_repo = await unit_env.get(VoteRepository)
        post = await post_repo.save(make_post(upvotes_count=3))

        await vote_service.toggle_upvote(post.id, ALICE)
        result = await vote_service.toggle_upvote(post.id, ALICE)

        assert result.upvoted is False
        assert result.upvotes_count == 3
        assert await vote_repo.find_active(post.id, UserId("alice")) is None

    @pytest.mark.asyncio
    async def test_archived_votes_are_kept(self):
        """Un-upvoting archives the record; re-upvoting creates a new one."""
        vote_repo = InMemoryVoteRepository()
        post_repo = InMemoryPostRepository()
        post = await post_repo.save(make_post())
        vote_service = build_vote_service(post_repo, vote_repo)

        await vote_service.toggle_upvote(post.id, ALICE)
        await vote_service.toggle_upvote(post.id, ALICE)
        result = await vote_service.toggle_upvote(post.id, ALICE)

        votes = await vote_repo.find_all()
        assert result.upvoted is True
        assert len(votes) == 2
        assert [v.is_active for v in votes] == [False, True]

    @pytest.mark.asyncio
    async def test_counter_never_goes_below_zero(self):
        """Removing an upvote from a zero counter should leave it at zero."""
        vote_repo = InMemoryVoteRepository()
        post_repo = InMemoryPostRepository()
        post = await post_repo.save(make_post(upvotes_count=0))
        # Active vote whose +1 never reached the counter
        await vote_repo.create(post.id, UserId("alice"))
        vote_service = build_vote_service(post_repo, vote_repo)

        result = await vote_service.toggle_upvote(post.id, ALICE)

        assert result.upvoted is False
        assert result.upvotes_count == 0

    @pytest.mark.asyncio
    async def test_users_vote_independently(self, unit_env):
        """Each user's toggle only affects their own vote."""
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        await vote_service.toggle_upvote(post.id, ALICE)
        result = await vote_service.toggle_upvote(post.id, BOB)

        assert result.upvoted is True
        assert result.upvotes_count == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("post_id", [None, "", "   "])
    async def test_missing_post_id_makes_no_store_calls(self, post_id):
        """A missing post id is rejected before touching the store."""
        vote_repo = AsyncMock(spec=VoteRepository)
        post_repo = AsyncMock(spec=PostRepository)
        vote_service = build_vote_service(post_repo, vote_repo)

        with pytest.raises(ValidationError, match="Missing postId"):
            await vote_service.toggle_upvote(post_id, ALICE)

        assert vote_repo.mock_calls == []
        assert post_repo.mock_calls == []

    @pytest.mark.asyncio
    async def test_missing_identity_makes_no_store_calls(self):
        """Anonymous callers are rejected before touching the store."""
        vote_repo = AsyncMock(spec=VoteRepository)
        post_repo = AsyncMock(spec=PostRepository)
        vote_service = build_vote_service(post_repo, vote_repo)

        with pytest.raises(AuthorizationError, match="signed in to upvote"):
            await vote_service.toggle_upvote("post-1", None)

        assert vote_repo.mock_calls == []
        assert post_repo.mock_calls == []

    @pytest.mark.asyncio
    async def test_missing_post_id_checked_before_identity(self):
        """With neither post id nor identity, the post id error wins."""
        vote_service = build_vote_service()

        with pytest.raises(ValidationError):
            await vote_service.toggle_upvote(None, None)

    @pytest.mark.asyncio
    async def test_store_failure_becomes_operation_failed(self):
        """A store error surfaces as a generic toggle failure.

        The vote created before the failing counter update is kept.
        """
        vote_repo = InMemoryVoteRepository()
        vote_service = build_vote_service(vote_repo=vote_repo)

        # Unknown post: the counter read answers 404
        with pytest.raises(OperationFailedError) as exc_info:
            await vote_service.toggle_upvote("missing-post", ALICE)

        assert str(exc_info.value) == "Failed to toggle upvote"
        votes = await vote_repo.find_all()
        assert [(v.post_id, v.user_id, v.is_active) for v in votes] == [
            ("missing-post", "alice", True)
        ]

    @pytest.mark.asyncio
    async def test_concurrent_toggles_can_lose_an_increment(self):
        """Two users upvoting at once may both read the same counter.

        The counter update is a plain read-then-write, so one increment is
        lost: both votes exist but the counter only moves by one.
        """
        post_repo = YieldingPostRepository()
        vote_repo = InMemoryVoteRepository()
        post = await post_repo.save(make_post(upvotes_count=5))
        vote_service = build_vote_service(post_repo, vote_repo)

        results = await asyncio.gather(
            vote_service.toggle_upvote(post.id, ALICE),
            vote_service.toggle_upvote(post.id, BOB),
        )

        assert all(r.upvoted for r in results)
        assert await vote_repo.count_active_by_post(post.id) == 2
        assert await post_repo.get_upvotes_count(post.id) == 6


class TestRecountMode:
    """Tests for the recount counter mode."""

    @pytest.mark.asyncio
    async def test_recount_sets_counter_to_active_votes(self):
        """Recount mode should overwrite the counter with the vote count."""
        post_repo = InMemoryPostRepository()
        vote_repo = InMemoryVoteRepository()
        # Counter has drifted from the single existing vote
        post = await post_repo.save(make_post(upvotes_count=10))
        await vote_repo.create(post.id, UserId("carol"))
        vote_service = build_vote_service(post_repo, vote_repo, counter_mode="recount")

        result = await vote_service.toggle_upvote(post.id, ALICE)

        assert result.upvoted is True
        assert result.upvotes_count == 2

    @pytest.mark.asyncio
    async def test_recount_after_removal(self):
        """Removing the only vote in recount mode leaves zero."""
        post_repo = InMemoryPostRepository()
        vote_repo = InMemoryVoteRepository()
        post = await post_repo.save(make_post(upvotes_count=7))
        vote_service = build_vote_service(post_repo, vote_repo, counter_mode="recount")

        await vote_service.toggle_upvote(post.id, ALICE)
        result = await vote_service.toggle_upvote(post.id, ALICE)

        assert result.upvoted is False
        assert result.upvotes_count == 0
