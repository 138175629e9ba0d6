"""Unit tests for PostService."""

from unittest.mock import AsyncMock

import pytest

from chatly.adapter.notion.client import NotionAPIError
from chatly.domain.error import OperationFailedError, ValidationError
from chatly.domain.model import PostPage
from chatly.domain.repository import PostRepository
from chatly.domain.service import PostService
from chatly.domain.service.post_service import apply_delta
from chatly.domain.value import Author
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

AUTHOR = Author(name="Alice", id="alice")


class TestApplyDelta:
    """Tests for apply_delta."""

    @pytest.mark.parametrize(
        "current,delta,expected",
        [(0, 1, 1), (5, 1, 6), (5, -1, 4), (0, -1, 0), (1, -1, 0)],
    )
    def test_clamps_at_zero(self, current, delta, expected):
        """Counter arithmetic never goes below zero."""
        assert apply_delta(current, delta) == expected


class TestListPosts:
    """Tests for list_posts."""

    @pytest.mark.asyncio
    async def test_newest_first_with_cursor(self, unit_env):
        """Posts should page newest first and hand back a cursor."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        oldest = await post_repo.save(make_post("Oldest", age_minutes=30))
        middle = await post_repo.save(make_post("Middle", age_minutes=20))
        newest = await post_repo.save(make_post("Newest", age_minutes=10))

        first = await post_service.list_posts(limit=2)
        second = await post_service.list_posts(limit=2, cursor=first.next_cursor)

        assert [p.id for p in first.posts] == [newest.id, middle.id]
        assert first.has_more is True
        assert [p.id for p in second.posts] == [oldest.id]
        assert second.has_more is False
        assert second.next_cursor is None

    @pytest.mark.asyncio
    async def test_limit_capped_at_100(self):
        """Requested page sizes above 100 are capped."""
        post_repo = AsyncMock(spec=PostRepository)
        post_repo.find_page.return_value = PostPage(posts=[])
        post_service = PostService(post_repository=post_repo)

        await post_service.list_posts(limit=500)

        post_repo.find_page.assert_awaited_once_with(limit=100, cursor=None)

    @pytest.mark.asyncio
    async def test_store_failure(self):
        """A failed query surfaces as 'Failed to fetch posts'."""
        post_repo = AsyncMock(spec=PostRepository)
        post_repo.find_page.side_effect = NotionAPIError("boom", status=500)
        post_service = PostService(post_repository=post_repo)

        with pytest.raises(OperationFailedError, match="Failed to fetch posts"):
            await post_service.list_posts()


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_creates_post_with_zero_upvotes(self, unit_env):
        """A new post starts with no upvotes."""
        post_service = await unit_env.get(PostService)

        post = await post_service.create_post("  Hello ", "World", AUTHOR)

        assert post.title == "Hello"
        assert post.content == "World"
        assert post.author_name == "Alice"
        assert post.upvotes_count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title,content", [("", "body"), ("title", "  "), ("", "")])
    async def test_missing_fields_rejected_before_store(self, title, content):
        """Blank title or content is rejected without a store call."""
        post_repo = AsyncMock(spec=PostRepository)
        post_service = PostService(post_repository=post_repo)

        with pytest.raises(ValidationError, match="Missing title or content"):
            await post_service.create_post(title, content, AUTHOR)

        assert post_repo.mock_calls == []

    @pytest.mark.asyncio
    async def test_store_failure(self):
        """A failed write surfaces as 'Failed to create post'."""
        post_repo = AsyncMock(spec=PostRepository)
        post_repo.create.side_effect = NotionAPIError("boom", status=400)
        post_service = PostService(post_repository=post_repo)

        with pytest.raises(OperationFailedError, match="Failed to create post"):
            await post_service.create_post("t", "c", AUTHOR)


class TestUpvotesCounter:
    """Tests for counter adjustments."""

    @pytest.mark.asyncio
    async def test_adjust_returns_written_value(self, unit_env):
        """adjust_upvotes_count writes and returns the new value."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(upvotes_count=2))

        assert await post_service.adjust_upvotes_count(post.id, 1) == 3
        assert await post_service.get_upvotes_count(post.id) == 3

    @pytest.mark.asyncio
    async def test_set_clamps_negative_values(self, unit_env):
        """set_upvotes_count never stores a negative value."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(upvotes_count=2))

        await post_service.set_upvotes_count(post.id, -3)

        assert await post_service.get_upvotes_count(post.id) == 0
