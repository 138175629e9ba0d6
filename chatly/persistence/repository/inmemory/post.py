"""In-memory post repository for testing."""

from datetime import datetime, timezone
from uuid import uuid4

from chatly.adapter.notion.client import NotionAPIError
from chatly.domain.model.post import Post, PostPage
from chatly.domain.repository.post import PostRepository
from chatly.domain.value import Author, PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Cursors are stringified offsets. Unknown ids raise a 404
    ``NotionAPIError`` like the real store does.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_page(self, limit: int = 20, cursor: str | None = None) -> PostPage:
        """Find posts, newest first (later inserts first on equal timestamps)."""
        posts = sorted(
            reversed(list(self._posts.values())),
            key=lambda p: p.created_at or datetime.min.replace(tzinfo=timezone.utc),
            reverse=True,
        )
        offset = int(cursor) if cursor else 0
        limit = min(limit, 100)
        window = posts[offset : offset + limit]
        has_more = offset + limit < len(posts)
        return PostPage(
            posts=window,
            next_cursor=str(offset + limit) if has_more else None,
            has_more=has_more,
        )

    async def create(self, title: str, content: str, author: Author) -> Post:
        """Create a post with a generated id."""
        post = Post(
            id=PostId(str(uuid4())),
            title=title,
            content=content,
            author_name=author.name,
            author_id=author.id,
            upvotes_count=0,
            created_at=datetime.now(timezone.utc),
        )
        self._posts[post.id] = post
        return post

    async def save(self, post: Post) -> Post:
        """Insert or replace a post (test seeding)."""
        self._posts[post.id] = post
        return post

    async def get_upvotes_count(self, post_id: PostId) -> int:
        """Read the upvote counter."""
        return self._get(post_id).upvotes_count

    async def set_upvotes_count(self, post_id: PostId, count: int) -> None:
        """Overwrite the upvote counter."""
        post = self._get(post_id)
        self._posts[post_id] = post.model_copy(update={"upvotes_count": count})

    def _get(self, post_id: PostId) -> Post:
        post = self._posts.get(post_id)
        if post is None:
            raise NotionAPIError(
                f"Could not find page with ID: {post_id}",
                status=404,
                code="object_not_found",
            )
        return post
