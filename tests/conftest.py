"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from chatly.domain.model import Post
from chatly.domain.value import PostId

# Keep telemetry local; nothing is sent during tests
logfire.configure(send_to_logfire=False, console=False)


def make_post(
    title: str = "Test Post",
    upvotes_count: int = 0,
    age_minutes: int = 0,
    post_id: str | None = None,
) -> Post:
    """Helper to build a post for seeding in-memory repositories.

    Args:
        title: Post title
        upvotes_count: Initial upvote counter
        age_minutes: How long ago the post was created
        post_id: Fixed id, generated when omitted

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(post_id or str(uuid4())),
        title=title,
        content=f"Content of {title}",
        author_name="Alice",
        author_id="alice",
        upvotes_count=upvotes_count,
        comments_count=0,
        created_at=datetime.now(timezone.utc) - timedelta(minutes=age_minutes),
    )
