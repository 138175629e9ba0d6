"""Post aggregate root.

Posts live in the Posts database of the document store. The upvote counter
is a denormalized copy of the number of active vote records; it is kept up
to date by the vote service and is not transactionally consistent with them.
"""

from datetime import datetime

from pydantic import Field

from chatly.domain.model.common import DomainModel
from chatly.domain.value import PostId


class Post(DomainModel):
    """Post aggregate root."""

    id: PostId
    title: str
    content: str
    author_name: str = ""
    author_id: str = ""
    upvotes_count: int = Field(default=0, ge=0)
    comments_count: int = Field(default=0, ge=0)
    created_at: datetime | None = None


class PostPage(DomainModel):
    """One page of posts, newest first, with the store's pagination cursor."""

    posts: list[Post]
    next_cursor: str | None = None
    has_more: bool = False
