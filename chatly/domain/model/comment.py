"""Comment entity.

Comments are threaded: a reply points at its parent comment on the same post.
The tree is rebuilt by clients from the flat, creation-ordered list.
"""

from datetime import datetime
from typing import Optional

from chatly.domain.model.common import DomainModel
from chatly.domain.value import CommentId, PostId


class Comment(DomainModel):
    """Comment entity."""

    id: CommentId
    post_id: PostId
    content: str
    author_name: str = ""
    author_id: str = ""
    parent_id: Optional[CommentId] = None
    created_at: datetime | None = None
