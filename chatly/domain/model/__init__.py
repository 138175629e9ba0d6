"""Domain model entities for Chatly."""

from chatly.domain.model.comment import Comment
from chatly.domain.model.post import Post, PostPage
from chatly.domain.model.vote import UpvoteToggle, Vote

__all__ = [
    "Post",
    "PostPage",
    "Comment",
    "Vote",
    "UpvoteToggle",
]
