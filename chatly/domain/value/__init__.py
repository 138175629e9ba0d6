"""Domain value objects for Chatly."""

from chatly.domain.value.identifiers import (
    CommentId,
    PostId,
    UserId,
    VoteId,
)
from chatly.domain.value.types import (
    ANONYMOUS_ID,
    ANONYMOUS_NAME,
    Author,
    VerifiedIdentity,
    VoteState,
)

__all__ = [
    # Identifiers
    "PostId",
    "CommentId",
    "VoteId",
    "UserId",
    # Types
    "ANONYMOUS_ID",
    "ANONYMOUS_NAME",
    "Author",
    "VerifiedIdentity",
    "VoteState",
]
