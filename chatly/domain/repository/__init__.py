"""Repository interfaces for the Chatly domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from chatly.domain.repository.comment import CommentRepository
from chatly.domain.repository.post import PostRepository
from chatly.domain.repository.vote import VoteRepository

__all__ = [
    "PostRepository",
    "CommentRepository",
    "VoteRepository",
]
