"""In-memory repository implementations for testing."""

from chatly.persistence.repository.inmemory.comment import InMemoryCommentRepository
from chatly.persistence.repository.inmemory.post import InMemoryPostRepository
from chatly.persistence.repository.inmemory.vote import InMemoryVoteRepository

__all__ = [
    "InMemoryPostRepository",
    "InMemoryCommentRepository",
    "InMemoryVoteRepository",
]
