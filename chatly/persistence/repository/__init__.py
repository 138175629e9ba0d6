"""Notion-backed repository implementations."""

from chatly.persistence.repository.comment import NotionCommentRepository
from chatly.persistence.repository.post import NotionPostRepository
from chatly.persistence.repository.vote import NotionVoteRepository

__all__ = [
    "NotionPostRepository",
    "NotionCommentRepository",
    "NotionVoteRepository",
]
