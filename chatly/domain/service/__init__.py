"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .identity_service import IdentityService, IdentityVerifier
from .post_service import PostService
from .vote_service import VoteService

__all__ = [
    "CommentService",
    "IdentityService",
    "IdentityVerifier",
    "PostService",
    "Service",
    "VoteService",
]
