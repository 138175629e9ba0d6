"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase, PostItem

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostItem",
]
