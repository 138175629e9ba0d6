"""Post repository interface."""

from abc import ABC, abstractmethod

from chatly.domain.model.post import Post, PostPage
from chatly.domain.value import Author, PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_page(self, limit: int = 20, cursor: str | None = None) -> PostPage:
        """Find posts, newest first.

        Args:
            limit: Maximum number of posts to return (capped at 100)
            cursor: Opaque cursor returned by a previous page

        Returns:
            Page of posts with the cursor for the next page
        """
        pass

    @abstractmethod
    async def create(self, title: str, content: str, author: Author) -> Post:
        """Create a post with an upvote count of zero.

        Args:
            title: Post title
            content: Post body
            author: Resolved author

        Returns:
            The created post, with its store-assigned id
        """
        pass

    @abstractmethod
    async def get_upvotes_count(self, post_id: PostId) -> int:
        """Read the post's denormalized upvote counter.

        Args:
            post_id: The post ID

        Returns:
            Current counter value (0 when unset)
        """
        pass

    @abstractmethod
    async def set_upvotes_count(self, post_id: PostId, count: int) -> None:
        """Overwrite the post's upvote counter.

        This is a plain write, not an increment: callers doing
        read-modify-write race with each other.

        Args:
            post_id: The post ID
            count: New counter value
        """
        pass
