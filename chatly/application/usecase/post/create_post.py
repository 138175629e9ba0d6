"""Create post use case."""

from pydantic import BaseModel

from chatly.application.usecase.base import BaseUseCase
from chatly.application.usecase.post.list_posts import PostItem
from chatly.domain.service import PostService
from chatly.domain.value import Author, VerifiedIdentity


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str = ""
    content: str = ""
    author_name: str | None = None  # Used when not signed in
    author_id: str | None = None  # Used when not signed in
    identity: VerifiedIdentity | None = None


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostItem:
        """Execute create post flow.

        The author is taken from the verified identity when there is one,
        otherwise from the request body, otherwise Anonymous.

        Args:
            request: Create post request

        Returns:
            Created post

        Raises:
            ValidationError: If title or content is blank
            OperationFailedError: If the store write fails
        """
        author = Author.resolve(
            request.identity, request.author_name, request.author_id
        )
        post = await self.post_service.create_post(
            title=request.title, content=request.content, author=author
        )
        return PostItem.from_post(post)
