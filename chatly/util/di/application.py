"""Application layer DI providers."""

from dishka import Scope, provide

from chatly.application.usecase.auth import VerifyTokenUseCase
from chatly.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
)
from chatly.application.usecase.post import CreatePostUseCase, ListPostsUseCase
from chatly.application.usecase.vote import ToggleUpvoteUseCase
from chatly.domain.service import (
    CommentService,
    IdentityService,
    PostService,
    VoteService,
)
from chatly.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_verify_token_use_case(
        self, identity_service: IdentityService
    ) -> VerifyTokenUseCase:
        """Provide verify token use case."""
        return VerifyTokenUseCase(identity_service=identity_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self, post_service: PostService, comment_service: CommentService
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_upvote_use_case(
        self, vote_service: VoteService
    ) -> ToggleUpvoteUseCase:
        """Provide toggle upvote use case."""
        return ToggleUpvoteUseCase(vote_service=vote_service)
