"""Domain layer DI providers."""

from dishka import Scope, provide

from chatly.adapter.firebase import FirebaseIdentityVerifier
from chatly.config import Settings
from chatly.domain.repository import (
    CommentRepository,
    PostRepository,
    VoteRepository,
)
from chatly.domain.service import (
    CommentService,
    IdentityService,
    PostService,
    VoteService,
)
from chatly.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped; each HTTP request gets fresh
    service instances.
    """

    scope = Scope.REQUEST

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        settings: Settings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            post_service=post_service,
            counter_mode=settings.votes.counter_mode,
        )

    @provide
    def get_identity_service(
        self, verifier: FirebaseIdentityVerifier
    ) -> IdentityService:
        """Provide identity domain service backed by Firebase."""
        return IdentityService(verifier=verifier)
