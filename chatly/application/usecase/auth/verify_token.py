"""Verify ID token use case."""

from pydantic import BaseModel

from chatly.application.usecase.base import BaseUseCase, ResponseModel
from chatly.domain.service import IdentityService


class VerifyTokenRequest(BaseModel):
    """Verify token request."""

    id_token: str | None = None


class VerifyTokenResponse(ResponseModel):
    """Identity carried by a verified token."""

    uid: str
    email: str | None
    name: str | None


class VerifyTokenUseCase(BaseUseCase):
    """Use case for checking an ID token and returning who it belongs to."""

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize verify token use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(self, request: VerifyTokenRequest) -> VerifyTokenResponse:
        """Execute verify token flow.

        Raises:
            ValidationError: If no token was supplied
            AuthorizationError: If the token is invalid
        """
        identity = await self.identity_service.verify_token(request.id_token)
        return VerifyTokenResponse(
            uid=identity.uid, email=identity.email, name=identity.name
        )
