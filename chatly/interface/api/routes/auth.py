"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from chatly.application.usecase.auth import (
    VerifyTokenRequest,
    VerifyTokenResponse,
    VerifyTokenUseCase,
)
from chatly.domain.error import DomainError
from chatly.interface.api.schema import APIRequest
from chatly.interface.error import http_error

router = APIRouter(prefix="/api/auth", tags=["auth"], route_class=DishkaRoute)


class VerifyTokenAPIRequest(APIRequest):
    """API request for verifying an ID token."""

    id_token: str | None = None


@router.post("/verify", response_model=VerifyTokenResponse)
async def verify_token(
    request: VerifyTokenAPIRequest,
    verify_token_use_case: FromDishka[VerifyTokenUseCase],
) -> VerifyTokenResponse:
    """Verify a Firebase ID token and return the identity it carries.

    Args:
        request: Body with ``idToken``
        verify_token_use_case: Verify token use case from DI

    Returns:
        uid, email and display name

    Raises:
        HTTPException: 400 if the token is missing, 401 if it is invalid
    """
    try:
        return await verify_token_use_case.execute(
            VerifyTokenRequest(id_token=request.id_token)
        )
    except DomainError as e:
        raise http_error(e) from e
