"""Auth use cases."""

from .verify_token import VerifyTokenRequest, VerifyTokenResponse, VerifyTokenUseCase

__all__ = [
    "VerifyTokenRequest",
    "VerifyTokenResponse",
    "VerifyTokenUseCase",
]
