"""Identity verification domain service."""

import logfire

from chatly.adapter.error import InvalidTokenError
from chatly.domain.error import AuthorizationError, ValidationError
from chatly.domain.value import VerifiedIdentity

from .base import Service

BEARER_PREFIX = "bearer "


class IdentityVerifier:
    """ID token verifier interface for identity providers."""

    async def verify(self, token: str) -> VerifiedIdentity:
        """Verify an ID token.

        Args:
            token: Raw ID token

        Returns:
            Identity carried by the token

        Raises:
            InvalidTokenError: If the token cannot be verified
        """
        raise NotImplementedError


def parse_bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header.

    The scheme is matched case-insensitively.
    """
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX) :].strip()
    return token or None


class IdentityService(Service):
    """Domain service resolving callers to verified identities."""

    def __init__(self, verifier: IdentityVerifier) -> None:
        """Initialize identity service.

        Args:
            verifier: ID token verifier
        """
        self.verifier = verifier

    async def verify_token(self, token: str | None) -> VerifiedIdentity:
        """Verify an ID token supplied explicitly by the client.

        Args:
            token: Raw ID token

        Returns:
            Verified identity

        Raises:
            ValidationError: If no token was supplied
            AuthorizationError: If the token is invalid
        """
        if not token or not token.strip():
            raise ValidationError("Missing idToken")

        with logfire.span("identity_service.verify_token"):
            try:
                identity = await self.verifier.verify(token.strip())
            except InvalidTokenError as e:
                logfire.warn("ID token rejected", error=str(e))
                raise AuthorizationError("Invalid token") from e
            logfire.info("ID token verified", uid=identity.uid)
            return identity

    async def identify(self, authorization: str | None) -> VerifiedIdentity | None:
        """Resolve the caller from an Authorization header without raising.

        For routes where authentication is optional or checked later.

        Args:
            authorization: Raw Authorization header value

        Returns:
            Verified identity, or None if the header is missing or the token invalid
        """
        token = parse_bearer_token(authorization)
        if not token:
            return None

        try:
            return await self.verifier.verify(token)
        except InvalidTokenError as e:
            logfire.debug(
                "ID token verification failed, treating as unauthenticated",
                error=str(e),
            )
            return None
