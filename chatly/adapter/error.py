"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class InvalidTokenError(ProviderError):
    """ID token could not be verified (malformed, expired, revoked, wrong project)."""

    pass
