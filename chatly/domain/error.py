"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Required input is missing or malformed.

    Raised before any call to the document store is made.
    """

    pass


class AuthorizationError(DomainError):
    """Raised when an operation requires a verified identity and none was given."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class OperationFailedError(DomainError):
    """A store operation failed after retries were exhausted.

    The message is safe to show to clients; the underlying cause is chained
    and logged but never exposed.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Failed to {operation}")

