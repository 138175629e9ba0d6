"""Mapping from domain errors to HTTP responses."""

from fastapi import HTTPException, status

from chatly.domain.error import (
    AuthorizationError,
    DomainError,
    OperationFailedError,
    ValidationError,
)

STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthorizationError, status.HTTP_401_UNAUTHORIZED),
    (OperationFailedError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def http_error(error: DomainError) -> HTTPException:
    """Build the HTTPException for a domain error.

    Domain error messages are written for clients; store details stay in
    the logs (see ``store_operation``).

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException carrying the matching status and the error message
    """
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )
