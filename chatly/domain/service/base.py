"""Base service class for domain services."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire

from chatly.adapter.error import AdapterError
from chatly.domain.error import OperationFailedError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


@contextmanager
def store_operation(operation: str, **attributes: str | None) -> Iterator[None]:
    """Translate store failures into ``OperationFailedError``.

    The adapter error is logged with full detail and chained, while the raised
    error only names the operation.

    Args:
        operation: Short description, e.g. "toggle upvote"
        **attributes: Extra span attributes for the error log
    """
    try:
        yield
    except AdapterError as e:
        logfire.error(
            "Store operation failed",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=True,
            **attributes,
        )
        raise OperationFailedError(operation) from e
