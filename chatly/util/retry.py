"""Retry with jittered exponential backoff for rate-limited remote calls.

The Notion API allows roughly three requests per second per integration and
answers with 429 when that is exceeded. Every store call is wrapped with
``with_retry`` so that rate limiting and transient 5xx responses are absorbed
instead of surfacing to the caller.

Usage:
    page = await with_retry(lambda: client.retrieve_page(page_id), policy)
"""

import asyncio
import random
from collections.abc import Awaitable, Callable
from typing import TypeVar

import logfire
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

RATE_LIMITED = 429


class RetryPolicy(BaseModel):
    """Retry budget and backoff parameters."""

    model_config = ConfigDict(frozen=True)

    max_retries: int = Field(default=4, ge=0)
    base_delay_ms: int = Field(default=400, gt=0)
    jitter_ms: int = Field(default=100, ge=0)


def error_status(error: BaseException) -> int | None:
    """Extract an HTTP-style status code carried by an error, if any."""
    status = getattr(error, "status", None)
    if status is None:
        status = getattr(error, "status_code", None)
    return status if isinstance(status, int) else None


def is_retryable(error: BaseException) -> bool:
    """Whether an error is a rate limit or server error worth retrying."""
    status = error_status(error)
    if status is None:
        return False
    return status == RATE_LIMITED or 500 <= status < 600


def backoff_delay_ms(attempt: int, base_delay_ms: int, jitter_ms: int = 100) -> float:
    """Delay before the retry following ``attempt`` (zero-based)."""
    jitter = random.randint(0, jitter_ms) if jitter_ms > 0 else 0
    return base_delay_ms * (2**attempt) + jitter


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy | None = None,
    *,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Run a remote operation, retrying on 429 and 5xx failures.

    Args:
        operation: Zero-argument callable returning a fresh awaitable per attempt
        policy: Retry budget (defaults to 4 retries, 400ms base delay)
        sleep: Awaitable sleep taking seconds (injectable for tests)

    Returns:
        Result of the first successful attempt

    Raises:
        Exception: The last failure, unchanged, when it is not retryable or
            the retry budget is exhausted
    """
    policy = policy or RetryPolicy()
    attempt = 0
    while True:
        try:
            return await operation()
        except Exception as e:
            if not is_retryable(e) or attempt >= policy.max_retries:
                raise

            delay_ms = backoff_delay_ms(attempt, policy.base_delay_ms, policy.jitter_ms)
            logfire.warn(
                "Retrying remote call",
                attempt=attempt + 1,
                max_retries=policy.max_retries,
                status=error_status(e),
                delay_ms=delay_ms,
            )
            await sleep(delay_ms / 1000)
            attempt += 1
