"""
Retry and Timeout Mechanisms

Exponential backoff retries (tenacity) and timeout protection for calls
that cross the boundary to external collaborators such as the archive store.
"""

import asyncio
import functools
from collections.abc import Callable
from typing import Any, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from ..domain.shared.exceptions import ArchiveSearchError, OperationTimeoutError
from .observability import get_logger

F = TypeVar("F", bound=Callable[..., Any])


def is_transient_error(error: BaseException) -> bool:
    """Repository errors flagged transient and timeouts are worth retrying."""
    if isinstance(error, ArchiveSearchError):
        return error.transient
    return isinstance(error, OperationTimeoutError | ConnectionError)


def with_retry(
    max_attempts: int = 3,
    min_wait: float = 1.0,
    max_wait: float = 10.0,
    exponential_base: int = 2,
    retry_predicate: Callable[[BaseException], bool] = is_transient_error,
):
    """Decorator to add retry logic with exponential backoff to async functions."""

    def decorator(func: F) -> F:
        logger = get_logger("retry")

        def log_attempt(retry_state: RetryCallState) -> None:
            error = retry_state.outcome.exception() if retry_state.outcome else None
            logger.warning(
                "Retry attempt failed",
                function=func.__name__,
                attempt=retry_state.attempt_number,
                max_attempts=max_attempts,
                error=str(error),
                error_type=type(error).__name__,
            )

        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            retrying = AsyncRetrying(
                stop=stop_after_attempt(max_attempts),
                wait=wait_exponential(
                    multiplier=min_wait, max=max_wait, exp_base=exponential_base
                ),
                retry=retry_if_exception(retry_predicate),
                before_sleep=log_attempt,
                reraise=True,
            )
            async for attempt in retrying:
                with attempt:
                    return await func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


def with_timeout(timeout_seconds: float):
    """Decorator to add timeout protection to async functions."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await asyncio.wait_for(
                    func(*args, **kwargs), timeout=timeout_seconds
                )
            except asyncio.TimeoutError:
                logger = get_logger("timeout")
                logger.error(
                    "Function timeout",
                    function=func.__name__,
                    timeout_seconds=timeout_seconds,
                )
                raise OperationTimeoutError(func.__name__, timeout_seconds)

        return wrapper  # type: ignore[return-value]

    return decorator
