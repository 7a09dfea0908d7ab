"""
Fixed-delay retry for small single-row writes.

The bulk migration path does not use this; repeated bulk loads are made
safe by idempotent inserts instead.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

from sqlalchemy.exc import OperationalError

from core.exceptions import RetryableError

logger = logging.getLogger(__name__)

T = TypeVar("T")

RETRYABLE_EXCEPTIONS = (RetryableError, OperationalError)


async def retry_async(
    operation: Callable[[], Awaitable[T]],
    attempts: int = 5,
    delay: float = 0.1,
    description: str = "operation"
) -> T:
    """
    Run ``operation`` until it succeeds or ``attempts`` is exhausted.

    Only transient errors (RetryableError, OperationalError) are retried,
    each after a fixed ``delay`` in seconds. Anything else propagates
    immediately. The last transient error is re-raised when all attempts
    fail.
    """
    if attempts < 1:
        raise ValueError("attempts must be at least 1")

    last_error: Optional[Exception] = None
    for attempt in range(attempts):
        try:
            return await operation()
        except RETRYABLE_EXCEPTIONS as e:
            last_error = e
            logger.warning(
                f"{description} attempt {attempt + 1}/{attempts} failed: {e}"
            )
            if attempt < attempts - 1:
                await asyncio.sleep(delay)

    raise last_error
