"""
Retry utilities for transient backend failures.

Only network-level failures (RepositoryError with code NETWORK_ERROR) are
retried; business failures reported by the backend are raised immediately.
"""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

from ecomove.domain.errors import RepositoryError

logger = logging.getLogger(__name__)

T = TypeVar("T")

NETWORK_ERROR = "NETWORK_ERROR"


def is_transient_error(error: Exception) -> bool:
    return isinstance(error, RepositoryError) and error.code == NETWORK_ERROR


async def retry_on_transient(
    func: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    base_delay: float = 0.1,
) -> T:
    """
    Run `func`, retrying transient failures with exponential backoff.

    Delay between attempts: base_delay * (2 ** attempt).

    Raises:
        The last error once max_attempts is reached, or any non-transient error
        as soon as it happens.
    """
    for attempt in range(max_attempts):
        try:
            return await func()
        except RepositoryError as e:
            if not is_transient_error(e):
                raise

            if attempt == max_attempts - 1:
                logger.error(
                    "Backend still unreachable after max retries",
                    extra={"attempts": max_attempts, "error": e.message},
                )
                raise

            delay = base_delay * (2 ** attempt)
            logger.warning(
                "Transient backend failure, retrying",
                extra={
                    "attempt": attempt + 1,
                    "max_attempts": max_attempts,
                    "retry_delay": delay,
                    "error": e.message,
                },
            )
            await asyncio.sleep(delay)

    raise RuntimeError("retry_on_transient requires max_attempts >= 1")
