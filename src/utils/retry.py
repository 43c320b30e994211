"""
Retry utilities
"""

import asyncio
import functools
import logging
from typing import Callable, Tuple, Type

logger = logging.getLogger(__name__)


def retry_async(
    max_attempts: int = 3,
    delay: float = 1.0,
    backoff_factor: float = 2.0,
    exceptions: Tuple[Type[BaseException], ...] = (Exception,)
):
    """
    Decorator retrying an async call on transient errors

    Only exceptions listed in ``exceptions`` are retried; anything else
    propagates immediately.

    Args:
        max_attempts: Maximum number of attempts
        delay: Delay before the first retry in seconds
        backoff_factor: Multiplier applied to the delay after every retry
        exceptions: Exception types treated as transient
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            wait = delay
            for attempt in range(1, max_attempts + 1):
                try:
                    return await func(*args, **kwargs)
                except exceptions as e:
                    if attempt == max_attempts:
                        logger.error(f"{func.__name__} failed after {max_attempts} attempts: {e}")
                        raise
                    logger.warning(f"{func.__name__} failed on attempt {attempt}/{max_attempts}: {e}. "
                                   f"Retrying in {wait}s...")
                    await asyncio.sleep(wait)
                    wait *= backoff_factor

        return wrapper
    return decorator
