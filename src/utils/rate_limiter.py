"""
Rate limiting utilities
"""

import asyncio
import logging
import time
from collections import deque

logger = logging.getLogger(__name__)


class RateLimiter:
    """Sliding window limiter: at most ``max_requests`` per ``time_window`` seconds"""

    def __init__(self, max_requests: int, time_window: float = 1.0):
        if max_requests <= 0:
            raise ValueError("max_requests must be positive")
        self.max_requests = max_requests
        self.time_window = time_window
        self._calls = deque()
        self._lock = asyncio.Lock()

    def _expire(self, now: float):
        while self._calls and now - self._calls[0] >= self.time_window:
            self._calls.popleft()

    async def acquire(self):
        """Wait until another request fits into the window"""
        async with self._lock:
            now = time.monotonic()
            self._expire(now)

            if len(self._calls) >= self.max_requests:
                sleep_time = self.time_window - (now - self._calls[0])
                if sleep_time > 0:
                    logger.debug(f"Rate limit reached, sleeping for {sleep_time:.2f}s")
                    await asyncio.sleep(sleep_time)
                now = time.monotonic()
                self._expire(now)

            self._calls.append(now)

    def reset(self):
        self._calls.clear()

    def get_remaining_requests(self) -> int:
        """Requests still allowed in the current window"""
        self._expire(time.monotonic())
        return max(0, self.max_requests - len(self._calls))
