import time

import pytest

from utils.retry import retry_async
from utils.rate_limiter import RateLimiter


class TestRetryAsync:
    @pytest.mark.asyncio
    async def test_retry_async_success_after_retries(self):
        calls = {"count": 0}

        @retry_async(max_attempts=3, delay=0.01, backoff_factor=1.0, exceptions=(ValueError,))
        async def flaky():
            calls["count"] += 1
            if calls["count"] < 3:
                raise ValueError("fail")
            return "ok"

        result = await flaky()
        assert result == "ok"
        assert calls["count"] == 3

    @pytest.mark.asyncio
    async def test_retry_async_gives_up(self):
        calls = {"count": 0}

        @retry_async(max_attempts=2, delay=0.01, exceptions=(ValueError,))
        async def always_fails():
            calls["count"] += 1
            raise ValueError("boom")

        with pytest.raises(ValueError):
            await always_fails()
        assert calls["count"] == 2

    @pytest.mark.asyncio
    async def test_retry_async_does_not_retry_other_exceptions(self):
        calls = {"count": 0}

        @retry_async(max_attempts=3, delay=0.01, exceptions=(ValueError,))
        async def func():
            calls["count"] += 1
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await func()
        assert calls["count"] == 1

    def test_retry_async_rejects_zero_attempts(self):
        with pytest.raises(ValueError):
            retry_async(max_attempts=0)


class TestRateLimiter:
    @pytest.mark.asyncio
    async def test_rate_limiter_acquire_and_remaining(self):
        limiter = RateLimiter(max_requests=2, time_window=0.2)
        assert limiter.get_remaining_requests() == 2

        await limiter.acquire()
        assert limiter.get_remaining_requests() == 1

        await limiter.acquire()
        assert limiter.get_remaining_requests() == 0

        # Third acquire waits for the window to move on
        t0 = time.perf_counter()
        await limiter.acquire()
        waited = time.perf_counter() - t0
        assert waited >= 0.1
        assert limiter.get_remaining_requests() >= 0

        limiter.reset()
        assert limiter.get_remaining_requests() == 2

    def test_rate_limiter_rejects_non_positive_limit(self):
        with pytest.raises(ValueError):
            RateLimiter(max_requests=0)
