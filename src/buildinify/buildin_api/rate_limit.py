"""Client-side request pacing.

:class:`AsyncTokenBucket` refills at ``rate_rps`` tokens per second up to a
``burst`` ceiling.  A caller that finds the bucket empty is told how long
to wait and sleeps outside the lock, so concurrent coroutines sharing one
transport are paced fairly.
"""

from __future__ import annotations

import asyncio
import time


class AsyncTokenBucket:
    """Token bucket guarded by an :class:`asyncio.Lock`.

    Parameters
    ----------
    rate_rps:
        Refill rate in tokens per second.
    burst:
        Maximum number of stored tokens.
    """

    __slots__ = ("_lock", "burst", "last_refill", "rate", "tokens")

    def __init__(self, rate_rps: float, burst: int = 10) -> None:
        if rate_rps <= 0:
            raise ValueError(f"rate_rps must be > 0, got {rate_rps}")
        if burst < 1:
            raise ValueError(f"burst must be >= 1, got {burst}")

        self.rate: float = rate_rps
        self.burst: int = burst
        self.tokens: float = float(burst)
        self.last_refill: float = time.monotonic()
        self._lock = asyncio.Lock()

    def _refill(self, now: float) -> None:
        elapsed = now - self.last_refill
        self.tokens = min(self.burst, self.tokens + elapsed * self.rate)
        self.last_refill = now

    async def acquire(self, tokens: int = 1) -> float:
        """Take *tokens*, sleeping first if the bucket is short.

        Returns the number of seconds waited (``0.0`` when no wait was needed).
        """
        async with self._lock:
            now = time.monotonic()
            self._refill(now)
            if self.tokens >= tokens:
                self.tokens -= tokens
                return 0.0
            wait = (tokens - self.tokens) / self.rate
            # Refill resumes once this caller's wait is over; later
            # callers see a negative balance and queue behind it.
            self.tokens = 0.0
            self.last_refill = now + wait

        await asyncio.sleep(wait)
        return wait
