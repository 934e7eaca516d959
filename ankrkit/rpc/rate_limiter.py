"""In-memory token-bucket rate limiter shared by every outbound RPC attempt."""

from __future__ import annotations

import asyncio
import time
from enum import Enum
from typing import Callable

from loguru import logger

from ankrkit.utils.exceptions import RateLimitExceededError, RequestCancelledError


DEFAULT_CAPACITY = 1000
DEFAULT_WINDOW_SECONDS = 60.0


class RateLimitBehavior(str, Enum):
    """What acquire() does when the bucket cannot cover the cost."""
    BLOCK = "block"
    ERROR = "error"


class TokenBucketRateLimiter:
    """
    Token bucket holding at most ``capacity`` tokens, refilled continuously at
    ``capacity / window`` tokens per second.

    Refill is computed lazily from the time elapsed since the last observation,
    so there is no background task. Only the check-and-update step runs under
    the lock; blocked callers sleep outside it.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        window: float = DEFAULT_WINDOW_SECONDS,
        behavior: RateLimitBehavior | str = RateLimitBehavior.BLOCK,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        if window <= 0:
            raise ValueError(f"window must be positive, got {window}")
        self._capacity = capacity
        self._window = float(window)
        self._rate = capacity / self._window
        self._behavior = RateLimitBehavior(behavior)
        self._clock = clock
        self._tokens = float(capacity)
        self._last_refill = clock()
        self._lock = asyncio.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def window(self) -> float:
        return self._window

    @property
    def rate(self) -> float:
        """Tokens added per second."""
        return self._rate

    @property
    def behavior(self) -> RateLimitBehavior:
        return self._behavior

    @property
    def available_tokens(self) -> float:
        self._refill()
        return self._tokens

    def _refill(self) -> None:
        now = self._clock()
        elapsed = now - self._last_refill
        if elapsed > 0:
            self._tokens = min(float(self._capacity), self._tokens + elapsed * self._rate)
        self._last_refill = now

    def _check_cost(self, cost: int) -> None:
        if cost <= 0:
            raise ValueError(f"cost must be positive, got {cost}")
        if cost > self._capacity:
            raise ValueError(f"cost {cost} exceeds bucket capacity {self._capacity}")

    def _take(self, cost: int) -> float:
        """Deduct ``cost`` if possible; return 0.0 on success, else seconds to wait."""
        self._refill()
        if self._tokens >= cost:
            self._tokens -= cost
            return 0.0
        return (cost - self._tokens) / self._rate

    def wait_time(self, cost: int = 1) -> float:
        """Seconds until ``cost`` tokens would be available (0.0 if available now)."""
        self._check_cost(cost)
        self._refill()
        if self._tokens >= cost:
            return 0.0
        return (cost - self._tokens) / self._rate

    def try_acquire(self, cost: int = 1) -> bool:
        """Take ``cost`` tokens if they are available right now; never waits or raises on refusal."""
        self._check_cost(cost)
        return self._take(cost) == 0.0

    async def acquire(self, cost: int = 1, timeout: float | None = None) -> bool:
        """
        Take ``cost`` tokens.

        In ERROR mode an empty bucket raises RateLimitExceededError at once.
        In BLOCK mode the caller is suspended until the tokens accrue; if
        ``timeout`` elapses first RequestCancelledError is raised.
        """
        self._check_cost(cost)
        if timeout is None:
            return await self._acquire(cost)
        try:
            return await asyncio.wait_for(self._acquire(cost), timeout=timeout)
        except asyncio.TimeoutError as exc:
            raise RequestCancelledError("rate_limiter.acquire", timeout) from exc

    async def _acquire(self, cost: int) -> bool:
        while True:
            async with self._lock:
                wait = self._take(cost)
                if wait == 0.0:
                    return True
                if self._behavior == RateLimitBehavior.ERROR:
                    raise RateLimitExceededError(cost, self._tokens, retry_after=wait)
            logger.debug("Rate limit reached, waiting {:.3f}s for {} token(s)", wait, cost)
            await asyncio.sleep(wait)

    def __repr__(self) -> str:
        return (
            f"TokenBucketRateLimiter(capacity={self._capacity}, window={self._window}, "
            f"behavior={self._behavior.value})"
        )
