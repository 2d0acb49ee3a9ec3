"""Fixed-window quota gate for Helix request throttling."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

from twitchhelix.core import RateLimitError, get_logger


logger = get_logger(__name__)


@dataclass
class RateLimiter:
    """Quota gate shared by every caller of one Helix client.

    Helix grants a bucket of points per window. Each request reserves its
    cost before it is sent; once ``used_points + cost`` would reach
    ``max_points`` the caller waits until the window elapses, at which point
    the counter starts again from zero.
    """

    max_points: int = 800
    window_length: float = 60.0  # seconds
    poll_interval: float = 0.01  # seconds
    clock: Callable[[], float] = time.monotonic
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep
    used_points: int = field(default=0, init=False)
    window_start: float = field(init=False)
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        """Open the first window."""
        if self.max_points < 2:
            raise ValueError(f"max_points must be at least 2, got {self.max_points}")
        self.window_start = self.clock()

    def _roll_window(self, now: float) -> None:
        """Start a new window if the current one has elapsed."""
        if now > self.window_start + self.window_length:
            self.window_start = now
            self.used_points = 0

    def _check_cost(self, cost: int) -> None:
        if cost < 1:
            raise ValueError(f"cost must be a positive integer, got {cost}")
        if cost >= self.max_points:
            raise RateLimitError(
                f"Requested cost ({cost}) can never fit the quota ({self.max_points})"
            )

    def _take(self, cost: int) -> bool:
        """Reserve ``cost`` points if they fit. Caller holds the lock."""
        self._roll_window(self.clock())
        if self.used_points + cost < self.max_points:
            self.used_points += cost
            return True
        return False

    async def reserve(self, cost: int = 1) -> None:
        """Reserve quota points, waiting for the next window when exhausted.

        Args:
            cost: Number of points the request consumes.

        Raises:
            ValueError: If cost is not positive.
            RateLimitError: If cost alone reaches ``max_points`` and could
                never be granted.
        """
        self._check_cost(cost)

        warned = False
        while True:
            async with self._lock:
                if self._take(cost):
                    return
                wait_time = max(self.poll_interval, self.time_until_reset())

            if not warned:
                logger.warning(
                    "Helix rate limit reached, waiting for next window",
                    extra={
                        "used_points": self.used_points,
                        "max_points": self.max_points,
                        "cost": cost,
                        "wait_seconds": wait_time,
                    },
                )
                warned = True

            await self.sleep(wait_time)

    async def try_reserve(self, cost: int = 1) -> bool:
        """Reserve quota points without waiting.

        Returns:
            True if the points were reserved, False if the window is exhausted.
        """
        self._check_cost(cost)
        async with self._lock:
            return self._take(cost)

    def time_until_reset(self) -> float:
        """Seconds until the current window elapses."""
        return max(0.0, self.window_start + self.window_length - self.clock())

    def available_points(self) -> int:
        """Points that can still be reserved in the current window."""
        self._roll_window(self.clock())
        return max(0, self.max_points - 1 - self.used_points)

    def observe_remaining(
        self, remaining: int | None, limit: int | None = None
    ) -> None:
        """Reconcile local usage with the server's Ratelimit-Remaining header.

        Other clients sharing the same token spend from the same bucket, so
        the server count can only push local usage up, never down. The
        remaining count is only meaningful against a bucket of the same
        size, so it is ignored when the server's Ratelimit-Limit differs
        from ``max_points``.

        Args:
            remaining: Ratelimit-Remaining header value.
            limit: Ratelimit-Limit header value, if sent.
        """
        if remaining is None:
            return
        if limit is not None and limit != self.max_points:
            logger.debug(
                "Server bucket size differs from local quota, not syncing",
                extra={"server_limit": limit, "max_points": self.max_points},
            )
            return
        server_used = self.max_points - max(0, remaining)
        if server_used > self.used_points:
            logger.debug(
                "Rate limit usage synced from server",
                extra={"used_points": server_used, "remaining": remaining},
            )
            self.used_points = server_used

    def reset(self) -> None:
        """Start a fresh window with no points used."""
        self.window_start = self.clock()
        self.used_points = 0

    def get_stats(self) -> dict[str, Any]:
        """Get rate limiter statistics."""
        return {
            "used_points": self.used_points,
            "max_points": self.max_points,
            "available_points": self.available_points(),
            "window_length": self.window_length,
            "seconds_until_reset": self.time_until_reset(),
        }
