"""Quota gate for rate-limited upstream accounts."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Awaitable, Callable

from domaincheck.core.exceptions import RateLimitExceededError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateLimitConfig:
    """Configuration for rate limiting."""

    per_second: int | None = None
    per_hour: int | None = None

    @property
    def is_limited(self) -> bool:
        return bool(self.per_second or self.per_hour)


@dataclass
class RateLimitState:
    """Window counters for a single provider."""

    second_count: int = 0
    second_window_start: float = 0.0
    hour_count: int = 0
    hour_window_start: float = 0.0


class RateLimiter:
    """
    Per-second and per-hour request gate for one provider account.

    Both windows roll over by elapsed time only. A full per-second window
    suspends the caller until the window ends; a full hourly window fails
    immediately with RateLimitExceededError, since waiting that long would
    stall the request.

    Counter mutation happens under a single asyncio.Lock, so concurrent
    batch members queue behind each other rather than over-admitting.
    """

    SECOND: float = 1.0
    HOUR: float = 3600.0

    def __init__(
        self,
        config: RateLimitConfig,
        source: str = "provider",
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.config = config
        self.source = source
        self._clock = clock
        self._sleep = sleep
        now = clock()
        self._state = RateLimitState(second_window_start=now, hour_window_start=now)
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        """Wait for a free slot and reserve it."""
        async with self._lock:
            now = self._clock()
            self._roll_windows(now)

            per_hour = self.config.per_hour
            if per_hour and self._state.hour_count >= per_hour:
                retry_after = max(self._state.hour_window_start + self.HOUR - now, 0.0)
                logger.warning(
                    f"Hourly limit of {per_hour} reached for {self.source}, "
                    f"retry in {retry_after:.0f}s"
                )
                raise RateLimitExceededError(
                    message="Hourly rate limit exceeded",
                    source=self.source,
                    retry_after=retry_after,
                )

            per_second = self.config.per_second
            if per_second and self._state.second_count >= per_second:
                wait_time = self._state.second_window_start + self.SECOND - now
                if wait_time > 0:
                    logger.debug(f"Per-second limit reached for {self.source}, waiting {wait_time:.3f}s")
                    await self._sleep(wait_time)
                self._state.second_count = 0
                self._state.second_window_start = self._clock()

            self._state.second_count += 1
            self._state.hour_count += 1

    def _roll_windows(self, now: float) -> None:
        """Reset any window whose period has fully elapsed."""
        if now - self._state.second_window_start >= self.SECOND:
            self._state.second_count = 0
            self._state.second_window_start = now

        if now - self._state.hour_window_start >= self.HOUR:
            self._state.hour_count = 0
            self._state.hour_window_start = now

    def snapshot(self) -> dict[str, int | None]:
        """Current limits and counters, for health reporting."""
        return {
            "per_second": self.config.per_second,
            "per_hour": self.config.per_hour,
            "current_second": self._state.second_count,
            "current_hour": self._state.hour_count,
        }
