"""Rate limiter for controlling request frequency.

Keeps a minimum interval between the completion of one request and the start
of the next, so that a slow server gets the full pause after each response.

Example:
    >>> from hateblo.http import RateLimiter
    >>>
    >>> limiter = RateLimiter(min_interval=1.0)
    >>>
    >>> # In async code
    >>> await limiter.acquire()  # Waits if needed
    >>> # ... make request ...
    >>> limiter.release()  # Request completed
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable

from hateblo.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


class RateLimiter:
    """Minimum-interval limiter for a single sequential request stream.

    The first ``acquire`` never waits. Each later ``acquire`` waits until
    ``min_interval`` seconds have passed since the last ``release``. Waiting
    is an ``asyncio.sleep``: no lock or thread is held, and cancelling the
    waiting task simply abandons the wait.

    Example:
        >>> import asyncio
        >>> limiter = RateLimiter(min_interval=0.5)
        >>>
        >>> async def make_requests():
        ...     for i in range(3):
        ...         await limiter.acquire()
        ...         # ... make request ...
        ...         limiter.release()
        >>>
        >>> asyncio.run(make_requests())

    Attributes:
        min_interval: Minimum seconds between a completion and the next start
    """

    def __init__(
        self,
        min_interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize rate limiter.

        Args:
            min_interval: Minimum interval in seconds (default: 1)
            clock: Monotonic clock, replaceable in tests
        """
        if min_interval < 0:
            raise ValidationError("min_interval cannot be negative.", "min_interval")
        self.min_interval = min_interval
        self._clock = clock
        self._last_completed: float | None = None

    async def acquire(self) -> float:
        """Wait until the next request may start.

        Returns:
            Time waited in seconds
        """
        if self._last_completed is None:
            return 0.0

        elapsed = self._clock() - self._last_completed
        wait_time = 0.0
        if elapsed < self.min_interval:
            wait_time = self.min_interval - elapsed
            logger.debug(f"Waiting {wait_time:.3f}s before next request")
            await asyncio.sleep(wait_time)
        return wait_time

    def release(self) -> None:
        """Record that the current request has completed."""
        self._last_completed = self._clock()

    def reset(self) -> None:
        """Forget the last completion; the next ``acquire`` will not wait."""
        self._last_completed = None


__all__ = [
    "RateLimiter",
]
