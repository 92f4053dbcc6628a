"""Rate limiter for outgoing routing API requests.

Public routing servers ask clients to keep a minimum gap between requests.
One limiter is shared per API name so concurrent searches respect it together.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import ClassVar

logger = logging.getLogger(__name__)


class ApiRateLimiter:
    """Spaces outgoing requests to one API at least ``min_delay_seconds`` apart.

    Each caller reserves the next free slot under a lock and then sleeps
    outside of it, so a cancelled caller never blocks the others.
    """

    _instances: ClassVar[dict[str, ApiRateLimiter]] = {}

    def __init__(self, api_name: str, min_delay_seconds: float = 1.0) -> None:
        """Initialize the rate limiter.

        Args:
            api_name: Name of the API (for logging).
            min_delay_seconds: Minimum gap between requests in seconds; 0 disables waiting.
        """
        if min_delay_seconds < 0:
            raise ValueError("min_delay_seconds must not be negative")
        self.api_name = api_name
        self.min_delay_seconds = min_delay_seconds
        self._next_slot: float = 0.0
        self._lock = asyncio.Lock()

    @classmethod
    def get_instance(cls, api_name: str, min_delay_seconds: float = 1.0) -> ApiRateLimiter:
        """Get or create the shared limiter for an API.

        The delay of an existing limiter is kept; the first caller decides it.
        """
        limiter = cls._instances.get(api_name)
        if limiter is None:
            limiter = cls(api_name, min_delay_seconds)
            cls._instances[api_name] = limiter
            logger.info(
                f"Created rate limiter for {api_name} with {min_delay_seconds}s minimum delay"
            )
        return limiter

    @classmethod
    def reset_instances(cls) -> None:
        """Forget all shared limiters."""
        cls._instances.clear()

    async def _reserve_slot(self) -> tuple[float, float]:
        """Reserve the next request slot and return it with how long to wait for it."""
        async with self._lock:
            now = time.monotonic()
            slot = max(now, self._next_slot)
            self._next_slot = slot + self.min_delay_seconds
            return slot, slot - now

    def _release_slot(self, slot: float) -> None:
        """Give back an unused slot if no later caller has reserved after it."""
        if self._next_slot == slot + self.min_delay_seconds:
            self._next_slot = slot

    async def acquire(self) -> None:
        """Wait until this caller's request slot has arrived.

        A caller cancelled while waiting gives its slot back when it was the
        most recent reservation.
        """
        if self.min_delay_seconds == 0:
            return

        slot, wait_time = await self._reserve_slot()
        if wait_time > 0:
            logger.debug(f"{self.api_name}: waiting {wait_time:.2f}s before next request")
            try:
                await asyncio.sleep(wait_time)
            except asyncio.CancelledError:
                self._release_slot(slot)
                raise

    async def __aenter__(self) -> ApiRateLimiter:
        await self.acquire()
        return self

    async def __aexit__(
        self, _exc_type: type | None, _exc_val: Exception | None, _exc_tb: object
    ) -> None:
        return None
