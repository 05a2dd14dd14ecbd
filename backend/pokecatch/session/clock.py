"""
Clocks driving the event scheduler.

MonotonicClock waits on the asyncio loop in real time. VirtualClock jumps
straight to each deadline, so a full simulation runs instantly and
deterministically in tests.
"""

import asyncio
import time
from typing import Protocol


class Clock(Protocol):
    def now_ms(self) -> int:
        """Return the current time in epoch milliseconds."""
        ...

    async def sleep_until(self, deadline_ms: int) -> None:
        """Return once now_ms() has reached deadline_ms."""
        ...


class MonotonicClock:
    """Wall-clock epoch milliseconds, advanced by time.monotonic so it never runs backwards."""

    def __init__(self) -> None:
        self._epoch_ms = int(time.time() * 1000)
        self._started = time.monotonic()

    def now_ms(self) -> int:
        return self._epoch_ms + int((time.monotonic() - self._started) * 1000)

    async def sleep_until(self, deadline_ms: int) -> None:
        remaining = deadline_ms - self.now_ms()
        if remaining > 0:
            await asyncio.sleep(remaining / 1000)


class VirtualClock:
    """Clock whose time only moves when the scheduler asks it to."""

    def __init__(self, start_ms: int = 0) -> None:
        self._now_ms = start_ms

    def now_ms(self) -> int:
        return self._now_ms

    def advance(self, delta_ms: int) -> None:
        if delta_ms < 0:
            raise ValueError(f"cannot move virtual time backwards by {delta_ms} ms")
        self._now_ms += delta_ms

    async def sleep_until(self, deadline_ms: int) -> None:
        self._now_ms = max(self._now_ms, deadline_ms)
