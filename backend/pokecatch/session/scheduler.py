"""Single-loop event scheduler.

Entries sit in a priority queue ordered by due time, then by the order
they were scheduled. run() pops one entry at a time, sleeps the clock
until it is due and hands the event to a dispatch callback. Interval
entries are re-armed before dispatch, so a dispatch that cancels its own
interval stops it cleanly.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from pokecatch.session.clock import Clock

logger = structlog.get_logger()

# Callback type: receives the event payload that was scheduled.
DispatchCallback = Callable[[Any], None]


@dataclass(order=True)
class ScheduledEntry:
    due_ms: int
    sequence: int
    handle: int = field(compare=False)
    event: Any = field(compare=False)
    interval_ms: int | None = field(default=None, compare=False)


class EventScheduler:
    """Explicit event queue driven by an injectable clock."""

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._queue: list[ScheduledEntry] = []
        self._sequence = itertools.count()
        self._handles = itertools.count(1)
        self._cancelled: set[int] = set()

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def pending_count(self) -> int:
        """Number of queued entries that have not been cancelled."""
        return sum(1 for entry in self._queue if entry.handle not in self._cancelled)

    def schedule(self, delay_ms: int, event: object) -> int:
        """Queue a one-shot event delay_ms from now. Returns a handle for cancel()."""
        return self._push(delay_ms, event, interval_ms=None)

    def schedule_interval(self, interval_ms: int, event: object) -> int:
        """Queue an event that repeats every interval_ms until cancelled."""
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms}")
        return self._push(interval_ms, event, interval_ms=interval_ms)

    def cancel(self, handle: int) -> None:
        """Drop a scheduled entry. Unknown or already-fired handles are ignored."""
        if any(entry.handle == handle for entry in self._queue):
            self._cancelled.add(handle)

    async def run(self, dispatch: DispatchCallback) -> None:
        """Deliver queued events in order until the queue is empty."""
        while self._queue:
            entry = heapq.heappop(self._queue)
            if entry.handle in self._cancelled:
                self._cancelled.discard(entry.handle)
                continue

            await self._clock.sleep_until(entry.due_ms)

            if entry.interval_ms is not None:
                heapq.heappush(
                    self._queue,
                    ScheduledEntry(
                        due_ms=entry.due_ms + entry.interval_ms,
                        sequence=next(self._sequence),
                        handle=entry.handle,
                        event=entry.event,
                        interval_ms=entry.interval_ms,
                    ),
                )

            try:
                dispatch(entry.event)
            except Exception:
                logger.exception("scheduled event dispatch failed", event=repr(entry.event))
                raise

    def _push(self, delay_ms: int, event: object, *, interval_ms: int | None) -> int:
        if delay_ms < 0:
            raise ValueError(f"delay must not be negative, got {delay_ms}")
        handle = next(self._handles)
        heapq.heappush(
            self._queue,
            ScheduledEntry(
                due_ms=self._clock.now_ms() + delay_ms,
                sequence=next(self._sequence),
                handle=handle,
                event=event,
                interval_ms=interval_ms,
            ),
        )
        return handle
