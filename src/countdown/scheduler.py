"""Repeating tick schedulers injected into the countdown state machine."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

TickCallback = Callable[[], None]


class TickHandle(Protocol):
    """Cancel handle for one repeating tick sequence."""
    @property
    def cancelled(self) -> bool:
        ...

    def cancel(self) -> None:
        ...


class TickScheduler(Protocol):
    """Clock plus repeating-callback facility used by `CountdownTimer`."""
    def schedule_repeating(self, interval_ms: int, callback: TickCallback) -> TickHandle:
        ...

    def monotonic(self) -> float:
        ...


class _AsyncioRepeatingHandle:
    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        interval_ms: int,
        callback: TickCallback,
    ):
        self._loop = loop
        self._interval = interval_ms / 1000.0
        self._callback = callback
        self._cancelled = False
        self._next_at = loop.time() + self._interval
        self._timer: Optional[asyncio.TimerHandle] = loop.call_at(self._next_at, self._fire)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self) -> None:
        self._timer = None
        if self._cancelled:
            return
        # Fixed-rate schedule: a late callback does not push later ones back.
        self._next_at = max(self._next_at + self._interval, self._loop.time())
        self._timer = self._loop.call_at(self._next_at, self._fire)
        self._callback()


class AsyncioTickScheduler:
    """Schedules ticks on an asyncio loop; must be driven from that loop's thread."""

    def __init__(self, loop: asyncio.AbstractEventLoop):
        self._loop = loop

    def schedule_repeating(self, interval_ms: int, callback: TickCallback) -> TickHandle:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be greater than zero")
        return _AsyncioRepeatingHandle(self._loop, interval_ms, callback)

    def monotonic(self) -> float:
        return self._loop.time()


@dataclass
class _ManualHandle:
    interval_ms: int
    callback: TickCallback
    next_due_ms: int
    sequence: int
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualTickScheduler:
    """Deterministic scheduler with a fake clock for simulations and tests.

    Time only moves when `advance` is called; due callbacks fire in deadline
    order, each seeing the clock set to its own deadline.
    """

    def __init__(self, start_ms: int = 0):
        self._now_ms = int(start_ms)
        self._handles: list[_ManualHandle] = []
        self._sequence = 0

    @property
    def active_handles(self) -> int:
        return sum(1 for handle in self._handles if not handle.cancelled)

    def schedule_repeating(self, interval_ms: int, callback: TickCallback) -> TickHandle:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be greater than zero")
        self._sequence += 1
        handle = _ManualHandle(
            interval_ms=int(interval_ms),
            callback=callback,
            next_due_ms=self._now_ms + int(interval_ms),
            sequence=self._sequence,
        )
        self._handles.append(handle)
        return handle

    def monotonic(self) -> float:
        return self._now_ms / 1000.0

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing every callback that falls due."""
        target_ms = self._now_ms + int(round(seconds * 1000))
        while True:
            self._handles = [handle for handle in self._handles if not handle.cancelled]
            due = [handle for handle in self._handles if handle.next_due_ms <= target_ms]
            if not due:
                break
            handle = min(due, key=lambda item: (item.next_due_ms, item.sequence))
            self._now_ms = handle.next_due_ms
            handle.next_due_ms += handle.interval_ms
            handle.callback()
        self._now_ms = target_ms
