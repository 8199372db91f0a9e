"""Single-threaded countdown state machine with keypad entry."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Literal, Optional

from .constants import (
    ACTION_COMPLETED,
    ACTION_DELETE_DIGIT,
    ACTION_ENTER_DIGIT,
    ACTION_PAUSE,
    ACTION_RESUME,
    ACTION_START,
    ACTION_STOP,
    ACTION_TICK,
    PHASE_PAUSED,
    PHASE_RUNNING,
    PHASE_STOPPED,
    REASON_COMPLETED,
    REASON_EDITED,
    REASON_ENTRY_LIMIT,
    REASON_INVALID_DIGIT,
    REASON_INVALID_DURATION,
    REASON_NOT_PAUSED,
    REASON_NOT_RUNNING,
    REASON_NOT_STOPPED,
    REASON_PAUSED,
    REASON_RESUMED,
    REASON_STARTED,
    REASON_STOPPED,
    REASON_TICK,
    TICK_INTERVAL_MS,
)
from .duration import Duration
from .keypad import delete_digit, enter_digit
from .scheduler import TickHandle, TickScheduler

TimerPhase = Literal["stopped", "running", "paused"]
TimerAction = Literal[
    "start",
    "pause",
    "resume",
    "stop",
    "enter_digit",
    "delete_digit",
    "tick",
    "completed",
]


@dataclass(frozen=True)
class TimerState:
    """Tagged timer state: one phase plus the duration it carries."""
    phase: TimerPhase
    duration: Duration

    @classmethod
    def stopped(cls, seconds: int = 0) -> "TimerState":
        return cls(phase=PHASE_STOPPED, duration=Duration(seconds))

    @classmethod
    def running(cls, seconds: int) -> "TimerState":
        return cls(phase=PHASE_RUNNING, duration=Duration(seconds))

    @classmethod
    def paused(cls, seconds: int) -> "TimerState":
        return cls(phase=PHASE_PAUSED, duration=Duration(seconds))

    @property
    def is_stopped(self) -> bool:
        return self.phase == PHASE_STOPPED

    @property
    def is_running(self) -> bool:
        return self.phase == PHASE_RUNNING

    @property
    def is_paused(self) -> bool:
        return self.phase == PHASE_PAUSED


@dataclass(frozen=True)
class TimerActionResult:
    """Result envelope returned after applying a timer action or tick."""
    action: TimerAction
    accepted: bool
    reason: str
    state: TimerState


TimerListener = Callable[[TimerActionResult], None]


class CountdownTimer:
    """Stopped/running/paused countdown driven by an injected tick scheduler.

    All methods must be called from the thread that runs the scheduler's
    callbacks; the timer keeps no locks of its own.
    """

    def __init__(
        self,
        *,
        scheduler: TickScheduler,
        logger: Optional[logging.Logger] = None,
    ):
        self._scheduler = scheduler
        self._logger = logger or logging.getLogger("countdown")
        self._state = TimerState.stopped()
        self._tick_handle: Optional[TickHandle] = None
        self._tick_generation = 0
        self._deadline: Optional[float] = None
        self._listeners: list[TimerListener] = []

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def has_active_tick(self) -> bool:
        return self._tick_handle is not None and not self._tick_handle.cancelled

    def subscribe(self, listener: TimerListener) -> Callable[[], None]:
        """Register a listener for every result; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start(self, duration_seconds: Optional[int] = None) -> TimerActionResult:
        seconds = self._state.duration.value if duration_seconds is None else int(duration_seconds)
        if seconds <= 0:
            return self._reject(ACTION_START, REASON_INVALID_DURATION)

        self._run_from(seconds)
        self._logger.info("Timer started: remaining=%ss", seconds)
        return self._accept(ACTION_START, REASON_STARTED)

    def pause(self, duration_seconds: Optional[int] = None) -> TimerActionResult:
        if self._state.is_stopped:
            return self._reject(ACTION_PAUSE, REASON_NOT_RUNNING)

        seconds = self._state.duration.value if duration_seconds is None else int(duration_seconds)
        if seconds <= 0:
            return self._reject(ACTION_PAUSE, REASON_INVALID_DURATION)

        self._cancel_tick()
        self._state = TimerState.paused(seconds)
        self._logger.info("Timer paused: remaining=%ss", seconds)
        return self._accept(ACTION_PAUSE, REASON_PAUSED)

    def resume(self) -> TimerActionResult:
        if not self._state.is_paused:
            return self._reject(ACTION_RESUME, REASON_NOT_PAUSED)

        seconds = self._state.duration.value
        if seconds <= 0:
            return self._reject(ACTION_RESUME, REASON_INVALID_DURATION)

        self._run_from(seconds)
        self._logger.info("Timer resumed: remaining=%ss", seconds)
        return self._accept(ACTION_RESUME, REASON_RESUMED)

    def stop(self) -> TimerActionResult:
        self._cancel_tick()
        self._state = TimerState.stopped()
        self._logger.info("Timer stopped")
        return self._accept(ACTION_STOP, REASON_STOPPED)

    def enter_digit(self, digit: int) -> TimerActionResult:
        if not self._state.is_stopped:
            return self._reject(ACTION_ENTER_DIGIT, REASON_NOT_STOPPED)
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
            return self._reject(ACTION_ENTER_DIGIT, REASON_INVALID_DIGIT)

        edited = enter_digit(self._state.duration, digit)
        if edited is None:
            return self._reject(ACTION_ENTER_DIGIT, REASON_ENTRY_LIMIT)

        self._state = TimerState(phase=PHASE_STOPPED, duration=edited)
        return self._accept(ACTION_ENTER_DIGIT, REASON_EDITED)

    def delete_digit(self) -> TimerActionResult:
        if not self._state.is_stopped:
            return self._reject(ACTION_DELETE_DIGIT, REASON_NOT_STOPPED)

        self._state = TimerState(
            phase=PHASE_STOPPED,
            duration=delete_digit(self._state.duration),
        )
        return self._accept(ACTION_DELETE_DIGIT, REASON_EDITED)

    def dispose(self) -> None:
        """Cancel any pending tick and drop listeners."""
        self._cancel_tick()
        self._listeners.clear()

    def _run_from(self, seconds: int) -> None:
        self._cancel_tick()
        self._deadline = self._scheduler.monotonic() + seconds
        generation = self._tick_generation
        self._state = TimerState.running(seconds)
        self._tick_handle = self._scheduler.schedule_repeating(
            TICK_INTERVAL_MS,
            lambda: self._on_tick(generation),
        )

    def _on_tick(self, generation: int) -> None:
        if generation != self._tick_generation or not self._state.is_running:
            return
        if self._deadline is None:
            return

        remaining_ms = int(round((self._deadline - self._scheduler.monotonic()) * 1000))
        remaining = max(0, -(-remaining_ms // 1000))
        if remaining <= 0:
            self._cancel_tick()
            self._state = TimerState.stopped()
            self._logger.info("Timer completed")
            self._accept(ACTION_COMPLETED, REASON_COMPLETED)
            return

        self._state = TimerState.running(remaining)
        self._logger.debug("Timer tick: remaining=%ss", remaining)
        self._accept(ACTION_TICK, REASON_TICK)

    def _cancel_tick(self) -> None:
        # Bumping the generation also retires a callback that is already queued.
        self._tick_generation += 1
        self._deadline = None
        if self._tick_handle is not None:
            self._tick_handle.cancel()
            self._tick_handle = None

    def _accept(self, action: TimerAction, reason: str) -> TimerActionResult:
        return self._emit(
            TimerActionResult(action=action, accepted=True, reason=reason, state=self._state)
        )

    def _reject(self, action: TimerAction, reason: str) -> TimerActionResult:
        self._logger.debug("Timer %s rejected: reason=%s", action, reason)
        return self._emit(
            TimerActionResult(action=action, accepted=False, reason=reason, state=self._state)
        )

    def _emit(self, result: TimerActionResult) -> TimerActionResult:
        for listener in tuple(self._listeners):
            try:
                listener(result)
            except Exception as error:
                self._logger.error("Timer listener failed: %s", error, exc_info=True)
        return result
