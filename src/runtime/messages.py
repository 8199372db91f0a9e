"""Status and rejection text shown under the timer display."""

from __future__ import annotations

from countdown import TimerState
from countdown.constants import (
    ACTION_COMPLETED,
    ACTION_PAUSE,
    ACTION_RESUME,
    ACTION_START,
    ACTION_STOP,
    MAX_ENTRY_MINUTES,
    REASON_ENTRY_LIMIT,
    REASON_INVALID_DIGIT,
    REASON_INVALID_DURATION,
    REASON_NOT_PAUSED,
    REASON_NOT_RUNNING,
    REASON_NOT_STOPPED,
)


def timer_status_message(state: TimerState) -> str:
    """Build status text for the current timer state."""
    if state.is_running:
        return f"Running ({state.duration.format()} remaining)"
    if state.is_paused:
        return f"Paused ({state.duration.format()} remaining)"
    if state.duration.value > 0:
        return "Ready"
    return "Enter a time"


def default_timer_text(action: str, state: TimerState) -> str:
    """Return text for accepted timer actions; empty when the display says enough."""
    if action == ACTION_START:
        return f"Timer started with {state.duration.format()}."
    if action == ACTION_RESUME:
        return "Timer resumed."
    if action == ACTION_PAUSE:
        return "Timer paused."
    if action == ACTION_STOP:
        return "Timer stopped."
    if action == ACTION_COMPLETED:
        return "Time is up."
    return ""


def timer_rejection_text(action: str, reason: str) -> str:
    """Return text for timer actions refused in the current state."""
    if reason == REASON_INVALID_DURATION:
        return "Enter a time before starting the timer."
    if reason == REASON_NOT_RUNNING and action == ACTION_PAUSE:
        return "The timer is not running."
    if reason == REASON_NOT_PAUSED and action == ACTION_RESUME:
        return "The timer is not paused."
    if reason == REASON_NOT_STOPPED:
        return "Stop the timer before editing the time."
    if reason == REASON_ENTRY_LIMIT:
        return f"No more digits fit once the minutes pass {MAX_ENTRY_MINUTES}."
    if reason == REASON_INVALID_DIGIT:
        return "Only the digits 0-9 can be entered."
    return "That action is not possible right now."
