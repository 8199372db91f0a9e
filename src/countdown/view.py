"""Pure view model for the single timer screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .constants import (
    ACTION_PAUSE,
    ACTION_RESUME,
    ACTION_START,
    ACTION_STOP,
)
from .service import TimerState

KEY_DELETE = "del"
KEYPAD_ROWS: tuple[tuple[str, ...], ...] = (
    ("1", "2", "3"),
    ("4", "5", "6"),
    ("7", "8", "9"),
    ("0", KEY_DELETE),
)


@dataclass(frozen=True)
class ControlView:
    """One button of the control row."""
    name: str
    label: str
    enabled: bool = True


@dataclass(frozen=True)
class TimerView:
    """Everything the screen shows for one timer state."""
    phase: str
    display: str
    duration_seconds: int
    minutes: int
    seconds: int
    controls: tuple[ControlView, ...]
    keypad_visible: bool
    keypad: tuple[tuple[str, ...], ...]

    def control(self, name: str) -> Optional[ControlView]:
        for control in self.controls:
            if control.name == name:
                return control
        return None

    def to_payload(self) -> dict[str, Any]:
        return {
            "phase": self.phase,
            "display": self.display,
            "duration_seconds": self.duration_seconds,
            "minutes": self.minutes,
            "seconds": self.seconds,
            "controls": [
                {"name": control.name, "label": control.label, "enabled": control.enabled}
                for control in self.controls
            ],
            "keypad_visible": self.keypad_visible,
            "keypad": [list(row) for row in self.keypad],
        }


def render_timer_view(state: TimerState) -> TimerView:
    """Render a timer state into display text, controls, and keypad."""
    duration = state.duration
    if state.is_running:
        controls: tuple[ControlView, ...] = (ControlView(ACTION_PAUSE, "pause"),)
    elif state.is_paused:
        controls = (
            ControlView(ACTION_RESUME, "resume"),
            ControlView(ACTION_STOP, "stop"),
        )
    else:
        controls = (ControlView(ACTION_START, "start", enabled=duration.value > 0),)

    return TimerView(
        phase=state.phase,
        display=duration.format(),
        duration_seconds=duration.value,
        minutes=duration.minutes,
        seconds=duration.seconds,
        controls=controls,
        keypad_visible=state.is_stopped,
        keypad=KEYPAD_ROWS if state.is_stopped else (),
    )
