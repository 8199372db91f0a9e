from .duration import Duration
from .scheduler import (
    AsyncioTickScheduler,
    ManualTickScheduler,
    TickHandle,
    TickScheduler,
)
from .service import (
    CountdownTimer,
    TimerAction,
    TimerActionResult,
    TimerPhase,
    TimerState,
)
from .view import ControlView, TimerView, render_timer_view

__all__ = [
    "AsyncioTickScheduler",
    "ControlView",
    "CountdownTimer",
    "Duration",
    "ManualTickScheduler",
    "TickHandle",
    "TickScheduler",
    "TimerAction",
    "TimerActionResult",
    "TimerPhase",
    "TimerState",
    "TimerView",
    "render_timer_view",
]
