"""Web UI websocket event and command constants."""

from __future__ import annotations

# Websocket event types
EVENT_HELLO = "hello"
EVENT_TIMER = "timer"
EVENT_ERROR = "error"

# Inbound UI commands
COMMAND_START = "start"
COMMAND_PAUSE = "pause"
COMMAND_RESUME = "resume"
COMMAND_STOP = "stop"
COMMAND_DIGIT = "digit"
COMMAND_DELETE = "delete"

TIMER_COMMANDS: frozenset[str] = frozenset(
    {
        COMMAND_START,
        COMMAND_PAUSE,
        COMMAND_RESUME,
        COMMAND_STOP,
        COMMAND_DIGIT,
        COMMAND_DELETE,
    }
)

STICKY_EVENT_TYPES: frozenset[str] = frozenset({EVENT_TIMER})

STICKY_EVENT_ORDER: tuple[str, ...] = (EVENT_TIMER,)
