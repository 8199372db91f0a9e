"""State, action, and reason constants used by the countdown state machine."""

from __future__ import annotations

TICK_INTERVAL_MS = 1000
MAX_ENTRY_MINUTES = 9

PHASE_STOPPED = "stopped"
PHASE_RUNNING = "running"
PHASE_PAUSED = "paused"

ACTION_START = "start"
ACTION_PAUSE = "pause"
ACTION_RESUME = "resume"
ACTION_STOP = "stop"
ACTION_ENTER_DIGIT = "enter_digit"
ACTION_DELETE_DIGIT = "delete_digit"

ACTION_SYNC = "sync"
ACTION_TICK = "tick"
ACTION_COMPLETED = "completed"

REASON_STARTED = "started"
REASON_PAUSED = "paused"
REASON_RESUMED = "resumed"
REASON_STOPPED = "stopped"
REASON_EDITED = "edited"
REASON_TICK = "tick"
REASON_COMPLETED = "completed"
REASON_STARTUP = "startup"

REASON_INVALID_DURATION = "invalid_duration"
REASON_INVALID_DIGIT = "invalid_digit"
REASON_ENTRY_LIMIT = "entry_limit"
REASON_NOT_RUNNING = "not_running"
REASON_NOT_PAUSED = "not_paused"
REASON_NOT_STOPPED = "not_stopped"
