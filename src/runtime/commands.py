"""Dispatcher that applies websocket UI commands to the countdown timer."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

from contracts.ui_protocol import (
    COMMAND_DELETE,
    COMMAND_DIGIT,
    COMMAND_PAUSE,
    COMMAND_RESUME,
    COMMAND_START,
    COMMAND_STOP,
    TIMER_COMMANDS,
)
from countdown import CountdownTimer, TimerActionResult

from .ui import RuntimeUIPublisher


class CommandError(ValueError):
    """Raised when an inbound UI command is malformed."""


class TimerCommandDispatcher:
    """Routes decoded UI commands to timer operations.

    Timer results reach the UI through the timer's own listeners; the
    dispatcher only reports commands it cannot understand.
    """
    def __init__(
        self,
        *,
        timer: CountdownTimer,
        ui: RuntimeUIPublisher,
        logger: Optional[logging.Logger] = None,
    ):
        self._timer = timer
        self._ui = ui
        self._logger = logger or logging.getLogger("timer_commands")

    def handle_message(self, raw: str) -> Optional[TimerActionResult]:
        """Decode one websocket frame and apply it; malformed frames yield None."""
        try:
            message = _decode_message(raw)
            return self.handle_command(message["command"], message)
        except CommandError as error:
            self._logger.warning("Rejected UI command: %s", error)
            self._ui.publish_error(str(error))
            return None

    def handle_command(
        self,
        command: str,
        arguments: Mapping[str, Any],
    ) -> TimerActionResult:
        if command not in TIMER_COMMANDS:
            raise CommandError(f"Unsupported command: {command}")

        self._logger.debug("Applying UI command: %s", command)
        if command == COMMAND_START:
            return self._timer.start(_optional_seconds(arguments, "duration_seconds"))
        if command == COMMAND_PAUSE:
            return self._timer.pause(_optional_seconds(arguments, "duration_seconds"))
        if command == COMMAND_RESUME:
            return self._timer.resume()
        if command == COMMAND_STOP:
            return self._timer.stop()
        if command == COMMAND_DIGIT:
            return self._timer.enter_digit(_parse_digit(arguments.get("digit")))
        if command == COMMAND_DELETE:
            return self._timer.delete_digit()
        raise CommandError(f"Unsupported command: {command}")


def _decode_message(raw: str) -> dict[str, Any]:
    try:
        message = json.loads(raw)
    except (TypeError, ValueError) as error:
        raise CommandError(f"Invalid JSON: {error}") from error

    if not isinstance(message, dict):
        raise CommandError("Command message must be a JSON object")

    command = message.get("command")
    if not isinstance(command, str) or not command.strip():
        raise CommandError("Command message requires a 'command' string")
    message["command"] = command.strip().lower()
    return message


def _parse_digit(value: Any) -> int:
    if isinstance(value, bool):
        raise CommandError("digit must be an integer in [0, 9]")
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if not isinstance(value, int) or not 0 <= value <= 9:
        raise CommandError("digit must be an integer in [0, 9]")
    return value


def _optional_seconds(arguments: Mapping[str, Any], field: str) -> Optional[int]:
    value = arguments.get(field)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise CommandError(f"{field} must be an integer")
    if value < 0:
        raise CommandError(f"{field} must not be negative")
    return value
