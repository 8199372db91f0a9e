from __future__ import annotations

from typing import Any, Optional, Protocol

from contracts.ui_protocol import EVENT_ERROR, EVENT_TIMER
from countdown import TimerActionResult, TimerState, render_timer_view
from countdown.constants import ACTION_SYNC, REASON_STARTUP

from .messages import default_timer_text, timer_rejection_text, timer_status_message


class UIServerLike(Protocol):
    def publish(self, event_type: str, **payload: Any) -> None:
        ...


class RuntimeUIPublisher:
    """Renders timer states and pushes them to the UI server, if any."""
    def __init__(self, ui_server: Optional[UIServerLike]):
        self._ui_server = ui_server

    def publish(self, event_type: str, **payload: Any) -> None:
        if self._ui_server:
            self._ui_server.publish(event_type, **payload)

    def publish_error(self, message: str, **payload: Any) -> None:
        self.publish(EVENT_ERROR, message=message, **payload)

    def publish_timer_view(
        self,
        state: TimerState,
        *,
        action: str = ACTION_SYNC,
        reason: str = REASON_STARTUP,
    ) -> None:
        self._publish_timer(state, action=action, accepted=True, reason=reason)

    def publish_timer_update(self, result: TimerActionResult) -> None:
        if result.accepted:
            message = default_timer_text(result.action, result.state)
        else:
            message = timer_rejection_text(result.action, result.reason)
        self._publish_timer(
            result.state,
            action=result.action,
            accepted=result.accepted,
            reason=result.reason,
            message=message,
        )

    def _publish_timer(
        self,
        state: TimerState,
        *,
        action: str,
        accepted: bool,
        reason: str = "",
        message: Optional[str] = None,
    ) -> None:
        payload: dict[str, Any] = {
            "action": action,
            "accepted": accepted,
            "status": timer_status_message(state),
            **render_timer_view(state).to_payload(),
        }
        if reason:
            payload["reason"] = reason
        if message:
            payload["message"] = message
        self.publish(EVENT_TIMER, **payload)
