"""Explicit per-screen timer session: state machine plus its UI wiring."""

from __future__ import annotations

import logging
from typing import Optional

from countdown import CountdownTimer, TickScheduler, TimerActionResult

from .commands import TimerCommandDispatcher
from .ui import RuntimeUIPublisher


class TimerSession:
    """Owns one `CountdownTimer` from `Stopped(0)` until `close()`.

    Construct, use, and close the session on the thread that drives the
    scheduler.
    """
    def __init__(
        self,
        *,
        scheduler: TickScheduler,
        ui: RuntimeUIPublisher,
        logger: Optional[logging.Logger] = None,
    ):
        self._logger = logger or logging.getLogger("timer_session")
        self._ui = ui
        self._timer = CountdownTimer(
            scheduler=scheduler,
            logger=logging.getLogger("countdown"),
        )
        self._unsubscribe = self._timer.subscribe(ui.publish_timer_update)
        self._dispatcher = TimerCommandDispatcher(
            timer=self._timer,
            ui=ui,
            logger=logging.getLogger("timer_commands"),
        )
        self._closed = False
        ui.publish_timer_view(self._timer.state)
        self._logger.info("Timer session opened")

    @property
    def timer(self) -> CountdownTimer:
        return self._timer

    @property
    def closed(self) -> bool:
        return self._closed

    def handle_message(self, raw: str) -> Optional[TimerActionResult]:
        if self._closed:
            self._logger.debug("Ignoring UI message for closed session")
            return None
        return self._dispatcher.handle_message(raw)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._unsubscribe()
        self._timer.dispose()
        self._logger.info("Timer session closed")
