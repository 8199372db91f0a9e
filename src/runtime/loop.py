"""Runtime lifecycle: UI server startup, timer session wiring, and shutdown."""

from __future__ import annotations

import asyncio
import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, TypeVar

from app_config import AppConfig
from countdown import AsyncioTickScheduler

from .session import TimerSession
from .ui import RuntimeUIPublisher

T = TypeVar("T")


class RuntimeUIServer(Protocol):
    """Subset of `server.UIServer` used by the runtime engine."""
    @property
    def loop(self) -> Optional[asyncio.AbstractEventLoop]:
        ...

    @property
    def is_running(self) -> bool:
        ...

    def start(self, timeout_seconds: float = 5.0) -> None:
        ...

    def stop(self, timeout_seconds: float = 5.0) -> None:
        ...

    def call_in_loop(self, fn: Callable[[], T], timeout_seconds: float = 5.0) -> T:
        ...

    def set_message_handler(self, handler: Optional[Callable[[str], None]]) -> None:
        ...

    def publish(self, event_type: str, **payload: Any) -> None:
        ...


@dataclass(frozen=True)
class RuntimeHooks:
    """Injectable lifecycle hooks used by runtime startup and shutdown flow."""
    setup_signal_handlers: Callable[[Callable[[], None]], None]


@dataclass(frozen=True)
class RuntimeBootstrap:
    """Dependency bundle required to construct the runtime engine."""
    logger: logging.Logger
    app_config: AppConfig
    ui_server: RuntimeUIServer
    hooks: RuntimeHooks


class RuntimeEngine:
    """Runs the UI server with one timer session until shutdown is requested."""
    def __init__(self, bootstrap: RuntimeBootstrap, *, poll_interval_seconds: float = 0.25):
        self._bootstrap = bootstrap
        self._logger = bootstrap.logger
        self._ui = RuntimeUIPublisher(bootstrap.ui_server)
        self._shutdown_requested = threading.Event()
        self._poll_interval_seconds = poll_interval_seconds
        self._session: Optional[TimerSession] = None

    def request_shutdown(self) -> None:
        self._shutdown_requested.set()

    def run(self) -> int:
        ui_server = self._bootstrap.ui_server
        source = self._bootstrap.app_config.source_file or "built-in defaults"
        self._logger.info("Using configuration from %s", source)
        try:
            ui_server.start()
            self._session = ui_server.call_in_loop(self._open_session)
            ui_server.set_message_handler(self._session.handle_message)
            self._bootstrap.hooks.setup_signal_handlers(self.request_shutdown)
            self._logger.info("Timer ready. Press Ctrl+C to stop.")

            while not self._shutdown_requested.wait(self._poll_interval_seconds):
                if not ui_server.is_running:
                    self._logger.error("UI server stopped unexpectedly")
                    return 1
            return 0

        except KeyboardInterrupt:
            self._logger.info("Shutdown requested by keyboard interrupt.")
            return 0
        except Exception as error:
            self._logger.error("Unexpected error: %s", error, exc_info=True)
            return 1
        finally:
            self._shutdown()

    def _open_session(self) -> TimerSession:
        loop = self._bootstrap.ui_server.loop
        if loop is None:
            raise RuntimeError("UI server loop is not available")
        return TimerSession(
            scheduler=AsyncioTickScheduler(loop),
            ui=self._ui,
            logger=logging.getLogger("timer_session"),
        )

    def _shutdown(self) -> None:
        ui_server = self._bootstrap.ui_server
        ui_server.set_message_handler(None)

        session = self._session
        self._session = None
        if session is not None and ui_server.is_running:
            try:
                ui_server.call_in_loop(session.close)
            except Exception as error:
                self._logger.error("Error closing timer session: %s", error, exc_info=True)

        self._logger.info("Stopping UI server...")
        try:
            ui_server.stop(timeout_seconds=5.0)
        except Exception as error:
            self._logger.error("Error stopping UI server: %s", error, exc_info=True)
