"""Launcher for the countdown timer page and its websocket server."""

import logging
import signal
import sys
from pathlib import Path
from typing import Callable

if __package__ is None or __package__ == "":
    sys.path.insert(0, str(Path(__file__).resolve().parent))

from app_config import AppConfigurationError, load_app_config
from runtime import RuntimeBootstrap, RuntimeEngine, RuntimeHooks
from server import ServerConfigurationError, UIServer, UIServerConfig


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("timer_app")


def setup_signal_handlers(request_shutdown: Callable[[], None]) -> None:
    """Set up graceful shutdown on SIGTERM and SIGINT."""
    logger = logging.getLogger("timer_app")

    def signal_handler(signum: int, frame) -> None:
        del frame
        logger.info("Signal %s received, stopping.", signal.Signals(signum).name)
        request_shutdown()

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)


def main() -> int:
    """Run the timer server until interrupted."""
    logger = setup_logging(level=logging.INFO)

    try:
        app_config = load_app_config()
        server_config = UIServerConfig.from_settings(app_config.ui_server)
    except (AppConfigurationError, ServerConfigurationError) as error:
        logger.error("Configuration error: %s", error)
        return 1

    logging.getLogger().setLevel(app_config.logging.level)

    if not server_config.enabled:
        logger.info("UI server disabled via ui_server.enabled=false; nothing to run")
        return 0

    ui_server = UIServer(config=server_config, logger=logging.getLogger("ui_server"))
    engine = RuntimeEngine(
        RuntimeBootstrap(
            logger=logger,
            app_config=app_config,
            ui_server=ui_server,
            hooks=RuntimeHooks(setup_signal_handlers=setup_signal_handlers),
        )
    )
    return engine.run()


if __name__ == "__main__":
    raise SystemExit(main())
