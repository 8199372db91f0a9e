"""Runtime engine exports."""

from .loop import RuntimeBootstrap, RuntimeEngine, RuntimeHooks
from .session import TimerSession

__all__ = ["RuntimeBootstrap", "RuntimeEngine", "RuntimeHooks", "TimerSession"]
