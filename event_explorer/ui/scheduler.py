"""Cancellable single-shot timers used by auto-play."""

from __future__ import annotations

import threading
from typing import Callable, Protocol


class ScheduledTask(Protocol):
    """Handle returned at schedule time; cancelling it prevents the callback."""

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledTask: ...


class TimerScheduler:
    """Runs each callback once on a daemon :class:`threading.Timer`."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer

__all__ = ["ScheduledTask", "Scheduler", "TimerScheduler"]
