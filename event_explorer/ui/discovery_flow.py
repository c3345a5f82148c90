"""
Discovery flow: step-by-step tour of a discovery path with auto-play.

The flow is ``idle`` until a non-empty path has been fetched, then ``active``.
Every step change while active hands the current location to
``on_select_location`` so the map can fly to it.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from ..config import AUTOPLAY_INTERVAL_SECONDS
from ..errors import ExplorerError
from ..models.event import Event
from ..utils.text_cleaning import normalize_keyword
from .scheduler import ScheduledTask, Scheduler, TimerScheduler

logger = logging.getLogger(__name__)

EMPTY_KEYWORD_MESSAGE = "Please enter a keyword to start discovery"
NO_EVENTS_MESSAGE = "No events found for this keyword. Try a different one."
START_FAILED_MESSAGE = "Failed to start discovery. Please try again."


class FlowStatus(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"


class DiscoveryFlow:
    """
    State machine behind the discovery stepper.

    Args:
        fetch_path: Returns the discovery path for a keyword
            (e.g. ``ExplorerAPIClient.get_discovery_path``).
        on_select_location: Receives ``{lat, long, title, summary, url, date}``
            whenever the current stop changes.
        scheduler: Source of cancellable single-shot timers.
        interval: Seconds between auto-play steps.
    """

    def __init__(
        self,
        fetch_path: Callable[[str], List[Event]],
        on_select_location: Callable[[Dict[str, Any]], None],
        scheduler: Optional[Scheduler] = None,
        interval: float = AUTOPLAY_INTERVAL_SECONDS,
    ):
        self._fetch_path = fetch_path
        self._on_select_location = on_select_location
        self._scheduler = scheduler if scheduler is not None else TimerScheduler()
        self._interval = interval
        self._lock = threading.RLock()

        self.status = FlowStatus.IDLE
        self.keyword = ""
        self.path: List[Event] = []
        self.active_step = 0
        self.error: Optional[str] = None
        self.is_loading = False

        self._timer: Optional[ScheduledTask] = None
        self._generation = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self, keyword: str) -> bool:
        """Fetch a path for *keyword* and activate the flow; ``True`` on success."""
        keyword = normalize_keyword(keyword)
        with self._lock:
            if not keyword:
                self.error = EMPTY_KEYWORD_MESSAGE
                return False

            self._cancel_timer()
            self.keyword = keyword
            self.is_loading = True
            self.error = None
            self.status = FlowStatus.IDLE
            self.path = []
            self.active_step = 0

        try:
            results = self._fetch_path(keyword)
        except ExplorerError as exc:
            logger.error("Error starting discovery: %s", exc)
            with self._lock:
                self.error = START_FAILED_MESSAGE
                self.is_loading = False
            return False

        with self._lock:
            self.is_loading = False
            if not results:
                self.error = NO_EVENTS_MESSAGE
                return False

            self.path = list(results)
            self.active_step = 0
            self.status = FlowStatus.ACTIVE
            self._notify()
        return True

    def new_discovery(self) -> None:
        """Leave the current tour and return to keyword entry."""
        with self._lock:
            self._cancel_timer()
            self.status = FlowStatus.IDLE

    def close(self) -> None:
        """Tear down: cancel any pending auto-play step."""
        with self._lock:
            self._cancel_timer()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self.status is FlowStatus.ACTIVE

    @property
    def current(self) -> Optional[Event]:
        if not self.is_active or not self.path:
            return None
        return self.path[self.active_step]

    @property
    def is_last_step(self) -> bool:
        return bool(self.path) and self.active_step == len(self.path) - 1

    @property
    def can_reset(self) -> bool:
        """Reset is only offered on the last stop."""
        return self.is_active and self.is_last_step

    def next(self) -> bool:
        with self._lock:
            if not self.is_active or self.active_step >= len(self.path) - 1:
                return False
            self._go_to(self.active_step + 1)
            return True

    def back(self) -> bool:
        with self._lock:
            if not self.is_active or self.active_step <= 0:
                return False
            self._go_to(self.active_step - 1)
            return True

    def reset(self) -> bool:
        with self._lock:
            if not self.can_reset:
                return False
            self._go_to(0)
            return True

    # ------------------------------------------------------------------
    # Auto-play
    # ------------------------------------------------------------------

    @property
    def is_autoplaying(self) -> bool:
        return self._timer is not None

    def start_autoplay(self) -> bool:
        """Advance one stop every ``interval`` seconds until the last one."""
        with self._lock:
            if not self.is_active or self.is_last_step:
                return False
            self._cancel_timer()
            self._schedule_tick()
            return True

    def stop_autoplay(self) -> None:
        with self._lock:
            self._cancel_timer()

    def _schedule_tick(self) -> None:
        generation = self._generation
        self._timer = self._scheduler.schedule(self._interval, lambda: self._tick(generation))

    def _tick(self, generation: int) -> None:
        with self._lock:
            # A cancelled handle may still fire if it raced with cancel().
            if generation != self._generation or self._timer is None:
                return
            self._timer = None
            if not self.is_active or self.is_last_step:
                return
            self._go_to(self.active_step + 1)
            if not self.is_last_step:
                self._schedule_tick()

    def _cancel_timer(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    # ------------------------------------------------------------------

    def _go_to(self, step: int) -> None:
        self.active_step = step
        self._notify()

    def _notify(self) -> None:
        event = self.path[self.active_step]
        self._on_select_location(event.to_location())

__all__ = [
    "DiscoveryFlow",
    "FlowStatus",
    "EMPTY_KEYWORD_MESSAGE",
    "NO_EVENTS_MESSAGE",
    "START_FAILED_MESSAGE",
]
