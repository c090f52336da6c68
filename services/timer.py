# services/timer.py
from __future__ import annotations

from typing import Optional

from kivy.clock import Clock, ClockEvent
from kivy.logger import Logger

from services.settings import Settings


class DessertTimer:
    """
    Counts elapsed seconds while the app is in the foreground.

    The app starts it from on_start/on_resume and stops it from
    on_pause/on_stop. seconds_count is kept across recreation by the app,
    not by the progression engine.
    """

    def __init__(self, seconds_count: int = 0, interval: float = Settings.TIMER_INTERVAL_S) -> None:
        if seconds_count < 0:
            raise ValueError("seconds_count must be >= 0.")
        self.seconds_count = seconds_count
        self.interval = interval
        self._event: Optional[ClockEvent] = None

    @property
    def running(self) -> bool:
        return self._event is not None

    def start(self) -> None:
        """Begin ticking; no-op if already running."""
        if self._event is None:
            self._event = Clock.schedule_interval(self._tick, self.interval)

    def stop(self) -> None:
        """Stop ticking; no-op if not running."""
        if self._event is not None:
            self._event.cancel()
            self._event = None

    def _tick(self, dt: float) -> None:
        self.seconds_count += 1
        Logger.info(f"{Settings.LOG_TAG}: Timer is at : {self.seconds_count}")
