# services/instance_state.py
from __future__ import annotations

from kivy.logger import Logger

from models.snapshot import InstanceState
from services.engine import ProgressionEngine
from services.persistence import Persistence
from services.settings import Settings
from services.timer import DessertTimer


class InstanceStateKeeper:
    """
    Carries the engine counters and the timer seconds across a pause and
    rebuild of the app.

    save() runs from on_pause, restore() from build() before the first tap,
    clear() from on_stop so nothing outlives a clean exit.
    """

    def __init__(self, engine: ProgressionEngine, timer: DessertTimer, persistence: Persistence) -> None:
        self.engine = engine
        self.timer = timer
        self.persistence = persistence

    def save(self) -> bool:
        state = InstanceState(snapshot=self.engine.snapshot(), seconds_count=self.timer.seconds_count)
        ok = self.persistence.save(state)
        Logger.info(f"{Settings.LOG_TAG}: save instance state called")
        return ok

    def restore(self) -> bool:
        """Return True if a previous state was found and applied."""
        state = self.persistence.load()
        if state is None:
            return False
        self.engine.restore(state.snapshot)
        self.timer.seconds_count = state.seconds_count
        Logger.info(f"{Settings.LOG_TAG}: restore instance state called")
        return True

    def clear(self) -> None:
        self.persistence.clear()
