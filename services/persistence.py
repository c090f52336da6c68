# services/persistence.py
"""
Transient instance-state storage for the dessert clicker.

- Uses Kivy's App to place the state file under the app's user_data_dir.
- Falls back to a local ./.userdata/instance_state.json path when no app is running.
- Writes are atomic: data is written to a temporary file in the same directory
  and then os.replace() swaps it into place.
- The file only bridges a pause/recreation; the app clears it on a clean stop.
"""

from __future__ import annotations

import json
import os
from tempfile import NamedTemporaryFile
from typing import Any, Dict

from kivy.app import App
from kivy.logger import Logger

from models.snapshot import InstanceState
from services.settings import Settings


class Persistence:
    """JSON-backed store for InstanceState with atomic writes."""

    def __init__(self, path: str | None = None) -> None:
        """Use an explicit path, or compute one from the running app."""
        self._cached_path: str | None = path or self._compute_path()

    def _compute_path(self) -> str:
        """Compute the state file path based on running Kivy app or local fallback."""
        app = App.get_running_app()
        if app is not None and getattr(app, "user_data_dir", None):
            base = app.user_data_dir
        else:
            base = os.path.join(".", Settings.FALLBACK_DATA_DIR)
        return os.path.join(base, Settings.STATE_FILE_NAME)

    @property
    def path(self) -> str:
        return self._cached_path or self._compute_path()

    def _save_path(self) -> str:
        """Return the state file path and ensure its parent directory exists."""
        path = self.path
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        self._cached_path = path
        return path

    def save(self, state: InstanceState) -> bool:
        """
        Serialize and atomically persist the provided InstanceState.

        Returns:
            bool: True on success, False if any error occurs.
        """
        temp_name: str | None = None
        try:
            path = self._save_path()
            payload: Dict[str, Any] = state.to_dict()

            with NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=os.path.dirname(path) or ".",
                prefix=".state-",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                temp_name = tmp.name
                json.dump(payload, tmp, indent=2)
                tmp.flush()
                os.fsync(tmp.fileno())

            os.replace(temp_name, path)
            return True
        except OSError as exc:
            Logger.warning(f"{Settings.LOG_TAG}: could not save instance state: {exc}")
            if temp_name and os.path.exists(temp_name):
                os.remove(temp_name)
            return False

    def load(self) -> InstanceState | None:
        """
        Read the saved InstanceState, if any.

        Returns:
            InstanceState, or None when nothing was saved or the file is unreadable.
        """
        path = self.path
        if not os.path.exists(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("instance state must be a JSON object")
            return InstanceState.from_dict(data)
        except (OSError, ValueError, TypeError) as exc:
            Logger.warning(f"{Settings.LOG_TAG}: ignoring unreadable instance state: {exc}")
            return None

    def clear(self) -> bool:
        """
        Forget any saved state.

        Returns:
            bool: False if the file exists but could not be removed.
        """
        path = self.path
        try:
            if os.path.exists(path):
                os.remove(path)
            return True
        except OSError as exc:
            Logger.warning(f"{Settings.LOG_TAG}: could not clear instance state: {exc}")
            return False
