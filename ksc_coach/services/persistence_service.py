"""
Persistence service for the KSC Coach game entry application.

This module keeps the upstream configuration fields (screen, team, age group,
squad, total time, interval choice) in a small JSON key/value file so they
survive a reload. Intervals-grid entries are never written here.
"""
import json
import logging
import os
from typing import Any, Dict, Optional

from ..utils import SETTINGS_KEYS

logger = logging.getLogger(__name__)


class SettingsStore:
    """
    Key/value settings persisted to a JSON file.

    Reads tolerate a missing or corrupt file by falling back to the caller's
    default. Writes that fail are logged and otherwise ignored so a full disk
    never takes the app down.
    """

    def __init__(self, file_path: Optional[str] = None):
        """
        Initialize SettingsStore.

        Args:
            file_path: JSON file to persist to; None keeps values in memory only
        """
        self.file_path = file_path
        self._values: Dict[str, Any] = self._read_file()

    def load(self, key: str, default: Any = None) -> Any:
        """
        Get a stored value.

        Args:
            key: Settings key
            default: Value returned when the key has never been saved

        Returns:
            The stored value or ``default``
        """
        return self._values.get(key, default)

    def save(self, key: str, value: Any) -> None:
        """
        Store a value and write the file.

        Args:
            key: One of SETTINGS_KEYS
            value: JSON-serializable value

        Raises:
            KeyError: If ``key`` is not a persisted settings key
        """
        if key not in SETTINGS_KEYS:
            raise KeyError(f"Unknown settings key: {key}")
        self._values[key] = value
        self._write_file()

    def save_many(self, values: Dict[str, Any]) -> None:
        """Store several values with a single file write."""
        unknown = [key for key in values if key not in SETTINGS_KEYS]
        if unknown:
            raise KeyError(f"Unknown settings keys: {', '.join(unknown)}")
        self._values.update(values)
        self._write_file()

    def snapshot(self) -> Dict[str, Any]:
        """Copy of every stored value."""
        return dict(self._values)

    def clear(self) -> None:
        """Forget every stored value."""
        self._values = {}
        self._write_file()

    def _read_file(self) -> Dict[str, Any]:
        if not self.file_path or not os.path.exists(self.file_path):
            return {}
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read settings from %s: %s", self.file_path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring settings file %s: expected a JSON object", self.file_path)
            return {}
        return {key: value for key, value in data.items() if key in SETTINGS_KEYS}

    def _write_file(self) -> None:
        if not self.file_path:
            return
        try:
            directory = os.path.dirname(self.file_path)
            if directory and not os.path.exists(directory):
                os.makedirs(directory)
            with open(self.file_path, "w", encoding="utf-8") as f:
                json.dump(self._values, f, indent=2, ensure_ascii=False)
        except (OSError, TypeError) as e:
            logger.error("Could not write settings to %s: %s", self.file_path, e)
