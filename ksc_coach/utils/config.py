"""Runtime configuration read from environment variables."""
import logging
import os
from dataclasses import dataclass

from .constants import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_SETTINGS_FILE


@dataclass(frozen=True)
class AppConfig:
    """
    Settings for running the web application.

    Attributes:
        host: Address the Flask server binds to (localhost only by default)
        port: Port number to listen on
        settings_file: JSON file holding the persisted configuration fields
        log_level: Root logging level name
    """
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    settings_file: str = DEFAULT_SETTINGS_FILE
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build a config from ``KSC_*`` environment variables, keeping defaults for blanks."""
        port_raw = os.environ.get("KSC_PORT", "").strip()
        try:
            port = int(port_raw) if port_raw else DEFAULT_PORT
        except ValueError:
            port = DEFAULT_PORT

        return cls(
            host=os.environ.get("KSC_HOST", "").strip() or DEFAULT_HOST,
            port=port,
            settings_file=os.environ.get("KSC_SETTINGS_FILE", "").strip() or DEFAULT_SETTINGS_FILE,
            log_level=(os.environ.get("KSC_LOG_LEVEL", "").strip() or "INFO").upper(),
        )

    @property
    def log_level_value(self) -> int:
        return logging._nameToLevel.get(self.log_level, logging.INFO)
