"""
Utilities package for the KSC Coach game entry application.

This package contains constants, configuration and input helpers used
throughout the application.
"""
from .input_utils import digits_only, sanitize_count, to_minutes
from .config import AppConfig
from .constants import (
    APP_TITLE, CLUB_SHORT_NAME, MAX_GAME_LENGTH_MIN, INTERVAL_PRESETS, CUSTOM_INTERVAL,
    DEFAULT_STATS, GRID_STATS, STATS_PER_COLUMN, SETTINGS_KEYS
)

__all__ = [
    "digits_only", "sanitize_count", "to_minutes", "AppConfig",
    "APP_TITLE", "CLUB_SHORT_NAME", "MAX_GAME_LENGTH_MIN", "INTERVAL_PRESETS", "CUSTOM_INTERVAL",
    "DEFAULT_STATS", "GRID_STATS", "STATS_PER_COLUMN", "SETTINGS_KEYS"
]
