"""
Constants for the KSC Coach game entry application.

This module contains configuration constants used throughout the application.
"""

# Application metadata
APP_TITLE = "Game Entry Tab"
CLUB_SHORT_NAME = "KSC"

# Web server defaults
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 7122
DEFAULT_SETTINGS_FILE = "ksc_settings.json"

# Game timing limits and presets offered on the setup screen (minutes)
MAX_GAME_LENGTH_MIN = 120
INTERVAL_PRESETS = (10, 15, 30)
CUSTOM_INTERVAL = "custom"

# Stats catalog, in display order
DEFAULT_STATS = [
    "Goals",
    "Assists",
    "POTM",
    "Yellow Cards",
    "Red Cards",
    "Tackles",
    "Saves",
    "Passes Completed",
    "Clean Sheets",
    "Shots on Target",
    "Key Passes",
    "Dribbles",
]

# Stats backed by the intervals grid; the rest are pass-through flags
GRID_STATS = ("Goals", "Assists", "POTM")

# Stats are laid out three per column on the selection screen
STATS_PER_COLUMN = 3

# Keys persisted between reloads
SETTINGS_KEYS = ("screen", "team", "age", "squad", "total", "interval", "custom")
