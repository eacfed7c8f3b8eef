"""
KSC Coach: Game Data Entry

A coach's tool for recording a squad, configuring a game's timing, choosing
which stats to track and logging per-interval presence, goals, assists and
player of the match for each selected player.

This package provides a Flask web server with a JSON API for the
data entry screens.
"""
from .models import Interval, PlayerRecord, MatchState
from .services import partition, MatchRecordStore, GameEntryService, SettingsStore
from .ui import create_app, run_web_app
from .utils import sanitize_count, APP_TITLE

__version__ = "0.1.0"
__author__ = "KSC Coach Development Team"

__all__ = [
    "Interval", "PlayerRecord", "MatchState",
    "partition", "MatchRecordStore", "GameEntryService", "SettingsStore",
    "create_app", "run_web_app", "sanitize_count", "APP_TITLE"
]
