"""
Models package for the KSC Coach game entry application.

This package contains the core data models used throughout the application.
"""
from .interval import Interval
from .match_state import PlayerRecord, MatchState
from .game_config import (
    Screen, TeamProfile, GameSetup, StatSelection, PlayerSelection,
    MENU_ITEMS, PLACEHOLDER_SCREENS
)

__all__ = [
    "Interval", "PlayerRecord", "MatchState",
    "Screen", "TeamProfile", "GameSetup", "StatSelection", "PlayerSelection",
    "MENU_ITEMS", "PLACEHOLDER_SCREENS"
]
