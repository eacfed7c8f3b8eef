"""
Services package for the KSC Coach game entry application.

This package contains service classes that handle business logic.
Includes factory for dependency injection.
"""
from .interval_service import partition, interval_count
from .match_record_store import MatchRecordStore
from .persistence_service import SettingsStore
from .game_entry_service import GameEntryService, ConfigurationError, UnknownScreenError
from .service_factory import ServiceFactory

__all__ = [
    "partition", "interval_count", "MatchRecordStore", "SettingsStore",
    "GameEntryService", "ConfigurationError", "UnknownScreenError",
    "ServiceFactory"
]
