"""
Service Factory for dependency injection.

This module provides a factory for creating properly configured service
instances with their dependencies injected.
"""
from typing import Optional

from .persistence_service import SettingsStore
from .match_record_store import MatchRecordStore
from .game_entry_service import GameEntryService


class ServiceFactory:
    """
    Factory for creating service instances with proper dependency injection.

    The settings store is shared: every service created by one factory reads
    and writes the same settings file.
    """

    def __init__(self, settings_path: Optional[str] = None):
        """
        Initialize factory.

        Args:
            settings_path: JSON file for persisted settings; None keeps them in memory
        """
        self.settings_path = settings_path
        self._settings_store: Optional[SettingsStore] = None

    def create_match_record_store(self) -> MatchRecordStore:
        return MatchRecordStore()

    def create_game_entry_service(
        self,
        record_store: Optional[MatchRecordStore] = None
    ) -> GameEntryService:
        """
        Create GameEntryService with injected dependencies.

        Args:
            record_store: Optional match record store

        Returns:
            Configured GameEntryService instance
        """
        return GameEntryService(
            settings_store=self._get_settings_store(),
            record_store=record_store or self.create_match_record_store(),
        )

    def _get_settings_store(self) -> SettingsStore:
        """Get singleton settings store."""
        if self._settings_store is None:
            self._settings_store = SettingsStore(self.settings_path)
        return self._settings_store
