"""
Game entry service for the KSC Coach game entry application.

This module ties the configuration screens to the intervals grid: it owns the
team profile, game setup, stat and player selections, persists the fields
that survive a reload, and keeps the match record store in step with them.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from ..models import (
    Interval, Screen, TeamProfile, GameSetup, StatSelection, PlayerSelection,
    MENU_ITEMS, PLACEHOLDER_SCREENS
)
from ..utils import APP_TITLE, CLUB_SHORT_NAME, GRID_STATS, sanitize_count
from .interval_service import partition
from .match_record_store import MatchRecordStore
from .persistence_service import SettingsStore

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a configuration step is incomplete or given bad values."""
    pass


class UnknownScreenError(ConfigurationError):
    """Raised when navigating to a screen that does not exist."""
    pass


class GameEntryService:
    """
    Service driving the coach's game data entry flow.

    Configuration edits go through this service so they are persisted, and
    every read or write of the grid first reconciles the match records with
    the current player selection and interval partition.
    """

    def __init__(
        self,
        settings_store: Optional[SettingsStore] = None,
        record_store: Optional[MatchRecordStore] = None,
    ):
        """
        Initialize GameEntryService, restoring persisted configuration.

        Args:
            settings_store: Optional settings store (in-memory when omitted)
            record_store: Optional match record store
        """
        self.settings = settings_store or SettingsStore()
        self.records = record_store or MatchRecordStore()
        self.stats = StatSelection()
        self.selection = PlayerSelection()

        self.team = TeamProfile(
            team_name=str(self.settings.load("team", "") or ""),
            age_group=str(self.settings.load("age", "") or ""),
            squad=[],
        )
        for name in self.settings.load("squad", []) or []:
            if isinstance(name, str):
                self.team.add_player(name)

        self.setup = GameSetup()
        try:
            self.setup.update(
                total=self.settings.load("total", ""),
                interval_choice=self.settings.load("interval", self.setup.interval_choice),
                custom=self.settings.load("custom", ""),
            )
        except ValueError as e:
            logger.warning("Ignoring persisted game setup: %s", e)
            self.setup = GameSetup()

        self.screen = Screen.parse(self.settings.load("screen", Screen.LANDING.value)) or Screen.LANDING
        if self.screen == Screen.INTERVALS:
            # Player selection is not persisted, so the grid cannot be restored
            self.screen = Screen.STATS

    # ------------------------------------------------------------------
    # Landing screen
    # ------------------------------------------------------------------
    def save_team(self, team_name: Optional[str] = None, age_group: Optional[str] = None) -> None:
        """Update the team name and/or age group."""
        if team_name is not None:
            self.team.team_name = str(team_name)
        if age_group is not None:
            self.team.age_group = str(age_group)
        self.settings.save_many({"team": self.team.team_name, "age": self.team.age_group})

    def add_squad_player(self, name: str) -> bool:
        """
        Add a player to the squad.

        Returns:
            True if added, False for blank or duplicate names
        """
        added = self.team.add_player(name)
        if added:
            self.settings.save("squad", list(self.team.squad))
        return added

    def remove_squad_player(self, index: int) -> Optional[str]:
        """Remove the squad player at ``index`` and drop them from the game selection."""
        removed = self.team.remove_player(index)
        if removed is not None:
            self.selection.prune(self.team.squad)
            self.settings.save("squad", list(self.team.squad))
        return removed

    def continue_from_landing(self) -> Screen:
        if not self.team.can_continue():
            raise ConfigurationError("Team name and age group are required")
        return self.navigate(Screen.MENU)

    # ------------------------------------------------------------------
    # Game setup screen
    # ------------------------------------------------------------------
    def configure_game(self, total: Any = None, interval_choice: Any = None, custom: Any = None) -> None:
        """
        Apply values from the game setup form.

        Raises:
            ConfigurationError: If the interval choice is not a preset or "custom",
                                or a minutes value exceeds the game length limit
        """
        try:
            self.setup.update(total=total, interval_choice=interval_choice, custom=custom)
        except ValueError as e:
            raise ConfigurationError(str(e))
        self.settings.save_many({
            "total": self.setup.total_minutes,
            "interval": self.setup.interval_choice,
            "custom": self.setup.custom_minutes,
        })

    def continue_from_setup(self) -> Screen:
        if not self.setup.can_continue():
            raise ConfigurationError("Total game time and interval length are required")
        return self.navigate(Screen.STATS)

    # ------------------------------------------------------------------
    # Stats & players screen
    # ------------------------------------------------------------------
    def toggle_stat(self, name: str) -> bool:
        if name not in self.stats.all_stats:
            raise ConfigurationError(f"Unknown stat: {name}")
        return self.stats.toggle(name)

    def toggle_player(self, name: str) -> bool:
        if name not in self.team.squad:
            raise ConfigurationError(f"Player '{name}' is not in the squad")
        return self.selection.toggle(name)

    def continue_from_stats(self) -> Screen:
        if not self.selection.can_continue():
            raise ConfigurationError("Select at least one player for this game")
        return self.navigate(Screen.INTERVALS)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def navigate(self, screen: Any) -> Screen:
        """
        Switch to another screen.

        Entering or leaving the intervals grid abandons its entries.

        Raises:
            UnknownScreenError: If ``screen`` is not a known screen identifier
        """
        target = screen if isinstance(screen, Screen) else Screen.parse(screen)
        if target is None:
            raise UnknownScreenError(f"Unknown screen: {screen}")

        # Entering or leaving the grid always starts from a blank MatchState
        if (self.screen == Screen.INTERVALS) != (target == Screen.INTERVALS):
            self.leave_grid()
        self.screen = target
        self.settings.save("screen", target.value)
        if target == Screen.INTERVALS:
            self.sync_grid()
        return target

    def menu(self) -> List[Dict[str, Any]]:
        return [
            {"title": title, "screen": screen.value, "available": screen not in PLACEHOLDER_SCREENS}
            for title, screen in MENU_ITEMS
        ]

    # ------------------------------------------------------------------
    # Intervals grid
    # ------------------------------------------------------------------
    def intervals(self) -> Tuple[Interval, ...]:
        return partition(self.setup.total, self.setup.interval_minutes)

    def sync_grid(self) -> bool:
        """Reconcile match records with the current selection and partition."""
        return self.records.sync(self.selection.players, len(self.intervals()))

    def leave_grid(self) -> None:
        self.records.clear()

    def _grid_open(self) -> bool:
        # Writes only land while the intervals grid is on screen
        if self.screen != Screen.INTERVALS:
            logger.debug("Ignoring grid write on the %s screen", self.screen.value)
            return False
        self.sync_grid()
        return True

    def toggle_presence(self, player: str, interval_index: int) -> None:
        if self._grid_open():
            self.records.toggle_presence(player, interval_index)

    def set_goals(self, player: str, raw_value: Any) -> int:
        """Sanitize a goals field value and store it. Returns the stored count."""
        if self._grid_open():
            self.records.set_goals(player, sanitize_count(raw_value))
        return self.records.goals(player)

    def set_assists(self, player: str, raw_value: Any) -> int:
        """Sanitize an assists field value and store it. Returns the stored count."""
        if self._grid_open():
            self.records.set_assists(player, sanitize_count(raw_value))
        return self.records.assists(player)

    def set_player_of_match(self, player: str) -> Optional[str]:
        if self._grid_open():
            self.records.set_player_of_match(player)
        return self.records.player_of_match

    def grid(self) -> Dict[str, Any]:
        """
        Build the read model for the intervals grid.

        Returns:
            Dictionary with interval columns, one row per selected player,
            the POTM holder and which grid stats are enabled
        """
        intervals = self.intervals()
        rebuilt = self.records.sync(self.selection.players, len(intervals))
        rows = []
        for name in self.records.roster:
            record = self.records.record(name)
            rows.append({
                "name": name,
                "presence": record.presence,
                "intervals_played": record.intervals_played(),
                "goals": record.goals,
                "assists": record.assists,
                "player_of_match": self.records.is_player_of_match(name),
            })

        return {
            "title": APP_TITLE,
            "subtitle": self.team.subtitle,
            "intervals": [interval.to_list() for interval in intervals],
            "labels": [interval.label for interval in intervals],
            "players": rows,
            "player_of_match": self.records.player_of_match,
            "tracked": {name: self.stats.is_enabled(name) for name in GRID_STATS},
            "rebuilt": rebuilt,
        }

    # ------------------------------------------------------------------
    # Whole-app snapshot
    # ------------------------------------------------------------------
    def state(self) -> Dict[str, Any]:
        """Configuration snapshot for the client on load."""
        return {
            "title": APP_TITLE,
            "club": CLUB_SHORT_NAME,
            "screen": self.screen.value,
            "team": {
                "team_name": self.team.team_name,
                "age_group": self.team.age_group,
                "squad": list(self.team.squad),
                "can_continue": self.team.can_continue(),
            },
            "setup": {
                "total_minutes": self.setup.total_minutes,
                "interval_choice": self.setup.interval_choice,
                "custom_minutes": self.setup.custom_minutes,
                "interval_minutes": self.setup.interval_minutes,
                "can_continue": self.setup.can_continue(),
            },
            "stats": {
                "enabled": self.stats.enabled_stats(),
                "columns": self.stats.columns(),
            },
            "selected_players": list(self.selection.players),
        }
