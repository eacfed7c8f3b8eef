"""
Game configuration models for the KSC Coach game entry application.

These dataclasses back the screens that run before the intervals grid:
the landing form (team, age group, squad), game setup (total time and
interval length), and the stats/players selection screen.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ..utils import (
    CUSTOM_INTERVAL, DEFAULT_STATS, INTERVAL_PRESETS, GRID_STATS, MAX_GAME_LENGTH_MIN,
    STATS_PER_COLUMN, digits_only, to_minutes
)


class Screen(Enum):
    """Screens of the coach app, with their persisted identifiers."""
    LANDING = "landing"
    MENU = "menu"
    OVERVIEW = "overview"
    GAME = "game"
    STATS = "stats"
    INTERVALS = "intervals"
    TRAINING = "training"
    PLAN = "plan"

    @classmethod
    def parse(cls, value: Any) -> Optional["Screen"]:
        """Look up a screen by identifier, returning None for unknown values."""
        try:
            return cls(value)
        except ValueError:
            return None


# Screens reachable from the menu, in display order. Only GAME is implemented.
MENU_ITEMS = [
    ("Season Overview", Screen.OVERVIEW),
    ("Game Data Entry", Screen.GAME),
    ("Training Tracker", Screen.TRAINING),
    ("Training Plan Builder", Screen.PLAN),
]
PLACEHOLDER_SCREENS = {Screen.OVERVIEW, Screen.TRAINING, Screen.PLAN}


@dataclass
class TeamProfile:
    """
    Team details captured on the landing screen.

    Attributes:
        team_name: Club or team name (e.g. "KSC")
        age_group: Age group label (e.g. "U12 Lionesses")
        squad: Distinct player names, in the order they were added
    """
    team_name: str = ""
    age_group: str = ""
    squad: List[str] = field(default_factory=list)

    def add_player(self, name: str) -> bool:
        """
        Add a player to the squad.

        Args:
            name: Player name; surrounding whitespace is ignored

        Returns:
            True if the squad changed, False for blank or duplicate names
        """
        cleaned = (name or "").strip()
        if not cleaned or cleaned in self.squad:
            return False
        self.squad.append(cleaned)
        return True

    def remove_player(self, index: int) -> Optional[str]:
        """Remove the player at ``index``; returns the removed name or None."""
        if not 0 <= index < len(self.squad):
            return None
        return self.squad.pop(index)

    def can_continue(self) -> bool:
        return bool(self.team_name) and bool(self.age_group)

    @property
    def subtitle(self) -> str:
        """Header subtitle shown on every game entry screen."""
        return f"{self.age_group} · {self.team_name}"


@dataclass
class GameSetup:
    """
    Game timing captured on the setup screen.

    Minutes are kept as the digit strings the form holds; an empty string
    means the field has not been filled in yet.

    Attributes:
        total_minutes: Total game time
        interval_choice: One of INTERVAL_PRESETS, or CUSTOM_INTERVAL
        custom_minutes: Interval length used when interval_choice is custom
    """
    total_minutes: str = ""
    interval_choice: Union[int, str] = INTERVAL_PRESETS[1]
    custom_minutes: str = ""

    @staticmethod
    def parse_choice(value: Any) -> Optional[Union[int, str]]:
        """Normalize an interval choice, returning None if it is not offered."""
        if value == CUSTOM_INTERVAL:
            return CUSTOM_INTERVAL
        minutes = to_minutes(value)
        return minutes if minutes in INTERVAL_PRESETS else None

    def update(self, total: Any = None, interval_choice: Any = None, custom: Any = None) -> None:
        """
        Apply form values; fields passed as None are left unchanged.

        Raises:
            ValueError: If the interval choice is not offered or a minutes value
                        exceeds MAX_GAME_LENGTH_MIN. Nothing is applied then.
        """
        new_total = self.total_minutes if total is None else digits_only(total)
        new_custom = self.custom_minutes if custom is None else digits_only(custom)
        new_choice = self.interval_choice
        if interval_choice is not None:
            new_choice = self.parse_choice(interval_choice)
            if new_choice is None:
                raise ValueError(f"Unsupported interval choice: {interval_choice!r}")

        self._check_limit("Total game time", new_total)
        self._check_limit("Custom interval", new_custom)
        self.total_minutes = new_total
        self.interval_choice = new_choice
        self.custom_minutes = new_custom

    @staticmethod
    def _check_limit(label: str, digits: str) -> None:
        significant = digits.lstrip("0")
        too_long = len(significant) > len(str(MAX_GAME_LENGTH_MIN))
        if too_long or (significant and int(significant) > MAX_GAME_LENGTH_MIN):
            raise ValueError(f"{label} cannot exceed {MAX_GAME_LENGTH_MIN} minutes")

    @property
    def is_custom(self) -> bool:
        return self.interval_choice == CUSTOM_INTERVAL

    @property
    def total(self) -> int:
        return to_minutes(self.total_minutes)

    @property
    def interval_minutes(self) -> int:
        """Effective interval length, 0 when not configured."""
        if self.is_custom:
            return to_minutes(self.custom_minutes)
        return to_minutes(self.interval_choice)

    def can_continue(self) -> bool:
        if not self.total:
            return False
        return not (self.is_custom and not to_minutes(self.custom_minutes))


@dataclass
class StatSelection:
    """Stats the coach chose to track, over the fixed catalog."""
    all_stats: List[str] = field(default_factory=lambda: list(DEFAULT_STATS))
    enabled: Dict[str, bool] = field(
        default_factory=lambda: {name: name in GRID_STATS for name in DEFAULT_STATS}
    )

    def toggle(self, name: str) -> bool:
        """Flip a stat; unknown names are ignored. Returns the new flag."""
        if name not in self.all_stats:
            return False
        self.enabled[name] = not self.enabled.get(name, False)
        return self.enabled[name]

    def is_enabled(self, name: str) -> bool:
        return bool(self.enabled.get(name, False))

    def enabled_stats(self) -> List[str]:
        return [name for name in self.all_stats if self.is_enabled(name)]

    def columns(self, size: int = STATS_PER_COLUMN) -> List[List[str]]:
        """Split the catalog into columns of ``size`` for the selection layout."""
        size = max(1, size)
        return [self.all_stats[i:i + size] for i in range(0, len(self.all_stats), size)]


@dataclass
class PlayerSelection:
    """
    Ordered set of squad players picked for this game.

    Order is the order players were selected in, which is also the row
    order on the intervals grid.
    """
    players: List[str] = field(default_factory=list)

    def toggle(self, name: str) -> bool:
        """Select or deselect a player. Returns True when now selected."""
        if name in self.players:
            self.players.remove(name)
            return False
        self.players.append(name)
        return True

    def prune(self, squad: List[str]) -> None:
        """Drop selections for players no longer in the squad."""
        self.players = [name for name in self.players if name in squad]

    def is_selected(self, name: str) -> bool:
        return name in self.players

    def can_continue(self) -> bool:
        return len(self.players) > 0
