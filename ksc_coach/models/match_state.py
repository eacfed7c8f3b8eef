"""
Match state model for the KSC Coach game entry application.

This module contains the per-player records logged on the intervals grid and
the MatchState container that groups them for a single game.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass
class PlayerRecord:
    """
    One selected player's entries for the current game.

    Attributes:
        presence: One flag per interval, True when the player was on the pitch
        goals: Goals scored (non-negative)
        assists: Assists made (non-negative)
    """
    presence: List[bool] = field(default_factory=list)
    goals: int = 0
    assists: int = 0

    @classmethod
    def blank(cls, interval_count: int) -> "PlayerRecord":
        """Create a record with every interval unmarked and zero counts."""
        return cls(presence=[False] * max(0, interval_count))

    def intervals_played(self) -> int:
        """Number of intervals the player is marked present for."""
        return sum(1 for flag in self.presence if flag)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "presence": list(self.presence),
            "goals": self.goals,
            "assists": self.assists,
        }


@dataclass
class MatchState:
    """
    Everything entered on the intervals grid for one game.

    The roster and interval count the state was built for are kept alongside
    the records so a structural change can be detected by comparing
    ``identity`` values.

    Attributes:
        roster: Selected player names, in selection order
        interval_count: Number of interval columns
        records: PlayerRecord per roster entry, keyed by player name
        player_of_match: Name of the single POTM holder, if any
    """
    roster: Tuple[str, ...] = ()
    interval_count: int = 0
    records: Dict[str, PlayerRecord] = field(default_factory=dict)
    player_of_match: Optional[str] = None

    @property
    def identity(self) -> Tuple[Tuple[str, ...], int]:
        return (self.roster, self.interval_count)

    @classmethod
    def build(cls, roster: Tuple[str, ...], interval_count: int) -> "MatchState":
        """Create a fresh state with a blank record for every roster player."""
        count = max(0, interval_count)
        return cls(
            roster=roster,
            interval_count=count,
            records={name: PlayerRecord.blank(count) for name in roster},
        )

    def to_json(self) -> dict:
        """
        Convert MatchState to JSON-serializable dictionary.

        Returns:
            Dictionary with players listed in roster order
        """
        return {
            "roster": list(self.roster),
            "interval_count": self.interval_count,
            "players": {name: self.records[name].to_dict() for name in self.roster},
            "player_of_match": self.player_of_match,
        }
