"""
Match record store for the KSC Coach game entry application.

This module owns the MatchState behind the intervals grid and keeps it in
step with the selected players and the interval partition.
"""
import logging
from typing import Iterable, List, Optional

from ..models import MatchState, PlayerRecord

logger = logging.getLogger(__name__)


class MatchRecordStore:
    """
    Holder of per-player presence, goals, assists and player-of-the-match.

    The store starts Uninitialized. ``initialize`` (or ``sync``) moves it to
    Populated for a given roster and interval count. Any later change of
    either forces a full rebuild: entries made for the previous shape are
    discarded rather than carried over.

    Mutators never raise. Calls addressed to an unknown player, an interval
    index outside the current partition, or carrying an invalid count leave
    the state untouched.
    """

    def __init__(self):
        self._state: Optional[MatchState] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def is_initialized(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> Optional[MatchState]:
        return self._state

    def initialize(self, roster: Iterable[str], interval_count: int) -> MatchState:
        """
        Replace the current state with a fresh one.

        Args:
            roster: Selected player names, in row order (duplicates are dropped)
            interval_count: Number of intervals in the current partition

        Returns:
            The new MatchState
        """
        names = tuple(dict.fromkeys(roster))
        # Built in full before being published so readers never see a
        # presence list whose length disagrees with interval_count.
        new_state = MatchState.build(names, interval_count)
        self._state = new_state
        logger.info(
            "Match records initialized for %d players over %d intervals",
            len(names), new_state.interval_count,
        )
        return new_state

    def sync(self, roster: Iterable[str], interval_count: int) -> bool:
        """
        Bring the state in line with the current roster and partition.

        Returns:
            True if the state was rebuilt, False if it already matched
        """
        identity = (tuple(dict.fromkeys(roster)), max(0, interval_count))
        if self._state is not None and self._state.identity == identity:
            return False
        if self._state is not None:
            logger.info("Roster or intervals changed; discarding match entries")
        self.initialize(*identity)
        return True

    def clear(self) -> None:
        """Drop the state, returning to Uninitialized."""
        self._state = None

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def toggle_presence(self, player: str, interval_index: int) -> None:
        """Flip whether ``player`` played during interval ``interval_index``."""
        record = self._record(player)
        if record is None or not isinstance(interval_index, int) or isinstance(interval_index, bool):
            return
        if not 0 <= interval_index < len(record.presence):
            logger.debug("Ignoring presence toggle for %s at stale index %s", player, interval_index)
            return
        record.presence[interval_index] = not record.presence[interval_index]

    def set_goals(self, player: str, value: int) -> None:
        """Replace the goal count for ``player``."""
        record = self._record(player)
        if record is not None and self._valid_count(value):
            record.goals = value

    def set_assists(self, player: str, value: int) -> None:
        """Replace the assist count for ``player``."""
        record = self._record(player)
        if record is not None and self._valid_count(value):
            record.assists = value

    def set_player_of_match(self, player: str) -> None:
        """
        Make ``player`` the single player of the match.

        Any previous holder is replaced. Selecting the current holder again
        keeps the selection; there is no way to clear it short of a rebuild.
        """
        if self._record(player) is None:
            return
        self._state.player_of_match = player

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def roster(self) -> List[str]:
        return list(self._state.roster) if self._state else []

    @property
    def interval_count(self) -> int:
        return self._state.interval_count if self._state else 0

    @property
    def player_of_match(self) -> Optional[str]:
        return self._state.player_of_match if self._state else None

    def record(self, player: str) -> Optional[PlayerRecord]:
        """Return a copy of the player's record, or None for unknown players."""
        record = self._record(player)
        if record is None:
            return None
        return PlayerRecord(presence=list(record.presence), goals=record.goals, assists=record.assists)

    def presence(self, player: str) -> List[bool]:
        record = self._record(player)
        return list(record.presence) if record else []

    def goals(self, player: str) -> int:
        record = self._record(player)
        return record.goals if record else 0

    def assists(self, player: str) -> int:
        record = self._record(player)
        return record.assists if record else 0

    def is_player_of_match(self, player: str) -> bool:
        return self.player_of_match is not None and self.player_of_match == player

    def to_dict(self) -> dict:
        """JSON-serializable view of the state; empty when Uninitialized."""
        if self._state is None:
            return {"roster": [], "interval_count": 0, "players": {}, "player_of_match": None}
        return self._state.to_json()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _record(self, player: str) -> Optional[PlayerRecord]:
        if self._state is None or not isinstance(player, str):
            return None
        return self._state.records.get(player)

    @staticmethod
    def _valid_count(value) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) and value >= 0
