"""Interval model: one column of the intervals grid."""
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Interval:
    """
    A contiguous window of game time in whole minutes.

    Attributes:
        start: First minute of the window (0-based)
        end: Closing minute; equals the game's total duration for the last window
    """
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def label(self) -> str:
        """Column header text, e.g. ``"0-15"``."""
        return f"{self.start}-{self.end}"

    def to_list(self) -> List[int]:
        """Convert to a ``[start, end]`` pair for JSON serialization."""
        return [self.start, self.end]
