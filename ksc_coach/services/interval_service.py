"""Interval partitioning for the intervals grid."""
import logging
import math
from functools import lru_cache
from typing import Any, Tuple

from ..models import Interval
from ..utils import to_minutes

logger = logging.getLogger(__name__)


def partition(total_minutes: Any, interval_minutes: Any) -> Tuple[Interval, ...]:
    """
    Split a game into consecutive intervals.

    Args:
        total_minutes: Total game time in minutes
        interval_minutes: Configured interval length in minutes

    Returns:
        Intervals covering ``[0, total_minutes]``. The last one is shorter when
        the total is not a multiple of the interval length. Empty when either
        input is zero, missing or non-numeric (game not configured yet).

    Example:
        >>> [i.to_list() for i in partition(65, 30)]
        [[0, 30], [30, 60], [60, 65]]
    """
    total = to_minutes(total_minutes)
    length = to_minutes(interval_minutes)
    if not total or not length:
        return ()
    return _partition(total, length)


@lru_cache(maxsize=128)
def _partition(total: int, length: int) -> Tuple[Interval, ...]:
    intervals = []
    cursor = 0
    while cursor < total:
        intervals.append(Interval(cursor, min(cursor + length, total)))
        cursor += length
    logger.debug("Partitioned %s min into %d intervals of %s min", total, len(intervals), length)
    return tuple(intervals)


def interval_count(total_minutes: Any, interval_minutes: Any) -> int:
    """Number of intervals ``partition`` yields, without building them."""
    total = to_minutes(total_minutes)
    length = to_minutes(interval_minutes)
    if not total or not length:
        return 0
    return math.ceil(total / length)
