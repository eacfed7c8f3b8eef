"""
Input helpers for the KSC Coach game entry application.

Numeric form fields only ever hand digits to the rest of the application.
These helpers perform that normalization at the boundary so the match record
store only sees non-negative integers.
"""
import math
import re
from typing import Any

_NON_DIGITS = re.compile(r"[^0-9]")
_DIGITS = re.compile(r"[0-9]+")


def digits_only(raw: Any) -> str:
    """
    Strip every non-digit character from a form value.

    Example:
        >>> digits_only("1a2")
        '12'
        >>> digits_only(None)
        ''
    """
    if raw is None:
        return ""
    return _NON_DIGITS.sub("", str(raw))


# Anything past nine digits is not a plausible count or minutes value
_MAX_DIGITS = 9
_LIMIT = 10 ** _MAX_DIGITS


def _parse_digits(digits: str) -> int:
    significant = digits.lstrip("0")
    if len(significant) > _MAX_DIGITS:
        return 0
    return int(significant or "0")


def sanitize_count(raw: Any) -> int:
    """
    Normalize a goal/assist field value to a non-negative integer.

    Args:
        raw: Value received from the form or API payload

    Returns:
        The count, or 0 for negative, missing, non-numeric or implausibly
        large (more than nine digits) input

    Example:
        >>> sanitize_count("3")
        3
        >>> sanitize_count("-3")
        0
        >>> sanitize_count("abc")
        0
    """
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw if 0 <= raw < _LIMIT else 0
    if isinstance(raw, float):
        if not math.isfinite(raw) or not 0 <= raw < _LIMIT:
            return 0
        return int(raw)

    text = str(raw).strip()
    if text.startswith("-"):
        return 0
    digits = digits_only(text)
    return _parse_digits(digits) if digits else 0


def to_minutes(raw: Any) -> int:
    """
    Read a minutes value (total game time or interval length).

    Returns 0 for anything that is not a positive whole number, which callers
    treat as "not yet configured".
    """
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw if 0 < raw < _LIMIT else 0
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) and 1 <= raw < _LIMIT and raw.is_integer() else 0

    text = str(raw).strip()
    if not _DIGITS.fullmatch(text):
        return 0
    return _parse_digits(text)
