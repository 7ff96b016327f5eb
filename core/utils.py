import math
from typing import Union

Number = Union[int, float]


def clamp(value: Number, low: Number, high: Number) -> Number:
    """Clamp value into the inclusive range [low, high]."""
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up.

    Python's built-in round() uses banker's rounding (round(4.5) == 4), which
    would make neutral and partial-credit points drift between factors.
    Every score in the matching engine goes through this helper instead.
    """
    return int(math.floor(value + 0.5))


def percentage(points: Number, max_points: Number) -> int:
    """Integer percentage of points over max_points (0 when max is 0)."""
    if max_points == 0:
        return 0
    return round_half_up(points / max_points * 100)


def normalize_text(value: str) -> str:
    """Trim and case-fold a free-text value for comparisons."""
    return value.strip().casefold()
