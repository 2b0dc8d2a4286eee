"""Math helpers — rounding and clamping for 0-100 scores. No engine imports."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round .5 away from negative infinity (2.5 → 3, 88.75 → 89).

    Python's round() is banker's rounding (2.5 → 2), which would shift
    band boundaries in the scoring formulas.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def clamp_score(value: float) -> int:
    """Clamp then round to the closed [0, 100] score range.

    Clamping first keeps very large integers away from float arithmetic.
    """
    return round_half_up(clamp(value, 0, 100))
