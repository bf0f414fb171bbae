"""
Normalization helpers shared by the crop and hazard scorers.
Every function maps a raw value onto [0, 1] (or the bounds given).
"""
import math
from typing import Optional

import numpy as np

# Guards against zero-width reference ranges
MIN_SPAN = 1e-6


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return float(np.clip(value, lo, hi))


def ratio(value: Optional[float], reference: float, hi: float = 1.0) -> float:
    """value / reference clamped to [0, hi]; a missing value counts as 0."""
    if value is None:
        return 0.0
    return clamp(value / reference, 0.0, hi)


def range_midpoint_score(value: float, min_: float, max_: float) -> float:
    """
    1.0 at the midpoint of [min_, max_], falling linearly to 0.0 at twice the
    half-range away from it. The range edges themselves score 0.5.
    """
    mid = (min_ + max_) / 2
    half_range = max(MIN_SPAN, (max_ - min_) / 2)
    distance = abs(value - mid) / half_range
    return clamp(1 - distance / 2)


def range_coverage_score(value: float, min_: float, max_: float) -> float:
    """
    1.0 anywhere inside [min_, max_]; outside, decays as exp(-1.5 * d) where
    d is the distance beyond the nearest edge in units of the range width.
    """
    if min_ <= value <= max_:
        return 1.0
    span = max(MIN_SPAN, max_ - min_)
    d = (min_ - value) / span if value < min_ else (value - max_) / span
    return clamp(math.exp(-1.5 * d))


def dryness(moisture: float, safe_level: float) -> float:
    """0 at or above the safe moisture level, 1 when completely dry."""
    return clamp((safe_level - moisture) / safe_level)


def to_percent(raw: float) -> int:
    """Clamp to [0, 1] and scale to an integer percent, halves rounding up."""
    return int(math.floor(clamp(raw) * 100 + 0.5))
