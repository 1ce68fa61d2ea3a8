"""Rounding and clamping helpers shared by every dimension calculation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

__all__ = [
    "TotalCheck",
    "approximately_equal",
    "calculate_ratio",
    "clamp",
    "distribute_equally",
    "round_to_decimal",
    "validate_total",
]


def round_to_decimal(value: float, places: int = 1) -> float:
    """Round ``value`` half-up to ``places`` decimal digits.

    Ties round towards positive infinity, so ``0.25 -> 0.3`` and
    ``-0.25 -> -0.2``. Python's built-in ``round`` uses banker's rounding
    and is not used here.

    Examples:
        >>> round_to_decimal(240.05)
        240.1
        >>> round_to_decimal(1.23456, 2)
        1.23
    """
    multiplier = 10**places
    # repr-based scaling avoids 1.005 * 100 == 100.49999 style drift
    scaled = float(f"{value * multiplier:.9f}")
    return math.floor(scaled + 0.5) / multiplier


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp ``value`` to the closed interval [minimum, maximum]."""
    return max(minimum, min(maximum, value))


def distribute_equally(total: float, count: int) -> list[float]:
    """Split ``total`` into ``count`` equal values rounded to 1 decimal."""
    if count <= 0:
        return []
    share = round_to_decimal(total / count)
    return [share] * count


def approximately_equal(a: float, b: float, tolerance: float = 0.01) -> bool:
    """Check whether two numbers differ by at most ``tolerance``."""
    return abs(a - b) <= tolerance


def calculate_ratio(numerator: float, denominator: float) -> float:
    """Return numerator / denominator, or 1 when the denominator is 0."""
    return 1.0 if denominator == 0 else numerator / denominator


@dataclass(frozen=True)
class TotalCheck:
    """Outcome of checking a list of lengths against a maximum."""

    is_valid: bool
    total: float
    remaining: float


def validate_total(
    values: Sequence[float], maximum: float, tolerance: float = 0.1
) -> TotalCheck:
    """Check that ``sum(values)`` does not exceed ``maximum`` (+ tolerance)."""
    total = sum(values)
    return TotalCheck(
        is_valid=total <= maximum + tolerance,
        total=total,
        remaining=maximum - total,
    )
