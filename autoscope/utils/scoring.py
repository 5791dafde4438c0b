"""
Score arithmetic shared by every analysis stage.

All automation scores live on a 0-100 scale. Rounding is half-up so that
x.5 values always move toward the larger integer, independent of parity.
"""

import math

SCORE_MIN = 0.0
SCORE_MAX = 100.0


def clamp(value: float, lower: float = SCORE_MIN, upper: float = SCORE_MAX) -> float:
    """Clamp value into [lower, upper]."""
    return max(lower, min(upper, value))


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with .5 rounding up.

    Examples:
        >>> round_half_up(22.5)
        23
        >>> round_half_up(-2.5)
        -2
    """
    return int(math.floor(value + 0.5))
