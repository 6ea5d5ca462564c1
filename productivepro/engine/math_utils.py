import math


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values, like ``Math.round``."""
    return int(math.floor(value + 0.5))


def percent(part: int, whole: int) -> int:
    if whole <= 0:
        return 0
    return max(0, min(100, round_half_up(100 * part / whole)))
