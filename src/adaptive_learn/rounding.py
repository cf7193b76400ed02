"""Rounding helpers shared by the scoring modules."""
import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2).

    The builtin round() uses banker's rounding, which would shift
    session durations and mix counts at exact halves.
    """
    return math.floor(value + 0.5)
