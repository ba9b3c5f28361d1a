"""
Number formatting helpers for displayed values.
"""
import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves going up.

    Built-in round() sends halves to the even neighbour (100.5 -> 100);
    displayed elevations and km marks expect 100.5 -> 101.
    """
    return math.floor(value + 0.5)
