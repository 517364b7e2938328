"""Numeric helpers shared by the scorers"""
import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up.

    The built-in ``round`` rounds half to even, which would turn a skills
    score of 10.5 into 10 instead of 11.
    """
    return int(math.floor(value + 0.5))
