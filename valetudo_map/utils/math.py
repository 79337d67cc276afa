# valetudo_map/utils/math.py
"""
Common numeric helpers shared by the transform and command builders.
"""
import math


def clip(v, lo, hi):
    """Clip value v to range [lo, hi]."""
    return lo if v < lo else hi if v > hi else v


def round_half_away(v) -> int:
    """
    Round to the nearest integer, ties away from zero.

    Python's round() uses banker's rounding (round(2.5) == 2), which would
    pull command coordinates toward even pixels.
    """
    if isinstance(v, int):
        return v
    a = abs(v)
    f = math.floor(a)
    r = f + 1 if a - f >= 0.5 else f
    return int(-r if v < 0 else r)
