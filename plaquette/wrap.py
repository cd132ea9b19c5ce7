"""Wrapping of values around an interval."""

import math

__all__ = ["wrap01", "wrap", "wrap_between"]


def wrap(x: float, high: float) -> float:
    """Wrap ``x`` into ``[0, high)``, or ``[high, 0)`` when ``high`` is negative.

    A ``high`` of zero always yields ``0``.
    """
    x = float(x)
    high = float(high)
    if high == 0:
        return 0.0
    if high < 0:
        return high + wrap(x, -high)
    mod = math.fmod(x, high)
    if x >= 0:
        return mod
    if mod < 0:
        return high + mod
    return 0.0


def wrap01(x: float) -> float:
    """Wrap ``x`` into ``[0, 1)``."""
    return wrap(x, 1.0)


def wrap_between(x: float, low: float, high: float) -> float:
    """Wrap ``x`` into ``[low, high)``, or ``[high, low)`` when ``high < low``."""
    x = float(x)
    low = float(low)
    high = float(high)
    if low <= high:
        return wrap(x - low, high - low) + low
    return wrap(x - high, low - high) + high