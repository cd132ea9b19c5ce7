"""Re-mapping of real numbers between ranges."""

from enum import IntEnum

from plaquette.wrap import wrap_between

__all__ = ["MapMode", "constrain", "map_float", "map_from01", "map_to01"]


class MapMode(IntEnum):
    """How a mapped value is kept inside the target range."""

    UNCONSTRAIN = 0
    CONSTRAIN = 1
    WRAP = 2


def constrain(value: float, low: float, high: float) -> float:
    """Clamp ``value`` to ``[low, high]``."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def _convert(value: float, to_low: float, to_high: float, mode: int) -> float:
    if value == 0.0:
        value = 0.0  # normalise negative zero
    if mode == MapMode.CONSTRAIN:
        if to_low <= to_high:
            return constrain(value, to_low, to_high)
        return constrain(value, to_high, to_low)
    if mode == MapMode.WRAP:
        return wrap_between(value, to_low, to_high)
    return value


def map_float(
    value: float,
    from_low: float,
    from_high: float,
    to_low: float,
    to_high: float,
    mode: int = MapMode.UNCONSTRAIN,
) -> float:
    """Re-map ``value`` from ``[from_low, from_high]`` to ``[to_low, to_high]``.

    An empty source range maps everything to the middle of the target range.
    """
    value, from_low, from_high = float(value), float(from_low), float(from_high)
    to_low, to_high = float(to_low), float(to_high)
    if from_low == from_high:
        value = (to_low + to_high) / 2.0
    else:
        value = (value - from_low) * (to_high - to_low) / (from_high - from_low) + to_low
    return _convert(value, to_low, to_high, mode)


def map_from01(
    value: float, to_low: float, to_high: float, mode: int = MapMode.UNCONSTRAIN
) -> float:
    """Re-map ``value`` from ``[0, 1]`` to ``[to_low, to_high]``."""
    to_low, to_high = float(to_low), float(to_high)
    value = float(value) * (to_high - to_low) + to_low
    return _convert(value, to_low, to_high, mode)


def map_to01(
    value: float, from_low: float, from_high: float, mode: int = MapMode.UNCONSTRAIN
) -> float:
    """Re-map ``value`` from ``[from_low, from_high]`` to ``[0, 1]``.

    An empty source range maps everything to ``0.5``.
    """
    value, from_low, from_high = float(value), float(from_low), float(from_high)
    if from_low == from_high:
        value = 0.5
    else:
        value = (value - from_low) / (from_high - from_low)
    return _convert(value, 0.0, 1.0, mode)