"""Wave shapes evaluated at a phase time, with values in ``[0, 1]``.

``t`` and ``width`` are phase times (see :mod:`plaquette.osc_utils`);
``width`` marks where in the period the wave reaches its peak (sine,
triangle) or switches off (square).
"""

from plaquette.osc_utils import HALF_PHASE_TIME_MAX, PHASE_TIME_MAX
from plaquette.trig8 import sin16

__all__ = ["sine_wave_value", "square_wave_value", "triangle_wave_value"]

_FLT_MIN = 1.1754943508222875e-38


def sine_wave_value(t: int, width: int = HALF_PHASE_TIME_MAX) -> float:
    """Sine wave value at phase time ``t``."""
    t = int(t) & PHASE_TIME_MAX
    width = int(width) & PHASE_TIME_MAX
    if width == HALF_PHASE_TIME_MAX:
        sine = sin16(t >> 16)
    else:
        if t <= width:
            remapped = int(t / (width + _FLT_MIN) * 32767.0)
        else:
            width_minus_one = (width - 1) & PHASE_TIME_MAX
            numerator = (t - width_minus_one) & PHASE_TIME_MAX
            denominator = PHASE_TIME_MAX - width_minus_one
            ratio = numerator / denominator if denominator else 1.0
            remapped = int(ratio * 32767.0) + 32768
        sine = sin16(remapped & 0xFFFF)
    return (32767 + sine) / 65534.0


def square_wave_value(t: int, width: int = HALF_PHASE_TIME_MAX) -> float:
    """Square wave value at phase time ``t``: 1 up to ``width``, then 0."""
    phase = int(t) & PHASE_TIME_MAX
    limit = int(width) & PHASE_TIME_MAX
    if phase <= limit:
        return 1.0
    return 0.0


def triangle_wave_value(t: int, width: int = HALF_PHASE_TIME_MAX) -> float:
    """Triangle wave value at phase time ``t``, peaking at ``width``."""
    t = int(t)
    width = int(width)
    if t <= width:
        return t / (float(width) + _FLT_MIN)
    return (PHASE_TIME_MAX - t) / float(PHASE_TIME_MAX - width)