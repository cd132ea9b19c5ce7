"""Phase-time arithmetic used by oscillators.

Phase time is an unsigned 32-bit integer covering one full period, so that
adding increments wraps around naturally at the end of each period.
"""

from plaquette.wrap import wrap01

__all__ = [
    "PHASE_TIME_MAX",
    "HALF_PHASE_TIME_MAX",
    "float_to_phase_time",
    "phase_time_to_float",
    "time_to_phase",
    "phase_time_add_phase",
    "phase_time_add_time",
    "phase_time_update",
]

PHASE_TIME_MAX = 0xFFFFFFFF
HALF_PHASE_TIME_MAX = 0x80000000

_PHASE_TIME_SPAN = float(PHASE_TIME_MAX + 1)


def float_to_phase_time(x: float) -> int:
    """Convert a phase in periods to phase time, wrapping it into ``[0, 1)``."""
    return min(int(wrap01(x) * _PHASE_TIME_SPAN), PHASE_TIME_MAX)


def phase_time_to_float(x: int) -> float:
    """Convert phase time to a phase in periods."""
    return float(x) / PHASE_TIME_MAX


def time_to_phase(period: float, time: float) -> float:
    """Convert a time in seconds to a phase in periods; a zero period gives 0."""
    return 0.0 if period == 0 else time / period


def phase_time_add_phase(phase_time: int, phase: float) -> int:
    """Return ``phase_time`` offset by ``phase`` periods."""
    return (int(phase_time) + float_to_phase_time(phase)) & PHASE_TIME_MAX


def phase_time_add_time(phase_time: int, period: float, time: float) -> int:
    """Return ``phase_time`` offset by ``time`` seconds of a wave of ``period``."""
    return phase_time_add_phase(phase_time, time_to_phase(period, time))


def phase_time_update(
    phase_time: int, period: float, sample_rate: float
) -> tuple[int, bool]:
    """Advance ``phase_time`` by one sample.

    Returns the new phase time and whether it wrapped past the end of the
    period. A zero period counts as an infinite increment: the phase time is
    left unchanged and a wrap is reported.
    """
    phase_time = int(phase_time) & PHASE_TIME_MAX
    samples_per_period = period * sample_rate
    if samples_per_period == 0:
        return phase_time, True
    increment = float_to_phase_time(1.0 / samples_per_period)
    overflow = increment > PHASE_TIME_MAX - phase_time
    return (phase_time + increment) & PHASE_TIME_MAX, overflow