"""Easing functions mapping ``t`` in ``[0, 1]`` to an eased progression."""

import math
from typing import Callable

from plaquette.fastmath import fast_cos, fast_pow, fast_sin, fast_sqrt

__all__ = [
    "EasingFunction",
    "ease_none",
    "ease_in_sine",
    "ease_out_sine",
    "ease_in_out_sine",
    "ease_in_quad",
    "ease_out_quad",
    "ease_in_out_quad",
    "ease_in_cubic",
    "ease_out_cubic",
    "ease_in_out_cubic",
    "ease_in_quart",
    "ease_out_quart",
    "ease_in_out_quart",
    "ease_in_quint",
    "ease_out_quint",
    "ease_in_out_quint",
    "ease_in_expo",
    "ease_out_expo",
    "ease_in_out_expo",
    "ease_in_circ",
    "ease_out_circ",
    "ease_in_out_circ",
    "ease_in_back",
    "ease_out_back",
    "ease_in_out_back",
    "ease_in_elastic",
    "ease_out_elastic",
    "ease_in_out_elastic",
    "ease_in_bounce",
    "ease_out_bounce",
    "ease_in_out_bounce",
]

EasingFunction = Callable[[float], float]

_PI = math.pi
_HALF_PI = math.pi / 2


def ease_none(t: float) -> float:
    """Linear easing: ``f(t) = t``."""
    return t


def ease_in_sine(t: float) -> float:
    return fast_sin(_HALF_PI * t)


def ease_out_sine(t: float) -> float:
    return 1 + fast_sin(_HALF_PI * (t - 1))


def ease_in_out_sine(t: float) -> float:
    return 0.5 * (1 + fast_sin(_PI * (t - 0.5)))


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return t * (2 - t)


def ease_in_out_quad(t: float) -> float:
    return 2 * t * t if t < 0.5 else t * (4 - 2 * t) - 1


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    t -= 1
    return 1 + t * t * t


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    t = 2 * (t - 1)
    return 0.5 * t * t * t


def ease_in_quart(t: float) -> float:
    t *= t
    return t * t


def ease_out_quart(t: float) -> float:
    t -= 1
    t *= t
    return 1 - t * t


def ease_in_out_quart(t: float) -> float:
    if t < 0.5:
        t *= t
        return 8 * t * t
    t -= 1
    t *= t
    return 1 - 8 * t * t


def ease_in_quint(t: float) -> float:
    t2 = t * t
    return t * t2 * t2


def ease_out_quint(t: float) -> float:
    t -= 1
    t2 = t * t
    return 1 + t * t2 * t2


def ease_in_out_quint(t: float) -> float:
    if t < 0.5:
        t2 = t * t
        return 16 * t * t2 * t2
    t -= 1
    t2 = t * t
    return 1 + 16 * t * t2 * t2


def ease_in_expo(t: float) -> float:
    return (fast_pow(2, 8 * t) - 1) / 255


def ease_out_expo(t: float) -> float:
    return 1 - fast_pow(2, -8 * t)


def ease_in_out_expo(t: float) -> float:
    if t < 0.5:
        return (fast_pow(2, 16 * t) - 1) / 510
    return 1 - 0.5 * fast_pow(2, -16 * (t - 0.5))


def ease_in_circ(t: float) -> float:
    return 1 - fast_sqrt(1 - t)


def ease_out_circ(t: float) -> float:
    return fast_sqrt(t)


def ease_in_out_circ(t: float) -> float:
    if t < 0.5:
        return (1 - fast_sqrt(1 - 2 * t)) * 0.5
    return (1 + fast_sqrt(2 * t - 1)) * 0.5


def ease_in_back(t: float) -> float:
    return t * t * (2.70158 * t - 1.70158)


def ease_out_back(t: float) -> float:
    t -= 1
    return 1 + t * t * (2.70158 * t + 1.70158)


def ease_in_out_back(t: float) -> float:
    if t < 0.5:
        return t * t * (7 * t - 2.5) * 2
    t -= 1
    return 1 + t * t * 2 * (7 * t + 2.5)


def ease_in_elastic(t: float) -> float:
    t2 = t * t
    return t2 * t2 * fast_sin(t * _PI * 4.5)


def ease_out_elastic(t: float) -> float:
    t2 = t - 1
    t2 *= t2
    return 1 - t2 * t2 * fast_cos(t * _PI * 4.5)


def ease_in_out_elastic(t: float) -> float:
    if t < 0.45:
        t2 = t * t
        return 8 * t2 * t2 * fast_sin(t * _PI * 9)
    if t < 0.55:
        return 0.5 + 0.75 * fast_sin(t * _PI * 4)
    t2 = t - 1
    t2 *= t2
    return 1 - 8 * t2 * t2 * fast_sin(t * _PI * 9)


def ease_in_bounce(t: float) -> float:
    return fast_pow(2, 6 * (t - 1)) * abs(fast_sin(t * _PI * 3.5))


def ease_out_bounce(t: float) -> float:
    return 1 - fast_pow(2, -6 * t) * abs(fast_sin(t * _PI * 3.5))


def ease_in_out_bounce(t: float) -> float:
    if t < 0.5:
        return 8 * fast_pow(2, 8 * (t - 1)) * abs(fast_sin(t * _PI * 7))
    return 1 - 8 * fast_pow(2, -8 * t) * abs(fast_sin(t * _PI * 7))