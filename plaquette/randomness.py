"""Uniform random floating-point numbers."""

import random

__all__ = ["random_float", "random_uniform"]


def random_float(a: float | None = None, b: float | None = None) -> float:
    """Return a uniform random number.

    With no argument the number lies in ``[0, 1)``, with one argument ``a``
    in ``[0, a)``, and with two arguments in ``[a, b)``.
    """
    if a is None:
        if b is not None:
            raise TypeError("random_float() needs a lower bound when given an upper bound")
        return random.random()
    if b is None:
        return random.random() * a
    return random.random() * (b - a) + a


def random_uniform(a: float | None = None, b: float | None = None) -> float:
    """Alias of :func:`random_float`, kept for older callers."""
    return random_float(a, b)