"""Fast approximate mathematical functions."""

import math
import struct

from plaquette.trig8 import cos16, sin16
from plaquette.wrap import wrap01

__all__ = ["fast_sqrt", "fast_sin", "fast_cos", "fast_pow"]

_SQRT_MAGIC = 0x2035AD0C
_POW_MAGIC = 1072632447


def _to_int32(value: int) -> int:
    return ((int(value) + 0x80000000) & 0xFFFFFFFF) - 0x80000000


def fast_sqrt(n: float) -> float:
    """Approximate square root; ``fast_sqrt(0)`` is a tiny positive number."""
    bits = struct.unpack("<i", struct.pack("<f", n))[0]
    n32 = struct.unpack("<f", struct.pack("<i", bits))[0]
    guess_bits = _to_int32(_SQRT_MAGIC + (bits >> 1))
    guess = struct.unpack("<f", struct.pack("<i", guess_bits))[0]
    return n32 / guess + guess * 0.25


def fast_cos(x: float) -> float:
    """Approximate cosine of ``x`` radians."""
    scaled = wrap01(x / math.tau) * 65535
    return cos16(int(scaled)) / 32767.0


def fast_sin(x: float) -> float:
    """Approximate sine of ``x`` radians."""
    scaled = wrap01(x / math.tau) * 65535
    return sin16(int(scaled)) / 32767.0


def fast_pow(a: float, b: float) -> float:
    """Rough approximation of ``a ** b`` working on the exponent bits."""
    _, high = struct.unpack("<ii", struct.pack("<d", float(a)))
    high = _to_int32(b * (high - _POW_MAGIC) + _POW_MAGIC)
    return struct.unpack("<d", struct.pack("<ii", 0, high))[0]