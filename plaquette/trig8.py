"""Fast integer approximations of sine and cosine.

The 16-bit functions take an angle in ``0..65535`` and return ``-32767..32767``.
The 8-bit functions take an angle in ``0..255`` and return ``0..255``.
"""

__all__ = ["sin16", "cos16", "sin8", "cos8"]

_BASE16 = (0, 6393, 12539, 18204, 23170, 27245, 30273, 32137)
_SLOPE16 = (49, 48, 44, 38, 31, 23, 14, 4)

_B_M16_INTERLEAVE = (0, 49, 49, 41, 90, 27, 117, 10)


def _int8(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value & 0x80 else value


def sin16(theta: int) -> int:
    """Approximate ``sin(theta) * 32767`` for a 16-bit angle."""
    theta = int(theta) & 0xFFFF
    offset = (theta & 0x3FFF) >> 3
    if theta & 0x4000:
        offset = 2047 - offset
    section = offset // 256
    sec_offset = (offset & 0xFF) // 2
    y = _SLOPE16[section] * sec_offset + _BASE16[section]
    if theta & 0x8000:
        y = -y
    return y


def cos16(theta: int) -> int:
    """Approximate ``cos(theta) * 32767`` for a 16-bit angle."""
    return sin16((int(theta) + 16384) & 0xFFFF)


def sin8(theta: int) -> int:
    """Approximate ``sin(theta) * 128 + 128`` for an 8-bit angle."""
    theta = int(theta) & 0xFF
    offset = theta
    if theta & 0x40:
        offset = 255 - offset
    offset &= 0x3F
    sec_offset = offset & 0x0F
    if theta & 0x40:
        sec_offset += 1
    section = offset >> 4
    b = _B_M16_INTERLEAVE[section * 2]
    m16 = _B_M16_INTERLEAVE[section * 2 + 1]
    mx = ((m16 * sec_offset) >> 4) & 0xFF
    y = _int8(mx + b)
    if theta & 0x80:
        y = _int8(-y)
    return (y + 128) & 0xFF


def cos8(theta: int) -> int:
    """Approximate ``cos(theta) * 128 + 128`` for an 8-bit angle."""
    return sin8((int(theta) + 64) & 0xFF)