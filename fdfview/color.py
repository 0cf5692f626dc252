"""Packed 0xTTRRGGBB colour values: packing, parsing, hue stepping and interpolation."""

from __future__ import annotations

WHITE = 0xFFFFFF
BLACK = 0x000000
RED = 0xFF0000

_HUE_STEP = 5


def create_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency and channels into one 32-bit value."""
    return (t << 24 | r << 16 | g << 8 | b) & 0xFFFFFFFF


def get_t(trgb: int) -> int:
    """Transparency byte."""
    return (trgb >> 24) & 0xFF


def get_r(trgb: int) -> int:
    """Red byte."""
    return (trgb >> 16) & 0xFF


def get_g(trgb: int) -> int:
    """Green byte."""
    return (trgb >> 8) & 0xFF


def get_b(trgb: int) -> int:
    """Blue byte."""
    return trgb & 0xFF


def hex_to_int(text: str) -> int:
    """Parse hexadecimal digits up to the end or a newline.

    Any other character makes the whole value white.
    """
    value = 0
    for ch in text:
        if ch == "\n":
            break
        digit = ch.upper()
        if "0" <= digit <= "9":
            value = value * 16 + ord(digit) - ord("0")
        elif "A" <= digit <= "F":
            value = value * 16 + 10 + ord(digit) - ord("A")
        else:
            return WHITE
        value &= 0xFFFFFFFF
    return value


def parse_color(text: str | None) -> int:
    """Parse a ``0x``-prefixed colour; anything else is white."""
    if not text or len(text) < 2 or text[0] != "0" or text[1] not in "xX":
        return WHITE
    return hex_to_int(text[2:])


def next_color(color: int) -> int:
    """Move one step along the hue wheel red, yellow, green, cyan, blue, magenta."""
    r, g, b = get_r(color), get_g(color), get_b(color)
    if r != 255 and g == 0 and b == 255:
        r += _HUE_STEP
    if r != 0 and g == 255 and b == 0:
        r -= _HUE_STEP
    if r == 255 and g != 255 and b == 0:
        g += _HUE_STEP
    if r == 0 and g != 0 and b == 255:
        g -= _HUE_STEP
    if r == 0 and g == 255 and b != 255:
        b += _HUE_STEP
    if r == 255 and g == 0 and b != 0:
        b -= _HUE_STEP
    return create_trgb(0, r, g, b)


def lerp_color(c1: int, c2: int, t: float) -> int:
    """Interpolate each channel linearly between ``c1`` and ``c2``, truncating."""
    r = int(get_r(c1) + t * (get_r(c2) - get_r(c1)))
    g = int(get_g(c1) + t * (get_g(c2) - get_g(c1)))
    b = int(get_b(c1) + t * (get_b(c2) - get_b(c1)))
    return create_trgb(0, r, g, b)