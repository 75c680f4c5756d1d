"""Conversions between HSV and 8-bit RGB colours."""

from __future__ import annotations

import math


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def hsv_to_rgb(hue: float, saturation: float, value: float) -> tuple[int, int, int]:
    """Convert hue in degrees [0, 360) and saturation/value in [0, 1] to RGB bytes."""
    if not 0 <= hue < 360:
        raise ValueError(f"hue must be in [0, 360), got {hue}")
    chroma = value * saturation
    sector = hue / 60.0
    x = chroma * (1 - abs(sector - 2 * math.floor(sector / 2) - 1))
    m = value - chroma
    r, g, b = {
        0: (chroma, x, 0.0),
        1: (x, chroma, 0.0),
        2: (0.0, chroma, x),
        3: (0.0, x, chroma),
        4: (x, 0.0, chroma),
        5: (chroma, 0.0, x),
    }[math.floor(sector)]
    return tuple(int(min(max(255 * (c + m), 0), 255)) for c in (r, g, b))


def rgb_to_hsv(red: int, green: int, blue: int) -> tuple[float, float, float]:
    """Convert RGB bytes to hue in degrees, saturation and value both on 0..255."""
    for channel in (red, green, blue):
        if not 0 <= channel <= 255:
            raise ValueError(f"colour channel out of range: {channel}")
    high = max(red, green, blue)
    delta = high - min(red, green, blue)
    if high == 0:
        return 0.0, 0.0, 0.0
    saturation = delta * 255 // high
    if delta == 0:
        hue = 0
    elif red == high:
        hue = _trunc_div((green - blue) * 60, delta)
    elif green == high:
        hue = 120 + _trunc_div((blue - red) * 60, delta)
    else:
        hue = 240 + _trunc_div((red - green) * 60, delta)
    if hue < 0:
        hue += 360
    return float(hue), float(saturation), float(high)