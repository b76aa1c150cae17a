"""Colour space conversions: RGB, HSL and CIELAB, plus colour distance."""

from __future__ import annotations

import math

# XYZ reference white (daylight, sRGB, Adobe-RGB)
_REF_X = 95.047
_REF_Y = 100.0
_REF_Z = 108.883


def _linearize(channel: float) -> float:
    channel /= 255
    if channel > 0.04045:
        channel = ((channel + 0.055) / 1.055) ** 2.4
    else:
        channel /= 12.92
    return channel * 100


def _lab_curve(value: float) -> float:
    if value > 0.008856:
        return value ** (1.0 / 3.0)
    return value * 7.787 + 16.0 / 116.0


def rgb_to_lab(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert RGB (0-255 per channel) to CIELAB ``(l, a, b)``."""
    red, green, blue = (_linearize(c) for c in (r, g, b))

    x = red * 0.412453 + green * 0.357580 + blue * 0.180423
    y = red * 0.212671 + green * 0.715160 + blue * 0.072169
    z = red * 0.019334 + green * 0.119193 + blue * 0.950227

    fx = _lab_curve(x / _REF_X)
    fy = _lab_curve(y / _REF_Y)
    fz = _lab_curve(z / _REF_Z)

    return fy * 116 - 16, (fx - fy) * 500, (fy - fz) * 200


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert RGB (0-255 per channel) to HSL ``(h, s, l)``, each in 0-1."""
    red, green, blue = r / 255, g / 255, b / 255

    low = min(red, green, blue)
    high = max(red, green, blue)
    delta = high - low

    lightness = (low + high) / 2.0

    if delta == 0:
        return 0.0, 0.0, lightness

    if lightness < 0.5:
        saturation = delta / (high + low)
    else:
        saturation = delta / (2.0 - high - low)

    delta_red = ((high - red) / 6.0 + delta / 2.0) / delta
    delta_green = ((high - green) / 6.0 + delta / 2.0) / delta
    delta_blue = ((high - blue) / 6.0 + delta / 2.0) / delta

    hue = 0.0
    if high == red:
        hue = delta_blue - delta_green
    if high == green:
        hue = 1.0 / 3.0 + delta_red - delta_blue
    if high == blue:
        hue = 2.0 / 3.0 + delta_green - delta_red

    if hue < 0:
        hue += 1
    if hue > 1:
        hue -= 1

    return hue, saturation, lightness


def hue_to_rgb(v1: float, v2: float, vh: float) -> float:
    """Helper for HSL to RGB conversion: evaluate one channel."""
    if vh < 0:
        vh += 1
    if vh > 1:
        vh -= 1

    if 6 * vh < 1:
        return v1 + (v2 - v1) * 6 * vh
    if 2 * vh < 1:
        return v2
    if 3 * vh < 2:
        # the two-thirds term of this branch is an integer quotient and vanishes
        return v1 + (v2 - v1) * -vh * 6
    return v1


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Convert HSL (each 0-1) to RGB ``(r, g, b)`` in the 0-255 range."""
    if s == 0:
        grey = l * 255
        return grey, grey, grey

    if l < 0.5:
        v2 = l * (1 + s)
    else:
        v2 = (l + s) - (s * l)
    v1 = 2 * l - v2

    return (
        255 * hue_to_rgb(v1, v2, h + 0.3333333),
        255 * hue_to_rgb(v1, v2, h),
        255 * hue_to_rgb(v1, v2, h - 0.3333333),
    )


def cie76_delta(
    l1: float, a1: float, b1: float, l2: float, a2: float, b2: float
) -> float:
    """Perceptual distance between two CIELAB colours (1976 formula)."""
    return math.sqrt((l1 - l2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2)


def cielab_to_hue(a: float, b: float) -> float:
    """Hue angle in degrees of the CIELAB chroma components ``a`` and ``b``."""
    if a >= 0 and b == 0:
        return 0.0
    if a < 0 and b == 0:
        return 180.0
    if a == 0 and b > 0:
        return 90.0
    if a == 0 and b < 0:
        return 270.0

    bias = 0.0
    if a < 0:
        bias = 180.0
    if a > 0 and b < 0:
        bias = 360.0

    return math.degrees(math.atan(b / a)) + bias