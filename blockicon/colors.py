"""
blockicon/colors.py
HSL color picking and color string resolution

pick_color() consumes the RNG and produces the reference generator's
unclamped "hsl(H,S%,L%)" strings. to_rgb() is the renderer side: it turns any
color string into an RGB triple the way a browser canvas would.
"""

import colorsys
import math
import re
from decimal import Decimal
from typing import Tuple

from PIL import ImageColor

from .config import COLOR_MODEL
from .rng import SeededRNG

RGB = Tuple[int, int, int]

_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_HSL_RE = re.compile(
    rf"^\s*hsla?\(\s*({_NUMBER})\s*,\s*({_NUMBER})%\s*,\s*({_NUMBER})%\s*(?:,\s*{_NUMBER}%?\s*)?\)\s*$",
    re.IGNORECASE,
)


def format_number(value: float) -> str:
    """
    Format a number the way JavaScript's Number#toString does.

    Shortest round-trip digits, no trailing ".0" on integral values, and
    exponent notation only below 1e-6 or from 1e21 upward.

    Examples:
        40.0 -> "40"
        87.5 -> "87.5"
        1.1641532182693481e-08 -> "1.1641532182693481e-8"
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    k = len(digits)
    n = k + exponent  # value == 0.<digits> * 10**n

    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        mantissa = digits[0] if k == 1 else f"{digits[0]}.{digits[1:]}"
        e = n - 1
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + body


def pick_color(rng: SeededRNG) -> str:
    """
    Draw an HSL color string from the RNG.

    Consumes exactly COLOR_DRAWS values in the order hue, saturation, then the
    lightness draws. Nothing is clamped: with draws in [0, 2) the hue can
    reach 719 and saturation and lightness can pass 100%.
    """
    h = math.floor(rng.generate() * COLOR_MODEL.hue_range)
    s = rng.generate() * COLOR_MODEL.saturation_span + COLOR_MODEL.saturation_base
    total = 0.0
    for _ in range(COLOR_MODEL.lightness_draws):
        total = total + rng.generate()
    lightness = total * COLOR_MODEL.lightness_span
    return f"hsl({h},{format_number(s)}%,{format_number(lightness)}%)"


def parse_hsl(color: str) -> Tuple[float, float, float]:
    """
    Parse "hsl(H,S%,L%)" into raw (hue, saturation, lightness) floats.

    Raises:
        ValueError: If color is not an hsl()/hsla() string
    """
    m = _HSL_RE.match(color)
    if not m:
        raise ValueError(f"Not an hsl() color: {color!r}")
    return float(m.group(1)), float(m.group(2)), float(m.group(3))


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> RGB:
    """
    Convert CSS-style HSL to 8-bit RGB.

    Hue wraps modulo 360; saturation and lightness clamp to 0-100,
    matching how browsers treat out-of-range hsl() values.
    """
    h = (hue % 360) / 360
    s = min(max(saturation, 0.0), 100.0) / 100
    light = min(max(lightness, 0.0), 100.0) / 100
    r, g, b = colorsys.hls_to_rgb(h, light, s)
    return (round(r * 255), round(g * 255), round(b * 255))


def to_rgb(color: str) -> RGB:
    """
    Resolve any supported color string to an RGB triple.

    hsl() strings go through hsl_to_rgb (out-of-range values allowed).
    Everything else (names, hex, rgb()) is handed to Pillow's ImageColor.

    Raises:
        ValueError: If the color string is not recognized
    """
    if _HSL_RE.match(color):
        return hsl_to_rgb(*parse_hsl(color))
    return ImageColor.getrgb(color)[:3]
