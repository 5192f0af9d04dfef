"""Color helpers — hex/RGB/HSL conversion, tone shifts, gradient definitions. No engine imports."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field

RGB = tuple[int, int, int]

_HEX_RE = re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)

# WCAG 2.x: luminance above this reads as a light background.
_LIGHT_LUMINANCE = 0.179


class InvalidColorError(ValueError):
    """Raised when a caller passes a color that is not a 3- or 6-digit hex string."""


def hex_to_rgb(color: str) -> RGB:
    """Parse '#rrggbb', 'rrggbb' or '#rgb' into (r, g, b)."""
    if not isinstance(color, str):
        raise InvalidColorError(f"Invalid hex color: {color!r}")
    m = _HEX_RE.match(color.strip())
    if not m:
        raise InvalidColorError(f"Invalid hex color: {color!r}")
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def is_valid_hex(color: str) -> bool:
    return isinstance(color, str) and bool(_HEX_RE.match(color.strip()))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Channels are clamped to 0-255 and rounded."""
    channels = (max(0, min(255, int(round(c)))) for c in (r, g, b))
    return "#" + "".join(f"{c:02x}" for c in channels)


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """(h 0-360, s 0-100, l 0-100). Unrounded so round trips stay within ±1."""
    rf, gf, bf = r / 255.0, g / 255.0, b / 255.0
    mx, mn = max(rf, gf, bf), min(rf, gf, bf)
    lightness = (mx + mn) / 2
    if mx == mn:
        return (0.0, 0.0, lightness * 100)

    d = mx - mn
    sat = d / (2 - mx - mn) if lightness > 0.5 else d / (mx + mn)
    if mx == rf:
        hue = (gf - bf) / d + (6 if gf < bf else 0)
    elif mx == gf:
        hue = (bf - rf) / d + 2
    else:
        hue = (rf - gf) / d + 4
    return (hue * 60.0, sat * 100, lightness * 100)


def _hue_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    hf = (h % 360) / 360.0
    sf = max(0.0, min(100.0, s)) / 100.0
    lf = max(0.0, min(100.0, l)) / 100.0
    if sf == 0:
        v = int(round(lf * 255))
        return (v, v, v)
    q = lf * (1 + sf) if lf < 0.5 else lf + sf - lf * sf
    p = 2 * lf - q
    return (
        int(round(_hue_channel(p, q, hf + 1 / 3) * 255)),
        int(round(_hue_channel(p, q, hf) * 255)),
        int(round(_hue_channel(p, q, hf - 1 / 3) * 255)),
    )


def hex_to_hsl(color: str) -> tuple[float, float, float]:
    return rgb_to_hsl(*hex_to_rgb(color))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def lighten(color: str, amount: float) -> str:
    """Raise HSL lightness by `amount` percentage points."""
    h, s, l = hex_to_hsl(color)
    return hsl_to_hex(h, s, min(100.0, l + amount))


def darken(color: str, amount: float) -> str:
    h, s, l = hex_to_hsl(color)
    return hsl_to_hex(h, s, max(0.0, l - amount))


def rotate_hue(color: str, degrees: float) -> str:
    h, s, l = hex_to_hsl(color)
    return hsl_to_hex((h + degrees) % 360, s, l)


def mix_colors(a: str, b: str, t: float = 0.5) -> str:
    """Linear RGB blend: t=0 -> a, t=1 -> b."""
    t = max(0.0, min(1.0, t))
    ra, ga, ba = hex_to_rgb(a)
    rb, gb, bb = hex_to_rgb(b)
    return rgb_to_hex(ra + (rb - ra) * t, ga + (gb - ga) * t, ba + (bb - ba) * t)


def luminance(color: str) -> float:
    """WCAG relative luminance, 0-1."""

    def channel(c: int) -> float:
        v = c / 255.0
        return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4

    r, g, b = hex_to_rgb(color)
    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def contrast_ratio(a: str, b: str) -> float:
    la, lb = luminance(a), luminance(b)
    hi, lo = max(la, lb), min(la, lb)
    return (hi + 0.05) / (lo + 0.05)


def is_light(color: str) -> bool:
    return luminance(color) > _LIGHT_LUMINANCE


def contrast_color(color: str) -> str:
    """Black or white, whichever reads better on `color`."""
    return "#000000" if is_light(color) else "#ffffff"


# ---------------------------------------------------------------------------
# Gradients
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GradientStop:
    offset: float  # 0-1
    color: str
    opacity: float = 1.0


@dataclass(frozen=True)
class Gradient:
    """Reusable gradient definition. `id` is local; the SVG builder namespaces it."""

    id: str
    kind: str = "linear"  # "linear" | "radial"
    stops: tuple[GradientStop, ...] = field(default_factory=tuple)
    angle: float = 0.0

    def endpoints(self) -> tuple[float, float, float, float]:
        """(x1, y1, x2, y2) in percent for a linear gradient at `angle` degrees."""
        rad = math.radians(self.angle)
        c, s = math.cos(rad), math.sin(rad)
        return (50 - 50 * c, 50 - 50 * s, 50 + 50 * c, 50 + 50 * s)


def _spread(colors: list[str] | tuple[str, ...]) -> tuple[GradientStop, ...]:
    if len(colors) < 2:
        raise ValueError("A gradient needs at least two colors")
    last = len(colors) - 1
    return tuple(GradientStop(offset=i / last, color=c) for i, c in enumerate(colors))


def linear_gradient(gradient_id: str, colors: list[str] | tuple[str, ...], angle: float = 0.0) -> Gradient:
    return Gradient(id=gradient_id, kind="linear", stops=_spread(colors), angle=angle)


def radial_gradient(gradient_id: str, colors: list[str] | tuple[str, ...]) -> Gradient:
    return Gradient(id=gradient_id, kind="radial", stops=_spread(colors))
