"""Palette — how generators ask for colors without caring whether any were given.

With no colors the palette is monochrome: every tone is `currentColor` and
shading becomes opacity, so the consumer recolors the mark with CSS alone.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from glyph.utils.color import (
    Gradient,
    GradientStop,
    darken,
    hex_to_rgb,
    lighten,
    mix_colors,
    rgb_to_hex,
)

CURRENT_COLOR = "currentColor"

# Monochrome: each lightness point costs this much opacity; accent blending costs more.
_ALPHA_PER_LIGHTEN = 0.02
_ALPHA_PER_ACCENT = 0.25
_MIN_ALPHA = 0.35


@dataclass(frozen=True)
class Palette:
    primary: str | None = None
    accent: str | None = None

    def __post_init__(self) -> None:
        # Normalise to lowercase #rrggbb; hex_to_rgb raises InvalidColorError on junk.
        if self.primary is not None:
            object.__setattr__(self, "primary", rgb_to_hex(*hex_to_rgb(self.primary)))
        if self.accent is not None:
            object.__setattr__(self, "accent", rgb_to_hex(*hex_to_rgb(self.accent)))

    @property
    def monochrome(self) -> bool:
        return self.primary is None

    def tone(self, shift: float = 0.0, accent_mix: float = 0.0) -> str:
        """Primary shifted in HSL lightness, optionally blended toward the accent."""
        if self.primary is None:
            return CURRENT_COLOR
        base = self.primary
        if accent_mix > 0:
            base = mix_colors(base, self.accent or lighten(base, 25), accent_mix)
        if shift > 0:
            return lighten(base, shift)
        if shift < 0:
            return darken(base, -shift)
        return base

    def alpha(self, shift: float = 0.0, accent_mix: float = 0.0) -> float:
        if not self.monochrome:
            return 1.0
        a = 1.0 - _ALPHA_PER_LIGHTEN * max(0.0, shift) - _ALPHA_PER_ACCENT * accent_mix
        return round(max(_MIN_ALPHA, min(1.0, a)), 3)

    def stop(self, offset: float, shift: float = 0.0, accent_mix: float = 0.0, opacity: float = 1.0) -> GradientStop:
        return GradientStop(
            offset=offset,
            color=self.tone(shift, accent_mix),
            opacity=round(opacity * self.alpha(shift, accent_mix), 3),
        )

    def gradient(
        self,
        local_id: str,
        stops: Iterable[tuple[float, float, float]],
        angle: float = 0.0,
        kind: str = "linear",
    ) -> Gradient:
        """Stops are (offset, lightness shift, accent mix) triples."""
        return Gradient(
            id=local_id,
            kind=kind,
            stops=tuple(self.stop(o, s, m) for o, s, m in stops),
            angle=angle,
        )
