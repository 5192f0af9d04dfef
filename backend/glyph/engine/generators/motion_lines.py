"""Motion lines — stacked, tapered wave strokes that suggest speed."""

from __future__ import annotations

import math

from glyph.engine.context import GenerationContext
from glyph.engine.registry import generator
from glyph.utils.geometry import Point, clamp, lerp, organic_shape, pt

TAPER_DIRECTIONS = ("left", "right", "both", "none")


def tapered_line(center: list[Point], thickness: float, taper: str, tension: float, velocity: float) -> str:
    """Closed ribbon around a centerline: top edge forward, bottom edge back."""
    n = len(center)
    top: list[Point] = []
    bottom: list[Point] = []
    for i, (x, y) in enumerate(center):
        t = i / (n - 1)
        k = 1.0
        if taper in ("left", "both"):
            k *= 0.3 + t * 0.7
        if taper in ("right", "both"):
            k *= 0.3 + (1 - t) * 0.7
        edge = min(t, 1 - t)
        k *= max(0.2, 1 - velocity * (1 - edge * 4) * 0.5)
        half = thickness * k / 2
        top.append((x, y - half))
        bottom.append((x, y + half))

    top_d = organic_shape(top, tension, closed=False)
    bottom_rev = list(reversed(bottom))
    bottom_d = organic_shape(bottom_rev, tension, closed=False)
    end_cap = (top[-1][0] + thickness * 0.3, (top[-1][1] + bottom[-1][1]) / 2)
    start_cap = (top[0][0] - thickness * 0.3, (top[0][1] + bottom[0][1]) / 2)
    # Drop the leading "M x y" of the bottom edge; we arrive there via the end cap.
    bottom_tail = bottom_d.split(" ", 3)[3]
    return (
        f"{top_d} Q {pt(end_cap)}, {pt(bottom_rev[0])} {bottom_tail} "
        f"Q {pt(start_cap)}, {pt(top[0])} Z"
    )


@generator(
    id="motion-lines",
    name="Motion Lines",
    description="Dynamic flowing lines suggesting speed and momentum",
    inspiration="Linear / Framer",
    tags={"tech", "minimal", "dynamic"},
    animation="slide-right",
)
def motion_lines(ctx: GenerationContext) -> str:
    p = ctx.params
    pal = ctx.palette
    size = ctx.size
    svg = ctx.builder()

    line_count = int(clamp(round(p.element_count / 2), 3, 8))
    thickness = clamp(p.stroke_width, 2.0, 10.0)
    amplitude = p.curve_amplitude * 0.12
    stagger = p.jitter_amount * 1.5
    taper = TAPER_DIRECTIONS[p.style_variant % 4]

    padding = size * 0.15
    spacing = (size - padding * 2) / (line_count + 1)
    # Lines must not overlap each other vertically.
    thickness = min(thickness, spacing * 0.8)

    fill = svg.gradient(pal.gradient("line", [(0.0, 20, 0.0), (1.0, -5, 0.7)], angle=0))
    for i in range(line_count):
        base_y = padding + spacing * (i + 1)
        shift = stagger * (1 if i % 2 == 0 else -1) * (i / line_count)
        start_x = padding + shift
        end_x = size - padding + shift - (p.taper_ratio * 12 if i % 3 == 1 else 0)
        phase = i / line_count * math.pi
        center = []
        for s in range(5):
            t = s / 4
            center.append((lerp(start_x, end_x, t), base_y + math.sin(t * math.pi * 2 + phase) * amplitude))
        svg.path(tapered_line(center, thickness, taper, p.curve_tension, p.organic_amount), fill=fill)

    return svg.build()
