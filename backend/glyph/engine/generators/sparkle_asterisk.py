"""Sparkle / asterisk — a pointed star with concave sides, or rounded asterisk spokes."""

from __future__ import annotations

from glyph.engine.context import GenerationContext
from glyph.engine.registry import generator
from glyph.utils.geometry import bezier_circle, clamp, polar_to_xy, pt, rotated_rounded_bar


def sparkle_path(cx: float, cy: float, points: int, outer: float, inner: float, rotation: float) -> str:
    """Star whose sides curve inward through quadratic controls near the center."""
    parts = []
    step = 360.0 / points
    for k in range(points):
        tip = polar_to_xy((cx, cy), outer, rotation + k * step)
        ctrl = polar_to_xy((cx, cy), inner, rotation + k * step + step / 2)
        nxt = polar_to_xy((cx, cy), outer, rotation + (k + 1) * step)
        if k == 0:
            parts.append(f"M {pt(tip)}")
        parts.append(f"Q {pt(ctrl)}, {pt(nxt)}")
    parts.append("Z")
    return " ".join(parts)


@generator(
    id="sparkle-asterisk",
    name="Sparkle Asterisk",
    description="Playful sparkle or asterisk mark with 4-8 points",
    inspiration="AI assistant sparkles",
    tags={"radial", "playful", "friendly"},
    animation="pop",
)
def sparkle_asterisk(ctx: GenerationContext) -> str:
    p = ctx.params
    pal = ctx.palette
    cx, cy = ctx.center
    svg = ctx.builder()

    points = 4 + p.element_count % 5
    rotation = p.rotation_offset / points
    outer = ctx.size * 0.44
    fill = svg.gradient(pal.gradient("spark", [(0.0, 14, 0.0), (1.0, -10, 0.8)], angle=p.gradient_angle))

    if p.style_variant % 2 == 0:
        pinch = clamp(p.taper_ratio * 0.35, 0.06, 0.25)
        svg.path(sparkle_path(cx, cy, points, outer, outer * pinch, rotation), fill=fill)
        if p.cut_depth > 0.6:
            # Companion mini sparkle in the upper-right corner.
            mini = outer * 0.28
            mx, my = polar_to_xy((cx, cy), outer * 0.82, 45)
            svg.path(sparkle_path(mx, my, 4, mini, mini * 0.2, 0), fill=pal.tone(10, 0.6), opacity=pal.alpha(10, 0.6))
    else:
        width = clamp(p.arm_width, 5.0, 12.0)
        spokes = max(3, points // 2 + 1)
        for k in range(spokes):
            svg.path(
                rotated_rounded_bar(cx, cy, width, outer * 2, width / 2, rotation + k * 180.0 / spokes),
                fill=fill,
            )
        if p.center_radius > 6:
            svg.path(bezier_circle(cx, cy, width * 0.35), fill=pal.tone(30), opacity=pal.alpha(30))

    return svg.build()
