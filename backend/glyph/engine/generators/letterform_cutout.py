"""Letterform cutout — the brand's initial inside a geometric frame.

The frame is a solid square, circle, rounded square or hexagon. The letter
comes from the per-letter stroke table and is either knocked out of the frame
(cutout) or drawn on top of a ring frame (framed). Names that do not start with
a letter fall back to the default primitive.
"""

from __future__ import annotations

from glyph.engine.context import GenerationContext
from glyph.engine.letters import letter_primitive
from glyph.engine.registry import generator
from glyph.utils.geometry import (
    bezier_circle,
    clamp,
    map_range,
    pt,
    regular_polygon,
    rotated_rounded_bar,
)

FRAME_SHAPES = ("square", "circle", "rounded", "hexagon")


def frame_outline(shape: str, cx: float, cy: float, extent: float, rotation: float) -> str:
    """Closed frame outline with half-size `extent`."""
    if shape == "circle":
        return bezier_circle(cx, cy, extent)
    if shape == "hexagon":
        pts = regular_polygon((cx, cy), extent * 1.08, 6, rotation)
        return "M " + " L ".join(pt(q) for q in pts) + " Z"
    radius = extent * (0.32 if shape == "rounded" else 0.06)
    return rotated_rounded_bar(cx, cy, extent * 2, extent * 2, radius, rotation)


@generator(
    id="letterform-cutout",
    name="Letterform Cutout",
    description="Bold initial letter carved out of a geometric frame",
    inspiration="Notion",
    tags={"letter", "corporate", "bold"},
    animation="draw",
)
def letterform_cutout(ctx: GenerationContext) -> str:
    p = ctx.params
    pal = ctx.palette
    cx, cy = ctx.center
    svg = ctx.builder()

    shape = FRAME_SHAPES[p.style_variant % len(FRAME_SHAPES)]
    padding = ctx.size * map_range(p.spacing_factor, 0.5, 2.0, 0.08, 0.16)
    extent = ctx.size / 2 - padding
    thickness = map_range(p.ring_thickness, 2.0, 12.0, 3.0, 11.0)
    letter_scale = map_range(p.scale_factor, 0.7, 1.3, 0.5, 0.85)
    weight = map_range(p.letter_weight, 100, 900, 2.0, 7.0)
    # Only shapes with corners read as rotated.
    rotation = 0.0 if shape == "circle" else map_range(p.angle_spread, 0.0, 90.0, 0.0, 30.0) * (p.style_variant % 2)

    _, build_letter = letter_primitive(ctx.brand_name)
    letter_size = extent * 2 * letter_scale * (0.82 if shape != "circle" else 0.74)
    letter_d = build_letter(letter_size, weight * 1.6, cx, cy)

    fill = svg.gradient(pal.gradient("frame", [(0.0, 8, 0.0), (1.0, -12, 0.5)], angle=p.gradient_angle))

    if p.cut_depth >= 0.35:
        mask = svg.knockout("letter", [letter_d], stroke_width=weight * 1.6)
        svg.path(frame_outline(shape, cx, cy, extent, rotation), fill=fill, mask=mask)
    else:
        inner_extent = clamp(extent - thickness, extent * 0.5, extent)
        svg.path(
            frame_outline(shape, cx, cy, extent, rotation) + " " + frame_outline(shape, cx, cy, inner_extent, rotation),
            fill=fill,
            fill_rule="evenodd",
        )
        svg.path(
            build_letter(letter_size * 0.9, weight, cx, cy),
            fill="none",
            stroke=pal.tone(-6, 0.4),
            stroke_opacity=pal.alpha(0, 0.4),
            stroke_width=float(weight),
            stroke_linecap="round",
            stroke_linejoin="round",
        )

    return svg.build()
