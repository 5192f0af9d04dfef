"""Isometric cube — a true 30° isometric block with three lit faces and inner detail."""

from __future__ import annotations

import math

from glyph.engine.context import GenerationContext
from glyph.engine.registry import generator
from glyph.utils.geometry import Point, clamp, polygon_points

DETAILS = ("plain", "stacked", "hollow", "split")

_COS30 = math.cos(math.radians(30))


def iso_faces(cx: float, cy: float, edge: float) -> dict[str, list[Point]]:
    """Top, left and right faces of an isometric cube whose hexagon outline is centred on (cx, cy)."""
    dx, dy = edge * _COS30, edge / 2
    top_v = (cx, cy - edge)
    center = (cx, cy)
    left_up, right_up = (cx - dx, cy - dy), (cx + dx, cy - dy)
    left_dn, right_dn = (cx - dx, cy + dy), (cx + dx, cy + dy)
    bottom_v = (cx, cy + edge)
    return {
        "top": [top_v, right_up, center, left_up],
        "left": [left_up, center, bottom_v, left_dn],
        "right": [center, right_up, right_dn, bottom_v],
    }


@generator(
    id="isometric-cube",
    name="Isometric Cube",
    description="Isometric 3D cube with shaded faces",
    inspiration="Pitch",
    tags={"geometric", "bold", "tech"},
    animation="scale-in",
)
def isometric_cube(ctx: GenerationContext) -> str:
    p = ctx.params
    pal = ctx.palette
    cx, cy = ctx.center
    svg = ctx.builder()

    edge = clamp(ctx.size * 0.36 * p.scale_factor, 24.0, 44.0)
    detail = DETAILS[p.color_placement % 4]
    shades = {"top": 18, "left": 0, "right": -18}

    def draw(faces: dict[str, list[Point]], tag: str, scale_alpha: float = 1.0) -> None:
        for name, pts in faces.items():
            shift = shades[name]
            fill = svg.gradient(
                pal.gradient(f"{tag}-{name}", [(0.0, shift + 5, 0.0), (1.0, shift - 5, 0.3)], angle=90)
            )
            attrs = {"fill": fill}
            if scale_alpha < 1.0:
                attrs["opacity"] = round(scale_alpha, 3)
            svg.polygon(polygon_points(pts), **attrs)

    if detail == "stacked":
        small = edge * 0.55
        draw(iso_faces(cx, cy + edge * 0.45, small), "base")
        draw(iso_faces(cx, cy - edge * 0.35, small * 0.9), "cap")
    else:
        draw(iso_faces(cx, cy, edge), "cube")
        if detail == "hollow":
            inner = edge * clamp(p.cut_depth, 0.3, 0.6)
            svg.polygon(polygon_points(iso_faces(cx, cy, inner)["top"]), fill=pal.tone(-30), opacity=pal.alpha(-30) * 0.6)
        elif detail == "split":
            gap = clamp(p.stroke_width * 0.25, 0.8, 2.5)
            svg.path(
                f"M {cx:.2f} {cy - edge:.2f} L {cx:.2f} {cy + edge:.2f}",
                stroke=pal.tone(35),
                stroke_opacity=pal.alpha(35),
                stroke_width=float(gap),
                fill="none",
            )

    return svg.build()
