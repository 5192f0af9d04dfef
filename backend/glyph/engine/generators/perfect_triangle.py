"""Perfect triangle — one precise geometric triangle, optionally hollowed.

Equilateral, golden-ratio isosceles, or right triangle, rotated about the
canvas center. The body is always a `<polygon>` so the edges stay exact.
"""

from __future__ import annotations

import math

from glyph.engine.context import GenerationContext
from glyph.engine.registry import generator
from glyph.utils.geometry import Point, clamp, fit_scale, polygon_points, pt, rotate_points, scale_points

PHI = (1 + math.sqrt(5)) / 2

TRIANGLE_TYPES = ("equilateral", "isosceles", "right")
FILL_STYLES = ("solid", "gradient", "outline")

# Inward pull of the quadratic control point on the cutout edges.
_EDGE_CURVATURE = 0.02


def triangle_vertices(kind: str, cx: float, cy: float, size: float) -> list[Point]:
    half = size / 2
    if kind == "equilateral":
        height = half * math.sqrt(3)
        return [(cx, cy - height * 0.6), (cx - half, cy + height * 0.4), (cx + half, cy + height * 0.4)]
    if kind == "isosceles":
        base = half * PHI
        height = half * 1.2
        return [(cx, cy - height * 0.5), (cx - base / 2, cy + height * 0.5), (cx + base / 2, cy + height * 0.5)]
    return [
        (cx - half * 0.4, cy - half * 0.5),
        (cx - half * 0.4, cy + half * 0.5),
        (cx + half * 0.6, cy + half * 0.5),
    ]


def _curved_triangle(vertices: list[Point], curvature: float = _EDGE_CURVATURE) -> str:
    gx = sum(v[0] for v in vertices) / 3
    gy = sum(v[1] for v in vertices) / 3
    parts = [f"M {pt(vertices[0])}"]
    for i in range(3):
        a, b = vertices[i], vertices[(i + 1) % 3]
        mx, my = (a[0] + b[0]) / 2, (a[1] + b[1]) / 2
        ctrl = (mx + (gx - mx) * curvature, my + (gy - my) * curvature)
        parts.append(f"Q {pt(ctrl)}, {pt(b)}")
    parts.append("Z")
    return " ".join(parts)


@generator(
    id="perfect-triangle",
    name="Perfect Triangle",
    description="Single perfect geometric triangle with precision",
    inspiration="Vercel",
    tags={"geometric", "minimal", "corporate"},
    animation="scale-in",
)
def perfect_triangle(ctx: GenerationContext) -> str:
    p = ctx.params
    pal = ctx.palette
    cx, cy = ctx.center
    svg = ctx.builder()

    kind = TRIANGLE_TYPES[p.style_variant % 3]
    fill_style = FILL_STYLES[(p.color_placement // 3) % 3]
    size = clamp(75 + p.scale_factor * 10, 60.0, 90.0)
    # Snap to 15° so the mark reads as deliberate rather than tilted by accident.
    rotation = round(p.rotation_offset / 15) * 15

    base = triangle_vertices(kind, cx, cy, size)
    gx = sum(v[0] for v in base) / 3
    gy = sum(v[1] for v in base) / 3
    # Re-centre on the centroid so rotation does not push the mark off-canvas.
    base = [(x - gx + cx, y - gy + cy) for x, y in base]
    vertices = rotate_points(base, (cx, cy), rotation)
    # A large equilateral body has a circumradius past the canvas half-width.
    vertices = scale_points(vertices, (cx, cy), fit_scale(vertices, ctx.size))

    attrs: dict[str, object] = {}
    if p.cut_depth > 0.5:
        scale = clamp(p.cut_depth, 0.3, 0.7)
        inner = [(cx + (x - cx) * scale, cy + (y - cy) * scale) for x, y in vertices]
        attrs["mask"] = svg.knockout("cutout", [_curved_triangle(inner)])

    if fill_style == "outline":
        outline = clamp(p.stroke_width, 2.0, 10.0)
        svg.polygon(
            polygon_points(vertices),
            fill="none",
            stroke=pal.tone(),
            stroke_width=float(outline),
            stroke_linejoin="miter",
            **attrs,
        )
    elif fill_style == "gradient":
        fill = svg.gradient(pal.gradient("fill", [(0.0, 15, 0.0), (1.0, -15, 0.5)], angle=p.gradient_angle))
        svg.polygon(polygon_points(vertices), fill=fill, **attrs)
    else:
        svg.polygon(polygon_points(vertices), fill=pal.tone(), **attrs)

    return svg.build()
