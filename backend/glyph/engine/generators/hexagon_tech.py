"""Hexagon tech — nested hexagon rings with circuit traces and nodes."""

from __future__ import annotations

from glyph.engine.context import GenerationContext
from glyph.engine.registry import generator
from glyph.utils.geometry import bezier_circle, clamp, polar_to_xy, pt, regular_polygon

LAYOUTS = ("nested", "segmented", "circuit")


def _hex_ring(cx: float, cy: float, outer: float, inner: float, rotation: float) -> str:
    o = regular_polygon((cx, cy), outer, 6, rotation)
    i = regular_polygon((cx, cy), inner, 6, rotation)
    outer_d = "M " + " L ".join(pt(q) for q in o) + " Z"
    inner_d = "M " + " L ".join(pt(q) for q in reversed(i)) + " Z"
    return f"{outer_d} {inner_d}"


@generator(
    id="hexagon-tech",
    name="Hexagon Tech",
    description="Nested hexagons with circuit-like connection nodes",
    inspiration="Developer tooling marks",
    tags={"geometric", "tech", "bold"},
    animation="draw",
)
def hexagon_tech(ctx: GenerationContext) -> str:
    p = ctx.params
    pal = ctx.palette
    cx, cy = ctx.center
    svg = ctx.builder()

    layout = LAYOUTS[p.style_variant % 3]
    # Flat-top or pointy-top only.
    rotation = 30.0 if p.rotation_offset >= 180 else 0.0
    outer = ctx.size * 0.42
    band = clamp(p.ring_thickness, 3.0, 9.0)
    rings = int(clamp(p.layer_count, 1, 3))

    fill = svg.gradient(pal.gradient("hex", [(0.0, 12, 0.0), (1.0, -12, 0.6)], angle=p.gradient_angle))

    if layout == "segmented":
        # Six separate trapezoids with gaps between them.
        gap = clamp(p.spacing_factor * 2, 1.0, 4.0)
        o = regular_polygon((cx, cy), outer, 6, rotation)
        i = regular_polygon((cx, cy), outer - band * 1.5, 6, rotation)
        for k in range(6):
            a0, a1 = o[k], o[(k + 1) % 6]
            b0, b1 = i[k], i[(k + 1) % 6]
            shrink = gap / outer

            def inset(a, b, f=shrink):
                return (a[0] + (b[0] - a[0]) * f, a[1] + (b[1] - a[1]) * f)

            svg.path(
                f"M {pt(inset(a0, a1))} L {pt(inset(a1, a0))} L {pt(inset(b1, b0))} L {pt(inset(b0, b1))} Z",
                fill=fill,
                opacity=round(0.7 + 0.3 * ((k + p.color_placement) % 6) / 5, 3),
            )
        core = outer - band * 3
        svg.path(bezier_circle(cx, cy, max(core * 0.45, 3.0)), fill=pal.tone(-8), opacity=pal.alpha(-8))
        return svg.build()

    step = (outer - band) / (rings + 1)
    for r in range(rings):
        ro = outer - r * step * 1.2
        svg.path(_hex_ring(cx, cy, ro, ro - band, rotation), fill=fill, fill_rule="evenodd")

    if layout == "circuit":
        node_r = clamp(p.stroke_width * 0.35, 1.2, 3.0)
        trace_w = clamp(p.stroke_width * 0.25, 0.8, 2.0)
        inner_edge = outer - band - (rings - 1) * step * 1.2
        reach = max(inner_edge - node_r * 2, outer * 0.2)
        count = 3 + p.element_count % 4
        for k in range(count):
            angle = rotation + 30 + k * 360.0 / count
            end = polar_to_xy((cx, cy), reach, angle)
            svg.path(
                f"M {pt((cx, cy))} L {pt(end)}",
                fill="none",
                stroke=pal.tone(-10, 0.5),
                stroke_opacity=pal.alpha(-10, 0.5),
                stroke_width=float(trace_w),
                stroke_linecap="round",
            )
            svg.path(bezier_circle(end[0], end[1], node_r), fill=pal.tone(-10, 0.5), opacity=pal.alpha(-10, 0.5))
        svg.path(bezier_circle(cx, cy, node_r * 1.6), fill=pal.tone(-15), opacity=pal.alpha(-15))

    return svg.build()
