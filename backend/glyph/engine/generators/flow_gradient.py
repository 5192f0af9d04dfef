"""Flow gradient — soft organic layers with flowing, wavy edges."""

from __future__ import annotations

import math

from glyph.engine.context import GenerationContext
from glyph.engine.registry import generator
from glyph.engine.seed import SeededRandom
from glyph.utils.geometry import (
    Point,
    catmull_rom_segments,
    clamp,
    fit_scale,
    organic_shape,
    polar_to_xy,
    rotate_points,
    scale_points,
)

FLOW_DIRECTIONS = ("horizontal", "vertical", "diagonal", "radial")


def _blob(cx: float, cy: float, radius: float, waves: int, amplitude: float, blob: float, organic: float, rng: SeededRandom) -> list[Point]:
    count = 8 + waves * 2
    pts = []
    for i in range(count):
        deg = 360 * i / count
        a = math.radians(deg)
        r = (
            radius
            + math.sin(a * waves) * amplitude * 0.3
            + rng.noise(organic, radius * 0.2)
            + math.sin(a * 2) * blob * radius * 0.15
        )
        pts.append(polar_to_xy((cx, cy), r, deg))
    return pts


def _band(size: float, t: float, waves: int, amplitude: float, organic: float, rng: SeededRandom) -> list[Point]:
    """Horizontal wavy band; other directions rotate it."""
    padding = size * 0.12
    segments = 6
    y_offset = size * 0.28 * (t - 0.5)
    top, bottom = [], []
    for i in range(segments + 1):
        u = i / segments
        x = padding + u * (size - padding * 2)
        top.append((x, size * 0.34 + y_offset + math.sin(u * math.pi * waves) * amplitude + rng.noise(organic, 3)))
    for i in range(segments, -1, -1):
        u = i / segments
        x = padding + u * (size - padding * 2)
        wave = math.sin(u * math.pi * waves + math.pi) * amplitude * 0.5
        bottom.append((x, size * 0.66 + y_offset + wave + rng.noise(organic, 3)))
    return top + bottom


@generator(
    id="flow-gradient",
    name="Flow Gradient",
    description="Organic flowing shapes with smooth gradient transitions",
    inspiration="Loom",
    tags={"organic", "friendly", "elegant"},
    animation="morph",
)
def flow_gradient(ctx: GenerationContext) -> str:
    p = ctx.params
    pal = ctx.palette
    cx, cy = ctx.center
    rng = ctx.rng("flow")
    svg = ctx.builder()

    direction = FLOW_DIRECTIONS[p.style_variant % 4]
    waves = int(clamp(round(p.element_count / 5), 1, 4))
    amplitude = clamp(p.curve_amplitude * 0.3, 4.0, 12.0)
    layers = int(clamp(p.layer_count, 1, 3)) + 1

    shapes = []
    for i in range(layers):
        t = i / max(1, layers - 1)
        if direction == "radial":
            radius = ctx.size * (0.36 - 0.08 * i)
            pts = _blob(cx, cy, radius, waves, amplitude, p.flow_intensity, p.organic_amount, rng)
        else:
            pts = _band(ctx.size, t, waves, amplitude, p.organic_amount, rng)
            if direction == "vertical":
                pts = rotate_points(pts, (cx, cy), 90)
            elif direction == "diagonal":
                pts = rotate_points(pts, (cx, cy), 45)
        shapes.append(pts)

    # Wave crests and spline overshoot can cross the edge; fit the whole control hull.
    hull = [q for pts in shapes for segment in catmull_rom_segments(pts, p.curve_tension) for q in segment]
    k = fit_scale(hull, ctx.size)

    for i, pts in enumerate(shapes):
        t = i / max(1, layers - 1)
        fill = svg.gradient(
            pal.gradient(
                f"flow-{i}",
                [(0.0, 18 - 6 * i, t * 0.3), (0.5, 0, t * 0.6), (1.0, -12, t)],
                angle=p.gradient_angle + i * 25,
            )
        )
        svg.path(
            organic_shape(scale_points(pts, (cx, cy), k), p.curve_tension, closed=True),
            fill=fill,
            opacity=round(0.95 - 0.15 * i, 3),
        )

    return svg.build()
