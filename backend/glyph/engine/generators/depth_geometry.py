"""Depth geometry — extruded solids shaded by face.

Cube, prism, pyramid or a stack of offset organic polygons. Faces share one hue
and differ in lightness, so depth reads even in monochrome.
"""

from __future__ import annotations

import math

from glyph.engine.context import GenerationContext
from glyph.engine.registry import generator
from glyph.utils.geometry import Point, clamp, polar_to_xy, smooth_polygon

SHAPE_TYPES = ("cube", "prism", "pyramid", "abstract")


def _cube_faces(cx: float, cy: float, size: float, depth: float, angle_deg: float) -> list[list[Point]]:
    half = size / 2
    rad = math.radians(angle_deg)
    dx, dy = depth * math.cos(rad), depth * math.sin(rad)
    front = [(cx - half, cy - half), (cx + half - dx, cy - half), (cx + half - dx, cy + half), (cx - half, cy + half)]
    top = [(cx - half, cy - half), (cx - half + dx, cy - half - dy), (cx + half, cy - half - dy), (cx + half - dx, cy - half)]
    side = [(cx + half - dx, cy - half), (cx + half, cy - half - dy), (cx + half, cy + half - dy), (cx + half - dx, cy + half)]
    return [side, top, front]


def _prism_faces(cx: float, cy: float, size: float, depth: float) -> list[list[Point]]:
    half = size / 2
    apex = (cx - depth / 2, cy - half)
    left = (cx - half * 0.8 - depth / 2, cy + half * 0.6)
    right = (cx + half * 0.8 - depth / 2, cy + half * 0.6)
    shift = (depth, -depth * 0.3)

    def moved(q: Point) -> Point:
        return (q[0] + shift[0], q[1] + shift[1])

    side = [right, apex, moved(apex), moved(right)]
    front = [apex, left, right]
    return [side, front]


def _pyramid_faces(cx: float, cy: float, size: float, depth: float) -> list[list[Point]]:
    half = size / 2
    apex = (cx, cy - half)
    base_l = (cx - half, cy + half * 0.55)
    base_r = (cx + half, cy + half * 0.55)
    base_front = (cx + depth * 0.3, cy + half * 0.55 + depth * 0.4)
    return [[apex, base_front, base_r], [apex, base_l, base_front]]


def _abstract_layers(cx: float, cy: float, size: float, depth: float, layers: int) -> list[list[Point]]:
    out = []
    for i in range(layers):
        offset = i * depth / layers - depth / 2
        layer_size = size * 0.8 * (1 - i * 0.1)
        sides = 5 + i % 3
        pts = []
        for j in range(sides):
            deg = 360 * j / sides
            r = layer_size / 2 * (0.8 + math.sin(math.radians(deg) * 2 + i) * 0.2)
            pts.append(polar_to_xy((cx + offset, cy - offset * 0.5), r, deg))
        out.append(pts)
    return out


@generator(
    id="depth-geometry",
    name="Depth Geometry",
    description="Layered 3D solids with shaded faces",
    inspiration="Raycast",
    tags={"geometric", "bold", "tech"},
    animation="scale-in",
)
def depth_geometry(ctx: GenerationContext) -> str:
    p = ctx.params
    pal = ctx.palette
    cx, cy = ctx.center
    svg = ctx.builder()

    shape = SHAPE_TYPES[p.style_variant % 4]
    depth = clamp(p.depth_offset, 3.0, 15.0)
    perspective = (p.rotation_offset - 180) / 6 + 45
    size = ctx.size * 0.56

    if shape == "cube":
        faces = _cube_faces(cx + depth / 4, cy + depth / 4, size, depth, perspective)
    elif shape == "prism":
        faces = _prism_faces(cx, cy, size, depth)
    elif shape == "pyramid":
        faces = _pyramid_faces(cx, cy, size, depth)
    else:
        faces = _abstract_layers(cx, cy, size, depth, int(clamp(p.layer_count + 1, 2, 5)))

    # Back faces darkest, front face lightest; shadow intensity widens the spread.
    spread = 15 + 20 * p.organic_amount
    count = len(faces)
    for i, face in enumerate(faces):
        t = i / max(1, count - 1)
        shift = -spread + 2 * spread * t * 0.75
        fill = svg.gradient(
            pal.gradient(
                f"face-{i}",
                [(0.0, shift + 6, 0.0), (1.0, shift - 6, t * 0.4)],
                angle=p.gradient_angle,
            )
        )
        svg.path(smooth_polygon(face), fill=fill)

    return svg.build()
