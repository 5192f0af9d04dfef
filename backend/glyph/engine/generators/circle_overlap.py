"""Circle overlap — translucent discs whose intersections create new tones."""

from __future__ import annotations

from glyph.engine.context import GenerationContext
from glyph.engine.registry import generator
from glyph.utils.geometry import bezier_circle, clamp, polar_to_xy

ARRANGEMENTS = ("horizontal", "vertical", "diagonal", "cluster")


def circle_positions(
    arrangement: str,
    count: int,
    base_radius: float,
    overlap: float,
    size_variation: float,
    center: float,
) -> list[tuple[float, float, float]]:
    """(cx, cy, r) per circle, centred on the canvas."""
    out = []
    for i in range(count):
        r = base_radius * (1 + (size_variation if i % 2 == 0 else -size_variation))
        if arrangement == "cluster":
            cluster = base_radius * (1 - overlap) * 1.2
            x, y = polar_to_xy((center, center), cluster, 360 * i / count)
            out.append((x, y, r))
            continue

        spacing = base_radius * 2 * (1 - overlap)
        if arrangement == "diagonal":
            spacing *= 0.7
        offset = -spacing * (count - 1) / 2 + i * spacing
        if arrangement == "horizontal":
            out.append((center + offset, center, r))
        elif arrangement == "vertical":
            out.append((center, center + offset, r))
        else:
            out.append((center + offset, center + offset, r))
    return out


@generator(
    id="circle-overlap",
    name="Circle Overlap",
    description="Overlapping translucent circles creating new colors at intersections",
    inspiration="Figma",
    tags={"organic", "friendly", "playful"},
    animation="fade-in",
)
def circle_overlap(ctx: GenerationContext) -> str:
    p = ctx.params
    pal = ctx.palette
    svg = ctx.builder()

    count = int(clamp(round(p.element_count / 4) + 1, 2, 5))
    overlap = clamp(p.overlap_amount, 0.2, 0.6)
    arrangement = ARRANGEMENTS[p.style_variant % 4]
    circle_size = clamp(30 + p.scale_factor * 5, 20.0, 40.0)
    opacity_variation = p.organic_amount * 0.5
    size_variation = p.jitter_amount / 30

    base_radius = circle_size / 100 * ctx.size * 0.5
    circles = circle_positions(arrangement, count, base_radius, overlap, size_variation, ctx.size / 2)

    # Scale the whole group down if it would spill past the canvas edge.
    extent = max(max(abs(x - ctx.size / 2), abs(y - ctx.size / 2)) + r for x, y, r in circles)
    limit = ctx.size * 0.46
    if extent > limit:
        k = limit / extent
        c = ctx.size / 2
        circles = [(c + (x - c) * k, c + (y - c) * k, r * k) for x, y, r in circles]

    for i, (x, y, r) in enumerate(circles):
        opacity = round(0.7 - opacity_variation * (i / count) + 0.2, 3)
        mix = (i % 3) / 2
        fill = svg.gradient(
            pal.gradient(
                f"circle-{i}",
                [(0.0, 15, mix), (0.7, 0, mix), (1.0, -10, mix)],
                kind="radial",
            )
        )
        svg.path(bezier_circle(x, y, r), fill=fill, opacity=opacity)

    return svg.build()
