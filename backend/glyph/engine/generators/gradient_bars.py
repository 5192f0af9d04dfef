"""Gradient bars — parallel rounded bars, tilted together, each with its own gradient."""

from __future__ import annotations

from glyph.engine.context import GenerationContext
from glyph.engine.registry import generator
from glyph.utils.geometry import (
    clamp,
    ease_in_out_cubic,
    fit_scale,
    rounded_bar_path,
    rounded_bar_points,
    scale_points,
)


@generator(
    id="gradient-bars",
    name="Gradient Bars",
    description="Parallel diagonal bars with gradient fills",
    inspiration="Stripe",
    tags={"geometric", "corporate", "minimal"},
    animation="slide-up",
)
def gradient_bars(ctx: GenerationContext) -> str:
    p = ctx.params
    pal = ctx.palette
    size = ctx.size
    svg = ctx.builder()

    bar_count = int(clamp(round(p.element_count / 3), 2, 6))
    bar_width = clamp(p.stroke_width * 2, 8.0, 25.0)
    bar_gap = clamp(p.spacing_factor * 5, 3.0, 15.0)

    # Shrink bars so the group fits inside 80% of the canvas.
    group_width = bar_count * bar_width + (bar_count - 1) * bar_gap
    if group_width > size * 0.8:
        scale = size * 0.8 / group_width
        bar_width *= scale
        bar_gap *= scale
        group_width = size * 0.8

    if p.rotation_offset > 180:
        bar_angle = -(p.rotation_offset - 180) / 4
    else:
        bar_angle = p.rotation_offset / 4 - 22.5
    roundness = p.curve_tension
    stagger = p.jitter_amount * 3
    bar_height = size * 0.62
    start_x = (size - group_width) / 2

    bars = []
    for i in range(bar_count):
        t = i / max(1, bar_count - 1)
        # Heights step down toward the edges for a skyline rhythm.
        height = bar_height * (1 - 0.12 * ease_in_out_cubic(abs(t - 0.5) * 2) * p.taper_ratio)
        offset_y = stagger * (1 if i % 2 == 0 else -1) * 0.1
        bars.append(
            rounded_bar_points(
                start_x + i * (bar_width + bar_gap) + bar_width / 2,
                size / 2 + offset_y,
                bar_width,
                height,
                bar_width * roundness * 0.5,
                bar_angle,
            )
        )

    # Tall bars tilted past ~30° poke out of the canvas; shrink the whole group.
    k = fit_scale([q for bar in bars for q in bar], size)

    for i, bar in enumerate(bars):
        t = i / max(1, bar_count - 1)
        fill = svg.gradient(
            pal.gradient(
                f"bar-{i}",
                [(0.0, 10 + 5 * t, t * 0.5), (1.0, -10, t)],
                angle=90 + bar_angle,
            )
        )
        svg.path(rounded_bar_path(scale_points(bar, ctx.center, k)), fill=fill)

    return svg.build()
