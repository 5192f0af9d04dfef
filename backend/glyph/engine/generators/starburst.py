"""Starburst — curved, tapered arms radiating from a shared center.

6-16 arms with rotational symmetry. Each arm is a closed cubic outline that
swells at its midpoint and bends sideways, alternating direction per arm.
"""

from __future__ import annotations

import math

from glyph.engine.context import GenerationContext
from glyph.engine.registry import generator
from glyph.utils.geometry import Point, bezier_circle, clamp, polar_to_xy, pt

# Arms must stay inside the canvas with a small margin.
_MAX_REACH = 44.0


def _arm_path(
    start: Point,
    end: Point,
    angle_deg: float,
    start_width: float,
    end_width: float,
    curve_offset: float,
    bulge: float,
    tension: float,
) -> str:
    pc, ps = polar_to_xy((0.0, 0.0), 1.0, angle_deg + 90)

    def side(p: Point, width: float, sign: int) -> Point:
        return (p[0] + sign * pc * width / 2, p[1] + sign * ps * width / 2)

    mid = ((start[0] + end[0]) / 2 + pc * curve_offset, (start[1] + end[1]) / 2 + ps * curve_offset)
    mid_width = max(start_width, end_width) * (1 + bulge)

    sl, sr = side(start, start_width, 1), side(start, start_width, -1)
    ml, mr = side(mid, mid_width, 1), side(mid, mid_width, -1)
    el, er = side(end, end_width, 1), side(end, end_width, -1)

    t = tension

    def toward(a: Point, b: Point, f: float) -> Point:
        return (a[0] + (b[0] - a[0]) * f, a[1] + (b[1] - a[1]) * f)

    # Rounded tip: a quadratic bowing out past the end point.
    tip = polar_to_xy(end, end_width * 0.6, angle_deg)

    return (
        f"M {pt(sl)} "
        f"C {pt(toward(sl, ml, t))}, {pt(toward(ml, sl, (1 - t) * 0.5))}, {pt(ml)} "
        f"C {pt(toward(ml, el, t))}, {pt(toward(el, ml, (1 - t) * 0.5))}, {pt(el)} "
        f"Q {pt(tip)}, {pt(er)} "
        f"C {pt(toward(er, mr, t))}, {pt(toward(mr, er, (1 - t) * 0.5))}, {pt(mr)} "
        f"C {pt(toward(mr, sr, t))}, {pt(toward(sr, mr, (1 - t) * 0.5))}, {pt(sr)} Z"
    )


@generator(
    id="starburst",
    name="Starburst",
    description="Curved organic arms with rotational symmetry, 6-16 spokes",
    inspiration="Claude / Anthropic",
    tags={"radial", "organic", "friendly"},
    animation="rotate-in",
)
def starburst(ctx: GenerationContext) -> str:
    p = ctx.params
    pal = ctx.palette
    cx, cy = ctx.center
    rng = ctx.rng("starburst")
    svg = ctx.builder()

    arm_count = int(clamp(p.element_count, 6, 16))
    symmetric = p.symmetry_type in ("radial", "rotational", "point")
    start_dist = p.center_radius * 0.6
    reach = min(p.arm_length * 0.85 + start_dist, _MAX_REACH)
    start_width = clamp(p.arm_width * 0.8, 2.5, 10.0)
    end_width = start_width * (1 - p.taper_ratio)

    fill = svg.gradient(
        pal.gradient("arm", [(0.0, 12, 0.0), (1.0, -8, 0.6)], angle=p.gradient_angle)
    )

    for i in range(arm_count):
        spiral = p.spiral_amount * (i / arm_count) * 90
        wobble = math.degrees(rng.noise(p.organic_amount, 0.15))
        angle = 360 * i / arm_count + p.rotation_offset + spiral + wobble
        length_var = 0.0 if symmetric else rng.noise(1.0, 4.0)
        length = clamp(reach - start_dist + length_var, 8.0, _MAX_REACH - start_dist)

        start = polar_to_xy((cx, cy), start_dist, angle)
        end = polar_to_xy((cx, cy), start_dist + length, angle)
        direction = 1 if i % 2 == 0 else -1
        curve_offset = length * p.curve_tension * direction * 0.3 * (0.4 if symmetric else 1.0)

        svg.path(
            _arm_path(start, end, angle, start_width, end_width, curve_offset, p.bulge_amount, p.curve_tension),
            fill=fill,
        )

    if p.center_radius >= 2:
        svg.path(
            bezier_circle(cx, cy, clamp(p.center_radius * 0.7, 2.0, 9.0)),
            fill=pal.tone(-10),
            opacity=pal.alpha(-10),
        )

    return svg.build()
