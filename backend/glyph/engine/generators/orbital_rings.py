"""Orbital rings — tilted elliptical bands crossing through a shared center.

Each ring is an outer and inner ellipse filled even-odd. Rings are painted back
to front by the sine of their tilt, which gives the woven 3D read.
"""

from __future__ import annotations

import math

from glyph.engine.context import GenerationContext
from glyph.engine.registry import generator
from glyph.utils.geometry import bezier_circle, bezier_ellipse, clamp

INTERSECTION_STYLES = ("weave", "overlap", "break")


@generator(
    id="orbital-rings",
    name="Orbital Rings",
    description="Intersecting orbital ring paths with 3D depth",
    inspiration="PlanetScale",
    tags={"radial", "tech", "elegant"},
    animation="rotate-in",
)
def orbital_rings(ctx: GenerationContext) -> str:
    p = ctx.params
    pal = ctx.palette
    cx, cy = ctx.center
    svg = ctx.builder()

    ring_count = int(clamp(round(p.element_count / 5) + 1, 2, 4))
    thickness = clamp(p.ring_thickness, 2.0, 8.0)
    orbit_angle = p.angle_spread * 0.67
    eccentricity = clamp(p.scale_factor - 0.7, 0.0, 0.5)
    style = INTERSECTION_STYLES[p.style_variant % 3]
    base_rotation = p.rotation_offset / 3

    rx = ctx.size * 0.38
    ry = rx * (0.4 + eccentricity)

    rings = []
    for i in range(ring_count):
        tilt = (i + 1) * 180.0 / (ring_count + 1) + base_rotation + orbit_angle
        depth = math.sin(math.radians(tilt))
        rings.append((depth, i, tilt))
    rings.sort()

    for _, i, tilt in rings:
        t = i / max(1, ring_count - 1)
        fill = svg.gradient(
            pal.gradient(f"ring-{i}", [(0.0, 15, t * 0.5), (1.0, -10, t)], angle=45 + i * 30)
        )
        d = bezier_ellipse(cx, cy, rx, ry, tilt) + " " + bezier_ellipse(cx, cy, rx - thickness, max(ry - thickness, 1.0), tilt)
        attrs = {"fill": fill, "fill_rule": "evenodd"}
        if style == "overlap":
            attrs["opacity"] = round(0.75 + 0.25 * t, 3)
        elif style == "weave":
            # Thin light edge separates the band from whatever it crosses.
            attrs["stroke"] = pal.tone(30)
            attrs["stroke_opacity"] = pal.alpha(30)
            attrs["stroke_width"] = 0.8
        svg.path(d, **attrs)

    if style == "break":
        # A solid core hides the crossings and reads as a planet.
        svg.path(bezier_circle(cx, cy, ry * 0.55), fill=pal.tone(-5), opacity=pal.alpha(-5))

    return svg.build()
