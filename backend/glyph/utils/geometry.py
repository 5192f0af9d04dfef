"""Leaf-node geometry helpers. No engine imports.

Canvas convention: every coordinate lives in a fixed 0-100 square.
Angles are degrees with 0° pointing up and positive angles running clockwise.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

Point = tuple[float, float]

# Cubic bezier quarter-circle control distance: 4/3 * (sqrt(2) - 1).
BEZIER_K = 0.5522847498

# Smallest arc span we will emit. A 0° or 360° span has no defined endpoint pair.
MIN_ARC_SPAN = 0.01

# Clear band kept between a fitted mark and the canvas edge.
CANVAS_MARGIN = 2.0


def fmt(value: float) -> str:
    """Fixed 2-decimal coordinate, never '-0.00'."""
    text = f"{value:.2f}"
    return "0.00" if text == "-0.00" else text


def pt(p: Point) -> str:
    return f"{fmt(p[0])} {fmt(p[1])}"


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def map_range(value: float, in_lo: float, in_hi: float, out_lo: float, out_hi: float) -> float:
    if in_hi == in_lo:
        return out_lo
    return out_lo + (value - in_lo) * (out_hi - out_lo) / (in_hi - in_lo)


def ease_in_out_cubic(t: float) -> float:
    return 4 * t**3 if t < 0.5 else 1 - (-2 * t + 2) ** 3 / 2


def polar_to_xy(center: Point, radius: float, angle_deg: float) -> Point:
    """0° = up, clockwise positive."""
    rad = math.radians(angle_deg)
    return (center[0] + radius * math.sin(rad), center[1] - radius * math.cos(rad))


def describe_arc(center: Point, radius: float, start_deg: float, end_deg: float) -> str:
    """SVG arc from start to end angle, sweeping clockwise.

    Spans are normalised into (0, 360). A zero or full-turn span is clamped to
    [MIN_ARC_SPAN, 360 - MIN_ARC_SPAN] so the endpoints never coincide.
    """
    span = (end_deg - start_deg) % 360.0
    if span == 0.0 and end_deg != start_deg:
        span = 360.0 - MIN_ARC_SPAN
    span = clamp(span, MIN_ARC_SPAN, 360.0 - MIN_ARC_SPAN)

    start = polar_to_xy(center, radius, start_deg)
    end = polar_to_xy(center, radius, start_deg + span)
    large_arc = 1 if span > 180.0 else 0
    return f"M {pt(start)} A {fmt(radius)} {fmt(radius)} 0 {large_arc} 1 {pt(end)}"


def rotate_point(p: Point, center: Point, angle_deg: float) -> Point:
    rad = math.radians(angle_deg)
    c, s = math.cos(rad), math.sin(rad)
    dx, dy = p[0] - center[0], p[1] - center[1]
    return (center[0] + dx * c - dy * s, center[1] + dx * s + dy * c)


def rotate_points(points: Sequence[Point], center: Point, angle_deg: float) -> list[Point]:
    """Vectorised rotation about a center."""
    if not points:
        return []
    rad = math.radians(angle_deg)
    rot = np.array([[math.cos(rad), -math.sin(rad)], [math.sin(rad), math.cos(rad)]])
    arr = np.asarray(points, dtype=np.float64) - np.asarray(center)
    out = arr @ rot.T + np.asarray(center)
    return [(float(x), float(y)) for x, y in out]


def regular_polygon(center: Point, radius: float, sides: int, rotation_deg: float = 0.0) -> list[Point]:
    """Vertices of a regular polygon, first vertex pointing up before rotation."""
    sides = max(3, sides)
    return [polar_to_xy(center, radius, rotation_deg + i * 360.0 / sides) for i in range(sides)]


def polygon_points(points: Sequence[Point]) -> str:
    return " ".join(f"{fmt(x)},{fmt(y)}" for x, y in points)


def bezier_ellipse(cx: float, cy: float, rx: float, ry: float, rotation_deg: float = 0.0) -> str:
    """Closed ellipse from four cubics."""
    k = BEZIER_K
    raw = [
        (cx, cy - ry),
        (cx + rx * k, cy - ry), (cx + rx, cy - ry * k), (cx + rx, cy),
        (cx + rx, cy + ry * k), (cx + rx * k, cy + ry), (cx, cy + ry),
        (cx - rx * k, cy + ry), (cx - rx, cy + ry * k), (cx - rx, cy),
        (cx - rx, cy - ry * k), (cx - rx * k, cy - ry), (cx, cy - ry),
    ]
    p = rotate_points(raw, (cx, cy), rotation_deg) if rotation_deg else raw
    return (
        f"M {pt(p[0])} "
        f"C {pt(p[1])}, {pt(p[2])}, {pt(p[3])} "
        f"C {pt(p[4])}, {pt(p[5])}, {pt(p[6])} "
        f"C {pt(p[7])}, {pt(p[8])}, {pt(p[9])} "
        f"C {pt(p[10])}, {pt(p[11])}, {pt(p[12])} Z"
    )


def bezier_circle(cx: float, cy: float, r: float) -> str:
    return bezier_ellipse(cx, cy, r, r)


def rounded_bar_points(cx: float, cy: float, w: float, h: float, r: float, angle_deg: float = 0.0) -> list[Point]:
    """The 16 anchor and control points of a rounded bar, rotated about its center."""
    hw, hh = w / 2, h / 2
    r = clamp(r, 0.0, min(hw, hh))
    k = BEZIER_K
    left, right, top, bottom = cx - hw, cx + hw, cy - hh, cy + hh
    raw = [
        (left + r, top), (right - r, top),
        (right - r + r * k, top), (right, top + r - r * k), (right, top + r),
        (right, bottom - r),
        (right, bottom - r + r * k), (right - r + r * k, bottom), (right - r, bottom),
        (left + r, bottom),
        (left + r - r * k, bottom), (left, bottom - r + r * k), (left, bottom - r),
        (left, top + r),
        (left, top + r - r * k), (left + r - r * k, top),
    ]
    return rotate_points(raw, (cx, cy), angle_deg) if angle_deg else raw


def rounded_bar_path(p: Sequence[Point]) -> str:
    """Path for the points returned by `rounded_bar_points`."""
    return (
        f"M {pt(p[0])} L {pt(p[1])} "
        f"C {pt(p[2])}, {pt(p[3])}, {pt(p[4])} L {pt(p[5])} "
        f"C {pt(p[6])}, {pt(p[7])}, {pt(p[8])} L {pt(p[9])} "
        f"C {pt(p[10])}, {pt(p[11])}, {pt(p[12])} L {pt(p[13])} "
        f"C {pt(p[14])}, {pt(p[15])}, {pt(p[0])} Z"
    )


def rotated_rounded_bar(cx: float, cy: float, w: float, h: float, r: float, angle_deg: float = 0.0) -> str:
    """Rounded rectangle centred on (cx, cy), corners as cubics, rotated about its center."""
    return rounded_bar_path(rounded_bar_points(cx, cy, w, h, r, angle_deg))


def rounded_rect(x: float, y: float, w: float, h: float, r: float) -> str:
    return rotated_rounded_bar(x + w / 2, y + h / 2, w, h, r)


def smooth_polygon(points: Sequence[Point]) -> str:
    """Closed polygon whose edges bow slightly through quadratic midpoints."""
    if len(points) < 3:
        return ""
    parts = [f"M {pt(points[0])}"]
    n = len(points)
    for i in range(n):
        a, b = points[i], points[(i + 1) % n]
        mid = ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)
        parts.append(f"Q {pt(mid)}, {pt(b)}")
    parts.append("Z")
    return " ".join(parts)


def catmull_rom_segments(
    points: Sequence[Point], tension: float = 0.5, closed: bool = True
) -> list[tuple[Point, Point, Point]]:
    """(c1, c2, end) per cubic of the Catmull-Rom spline through points (control offset tension/3)."""
    n = len(points)
    if n < 2:
        return []
    segments = []
    for i in range(n if closed else n - 1):
        if closed:
            p0, p1 = points[(i - 1) % n], points[i]
            p2, p3 = points[(i + 1) % n], points[(i + 2) % n]
        else:
            p0, p1 = points[max(0, i - 1)], points[i]
            p2, p3 = points[i + 1], points[min(n - 1, i + 2)]
        c1 = (p1[0] + (p2[0] - p0[0]) * tension / 3, p1[1] + (p2[1] - p0[1]) * tension / 3)
        c2 = (p2[0] - (p3[0] - p1[0]) * tension / 3, p2[1] - (p3[1] - p1[1]) * tension / 3)
        segments.append((c1, c2, p2))
    return segments


def organic_shape(points: Sequence[Point], tension: float = 0.5, closed: bool = True) -> str:
    """Catmull-Rom spline through points, emitted as cubics."""
    if len(points) < 2:
        return ""
    parts = [f"M {pt(points[0])}"]
    parts.extend(f"C {pt(c1)}, {pt(c2)}, {pt(end)}" for c1, c2, end in catmull_rom_segments(points, tension, closed))
    if closed:
        parts.append("Z")
    return " ".join(parts)


def scale_points(points: Sequence[Point], center: Point, factor: float) -> list[Point]:
    cx, cy = center
    return [(cx + (x - cx) * factor, cy + (y - cy) * factor) for x, y in points]


def fit_scale(points: Sequence[Point], size: float = 100.0, margin: float = CANVAS_MARGIN) -> float:
    """Largest factor <= 1 that keeps points, scaled about the canvas center, within [margin, size - margin].

    Bezier curves stay inside the hull of their control points, so fitting the
    controls fits the drawn outline.
    """
    if not len(points):
        return 1.0
    half = size / 2
    reach = float(np.abs(np.asarray(points, dtype=np.float64) - half).max())
    limit = half - margin
    if reach <= limit:
        return 1.0
    return limit / reach


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula for signed area. Positive = CCW, Negative = CW."""
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]))


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def centroid(points: NDArray[np.float64]) -> tuple[float, float]:
    """Compute centroid of a point set."""
    if len(points) == 0:
        return (0.0, 0.0)
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))
