"""Tests for geometry helpers."""

import math

import numpy as np
import pytest
from svgpathtools import parse_path

from glyph.utils.geometry import (
    bbox,
    bezier_circle,
    catmull_rom_segments,
    centroid,
    clamp,
    describe_arc,
    ease_in_out_cubic,
    fit_scale,
    fmt,
    map_range,
    organic_shape,
    polar_to_xy,
    polygon_points,
    regular_polygon,
    rotate_point,
    rotated_rounded_bar,
    rounded_bar_points,
    scale_points,
    signed_area,
)


def test_fmt_two_decimals_no_negative_zero():
    assert fmt(1.0) == "1.00"
    assert fmt(2.345) in ("2.35", "2.34")
    assert fmt(-0.001) == "0.00"


def test_clamp_and_map_range():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert map_range(5, 0, 10, 0, 100) == 50
    assert map_range(5, 1, 1, 7, 9) == 7


def test_polar_zero_is_up_and_clockwise():
    x, y = polar_to_xy((50, 50), 10, 0)
    assert (x, y) == pytest.approx((50, 40))
    x, y = polar_to_xy((50, 50), 10, 90)
    assert (x, y) == pytest.approx((60, 50))


def test_rotate_point_quarter_turn():
    assert rotate_point((60, 50), (50, 50), 90) == pytest.approx((50, 60))


def test_regular_polygon():
    pts = regular_polygon((50, 50), 20, 6)
    assert len(pts) == 6
    for x, y in pts:
        assert math.hypot(x - 50, y - 50) == pytest.approx(20)


def test_polygon_points_format():
    assert polygon_points([(0, 0), (10.5, 2)]) == "0.00,0.00 10.50,2.00"


def test_bezier_circle_parses():
    path = parse_path(bezier_circle(50, 50, 20))
    assert path.isclosed()
    # Four-cubic approximation plus 2-decimal rounding
    for t in np.linspace(0, 1, 17):
        p = path.point(t)
        assert abs(abs(p - complex(50, 50)) - 20) < 0.03


@pytest.mark.parametrize("start,end", [(0, 90), (0, 270), (300, 60)])
def test_describe_arc_parses(start, end):
    d = describe_arc((50, 50), 20, start, end)
    assert d.startswith("M")
    assert len(parse_path(d)) == 1


def test_describe_arc_flags():
    assert " 0 0 1 " in describe_arc((50, 50), 20, 0, 90)
    assert " 0 1 1 " in describe_arc((50, 50), 20, 0, 270)
    # Zero and full-turn spans are clamped rather than collapsing
    assert " 0 0 1 " in describe_arc((50, 50), 20, 10, 10)
    assert " 0 1 1 " in describe_arc((50, 50), 20, 0, 360)


def test_signed_area_orientation():
    ccw = np.array([[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]], dtype=float)
    assert signed_area(ccw) == pytest.approx(1.0)
    assert signed_area(ccw[::-1]) == pytest.approx(-1.0)


def test_bbox_and_centroid():
    pts = np.array([[0, 0], [4, 0], [4, 2], [0, 2]], dtype=float)
    assert bbox(pts) == (0.0, 0.0, 4.0, 2.0)
    assert centroid(pts) == (2.0, 1.0)
    empty = np.empty((0, 2))
    assert bbox(empty) == (0.0, 0.0, 0.0, 0.0)
    assert centroid(empty) == (0.0, 0.0)


def test_ease_in_out_cubic_endpoints_and_symmetry():
    assert ease_in_out_cubic(0.0) == 0.0
    assert ease_in_out_cubic(1.0) == 1.0
    assert ease_in_out_cubic(0.5) == pytest.approx(0.5)
    assert ease_in_out_cubic(0.25) == pytest.approx(1 - ease_in_out_cubic(0.75))


def test_rounded_bar_points_rotate_about_center():
    upright = rounded_bar_points(50, 50, 10, 60, 2)
    assert len(upright) == 16
    assert bbox(np.array(upright)) == pytest.approx((45, 20, 55, 80))
    turned = rounded_bar_points(50, 50, 10, 60, 2, 90)
    assert bbox(np.array(turned)) == pytest.approx((20, 45, 80, 55))
    assert rotated_rounded_bar(50, 50, 10, 60, 2).startswith("M 47.00 20.00")


def test_catmull_rom_segments_end_on_each_point():
    pts = [(10, 10), (90, 10), (90, 90), (10, 90)]
    segments = catmull_rom_segments(pts, 0.5)
    assert [end for _, _, end in segments] == pts[1:] + pts[:1]
    assert len(catmull_rom_segments(pts, 0.5, closed=False)) == 3
    assert organic_shape(pts).count("C ") == 4


def test_fit_scale_leaves_small_marks_alone():
    assert fit_scale([(10, 10), (90, 90)]) == 1.0
    assert fit_scale([]) == 1.0


def test_fit_scale_pulls_overflow_inside_margin():
    pts = [(-8, 50), (50, 108), (70, 30)]
    k = fit_scale(pts, 100, margin=2)
    fitted = np.array(scale_points(pts, (50, 50), k))
    x0, y0, x1, y1 = bbox(fitted)
    assert k < 1
    assert min(x0, y0) == pytest.approx(2.0)
    assert max(x1, y1) <= 98.0 + 1e-9
