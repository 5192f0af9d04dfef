"""Tests for the SVG reader used by the quality scorer."""

import pytest

from glyph.svg.parser import parse_logo

from tests.conftest import CURVY_SVG, EMPTY_SVG, RING_SVG, SQUARE_SVG, STROKED_LINE_SVG, TRIANGLE_SVG


def test_parse_rect():
    logo = parse_logo(SQUARE_SVG)
    assert logo.canvas == 100.0
    assert len(logo.shapes) == 1
    shape = logo.shapes[0]
    assert shape.tag == "rect"
    assert shape.area == pytest.approx(3600.0)
    assert logo.bbox == (20.0, 20.0, 80.0, 80.0)


def test_parse_polygon_ignores_defs():
    logo = parse_logo(TRIANGLE_SVG)
    assert [s.tag for s in logo.shapes] == ["polygon"]
    assert logo.gradient_count == 1
    assert logo.shapes[0].area == pytest.approx(3200.0)
    assert logo.total_curves == 0


def test_parse_evenodd_ring_subtracts_hole():
    logo = parse_logo(RING_SVG)
    assert len(logo.shapes) == 1
    expected = 3.14159 * (40**2 - 20**2)
    assert logo.shapes[0].area == pytest.approx(expected, rel=0.05)


def test_parse_nonzero_counter_wound_hole():
    # Outer square clockwise, inner square counter-clockwise, default fill rule
    d = "M 20 20 L 80 20 L 80 80 L 20 80 Z M 40 40 L 40 60 L 60 60 L 60 40 Z"
    logo = parse_logo(f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100"><path d="{d}" /></svg>')
    assert logo.shapes[0].area == pytest.approx(3600 - 400, rel=0.02)


def test_parse_nonzero_same_winding_fills():
    d = "M 20 20 L 80 20 L 80 80 L 20 80 Z M 40 40 L 60 40 L 60 60 L 40 60 Z"
    logo = parse_logo(f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100"><path d="{d}" /></svg>')
    assert logo.shapes[0].area == pytest.approx(3600, rel=0.02)


def test_parse_stroked_path_uses_stroke_width():
    logo = parse_logo(STROKED_LINE_SVG)
    # 80 long, 4 wide, plus round caps
    assert logo.shapes[0].area == pytest.approx(80 * 4 + 3.14159 * 4, rel=0.05)


def test_parse_counts_commands_and_curves():
    logo = parse_logo(CURVY_SVG)
    tags = sorted(s.tag for s in logo.shapes)
    assert tags == ["circle", "path"]
    path = next(s for s in logo.shapes if s.tag == "path")
    assert path.commands == 7
    assert path.curves == 5
    assert logo.total_curves == 9


def test_parse_empty():
    logo = parse_logo(EMPTY_SVG)
    assert logo.shapes == []
    assert logo.total_area == 0.0
    assert len(logo.all_points) == 0


def test_parse_skips_broken_elements():
    svg = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 50 50">
  <circle cx="10" cy="10" />
  <rect x="5" y="5" width="10" height="10" />
</svg>'''
    logo = parse_logo(svg)
    assert logo.canvas == 50.0
    assert [s.tag for s in logo.shapes] == ["rect"]
