"""SVG reader — facade over svgpathtools + shapely.

Turns a generated logo back into sampled geometry so the quality scorer can
measure it. Only painted elements count; anything inside <defs> is ignored.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import LineString, Polygon
from shapely.geometry.base import BaseGeometry
from svgpathtools import parse_path

from glyph.utils.geometry import bbox, signed_area

logger = logging.getLogger(__name__)

_VIEWBOX_RE = re.compile(r'viewBox\s*=\s*"([^"]+)"')
_DEFS_RE = re.compile(r"<defs>.*?</defs>", re.DOTALL | re.IGNORECASE)
_TAG_RE = re.compile(r"<(path|circle|polygon|rect)\b([^>]*?)/?>", re.IGNORECASE)
_ATTR_RE = re.compile(r'(\w[\w-]*)\s*=\s*"([^"]*)"')
_COMMAND_RE = re.compile(r"[MLHVCSQTAZ]", re.IGNORECASE)
_CURVE_RE = re.compile(r"[CSQTA]", re.IGNORECASE)

# Samples per continuous sub-path. Enough for area/centroid at 0-100 canvas scale.
_SAMPLES_PER_SUBPATH = 48


@dataclass
class ShapeData:
    """One painted element of a logo."""

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    # Sampled outline points, Nx2
    points: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))
    geometry: BaseGeometry | None = None
    commands: int = 0
    curves: int = 0

    @property
    def area(self) -> float:
        if self.geometry is None or self.geometry.is_empty:
            return 0.0
        return float(self.geometry.area)


@dataclass
class ParsedLogo:
    canvas: float = 100.0
    shapes: list[ShapeData] = field(default_factory=list)
    gradient_count: int = 0

    @property
    def all_points(self) -> NDArray[np.float64]:
        arrays = [s.points for s in self.shapes if len(s.points)]
        return np.vstack(arrays) if arrays else np.empty((0, 2))

    @property
    def total_commands(self) -> int:
        return sum(s.commands for s in self.shapes)

    @property
    def total_curves(self) -> int:
        return sum(s.curves for s in self.shapes)

    @property
    def total_area(self) -> float:
        return sum(s.area for s in self.shapes)

    @property
    def bbox(self) -> tuple[float, float, float, float]:
        return bbox(self.all_points)


def parse_logo(svg_text: str) -> ParsedLogo:
    """Parse a generated SVG string into sampled shapes."""
    parsed = ParsedLogo()

    vb = _VIEWBOX_RE.search(svg_text)
    if vb:
        parts = vb.group(1).split()
        if len(parts) >= 4:
            parsed.canvas = float(parts[2])

    parsed.gradient_count = len(re.findall(r"<(linear|radial)Gradient\b", svg_text))
    body = _DEFS_RE.sub("", svg_text)

    for match in _TAG_RE.finditer(body):
        tag = match.group(1).lower()
        attrs = dict(_ATTR_RE.findall(match.group(2)))
        try:
            shape = _SHAPE_READERS[tag](attrs)
        except (KeyError, ValueError) as e:
            logger.debug("Skipping unreadable <%s>: %s", tag, e)
            continue
        if shape is not None:
            parsed.shapes.append(shape)

    logger.debug("Parsed logo: %d shapes, %d commands", len(parsed.shapes), parsed.total_commands)
    return parsed


def _paint_geometry(points: list[NDArray[np.float64]], attrs: dict[str, str]) -> BaseGeometry | None:
    """Filled outline -> polygon; stroke-only -> buffered centerline.

    A later outline inside the first one cuts a hole under even-odd, and under
    nonzero when it winds against the first.
    """
    geoms: list[tuple[BaseGeometry, float]] = []
    stroked_only = attrs.get("fill", "").lower() == "none"
    width = float(attrs.get("stroke-width", "1") or 1)
    for pts in points:
        if len(pts) < 2:
            continue
        if stroked_only:
            geoms.append((LineString(pts).buffer(width / 2), 0.0))
        elif len(pts) >= 3:
            poly = Polygon(pts)
            if not poly.is_valid:
                poly = poly.buffer(0)
            geoms.append((poly, signed_area(pts)))
    if not geoms:
        return None
    evenodd = attrs.get("fill-rule") == "evenodd"
    result, winding = geoms[0]
    for g, area in geoms[1:]:
        if (evenodd or winding * area < 0) and result.contains(g):
            result = result.difference(g)
        else:
            result = result.union(g)
    return result


def _read_path(attrs: dict[str, str]) -> ShapeData | None:
    d = attrs["d"]
    path = parse_path(d)
    samples: list[NDArray[np.float64]] = []
    for sub in path.continuous_subpaths():
        if not len(sub) or sub.length() < 1e-9:
            continue
        pts = [sub.point(t) for t in np.linspace(0, 1, _SAMPLES_PER_SUBPATH)]
        samples.append(np.array([(p.real, p.imag) for p in pts]))
    if not samples:
        return None
    return ShapeData(
        tag="path",
        attributes=attrs,
        points=np.vstack(samples),
        geometry=_paint_geometry(samples, attrs),
        commands=len(_COMMAND_RE.findall(d)),
        curves=len(_CURVE_RE.findall(d)),
    )


def _read_circle(attrs: dict[str, str]) -> ShapeData:
    cx, cy, r = float(attrs["cx"]), float(attrs["cy"]), float(attrs["r"])
    angles = np.linspace(0, 2 * np.pi, _SAMPLES_PER_SUBPATH, endpoint=False)
    pts = np.column_stack([cx + r * np.cos(angles), cy + r * np.sin(angles)])
    return ShapeData(tag="circle", attributes=attrs, points=pts, geometry=_paint_geometry([pts], attrs), commands=4, curves=4)


def _read_polygon(attrs: dict[str, str]) -> ShapeData:
    nums = [float(v) for v in re.split(r"[\s,]+", attrs["points"].strip()) if v]
    pts = np.array(nums, dtype=np.float64).reshape(-1, 2)
    closed = np.vstack([pts, pts[:1]])
    return ShapeData(
        tag="polygon",
        attributes=attrs,
        points=pts,
        geometry=_paint_geometry([closed], attrs),
        commands=len(pts) + 1,
        curves=0,
    )


def _read_rect(attrs: dict[str, str]) -> ShapeData:
    x, y = float(attrs.get("x", "0")), float(attrs.get("y", "0"))
    w, h = float(attrs["width"]), float(attrs["height"])
    pts = np.array([[x, y], [x + w, y], [x + w, y + h], [x, y + h]])
    closed = np.vstack([pts, pts[:1]])
    return ShapeData(tag="rect", attributes=attrs, points=pts, geometry=_paint_geometry([closed], attrs), commands=5, curves=0)


_SHAPE_READERS = {
    "path": _read_path,
    "circle": _read_circle,
    "polygon": _read_polygon,
    "rect": _read_rect,
}
