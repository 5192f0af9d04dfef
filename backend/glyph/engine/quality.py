"""Quality scoring and content hashing for generated logos.

The scorer is a strategy: anything with `score(svg, params) -> QualityReport`
can be handed to LogoEngine. `HeuristicScorer` reads the SVG back through
glyph.svg.parser and grades it on five weighted components.
"""

from __future__ import annotations

import hashlib
import json
import logging
import math
from collections.abc import Collection
from dataclasses import asdict, dataclass, field
from typing import Any, Protocol

from glyph.engine.params import DerivedParameters
from glyph.engine.seed import normalize_brand
from glyph.svg.parser import ParsedLogo, parse_logo
from glyph.utils.geometry import centroid, clamp

logger = logging.getLogger(__name__)

PHI = (1 + math.sqrt(5)) / 2

WEIGHTS = {
    "path_smoothness": 0.2,
    "visual_balance": 0.25,
    "complexity": 0.2,
    "golden_ratio": 0.15,
    "uniqueness": 0.2,
}

# Overall score ceiling for degenerate output
DEGENERATE_CAP = 40.0

# Smoothness for marks drawn only with straight edges. Their corners are
# deliberate, so they sit between a faceted curve and a fully smooth one.
CRISP_SMOOTHNESS = 60.0


@dataclass
class QualityReport:
    overall: float = 0.0
    path_smoothness: float = 0.0
    visual_balance: float = 0.0
    complexity: float = 0.0
    golden_ratio: float = 0.0
    uniqueness: float = 0.0
    degenerate: bool = False
    notes: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class QualityScorer(Protocol):
    def score(self, svg: str, params: DerivedParameters) -> QualityReport: ...


def content_hash(brand: str, algorithm: str, seed: str, svg: str, version: str = "1") -> str:
    """First 16 hex chars of sha256 over canonical JSON of the logo's identity."""
    payload = {
        "brand": normalize_brand(brand),
        "algorithm": algorithm,
        "seed": seed,
        "svg": svg,
        "version": version,
    }
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(canonical.encode("utf-8", "surrogatepass")).hexdigest()[:16]


def accept(
    candidate_hash: str,
    report: QualityReport,
    seen: Collection[str],
    min_quality: float,
) -> tuple[bool, str]:
    """Uniqueness and quality are independent gates; both must pass."""
    if candidate_hash in seen:
        return False, "duplicate"
    if report.overall < min_quality:
        return False, f"quality {report.overall:.1f} < {min_quality:.1f}"
    return True, "ok"


class HeuristicScorer:
    """Default scorer: geometry read back with svgpathtools + shapely."""

    def __init__(self, min_area: float = 1.0, max_aspect: float = 8.0) -> None:
        self.min_area = min_area
        self.max_aspect = max_aspect

    def score(self, svg: str, params: DerivedParameters) -> QualityReport:
        logo = parse_logo(svg)
        report = QualityReport(
            path_smoothness=_path_smoothness(logo),
            visual_balance=_visual_balance(logo),
            complexity=_complexity(logo),
            golden_ratio=_golden_ratio(logo, params),
            uniqueness=_uniqueness(logo, params),
        )

        overall = sum(getattr(report, name) * w for name, w in WEIGHTS.items())

        area = logo.total_area
        aspect = _aspect(logo)
        if not logo.shapes or area < self.min_area:
            report.degenerate = True
            report.notes.append(f"painted area {area:.2f} below {self.min_area}")
        if aspect > self.max_aspect:
            report.degenerate = True
            report.notes.append(f"aspect {aspect:.1f} above {self.max_aspect}")
        if report.degenerate:
            overall = min(overall, DEGENERATE_CAP)

        report.overall = round(overall, 2)
        return report


def _aspect(logo: ParsedLogo) -> float:
    """max(w/h, h/w) of the painted bbox; inf for a zero-width or zero-height mark."""
    if not len(logo.all_points):
        return math.inf
    x0, y0, x1, y1 = logo.bbox
    w, h = x1 - x0, y1 - y0
    if w <= 1e-9 or h <= 1e-9:
        return math.inf
    return max(w / h, h / w)


def _is_crisp(logo: ParsedLogo) -> bool:
    """Straight-edged mark: no curve commands anywhere, e.g. a lone polygon."""
    return bool(logo.shapes) and logo.total_curves == 0


def _path_smoothness(logo: ParsedLogo) -> float:
    curves = logo.total_curves
    lines = sum(s.commands - s.curves for s in logo.shapes)
    if curves + lines == 0:
        return 50.0
    if _is_crisp(logo):
        return CRISP_SMOOTHNESS
    score = curves / (curves + lines) * 80
    if 4 <= curves <= 50:
        score += 20
    elif curves > 50:
        score += 10
    return round(min(100.0, score), 2)


def _visual_balance(logo: ParsedLogo) -> float:
    pts = logo.all_points
    if len(pts) < 3:
        return 70.0
    half = logo.canvas / 2
    cx, cy = centroid(pts)
    dist = math.hypot(cx - half, cy - half) * 100 / logo.canvas
    return round(max(0.0, 100 - dist / 35 * 50), 2)


def _complexity(logo: ParsedLogo) -> float:
    commands = logo.total_commands
    elements = len(logo.shapes)

    command_score = 100.0
    # Few commands is a sparse mark, unless every edge is meant to be straight.
    if commands < 10 and not _is_crisp(logo):
        command_score = commands / 10 * 80
    elif commands > 100:
        command_score = max(50.0, 100 - (commands - 100) / 50 * 30)

    element_score = 100.0
    if elements < 1:
        element_score = 60.0
    elif elements > 20:
        element_score = max(60.0, 100 - (elements - 20) / 10 * 20)

    return round((command_score + element_score) / 2, 2)


def _golden_ratio(logo: ParsedLogo, params: DerivedParameters) -> float:
    score = 70.0
    aspect = _aspect(logo)
    if math.isfinite(aspect):
        deviation = min(abs(aspect - t) for t in (PHI, 1.0, 1 / PHI))
        if deviation < 0.1:
            score += 10
        elif deviation < 0.3:
            score += 5

    for ratio in (params.taper_ratio / 0.618, params.scale_factor / PHI, params.curve_tension / 0.618):
        deviation = abs(ratio - 1)
        if deviation < 0.1:
            score += 5
        elif deviation < 0.3:
            score += 2
    return min(100.0, score)


def _uniqueness(logo: ParsedLogo, params: DerivedParameters) -> float:
    score = 80.0
    kinds = {s.tag for s in logo.shapes}
    if len(kinds) >= 4 or logo.gradient_count:
        score += 5
    if len(logo.shapes) == 1 and not _is_crisp(logo):
        score -= 10

    # Common defaults read as generic
    if params.element_count == 8:
        score -= 5
    if params.rotation_offset < 5 or params.rotation_offset > 355:
        score -= 5
    if params.spiral_amount > 0.2:
        score += 5
    if params.organic_amount > 0.3:
        score += 5
    return clamp(score, 60.0, 100.0)
