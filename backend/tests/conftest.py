"""Shared test fixtures."""

from __future__ import annotations

import pytest

from glyph.engine.config import GenerationConfig
from glyph.engine.engine import LogoEngine
from glyph.engine.registry import get_registry, register_builtin_generators
from glyph.engine.store import InMemoryHashStore


ALL_ALGORITHMS = [
    "circle-overlap",
    "depth-geometry",
    "flow-gradient",
    "gradient-bars",
    "hexagon-tech",
    "isometric-cube",
    "letterform-cutout",
    "motion-lines",
    "orbital-rings",
    "perfect-triangle",
    "sparkle-asterisk",
    "starburst",
]

FOOD_ALGORITHMS = {"starburst", "circle-overlap", "flow-gradient", "letterform-cutout"}

# Seeds that exercise empty input, a single letter, digits, unicode, markup,
# XML-forbidden control characters and an unpaired surrogate
EDGE_SEEDS = ["", "A", "123", "Café Ñandú", "<b>&amp;</b>", "   spaced   ", "Acme\x01Corp", "Acme\ud800"]


# Hand-written logos for the reader and scorer

SQUARE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect x="20" y="20" width="60" height="60" fill="#111111" />
</svg>'''

RING_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M 50 10 C 72.09 10 90 27.91 90 50 C 90 72.09 72.09 90 50 90 C 27.91 90 10 72.09 10 50 C 10 27.91 27.91 10 50 10 Z M 50 30 C 61.05 30 70 38.95 70 50 C 70 61.05 61.05 70 50 70 C 38.95 70 30 61.05 30 50 C 30 38.95 38.95 30 50 30 Z" fill-rule="evenodd" fill="#111111" />
</svg>'''

TRIANGLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <defs>
    <linearGradient id="g1-fill" x1="0%" y1="0%" x2="100%" y2="100%">
      <stop offset="0%" stop-color="#ff0000" />
      <stop offset="100%" stop-color="#0000ff" />
    </linearGradient>
  </defs>
  <polygon points="50,10 90,90 10,90" fill="url(#g1-fill)" />
</svg>'''

STROKED_LINE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M 10 50 L 90 50" fill="none" stroke="currentColor" stroke-width="4" />
</svg>'''

SLIVER_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect x="0" y="49" width="100" height="2" fill="#111111" />
</svg>'''

EMPTY_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100"></svg>'

CURVY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <circle cx="50" cy="50" r="30" fill="#111111" />
  <path d="M 20 20 C 30 10 40 10 50 20 C 60 30 70 30 80 20 Q 85 50 80 80 C 60 90 40 90 20 80 Z" fill="#222222" />
</svg>'''


@pytest.fixture(scope="session", autouse=True)
def builtin_generators():
    register_builtin_generators()
    return get_registry()


@pytest.fixture
def engine() -> LogoEngine:
    return LogoEngine()


@pytest.fixture
def fast_engine() -> LogoEngine:
    """Two attempts per logo keeps the all-generators sweeps quick."""
    return LogoEngine(config=GenerationConfig(max_retries=2))


@pytest.fixture
def store() -> InMemoryHashStore:
    return InMemoryHashStore()
