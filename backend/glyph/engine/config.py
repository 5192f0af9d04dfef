"""Engine configuration — retry budget, quality floor and degeneracy thresholds."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from glyph.config import Settings


@dataclass
class GenerationConfig:
    """Tunables for LogoEngine. Defaults match the shipped Settings."""

    # Canvas is square, viewBox "0 0 size size"
    canvas_size: int = 100

    # Retry loop
    max_retries: int = 6
    min_quality: float = 70.0

    # Request limits
    max_variations: int = 12

    # Hash memory for InMemoryHashStore: hashes kept per brand, and brands kept
    # before the least recently used one is dropped
    max_hashes_per_brand: int = 1000
    max_brands: int = 10_000

    # Degeneracy: painted area below min_area (canvas units²) or bbox aspect above max_aspect
    min_area: float = 1.0
    max_aspect: float = 8.0

    # Mixed into every content hash; bump when generator output changes shape
    hash_version: str = "2"

    @classmethod
    def from_settings(cls, settings: Settings) -> GenerationConfig:
        return cls(
            max_retries=settings.glyph_max_retries,
            min_quality=settings.glyph_min_quality,
            max_variations=settings.glyph_max_variations,
            max_brands=settings.glyph_history_max_brands,
        )
