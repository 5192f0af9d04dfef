"""GenerationContext — the immutable input bundle every generator receives.

Generators are pure: the same context always yields the same SVG string.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from glyph.engine.palette import Palette
from glyph.engine.params import DerivedParameters, derive_parameters
from glyph.engine.seed import SeededRandom, namespace_id
from glyph.svg.builder import SvgBuilder


@dataclass(frozen=True)
class GenerationContext:
    brand_name: str
    seed: str
    params: DerivedParameters
    uid: str
    palette: Palette = field(default_factory=Palette)
    size: int = 100

    @property
    def center(self) -> tuple[float, float]:
        return (self.size / 2, self.size / 2)

    def rng(self, stream: str = "") -> SeededRandom:
        """Fresh stream per call, so generators never share RNG state."""
        return SeededRandom(f"{self.seed}|{stream}")

    def builder(self) -> SvgBuilder:
        return SvgBuilder(self.uid, size=self.size, title=self.brand_name)


def create_context(
    brand_name: str,
    seed: str,
    algorithm: str,
    palette: Palette | None = None,
    size: int = 100,
) -> GenerationContext:
    return GenerationContext(
        brand_name=brand_name,
        seed=seed,
        params=derive_parameters(seed),
        uid=namespace_id(seed, algorithm),
        palette=palette or Palette(),
        size=size,
    )
