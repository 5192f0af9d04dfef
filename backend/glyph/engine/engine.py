"""LogoEngine — seed in, scored and de-duplicated SVG logos out.

For every requested variation:
    1. pick an algorithm (explicit, or via the selector)
    2. render candidates on seed, seed~r1, seed~r2, ...
    3. score + hash each; commit the first one that is unseen and good enough
    4. on exhaustion, return the best unseen candidate flagged accepted=False
"""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass, field

from glyph.engine.config import GenerationConfig
from glyph.engine.context import create_context
from glyph.engine.palette import Palette
from glyph.engine.quality import HeuristicScorer, QualityReport, QualityScorer, accept, content_hash
from glyph.engine.registry import GeneratorRegistry, get_registry, register_builtin_generators
from glyph.engine.seed import perturb, retry_seed
from glyph.engine.selector import select_algorithm
from glyph.engine.store import HashStore, InMemoryHashStore

logger = logging.getLogger(__name__)

_PATH_DATA_RE = re.compile(r'\sd="([^"]*)"')
_COMMAND_RE = re.compile(r"[MLCQSAZ]", re.IGNORECASE)
_BEZIER_RE = re.compile(r"[CQS]", re.IGNORECASE)

# preset -> (duration_ms, easing, stagger_ms)
ANIMATION_PRESETS: dict[str, tuple[int, str, int]] = {
    "fade-in": (600, "ease-out", 0),
    "scale-in": (700, "cubic-bezier(0.34, 1.56, 0.64, 1)", 60),
    "pop": (500, "cubic-bezier(0.34, 1.56, 0.64, 1)", 40),
    "draw": (1400, "ease-in-out", 120),
    "morph": (1600, "ease-in-out", 200),
    "rotate-in": (900, "ease-out", 50),
    "slide-up": (700, "ease-out", 90),
    "slide-right": (800, "ease-out", 70),
}


@dataclass
class GenerateOptions:
    industry: str | None = None
    aesthetic: str | None = None
    algorithm: str | None = None
    variations: int = 1
    primary_color: str | None = None
    accent_color: str | None = None
    # Bias selection toward algorithms suggested by the brand name's meaning
    semantic: bool = False
    min_quality: float | None = None


@dataclass(frozen=True)
class AnimationDescriptor:
    preset: str = "fade-in"
    duration_ms: int = 600
    easing: str = "ease-out"
    stagger_ms: int = 0


@dataclass(frozen=True)
class LogoMetadata:
    quality: float
    complexity: float
    accepted: bool
    attempts: int
    report: QualityReport = field(default_factory=QualityReport)


@dataclass(frozen=True)
class GeneratedLogo:
    svg: str
    algorithm: str
    hash: str
    seed: str
    variation: int
    metadata: LogoMetadata
    animation: AnimationDescriptor = field(default_factory=AnimationDescriptor)


@dataclass(frozen=True)
class AlgorithmInfo:
    id: str
    name: str
    description: str
    inspiration: str
    tags: tuple[str, ...]


@dataclass
class _Candidate:
    svg: str
    seed: str
    hash: str
    report: QualityReport
    unseen: bool


def complexity_of(svg: str) -> float:
    """0-1: path commands / 50, plus up to 0.3 for curves."""
    data = " ".join(_PATH_DATA_RE.findall(svg))
    commands = len(_COMMAND_RE.findall(data))
    curves = len(_BEZIER_RE.findall(data))
    return round(min(min(commands / 50, 1.0) + min(curves / 20, 0.3), 1.0), 3)


def animation_for(preset: str) -> AnimationDescriptor:
    duration, easing, stagger = ANIMATION_PRESETS.get(preset, ANIMATION_PRESETS["fade-in"])
    return AnimationDescriptor(preset=preset, duration_ms=duration, easing=easing, stagger_ms=stagger)


class LogoEngine:
    """Runs generators through the retry / quality / uniqueness loop."""

    def __init__(
        self,
        registry: GeneratorRegistry | None = None,
        config: GenerationConfig | None = None,
        scorer: QualityScorer | None = None,
    ) -> None:
        if registry is None:
            register_builtin_generators()
            registry = get_registry()
        self.registry = registry
        self.config = config or GenerationConfig()
        self.scorer = scorer or HeuristicScorer(min_area=self.config.min_area, max_aspect=self.config.max_aspect)

    def generate(
        self,
        seed: str,
        options: GenerateOptions | None = None,
        store: HashStore | None = None,
    ) -> list[GeneratedLogo]:
        """Generate `options.variations` logos for one brand."""
        options = options or GenerateOptions()
        seed = seed or ""

        # Validate caller input before any rendering
        palette = Palette(primary=options.primary_color, accent=options.accent_color)
        if options.algorithm is not None and options.algorithm not in self.registry:
            raise ValueError(f"Unknown algorithm: {options.algorithm}")

        count = max(1, min(options.variations, self.config.max_variations))
        if store is None:
            store = InMemoryHashStore(max_per_brand=self.config.max_hashes_per_brand, max_brands=self.config.max_brands)
        min_quality = self.config.min_quality if options.min_quality is None else options.min_quality

        preferred = None
        if options.semantic:
            from glyph.advisors.semantics import semantic_algorithms

            preferred = semantic_algorithms(seed, options.industry, seed=seed)

        start = time.perf_counter()
        logos = []
        for i in range(count):
            variation_seed = perturb(seed, i)
            algorithm = options.algorithm or select_algorithm(
                variation_seed,
                industry=options.industry,
                aesthetic=options.aesthetic,
                registered=self.registry.ids(),
                preferred=preferred,
            )
            logos.append(self._generate_one(seed, variation_seed, i, algorithm, palette, store, min_quality))

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Generated %d logo(s) for %r in %.0fms (%d accepted)",
            len(logos),
            seed,
            elapsed,
            sum(1 for logo in logos if logo.metadata.accepted),
        )
        return logos

    def generate_all(
        self,
        seed: str,
        options: GenerateOptions | None = None,
        store: HashStore | None = None,
    ) -> list[GeneratedLogo]:
        """One logo per registered algorithm, all sharing a store so none repeat."""
        options = options or GenerateOptions()
        if store is None:
            store = InMemoryHashStore(max_per_brand=self.config.max_hashes_per_brand, max_brands=self.config.max_brands)
        logos = []
        for algorithm in self.registry.ids():
            single = GenerateOptions(
                industry=options.industry,
                aesthetic=options.aesthetic,
                algorithm=algorithm,
                variations=1,
                primary_color=options.primary_color,
                accent_color=options.accent_color,
                min_quality=options.min_quality,
            )
            logos.extend(self.generate(seed, single, store=store))
        return logos

    def list_algorithms(self) -> list[AlgorithmInfo]:
        return [
            AlgorithmInfo(
                id=spec.id,
                name=spec.name,
                description=spec.description,
                inspiration=spec.inspiration,
                tags=tuple(sorted(spec.tags)),
            )
            for spec in self.registry.all()
        ]

    def _generate_one(
        self,
        brand: str,
        variation_seed: str,
        variation: int,
        algorithm: str,
        palette: Palette,
        store: HashStore,
        min_quality: float,
    ) -> GeneratedLogo:
        spec = self.registry.get(algorithm)
        seen = store.hashes(brand)
        attempts = max(1, self.config.max_retries)

        best: _Candidate | None = None
        chosen: _Candidate | None = None
        tried = 0
        for attempt in range(attempts):
            tried = attempt + 1
            candidate_seed = retry_seed(variation_seed, attempt)
            ctx = create_context(brand, candidate_seed, algorithm, palette, size=self.config.canvas_size)
            svg = spec.fn(ctx)
            report = self.scorer.score(svg, ctx.params)
            digest = content_hash(brand, algorithm, candidate_seed, svg, self.config.hash_version)
            ok, reason = accept(digest, report, seen, min_quality)
            logger.debug("  %s %r attempt %d: %.1f (%s)", algorithm, candidate_seed, tried, report.overall, reason)

            candidate = _Candidate(svg, candidate_seed, digest, report, unseen=digest not in seen)
            if ok:
                chosen = candidate
                break
            if best is None or _better(candidate, best):
                best = candidate

        accepted = chosen is not None
        if chosen is None:
            chosen = best
            logger.warning(
                "No candidate for %s/%r passed after %d attempts; returning best (%.1f)",
                algorithm,
                variation_seed,
                tried,
                chosen.report.overall,
            )

        if chosen.unseen:
            store.add(brand, chosen.hash)

        return GeneratedLogo(
            svg=chosen.svg,
            algorithm=algorithm,
            hash=chosen.hash,
            seed=chosen.seed,
            variation=variation,
            metadata=LogoMetadata(
                quality=chosen.report.overall,
                complexity=complexity_of(chosen.svg),
                accepted=accepted,
                attempts=tried,
                report=chosen.report,
            ),
            animation=animation_for(spec.animation),
        )


def _better(a: _Candidate, b: _Candidate) -> bool:
    """Unseen beats seen; then higher score wins."""
    if a.unseen != b.unseen:
        return a.unseen
    return a.report.overall > b.report.overall


def create_engine(config: GenerationConfig | None = None) -> LogoEngine:
    """Factory function for creating an engine instance."""
    return LogoEngine(config=config)


def quick_generate(seed: str, **kwargs) -> list[GeneratedLogo]:
    """Convenience wrapper: quick_generate("Acme", industry="finance", variations=3)."""
    return create_engine().generate(seed, GenerateOptions(**kwargs))
