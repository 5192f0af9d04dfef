"""Algorithm selection — industry/aesthetic hints narrow the pool, the seed picks.

Hints never fail: unknown values, or subsets with nothing registered, fall back
to the whole registered pool.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from glyph.engine.seed import param_int

logger = logging.getLogger(__name__)

INDUSTRY_ALGORITHMS: dict[str, tuple[str, ...]] = {
    "technology": (
        "starburst",
        "motion-lines",
        "depth-geometry",
        "isometric-cube",
        "hexagon-tech",
        "gradient-bars",
    ),
    "finance": ("letterform-cutout", "perfect-triangle", "gradient-bars", "depth-geometry", "isometric-cube"),
    "creative": ("starburst", "circle-overlap", "flow-gradient", "orbital-rings", "sparkle-asterisk"),
    "healthcare": ("circle-overlap", "starburst", "flow-gradient", "orbital-rings"),
    "food": ("starburst", "circle-overlap", "flow-gradient", "letterform-cutout"),
    "sustainability": ("flow-gradient", "circle-overlap", "starburst", "orbital-rings"),
    "education": ("letterform-cutout", "starburst", "perfect-triangle", "circle-overlap", "depth-geometry"),
    "ecommerce": ("letterform-cutout", "gradient-bars", "circle-overlap", "motion-lines", "isometric-cube"),
    "entertainment": ("starburst", "sparkle-asterisk", "motion-lines", "perfect-triangle", "orbital-rings"),
}

INDUSTRY_ALIASES: dict[str, str] = {
    "tech": "technology",
    "software": "technology",
    "saas": "technology",
    "ai": "technology",
    "app": "technology",
    "digital": "technology",
    "fintech": "finance",
    "bank": "finance",
    "banking": "finance",
    "crypto": "finance",
    "health": "healthcare",
    "medical": "healthcare",
    "wellness": "healthcare",
    "design": "creative",
    "art": "creative",
    "agency": "creative",
    "restaurant": "food",
    "beverage": "food",
    "nature": "sustainability",
    "eco": "sustainability",
    "green": "sustainability",
    "retail": "ecommerce",
    "shop": "ecommerce",
    "media": "entertainment",
    "gaming": "entertainment",
}

AESTHETIC_ALGORITHMS: dict[str, tuple[str, ...]] = {
    "tech-minimal": ("motion-lines", "perfect-triangle", "gradient-bars", "hexagon-tech"),
    "bold-geometric": ("depth-geometry", "isometric-cube", "letterform-cutout", "perfect-triangle", "hexagon-tech"),
    "elegant-refined": ("letterform-cutout", "flow-gradient", "orbital-rings"),
    "friendly-rounded": ("starburst", "circle-overlap", "flow-gradient", "sparkle-asterisk"),
    "playful": ("sparkle-asterisk", "circle-overlap", "starburst", "flow-gradient"),
}


def resolve_industry(industry: str | None) -> str | None:
    """Canonical category for an industry hint, or None when unknown."""
    if not industry:
        return None
    key = industry.strip().lower()
    if key in INDUSTRY_ALGORITHMS:
        return key
    return INDUSTRY_ALIASES.get(key)


def resolve_aesthetic(aesthetic: str | None) -> str | None:
    if not aesthetic:
        return None
    key = aesthetic.strip().lower()
    return key if key in AESTHETIC_ALGORITHMS else None


def _registered_subset(candidates: Iterable[str], registered: list[str]) -> list[str]:
    allowed = set(registered)
    return sorted({c for c in candidates if c in allowed})


def candidate_pool(
    industry: str | None,
    aesthetic: str | None,
    registered: Iterable[str],
) -> list[str]:
    """Sorted, registered-only pool of algorithm ids for the given hints."""
    everything = sorted(set(registered))

    industry_key = resolve_industry(industry)
    aesthetic_key = resolve_aesthetic(aesthetic)
    by_industry = _registered_subset(INDUSTRY_ALGORITHMS[industry_key], everything) if industry_key else []
    by_aesthetic = _registered_subset(AESTHETIC_ALGORITHMS[aesthetic_key], everything) if aesthetic_key else []

    if by_industry and by_aesthetic:
        both = [a for a in by_industry if a in by_aesthetic]
        return both or by_industry
    if by_industry:
        return by_industry
    if by_aesthetic:
        return by_aesthetic
    if industry or aesthetic:
        logger.debug("No usable subset for industry=%r aesthetic=%r; using full pool", industry, aesthetic)
    return everything


def narrow_pool(pool: list[str], preferred: Iterable[str]) -> list[str]:
    """Bias a pool toward preferred ids; never empties it."""
    preferred_set = set(preferred)
    narrowed = [a for a in pool if a in preferred_set]
    return narrowed or pool


def select_algorithm(
    seed: str,
    industry: str | None = None,
    aesthetic: str | None = None,
    registered: Iterable[str] | None = None,
    preferred: Iterable[str] | None = None,
) -> str:
    """Deterministic, uniform pick from the candidate pool."""
    if registered is None:
        from glyph.engine.registry import get_registry, register_builtin_generators

        register_builtin_generators()
        registered = get_registry().ids()

    pool = candidate_pool(industry, aesthetic, registered)
    if preferred is not None:
        pool = narrow_pool(pool, preferred)
    if not pool:
        raise ValueError("No generators registered")
    return pool[param_int(seed, "algorithm", 0, len(pool) - 1)]
