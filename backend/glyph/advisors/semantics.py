"""Semantic advisor — brand-name meaning to visual concepts and algorithm hints.

Three tables drive it:

- KEYWORD_SHAPE_MAP: words found in brand names ("brew", "cloud", "orbit")
- INDUSTRY_SHAPE_MAP: industry context, matched by key or keyword
- LETTER_SHAPE_MAP: what the first letters of the name suggest

Everything is a pure lookup. Unknown names simply match nothing.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from glyph.engine.seed import SeededRandom

logger = logging.getLogger(__name__)

_WORD_SPLIT_RE = re.compile(r"[\s\-_.]+")

# Substring matches shorter than this are noise ("ai" is in "chair")
_MIN_SUBSTRING_KEYWORD = 3

_TOP_CANDIDATES = 8


@dataclass(frozen=True)
class ShapeMapping:
    shapes: tuple[str, ...]
    algorithms: tuple[str, ...]
    style: str = ""


@dataclass(frozen=True)
class IndustryMapping:
    keywords: tuple[str, ...]
    shapes: tuple[str, ...]
    algorithms: tuple[str, ...]
    style: str = ""


@dataclass(frozen=True)
class LetterMapping:
    shapes: tuple[str, ...]
    hidden_meanings: tuple[str, ...]


def _km(shapes: str, algorithms: str, style: str) -> ShapeMapping:
    return ShapeMapping(tuple(shapes.split()), tuple(algorithms.split()), style)


KEYWORD_SHAPE_MAP: dict[str, ShapeMapping] = {
    # Food & beverage
    "coffee": _km("cup-silhouette steam-curves bean-shape", "flow-gradient motion-lines", "organic"),
    "tea": _km("cup-outline leaf-accent steam-wisps", "flow-gradient depth-geometry", "elegant"),
    "brew": _km("steam-rising cup-abstract drip-drop", "flow-gradient starburst", "warm"),
    "cafe": _km("cup-modern steam-wave", "letterform-cutout motion-lines", "minimal"),
    "roast": _km("flame-abstract bean-split heat-wave", "starburst flow-gradient", "bold"),
    "bakery": _km("wheat-stalk bread-curve oven-arch", "starburst flow-gradient", "artisan"),
    "chef": _km("hat-silhouette knife-angle flame-accent", "letterform-cutout motion-lines", "professional"),
    "food": _km("plate-circle fork-knife organic-blob", "circle-overlap starburst", "appetizing"),
    "pizza": _km("slice-triangle circle-cut", "perfect-triangle starburst", "fun"),
    "burger": _km("stack-layers bun-curve", "gradient-bars depth-geometry", "bold"),
    "wine": _km("glass-silhouette grape-cluster pour-curve", "flow-gradient depth-geometry", "elegant"),
    "juice": _km("fruit-slice drop-splash citrus-wedge", "circle-overlap flow-gradient", "fresh"),
    "farm": _km("barn-peak field-lines sun-rise", "perfect-triangle starburst", "rustic"),
    "harvest": _km("wheat-bundle basket-arc sun-rays", "starburst flow-gradient", "abundant"),
    # Tech
    "cloud": _km("cumulus-rounded floating-dots node-cluster", "circle-overlap flow-gradient orbital-rings", "tech"),
    "sync": _km("arrow-cycle refresh-loop circular-flow", "orbital-rings motion-lines", "seamless"),
    "data": _km("bar-chart node-network stream-lines", "gradient-bars hexagon-tech", "analytical"),
    "server": _km("rack-stack led-dots server-blade", "gradient-bars isometric-cube", "infrastructure"),
    "api": _km("bracket-pair connect-dot endpoint-circle", "letterform-cutout hexagon-tech", "developer"),
    "code": _km("bracket-angle cursor-line syntax-block", "letterform-cutout hexagon-tech", "developer"),
    "dev": _km("terminal-prompt branch-git merge-arrow", "letterform-cutout motion-lines", "technical"),
    "stack": _km("layer-pile block-tower", "isometric-cube gradient-bars depth-geometry", "structured"),
    "node": _km("dot-connect network-web hub-spoke", "hexagon-tech orbital-rings", "connected"),
    "pixel": _km("pixel-grid mosaic-tile", "isometric-cube gradient-bars", "digital"),
    "byte": _km("binary-pair bit-block hex-pattern", "hexagon-tech gradient-bars", "computing"),
    "tech": _km("circuit-path chip-pattern signal-pulse", "hexagon-tech letterform-cutout", "innovative"),
    "soft": _km("window-frame code-block", "letterform-cutout depth-geometry", "digital"),
    "ai": _km("neural-node spark-synapse", "sparkle-asterisk starburst orbital-rings", "intelligent"),
    "bot": _km("face-simple antenna-dot chat-bubble", "letterform-cutout circle-overlap", "friendly"),
    "smart": _km("bulb-glow idea-spark", "sparkle-asterisk starburst", "intelligent"),
    "cyber": _km("shield-hex lock-circuit scan-line", "hexagon-tech isometric-cube", "secure"),
    "quantum": _km("particle-wave qubit-state probability-cloud", "orbital-rings starburst", "scientific"),
    "block": _km("chain-link cube-stack", "isometric-cube hexagon-tech", "solid"),
    "chain": _km("link-chain decentralized-node", "hexagon-tech orbital-rings", "connected"),
    # Motion & sound
    "wave": _km("sine-curve water-flow sound-frequency", "motion-lines flow-gradient", "dynamic"),
    "flow": _km("stream-curve liquid-path air-current", "flow-gradient motion-lines", "fluid"),
    "stream": _km("river-bend data-flow continuous-line", "flow-gradient motion-lines", "continuous"),
    "pulse": _km("heartbeat-line signal-peak", "motion-lines gradient-bars", "alive"),
    "sound": _km("frequency-bar speaker-cone wave-ripple", "gradient-bars motion-lines", "audio"),
    "audio": _km("waveform-visual volume-bar", "gradient-bars motion-lines", "sonic"),
    "music": _km("note-symbol staff-line rhythm-curve", "motion-lines starburst", "melodic"),
    "echo": _km("ripple-expand fade-wave repeat-arc", "circle-overlap orbital-rings", "resonant"),
    "swift": _km("speed-streak quick-arrow", "motion-lines", "fast"),
    "dash": _km("speed-line quick-stroke", "motion-lines gradient-bars", "fast"),
    # Nature
    "leaf": _km("leaf-vein stem-curve organic-tip", "flow-gradient", "natural"),
    "tree": _km("trunk-base branch-spread canopy-round", "starburst depth-geometry", "growth"),
    "flower": _km("petal-radial bloom-center", "starburst circle-overlap", "floral"),
    "sun": _km("ray-burst circle-glow rise-arc", "starburst circle-overlap", "bright"),
    "moon": _km("crescent-curve phase-shadow", "circle-overlap orbital-rings", "celestial"),
    "star": _km("point-radial twinkle-burst", "sparkle-asterisk starburst", "stellar"),
    "ocean": _km("wave-layer depth-fade current-flow", "flow-gradient motion-lines", "vast"),
    "river": _km("meander-curve flow-path", "flow-gradient motion-lines", "flowing"),
    "mountain": _km("peak-triangle range-layer", "perfect-triangle depth-geometry", "majestic"),
    "earth": _km("globe-curve orbit-ring", "circle-overlap orbital-rings", "global"),
    "eco": _km("recycle-arrow leaf-circle green-loop", "flow-gradient orbital-rings", "sustainable"),
    "green": _km("leaf-accent growth-arrow", "flow-gradient starburst", "environmental"),
    "water": _km("drop-shape ripple-circle", "flow-gradient circle-overlap", "fluid"),
    "fire": _km("flame-tongue ember-glow heat-rise", "starburst flow-gradient", "intense"),
    "stone": _km("rock-facet mineral-edge", "depth-geometry perfect-triangle", "solid"),
    "crystal": _km("facet-angle prism-light gem-cut", "depth-geometry isometric-cube", "precious"),
    # Finance
    "finance": _km("chart-rise bar-growth coin-stack", "gradient-bars depth-geometry", "professional"),
    "bank": _km("column-pillar vault-door", "letterform-cutout depth-geometry", "trust"),
    "pay": _km("card-swipe transfer-arrow", "motion-lines gradient-bars", "instant"),
    "money": _km("coin-circle value-stack", "circle-overlap depth-geometry", "value"),
    "invest": _km("growth-arrow compound-stack", "gradient-bars depth-geometry", "growth"),
    "trade": _km("exchange-arrow market-chart", "motion-lines gradient-bars", "dynamic"),
    "wealth": _km("accumulate-stack diamond-gem", "depth-geometry isometric-cube", "premium"),
    "crypto": _km("hash-pattern token-circle", "hexagon-tech orbital-rings", "disruptive"),
    "capital": _km("pillar-strong foundation-base", "depth-geometry gradient-bars", "substantial"),
    "ledger": _km("ruled-lines column-stack", "gradient-bars isometric-cube", "precise"),
    # Health
    "health": _km("heart-pulse life-circle", "circle-overlap flow-gradient", "care"),
    "care": _km("hand-hold heart-embrace", "flow-gradient circle-overlap", "compassionate"),
    "med": _km("cross-symbol pill-capsule", "letterform-cutout circle-overlap", "clinical"),
    "fit": _km("muscle-flex motion-run", "motion-lines gradient-bars", "active"),
    "yoga": _km("breath-flow lotus-seat", "flow-gradient starburst", "zen"),
    "mind": _km("brain-curve thought-bubble", "orbital-rings flow-gradient", "cognitive"),
    "bio": _km("dna-helix cell-divide", "orbital-rings circle-overlap", "life-science"),
    "lab": _km("flask-beaker molecule-structure", "hexagon-tech orbital-rings", "research"),
    # Communication & creative
    "chat": _km("bubble-speech ellipsis-typing", "circle-overlap letterform-cutout", "conversational"),
    "connect": _km("link-chain bridge-span node-join", "orbital-rings circle-overlap", "relational"),
    "team": _km("people-row unity-circle", "circle-overlap gradient-bars", "unified"),
    "design": _km("pen-tool artboard-frame curve-bezier", "flow-gradient letterform-cutout", "creative"),
    "art": _km("brush-stroke palette-colors", "flow-gradient starburst", "expressive"),
    "studio": _km("spotlight-cone easel-frame", "depth-geometry letterform-cutout", "professional"),
    "photo": _km("aperture-iris flash-burst", "circle-overlap starburst", "capture"),
    "video": _km("play-triangle film-strip", "perfect-triangle gradient-bars", "motion"),
    "play": _km("play-triangle game-pad", "perfect-triangle sparkle-asterisk", "fun"),
    "ink": _km("drop-splash pen-flow", "flow-gradient starburst", "print"),
    # Growth
    "grow": _km("sprout-up arrow-rise", "gradient-bars starburst", "ascending"),
    "launch": _km("rocket-blast trajectory-arc", "motion-lines perfect-triangle", "explosive"),
    "boost": _km("thrust-arrow accelerate-line", "motion-lines", "amplified"),
    "rise": _km("ascend-line sun-horizon", "gradient-bars starburst", "upward"),
    "peak": _km("summit-point apex-triangle", "perfect-triangle", "pinnacle"),
    "next": _km("forward-arrow step-ahead", "motion-lines perfect-triangle", "progressive"),
    "nova": _km("explode-star bright-burst", "starburst sparkle-asterisk", "explosive"),
    # Abstract
    "core": _km("center-nucleus essential-dot", "circle-overlap starburst", "fundamental"),
    "hub": _km("central-node spoke-radial", "starburst orbital-rings", "central"),
    "loop": _km("circle-infinite cycle-return", "orbital-rings", "endless"),
    "orbit": _km("ellipse-path satellite-ring", "orbital-rings circle-overlap", "cosmic"),
    "spark": _km("ignite-flash idea-burst", "sparkle-asterisk starburst", "energetic"),
    "glow": _km("radiate-light soft-halo", "circle-overlap flow-gradient", "luminous"),
    "zen": _km("circle-enso stone-balance calm-wave", "circle-overlap flow-gradient", "peaceful"),
    "pure": _km("clean-circle simple-form", "circle-overlap letterform-cutout", "minimal"),
    "edge": _km("sharp-angle blade-line", "perfect-triangle motion-lines", "sharp"),
    "apex": _km("peak-point top-triangle", "perfect-triangle", "pinnacle"),
    "prism": _km("refract-light facet-split", "depth-geometry perfect-triangle", "multifaceted"),
    "cube": _km("box-faces iso-block", "isometric-cube depth-geometry", "solid"),
    "hex": _km("hexagon-cell honeycomb", "hexagon-tech", "structured"),
    "flux": _km("change-flow morph-shape", "flow-gradient motion-lines", "changing"),
    "aura": _km("glow-surround energy-field", "circle-overlap flow-gradient", "ethereal"),
    "dawn": _km("horizon-glow first-light", "starburst flow-gradient", "hopeful"),
}


def _im(keywords: str, shapes: str, algorithms: str, style: str) -> IndustryMapping:
    return IndustryMapping(tuple(keywords.split()), tuple(shapes.split()), tuple(algorithms.split()), style)


INDUSTRY_SHAPE_MAP: dict[str, IndustryMapping] = {
    "technology": _im(
        "tech software digital code dev app data cloud ai saas",
        "circuit-line node-network bracket-code pixel-grid",
        "hexagon-tech letterform-cutout isometric-cube gradient-bars",
        "modern-innovative",
    ),
    "finance": _im(
        "finance fintech bank pay money invest trade crypto insurance",
        "shield-protect arrow-growth chart-line coin-stack",
        "gradient-bars depth-geometry isometric-cube letterform-cutout",
        "modern-trust",
    ),
    "healthcare": _im(
        "health medical care wellness pharma bio therapy clinic",
        "cross-medical heart-pulse leaf-health hand-support",
        "circle-overlap flow-gradient letterform-cutout",
        "clean-caring",
    ),
    "food": _im(
        "restaurant cafe kitchen chef cook eat taste flavor coffee bakery",
        "utensil-cross plate-circle flame-cook steam-rise",
        "starburst circle-overlap flow-gradient letterform-cutout",
        "appetizing-warm",
    ),
    "creative": _im(
        "design art studio agency creative photo media brand",
        "brush-stroke pen-tool frame-border color-splash",
        "flow-gradient circle-overlap sparkle-asterisk starburst",
        "expressive",
    ),
    "education": _im(
        "learn study school teach knowledge academy course",
        "book-open graduation-cap lightbulb-idea path-growth",
        "letterform-cutout starburst circle-overlap",
        "academic-inspiring",
    ),
    "ecommerce": _im(
        "shop store buy sell cart deal order delivery retail",
        "cart-bag tag-price box-package checkmark-confirm",
        "letterform-cutout gradient-bars circle-overlap motion-lines",
        "fast-trustworthy",
    ),
    "entertainment": _im(
        "entertainment movie music show event game fun media",
        "play-triangle star-burst spotlight-cone film-reel",
        "starburst perfect-triangle motion-lines sparkle-asterisk",
        "exciting-dynamic",
    ),
    "sustainability": _im(
        "eco green sustainable organic natural clean renewable nature",
        "leaf-eco recycle-arrow sun-energy water-drop",
        "flow-gradient orbital-rings circle-overlap starburst",
        "natural-responsible",
    ),
}


def _lm(shapes: str, meanings: str) -> LetterMapping:
    return LetterMapping(tuple(shapes.split()), tuple(meanings.split()))


LETTER_SHAPE_MAP: dict[str, LetterMapping] = {
    "A": _lm("triangle-peak mountain-form arrow-up", "growth aspiration stability"),
    "B": _lm("double-curve stacked-bumps", "fullness abundance comfort"),
    "C": _lm("crescent-moon embrace-curve open-circle", "openness receptivity cycle"),
    "D": _lm("half-circle dome-arch", "protection shelter completion"),
    "E": _lm("triple-bar stack-lines", "equality layers balance"),
    "F": _lm("flag-pole double-arm", "forward signal direction"),
    "G": _lm("spiral-entry c-with-bar", "gravity center return"),
    "H": _lm("pillar-pair bridge-span ladder-rung", "support connection stability"),
    "I": _lm("pillar-single beam-vertical", "self individual focus"),
    "J": _lm("hook-bottom swing-arc", "landing anchor journey"),
    "K": _lm("thrust-angles arrow-pair", "action dynamic diverge"),
    "L": _lm("corner-right base-line", "foundation support ground"),
    "M": _lm("mountain-peaks crown-points", "magnitude strength stability"),
    "N": _lm("diagonal-bridge lightning-bolt", "connection energy progress"),
    "O": _lm("perfect-circle ring-complete", "wholeness unity infinity"),
    "P": _lm("flag-top bubble-stem", "thought idea pointing"),
    "Q": _lm("circle-tail balloon-string", "departure unique question"),
    "R": _lm("walking-man dynamic-p", "movement action stride"),
    "S": _lm("snake-curve wave-vertical", "flow flexibility balance"),
    "T": _lm("cross-top platform-beam", "foundation truth structure"),
    "U": _lm("cup-form cradle-curve", "holding receiving unity"),
    "V": _lm("arrow-down valley-form", "focus victory convergence"),
    "W": _lm("double-v wave-form", "waves width water"),
    "X": _lm("cross-diagonal intersect", "unknown multiply crossing"),
    "Y": _lm("branch-up fork-split", "choice branching reaching"),
    "Z": _lm("zig-zag dynamic-line", "energy speed finale"),
}


@dataclass
class KeywordMatch:
    word: str
    mapping: ShapeMapping


@dataclass
class SemanticAnalysis:
    words: list[str] = field(default_factory=list)
    matched_keywords: list[KeywordMatch] = field(default_factory=list)
    industry: str | None = None
    letter_analysis: list[tuple[str, LetterMapping]] = field(default_factory=list)
    combined_shapes: list[str] = field(default_factory=list)
    recommended_algorithms: list[str] = field(default_factory=list)


def _match_industry(industry: str | None) -> str | None:
    if not industry:
        return None
    needle = industry.strip().lower()
    if not needle:
        return None
    if needle in INDUSTRY_SHAPE_MAP:
        return needle
    for key, mapping in INDUSTRY_SHAPE_MAP.items():
        if needle in mapping.keywords:
            return key
    for key, mapping in INDUSTRY_SHAPE_MAP.items():
        if key in needle or any(len(k) >= _MIN_SUBSTRING_KEYWORD and k in needle for k in mapping.keywords):
            return key
    return None


def analyze_semantics(brand_name: str, industry: str | None = None) -> SemanticAnalysis:
    """Keyword, industry and initial-letter analysis of a brand name."""
    result = SemanticAnalysis()
    result.words = [w for w in _WORD_SPLIT_RE.split((brand_name or "").lower()) if w]

    seen_keywords: set[str] = set()
    for word in result.words:
        if word in KEYWORD_SHAPE_MAP and word not in seen_keywords:
            seen_keywords.add(word)
            result.matched_keywords.append(KeywordMatch(word, KEYWORD_SHAPE_MAP[word]))
        for keyword, mapping in KEYWORD_SHAPE_MAP.items():
            if len(keyword) < _MIN_SUBSTRING_KEYWORD or keyword in seen_keywords:
                continue
            if keyword in word and keyword != word:
                seen_keywords.add(keyword)
                result.matched_keywords.append(KeywordMatch(keyword, mapping))

    result.industry = _match_industry(industry)

    initials = re.sub(r"[^A-Z]", "", (brand_name or "").upper())[:3]
    for letter in initials:
        result.letter_analysis.append((letter, LETTER_SHAPE_MAP[letter]))

    shapes: dict[str, None] = {}
    algorithms: dict[str, None] = {}
    for match in result.matched_keywords:
        shapes.update(dict.fromkeys(match.mapping.shapes))
        algorithms.update(dict.fromkeys(match.mapping.algorithms))
    if result.industry:
        mapping = INDUSTRY_SHAPE_MAP[result.industry]
        shapes.update(dict.fromkeys(mapping.shapes))
        algorithms.update(dict.fromkeys(mapping.algorithms))
    for _, letter_map in result.letter_analysis:
        shapes.update(dict.fromkeys(letter_map.shapes))
        shapes.update(dict.fromkeys(letter_map.hidden_meanings))

    result.combined_shapes = list(shapes)
    result.recommended_algorithms = list(algorithms)
    logger.debug(
        "Semantics for %r: %d keywords, industry=%s",
        brand_name,
        len(result.matched_keywords),
        result.industry,
    )
    return result


def semantic_algorithms(
    brand_name: str,
    industry: str | None = None,
    seed: str | None = None,
    limit: int = 5,
) -> list[str]:
    """Relevance-ranked algorithm ids, shuffled deterministically within the top few."""
    analysis = analyze_semantics(brand_name, industry)

    scores: dict[str, int] = {}
    for match in analysis.matched_keywords:
        for algo in match.mapping.algorithms:
            scores[algo] = scores.get(algo, 0) + 3
    if analysis.industry:
        for algo in INDUSTRY_SHAPE_MAP[analysis.industry].algorithms:
            scores[algo] = scores.get(algo, 0) + 2

    # Stable on ties: first-seen order wins
    candidates = sorted(scores, key=lambda a: -scores[a]) or analysis.recommended_algorithms
    top = candidates[:_TOP_CANDIDATES]
    rng = SeededRandom(f"semantic|{seed if seed is not None else brand_name}")
    return rng.shuffled(top)[:limit]


def semantic_context(brand_name: str, industry: str | None = None) -> str:
    """Pipe-separated summary, e.g. "Keywords: brew | Industry: food | Letter meanings: ..."."""
    analysis = analyze_semantics(brand_name, industry)
    parts: list[str] = []
    if analysis.matched_keywords:
        parts.append("Keywords: " + ", ".join(m.word for m in analysis.matched_keywords))
    if analysis.industry:
        parts.append(f"Industry: {analysis.industry}")
    if analysis.letter_analysis:
        meanings = [m for _, lm in analysis.letter_analysis for m in lm.hidden_meanings][:3]
        parts.append("Letter meanings: " + ", ".join(meanings))
    return " | ".join(parts)
