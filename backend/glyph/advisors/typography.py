"""Typography advisor — display/body font pairings for a brand.

Pure data plus tag scoring. Nothing here loads fonts; callers get names and
metadata and wire them into whatever renderer they use.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from glyph.engine.seed import SeededRandom

logger = logging.getLogger(__name__)

CLASSIFICATIONS = (
    "geometric-sans",
    "humanist-sans",
    "neo-grotesque",
    "modern-serif",
    "old-style-serif",
    "slab-serif",
    "display",
    "mono",
)

_TOP_PAIRINGS = 5


@dataclass(frozen=True)
class FontInfo:
    name: str
    classification: str
    personality: tuple[str, ...] = ()
    best_for: tuple[str, ...] = ()
    pairs_with: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    description: str = ""


@dataclass(frozen=True)
class FontPairing:
    id: str
    name: str
    display: str
    body: str
    tags: tuple[str, ...] = ()
    recommended: bool = False


@dataclass
class TypographyChoice:
    display: FontInfo
    body: FontInfo
    pairing: FontPairing
    score: int = 0
    reason: str = ""


def _font(name: str, classification: str, personality: str, best_for: str, pairs_with: str, tags: str, description: str) -> FontInfo:
    return FontInfo(
        name=name,
        classification=classification,
        personality=tuple(personality.split()),
        best_for=tuple(s.strip() for s in best_for.split(",")),
        pairs_with=tuple(pairs_with.split()),
        tags=tuple(tags.split()),
        description=description,
    )


FONT_DATABASE: dict[str, FontInfo] = {
    f.name: f
    for f in (
        _font("Inter", "neo-grotesque", "neutral precise modern", "UI, SaaS products, documentation",
              "modern-serif display", "tech clean minimalist", "Screen-optimized neutral sans with tall x-height."),
        _font("Outfit", "geometric-sans", "friendly modern approachable", "startups, apps, branding",
              "modern-serif mono", "modern vibrant friendly", "Geometric sans with softened terminals."),
        _font("Poppins", "geometric-sans", "bold confident striking", "logos, headlines, marketing",
              "humanist-sans old-style-serif", "bold geometric impact", "Strong circular forms that make headlines pop."),
        _font("DM Sans", "geometric-sans", "clean contemporary balanced", "product design, websites",
              "modern-serif mono", "clean modern readable", "Low-contrast geometric sans with open apertures."),
        _font("Manrope", "geometric-sans", "minimal refined sophisticated", "premium brands, portfolios",
              "modern-serif", "minimalist modern professional", "Semi-rounded geometric with careful optical balance."),
        _font("Space Grotesk", "geometric-sans", "futuristic technical distinctive", "tech, crypto, gaming",
              "mono display", "tech futuristic bold", "Proportional sans with mono-inspired quirks."),
        _font("Open Sans", "humanist-sans", "friendly warm accessible", "healthcare, education, content sites",
              "old-style-serif slab-serif", "friendly readable approachable", "Open humanist forms built for legibility."),
        _font("Lato", "humanist-sans", "warm stable professional", "corporate, finance, services",
              "modern-serif old-style-serif", "professional warm trust", "Semi-rounded details over a strong structure."),
        _font("Work Sans", "humanist-sans", "editorial clean contemporary", "editorial, blogs, creative",
              "modern-serif display", "editorial creative clean", "Screen-tuned grotesque with subtle quirks."),
        _font("Playfair Display", "modern-serif", "elegant editorial dramatic", "fashion, luxury, magazines",
              "geometric-sans humanist-sans", "elegant luxury editorial", "High-contrast transitional serif."),
        _font("Libre Baskerville", "modern-serif", "trustworthy classic authoritative", "law, finance, publishing",
              "geometric-sans humanist-sans", "classic trust traditional", "Baskerville heritage with print authority."),
        _font("Lora", "old-style-serif", "warm readable classic", "blogs, books, long-form",
              "geometric-sans humanist-sans", "warm organic readable", "Contemporary serif with calligraphic roots."),
        _font("Fraunces", "old-style-serif", "warm expressive characterful", "artisan brands, food, lifestyle",
              "geometric-sans humanist-sans", "warm organic friendly", "Soft, wonky old-style serif with a human feel."),
        _font("Arvo", "slab-serif", "sturdy reliable approachable", "headlines, editorial, tech",
              "geometric-sans humanist-sans", "bold strong friendly", "Geometric slab with uniform strokes."),
        _font("Bebas Neue", "display", "bold impactful condensed", "headlines, posters, sports",
              "humanist-sans geometric-sans", "bold impact strong", "All-caps condensed display face."),
        _font("Syne", "display", "artistic creative avant-garde", "agencies, art, music",
              "geometric-sans mono", "artistic creative unique", "Quirky display letterforms for standing out."),
        _font("Unbounded", "display", "futuristic wide bold", "tech, gaming, innovation",
              "geometric-sans mono", "futuristic bold tech", "Expanded display face with a futuristic stance."),
        _font("Roboto Mono", "mono", "technical precise developer", "code, data, developer tools",
              "geometric-sans humanist-sans", "tech developer precise", "Monospace tuned for code."),
        _font("IBM Plex Mono", "mono", "corporate technical trustworthy", "enterprise, fintech, docs",
              "geometric-sans humanist-sans", "tech professional trust", "IBM's corporate face in monospaced form."),
    )
}


def _pair(pid: str, name: str, display: str, body: str, tags: str, recommended: bool = False) -> FontPairing:
    return FontPairing(pid, name, display, body, tuple(tags.split()), recommended)


FONT_PAIRINGS: list[FontPairing] = [
    _pair("modern-clean", "Modern Clean", "Inter", "Inter", "minimalist tech clean", True),
    _pair("architect", "Architect", "Manrope", "Inter", "minimalist tech modern professional", True),
    _pair("tech-forward", "Tech Forward", "Space Grotesk", "Inter", "tech bold futuristic modern"),
    _pair("tech-mono", "Tech Mono", "Space Grotesk", "Roboto Mono", "tech bold developer"),
    _pair("startup-sleek", "Startup Sleek", "Outfit", "Inter", "modern tech vibrant saas", True),
    _pair("bold-geometric", "Bold Geometric", "Poppins", "Poppins", "bold geometric impact"),
    _pair("bold-statement", "Bold Statement", "Manrope", "DM Sans", "bold vibrant startup modern"),
    _pair("editorial", "Editorial", "Playfair Display", "DM Sans", "editorial elegant luxury professional", True),
    _pair("trusted-classic", "Trusted Classic", "Libre Baskerville", "Lato", "professional trust classic traditional neutral"),
    _pair("warm-artisan", "Warm Artisan", "Fraunces", "Open Sans", "warm organic friendly soft natural"),
    _pair("friendly-reader", "Friendly Reader", "Outfit", "Open Sans", "friendly approachable readable clean"),
    _pair("storybook", "Storybook", "Lora", "Work Sans", "readable warm editorial natural"),
    _pair("sturdy-slab", "Sturdy Slab", "Arvo", "Lato", "bold strong friendly"),
    _pair("poster-impact", "Poster Impact", "Bebas Neue", "Open Sans", "bold impact strong news"),
    _pair("studio-avant", "Studio Avant", "Syne", "DM Sans", "artistic creative unique"),
    _pair("future-wide", "Future Wide", "Unbounded", "IBM Plex Mono", "futuristic tech bold"),
    _pair("enterprise", "Enterprise", "Inter", "IBM Plex Mono", "professional neutral clean tech"),
]

INDUSTRY_FONT_TAGS: dict[str, tuple[str, ...]] = {
    "technology": ("modern", "tech", "clean", "minimalist"),
    "tech": ("modern", "tech", "clean", "minimalist"),
    "saas": ("modern", "tech", "saas", "clean"),
    "finance": ("professional", "trust", "neutral", "classic"),
    "fintech": ("modern", "tech", "bold", "trust"),
    "health": ("friendly", "warm", "approachable", "clean"),
    "healthcare": ("friendly", "warm", "approachable", "clean"),
    "food": ("friendly", "warm", "organic", "bold"),
    "education": ("readable", "friendly", "approachable"),
    "creative": ("artistic", "creative", "unique", "bold"),
    "ecommerce": ("modern", "friendly", "bold", "clean"),
    "sustainability": ("organic", "natural", "warm", "soft"),
    "nature": ("organic", "natural", "warm", "soft"),
    "entertainment": ("bold", "impact", "creative", "vibrant"),
    "media": ("editorial", "bold", "news"),
    "luxury": ("elegant", "luxury", "editorial", "minimalist"),
    "legal": ("traditional", "trust", "classic", "professional"),
    "enterprise": ("professional", "neutral", "clean"),
}

STYLE_FONT_TAGS: dict[str, tuple[str, ...]] = {
    "minimal": ("minimalist", "clean", "geometric"),
    "geometric": ("geometric", "bold", "modern"),
    "abstract": ("modern", "artistic", "creative"),
    "bold": ("bold", "impact", "strong"),
    "organic": ("organic", "soft", "friendly", "warm"),
    "elegant": ("elegant", "editorial", "classic"),
    "playful": ("friendly", "vibrant", "unique"),
}

_CLASS_ROLES = {
    "geometric-sans": "digital interfaces and modern brands",
    "humanist-sans": "content-heavy experiences and approachable brands",
    "neo-grotesque": "neutral, systematic design systems",
    "modern-serif": "editorial, fashion and luxury contexts",
    "old-style-serif": "long-form reading and classic aesthetics",
    "slab-serif": "bold headlines and sturdy brand presence",
    "display": "headlines and brand statements",
    "mono": "technical content and developer experiences",
}


def _normalize_font(name: str) -> str:
    return re.sub(r"\s+", "", name).lower()


def font_metadata(name: str) -> FontInfo:
    """Known font metadata, or a classification inferred from the name."""
    if name in FONT_DATABASE:
        return FONT_DATABASE[name]
    key = _normalize_font(name)
    for known, info in FONT_DATABASE.items():
        if _normalize_font(known) == key:
            return info

    lower = name.lower()
    if "mono" in lower or "code" in lower:
        classification = "mono"
    elif "slab" in lower:
        classification = "slab-serif"
    elif "serif" in lower:
        classification = "modern-serif"
    elif "display" in lower or "black" in lower:
        classification = "display"
    else:
        classification = "neo-grotesque"

    return FontInfo(
        name=name,
        classification=classification,
        personality=("modern", "versatile"),
        best_for=("general use", "branding"),
        pairs_with=("geometric-sans", "humanist-sans"),
        description=f"{name} is a {classification.replace('-', ' ')} typeface suited to {_CLASS_ROLES[classification]}.",
    )


def pairing_rationale(display: str, body: str) -> str:
    """One-paragraph explanation of why two fonts work together."""
    d_cls = font_metadata(display).classification
    b_cls = font_metadata(body).classification

    if _normalize_font(display) == _normalize_font(body):
        return f"{display} carries both headlines and body text as a single-family system."
    if ("serif" in d_cls and "sans" in b_cls) or ("sans" in d_cls and "serif" in b_cls):
        return (
            f"This pairing builds hierarchy through contrast. {display} draws the eye, "
            f"while {body} keeps body content comfortable to read."
        )
    if d_cls == "display" and b_cls in ("geometric-sans", "humanist-sans", "neo-grotesque"):
        return f"{display} makes the statement in headlines, and {body} keeps running text readable."
    if b_cls == "mono":
        return f"{display} leads while {body} adds a technical, precise voice to supporting content."
    if d_cls == b_cls:
        return f"Both fonts share a {d_cls.replace('-', ' ')} foundation, so the system stays cohesive."
    return f"{display} and {body} complement each other with balanced contrast and clear hierarchy."


def _industry_tags(industry: str | None) -> tuple[str, ...]:
    key = re.sub(r"[^a-z_]", "", (industry or "").lower())
    return INDUSTRY_FONT_TAGS.get(key, INDUSTRY_FONT_TAGS["technology"])


def _score(pairing: FontPairing, desired: tuple[str, ...]) -> int:
    score = sum(2 for tag in desired if tag in pairing.tags)
    if pairing.recommended:
        score += 1
    return score


def _ranked(industry: str | None, style: str | None) -> list[tuple[FontPairing, int]]:
    desired = _industry_tags(industry) + STYLE_FONT_TAGS.get((style or "").lower(), ())
    # sorted() is stable, so ties keep table order
    return sorted(((p, _score(p, desired)) for p in FONT_PAIRINGS), key=lambda ps: -ps[1])


def _pool(scored: list[tuple[FontPairing, int]], size: int) -> list[tuple[FontPairing, int]]:
    """Top `size` pairings. Zero-score pairings only fill in when positive matches run short."""
    positive = [ps for ps in scored if ps[1] > 0]
    if len(positive) >= size or (positive and size <= _TOP_PAIRINGS):
        return positive[:size]
    return scored[:size]


def _choice(pairing: FontPairing, score: int, industry: str | None, style: str | None) -> TypographyChoice:
    reason = (
        f'Selected "{pairing.name}" for {industry or "technology"}/{style or "default"} '
        f"(score: {score}, tags: {', '.join(pairing.tags)})"
    )
    logger.debug(reason)
    return TypographyChoice(
        display=font_metadata(pairing.display),
        body=font_metadata(pairing.body),
        pairing=pairing,
        score=score,
        reason=reason,
    )


def select_typography_pairing(
    industry: str | None = "technology",
    style: str | None = None,
    seed: str | None = None,
) -> TypographyChoice:
    """Best-matching pairing for an industry/style, picked deterministically from the top few."""
    pool = _pool(_ranked(industry, style), _TOP_PAIRINGS)
    if seed is None:
        pairing, score = pool[0]
    else:
        pairing, score = SeededRandom(str(seed)).choice(pool)
    return _choice(pairing, score, industry, style)


def typography_variations(
    industry: str | None,
    count: int = 5,
    style: str | None = None,
    seed: str = "",
) -> list[TypographyChoice]:
    """`count` choices with distinct pairing ids, fewer only if the table runs out.

    The pool widens past the usual top few when more pairings are requested.
    """
    pool = _pool(_ranked(industry, style), max(count, _TOP_PAIRINGS))
    picked = SeededRandom(f"{seed}#typography").shuffled(pool)[: max(0, count)]
    return [_choice(pairing, score, industry, style) for pairing, score in picked]
