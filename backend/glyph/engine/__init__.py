"""Glyph parametric logo engine."""

from glyph.engine.registry import generator, get_registry
from glyph.engine.context import GenerationContext
from glyph.engine.engine import GeneratedLogo, GenerateOptions, LogoEngine, create_engine, quick_generate

__all__ = [
    "generator",
    "get_registry",
    "GenerationContext",
    "GeneratedLogo",
    "GenerateOptions",
    "LogoEngine",
    "create_engine",
    "quick_generate",
]
