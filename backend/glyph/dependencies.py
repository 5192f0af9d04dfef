"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from glyph.config import Settings, settings
from glyph.engine.config import GenerationConfig
from glyph.engine.engine import LogoEngine, create_engine
from glyph.engine.store import InMemoryHashStore


def get_settings() -> Settings:
    return settings


@lru_cache(maxsize=1)
def get_engine() -> LogoEngine:
    return create_engine(GenerationConfig.from_settings(settings))


@lru_cache(maxsize=1)
def get_history_store() -> InMemoryHashStore:
    """Process-wide store used when a request asks to remember what it has seen."""
    config = get_engine().config
    return InMemoryHashStore(max_per_brand=config.max_hashes_per_brand, max_brands=config.max_brands)
