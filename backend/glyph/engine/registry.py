"""Generator registry — every logo algorithm is a standalone function registered via decorator.

Usage:
    @generator(id="starburst", name="Starburst", inspiration="Anthropic", tags={"radial"})
    def starburst(ctx: GenerationContext) -> str:
        svg = ctx.builder()
        ...
        return svg.build()

Adding a new algorithm = creating one file with the decorator. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from glyph.engine.context import GenerationContext

logger = logging.getLogger(__name__)


@dataclass
class GeneratorSpec:
    id: str
    fn: Callable[["GenerationContext"], str]
    name: str = ""
    description: str = ""
    inspiration: str = ""
    tags: set[str] = field(default_factory=set)
    animation: str = "fade-in"


class GeneratorRegistry:
    """Registry of all logo generators, keyed by algorithm id."""

    def __init__(self) -> None:
        self._generators: dict[str, GeneratorSpec] = {}

    def register(self, spec: GeneratorSpec) -> None:
        if spec.id in self._generators:
            raise ValueError(f"Duplicate generator ID: {spec.id}")
        self._generators[spec.id] = spec
        logger.debug("Registered generator %s", spec.id)

    def get(self, generator_id: str) -> GeneratorSpec:
        return self._generators[generator_id]

    def __contains__(self, generator_id: object) -> bool:
        return generator_id in self._generators

    def ids(self) -> list[str]:
        return sorted(self._generators)

    def all(self) -> list[GeneratorSpec]:
        return [self._generators[k] for k in self.ids()]

    def with_tag(self, tag: str) -> list[GeneratorSpec]:
        return [s for s in self.all() if tag in s.tags]

    @property
    def count(self) -> int:
        return len(self._generators)


# Module-level singleton
_registry = GeneratorRegistry()


def get_registry() -> GeneratorRegistry:
    return _registry


def generator(
    *,
    id: str,
    name: str = "",
    description: str = "",
    inspiration: str = "",
    tags: set[str] | None = None,
    animation: str = "fade-in",
):
    """Decorator to register a generator function."""

    def decorator(fn: Callable[["GenerationContext"], str]):
        spec = GeneratorSpec(
            id=id,
            fn=fn,
            name=name or id.replace("-", " ").title(),
            description=description,
            inspiration=inspiration,
            tags=tags or set(),
            animation=animation,
        )
        _registry.register(spec)
        return fn

    return decorator


def register_builtin_generators() -> None:
    """Import every module under glyph.engine.generators so @generator decorators fire."""
    import importlib
    import pkgutil

    package = importlib.import_module("glyph.engine.generators")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"glyph.engine.generators.{module_name}")
