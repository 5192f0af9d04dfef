"""Tests for the LogoEngine generation loop."""

import logging
import xml.etree.ElementTree as ET

import pytest

from glyph.engine import GenerateOptions, LogoEngine, create_engine, quick_generate
from glyph.engine.config import GenerationConfig
from glyph.engine.engine import ANIMATION_PRESETS, animation_for, complexity_of
from glyph.engine.quality import QualityReport
from glyph.engine.registry import GeneratorRegistry, GeneratorSpec
from glyph.engine.store import InMemoryHashStore
from glyph.utils.color import InvalidColorError

from tests.conftest import ALL_ALGORITHMS, EDGE_SEEDS, FOOD_ALGORITHMS


class FixedScorer:
    """Scores every candidate the same, so tests control the quality gate."""

    def __init__(self, overall: float) -> None:
        self.overall = overall

    def score(self, svg, params):
        return QualityReport(overall=self.overall)


def _constant_registry() -> GeneratorRegistry:
    reg = GeneratorRegistry()
    reg.register(GeneratorSpec(id="same", fn=lambda ctx: '<svg xmlns="http://www.w3.org/2000/svg"/>'))
    return reg


def test_forced_algorithm(engine):
    logos = engine.generate("Acme", GenerateOptions(algorithm="perfect-triangle"))
    assert len(logos) == 1
    logo = logos[0]
    assert logo.algorithm == "perfect-triangle"
    assert "<polygon" in logo.svg
    assert len(logo.hash) == 16
    assert logo.variation == 0
    assert logo.animation.preset == "scale-in"


def test_single_polygon_accepted_on_first_attempt(engine):
    logo = engine.generate("Acme", GenerateOptions(algorithm="perfect-triangle"))[0]
    assert logo.metadata.accepted
    assert logo.metadata.attempts == 1
    assert logo.seed == "Acme"
    assert logo.metadata.quality >= engine.config.min_quality


def test_industry_narrows_selection(engine):
    first = engine.generate("Brewly", GenerateOptions(industry="food"))[0]
    assert first.algorithm in FOOD_ALGORITHMS
    again = LogoEngine().generate("Brewly", GenerateOptions(industry="food"))[0]
    assert again.algorithm == first.algorithm
    assert again.svg == first.svg


def test_variations_are_distinct(engine):
    logos = engine.generate("Zen", GenerateOptions(variations=4))
    assert len(logos) == 4
    assert [logo.variation for logo in logos] == [0, 1, 2, 3]
    assert len({logo.hash for logo in logos}) == 4


def test_deterministic_with_fresh_stores(engine):
    a = engine.generate("Acme", GenerateOptions(variations=3), store=InMemoryHashStore())
    b = engine.generate("Acme", GenerateOptions(variations=3), store=InMemoryHashStore())
    assert [logo.svg for logo in a] == [logo.svg for logo in b]
    assert [logo.hash for logo in a] == [logo.hash for logo in b]


def test_shared_store_avoids_repeats(engine, store):
    first = engine.generate("Acme", GenerateOptions(algorithm="starburst"), store=store)[0]
    second = engine.generate("Acme", GenerateOptions(algorithm="starburst"), store=store)[0]
    assert first.hash != second.hash
    assert store.hashes("acme") >= {first.hash, second.hash}


@pytest.mark.parametrize("seed", EDGE_SEEDS)
def test_edge_seeds_produce_valid_xml(engine, seed):
    logo = engine.generate(seed)[0]
    root = ET.fromstring(logo.svg)
    assert root.tag.endswith("svg")


def test_unknown_algorithm_raises(engine):
    with pytest.raises(ValueError, match="Unknown algorithm"):
        engine.generate("Acme", GenerateOptions(algorithm="does-not-exist"))


def test_bad_color_raises(engine):
    with pytest.raises(InvalidColorError):
        engine.generate("Acme", GenerateOptions(primary_color="#zzzzzz"))


def test_colors_applied(engine):
    logo = engine.generate("Acme", GenerateOptions(algorithm="perfect-triangle", primary_color="#3366FF"))[0]
    assert "currentColor" not in logo.svg.split(">", 1)[1]


def test_variation_count_clamped():
    eng = LogoEngine(config=GenerationConfig(max_variations=3, max_retries=1))
    assert len(eng.generate("Acme", GenerateOptions(variations=50))) == 3
    assert len(eng.generate("Acme", GenerateOptions(variations=0))) == 1


def test_fallback_when_quality_never_passes(caplog):
    eng = LogoEngine(config=GenerationConfig(max_retries=3), scorer=FixedScorer(10.0))
    with caplog.at_level(logging.WARNING, logger="glyph.engine.engine"):
        logo = eng.generate("Acme", GenerateOptions(algorithm="starburst"))[0]
    assert not logo.metadata.accepted
    assert logo.metadata.attempts == 3
    assert logo.metadata.quality == 10.0
    assert "No candidate" in caplog.text


def test_duplicate_moves_to_retry_seed(store):
    eng = LogoEngine(registry=_constant_registry(), config=GenerationConfig(max_retries=2), scorer=FixedScorer(90.0))
    first = eng.generate("Acme", GenerateOptions(algorithm="same"), store=store)[0]
    again = eng.generate("Acme", GenerateOptions(algorithm="same"), store=store)[0]
    assert first.metadata.accepted
    # Retry seeds change the hash even when the SVG is identical
    assert again.metadata.accepted
    assert again.seed == "Acme~r1"
    assert again.hash != first.hash


def test_duplicates_exhaust_and_fall_back(store):
    eng = LogoEngine(registry=_constant_registry(), config=GenerationConfig(max_retries=1), scorer=FixedScorer(90.0))
    first = eng.generate("Acme", GenerateOptions(algorithm="same"), store=store)[0]
    again = eng.generate("Acme", GenerateOptions(algorithm="same"), store=store)[0]
    assert not again.metadata.accepted
    assert again.hash == first.hash
    assert store.hashes("Acme") == {first.hash}


def test_retry_exhaustion_with_zero_retries_still_returns():
    eng = LogoEngine(config=GenerationConfig(max_retries=0), scorer=FixedScorer(0.0))
    logos = eng.generate("Acme", GenerateOptions(algorithm="orbital-rings"))
    assert len(logos) == 1
    assert logos[0].metadata.attempts == 1


def test_min_quality_override():
    eng = LogoEngine(scorer=FixedScorer(50.0))
    logo = eng.generate("Acme", GenerateOptions(algorithm="starburst", min_quality=40.0))[0]
    assert logo.metadata.accepted
    assert logo.metadata.attempts == 1


def test_semantic_bias(engine):
    logos = engine.generate("Stellar Star", GenerateOptions(semantic=True, variations=3))
    assert all(logo.algorithm in ALL_ALGORITHMS for logo in logos)


def test_generate_all(fast_engine):
    logos = fast_engine.generate_all("Acme")
    assert [logo.algorithm for logo in logos] == ALL_ALGORITHMS
    assert len({logo.hash for logo in logos}) == len(ALL_ALGORITHMS)


def test_metadata_ranges(engine):
    for logo in engine.generate("Nova", GenerateOptions(variations=3)):
        assert 0.0 <= logo.metadata.quality <= 100.0
        assert 0.0 <= logo.metadata.complexity <= 1.0
        assert logo.metadata.attempts >= 1
        assert logo.metadata.report.overall == logo.metadata.quality


def test_list_algorithms(engine):
    infos = engine.list_algorithms()
    assert [info.id for info in infos] == ALL_ALGORITHMS
    assert all(info.tags == tuple(sorted(info.tags)) for info in infos)


def test_complexity_of():
    assert complexity_of("<svg></svg>") == 0.0
    svg = '<svg><path d="M 0 0 C 1 1 2 2 3 3 Z" /></svg>'
    assert complexity_of(svg) == pytest.approx(3 / 50 + 1 / 20)


def test_animation_for_unknown_preset_falls_back():
    anim = animation_for("wobble")
    assert anim.preset == "wobble"
    assert (anim.duration_ms, anim.easing, anim.stagger_ms) == ANIMATION_PRESETS["fade-in"]


def test_factories():
    assert isinstance(create_engine(), LogoEngine)
    logos = quick_generate("Acme", industry="finance", variations=2)
    assert len(logos) == 2
