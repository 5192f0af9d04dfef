"""Tests for industry/aesthetic algorithm selection."""

import pytest

from glyph.engine.selector import (
    AESTHETIC_ALGORITHMS,
    INDUSTRY_ALGORITHMS,
    candidate_pool,
    narrow_pool,
    resolve_aesthetic,
    resolve_industry,
    select_algorithm,
)

from tests.conftest import ALL_ALGORITHMS, FOOD_ALGORITHMS


def test_resolve_industry_aliases():
    assert resolve_industry("Technology") == "technology"
    assert resolve_industry(" saas ") == "technology"
    assert resolve_industry("fintech") == "finance"
    assert resolve_industry("eco") == "sustainability"
    assert resolve_industry("underwater basket weaving") is None
    assert resolve_industry(None) is None
    assert resolve_industry("") is None


def test_resolve_aesthetic():
    assert resolve_aesthetic("Playful") == "playful"
    assert resolve_aesthetic("brutalist") is None
    assert resolve_aesthetic(None) is None


def test_every_subset_is_registered():
    registered = set(ALL_ALGORITHMS)
    for subset in list(INDUSTRY_ALGORITHMS.values()) + list(AESTHETIC_ALGORITHMS.values()):
        assert set(subset) <= registered


def test_candidate_pool_food():
    assert set(candidate_pool("food", None, ALL_ALGORITHMS)) == FOOD_ALGORITHMS


def test_candidate_pool_intersection():
    pool = candidate_pool("food", "playful", ALL_ALGORITHMS)
    assert set(pool) == FOOD_ALGORITHMS & set(AESTHETIC_ALGORITHMS["playful"])


def test_candidate_pool_disjoint_hints_prefer_industry():
    # finance and friendly-rounded share nothing
    pool = candidate_pool("finance", "friendly-rounded", ALL_ALGORITHMS)
    assert set(pool) == set(INDUSTRY_ALGORITHMS["finance"])


def test_candidate_pool_unknown_hint_falls_back():
    assert candidate_pool("underwater", "brutalist", ALL_ALGORITHMS) == ALL_ALGORITHMS
    assert candidate_pool(None, None, ALL_ALGORITHMS) == ALL_ALGORITHMS


def test_candidate_pool_unregistered_subset_falls_back():
    registered = ["hexagon-tech", "motion-lines"]
    assert candidate_pool("food", None, registered) == registered


def test_narrow_pool_never_empties():
    pool = ["a", "b", "c"]
    assert narrow_pool(pool, ["b", "z"]) == ["b"]
    assert narrow_pool(pool, ["z"]) == pool
    assert narrow_pool(pool, []) == pool


def test_select_is_deterministic():
    first = select_algorithm("Brewly", industry="food", registered=ALL_ALGORITHMS)
    for _ in range(5):
        assert select_algorithm("Brewly", industry="food", registered=ALL_ALGORITHMS) == first
    assert first in FOOD_ALGORITHMS


def test_select_uses_whole_pool():
    picks = {select_algorithm(f"brand-{i}", registered=ALL_ALGORITHMS) for i in range(300)}
    assert picks == set(ALL_ALGORITHMS)


def test_select_defaults_to_global_registry():
    assert select_algorithm("Acme") in ALL_ALGORITHMS


def test_select_with_preferred():
    pick = select_algorithm("Acme", registered=ALL_ALGORITHMS, preferred=["orbital-rings"])
    assert pick == "orbital-rings"


def test_select_empty_registry_raises():
    with pytest.raises(ValueError):
        select_algorithm("Acme", registered=[])
