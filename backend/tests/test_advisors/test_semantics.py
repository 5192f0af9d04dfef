"""Tests for brand-name semantic analysis."""

from glyph.advisors.semantics import (
    INDUSTRY_SHAPE_MAP,
    KEYWORD_SHAPE_MAP,
    LETTER_SHAPE_MAP,
    analyze_semantics,
    semantic_algorithms,
    semantic_context,
)

from tests.conftest import ALL_ALGORITHMS


def test_tables_reference_registered_algorithms():
    registered = set(ALL_ALGORITHMS)
    for mapping in KEYWORD_SHAPE_MAP.values():
        assert set(mapping.algorithms) <= registered
    for mapping in INDUSTRY_SHAPE_MAP.values():
        assert set(mapping.algorithms) <= registered


def test_letter_table_covers_alphabet():
    assert sorted(LETTER_SHAPE_MAP) == [chr(c) for c in range(ord("A"), ord("Z") + 1)]


def test_exact_keyword_match():
    analysis = analyze_semantics("Star Coffee")
    words = [m.word for m in analysis.matched_keywords]
    assert "star" in words
    assert "coffee" in words
    assert analysis.words == ["star", "coffee"]


def test_substring_keyword_match():
    analysis = analyze_semantics("Brewly")
    assert "brew" in [m.word for m in analysis.matched_keywords]


def test_industry_matching():
    assert analyze_semantics("X", "food").industry == "food"
    assert analyze_semantics("X", "Fintech").industry == "finance"
    assert analyze_semantics("X", "tech").industry == "technology"
    assert analyze_semantics("X", "food and drink").industry == "food"
    assert analyze_semantics("X", "zzz").industry is None
    assert analyze_semantics("X", None).industry is None


def test_initial_letters():
    analysis = analyze_semantics("a-b c d e")
    assert [letter for letter, _ in analysis.letter_analysis] == ["A", "B", "C"]


def test_combined_output_deduplicated():
    analysis = analyze_semantics("Star Star", "entertainment")
    assert len(analysis.combined_shapes) == len(set(analysis.combined_shapes))
    assert len(analysis.recommended_algorithms) == len(set(analysis.recommended_algorithms))
    assert "sparkle-asterisk" in analysis.recommended_algorithms


def test_empty_brand():
    analysis = analyze_semantics("")
    assert analysis.words == []
    assert analysis.matched_keywords == []
    assert analysis.letter_analysis == []


def test_semantic_algorithms_deterministic_and_bounded():
    first = semantic_algorithms("Brewly", "food", seed="Brewly")
    assert first == semantic_algorithms("Brewly", "food", seed="Brewly")
    assert 1 <= len(first) <= 5
    assert len(first) == len(set(first))
    assert set(first) <= set(ALL_ALGORITHMS)
    assert len(semantic_algorithms("Brewly", "food", limit=2)) <= 2


def test_semantic_algorithms_without_matches():
    assert semantic_algorithms("Qqq") == []


def test_semantic_context():
    context = semantic_context("Brewly", "food")
    assert "Keywords: brew" in context
    assert "Industry: food" in context
    assert "Letter meanings: " in context
    assert context.count(" | ") == 2
