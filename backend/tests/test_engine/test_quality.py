"""Tests for quality scoring, content hashing and the acceptance gate."""

import pytest

from glyph.engine.params import derive_parameters
from glyph.engine.quality import DEGENERATE_CAP, WEIGHTS, HeuristicScorer, QualityReport, accept, content_hash

from tests.conftest import CURVY_SVG, EMPTY_SVG, SLIVER_SVG, SQUARE_SVG, STROKED_LINE_SVG, TRIANGLE_SVG

PARAMS = derive_parameters("Acme")


def test_weights_sum_to_one():
    assert sum(WEIGHTS.values()) == pytest.approx(1.0)


def test_content_hash_shape():
    h = content_hash("Acme", "starburst", "Acme", "<svg/>")
    assert len(h) == 16
    int(h, 16)


def test_content_hash_normalizes_brand():
    assert content_hash("Acme", "starburst", "s", "<svg/>") == content_hash(" acme ", "starburst", "s", "<svg/>")


def test_content_hash_sensitive_to_every_field():
    base = content_hash("Acme", "starburst", "s", "<svg/>")
    assert content_hash("Zen", "starburst", "s", "<svg/>") != base
    assert content_hash("Acme", "orbital-rings", "s", "<svg/>") != base
    assert content_hash("Acme", "starburst", "t", "<svg/>") != base
    assert content_hash("Acme", "starburst", "s", "<svg />") != base
    assert content_hash("Acme", "starburst", "s", "<svg/>", version="2") != base


def test_accept_gates():
    good = QualityReport(overall=85.0)
    poor = QualityReport(overall=50.0)
    assert accept("h1", good, set(), 70.0) == (True, "ok")
    assert accept("h1", good, {"h1"}, 70.0) == (False, "duplicate")
    ok, reason = accept("h2", poor, set(), 70.0)
    assert not ok
    assert reason.startswith("quality")


def test_square_is_balanced_and_sound():
    report = HeuristicScorer().score(SQUARE_SVG, PARAMS)
    assert not report.degenerate
    assert report.visual_balance == pytest.approx(100.0)
    assert 0 < report.overall <= 100


def test_components_in_range():
    for svg in [SQUARE_SVG, TRIANGLE_SVG, CURVY_SVG]:
        report = HeuristicScorer().score(svg, PARAMS)
        for name in WEIGHTS:
            assert 0.0 <= getattr(report, name) <= 100.0, name
        assert 0.0 <= report.overall <= 100.0


def test_curves_score_smoother_than_lines():
    scorer = HeuristicScorer()
    assert scorer.score(CURVY_SVG, PARAMS).path_smoothness > scorer.score(SQUARE_SVG, PARAMS).path_smoothness


def test_gradient_counts_toward_uniqueness():
    scorer = HeuristicScorer()
    plain = TRIANGLE_SVG.replace('fill="url(#g1-fill)"', 'fill="#111111"').replace("linearGradient", "x")
    assert scorer.score(TRIANGLE_SVG, PARAMS).uniqueness >= scorer.score(plain, PARAMS).uniqueness


def test_empty_logo_is_degenerate():
    report = HeuristicScorer().score(EMPTY_SVG, PARAMS)
    assert report.degenerate
    assert report.overall <= DEGENERATE_CAP
    assert report.notes


def test_sliver_is_degenerate():
    report = HeuristicScorer().score(SLIVER_SVG, PARAMS)
    assert report.degenerate
    assert report.overall <= DEGENERATE_CAP
    assert any("aspect" in note for note in report.notes)


def test_hairline_stroke_is_degenerate():
    report = HeuristicScorer().score(STROKED_LINE_SVG, PARAMS)
    assert report.degenerate


def test_min_area_threshold_configurable():
    report = HeuristicScorer(min_area=10_000).score(SQUARE_SVG, PARAMS)
    assert report.degenerate
    assert any("area" in note for note in report.notes)


def test_report_to_dict():
    data = HeuristicScorer().score(SQUARE_SVG, PARAMS).to_dict()
    assert set(WEIGHTS) <= set(data)
    assert {"overall", "degenerate", "notes"} <= set(data)


def test_content_hash_accepts_unpaired_surrogates():
    h = content_hash("Acme\ud800", "starburst", "Acme\ud800", "<svg/>")
    assert len(h) == 16
    assert h != content_hash("Acme", "starburst", "Acme", "<svg/>")


def test_single_polygon_clears_default_floor():
    report = HeuristicScorer().score(TRIANGLE_SVG, PARAMS)
    assert not report.degenerate
    assert report.overall >= 70.0
    assert report.complexity == pytest.approx(100.0)


def test_straight_edges_rank_below_curves_but_above_faceted_paths():
    scorer = HeuristicScorer()
    faceted = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100"><path d="M 20 20 L 80 20 Q 85 50 80 80 L 20 80 Z" /></svg>'
    crisp = scorer.score(TRIANGLE_SVG, PARAMS).path_smoothness
    assert scorer.score(faceted, PARAMS).path_smoothness < crisp < scorer.score(CURVY_SVG, PARAMS).path_smoothness
