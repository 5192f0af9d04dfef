"""Tests for typography pairing selection."""

from glyph.advisors.typography import (
    CLASSIFICATIONS,
    FONT_DATABASE,
    FONT_PAIRINGS,
    font_metadata,
    pairing_rationale,
    select_typography_pairing,
    typography_variations,
)


def test_pairings_reference_known_fonts():
    for pairing in FONT_PAIRINGS:
        assert pairing.display in FONT_DATABASE
        assert pairing.body in FONT_DATABASE
    assert len({p.id for p in FONT_PAIRINGS}) == len(FONT_PAIRINGS)


def test_font_metadata_known_and_normalized():
    assert font_metadata("Inter").classification == "neo-grotesque"
    assert font_metadata("space grotesk").name == "Space Grotesk"
    assert font_metadata("DMSans").name == "DM Sans"


def test_font_metadata_inferred():
    assert font_metadata("Fira Code").classification == "mono"
    assert font_metadata("Roboto Slab").classification == "slab-serif"
    assert font_metadata("Noto Serif").classification == "modern-serif"
    assert font_metadata("Abril Display").classification == "display"
    assert font_metadata("Helvetica").classification == "neo-grotesque"
    for name in ["Fira Code", "Roboto Slab", "Noto Serif", "Abril Display", "Helvetica"]:
        assert font_metadata(name).classification in CLASSIFICATIONS


def test_pairing_rationale_cases():
    assert "single-family" in pairing_rationale("Inter", "Inter")
    assert "contrast" in pairing_rationale("Playfair Display", "DM Sans")
    assert "technical" in pairing_rationale("Space Grotesk", "Roboto Mono")
    assert pairing_rationale("Bebas Neue", "Open Sans").startswith("Bebas Neue makes the statement")


def test_select_without_seed_takes_best():
    assert select_typography_pairing("technology").pairing.id == "modern-clean"
    assert select_typography_pairing("food").pairing.id == "warm-artisan"


def test_unknown_industry_defaults_to_technology():
    assert select_typography_pairing("underwater").pairing.id == select_typography_pairing("technology").pairing.id


def test_seeded_selection_deterministic():
    a = select_typography_pairing("finance", "elegant", seed="Acme")
    b = select_typography_pairing("finance", "elegant", seed="Acme")
    assert a.pairing.id == b.pairing.id
    assert a.score > 0
    assert "finance/elegant" in a.reason


def test_choice_carries_font_info():
    choice = select_typography_pairing("creative", seed="Studio")
    assert choice.display.name == choice.pairing.display
    assert choice.body.name == choice.pairing.body


def test_variations_distinct():
    choices = typography_variations("technology", count=4, seed="Acme")
    ids = [c.pairing.id for c in choices]
    assert 1 <= len(ids) <= 4
    assert len(ids) == len(set(ids))
    assert ids == [c.pairing.id for c in typography_variations("technology", count=4, seed="Acme")]


def test_variations_fill_requests_past_top_pairings():
    for count in (6, 8, 10):
        ids = [c.pairing.id for c in typography_variations("food", count=count, seed="Brewly")]
        assert len(ids) == count
        assert len(set(ids)) == count


def test_variations_capped_by_table_size():
    choices = typography_variations("technology", count=len(FONT_PAIRINGS) + 5, seed="Acme")
    assert len(choices) == len(FONT_PAIRINGS)
