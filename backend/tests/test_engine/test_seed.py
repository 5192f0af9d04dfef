"""Tests for seed hashing, parameter derivation and the seeded stream."""

from glyph.engine.params import PARAMETER_RANGES, SYMMETRY_TYPES, derive_parameters
from glyph.engine.seed import (
    SeededRandom,
    hash32,
    namespace_id,
    normalize_brand,
    param_bool,
    param_float,
    param_int,
    perturb,
    retry_seed,
    unit,
)


def test_hash32_is_stable_and_32_bit():
    assert hash32("Acme") == hash32("Acme")
    assert 0 <= hash32("Acme") <= 0xFFFFFFFF
    assert 0 <= hash32("") <= 0xFFFFFFFF


def test_hash32_avalanches_on_small_changes():
    assert hash32("Acme") != hash32("acme")
    assert hash32("Acme") != hash32("Acme ")
    assert hash32("Acme#1") != hash32("Acme#2")


def test_unit_range():
    for seed in ["", "A", "Acme", "Brewly", "Zen"]:
        for name in PARAMETER_RANGES:
            v = unit(seed, name)
            assert 0.0 <= v < 1.0


def test_parameters_are_keyed_by_name():
    # The separator stops ("ab", "c") colliding with ("a", "bc")
    assert unit("ab", "c") != unit("a", "bc")
    assert param_float("Acme", "rotation_offset", 0, 360) != param_float("Acme", "gradient_angle", 0, 360)


def test_param_int_inclusive_bounds():
    values = {param_int(f"seed-{i}", "n", 0, 3) for i in range(200)}
    assert values == {0, 1, 2, 3}


def test_param_int_degenerate_range():
    assert param_int("Acme", "n", 5, 5) == 5
    assert param_int("Acme", "n", 5, 2) == 5


def test_param_bool_extremes():
    assert param_bool("Acme", "flag", 1.0) is True
    assert param_bool("Acme", "flag", 0.0) is False


def test_derive_parameters_within_ranges():
    for seed in ["", "A", "123", "Acme", "Café"]:
        params = derive_parameters(seed).as_dict()
        for name, (lo, hi, integer) in PARAMETER_RANGES.items():
            assert lo <= params[name] <= hi, name
            if integer:
                assert isinstance(params[name], int)
        assert params["symmetry_type"] in SYMMETRY_TYPES


def test_derive_parameters_deterministic():
    assert derive_parameters("Acme") == derive_parameters("Acme")
    assert derive_parameters("Acme") != derive_parameters("Acme#1")


def test_seed_derivations():
    assert perturb("Zen", 0) == "Zen"
    assert perturb("Zen", 3) == "Zen#3"
    assert retry_seed("Zen#3", 0) == "Zen#3"
    assert retry_seed("Zen#3", 2) == "Zen#3~r2"


def test_namespace_id_is_valid_xml_id():
    uid = namespace_id("", "starburst")
    assert uid[0].isalpha()
    assert len(uid) == 11
    assert namespace_id("Acme", "starburst") != namespace_id("Acme", "orbital-rings")
    assert namespace_id("Acme", "starburst") != namespace_id("Acme#1", "starburst")


def test_normalize_brand():
    assert normalize_brand("  Acme Corp ") == "acme corp"
    assert normalize_brand("") == ""


def test_seeded_random_reproducible():
    a = SeededRandom("Acme")
    b = SeededRandom("Acme")
    assert [a.next_u32() for _ in range(10)] == [b.next_u32() for _ in range(10)]


def test_seeded_random_differs_by_seed():
    a = SeededRandom("Acme")
    b = SeededRandom("Brewly")
    assert [a.next_u32() for _ in range(5)] != [b.next_u32() for _ in range(5)]


def test_seeded_random_empty_seed_is_usable():
    rng = SeededRandom("")
    values = [rng.next() for _ in range(20)]
    assert all(0.0 <= v < 1.0 for v in values)
    assert len(set(values)) > 1


def test_seeded_random_helpers():
    rng = SeededRandom("helpers")
    for _ in range(100):
        assert 2 <= rng.randint(2, 5) <= 5
        assert -1.0 <= rng.uniform(-1.0, 1.0) < 1.0
        assert -3.0 <= rng.noise(1.5, 2.0) < 3.0
        assert rng.choice(["a", "b", "c"]) in {"a", "b", "c"}


def test_shuffled_is_permutation_and_copy():
    items = list(range(10))
    out = SeededRandom("shuffle").shuffled(items)
    assert sorted(out) == items
    assert items == list(range(10))
    assert out == SeededRandom("shuffle").shuffled(items)


def test_hashing_accepts_unpaired_surrogates():
    assert 0 <= hash32("Acme\ud800") <= 0xFFFFFFFF
    assert hash32("Acme\ud800") != hash32("Acme")
    assert namespace_id("Acme\ud800", "starburst")[0] == "g"
    assert derive_parameters("Acme\udfff") == derive_parameters("Acme\udfff")
