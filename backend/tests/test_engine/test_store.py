"""Tests for the per-brand hash stores."""

import json
import threading

from glyph.engine.store import InMemoryHashStore, JsonlHashStore


def test_in_memory_add_and_contains():
    store = InMemoryHashStore()
    store.add("Acme", "abc")
    assert store.contains("Acme", "abc")
    assert store.contains("  acme ", "abc")
    assert not store.contains("Other", "abc")
    assert store.hashes("ACME") == {"abc"}


def test_in_memory_hashes_is_a_copy():
    store = InMemoryHashStore()
    store.add("Acme", "abc")
    store.hashes("Acme").add("zzz")
    assert store.hashes("Acme") == {"abc"}


def test_in_memory_evicts_oldest():
    store = InMemoryHashStore(max_per_brand=3)
    for h in ["h1", "h2", "h3", "h4"]:
        store.add("Acme", h)
    assert store.hashes("Acme") == {"h2", "h3", "h4"}


def test_in_memory_drops_least_recently_used_brand():
    store = InMemoryHashStore(max_brands=2)
    store.add("Acme", "a")
    store.add("Zen", "z")
    assert store.contains("Acme", "a")
    store.add("Nova", "n")
    assert store.brand_count == 2
    assert store.hashes("Zen") == set()
    assert store.hashes("Acme") == {"a"}
    assert store.hashes("Nova") == {"n"}


def test_in_memory_brand_cap_bounds_growth():
    store = InMemoryHashStore(max_brands=50)
    for i in range(500):
        store.add(f"brand{i}", "h")
    assert store.brand_count == 50
    assert store.hashes("brand499") == {"h"}
    assert store.hashes("brand0") == set()


def test_in_memory_clear():
    store = InMemoryHashStore()
    store.add("Acme", "a")
    store.add("Zen", "z")
    store.clear("Acme")
    assert store.hashes("Acme") == set()
    assert store.hashes("Zen") == {"z"}
    store.clear()
    assert store.hashes("Zen") == set()


def test_in_memory_concurrent_adds():
    store = InMemoryHashStore(max_per_brand=10_000)

    def worker(n: int) -> None:
        for i in range(200):
            store.add("Acme", f"{n}-{i}")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(store.hashes("Acme")) == 1600


def test_jsonl_persists_across_instances(tmp_path):
    path = tmp_path / "hashes.jsonl"
    store = JsonlHashStore(path)
    store.add("Acme", "abc")
    store.add("Acme", "abc")
    store.add("Zen", "def")

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert json.loads(lines[0])["brand"] == "acme"

    reopened = JsonlHashStore(path)
    assert reopened.contains("ACME", "abc")
    assert reopened.hashes("zen") == {"def"}


def test_jsonl_skips_bad_lines(tmp_path):
    path = tmp_path / "hashes.jsonl"
    path.write_text('{"brand": "acme", "hash": "abc"}\nnot json\n{"brand": "acme"}\n\n', encoding="utf-8")
    store = JsonlHashStore(path)
    assert store.hashes("acme") == {"abc"}


def test_jsonl_clear_rewrites(tmp_path):
    path = tmp_path / "nested" / "hashes.jsonl"
    store = JsonlHashStore(path)
    store.add("Acme", "abc")
    store.add("Zen", "def")
    store.clear("Acme")

    reopened = JsonlHashStore(path)
    assert reopened.hashes("acme") == set()
    assert reopened.hashes("zen") == {"def"}
