"""Hash stores — per-brand memory of which logos have already been shown.

The engine never owns a store; callers inject one. `InMemoryHashStore` is the
default for a single request or process, `JsonlHashStore` persists across runs.
"""

from __future__ import annotations

import json
import logging
import threading
import time
from collections import OrderedDict
from pathlib import Path
from typing import Protocol

from glyph.engine.seed import normalize_brand

logger = logging.getLogger(__name__)


class HashStore(Protocol):
    def contains(self, brand: str, content_hash: str) -> bool: ...

    def add(self, brand: str, content_hash: str) -> None: ...

    def hashes(self, brand: str) -> set[str]: ...

    def clear(self, brand: str | None = None) -> None: ...


class InMemoryHashStore:
    """Thread-safe per-brand hash sets.

    Each brand keeps at most `max_per_brand` hashes (oldest evicted first), and
    at most `max_brands` brands are held; touching a brand marks it recently
    used, and the least recently used brand is dropped when the cap is hit.
    """

    def __init__(self, max_per_brand: int = 1000, max_brands: int = 10_000) -> None:
        self.max_per_brand = max_per_brand
        self.max_brands = max_brands
        self._brands: OrderedDict[str, OrderedDict[str, None]] = OrderedDict()
        self._lock = threading.Lock()

    def _touch(self, key: str) -> OrderedDict[str, None] | None:
        seen = self._brands.get(key)
        if seen is not None:
            self._brands.move_to_end(key)
        return seen

    def contains(self, brand: str, content_hash: str) -> bool:
        with self._lock:
            return content_hash in (self._touch(normalize_brand(brand)) or {})

    def add(self, brand: str, content_hash: str) -> None:
        key = normalize_brand(brand)
        with self._lock:
            seen = self._touch(key)
            if seen is None:
                seen = self._brands[key] = OrderedDict()
                while len(self._brands) > self.max_brands:
                    evicted, _ = self._brands.popitem(last=False)
                    logger.debug("Hash store full; dropped brand %r", evicted)
            seen[content_hash] = None
            while len(seen) > self.max_per_brand:
                seen.popitem(last=False)

    def hashes(self, brand: str) -> set[str]:
        with self._lock:
            return set(self._touch(normalize_brand(brand)) or {})

    @property
    def brand_count(self) -> int:
        with self._lock:
            return len(self._brands)

    def clear(self, brand: str | None = None) -> None:
        with self._lock:
            if brand is None:
                self._brands.clear()
            else:
                self._brands.pop(normalize_brand(brand), None)


class JsonlHashStore:
    """JSONL-backed store: one `{brand, hash, ts}` line per committed logo.

    The file is read lazily on first access and appended to on every add.
    `clear` rewrites the file without the cleared brand(s).
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._cache: dict[str, set[str]] | None = None
        self._lock = threading.Lock()

    def _load(self) -> dict[str, set[str]]:
        if self._cache is not None:
            return self._cache
        brands: dict[str, set[str]] = {}
        if self.path.exists():
            with open(self.path, encoding="utf-8") as f:
                for line_no, line in enumerate(f, 1):
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        record = json.loads(line)
                        brands.setdefault(record["brand"], set()).add(record["hash"])
                    except (json.JSONDecodeError, KeyError, TypeError) as e:
                        logger.warning("Skipping bad line %d in %s: %s", line_no, self.path, e)
        self._cache = brands
        return brands

    def contains(self, brand: str, content_hash: str) -> bool:
        with self._lock:
            return content_hash in self._load().get(normalize_brand(brand), set())

    def add(self, brand: str, content_hash: str) -> None:
        key = normalize_brand(brand)
        with self._lock:
            brands = self._load()
            if content_hash in brands.get(key, set()):
                return
            brands.setdefault(key, set()).add(content_hash)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                record = {"brand": key, "hash": content_hash, "ts": time.time()}
                f.write(json.dumps(record, ensure_ascii=False) + "\n")

    def hashes(self, brand: str) -> set[str]:
        with self._lock:
            return set(self._load().get(normalize_brand(brand), set()))

    def clear(self, brand: str | None = None) -> None:
        with self._lock:
            brands = self._load()
            if brand is None:
                brands.clear()
            else:
                brands.pop(normalize_brand(brand), None)
            self._rewrite(brands)

    def _rewrite(self, brands: dict[str, set[str]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        now = time.time()
        with open(self.path, "w", encoding="utf-8") as f:
            for key in sorted(brands):
                for content_hash in sorted(brands[key]):
                    f.write(json.dumps({"brand": key, "hash": content_hash, "ts": now}) + "\n")
        logger.info("Rewrote hash store %s (%d brands)", self.path, len(brands))
