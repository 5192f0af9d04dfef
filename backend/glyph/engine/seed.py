"""Seed hashing and deterministic pseudo-randomness.

Two ways to get numbers out of a seed:

- `param_float(seed, "rotation", 0, 360)` hashes (seed, name) directly, so
  parameters are order-independent and can be requested in any sequence.
- `SeededRandom(seed)` is a xoshiro128** stream for generators that need a
  run of values (noise, jitter, shuffles).

Nothing here touches `random` or the clock.
"""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_M32 = 0xFFFFFFFF
_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193

# Separates seed from parameter name so ("ab", "c") and ("a", "bc") differ.
_NAME_SEPARATOR = "\x1f"

# xoshiro must never start from the all-zero state.
_FALLBACK_STATE = (0x9E3779B9, 0x243F6A88, 0xB7E15162, 0x6A09E667)


def _imul(a: int, b: int) -> int:
    return (a * b) & _M32


def _rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (32 - k))) & _M32


def _fmix32(h: int) -> int:
    """Murmur3 finaliser — full avalanche so near-identical inputs decorrelate."""
    h ^= h >> 16
    h = _imul(h, 0x85EBCA6B)
    h ^= h >> 13
    h = _imul(h, 0xC2B2AE35)
    h ^= h >> 16
    return h


def hash32(text: str) -> int:
    """FNV-1a over UTF-8 bytes, then murmur3 fmix32."""
    h = _FNV_OFFSET
    for byte in text.encode("utf-8", "surrogatepass"):
        h = _imul(h ^ byte, _FNV_PRIME)
    return _fmix32(h)


def unit(seed: str, name: str) -> float:
    """Value in [0, 1) determined only by (seed, name)."""
    return hash32(f"{seed}{_NAME_SEPARATOR}{name}") / 4294967296.0


def param_float(seed: str, name: str, lo: float, hi: float) -> float:
    return lo + unit(seed, name) * (hi - lo)


def param_int(seed: str, name: str, lo: int, hi: int) -> int:
    """Inclusive on both ends."""
    if hi <= lo:
        return lo
    return min(hi, lo + int(unit(seed, name) * (hi - lo + 1)))


def param_bool(seed: str, name: str, probability: float = 0.5) -> bool:
    return unit(seed, name) < probability


def param_choice(seed: str, name: str, options: Sequence[T]) -> T:
    return options[param_int(seed, name, 0, len(options) - 1)]


def normalize_brand(name: str) -> str:
    return (name or "").strip().lower()


def perturb(seed: str, index: int) -> str:
    """Seed for variation `index`. Variation 0 is the seed itself."""
    return seed if index == 0 else f"{seed}#{index}"


def retry_seed(seed: str, attempt: int) -> str:
    return seed if attempt == 0 else f"{seed}~r{attempt}"


def namespace_id(seed: str, algorithm: str) -> str:
    """SVG id prefix derived from the full seed. Always starts with a letter."""
    digest = hashlib.sha256(f"{algorithm}{_NAME_SEPARATOR}{seed}".encode("utf-8", "surrogatepass")).hexdigest()
    return f"g{digest[:10]}"


def hash_to_4_seeds(text: str) -> tuple[int, int, int, int]:
    """Four independent 32-bit words from one string (FNV / Murmur mixes)."""
    h1, h2, h3, h4 = 0x811C9DC5, 0x01000193, 0xDEADBEEF, 0xCAFEBABE
    for ch in text:
        c = ord(ch)
        h1 = _imul(h1 ^ c, 0x01000193)
        h2 = _imul(h2 ^ c, 0x5BD1E995)
        h3 = _imul(h3 ^ c, 0x1B873593)
        h4 = _imul(h4 ^ c, 0xCC9E2D51)

    h1 ^= h1 >> 16
    h1 = _imul(h1, 0x85EBCA6B)
    h2 ^= h2 >> 13
    h2 = _imul(h2, 0xC2B2AE35)
    h3 ^= h3 >> 16
    h4 ^= h4 >> 13
    return (h1, h2, h3, h4)


class SeededRandom:
    """xoshiro128** stream. Same seed string, same sequence."""

    def __init__(self, seed: str) -> None:
        state = hash_to_4_seeds(seed)
        if not any(state):
            state = _FALLBACK_STATE
        self._s = list(state)

    def next_u32(self) -> int:
        s0, s1, s2, s3 = self._s
        result = _imul(_rotl(_imul(s1, 5), 7), 9)
        t = (s1 << 9) & _M32

        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3
        s2 ^= t
        s3 = _rotl(s3, 11)

        self._s = [s0, s1, s2, s3]
        return result

    def next(self) -> float:
        """Value in [0, 1)."""
        return self.next_u32() / 4294967296.0

    def uniform(self, lo: float, hi: float) -> float:
        return lo + self.next() * (hi - lo)

    def randint(self, lo: int, hi: int) -> int:
        """Inclusive on both ends."""
        if hi <= lo:
            return lo
        return min(hi, lo + int(self.next() * (hi - lo + 1)))

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.randint(0, len(seq) - 1)]

    def noise(self, amount: float, scale: float = 1.0) -> float:
        """Centred jitter in [-amount*scale, amount*scale)."""
        return (self.next() * 2 - 1) * amount * scale

    def shuffled(self, items: Sequence[T]) -> list[T]:
        """Fisher-Yates on a copy."""
        out = list(items)
        for i in range(len(out) - 1, 0, -1):
            j = self.randint(0, i)
            out[i], out[j] = out[j], out[i]
        return out
