"""Domain-separated deterministic RNG using xxhash.

Every draw is a pure function of ``(seed, domain, key, salt)``. The engine
picks keys from monotonically increasing counters (spawn index, enemy id,
round), so two sessions with the same seed and the same inputs replay the
exact same field.
"""

from __future__ import annotations

import struct
from typing import Sequence, TypeVar

import xxhash

from goopfield.core.enums import Color, Domain

T = TypeVar("T")

_COLORS: tuple[Color, ...] = tuple(Color)


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator."""

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, key: int, salt: int) -> int:
        payload = struct.pack("<qiqq", self._seed, domain.value, key, salt)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, key: int, salt: int = 0) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, key, salt) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, key: int, salt: int, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(domain, key, salt)
        # f can round up to 1.0 for hashes near 2**64
        return min(high, low + int(f * (high - low + 1)))

    def choice(self, items: Sequence[T], domain: Domain, key: int, salt: int = 0) -> T:
        """Uniformly pick one element of a non-empty sequence."""
        if not items:
            raise IndexError("cannot choose from an empty sequence")
        return items[self.next_int(domain, key, salt, 0, len(items) - 1)]

    def next_color(self, domain: Domain, key: int, salt: int = 0) -> Color:
        return self.choice(_COLORS, domain, key, salt)
