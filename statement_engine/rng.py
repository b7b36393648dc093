"""Deterministic pseudo random source shared by every generator.

The stream is the Park–Miller "minimal standard" Lehmer generator. Every
derived helper is built from :meth:`SeededRng.next` alone so that the N-th
value drawn after seeding with ``S`` is the same on every platform.
"""
from __future__ import annotations

import math
import random
from typing import MutableSequence, Sequence, TypeVar

T = TypeVar("T")

MODULUS = 2147483647
MULTIPLIER = 16807


def _normalise_seed(seed: int) -> int:
    # Remainder takes the sign of the dividend.
    state = abs(seed) % MODULUS
    if seed < 0:
        state = -state
    if state <= 0:
        state += MODULUS - 1
    return state


class SeededRng(random.Random):
    """Seeded Lehmer generator usable wherever a ``random.Random`` is accepted.

    ``random()`` and ``getrandbits()`` delegate to :meth:`next`, so libraries
    handed this object (Faker, ``random.choice``) consume the same stream as
    the engine itself.
    """

    def __init__(self, seed: int) -> None:
        self._state = 1
        self.initial_seed = int(seed)
        super().__init__(self.initial_seed)

    def seed(self, a: object = None, version: int = 2) -> None:  # type: ignore[override]
        if a is None:
            raise TypeError("SeededRng requires an explicit integer seed")
        self._state = _normalise_seed(int(a))  # type: ignore[arg-type]

    def getstate(self) -> tuple[int, int]:  # type: ignore[override]
        return (self.initial_seed, self._state)

    def setstate(self, state: tuple[int, int]) -> None:  # type: ignore[override]
        self.initial_seed, self._state = state

    def next(self) -> float:
        """Advance the stream and return a float in ``[0, 1)``."""

        self._state = (self._state * MULTIPLIER) % MODULUS
        return (self._state - 1) / (MODULUS - 1)

    def random(self) -> float:
        return self.next()

    def getrandbits(self, k: int) -> int:
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        value = 0
        bits = 0
        while bits < k:
            value = (value << 16) | int(self.next() * 65536)
            bits += 16
        return value >> (bits - k)

    def random_int(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high]`` (both inclusive)."""

        return math.floor(self.next() * (high - low + 1)) + low

    def random_float(self, low: float, high: float, precision: int = 2) -> float:
        """Return a float in ``[low, high]`` rounded half-up to ``precision`` places."""

        value = self.next() * (high - low) + low
        factor = 10 ** precision
        return math.floor(value * factor + 0.5) / factor

    def shuffled(self, items: Sequence[T]) -> list[T]:
        """Return a Fisher–Yates shuffled copy of ``items``."""

        result: MutableSequence[T] = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = math.floor(self.next() * (i + 1))
            result[i], result[j] = result[j], result[i]
        return list(result)

    def pick(self, items: Sequence[T]) -> T:
        """Pick one element with a single draw."""

        return items[self.random_int(0, len(items) - 1)]

    def digits(self, count: int) -> str:
        """Return ``count`` random digits without a leading zero."""

        return str(self.random_int(10 ** (count - 1), 10 ** count - 1))

    def padded(self, count: int) -> str:
        """Return ``count`` random digits, zero padded."""

        return str(self.random_int(0, 10 ** count - 1)).zfill(count)

    def chance(self, probability: float) -> bool:
        return self.next() < probability

    def random_id(self) -> str:
        """Return a UUID shaped identifier drawn from the stream."""

        parts = [f"{math.floor(self.next() * 0xFFFF):04x}" for _ in range(8)]
        return (
            f"{parts[0]}{parts[1]}-{parts[2]}-{parts[3]}-{parts[4]}-"
            f"{parts[5]}{parts[6]}{parts[7]}"
        )
