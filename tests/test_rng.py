"""Tests for the seeded pseudo random stream."""
from __future__ import annotations

import random
import re

from statement_engine.rng import MODULUS, SeededRng


def test_first_value_follows_lehmer_recurrence() -> None:
    rng = SeededRng(1)
    assert rng.next() == (16807 - 1) / (MODULUS - 1)


def test_same_seed_reproduces_stream() -> None:
    first = SeededRng(2024)
    second = SeededRng(2024)
    assert [first.next() for _ in range(50)] == [second.next() for _ in range(50)]


def test_different_seeds_diverge() -> None:
    assert [SeededRng(1).next() for _ in range(3)] != [SeededRng(2).next() for _ in range(3)]


def test_zero_and_negative_seeds_still_produce_values() -> None:
    for seed in (0, -5, MODULUS):
        rng = SeededRng(seed)
        values = {rng.next() for _ in range(10)}
        assert len(values) == 10
        assert all(0 <= value < 1 for value in values)


def test_random_int_is_inclusive() -> None:
    rng = SeededRng(7)
    seen = {rng.random_int(1, 3) for _ in range(300)}
    assert seen == {1, 2, 3}


def test_random_float_respects_precision() -> None:
    rng = SeededRng(9)
    for _ in range(100):
        value = rng.random_float(35, 420)
        assert 35 <= value <= 420
        assert abs(value * 100 - round(value * 100)) < 1e-6


def test_digits_have_no_leading_zero() -> None:
    rng = SeededRng(3)
    for _ in range(100):
        text = rng.digits(12)
        assert len(text) == 12
        assert text[0] != "0"


def test_padded_keeps_width() -> None:
    rng = SeededRng(3)
    assert all(len(rng.padded(6)) == 6 for _ in range(100))


def test_shuffled_returns_permutation_without_mutating_input() -> None:
    items = list(range(20))
    shuffled = SeededRng(11).shuffled(items)
    assert sorted(shuffled) == items
    assert items == list(range(20))
    assert shuffled == SeededRng(11).shuffled(items)


def test_random_id_is_uuid_shaped() -> None:
    rng = SeededRng(5)
    pattern = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$")
    ids = [rng.random_id() for _ in range(50)]
    assert all(pattern.match(value) for value in ids)
    assert len(set(ids)) == 50


def test_library_helpers_draw_from_the_same_stream() -> None:
    """``random.Random`` methods consume the seeded stream deterministically."""

    first = SeededRng(99)
    second = SeededRng(99)
    assert isinstance(first, random.Random)
    assert [first.choice("abcdef") for _ in range(10)] == [second.choice("abcdef") for _ in range(10)]
    assert first.getrandbits(40) == second.getrandbits(40)
