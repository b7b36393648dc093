"""Tests for run-scoped generation state and generic references."""
from __future__ import annotations

import re

from statement_engine.context import DEFAULT_BRANCH_LOCATION, DEFAULT_CITY, GenerationContext
from statement_engine.reference import build_reference
from statement_engine.rng import SeededRng


def test_for_build_normalises_location() -> None:
    ctx = GenerationContext.for_build(1, city="  indore ", branch_address="14, Vijay Nagar, Indore")
    assert ctx.user_city == "INDORE"
    assert ctx.branch_location == "VIJAY NAGAR INDORE"


def test_for_build_defaults() -> None:
    ctx = GenerationContext.for_build(1)
    assert ctx.user_city == DEFAULT_CITY
    assert ctx.branch_location == DEFAULT_BRANCH_LOCATION
    assert ctx.used_names == set()


def test_unique_name_avoids_repeats_until_pool_is_exhausted() -> None:
    pool = ["ASHA", "VIKRAM", "MEERA", "ARJUN"]
    ctx = GenerationContext.for_build(6)
    first_round = [ctx.unique_name(pool) for _ in range(len(pool))]
    assert sorted(first_round) == sorted(pool)

    ctx.unique_name(pool)
    assert ctx.used_names == set()


def test_used_names_are_not_shared_between_builds() -> None:
    first = GenerationContext.for_build(6)
    first.unique_name(["ASHA", "VIKRAM"])
    second = GenerationContext.for_build(6)
    assert second.used_names == set()


def test_person_names_follow_the_seed() -> None:
    first = GenerationContext.for_build(77)
    second = GenerationContext.for_build(77)
    names = [first.person_name() for _ in range(5)]
    assert names == [second.person_name() for _ in range(5)]
    assert all(name == name.upper() and " " in name for name in names)


def test_salary_reference_shape() -> None:
    reference = build_reference("salary", SeededRng(3))
    assert re.match(r"^[A-Z]+/[A-Z]+/[A-Z]+$", reference)


def test_expense_reference_shape() -> None:
    reference = build_reference("expense", SeededRng(3))
    first, second, number = reference.split("/")
    assert first != second
    assert {first, second} <= {"UPI", "QR", "NEFT", "IMPS"}
    assert 1000 <= int(number) <= 9999
