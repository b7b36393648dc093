"""End-to-end tests for the ledger builder."""
from __future__ import annotations

from collections import Counter
from dataclasses import FrozenInstanceError
from datetime import date, timedelta
from decimal import Decimal

import pytest

from statement_engine.context import GenerationContext
from statement_engine.core.config import GenerationTuning, Settings
from statement_engine.exceptions import InvalidParametersError
from statement_engine.ledger import (
    _extra_credit_date,
    build_statement,
    generate_statement,
    regenerate_statement,
)
from statement_engine.models import GenerationOptions, Statement, TransactionKind, UserType
from statement_engine.schemas import SalariedParams
from statement_engine.scheduling import resolve_window

TODAY = date(2025, 7, 15)
SETTINGS = Settings()


def _build(params, seed: int, **kwargs) -> Statement:
    return generate_statement(params, seed, settings=SETTINGS, today=TODAY, **kwargs)


def _assert_consistent(statement: Statement) -> None:
    balance = statement.opening_balance
    previous = None
    for txn in statement.transactions:
        assert (txn.debit > 0) != (txn.credit > 0)
        balance = balance + txn.credit - txn.debit
        assert txn.balance == balance
        assert txn.balance >= 0
        if previous is not None:
            assert previous <= txn.date
        previous = txn.date


def test_salaried_minimal_scenario(salaried_params) -> None:
    statement = _build(salaried_params(), 42)
    salaries = statement.of_kind(TransactionKind.SALARY)
    interest = statement.of_kind(TransactionKind.INTEREST)

    assert len(salaries) == 3
    assert sorted(txn.date.month for txn in salaries) == [4, 5, 6]
    assert len(interest) == 3
    assert len(statement.transactions) <= 66
    _assert_consistent(statement)
    expected = statement.opening_balance + statement.total_credits - statement.total_debits
    assert statement.closing_balance == expected


def test_closing_balance_override(salaried_params) -> None:
    statement = _build(salaried_params(closing_balance=75000), 42)

    assert statement.transactions[-1].balance == Decimal("75000.00")
    assert statement.closing_balance == Decimal("75000.00")
    _assert_consistent(statement)


def test_closing_adjustment_can_be_a_debit(salaried_params) -> None:
    statement = _build(salaried_params(starting_balance=500000, closing_balance=1000), 3)
    last = statement.transactions[-1]

    assert last.kind is TransactionKind.CLOSING_ADJUSTMENT
    assert last.description == "Funds Transfer Debit"
    assert last.debit > 0
    assert last.balance == Decimal("1000.00")
    assert last.date == max(txn.date for txn in statement.transactions)


def test_closing_target_one_paisa_away_is_still_hit(salaried_params) -> None:
    natural = _build(salaried_params(), 42).closing_balance
    target = natural + Decimal("0.01")
    statement = _build(salaried_params(closing_balance=target), 42)
    last = statement.transactions[-1]

    assert statement.closing_balance == target
    assert last.kind is TransactionKind.CLOSING_ADJUSTMENT
    assert last.credit == Decimal("0.01")
    _assert_consistent(statement)


def test_one_paisa_salary_still_builds(salaried_params) -> None:
    statement = _build(salaried_params(salary_amount="0.01"), 42)
    salaries = statement.of_kind(TransactionKind.SALARY)

    assert len(salaries) == 3
    assert all(txn.credit == Decimal("0.01") for txn in salaries)
    _assert_consistent(statement)


def test_self_employed_turnover_split(self_employed_params) -> None:
    statement = _build(self_employed_params(), 7)
    receipts = statement.of_kind(TransactionKind.TURNOVER)

    assert sum((txn.credit for txn in receipts), Decimal("0")) == Decimal("1200000.00")
    assert {txn.date.month for txn in receipts} == {1, 2, 3, 4, 5, 6}
    assert len(statement.of_kind(TransactionKind.INTEREST)) == 6
    assert statement.meta.user_type is UserType.SELF_EMPLOYED
    _assert_consistent(statement)


def test_self_employed_debits_follow_receipts(self_employed_params) -> None:
    statement = _build(self_employed_params(number_of_transactions=60), 11)
    debits = statement.of_kind(TransactionKind.DEBIT)
    receipts = statement.of_kind(TransactionKind.TURNOVER)

    assert debits
    largest = max(txn.credit for txn in receipts)
    assert all(txn.debit <= largest * Decimal("0.9") + Decimal("0.01") for txn in debits)
    assert not statement.of_kind(TransactionKind.CREDIT)


def test_self_employed_without_count_draws_one(self_employed_params) -> None:
    statement = _build(self_employed_params(number_of_transactions=0), 5)
    assert len(statement.transactions) >= 100


def test_negative_balance_repair(salaried_params) -> None:
    params = salaried_params(starting_balance=0, salary_amount=1, number_of_transactions=200)
    statement = _build(params, 11)
    first = statement.transactions[0]

    assert first.kind is TransactionKind.OPENING_ADJUSTMENT
    assert first.description == "Opening Balance Credit\nFunds Transfer"
    assert len(statement.of_kind(TransactionKind.OPENING_ADJUSTMENT)) == 1
    assert first.credit >= Decimal("5000")
    _assert_consistent(statement)


def test_same_seed_is_reproducible(salaried_params) -> None:
    params = salaried_params(template="SBI", number_of_transactions=120)
    first = _build(params, 1234).to_dict()
    second = _build(params, 1234).to_dict()

    assert first["transactions"] == second["transactions"]
    assert first["id"] == second["id"]
    assert first["meta"]["configHash"] == second["meta"]["configHash"]


def test_built_rows_cannot_be_modified(salaried_params) -> None:
    statement = _build(salaried_params(), 42)
    with pytest.raises(FrozenInstanceError):
        statement.transactions[0].balance = Decimal("0")


def test_regenerate_uses_a_new_seed(salaried_params) -> None:
    params = salaried_params()
    original = _build(params, 1)
    snapshot = original.to_dict()["transactions"]
    fresh = regenerate_statement(params, 2, settings=SETTINGS, today=TODAY)

    assert fresh.meta.seed == 2
    assert fresh.to_dict()["transactions"] != snapshot
    assert original.to_dict()["transactions"] == snapshot


@pytest.mark.parametrize(
    "template",
    ["PNB", "SBI", "HDFC", "ICICI", "AXIS", "KOTAK", "IDFC", "INDUSIND",
     "CBI", "YES", "BOB", "UCO", "IOB", "CANARA", "UNION"],
)
def test_every_template_yields_a_consistent_ledger(salaried_params, template) -> None:
    for seed in (1, 99):
        statement = _build(salaried_params(template=template, number_of_transactions=150), seed)
        _assert_consistent(statement)
        assert statement.meta.template == template
        assert len({txn.id for txn in statement.transactions}) == len(statement.transactions)


def test_explicit_window_contains_every_row(salaried_params) -> None:
    params = salaried_params(
        statement_start_date=date(2025, 3, 10),
        statement_end_date=date(2025, 6, 20),
        closing_balance=40000,
    )
    statement = _build(params, 8)

    assert statement.meta.statement_period_start == date(2025, 3, 10)
    assert statement.meta.statement_period_end == date(2025, 6, 20)
    assert all(
        date(2025, 3, 10) <= txn.date.date() <= date(2025, 6, 20)
        for txn in statement.transactions
    )
    # March starts after payday, so only April to June carry salaries.
    assert len(statement.of_kind(TransactionKind.SALARY)) == 3
    _assert_consistent(statement)


def test_rows_get_daytime_timestamps(salaried_params) -> None:
    statement = _build(salaried_params(number_of_transactions=300, duration_months=6), 21)
    for txn in statement.transactions:
        assert 9 <= txn.date.hour < 21
    per_day = Counter(txn.date.date() for txn in statement.transactions)
    assert max(per_day.values()) > 1


def test_ordinary_debits_avoid_salary_days(salaried_params) -> None:
    for seed in range(15):
        statement = _build(salaried_params(number_of_transactions=200), seed)
        paydays = {txn.date.month: txn.date.date() for txn in statement.of_kind(TransactionKind.SALARY)}
        for txn in statement.of_kind(TransactionKind.DEBIT):
            payday = paydays[txn.date.month]
            assert not payday - timedelta(days=3) <= txn.date.date() <= payday + timedelta(days=1)


def test_cash_deposits_move_away_from_payday() -> None:
    window = resolve_window(None, date(2025, 6, 30), 3, TODAY)
    june = window.periods[-1]
    payday = date(2025, 6, 3)
    for seed in range(30):
        ctx = GenerationContext.for_build(seed)
        when = _extra_credit_date(june, date(2025, 6, 2), payday, True, ctx)
        assert june.contains(when)
        assert not payday - timedelta(days=5) <= when <= payday + timedelta(days=1)


def test_extra_credits_can_be_switched_off(salaried_params) -> None:
    settings = Settings(tuning=GenerationTuning(extra_credit_probability=0.0))
    statement = generate_statement(salaried_params(), 42, settings=settings, today=TODAY)

    assert not statement.of_kind(TransactionKind.CREDIT)
    assert len(statement.of_kind(TransactionKind.DEBIT)) == 54


def test_default_window_ends_today(salaried_params) -> None:
    statement = _build(salaried_params(statement_end_date=None), 4)
    assert statement.meta.statement_period_end == TODAY
    assert statement.meta.statement_period_start == date(2025, 5, 1)


def test_degenerate_values_are_rejected(salaried_params) -> None:
    params = salaried_params()
    broken = SalariedParams.model_construct(
        **{**params.model_dump(), "starting_balance": Decimal("-1")}
    )
    with pytest.raises(InvalidParametersError):
        build_statement(broken, GenerationOptions(seed=1), settings=SETTINGS, today=TODAY)
