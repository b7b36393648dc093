"""Tests for the salaried and self-employed income profiles."""
from __future__ import annotations

from datetime import date
from decimal import Decimal

from statement_engine.banks import get_profile
from statement_engine.income import SalariedIncome, SelfEmployedIncome, split_turnover
from statement_engine.models import TransactionKind


def test_custom_employer_overrides_the_listed_one() -> None:
    income = SalariedIncome.for_employer(Decimal("50000"), "Other", "  Acme Labs ")
    assert income.employer == "Acme Labs"
    assert SalariedIncome.for_employer(Decimal("1"), "TCS", "   ").employer == "TCS"


def test_salary_credit_varies_within_two_percent(ctx) -> None:
    income = SalariedIncome(Decimal("50000"), "Wipro")
    profile = get_profile("HDFC")
    for _ in range(100):
        event = income.credit(date(2025, 5, 2), profile, ctx)
        assert Decimal("49000") <= event.amount <= Decimal("51000")
        assert event.kind is TransactionKind.SALARY
        assert "WIPRO" in event.description


def test_salary_credit_never_rounds_to_zero(ctx) -> None:
    income = SalariedIncome(Decimal("0.004"), "Wipro")
    event = income.credit(date(2025, 5, 2), get_profile("SBI"), ctx)
    assert event.amount == Decimal("0.01")


def test_split_turnover_is_exact() -> None:
    shares = split_turnover(Decimal("1000000.00"), 3)
    assert shares[:2] == [Decimal("333333.33"), Decimal("333333.33")]
    assert shares[2] == Decimal("333333.34")
    assert sum(shares) == Decimal("1000000.00")
    assert split_turnover(Decimal("10"), 0) == []


def test_split_period_sums_to_the_share(ctx) -> None:
    income = SelfEmployedIncome(Decimal("1200000"))
    for count in (1, 5, 25):
        parts = income.split_period(Decimal("200000.00"), count, ctx)
        assert sum(parts) == Decimal("200000.00")
        assert all(part > 0 for part in parts)
        assert 1 <= len(parts) <= count


def test_single_receipt_takes_the_whole_share(ctx) -> None:
    income = SelfEmployedIncome(Decimal("1200000"))
    assert income.split_period(Decimal("200000.00"), 1, ctx) == [Decimal("200000.00")]
    assert income.split_period(Decimal("0"), 4, ctx) == []


def test_receipts_keep_amounts_and_use_bank_narration(ctx) -> None:
    income = SelfEmployedIncome(Decimal("600000"))
    amounts = [Decimal("1500.00"), Decimal("2500.50")]
    dates = [date(2025, 4, 3), date(2025, 4, 9)]
    events = income.receipts(amounts, dates, get_profile("KOTAK"), ctx)

    assert [event.amount for event in events] == amounts
    assert [event.when for event in events] == dates
    assert all(event.kind is TransactionKind.TURNOVER for event in events)
    assert all(event.description for event in events)
