"""Tests for rupee formatting helpers."""
from __future__ import annotations

from decimal import Decimal

from statement_engine.core.formatting import format_inr, humanize_inr


def test_format_inr_uses_indian_grouping() -> None:
    assert format_inr(Decimal("1234567.891")) == "12,34,567.89"
    assert format_inr(999) == "999.00"
    assert format_inr(100000, decimals=0) == "1,00,000"


def test_format_inr_with_symbol_and_sign() -> None:
    assert format_inr(-500, symbol="₹") == "-₹ 500.00"


def test_humanize_inr_units() -> None:
    assert humanize_inr(150000) == "₹ 1.5 lakh"
    assert humanize_inr(150000, short=True) == "₹ 1.5L"
    assert humanize_inr(12345678) == "₹ 1.2 crore"
    assert humanize_inr(2500) == "₹ 2,500"
    assert humanize_inr(Decimal("2500.50")) == "₹ 2,500.50"
