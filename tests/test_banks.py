"""Tests for the bank style profiles and their registry."""
from __future__ import annotations

from datetime import date

import pytest

from statement_engine.banks import BankStyleProfile, Narration, available_templates, common, get_profile
from statement_engine.banks.registry import register
from statement_engine.context import GenerationContext

ALL_CODES = available_templates() + ["GENERIC"]
WHEN = date(2025, 5, 14)


def test_registry_lists_every_bank_style() -> None:
    expected = {
        "AXIS", "BOB", "CANARA", "HDFC", "ICICI", "IDFC", "INDUSIND",
        "IOB", "KOTAK", "PNB", "SBI", "UCO", "UNION", "YES",
    }
    assert set(available_templates()) == expected


def test_lookup_is_case_insensitive_and_falls_back_to_generic() -> None:
    assert get_profile("hdfc").code == "HDFC"
    assert get_profile(" Kotak ").code == "KOTAK"
    assert get_profile("CBI").code == "GENERIC"
    assert get_profile("UNKNOWN").code == "GENERIC"


def test_registering_a_code_twice_is_rejected() -> None:
    class DuplicateProfile(BankStyleProfile):
        code = "HDFC"

    with pytest.raises(ValueError):
        register(DuplicateProfile)


@pytest.mark.parametrize("code", ALL_CODES)
@pytest.mark.parametrize("kind", ["debit", "credit"])
def test_profiles_render_complete_transactions(code: str, kind: str) -> None:
    profile = get_profile(code)
    table = profile.credits if kind == "credit" else profile.debits
    names = {category.name for category in table}
    ctx = GenerationContext.for_build(17, city="Pune")

    for _ in range(150):
        txn = profile.generate_transaction(kind, ctx, WHEN)
        assert txn.description.strip()
        assert isinstance(txn.reference, str)
        assert txn.amount > 0
        assert txn.category in names


@pytest.mark.parametrize("code", ALL_CODES)
def test_every_category_is_reachable(code: str) -> None:
    profile = get_profile(code)
    ctx = GenerationContext.for_build(3)
    seen = {profile.generate_transaction("debit", ctx, WHEN).category for _ in range(3000)}
    assert seen == {category.name for category in profile.debits}


@pytest.mark.parametrize("code", ALL_CODES)
def test_salary_credit_names_the_employer(code: str) -> None:
    profile = get_profile(code)
    ctx = GenerationContext.for_build(29)
    for _ in range(20):
        narration = profile.generate_salary_credit("Infosys", ctx, WHEN)
        assert isinstance(narration, Narration)
        assert "INFOSYS" in narration.description.upper()
        assert isinstance(narration.reference, str)


@pytest.mark.parametrize("code", ALL_CODES)
def test_profiles_are_deterministic_per_seed(code: str) -> None:
    profile = get_profile(code)

    def render(seed: int) -> list[tuple[str, str, str]]:
        ctx = GenerationContext.for_build(seed)
        rows = []
        for kind in ("debit", "credit") * 20:
            txn = profile.generate_transaction(kind, ctx, WHEN)
            rows.append((txn.description, txn.reference, str(txn.amount)))
        return rows

    assert render(101) == render(101)


def test_cash_deposit_categories_are_flagged() -> None:
    profile = get_profile("PNB")
    ctx = GenerationContext.for_build(1)
    flagged = [
        txn
        for txn in (profile.generate_transaction("credit", ctx, WHEN) for _ in range(300))
        if txn.cash_deposit
    ]
    assert flagged
    assert all(txn.category == "cash_deposit" for txn in flagged)


def test_narrations_use_the_account_holder_city() -> None:
    profile = get_profile("PNB")
    ctx = GenerationContext.for_build(8, city="Nagpur")
    descriptions = [profile.generate_transaction("debit", ctx, WHEN).description for _ in range(500)]
    neft = [text for text in descriptions if text.startswith("NEFT_OUT")]
    assert neft
    assert all("TO NAGPUR" in text for text in neft)


def test_sbi_reuses_the_shared_amount_tables() -> None:
    profile = get_profile("SBI")
    credits = {category.name: category.amount for category in profile.credits}
    debits = {category.name: category.amount for category in profile.debits}

    assert credits["upi"] is common.UPI_CREDIT
    assert credits["neft"] is common.NEFT_CREDIT
    assert debits["pos"] is common.POS_DEBIT


def test_generic_transfers_name_a_seeded_person() -> None:
    profile = get_profile("GENERIC")

    def transfers(seed: int) -> list[str]:
        ctx = GenerationContext.for_build(seed)
        rows = [profile.generate_transaction("credit", ctx, WHEN) for _ in range(200)]
        return [txn.description for txn in rows if txn.category == "person"]

    first = transfers(11)
    assert first
    assert first == transfers(11)
    for description in first:
        assert description.startswith("IMPS/")
        assert description == description.upper()
        assert " " in description
