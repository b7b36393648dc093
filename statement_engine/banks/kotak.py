"""Kotak Mahindra Bank narration style."""
from __future__ import annotations

from datetime import date

from ..context import GenerationContext
from .base import BankStyleProfile, Category, Narration
from .common import (
    ATM_WITHDRAWAL,
    BANK_CHARGES,
    CASH_DEPOSIT,
    NEFT_CREDIT,
    NEFT_DEBIT,
    POS_DEBIT,
    RETAIL_MERCHANTS,
    UPI_CREDIT,
    UPI_SMALL_DEBIT,
)
from .registry import register
from .upi import (
    business_vpa,
    paytm_qr,
    person_vpa,
    qcode_vpa,
    upi_narration,
    vyapar_vpa,
    weighted_choice,
)

HANDLES = ("@kotak", "@ybl", "@paytm", "@okaxis", "@okicici", "@oksbi", "@ibl", "@axl")
LOCAL_HANDLES = ("@hdfcbank", "@okicici", "@okaxis", "@kotak")
ONLINE_HANDLES = ("@paytm", "@ybl", "@axisbank", "@kotak")

APPS = (
    ("PhonePe", 0.40),
    ("Google Pay", 0.35),
    ("Paytm", 0.12),
    ("BHIM", 0.06),
    ("Amazon Pay", 0.04),
    ("WhatsApp", 0.03),
)

CHARGES = ("SMS ALERT CHGS", "DEBIT CARD AMC", "MIN BAL CHGS", "CHEQUE BOOK CHGS")


def _person(ctx: GenerationContext) -> str:
    return person_vpa(ctx.rng, HANDLES, suffix_chance=0.15)


def _business(ctx: GenerationContext) -> str:
    return business_vpa(ctx.rng, local_handles=LOCAL_HANDLES, online_handles=ONLINE_HANDLES)


def _upi_debit(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    sender = _person(ctx)
    recipient = weighted_choice(
        rng,
        (
            (lambda c: qcode_vpa(c.rng), 30),
            (lambda c: paytm_qr(c.rng), 20),
            (_business, 25),
            (_person, 17),
            (lambda c: vyapar_vpa(c.rng), 8),
        ),
    )(ctx)
    return upi_narration(rng, sender, recipient, weighted_choice(rng, APPS))


def _upi_credit(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    recipient = _person(ctx)
    sender = weighted_choice(
        rng,
        (
            (_person, 70),
            (_business, 18),
            (lambda c: vyapar_vpa(c.rng), 12),
        ),
    )(ctx)
    return upi_narration(rng, sender, recipient, weighted_choice(rng, APPS))


def _atm(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    prefix = rng.pick(("KOTAK ATM ", "ATM WDL "))
    return f"{prefix}{rng.digits(6)}"


def _imps(direction: str):
    def render(ctx: GenerationContext, when: date) -> str:
        return f"IMPS/{ctx.rng.digits(12)}/{direction}"

    return render


def _neft(direction: str):
    def render(ctx: GenerationContext, when: date) -> str:
        return f"NEFT {direction}-{ctx.rng.digits(10)}"

    return render


def _card(ctx: GenerationContext, when: date) -> str:
    return f"CARD PURCHASE-{ctx.rng.pick(RETAIL_MERCHANTS)}"


def _charges(ctx: GenerationContext, when: date) -> str:
    return ctx.rng.pick(CHARGES)


def _cash_deposit(ctx: GenerationContext, when: date) -> str:
    return "CASH DEPOSIT"


@register
class KotakProfile(BankStyleProfile):
    code = "KOTAK"
    display_name = "Kotak Mahindra Bank"

    debits = (
        Category("upi", 880, _upi_debit, UPI_SMALL_DEBIT),
        Category("atm", 36, _atm, ATM_WITHDRAWAL),
        Category("imps", 30, _imps("TO BENEFICIARY"), NEFT_DEBIT),
        Category("neft", 24, _neft("OUT"), NEFT_DEBIT),
        Category("card", 18, _card, POS_DEBIT),
        Category("charges", 12, _charges, BANK_CHARGES),
    )
    credits = (
        Category("upi", 850, _upi_credit, UPI_CREDIT),
        Category("neft", 72, _neft("IN"), NEFT_CREDIT),
        Category("imps", 55, _imps("FROM REMITTER"), UPI_CREDIT),
        Category("cash_deposit", 23, _cash_deposit, CASH_DEPOSIT, cash_deposit=True),
    )

    def salary_narration(self, employer: str, ctx: GenerationContext, when: date) -> Narration:
        rng = ctx.rng
        name = employer.upper()
        roll = rng.next()
        if roll < 0.6:
            return Narration(f"NEFT IN-{rng.digits(10)}-{name}")
        if roll < 0.9:
            return Narration(f"IMPS/{rng.digits(12)}/{name}-SAL")
        return Narration(f"SAL CREDIT-{name}")

    def generate_reference(self, when: date, ctx: GenerationContext) -> str:
        rng = ctx.rng
        if rng.chance(0.6):
            return f"UTR{rng.padded(16)}"
        return rng.digits(12)
