"""Canara Bank narration style."""
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

HANDLES = ("@cnrb", "@ybl", "@paytm", "@okaxis", "@okicici", "@oksbi", "@ibl", "@upi")
LOCAL_HANDLES = ("@hdfcbank", "@okicici", "@cnrb", "@okaxis")
ONLINE_HANDLES = ("@paytm", "@ybl", "@axisbank", "@cnrb")

APPS = (
    ("PhonePe", 0.42),
    ("Google Pay", 0.32),
    ("Paytm", 0.14),
    ("BHIM", 0.07),
    ("Amazon Pay", 0.03),
    ("WhatsApp", 0.02),
)

POS_MERCHANTS = ("DMart", "Big Bazaar", "Reliance", "More", "Spencers", "Hypercity")

CHARGES = ("SMS CHARGES", "DEBIT CARD ANNUAL FEE", "ACCOUNT CHARGES", "CHEQUE BOOK")


def _person(ctx: GenerationContext) -> str:
    return person_vpa(ctx.rng, HANDLES, suffix_chance=0.12)


def _business(ctx: GenerationContext) -> str:
    return business_vpa(
        ctx.rng, local_handles=LOCAL_HANDLES, online_handles=ONLINE_HANDLES, local_share=0.4
    )


def _upi_debit(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    sender = _person(ctx)
    recipient = weighted_choice(
        rng,
        (
            (lambda c: qcode_vpa(c.rng), 32),
            (lambda c: paytm_qr(c.rng), 22),
            (_business, 22),
            (_person, 15),
            (lambda c: vyapar_vpa(c.rng), 9),
        ),
    )(ctx)
    return upi_narration(rng, sender, recipient, weighted_choice(rng, APPS))


def _upi_credit(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    recipient = _person(ctx)
    sender = weighted_choice(
        rng,
        ((_person, 72), (_business, 17), (lambda c: vyapar_vpa(c.rng), 11)),
    )(ctx)
    return upi_narration(rng, sender, recipient, weighted_choice(rng, APPS))


def _atm(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    prefix = rng.pick(("ATM WDL-", "CANARA ATM-"))
    return f"{prefix}{rng.digits(6)}"


def _imps(label: str):
    def render(ctx: GenerationContext, when: date) -> str:
        return f"IMPS/{ctx.rng.digits(12)}/{label}"

    return render


def _neft(suffix: str = ""):
    def render(ctx: GenerationContext, when: date) -> str:
        return f"NEFT{ctx.rng.digits(12)}{suffix}"

    return render


def _pos(ctx: GenerationContext, when: date) -> str:
    return f"POS-{ctx.rng.pick(POS_MERCHANTS)}"


def _charges(ctx: GenerationContext, when: date) -> str:
    return ctx.rng.pick(CHARGES)


def _cash_deposit(ctx: GenerationContext, when: date) -> str:
    return "CASH DEPOSIT"


@register
class CanaraProfile(BankStyleProfile):
    code = "CANARA"
    display_name = "Canara Bank"

    debits = (
        Category("upi", 820, _upi_debit, UPI_SMALL_DEBIT),
        Category("atm", 63, _atm, ATM_WITHDRAWAL),
        Category("imps", 45, _imps("TRANSFER"), NEFT_DEBIT),
        Category("neft", 36, _neft(), NEFT_DEBIT),
        Category("pos", 22, _pos, POS_DEBIT),
        Category("charges", 14, _charges, BANK_CHARGES),
    )
    credits = (
        Category("upi", 780, _upi_credit, UPI_CREDIT),
        Category("neft", 120, _neft("/CR"), NEFT_CREDIT),
        Category("imps", 70, _imps("CREDIT"), UPI_CREDIT),
        Category("cash_deposit", 30, _cash_deposit, CASH_DEPOSIT, cash_deposit=True),
    )

    def salary_narration(self, employer: str, ctx: GenerationContext, when: date) -> Narration:
        rng = ctx.rng
        name = employer.upper()
        roll = rng.next()
        if roll < 0.55:
            return Narration(f"NEFT{rng.digits(12)}/{name}/SALARY")
        if roll < 0.85:
            return Narration(f"IMPS/{rng.digits(12)}/{name}-SAL")
        return Narration(f"SALARY CREDIT-{name}")

    def generate_reference(self, when: date, ctx: GenerationContext) -> str:
        rng = ctx.rng
        return rng.digits(weighted_choice(rng, ((12, 0.5), (14, 0.3), (16, 0.2))))
