"""UCO Bank narration style."""
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

HANDLES = ("@ybl", "@paytm", "@okaxis", "@okicici", "@ibl", "@upi", "@oksbi", "@axisbank")
LOCAL_HANDLES = ("@hdfcbank", "@okicici", "@okaxis")
ONLINE_HANDLES = ("@paytm", "@ybl", "@axisbank")

APPS = (
    ("PhonePe", 0.45),
    ("Google Pay", 0.30),
    ("Paytm", 0.15),
    ("BHIM", 0.05),
    ("Amazon Pay", 0.03),
    ("WhatsApp", 0.02),
)

POS_MERCHANTS = ("BIG BAZAAR", "DMART", "RELIANCE", "MORE", "SPENCERS", "VISHAL MEGA")

CHARGES = ("SMS CHARGES", "DEBIT CARD AMC", "ACCOUNT MAINT CHARGES", "CHEQUE BOOK CHARGES")


def _person(ctx: GenerationContext) -> str:
    return person_vpa(ctx.rng, HANDLES)


def _business(ctx: GenerationContext) -> str:
    return business_vpa(
        ctx.rng, local_handles=LOCAL_HANDLES, online_handles=ONLINE_HANDLES, local_share=0.4
    )


def _app(ctx: GenerationContext) -> str:
    return f"Payment from {weighted_choice(ctx.rng, APPS)}"


def _upi_debit(ctx: GenerationContext, when: date) -> str:
    sender = _person(ctx)
    recipient = weighted_choice(
        ctx.rng,
        (
            (lambda c: qcode_vpa(c.rng), 35),
            (lambda c: paytm_qr(c.rng), 20),
            (_business, 20),
            (_person, 15),
            (lambda c: vyapar_vpa(c.rng), 10),
        ),
    )(ctx)
    return upi_narration(ctx.rng, sender, recipient, _app(ctx))


def _upi_credit(ctx: GenerationContext, when: date) -> str:
    recipient = _person(ctx)
    sender = weighted_choice(
        ctx.rng,
        ((_person, 75), (_business, 15), (lambda c: vyapar_vpa(c.rng), 10)),
    )(ctx)
    return upi_narration(ctx.rng, sender, recipient, _app(ctx))


def _atm(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    prefix = rng.pick(("ATM-", "UCO ATM-"))
    return f"{prefix}{rng.digits(6)}/WDL"


def _imps_out(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    ref_number = rng.digits(12)
    return f"IMPS/{ref_number}/{rng.pick(('TO BENEFICIARY', 'TRANSFER TO A/C'))}"


def _imps_in(ctx: GenerationContext, when: date) -> str:
    return f"IMPS/{ctx.rng.digits(12)}/FROM REMITTER"


def _neft(label: str):
    def render(ctx: GenerationContext, when: date) -> str:
        return f"NEFT CR-N{ctx.rng.digits(10)}-{label}"

    return render


def _pos(ctx: GenerationContext, when: date) -> str:
    return f"POS {ctx.rng.pick(POS_MERCHANTS)}/CARD"


def _charges(ctx: GenerationContext, when: date) -> str:
    return ctx.rng.pick(CHARGES)


def _cash_deposit(ctx: GenerationContext, when: date) -> str:
    return "CASH DEPOSIT"


@register
class UcoProfile(BankStyleProfile):
    code = "UCO"
    display_name = "UCO Bank"

    debits = (
        Category("upi", 850, _upi_debit, UPI_SMALL_DEBIT),
        Category("atm", 52, _atm, ATM_WITHDRAWAL),
        Category("imps", 38, _imps_out, NEFT_DEBIT),
        Category("neft", 30, _neft("CUSTOMER TRANSFER"), NEFT_DEBIT),
        Category("charges", 15, _charges, BANK_CHARGES),
        Category("pos", 15, _pos, POS_DEBIT),
    )
    credits = (
        Category("upi", 800, _upi_credit, UPI_CREDIT),
        Category("neft", 105, _neft("FROM CUSTOMER"), NEFT_CREDIT),
        Category("imps", 63, _imps_in, UPI_CREDIT),
        Category("cash_deposit", 32, _cash_deposit, CASH_DEPOSIT, cash_deposit=True),
    )

    def salary_narration(self, employer: str, ctx: GenerationContext, when: date) -> Narration:
        return Narration(f"NEFT CR-N{ctx.rng.digits(10)}-{employer.upper()}")

    def generate_reference(self, when: date, ctx: GenerationContext) -> str:
        return f"UCOR{ctx.rng.digits(12)}"
