"""YES Bank narration style.

YES statements are dominated by UPI rows; every row carries a ``YBS``
reference built from the posting day.
"""
from __future__ import annotations

from datetime import date

from ..context import GenerationContext
from .base import AmountTier, BankStyleProfile, Category, Narration, always_round
from .registry import register
from .upi import person_vpa, phone_number, qcode_vpa, qr_hash, vyapar_vpa, weighted_choice

PERSON_NAMES = (
    "DIVYANSH PATEL", "MAYANK SAHU", "ANIKET PATEL", "SATENDRA PATEL",
    "PRADEEP KUMAR", "RAJESH SHARMA", "AMIT VERMA", "NEHA SINGH",
    "VIKRAM GUPTA", "PRIYA MEHTA", "RAHUL MISHRA", "SNEHA REDDY",
    "KARAN SINGH", "POOJA SHARMA", "ARUN KUMAR", "DEEPAK YADAV",
    "SANJAY PATEL", "ANJALI GUPTA", "MANOJ TIWARI", "KAVITA SINGH",
)

BUSINESS_NAMES = (
    "maheshwripetroleum", "reliancefresh", "kiranamartshop", "medicalstore",
    "petrolpump", "restaurantcafe", "grocerymart", "mobileshop",
    "clothingstore", "electronicshop", "bookstall", "stationary",
)

PERSON_HANDLES = ("@ybl", "@ibl", "@paytm")

PAYMENT_APPS = (
    "Payment from PhonePe",
    "Payment from GPay",
    "Payment from Paytm",
    "Payment from BHIM UPI",
    "Payment from Amazon Pay",
)

# Whole rupee amounts.
UPI_DEBIT = always_round(
    AmountTier(0.60, 50, 800),
    AmountTier(0.25, 800, 2500),
    AmountTier(0.11, 2500, 5000),
    AmountTier(0.04, 5000, 10000),
    step=1,
)

UPI_CREDIT = always_round(
    AmountTier(0.65, 200, 2000),
    AmountTier(0.23, 2000, 5000),
    AmountTier(0.09, 5000, 8000),
    AmountTier(0.03, 8000, 12000),
    step=1,
)

BRANCH_CASH = always_round(AmountTier(1.0, 500, 10000), step=1)

TRANSFER = always_round(
    AmountTier(0.65, 1500, 6000),
    AmountTier(0.23, 6000, 12000),
    AmountTier(0.12, 12000, 20000),
    step=1,
)


def _person(ctx: GenerationContext) -> str:
    return person_vpa(ctx.rng, PERSON_HANDLES, suffix_chance=0.3, suffix_max=5)


def _paytm_qr(ctx: GenerationContext) -> str:
    rng = ctx.rng
    digest = qr_hash(rng, rng.random_int(5, 8))
    if rng.chance(0.6):
        return f"paytmqr{digest}@ptys"
    return f"paytm.{digest}@pty"


def _business(ctx: GenerationContext) -> str:
    rng = ctx.rng
    if rng.chance(0.3):
        return vyapar_vpa(rng)
    return f"{rng.pick(BUSINESS_NAMES)}.{rng.digits(8)}@hdfcbank"


def _upi_debit(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    ref_number = rng.digits(12)
    sender = phone_number(rng)
    app = rng.pick(PAYMENT_APPS)
    recipient = weighted_choice(
        rng,
        ((_person, 35), (lambda c: qcode_vpa(c.rng), 35), (_paytm_qr, 15), (_business, 15)),
    )(ctx)
    return f"UPI/{ref_number}/From:{sender}@ybl/To:{recipient}/{app}"


def _upi_credit(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    ref_number = rng.digits(12)
    receiver = phone_number(rng)
    app = rng.pick(PAYMENT_APPS)
    sender = _person(ctx) if rng.chance(0.8) else _business(ctx)
    return f"UPI/{ref_number}/From:{sender}/To:{receiver}@ybl/{app}"


def _branch_cash(description: str):
    def render(ctx: GenerationContext, when: date) -> str:
        return description

    return render


def _transfer(side: str):
    def render(ctx: GenerationContext, when: date) -> str:
        rng = ctx.rng
        name = ctx.unique_name(PERSON_NAMES)
        ref_number = rng.digits(12)
        mode = "NEFT" if rng.chance(0.5) else "IMPS"
        return f"{mode}/{side}/{ref_number}/{name}"

    return render


@register
class YesProfile(BankStyleProfile):
    code = "YES"
    display_name = "YES Bank"

    debits = (
        Category("upi", 90, _upi_debit, UPI_DEBIT),
        Category("branch_cash", 5, _branch_cash("CASH WITHDRAWAL AT BRANCH"), BRANCH_CASH),
        Category("transfer", 5, _transfer("DR"), TRANSFER),
    )
    credits = (
        Category("upi", 90, _upi_credit, UPI_CREDIT),
        Category(
            "cash_deposit",
            5,
            _branch_cash("CASH DEPOSIT AT BRANCH"),
            BRANCH_CASH,
            cash_deposit=True,
        ),
        Category("transfer", 5, _transfer("CR"), TRANSFER),
    )

    def salary_narration(self, employer: str, ctx: GenerationContext, when: date) -> Narration:
        return Narration(f"NEFT/CR/{ctx.rng.digits(12)}/{employer.upper()}")

    def generate_reference(self, when: date, ctx: GenerationContext) -> str:
        day_of_year = when.timetuple().tm_yday
        sequence = f"{day_of_year:03d}{when.year % 100:02d}{ctx.rng.digits(8)}"
        return f"YBS{sequence[:13]}"
