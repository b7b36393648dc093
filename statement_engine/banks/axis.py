"""Axis Bank narration style (hyphen separated channel codes)."""
from __future__ import annotations

from datetime import date

from ..context import GenerationContext
from .base import BankStyleProfile, Category, Narration
from .common import (
    ATM_WITHDRAWAL,
    BANK_CHARGES,
    BILL_PAYMENT,
    CASH_DEPOSIT,
    CHEQUE,
    LARGE_TRANSFER,
    LOAN_EMI,
    NEFT_CREDIT,
    NEFT_DEBIT,
    POS_DEBIT,
    STANDING_INSTRUCTION,
    SUBSCRIPTION,
    UPI_CREDIT,
    UPI_SMALL_DEBIT,
)
from .registry import register

UPI_APPS = ("paytm", "phonepe", "googlepay", "amazonpay", "bhim", "whatsapp")

UPI_MERCHANTS = (
    "Swiggy", "Zomato", "Amazon", "Flipkart", "BigBasket", "Grofers",
    "BookMyShow", "Uber", "Ola", "MakeMyTrip", "Airtel", "JioMart",
)

NEFT_BANKS = ("HDFC", "ICIC", "SBIN", "UTIB", "IDFB", "KKBK")

ATM_LOCATIONS = (
    ("AAWAS NAGAR AB ROAD", "DEDEWAS"),
    ("MG ROAD VIJAY NAGAR", "INDORE"),
    ("PALASIA SQUARE", "INDORE"),
    ("SARAFA BAZAR MAIN", "INDORE"),
    ("BHANWAR KUWA ROAD", "INDORE"),
    ("REGAL SQUARE INDORE", "INDORE"),
    ("TREASURE ISLAND MALL", "INDORE"),
    ("SAPNA SANGEETA ROAD", "INDORE"),
    ("NEW PALASIA", "INDORE"),
    ("SOUTH TUKOGANJ", "INDORE"),
    ("VIJAY NAGAR SQUARE", "INDORE"),
    ("RACE COURSE ROAD", "INDORE"),
    ("CENTRAL MALL GEETA BHAWAN", "INDORE"),
    ("BOMBAY HOSPITAL ROAD", "INDORE"),
    ("RAJENDRA NAGAR MAIN", "INDORE"),
)

POS_MERCHANTS = (
    "MORE SUPERMARKET", "RELIANCE FRESH", "BIG BAZAAR", "DMart", "LIFESTYLE",
    "WESTSIDE", "PANTALOONS", "SHOPPER STOP", "CENTRAL", "MAX FASHION",
)

CARD_CHARGES = (
    "DEBIT CARD ANNUAL FEE",
    "DEBIT CARD AMC",
    "ATM MAINTENANCE CHARGES",
    "SMS ALERT CHARGES",
    "MINIMUM BALANCE CHARGES",
)

LOAN_TYPES = ("HOME", "CAR", "PERSONAL", "EDUCATION")

SI_TYPES = (
    "SI-MUTUAL FUND SIP",
    "SI-INSURANCE PREMIUM",
    "SI-LOAN EMI",
    "SI-CREDIT CARD PAYMENT",
)

BILLS = (
    ("ELECTRICITY", "MSEB"),
    ("MOBILE", "AIRTEL"),
    ("DTH", "TATA SKY"),
    ("GAS", "MAHANAGAR GAS"),
    ("WATER", "BMC"),
)

AUTOPAY_MERCHANTS = (
    "NETFLIX", "AMAZON PRIME", "HOTSTAR", "SPOTIFY", "YOUTUBE PREMIUM",
    "GOOGLE ONE", "APPLE MUSIC", "ZOOM", "OFFICE 365",
)


def _side(is_debit: bool) -> str:
    return "DR" if is_debit else "CR"


def _upi(is_debit: bool):
    def render(ctx: GenerationContext, when: date) -> str:
        rng = ctx.rng
        app = rng.pick(UPI_APPS)
        ref_number = rng.digits(12)
        if is_debit:
            merchant = rng.pick(UPI_MERCHANTS)
            return f"UPI-{merchant}-{app}@axisbank-{ref_number}"
        return f"UPI-CREDIT-{app}@axisbank-{ref_number}"

    return render


def _imps(is_debit: bool):
    def render(ctx: GenerationContext, when: date) -> str:
        rng = ctx.rng
        ref_number = rng.digits(12)
        return f"IMPS-{_side(is_debit)}-AXISBK{ref_number}-{rng.digits(8)}"

    return render


def _neft(is_debit: bool):
    def render(ctx: GenerationContext, when: date) -> str:
        rng = ctx.rng
        bank = rng.pick(NEFT_BANKS)
        ref_number = rng.digits(10)
        return f"NEFT-{_side(is_debit)}-{bank}{ref_number}-AXIS{rng.digits(8)}"

    return render


def _rtgs(is_debit: bool):
    def render(ctx: GenerationContext, when: date) -> str:
        rng = ctx.rng
        ref_number = rng.digits(10)
        return f"RTGS-{_side(is_debit)}-AXISR{rng.digits(10)}-{ref_number}"

    return render


def _atm(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    area, city = rng.pick(ATM_LOCATIONS)
    cash_id = rng.random_int(1100, 1160)
    return f"ATM WDL-ATM CASH {cash_id}\n{area}\n{city}"


def _pos(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    merchant = rng.pick(POS_MERCHANTS)
    ref_number = rng.digits(12)
    return f"POS-{merchant}-****{rng.digits(4)}-{ref_number}"


def _card_charges(ctx: GenerationContext, when: date) -> str:
    return ctx.rng.pick(CARD_CHARGES)


def _emi(ctx: GenerationContext, when: date) -> str:
    loan = ctx.rng.pick(LOAN_TYPES)
    return f"EMI-{loan} LOAN-{ctx.rng.digits(11)}"


def _cheque_deposit(ctx: GenerationContext, when: date) -> str:
    return f"CHQ DEP-{ctx.rng.digits(6)}-CLR"


def _cheque_paid(ctx: GenerationContext, when: date) -> str:
    return f"CHQ PAID-{ctx.rng.digits(6)}"


def _standing_instruction(ctx: GenerationContext, when: date) -> str:
    kind = ctx.rng.pick(SI_TYPES)
    return f"{kind}-{ctx.rng.digits(8)}"


def _bill(ctx: GenerationContext, when: date) -> str:
    kind, provider = ctx.rng.pick(BILLS)
    return f"BBPS-{kind}-{provider}-{ctx.rng.digits(11)}"


def _branch_cash(action: str):
    def render(ctx: GenerationContext, when: date) -> str:
        rng = ctx.rng
        branch = rng.random_int(1000, 9999)
        return f"CASH {action}-BR{branch}-{rng.digits(9)}"

    return render


def _netbanking(is_debit: bool):
    def render(ctx: GenerationContext, when: date) -> str:
        return f"NETBANKING-{_side(is_debit)}-AXISBK-{ctx.rng.digits(12)}"

    return render


def _autopay(ctx: GenerationContext, when: date) -> str:
    merchant = ctx.rng.pick(AUTOPAY_MERCHANTS)
    return f"AUTOPAY-{merchant}-{ctx.rng.digits(8)}"


@register
class AxisProfile(BankStyleProfile):
    code = "AXIS"
    display_name = "Axis Bank"

    debits = (
        Category("upi", 40, _upi(True), UPI_SMALL_DEBIT),
        Category("neft", 5, _neft(True), NEFT_DEBIT),
        Category("rtgs", 1, _rtgs(True), LARGE_TRANSFER),
        Category("imps", 5, _imps(True), NEFT_DEBIT),
        Category("atm", 6, _atm, ATM_WITHDRAWAL),
        Category("pos", 12, _pos, POS_DEBIT),
        Category("emi", 6, _emi, LOAN_EMI),
        Category("cheque", 2, _cheque_paid, CHEQUE),
        Category("standing_instruction", 5, _standing_instruction, STANDING_INSTRUCTION),
        Category("bill", 6, _bill, BILL_PAYMENT),
        Category("branch_cash", 2, _branch_cash("WDL"), ATM_WITHDRAWAL),
        Category("netbanking", 4, _netbanking(True), NEFT_DEBIT),
        Category("autopay", 4, _autopay, SUBSCRIPTION),
        Category("card_charges", 2, _card_charges, BANK_CHARGES),
    )
    credits = (
        Category("upi", 50, _upi(False), UPI_CREDIT),
        Category("neft", 20, _neft(False), NEFT_CREDIT),
        Category("rtgs", 2, _rtgs(False), LARGE_TRANSFER),
        Category("imps", 12, _imps(False), UPI_CREDIT),
        Category("cheque", 6, _cheque_deposit, CHEQUE),
        Category("cash_deposit", 4, _branch_cash("DEP"), CASH_DEPOSIT, cash_deposit=True),
        Category("netbanking", 6, _netbanking(False), NEFT_CREDIT),
    )

    def salary_narration(self, employer: str, ctx: GenerationContext, when: date) -> Narration:
        ref_number = ctx.rng.digits(10)
        return Narration(f"SAL-CR-{employer.upper()[:15]}-NEFT-{ref_number}", "")

    def generate_reference(self, when: date, ctx: GenerationContext) -> str:
        return ""
