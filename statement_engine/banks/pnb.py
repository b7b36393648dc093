"""Punjab National Bank narration style (two line narrations)."""
from __future__ import annotations

from datetime import date

from ..context import GenerationContext
from .base import BankStyleProfile, Category, Narration
from .common import (
    ATM_WITHDRAWAL,
    BILL_PAYMENT,
    CASH_DEPOSIT,
    INSURERS,
    LOAN_EMI,
    NEFT_CREDIT,
    NEFT_DEBIT,
    POS_DEBIT,
    RECHARGE,
    STANDING_INSTRUCTION,
    UPI_CREDIT,
    UPI_SMALL_DEBIT,
)
from .registry import register

UPI_IDS = (
    "paytm@paytm", "yesbank@ybl", "icici@icici", "okaxis@okaxis", "okhdfcbank@hdfcbank",
    "oksbi@sbi", "okicici@icici", "axisbank@axl", "idfcbank@idfcbank", "boi@boi",
)

UPI_PAYEES = ("GUMMI", "CUMMI", "BAJUBIN", "YESBIN", "BA/UBIN", "COMMUNICATI", "C VEST")

NEFT_BANKS = ("YESB", "HDFC", "SBIN", "ICIC", "UTIB", "IDFB")

ATM_CITIES = (
    "MUMBAI", "DELHI", "BANGALORE", "PUNE", "HYDERABAD",
    "CHENNAI", "KOLKATA", "AHMEDABAD", "BHOPAL", "INDORE",
)

POS_MERCHANTS = (
    "BIG BAZAAR", "RELIANCE RETAIL", "DMart", "MORE SUPERMARKET", "EASY DAY",
    "VISHAL MEGA MART", "SPENCER'S", "NILGIRIS", "FOODWORLD", "HYPERCITY",
)

OPERATORS = {
    "MOBILE": ("AIRTEL", "JIO", "VI", "BSNL"),
    "DTH": ("TATA SKY", "DISH TV", "AIRTEL DTH", "SUN DIRECT"),
}

BILLS = (
    ("ELECTRICITY", "MSEDCL"),
    ("ELECTRICITY", "BESCOM"),
    ("WATER", "MUNICIPAL CORP"),
    ("GAS", "MAHANAGAR GAS"),
)

LOAN_TYPES = ("HOME LOAN", "CAR LOAN", "PERSONAL LOAN", "EDUCATION LOAN")


def _upi(side: str, trailer: str):
    def render(ctx: GenerationContext, when: date) -> str:
        rng = ctx.rng
        ref_number = rng.digits(12)
        upi_id = rng.pick(UPI_IDS)
        payee = rng.pick(UPI_PAYEES)
        account = rng.random_int(700000000, 799999999)
        return f"UPI/{side}/{ref_number}/{payee}\nBA/UBIN/{account}/{upi_id}{trailer}"

    return render


def _neft_out(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    bank = rng.pick(NEFT_BANKS)
    account_ref = rng.digits(9)
    return f"NEFT_OUT-{bank}{rng.digits(8)}/{account_ref}/TO {ctx.user_city}\nTRANSFER"


def _neft_in(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    bank = rng.pick(NEFT_BANKS)
    account_ref = rng.digits(9)
    return f"NEFT_IN-00{bank}{rng.digits(8)}/{account_ref}/{bank}0{rng.digits(6)}\nCOMMUNICATI"


def _imps(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    ref_number = rng.digits(12)
    return f"IMPS-INV{ref_number}/{rng.digits(9)}/{rng.digits(6)}"


def _atm(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    city = rng.pick(ATM_CITIES)
    return f"ATM WDL {city} {rng.digits(6)}/{rng.digits(12)}"


def _pos(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    merchant = rng.pick(POS_MERCHANTS)
    return f"POS {merchant} {rng.digits(3)}/{rng.digits(12)}"


def _recharge(kind: str):
    def render(ctx: GenerationContext, when: date) -> str:
        rng = ctx.rng
        operator = rng.pick(OPERATORS[kind])
        return f"{kind} RECHARGE {operator}\nUPI/DR/{rng.digits(11)}"

    return render


def _bill(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    name, provider = rng.pick(BILLS)
    return f"{name} BILL {provider}\nUPI/DR/{rng.digits(11)}"


def _emi(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    loan = rng.pick(LOAN_TYPES)
    return f"EMI {loan}\nA/C NO-{rng.digits(11)}"


def _insurance(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    company = rng.pick(INSURERS)
    return f"INSURANCE PREMIUM {company}\nPOLICY/{rng.digits(10)}"


def _cash_deposit(ctx: GenerationContext, when: date) -> str:
    return f"CASH DEPOSIT\nCDM/{ctx.rng.digits(9)}"


@register
class PnbProfile(BankStyleProfile):
    code = "PNB"
    display_name = "Punjab National Bank"

    debits = (
        Category("upi", 30, _upi("DR", "/p"), UPI_SMALL_DEBIT),
        Category("neft", 8, _neft_out, NEFT_DEBIT),
        Category("atm", 10, _atm, ATM_WITHDRAWAL),
        Category("pos", 12, _pos, POS_DEBIT),
        Category("mobile_recharge", 8, _recharge("MOBILE"), RECHARGE),
        Category("dth_recharge", 6, _recharge("DTH"), RECHARGE),
        Category("bill", 10, _bill, BILL_PAYMENT),
        Category("emi", 8, _emi, LOAN_EMI),
        Category("insurance", 8, _insurance, STANDING_INSTRUCTION),
    )
    credits = (
        Category("upi", 40, _upi("CR", ""), UPI_CREDIT),
        Category("neft", 25, _neft_in, NEFT_CREDIT),
        Category("imps", 20, _imps, UPI_CREDIT),
        Category("cash_deposit", 15, _cash_deposit, CASH_DEPOSIT, cash_deposit=True),
    )

    def salary_narration(self, employer: str, ctx: GenerationContext, when: date) -> Narration:
        rng = ctx.rng
        description = f"SALARY CREDIT FROM {employer.upper()}\nNEFT-{rng.digits(9)}"
        return Narration(description, rng.digits(8))

    def generate_reference(self, when: date, ctx: GenerationContext) -> str:
        return ctx.rng.digits(8)
