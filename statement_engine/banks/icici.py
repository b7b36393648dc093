"""ICICI Bank narration style (slash separated channel codes)."""
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
    RECHARGE,
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

NEFT_BANKS = ("HDFC", "SBIN", "UTIB", "IDFB", "KKBK", "BARB")

ATM_CITIES = (
    "MUMBAI", "DELHI", "BANGALORE", "PUNE", "HYDERABAD", "CHENNAI",
    "KOLKATA", "AHMEDABAD", "JAIPUR", "LUCKNOW", "KANPUR", "NAGPUR",
)

POS_MERCHANTS = (
    "AMAZON", "FLIPKART", "MYNTRA", "BIGBASKET", "SWIGGY", "ZOMATO",
    "UBER", "OLA", "BOOKMYSHOW", "MAKEMYTRIP", "DMart", "RELIANCE",
)

CARD_CHARGES = ("DC/ANNUAL/CHARGES", "DC/ATM/CHARGES", "DC/SMS/ALERT", "DC/MAINTENANCE")

LOAN_TYPES = ("HOME", "CAR", "PERSONAL", "EDUCATION")

SI_TYPES = ("SIP", "INSURANCE", "RD", "FD")

BILLERS = (
    "ELECTRICITY/MSEB", "GAS/IGL", "WATER/BMC", "MOBILE/AIRTEL",
    "MOBILE/JIO", "DTH/TATASKY", "BROADBAND/ACT", "INSURANCE/LIC",
)

AUTOPAY_SERVICES = ("NETFLIX", "AMAZON PRIME", "SPOTIFY", "GOOGLE ONE")

OPERATORS = ("AIRTEL", "JIO", "VI", "BSNL")


def _upi(is_debit: bool):
    def render(ctx: GenerationContext, when: date) -> str:
        rng = ctx.rng
        app = rng.pick(UPI_APPS)
        ref_number = rng.digits(12)
        if is_debit:
            merchant = rng.pick(UPI_MERCHANTS)
            return f"UPI/{merchant.upper()}/{app}@icici/{ref_number}"
        return f"UPI-CR/{app}@icici/{ref_number}"

    return render


def _imps(is_debit: bool):
    def render(ctx: GenerationContext, when: date) -> str:
        rng = ctx.rng
        ref_number = rng.digits(12)
        account_ref = rng.digits(8)
        return f"IMPS/{'DR' if is_debit else 'CR'}/ICICI{ref_number}/{account_ref}"

    return render


def _interbank(rail: str, is_debit: bool):
    def render(ctx: GenerationContext, when: date) -> str:
        rng = ctx.rng
        bank = rng.pick(NEFT_BANKS)
        ref_number = rng.digits(10)
        utr = f"ICIC{rng.digits(8)}"
        return f"{rail}/{'DR' if is_debit else 'CR'}/{bank}{ref_number}/{utr}"

    return render


def _atm(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    location = rng.pick(ATM_CITIES)
    atm_id = rng.digits(6)
    card = rng.digits(4)
    return f"ATM/WDL/{location}/{atm_id}/****{card}"


def _pos(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    merchant = rng.pick(POS_MERCHANTS)
    card = rng.digits(4)
    return f"POS/{merchant}/****{card}/{rng.digits(6)}"


def _emi(ctx: GenerationContext, when: date) -> str:
    loan = ctx.rng.pick(LOAN_TYPES)
    return f"EMI/{loan}/LOAN/{ctx.rng.digits(9)}"


def _cheque(direction: str):
    def render(ctx: GenerationContext, when: date) -> str:
        number = ctx.rng.digits(6)
        return f"CHQ/DEP/{number}/CLR" if direction == "DEP" else f"CHQ/PAY/{number}"

    return render


def _standing_instruction(ctx: GenerationContext, when: date) -> str:
    kind = ctx.rng.pick(SI_TYPES)
    return f"SI/{kind}/{ctx.rng.digits(8)}"


def _bill(ctx: GenerationContext, when: date) -> str:
    biller = ctx.rng.pick(BILLERS)
    return f"BILLPAY/{biller}/{ctx.rng.digits(12)}"


def _branch_cash(action: str):
    def render(ctx: GenerationContext, when: date) -> str:
        rng = ctx.rng
        ref_number = rng.digits(9)
        return f"CASH/{action}/BR{rng.random_int(100, 999)}/{ref_number}"

    return render


def _online_transfer(ctx: GenerationContext, when: date) -> str:
    return f"INET/TRF/{ctx.rng.digits(12)}"


def _autopay(ctx: GenerationContext, when: date) -> str:
    service = ctx.rng.pick(AUTOPAY_SERVICES)
    return f"AUTOPAY/{service}/{ctx.rng.digits(8)}"


def _recharge(ctx: GenerationContext, when: date) -> str:
    operator = ctx.rng.pick(OPERATORS)
    return f"RECHARGE/{operator}/{ctx.rng.digits(8)}"


def _card_charges(ctx: GenerationContext, when: date) -> str:
    return ctx.rng.pick(CARD_CHARGES)


@register
class IciciProfile(BankStyleProfile):
    code = "ICICI"
    display_name = "ICICI Bank"

    debits = (
        Category("upi", 40, _upi(True), UPI_SMALL_DEBIT),
        Category("imps", 6, _imps(True), NEFT_DEBIT),
        Category("neft", 4, _interbank("NEFT", True), NEFT_DEBIT),
        Category("atm", 6, _atm, ATM_WITHDRAWAL),
        Category("pos", 12, _pos, POS_DEBIT),
        Category("emi", 6, _emi, LOAN_EMI),
        Category("cheque", 2, _cheque("PAY"), CHEQUE),
        Category("standing_instruction", 4, _standing_instruction, STANDING_INSTRUCTION),
        Category("bill", 6, _bill, BILL_PAYMENT),
        Category("branch_cash", 2, _branch_cash("WDL"), ATM_WITHDRAWAL),
        Category("online_transfer", 3, _online_transfer, NEFT_DEBIT),
        Category("autopay", 4, _autopay, SUBSCRIPTION),
        Category("recharge", 3, _recharge, RECHARGE),
        Category("card_charges", 2, _card_charges, BANK_CHARGES),
    )
    credits = (
        Category("upi", 50, _upi(False), UPI_CREDIT),
        Category("imps", 15, _imps(False), UPI_CREDIT),
        Category("neft", 20, _interbank("NEFT", False), NEFT_CREDIT),
        Category("rtgs", 3, _interbank("RTGS", False), LARGE_TRANSFER),
        Category("cash_deposit", 4, _branch_cash("DEP"), CASH_DEPOSIT, cash_deposit=True),
        Category("cheque", 8, _cheque("DEP"), CHEQUE),
    )

    def salary_narration(self, employer: str, ctx: GenerationContext, when: date) -> Narration:
        rng = ctx.rng
        ref_number = rng.digits(12)
        name = employer.upper()
        formats = (
            f"SAL/CR/{name}/NEFT/{ref_number}",
            f"SALARY/{name}/{ref_number}",
            f"NEFT/CR/{name}/SAL/{ref_number}",
        )
        return Narration(rng.pick(formats), "")

    def generate_reference(self, when: date, ctx: GenerationContext) -> str:
        return ""
