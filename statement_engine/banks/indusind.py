"""IndusInd Bank narration style (``CHANNEL/REF/DR|CR/...`` segments)."""
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

UPI_MERCHANTS = (
    "Goog", "YADA", "Bank", "SONU", "VISH", "Daya", "GAJR", "APNA", "Bhar",
    "JAIN", "PAYT", "PHON", "AMAZ", "FLIP", "SWIG", "ZOMA", "UBER", "RAPI",
)

BANK_CODES = ("UTIB", "YESB", "ICIC", "SBIN", "FDRL", "INDB", "HDFC", "AXIS")

UPI_HANDLES = (
    "harge@okpayaxis", "tmqr5yvj34@ptys", "yrecharge@icici", "ytm.s1lj9aj@pty",
    "Q550680659@ybl", "0071040013@fbpe", "7806070285@axl", "831927974@axl",
    "672916@hdfcbank", "paytm@paytm", "phonepe@ybl", "gpay@okaxis",
    "amazonpay@apl", "freecharge@icici", "mobikwik@icici",
)

ATM_CITIES = ("MUMBAI", "DELHI", "BANGALORE", "PUNE", "HYDERABAD", "CHENNAI")
POS_MERCHANTS = ("AMAZON", "FLIPKART", "SWIGGY", "ZOMATO", "DMart", "RELIANCE")
BILLERS = ("ELECTRICITY", "WATER", "GAS", "MOBILE", "DTH", "BROADBAND")
BRANCH_CODES = ("0001", "0012", "0023", "0045", "0067")
SI_TYPES = ("SIP", "LOAN", "INSURANCE", "RD")
LOAN_TYPES = ("HOME", "CAR", "PERSONAL", "EDUCATION")
AUTOPAY_SERVICES = ("NETFLIX", "AMAZON", "SPOTIFY", "YOUTUBE")


def _upi(side: str, trailer: str = ""):
    def render(ctx: GenerationContext, when: date) -> str:
        rng = ctx.rng
        ref_number = rng.digits(12)
        merchant = rng.pick(UPI_MERCHANTS)
        bank = rng.pick(BANK_CODES)
        handle = rng.pick(UPI_HANDLES)
        return f"UPI/{ref_number}/{side}/{merchant}/{bank}/{handle}{trailer}"

    return render


def _transfer(mode: str, side: str, trailer: str = ""):
    def render(ctx: GenerationContext, when: date) -> str:
        rng = ctx.rng
        ref_number = rng.digits(12)
        return f"{mode}/{ref_number}/{side}/{rng.pick(BANK_CODES)}{trailer}"

    return render


def _atm(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    city = rng.pick(ATM_CITIES)
    return f"ATM/{rng.digits(6)}/WDL/{city}"


def _pos(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    merchant = rng.pick(POS_MERCHANTS)
    ref_number = rng.digits(12)
    return f"POS/{ref_number}/DR/{merchant}/****{rng.digits(4)}"


def _bill(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    biller = rng.pick(BILLERS)
    return f"BILL/{rng.digits(12)}/DR/{biller}"


def _branch_cash(action: str):
    def render(ctx: GenerationContext, when: date) -> str:
        return f"CASH/{action}/BR/{ctx.rng.pick(BRANCH_CODES)}"

    return render


def _standing_instruction(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    kind = rng.pick(SI_TYPES)
    return f"SI/{kind}/{rng.digits(8)}"


def _emi(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    loan = rng.pick(LOAN_TYPES)
    return f"EMI/{loan}/{rng.digits(9)}"


def _cheque(action: str):
    def render(ctx: GenerationContext, when: date) -> str:
        return f"CHQ/{action}/{ctx.rng.digits(6)}"

    return render


def _recharge(ctx: GenerationContext, when: date) -> str:
    return f"UPI/{ctx.rng.digits(12)}/DR/Goog/UTIB/yrecharge@icici"


def _autopay(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    service = rng.pick(AUTOPAY_SERVICES)
    return f"AUTOPAY/{rng.digits(12)}/DR/{service}"


def _card_charges(ctx: GenerationContext, when: date) -> str:
    return f"DC/AMC/****{ctx.rng.digits(4)}"


def _sms_charges(ctx: GenerationContext, when: date) -> str:
    return "SMS/CHARGES/MONTHLY"


@register
class IndusindProfile(BankStyleProfile):
    code = "INDUSIND"
    display_name = "IndusInd Bank"

    debits = (
        Category("upi", 30, _upi("DR"), UPI_SMALL_DEBIT),
        Category("imps", 6, _transfer("IMPS", "DR"), NEFT_DEBIT),
        Category("neft", 6, _transfer("NEFT", "DR"), NEFT_DEBIT),
        Category("atm", 7, _atm, ATM_WITHDRAWAL),
        Category("pos", 10, _pos, POS_DEBIT),
        Category("bill", 7, _bill, BILL_PAYMENT),
        Category("branch_cash", 3, _branch_cash("WDL"), ATM_WITHDRAWAL),
        Category("standing_instruction", 5, _standing_instruction, STANDING_INSTRUCTION),
        Category("emi", 5, _emi, LOAN_EMI),
        Category("cheque", 3, _cheque("CLR"), CHEQUE),
        Category("recharge", 6, _recharge, RECHARGE),
        Category("autopay", 6, _autopay, SUBSCRIPTION),
        Category("card_charges", 3, _card_charges, BANK_CHARGES),
        Category("sms_charges", 3, _sms_charges, BANK_CHARGES),
    )
    credits = (
        Category("upi", 40, _upi("CR", "/"), UPI_CREDIT),
        Category("imps", 20, _transfer("IMPS", "CR", "/"), UPI_CREDIT),
        Category("neft", 20, _transfer("NEFT", "CR", "/"), NEFT_CREDIT),
        Category("cash_deposit", 10, _branch_cash("DEP"), CASH_DEPOSIT, cash_deposit=True),
        Category("cheque", 10, _cheque("DEP"), CHEQUE),
    )

    def salary_narration(self, employer: str, ctx: GenerationContext, when: date) -> Narration:
        compact = "".join(employer.upper().split())
        return Narration(f"SAL/{ctx.rng.digits(12)}/CR/{compact}/NEFT")

    def generate_reference(self, when: date, ctx: GenerationContext) -> str:
        return f"S{ctx.rng.digits(8)}"
