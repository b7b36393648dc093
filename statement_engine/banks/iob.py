"""Indian Overseas Bank narration style."""
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
    RECHARGE,
    STANDING_INSTRUCTION,
    UPI_CREDIT,
    UPI_SMALL_DEBIT,
)
from .registry import register

# Narrations truncate names at fourteen characters.
PERSON_NAMES = (
    "RUPESH PRAJAPA", "LATA WO DHARME", "MD SADIQUE ZEY", "SATYAM MASANI",
    "Omprakash Vis", "ABHISHEK MEHAR", "AKASH", "RAMASELVAM NAT",
    "SHAILENDRA VE", "NEETESH MEHARA", "Rakesh Kumar", "Sona Bai",
    "BHUPENDRA BHUP", "Kamal Singh", "SHUBHAM SO NAR", "Arun Prajapati",
    "ANIL BALMIK", "Suraj Kumar", "DEVENDRA BHILA", "SHARMILA GURJ",
    "SALONI BHADE", "KAJAL RATHORE", "MOHAMMAD MUJA", "VIVEK",
    "Om Kurmi", "SALMAN ALI", "Ms ANKITA KIRA", "Lakhan Mehatar",
    "Bhuli Bai", "Pawan Ahirwar", "MEMON SUHAN MO",
)

BANK_CODES = (
    "YES", "UCB", "IBK", "KKB", "UBI", "SBI", "BAR", "IND",
    "AIR", "UNB", "UTI", "IPO", "PUN", "IDI", "HDC", "AXI",
)

UPI_NOTES = ("Payment f", "Sent usin", "Paid via", "Pay to Bh", "Pay To Bh", "UPI")

RECHARGE_MERCHANTS = (
    "Jio Recharge", "Vodafone Idea", "Airtel Recharge", "Vi Recharge", "BSNL Recharge",
)

BILL_MERCHANTS = ("Poorvika resta", "Amazon Pay", "Paytm", "PhonePe", "Google Pay")

ACH_DEBITS = (
    "ARISTOSECURI", "INSURANCE PREMIUM", "SIP MUTUAL FUND", "LOAN EMI",
    "CREDIT CARD BILL", "UTILITY BILL", "SUBSCRIPTION",
)

ACH_CREDITS = ("PENSION CREDIT", "GOVT SUBSIDY", "DIVIDEND CREDIT")

ATM_CITIES = ("MUMBAI", "DELHI", "BANGALORE", "PUNE", "HYDERABAD", "CHENNAI")
BRANCH_CODES = ("3133", "3134", "3135", "3136", "3137")
SI_TYPES = ("SIP", "LOAN", "INSURANCE", "RD")
LOAN_TYPES = ("HOME", "CAR", "PERSONAL", "EDUCATION")


def _upi(side: str):
    def render(ctx: GenerationContext, when: date) -> str:
        rng = ctx.rng
        ref_number = rng.digits(12)
        name = ctx.unique_name(PERSON_NAMES)
        bank = rng.pick(BANK_CODES)
        return f"UPI/{ref_number}/{side}/{name}/{bank}/{rng.pick(UPI_NOTES)}"

    return render


def _recharge(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    ref_number = rng.digits(12)
    return f"UPI/{ref_number}/DR/ {rng.pick(RECHARGE_MERCHANTS)}/YES/Payment f"


def _bill(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    ref_number = rng.digits(12)
    merchant = rng.pick(BILL_MERCHANTS)
    return f"UPI/{ref_number}/DR/{merchant}/{rng.pick(BANK_CODES)}/Payment f"


def _transfer(mode: str, side: str):
    def render(ctx: GenerationContext, when: date) -> str:
        ref_number = ctx.rng.digits(12)
        return f"{mode}/{side}/{ref_number}/{ctx.unique_name(PERSON_NAMES)}"

    return render


def _ach(direction: str, payees: tuple[str, ...]):
    def render(ctx: GenerationContext, when: date) -> str:
        rng = ctx.rng
        payee = rng.pick(payees)
        return f"{direction}: TP ACH {payee} - IOBA{rng.digits(16)}"

    return render


def _atm(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    city = rng.pick(ATM_CITIES)
    return f"ATM WDL/{rng.digits(6)}/{city}/IOB"


def _branch_cash(action: str):
    def render(ctx: GenerationContext, when: date) -> str:
        return f"CASH {action}/BRANCH/{ctx.rng.pick(BRANCH_CODES)}/IOB"

    return render


def _cheque(action: str):
    def render(ctx: GenerationContext, when: date) -> str:
        return f"CHQ {action}/{ctx.rng.digits(6)}/IOB"

    return render


def _standing_instruction(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    kind = rng.pick(SI_TYPES)
    return f"SI/{kind}/{rng.digits(8)}/IOB"


def _emi(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    loan = rng.pick(LOAN_TYPES)
    return f"EMI/{loan} LOAN/{rng.digits(9)}/IOB"


def _card_charges(ctx: GenerationContext, when: date) -> str:
    return f"DC AMC/****{ctx.rng.digits(4)}/IOB"


def _sms_charges(ctx: GenerationContext, when: date) -> str:
    return "SMS CHARGES/MONTHLY/IOB"


@register
class IobProfile(BankStyleProfile):
    code = "IOB"
    display_name = "Indian Overseas Bank"

    debits = (
        Category("upi", 30, _upi("DR"), UPI_SMALL_DEBIT),
        Category("recharge", 7, _recharge, RECHARGE),
        Category("bill", 7, _bill, BILL_PAYMENT),
        Category("imps", 7, _transfer("IMPS", "DR"), NEFT_DEBIT),
        Category("neft", 6, _transfer("NEFT", "DR"), NEFT_DEBIT),
        Category("ach", 7, _ach("To", ACH_DEBITS), STANDING_INSTRUCTION),
        Category("atm", 8, _atm, ATM_WITHDRAWAL),
        Category("branch_cash", 4, _branch_cash("WDL"), ATM_WITHDRAWAL),
        Category("standing_instruction", 5, _standing_instruction, STANDING_INSTRUCTION),
        Category("emi", 6, _emi, LOAN_EMI),
        Category("cheque", 3, _cheque("CLR"), CHEQUE),
        Category("card_charges", 5, _card_charges, BANK_CHARGES),
        Category("sms_charges", 5, _sms_charges, BANK_CHARGES),
    )
    credits = (
        Category("upi", 40, _upi("CR"), UPI_CREDIT),
        Category("imps", 15, _transfer("IMPS", "CR"), UPI_CREDIT),
        Category("neft", 15, _transfer("NEFT", "CR"), NEFT_CREDIT),
        Category("ach", 10, _ach("From", ACH_CREDITS), NEFT_CREDIT),
        Category("cash_deposit", 10, _branch_cash("DEP"), CASH_DEPOSIT, cash_deposit=True),
        Category("cheque", 10, _cheque("DEP"), CHEQUE),
    )

    def salary_narration(self, employer: str, ctx: GenerationContext, when: date) -> Narration:
        name = " ".join(employer.upper().split())
        return Narration(f"SAL CR/{ctx.rng.digits(12)}/{name}/NEFT")

    def generate_reference(self, when: date, ctx: GenerationContext) -> str:
        return f"S{ctx.rng.digits(8)}"
