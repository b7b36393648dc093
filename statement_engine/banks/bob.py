"""Bank of Baroda narration style.

BOB narrations carry no separate reference; UPI rows embed the posting
date or time of day instead.
"""
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
    POS_DEBIT,
    STANDING_INSTRUCTION,
    UPI_CREDIT,
    UPI_SMALL_DEBIT,
)
from .registry import register

UPI_TRAILERS = (
    "464gjb8/Paytm", "056gjub/Pa", "ggujgb@icici", "mc5gaul/Pa",
    "776899509/paytm@paytm/p", "UPI/deepak.b", "UPI/98261057",
)

ATM_CITIES = (
    "MUMBAI", "DELHI", "BANGALORE", "PUNE", "HYDERABAD", "CHENNAI",
    "KOLKATA", "AHMEDABAD", "JAIPUR", "LUCKNOW", "KANPUR", "NAGPUR",
)

NEFT_BANKS = ("HDFC", "ICIC", "SBIN", "UTIB", "IDFB", "KKBK", "BARB")

BILLERS = (
    "ELECTRICITY-MSEB", "GAS-IGL", "WATER-BMC", "MOBILE-AIRTEL",
    "MOBILE-JIO", "DTH-TATASKY", "BROADBAND-ACT", "INSURANCE-LIC",
)

CARD_MERCHANTS = (
    "AMAZON", "FLIPKART", "MYNTRA", "BIGBASKET", "SWIGGY", "ZOMATO",
    "UBER", "OLA", "BOOKMYSHOW", "MAKEMYTRIP",
)

LOAN_TYPES = ("HOME", "CAR", "PERSONAL", "EDUCATION")
SI_TYPES = ("SIP", "INSURANCE", "RD", "FD")
SERVICE_CHARGES = ("ATM Charges", "Debit Card Annual Charges", "SMS Alert Charges")


def _month_tag(when: date) -> str:
    return when.strftime("%b").upper() + when.strftime(".%y")


def _clock(ctx: GenerationContext) -> str:
    rng = ctx.rng
    return f"{rng.random_int(10, 23)}-{rng.random_int(10, 59)}-{rng.random_int(10, 59)}"


def _upi_debit(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    ref_number = rng.digits(12)
    layout = rng.random_int(0, 2)
    if layout == 0:
        return f"UPI/{ref_number}/{when:%d-%m-%Y}"
    if layout == 1:
        return f"UPI/{ref_number}/{_clock(ctx)}/UPI/{rng.digits(8)}"
    stamp = f"{when:%d-%m}:{rng.random_int(10, 59)}"
    return f"UPI/{ref_number}/{stamp}/UPI/{rng.digits(8)}/{rng.pick(UPI_TRAILERS)}"


def _upi_credit(ctx: GenerationContext, when: date) -> str:
    return f"UPI/{ctx.rng.digits(12)}/{when:%d-%m-%Y}"


def _collect(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    ref_number = rng.digits(12)
    return f"UPI/{ref_number}/{_clock(ctx)}/UPI/{rng.digits(8)}"


def _imps_credit(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    ref_number = rng.digits(12)
    return f"IMPS-CR-BOB{ref_number}-{rng.digits(8)}"


def _neft_credit(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    bank = rng.pick(NEFT_BANKS)
    ref_number = rng.digits(10)
    return f"NEFT-CR-{bank}{ref_number}-{bank}{rng.digits(8)}"


def _atm(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    city = rng.pick(ATM_CITIES)
    return f"ATM WDL-{city}-{rng.digits(6)}-****{rng.digits(4)}"


def _bill(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    biller = rng.pick(BILLERS)
    return f"BILLPAY-{biller}-{rng.digits(12)}"


def _emi(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    loan = rng.pick(LOAN_TYPES)
    return f"EMI-{loan} LOAN-{rng.digits(9)}"


def _card(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    merchant = rng.pick(CARD_MERCHANTS)
    return f"DC-{merchant}-****{rng.digits(4)}"


def _service_charges(ctx: GenerationContext, when: date) -> str:
    options = (f"Service Charges for {_month_tag(when)}",) + SERVICE_CHARGES
    return ctx.rng.pick(options)


def _sms_charges(ctx: GenerationContext, when: date) -> str:
    return f"SMS Charges for {_month_tag(when)}"


def _loan_recovery(ctx: GenerationContext, when: date) -> str:
    return f"Loan Recovery For{ctx.rng.random_int(1, 9)}{ctx.rng.digits(12)}"


def _standing_instruction(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    kind = rng.pick(SI_TYPES)
    return f"SI-{kind}-{rng.digits(8)}"


def _cash_deposit(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    branch = rng.digits(3)
    return f"CASH DEP-BR{branch}-{rng.digits(9)}"


def _cheque_deposit(ctx: GenerationContext, when: date) -> str:
    return f"CHQ DEP-{ctx.rng.digits(6)}-CLR"


@register
class BobProfile(BankStyleProfile):
    code = "BOB"
    display_name = "Bank of Baroda"

    debits = (
        Category("upi", 30, _upi_debit, UPI_SMALL_DEBIT),
        Category("upi_collect", 10, _collect, UPI_SMALL_DEBIT),
        Category("atm", 10, _atm, ATM_WITHDRAWAL),
        Category("bill", 10, _bill, BILL_PAYMENT),
        Category("emi", 8, _emi, LOAN_EMI),
        Category("card", 12, _card, POS_DEBIT),
        Category("service_charges", 4, _service_charges, BANK_CHARGES),
        Category("sms_charges", 4, _sms_charges, BANK_CHARGES),
        Category("loan_recovery", 4, _loan_recovery, LOAN_EMI),
        Category("standing_instruction", 8, _standing_instruction, STANDING_INSTRUCTION),
    )
    credits = (
        Category("upi", 40, _upi_credit, UPI_CREDIT),
        Category("imps", 20, _imps_credit, UPI_CREDIT),
        Category("neft", 20, _neft_credit, NEFT_CREDIT),
        Category("cash_deposit", 10, _cash_deposit, CASH_DEPOSIT, cash_deposit=True),
        Category("cheque", 10, _cheque_deposit, CHEQUE),
    )

    def salary_narration(self, employer: str, ctx: GenerationContext, when: date) -> Narration:
        rng = ctx.rng
        name = employer.upper()
        ref_number = rng.digits(12)
        layouts = (
            f"SALARY FROM {name}-NEFT-{ref_number}",
            f"SAL CR-{name}-{ref_number}",
            f"{name}/SAL/{ref_number}",
        )
        return Narration(rng.pick(layouts), "")

    def generate_reference(self, when: date, ctx: GenerationContext) -> str:
        return ""
