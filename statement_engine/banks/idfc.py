"""IDFC First Bank narration style (slash separated, ``UPI/MOB`` prefixes)."""
from __future__ import annotations

from datetime import date

from ..context import GenerationContext
from .base import AmountTier, BankStyleProfile, Category, Narration, always_round
from .common import NEFT_CREDIT, NEFT_DEBIT
from .registry import register

UPI_APPS = ("PhonePe", "Google Pay", "Paytm", "Amazon Pay", "BHIM")

PERSON_NAMES = (
    "SATENDRA SINGH", "DEVENDRA", "RAVI KUMAR", "ANJALI SHARMA", "PRIYA PATEL",
    "RAHUL VERMA", "SUNITA GUPTA", "AMIT SINGH", "KRISHNA YADAV", "NEHA MISHRA",
)

MERCHANTS = (
    "SWIGGY", "ZOMATO", "AMAZON", "FLIPKART", "RELIANCE DIGITAL",
    "DMart", "Big Bazaar", "Myntra", "Uber", "Ola",
)

MANDATES = (
    "NETFLIX SUBSCRIPTION", "AMAZON PRIME MEMBERSHIP", "SPOTIFY PREMIUM",
    "JIO POSTPAID", "AIRTEL POSTPAID", "INSURANCE PREMIUM",
)

SERVICE_CHARGES = (
    "DEBIT CARD AMC", "SMS ALERT CHARGES", "ACCOUNT MAINTENANCE CHARGES", "CHEQUE BOOK CHARGES",
)

OPERATORS = ("JIO", "AIRTEL", "VI", "BSNL")
DTH_PROVIDERS = ("TATA SKY", "DISH TV", "AIRTEL DIGITAL TV", "VIDEOCON D2H")

# Whole rupee amounts.
APP_PAYMENT = always_round(AmountTier(1.0, 100, 5000), step=1)
PAY_REQUEST = always_round(AmountTier(1.0, 500, 8000), step=1)
MERCHANT_PAYMENT = always_round(AmountTier(1.0, 200, 3000), step=1)
POS_PAYMENT = always_round(AmountTier(1.0, 500, 8000), step=1)
UPI_RECEIVED = always_round(
    AmountTier(0.7, 200, 2500),
    AmountTier(0.2, 2500, 5000),
    AmountTier(0.1, 5000, 10000),
    step=1,
)
CASH_DEPOSIT = always_round(
    AmountTier(0.60, 3000, 10000),
    AmountTier(0.25, 10000, 20000),
    AmountTier(0.15, 20000, 35000),
    step=1,
)
EMI = always_round(
    AmountTier(1.0, 2500, 10000, choices=(2500, 3000, 3500, 4000, 5000, 6000, 7500, 8000, 10000))
)
CASH_WITHDRAWAL = always_round(
    AmountTier(1.0, 500, 10000, choices=(500, 1000, 2000, 2500, 3000, 4000, 5000, 10000))
)
AEPS_WITHDRAWAL = always_round(
    AmountTier(1.0, 500, 5000, choices=(500, 1000, 1500, 2000, 2500, 3000, 4000, 5000))
)
MANDATE = always_round(
    AmountTier(1.0, 199, 2500, choices=(199, 299, 399, 499, 599, 999, 1499, 2000, 2500))
)
SERVICE_CHARGE = always_round(AmountTier(1.0, 50, 300, choices=(50, 100, 150, 200, 250, 300)))
MOBILE_RECHARGE = always_round(AmountTier(1.0, 199, 999, choices=(199, 299, 399, 499, 699, 999)))
DTH_RECHARGE = always_round(AmountTier(1.0, 300, 1000, choices=(300, 400, 500, 600, 800, 1000)))


def _location(ctx: GenerationContext) -> str:
    return ctx.user_city


def _app_payment(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    app = rng.pick(UPI_APPS)
    return f"UPI/MOB/{rng.digits(12)}/Payment from {app}"


def _pay_request(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    name = rng.pick(PERSON_NAMES)
    return f"UPI/DR/{rng.digits(12)}/{name}/{rng.digits(7)}/Pay req"


def _received(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    name = rng.pick(PERSON_NAMES)
    return f"UPI/CR/{rng.digits(12)}/{name}/{rng.digits(7)}/Received"


def _merchant(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    merchant = rng.pick(MERCHANTS)
    return f"UPI/MOB/{rng.digits(12)}/Payment to {merchant}"


def _pos(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    ref_number = rng.digits(12)
    return f"POS/{ref_number}/{rng.pick(MERCHANTS)}/{_location(ctx)}"


def _atm(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    return f"ATM WDL/{rng.digits(6)}/{rng.digits(12)}/{_location(ctx)}"


def _aeps(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    txn_id = rng.digits(8)
    rrn = rng.digits(12)
    mobile = rng.random_int(90000000, 99999999)
    return f"MATM/AEPS/CD/{txn_id}/{rrn}/{_location(ctx)} BRANCH/{mobile}/Self"


def _emi(ctx: GenerationContext, when: date) -> str:
    return f"EMI DEBIT {ctx.rng.digits(9)}"


def _mandate(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    ref_number = rng.digits(9)
    return f"MANDATE DEBIT/{ref_number}/{rng.pick(MANDATES)}"


def _service_charge(ctx: GenerationContext, when: date) -> str:
    return ctx.rng.pick(SERVICE_CHARGES)


def _mobile_recharge(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    ref_number = rng.digits(12)
    return f"UPI/MOB/{ref_number}/Mobile Recharge {rng.pick(OPERATORS)}"


def _dth_recharge(ctx: GenerationContext, when: date) -> str:
    rng = ctx.rng
    ref_number = rng.digits(12)
    return f"UPI/MOB/{ref_number}/DTH Recharge {rng.pick(DTH_PROVIDERS)}"


def _neft(side: str, trailer: str):
    def render(ctx: GenerationContext, when: date) -> str:
        rng = ctx.rng
        ref_number = rng.digits(12)
        return f"NEFT/{side}/{ref_number}/{rng.pick(PERSON_NAMES)}/{trailer}"

    return render


def _cash_deposit(ctx: GenerationContext, when: date) -> str:
    return f"CASH DEPOSIT/{ctx.rng.digits(12)}/{_location(ctx)} BRANCH"


@register
class IdfcProfile(BankStyleProfile):
    code = "IDFC"
    display_name = "IDFC First Bank"

    debits = (
        Category("upi_app", 12, _app_payment, APP_PAYMENT),
        Category("upi_request", 12, _pay_request, PAY_REQUEST),
        Category("upi_merchant", 14, _merchant, MERCHANT_PAYMENT),
        Category("pos", 10, _pos, POS_PAYMENT),
        Category("atm", 10, _atm, CASH_WITHDRAWAL),
        Category("aeps", 4, _aeps, AEPS_WITHDRAWAL),
        Category("mobile_recharge", 9, _mobile_recharge, MOBILE_RECHARGE),
        Category("dth_recharge", 7, _dth_recharge, DTH_RECHARGE),
        Category("mandate", 9, _mandate, MANDATE),
        Category("emi", 5, _emi, EMI),
        Category("neft", 5, _neft("DR", "Transfer"), NEFT_DEBIT),
        Category("service_charge", 3, _service_charge, SERVICE_CHARGE),
    )
    credits = (
        Category("upi", 70, _received, UPI_RECEIVED),
        Category("neft", 20, _neft("CR", "Received"), NEFT_CREDIT),
        Category("cash_deposit", 10, _cash_deposit, CASH_DEPOSIT, cash_deposit=True),
    )

    def salary_narration(self, employer: str, ctx: GenerationContext, when: date) -> Narration:
        return Narration(f"SALARY CREDIT/{employer.upper() or 'ABC COMPANY'}/NEFT", "")

    def generate_reference(self, when: date, ctx: GenerationContext) -> str:
        return ""

