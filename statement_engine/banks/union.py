"""Union Bank of India narration style.

Every row repeats its reference inside the narration, so renderers draw the
reference themselves and hand it back with the description.
"""
from __future__ import annotations

from datetime import date

from ..context import GenerationContext
from ..rng import SeededRng
from .base import BankStyleProfile, Category, Narration
from .common import (
    ATM_WITHDRAWAL,
    CASH_DEPOSIT,
    CHEQUE,
    LOAN_EMI,
    NEFT_CREDIT,
    NEFT_DEBIT,
    POS_DEBIT,
    UPI_CREDIT,
    UPI_SMALL_DEBIT,
)
from .registry import register
from .upi import weighted_choice

APPS = (
    ("PhonePe", 38),
    ("Google Pay", 33),
    ("Paytm", 16),
    ("Amazon Pay", 8),
    ("BHIM", 5),
)

P2P_HANDLES = ("@ybl", "@paytm", "@okaxis", "@okicici", "@ibl", "@unionbank", "@upi")
BUSINESS_HANDLES = ("@axisbank", "@icici", "@hdfcbank", "@paytm", "@ybl", "@unionbank")

PAYEES = (
    "rajesh.kumar", "amit.sharma", "priya.singh", "suresh.patel",
    "anjali.verma", "vikram.reddy", "neha.gupta", "rahul.jain",
    "pooja.shah", "manoj.yadav", "deepak.nair", "kavita.iyer",
    "sandeep.menon", "ritu.agarwal", "arun.pillai",
)

PAYERS = (
    "mukesh.aggarwal", "sunita.kapoor", "vikas.malhotra", "nisha.bansal",
    "ashok.saxena", "rekha.chopra", "rajiv.khanna", "anita.arora",
    "sanjay.bhatia", "meena.sethi", "gopal.taneja", "usha.sehgal",
    "pankaj.goel", "vandana.tiwari", "harish.mehta",
)

ONLINE_PAYEES = (
    "amazon.payments", "flipkart.payments", "myntra.shopping",
    "swiggy.food", "zomato.dining", "bookmyshow.tickets",
    "makemytrip.travel", "redbus.tickets", "bigbasket.grocery",
    "grofers.fresh", "dunzo.delivery", "urbancompany.services",
    "practo.health", "lenskart.eyewear", "nykaa.beauty",
)

ONLINE_PAYERS = (
    "freelance.payment", "consulting.fees", "tuition.income",
    "rental.collection", "commission.earned", "refund.zomato",
    "refund.amazon", "cashback.paytm", "reward.googlepay",
)

VYAPAR_PAYEES = (
    "ramelectronics", "jaiopticals", "shrimedical", "omkarhardware",
    "laxmitextiles", "ganeshjewellers", "sairamstores", "balajifootwear",
    "vishwafurniture", "krishnagarments", "mahalaxmisarees", "shivautomobiles",
)

VYAPAR_PAYERS = (
    "tradersassociation", "merchantguild", "shopkeeperunion",
    "retailernetwork", "vendorplatform", "businesshub",
)

ATM_CITIES = ("DELHI", "MUMBAI", "BANGALORE", "CHENNAI", "HYDERABAD", "PUNE", "KOLKATA")
CARD_MERCHANTS = ("AMAZON", "FLIPKART", "SWIGGY", "ZOMATO", "UBER")

IMPS_PAYEES = ("UTILITY BILL", "INSURANCE PREMIUM", "LOAN EMI", "CREDIT CARD")
NEFT_PAYEES = ("MUTUAL FUND", "INVESTMENT", "INSURANCE", "LOAN REPAYMENT")
IMPS_SOURCES = ("CLIENT PAYMENT", "REFUND", "DIVIDEND", "INTEREST")
NEFT_SOURCES = ("BUSINESS INCOME", "RENTAL INCOME", "COMMISSION", "BONUS")


def union_reference(rng: SeededRng) -> str:
    if rng.next() * 100 < 70:
        return rng.padded(12)
    return f"UTR{rng.padded(16)}"


def _mobile(rng: SeededRng) -> str:
    return f"91{rng.padded(10)}"


def _payee(rng: SeededRng) -> str:
    kind = weighted_choice(
        rng, (("qcode", 33), ("paytm_qr", 21), ("business", 23), ("p2p", 15), ("vyapar", 8))
    )
    if kind == "qcode":
        return f"Q{rng.padded(6)}@paytm"
    if kind == "paytm_qr":
        return f"paytmqr{rng.padded(8)}@paytm"
    if kind == "business":
        return f"{rng.pick(ONLINE_PAYEES)}{rng.pick(BUSINESS_HANDLES)}"
    if kind == "p2p":
        return f"{rng.pick(PAYEES)}{rng.pick(P2P_HANDLES)}"
    return f"{rng.pick(VYAPAR_PAYEES)}.vyapar@icici"


def _payer(rng: SeededRng) -> str:
    kind = weighted_choice(rng, (("p2p", 73), ("business", 16), ("vyapar", 11)))
    if kind == "p2p":
        return f"{rng.pick(PAYERS)}{rng.pick(P2P_HANDLES)}"
    if kind == "business":
        return f"{rng.pick(ONLINE_PAYERS)}{rng.pick(BUSINESS_HANDLES[:5])}"
    return f"{rng.pick(VYAPAR_PAYERS)}.vyapar@icici"


def _upi_debit(ctx: GenerationContext, when: date) -> Narration:
    rng = ctx.rng
    ref = union_reference(rng)
    recipient = _payee(rng)
    app = weighted_choice(rng, APPS)
    description = (
        f"UPI/{ref}/From:{_mobile(rng)}@unionbank/To:{recipient}/Payment from {app}"
    )
    return Narration(description, ref)


def _upi_credit(ctx: GenerationContext, when: date) -> Narration:
    rng = ctx.rng
    ref = union_reference(rng)
    sender = _payer(rng)
    app = weighted_choice(rng, APPS)
    description = f"UPI/{ref}/From:{sender}/To:{_mobile(rng)}@unionbank/Payment from {app}"
    return Narration(description, ref)


def _labelled(mode: str, labels: tuple[str, ...]):
    def render(ctx: GenerationContext, when: date) -> Narration:
        rng = ctx.rng
        ref = union_reference(rng)
        return Narration(f"{mode}-{rng.pick(labels)}-{ref}", ref)

    return render


def _atm(ctx: GenerationContext, when: date) -> Narration:
    rng = ctx.rng
    ref = union_reference(rng)
    return Narration(f"ATM WITHDRAWAL {rng.pick(ATM_CITIES)} {rng.padded(9)}", ref)


def _card(ctx: GenerationContext, when: date) -> Narration:
    rng = ctx.rng
    ref = union_reference(rng)
    return Narration(f"CARD POS {rng.pick(CARD_MERCHANTS)} {rng.padded(9)}", ref)


def _cash_deposit(ctx: GenerationContext, when: date) -> Narration:
    rng = ctx.rng
    ref = union_reference(rng)
    return Narration(f"CASH DEPOSIT BR:{rng.padded(4)}", ref)


def _cheque_deposit(ctx: GenerationContext, when: date) -> Narration:
    rng = ctx.rng
    ref = union_reference(rng)
    return Narration(f"CHEQUE DEPOSIT CHQ:{rng.padded(6)}", ref)


@register
class UnionProfile(BankStyleProfile):
    code = "UNION"
    display_name = "Union Bank of India"

    debits = (
        Category("upi", 80, _upi_debit, UPI_SMALL_DEBIT),
        Category("imps", 7, _labelled("IMPS", IMPS_PAYEES), LOAN_EMI),
        Category("neft", 6, _labelled("NEFT", NEFT_PAYEES), NEFT_DEBIT),
        Category("atm", 4, _atm, ATM_WITHDRAWAL),
        Category("card", 3, _card, POS_DEBIT),
    )
    credits = (
        Category("upi", 77, _upi_credit, UPI_CREDIT),
        Category("imps", 9, _labelled("IMPS", IMPS_SOURCES), UPI_CREDIT),
        Category("neft", 8, _labelled("NEFT", NEFT_SOURCES), NEFT_CREDIT),
        Category("cash_deposit", 4, _cash_deposit, CASH_DEPOSIT, cash_deposit=True),
        Category("cheque", 2, _cheque_deposit, CHEQUE),
    )

    def salary_narration(self, employer: str, ctx: GenerationContext, when: date) -> Narration:
        rng = ctx.rng
        name = employer.upper()
        mode = weighted_choice(rng, (("NEFT", 45), ("IMPS", 30), ("DIRECT", 25)))
        if mode == "NEFT":
            return Narration(f"NEFT-{name}-{rng.padded(12)}-SAL")
        if mode == "IMPS":
            return Narration(f"IMPS-{name}-{rng.padded(12)}")
        return Narration(f"SALARY CREDIT-{name}")

    def generate_reference(self, when: date, ctx: GenerationContext) -> str:
        return union_reference(ctx.rng)
