"""HDFC Bank narration style (hyphen separated, ``Chq./Ref.No.`` column)."""
from __future__ import annotations

from datetime import date

from ..context import GenerationContext
from .base import AmountTier, AmountModel, BankStyleProfile, Category, Narration, flat
from .registry import register

INDIAN_NAMES = (
    "SATENDRA SINGH PARIHAR", "DEVANSHU MISHRA", "RAVI SADHWANI", "JYOTI SISODIYA",
    "DHARMENDRA VISHWAKA", "AADHAR HOUSING", "DEVANSH MISHRA", "SATENDRA SINGH",
    "MISHRA", "SADHWANI", "SISODIYA", "VISHWAKA", "PARIHAR",
)

BANK_CODES = ("ICIC", "SBIN", "HDFC", "AXIS", "YESB", "KKBK", "PUNB", "UBIN", "IDIB")

VPA_SUFFIXES = ("AXL", "YBL", "PAYTM", "OK")

NEFT_INSTITUTIONS = ("AADHAR HOUSING FINANCE LIMITED", "UTIB", "AXIS BANK", "ICICI BANK")

CARD_MERCHANTS = ("GOOGLE PAYMENT", "AMAZON PAY", "SWIGGY", "ZOMATO", "BIG BAZAAR", "DMart")

ACH_INSTITUTIONS = ("AADHAR HOUSING FINAN", "BAJAJ FINANCE", "HDFC BANK LTD", "ICICI BANK")

SALARY_BANK_CODES = ("ICIC", "SBIN", "HDFC", "AXIS")

UPI_CREDIT = AmountModel(
    tiers=(
        AmountTier(0.7, 100, 2000),
        AmountTier(0.2, 2000, 5000),
        AmountTier(0.1, 5000, 10000),
    )
)
UPI_DEBIT = AmountModel(
    tiers=(
        AmountTier(0.75, 50, 1500),
        AmountTier(0.17, 1500, 4000),
        AmountTier(0.08, 4000, 8000),
    )
)
NEFT_CREDIT = AmountModel(
    tiers=(
        AmountTier(0.7, 2000, 8000),
        AmountTier(0.2, 8000, 15000),
        AmountTier(0.1, 15000, 25000),
    )
)
NEFT_DEBIT = AmountModel(
    tiers=(
        AmountTier(0.7, 1500, 5000),
        AmountTier(0.2, 5000, 10000),
        AmountTier(0.1, 10000, 18000),
    )
)


def _ref12(ctx: GenerationContext) -> str:
    return ctx.rng.digits(12)


def _upi(is_credit: bool):
    def render(ctx: GenerationContext, when: date) -> Narration:
        rng = ctx.rng
        name = rng.pick(INDIAN_NAMES)
        bank_code = rng.pick(BANK_CODES)
        ref_number = rng.digits(12)
        upi_ref = rng.random_int(300000000000, 399999999999)
        vpa = f"{rng.digits(10)}@{rng.pick(VPA_SUFFIXES)}"
        branch = rng.padded(7)
        direction = "FROM" if is_credit else "TO"
        narration = (
            f"UPI-{name[:20]}-{vpa}-{bank_code}{branch}-{ref_number}-PAYMENT {direction} PH ONE"
        )
        return Narration(narration, str(upi_ref))

    return render


def _neft(is_credit: bool):
    def render(ctx: GenerationContext, when: date) -> Narration:
        rng = ctx.rng
        name = rng.pick(INDIAN_NAMES)
        bank_code = rng.pick(BANK_CODES)
        ref_number = rng.digits(12)
        institution = rng.pick(NEFT_INSTITUTIONS)
        prefix = "NEFT CR" if is_credit else "NEFT"
        utr = rng.padded(10)
        narration = f"{prefix}-{bank_code}{utr}-{institution}-{name}-AXISP {ref_number}"
        return Narration(narration, f"AXISP{rng.digits(9)}")

    return render


def _autopay(ctx: GenerationContext, when: date) -> Narration:
    card = ctx.rng.digits(13)
    return Narration(f"CC {card} AUTOPAY SI-TAD", _ref12(ctx))


def _installment(ctx: GenerationContext, when: date) -> Narration:
    rng = ctx.rng
    name = rng.pick(INDIAN_NAMES)
    serial = rng.random_int(1000, 9999)
    return Narration(f"RD BOOKED/INSTALLMENT PAID -{rng.digits(10)}/{serial}-{name}", _ref12(ctx))


def _debit_card(ctx: GenerationContext, when: date) -> Narration:
    rng = ctx.rng
    merchant = rng.pick(CARD_MERCHANTS)
    ref_number = rng.digits(12)
    return Narration(f"DC-{merchant}-{ref_number[:10]}", _ref12(ctx))


def _sms_charge(ctx: GenerationContext, when: date) -> Narration:
    ref_number = ctx.rng.digits(12)
    period = f"{when.strftime('%b').upper()}{when.strftime('%y')}"
    return Narration(f"{period} INSTAALERTCHG 2 SMS {ref_number}", f"MIR2{ref_number}")


def _ach(ctx: GenerationContext, when: date) -> Narration:
    rng = ctx.rng
    institution = rng.pick(ACH_INSTITUTIONS)
    return Narration(f"ACH D- {institution}-V{rng.digits(11)}", _ref12(ctx))


@register
class HdfcProfile(BankStyleProfile):
    code = "HDFC"
    display_name = "HDFC Bank"

    credits = (
        Category("upi", 60, _upi(True), UPI_CREDIT),
        Category("neft", 30, _neft(True), NEFT_CREDIT),
        Category("rd_installment", 10, _installment, flat(500, 5000)),
    )
    debits = (
        Category("upi", 50, _upi(False), UPI_DEBIT),
        Category("debit_card", 17, _debit_card, flat(100, 3000)),
        Category("sms_charge", 3, _sms_charge, flat(0.1, 10)),
        Category("ach", 15, _ach, flat(1000, 10000)),
        Category("autopay", 10, _autopay, flat(500, 10000)),
        Category("neft", 5, _neft(False), NEFT_DEBIT),
    )

    def salary_narration(self, employer: str, ctx: GenerationContext, when: date) -> Narration:
        rng = ctx.rng
        bank_code = rng.pick(SALARY_BANK_CODES)
        ref_number = rng.digits(12)
        utr = rng.padded(10)
        narration = f"NEFT CR-{bank_code}{utr}-{employer.upper()}-AXISP {ref_number}"
        return Narration(narration, f"AXISP{rng.digits(9)}")

    def generate_reference(self, when: date, ctx: GenerationContext) -> str:
        return _ref12(ctx)
