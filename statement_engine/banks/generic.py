"""Fallback narrations for templates without a dedicated style."""
from __future__ import annotations

from datetime import date

from ..context import GenerationContext
from .base import BankStyleProfile, Category, flat
from .common import REFUND, UPI_CREDIT
from .registry import register

BUSINESS_COUNTERPARTIES = (
    "ABC Traders",
    "Singh Electronics",
    "Mishra Wholesale",
    "UPI/Verma & Sons",
    "QR Payment Kiran Store",
    "NEFT/Global Enterprises",
    "UPI/Blue Ocean Supplies",
    "IMPS/Cityline Services",
    "QR/Gautam Industries",
    "UPI/Frontier Motors",
)

EVERYDAY_DEBIT = flat(200, 8500)


def _numbered(template: str, low: int, high: int):
    def render(ctx: GenerationContext, when: date) -> str:
        return template.format(ctx.rng.random_int(low, high))

    return render


def _counterparty(ctx: GenerationContext, when: date) -> str:
    return ctx.rng.pick(BUSINESS_COUNTERPARTIES)


def _person_transfer(ctx: GenerationContext, when: date) -> str:
    return f"IMPS/{ctx.person_name()}"


def _vendor_refund(ctx: GenerationContext, when: date) -> str:
    return f"Refund {ctx.rng.random_int(1000, 9999)}"


@register
class GenericProfile(BankStyleProfile):
    code = "GENERIC"
    display_name = "Generic"

    debits = (
        Category("upi", 1, _numbered("UPI/{}", 100000000, 999999999), EVERYDAY_DEBIT),
        Category("neft", 1, _numbered("NEFT/{}", 10000, 99999), EVERYDAY_DEBIT),
        Category("atm", 1, _numbered("ATM WDL {}", 1000, 9999), EVERYDAY_DEBIT),
        Category("pos", 1, _numbered("POS {}", 100000, 999999), EVERYDAY_DEBIT),
        Category("imps", 1, _numbered("IMPS/{}", 100000000, 999999999), EVERYDAY_DEBIT),
        Category("bill", 1, _numbered("Bill Payment {}", 1000, 9999), EVERYDAY_DEBIT),
        Category("online", 1, _numbered("Online Purchase {}", 1000, 9999), EVERYDAY_DEBIT),
    )
    credits = (
        Category("counterparty", 6, _counterparty, UPI_CREDIT),
        Category("person", 2, _person_transfer, UPI_CREDIT),
        Category("refund", 2, _vendor_refund, REFUND),
    )
