"""Amount models and text pools shared by several bank styles."""
from __future__ import annotations

from .base import AmountTier, always_round, flat, mostly_round

# Amount models

UPI_SMALL_DEBIT = mostly_round(
    AmountTier(0.6, 50, 800, step=50),
    AmountTier(0.25, 800, 2500, step=100),
    AmountTier(0.15, 2500, 5000, step=500),
    probability=0.9,
)

POS_DEBIT = mostly_round(
    AmountTier(0.6, 500, 2500, choices=(500, 1000, 1500, 2000, 2500)),
    AmountTier(0.25, 2500, 5000, round_low=3000),
    AmountTier(0.15, 5000, 9000),
)

ATM_WITHDRAWAL = always_round(
    AmountTier(0.5, 500, 2000, choices=(500, 1000, 1500, 2000)),
    AmountTier(0.35, 2500, 5000, choices=(2500, 3000, 4000, 5000)),
    AmountTier(0.15, 7000, 10000, choices=(7000, 8000, 10000)),
)

EMI_DEBIT = mostly_round(AmountTier(1.0, 1500, 4500, round_low=2000, round_high=5000))

LOAN_EMI = mostly_round(
    AmountTier(0.6, 2000, 6000, step=500),
    AmountTier(0.4, 6000, 15000, step=500),
    probability=0.95,
)

BILL_PAYMENT = mostly_round(
    AmountTier(0.6, 200, 1500, step=100),
    AmountTier(0.4, 1500, 4000, step=500),
    probability=0.6,
)

RECHARGE = always_round(
    AmountTier(1.0, 155, 999, choices=(155, 199, 239, 299, 349, 479, 666, 719, 839, 999)),
)

SUBSCRIPTION = always_round(
    AmountTier(1.0, 99, 1499, choices=(99, 129, 149, 199, 299, 499, 649, 1499)),
)

BANK_CHARGES = flat(10, 200)

NEFT_DEBIT = mostly_round(
    AmountTier(0.7, 1500, 5000, round_low=2000),
    AmountTier(0.2, 5000, 10000),
    AmountTier(0.1, 10000, 18000),
    probability=0.9,
)

NEFT_CREDIT = mostly_round(
    AmountTier(0.7, 2000, 8000),
    AmountTier(0.2, 8000, 15000),
    AmountTier(0.1, 15000, 25000),
)

UPI_CREDIT = mostly_round(
    AmountTier(0.5, 1000, 3000),
    AmountTier(0.3, 3000, 6000),
    AmountTier(0.2, 6000, 12000),
)

CASH_DEPOSIT = always_round(
    AmountTier(0.6, 5000, 15000),
    AmountTier(0.25, 15000, 30000),
    AmountTier(0.15, 30000, 50000),
)

CASHBACK = flat(5, 500)

REFUND = mostly_round(
    AmountTier(0.7, 100, 1500, step=50),
    AmountTier(0.3, 1500, 5000, step=100),
    probability=0.5,
)

LARGE_TRANSFER = mostly_round(
    AmountTier(0.7, 25000, 60000, step=5000),
    AmountTier(0.3, 60000, 150000, step=10000),
    probability=0.9,
)

STANDING_INSTRUCTION = mostly_round(
    AmountTier(0.7, 500, 5000, step=500),
    AmountTier(0.3, 5000, 10000, step=1000),
    probability=0.95,
)

CHEQUE = mostly_round(
    AmountTier(0.6, 2000, 10000, step=500),
    AmountTier(0.4, 10000, 30000, step=1000),
    probability=0.7,
)

# Text pools

RETAIL_MERCHANTS = (
    "DMART", "RELIANCE SMART", "RELIANCE DIGITAL", "BIG BAZAAR", "MORE RETAIL",
    "SPENCERS", "CROMA", "WESTSIDE", "PANTALOONS", "SHOPPERS STOP", "APOLLO PHARMACY",
    "MEDPLUS", "HP PETROL PUMP", "INDIAN OIL", "BHARAT PETROLEUM",
)

INSURERS = (
    "LIC OF INDIA", "HDFC LIFE", "ICICI PRUDENTIAL", "SBI LIFE", "MAX LIFE", "STAR HEALTH",
)
