"""Generic reference codes used when a bank has no native format."""
from __future__ import annotations

from .rng import SeededRng

SALARY_PREFIXES = ("BULKPOSTING", "SALPAY", "NEFT", "IMPS")
SALARY_BANK_CODES = ("AXIS", "HDFC", "ICICI", "SBI", "PNB")
EMPLOYER_CODES = ("BJFIN", "INFY", "TECHM", "WIPRO", "PAYTM", "KOTAK")
CHANNELS = ("UPI", "QR", "NEFT", "IMPS")


def build_reference(label: str, rng: SeededRng) -> str:
    """Return a reference such as ``SALPAY/HDFC/INFY`` or ``QR/NEFT/4821``."""

    if "salary" in label.lower():
        prefix = rng.pick(SALARY_PREFIXES)
        bank = rng.pick(SALARY_BANK_CODES)
        employer = rng.pick(EMPLOYER_CODES)
        return f"{prefix}/{bank}/{employer}"

    segments = rng.shuffled(CHANNELS)[:2]
    number = rng.random_int(1000, 9999)
    return f"{'/'.join(segments)}/{number}"
