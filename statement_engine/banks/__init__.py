"""Bank style profiles.

Importing this package registers every bank module with the registry.
"""

from . import (  # noqa: F401
    axis,
    bob,
    canara,
    generic,
    hdfc,
    icici,
    idfc,
    indusind,
    iob,
    kotak,
    pnb,
    sbi,
    uco,
    union,
    yes,
)
from .base import AmountModel, AmountTier, BankStyleProfile, BankTransaction, Category, Narration
from .registry import available_templates, get_profile

__all__ = [
    "AmountModel",
    "AmountTier",
    "BankStyleProfile",
    "BankTransaction",
    "Category",
    "Narration",
    "available_templates",
    "get_profile",
]
