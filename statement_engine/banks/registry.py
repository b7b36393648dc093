"""Template code to bank style profile lookup."""
from __future__ import annotations

from typing import Dict, Type, TypeVar

from ..core.log import get_logger
from .base import BankStyleProfile

logger = get_logger(__name__)

P = TypeVar("P", bound=Type[BankStyleProfile])

_PROFILES: Dict[str, BankStyleProfile] = {}
FALLBACK_CODE = "GENERIC"


def register(profile_cls: P) -> P:
    """Class decorator adding one instance of ``profile_cls`` to the registry."""

    code = profile_cls.code.upper()
    if code in _PROFILES:
        raise ValueError(f"bank style {code} registered twice")
    _PROFILES[code] = profile_cls()
    return profile_cls


def get_profile(template: str) -> BankStyleProfile:
    """Return the profile for ``template``, falling back to the generic one."""

    profile = _PROFILES.get(template.strip().upper())
    if profile is None:
        logger.debug("No bank style registered for %s, using generic narrations", template)
        return _PROFILES[FALLBACK_CODE]
    return profile


def available_templates() -> list[str]:
    return sorted(code for code in _PROFILES if code != FALLBACK_CODE)
