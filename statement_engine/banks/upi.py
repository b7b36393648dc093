"""Virtual payment address (VPA) generators shared by the UPI-heavy styles."""
from __future__ import annotations

from typing import Sequence, Tuple, TypeVar

from ..rng import SeededRng

T = TypeVar("T")

QR_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"

ONLINE_BUSINESSES = (
    "amazon", "flipkart", "swiggy", "zomato", "uber", "ola",
    "myntra", "ajio", "meesho", "blinkit", "zepto", "bigbasket",
    "jiomart", "makemytrip", "goibibo", "bookmyshow", "paytmmall",
    "netmeds", "pharmeasy", "lenskart", "nykaa", "snapdeal",
)

LOCAL_BUSINESSES = (
    "sairamstores", "lakshmimedical", "ganeshenterprises", "shivahardware",
    "radhakrishnaelectronics", "hanumantraders", "durgatextiles",
    "saraswatibooks", "venkateswaramobiles", "muruganpetroleum",
    "anjaneyadairy", "krishnasweets", "balajifurniture", "nagaopticals",
)


def weighted_choice(rng: SeededRng, options: Sequence[Tuple[T, float]]) -> T:
    """Cumulative walk over ``(value, weight)`` pairs with one draw.

    Weights need not sum to one; the draw is scaled by their total.
    """

    total = sum(weight for _, weight in options)
    roll = rng.next() * total
    cumulative = 0.0
    for value, weight in options:
        cumulative += weight
        if roll < cumulative:
            return value
    return options[0][0]


def phone_number(rng: SeededRng) -> str:
    """Ten digit mobile number starting with 7, 8 or 9."""

    return str(rng.random_int(7000000000, 7899999999) + rng.random_int(0, 2) * 100000000)


def person_vpa(
    rng: SeededRng,
    handles: Sequence[str],
    *,
    suffix_chance: float = 0.15,
    suffix_max: int = 9,
) -> str:
    """Phone based VPA, sometimes with a ``-N`` account suffix."""

    phone = phone_number(rng)
    handle = rng.pick(handles)
    if rng.chance(suffix_chance):
        return f"{phone}-{rng.random_int(1, suffix_max)}{handle}"
    return f"{phone}{handle}"


def qcode_vpa(rng: SeededRng) -> str:
    return f"Q{rng.digits(9)}@ybl"


def qr_hash(rng: SeededRng, length: int) -> str:
    return "".join(rng.pick(QR_ALPHABET) for _ in range(length))


def paytm_qr(rng: SeededRng, length: int = 8) -> str:
    return f"paytmqr{qr_hash(rng, length)}@ptys"


def business_vpa(
    rng: SeededRng,
    *,
    local_handles: Sequence[str],
    online_handles: Sequence[str],
    local_share: float = 0.35,
) -> str:
    """Merchant VPA; local shops carry an eight digit store number."""

    if rng.chance(local_share):
        business = rng.pick(LOCAL_BUSINESSES)
        return f"{business}.{rng.digits(8)}{rng.pick(local_handles)}"
    business = rng.pick(ONLINE_BUSINESSES)
    return f"{business}.{rng.pick(online_handles)}"


def vyapar_vpa(rng: SeededRng) -> str:
    return f"Vyapar.{rng.digits(12)}@hdfcbank"


def upi_narration(rng: SeededRng, sender: str, recipient: str, app: str) -> str:
    return f"UPI/{rng.digits(12)}/From:{sender}/To:{recipient}/{app}"
