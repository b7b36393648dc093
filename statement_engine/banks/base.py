"""Building blocks shared by every bank style profile.

A profile is a pair of weighted category tables (one for debits, one for
credits). Each category renders a narration in the bank's house style and
draws an amount from a tiered, round-biased distribution.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, ClassVar, Literal, NamedTuple, Optional, Sequence, Union

from ..context import GenerationContext
from ..models import to_money
from ..reference import build_reference
from ..rng import SeededRng

Direction = Literal["debit", "credit"]


class Narration(NamedTuple):
    """Description and (optional) native reference of one row."""

    description: str
    reference: Optional[str] = None


Renderer = Callable[[GenerationContext, date], Union[Narration, str]]


@dataclass(frozen=True, slots=True)
class AmountTier:
    """One magnitude band.

    ``share`` is the probability mass of the band. Continuous draws land in
    ``[low, high]``; round draws come from ``choices`` when given, otherwise
    from multiples of ``step`` inside ``[round_low, round_high]`` (defaulting
    to ``low`` / ``high``).
    """

    share: float
    low: float
    high: float
    step: Optional[int] = None
    choices: tuple[int, ...] = ()
    round_low: Optional[int] = None
    round_high: Optional[int] = None

    def round_value(self, rng: SeededRng, default_step: int) -> int:
        if self.choices:
            return rng.pick(self.choices)
        step = self.step or default_step
        low = self.round_low if self.round_low is not None else self.low
        high = self.round_high if self.round_high is not None else self.high
        first = max(1, math.ceil(low / step))
        last = max(first, math.floor(high / step))
        return rng.random_int(first, last) * step


@dataclass(frozen=True, slots=True)
class AmountModel:
    """Tiered amount distribution with a bias toward round figures."""

    tiers: tuple[AmountTier, ...]
    round_probability: float = 0.0
    step: int = 1000

    def __post_init__(self) -> None:
        if not self.tiers:
            raise ValueError("an amount model needs at least one tier")

    def pick_tier(self, rng: SeededRng) -> AmountTier:
        if len(self.tiers) == 1:
            return self.tiers[0]
        roll = rng.next()
        threshold = 0.0
        for tier in self.tiers:
            threshold += tier.share
            if roll < threshold:
                return tier
        return self.tiers[-1]

    def draw(self, rng: SeededRng) -> Decimal:
        tier = self.pick_tier(rng)
        probability = self.round_probability
        if probability >= 1:
            use_round = True
        elif probability <= 0:
            use_round = False
        else:
            use_round = rng.next() < probability
        if use_round:
            return to_money(tier.round_value(rng, self.step))
        return to_money(rng.random_float(tier.low, tier.high, 2))


def flat(low: float, high: float) -> AmountModel:
    """Single band, continuous amounts."""

    return AmountModel(tiers=(AmountTier(1.0, low, high),))


def always_round(*tiers: AmountTier, step: int = 1000) -> AmountModel:
    return AmountModel(tiers=tuple(tiers), round_probability=1.0, step=step)


def mostly_round(*tiers: AmountTier, probability: float = 0.98, step: int = 1000) -> AmountModel:
    return AmountModel(tiers=tuple(tiers), round_probability=probability, step=step)


@dataclass(frozen=True, slots=True)
class Category:
    """A weighted transaction category inside a profile's table."""

    name: str
    weight: int
    render: Renderer
    amount: AmountModel
    cash_deposit: bool = False


def weighted_pick(rng: SeededRng, categories: Sequence[Category]) -> Category:
    """First-fit walk over ``categories`` in declaration order."""

    total = sum(category.weight for category in categories)
    target = rng.random_int(1, total)
    for category in categories:
        if target <= category.weight:
            return category
        target -= category.weight
    return categories[0]


@dataclass(frozen=True, slots=True)
class BankTransaction:
    """A rendered, not yet scheduled, transaction."""

    description: str
    reference: str
    amount: Decimal
    category: str
    cash_deposit: bool = False


class BankStyleProfile:
    """Base class for bank specific narration tables.

    Subclasses set ``code`` and fill ``debits`` / ``credits``; most override
    :meth:`salary_narration` and :meth:`generate_reference` with their bank's
    native formats.
    """

    code: ClassVar[str] = "GENERIC"
    display_name: ClassVar[str] = "Generic"

    debits: ClassVar[tuple[Category, ...]] = ()
    credits: ClassVar[tuple[Category, ...]] = ()

    def generate_transaction(
        self, kind: Direction, ctx: GenerationContext, when: date
    ) -> BankTransaction:
        table = self.credits if kind == "credit" else self.debits
        category = weighted_pick(ctx.rng, table)
        rendered = category.render(ctx, when)
        narration = rendered if isinstance(rendered, Narration) else Narration(rendered)
        reference = narration.reference
        if reference is None:
            reference = self.generate_reference(when, ctx)
        amount = category.amount.draw(ctx.rng)
        return BankTransaction(
            description=narration.description,
            reference=reference,
            amount=amount,
            category=category.name,
            cash_deposit=category.cash_deposit,
        )

    def generate_salary_credit(
        self, employer: str, ctx: GenerationContext, when: date
    ) -> Narration:
        narration = self.salary_narration(employer, ctx, when)
        if narration.reference is None:
            return Narration(narration.description, self.generate_reference(when, ctx))
        return narration

    def salary_narration(self, employer: str, ctx: GenerationContext, when: date) -> Narration:
        return Narration(f"Salary from {employer}", build_reference("salary", ctx.rng))

    def generate_reference(self, when: date, ctx: GenerationContext) -> str:
        return build_reference("expense", ctx.rng)
