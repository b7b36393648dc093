"""Income profiles: where the money coming into the account comes from."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_DOWN, Decimal
from typing import Optional, Sequence

from .banks import BankStyleProfile
from .context import GenerationContext
from .models import CENT, ZERO, TransactionKind, to_money
from .scheduling import StatementWindow, salary_dates

SALARY_VARIANCE = 0.02
TURNOVER_FRACTION = (0.05, 0.25)


@dataclass(frozen=True, slots=True)
class IncomeEvent:
    """A scheduled credit produced by an income profile."""

    when: date
    description: str
    reference: str
    amount: Decimal
    kind: TransactionKind


@dataclass(frozen=True, slots=True)
class SalariedIncome:
    """Monthly salary paid at the start of each month."""

    salary: Decimal
    employer: str

    @classmethod
    def for_employer(
        cls, salary: Decimal, employer: str, custom_employer: Optional[str] = None
    ) -> "SalariedIncome":
        custom = (custom_employer or "").strip()
        return cls(salary=salary, employer=custom or employer)

    def schedule(self, window: StatementWindow, ctx: GenerationContext) -> list[Optional[date]]:
        return salary_dates(window, ctx.rng)

    def credit(
        self, when: date, profile: BankStyleProfile, ctx: GenerationContext
    ) -> IncomeEvent:
        salary = float(self.salary)
        amount = max(
            to_money(
                ctx.rng.random_float(salary * (1 - SALARY_VARIANCE), salary * (1 + SALARY_VARIANCE))
            ),
            CENT,
        )
        narration = profile.generate_salary_credit(self.employer, ctx, when)
        return IncomeEvent(
            when=when,
            description=narration.description,
            reference=narration.reference or "",
            amount=amount,
            kind=TransactionKind.SALARY,
        )


def split_turnover(turnover: Decimal, periods: int) -> list[Decimal]:
    """Even per-period shares; the last share absorbs the rounding."""

    if periods <= 0:
        return []
    share = (turnover / periods).quantize(CENT, rounding=ROUND_DOWN)
    shares = [share] * periods
    shares[-1] = turnover - share * (periods - 1)
    return shares


@dataclass(frozen=True, slots=True)
class SelfEmployedIncome:
    """Business turnover received as several receipts per month."""

    turnover: Decimal

    def period_shares(self, periods: int) -> list[Decimal]:
        return split_turnover(self.turnover, periods)

    def split_period(self, amount: Decimal, count: int, ctx: GenerationContext) -> list[Decimal]:
        """Decreasing-remainder split of one period's turnover.

        Each receipt takes a random fraction of what is still unassigned; the
        leftover is added to the first receipt so the parts sum to ``amount``
        exactly. Zero-value parts are dropped.
        """

        if count <= 0 or amount <= ZERO:
            return []
        remaining = amount
        parts: list[Decimal] = []
        for _ in range(count):
            fraction = ctx.rng.random_float(*TURNOVER_FRACTION)
            part = to_money(remaining * Decimal(repr(fraction)))
            parts.append(part)
            remaining -= part
        parts[0] += remaining
        return [part for part in parts if part > ZERO]

    def receipts(
        self,
        amounts: Sequence[Decimal],
        dates: Sequence[date],
        profile: BankStyleProfile,
        ctx: GenerationContext,
    ) -> list[IncomeEvent]:
        """Narrate each receipt in the bank's credit style, keeping our amount."""

        events = []
        for amount, when in zip(amounts, dates):
            rendered = profile.generate_transaction("credit", ctx, when)
            events.append(
                IncomeEvent(
                    when=when,
                    description=rendered.description,
                    reference=rendered.reference,
                    amount=amount,
                    kind=TransactionKind.TURNOVER,
                )
            )
        return events
