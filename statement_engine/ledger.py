"""Ledger builder: turns validated parameters and a seed into a Statement.

The pipeline runs::

    schedule income -> allocate budget -> emit per period -> sort
    -> filter to window -> recompute balances -> repair negative balance
    -> target closing balance -> assign times -> recompute balances

Every random draw comes from the build's :class:`GenerationContext`, so the
same parameters and seed always produce the same rows.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Optional, Sequence

from .banks import BankStyleProfile, get_profile
from .context import GenerationContext
from .core.config import Settings, get_settings
from .core.formatting import format_inr
from .core.log import get_logger, log_context, timeit
from .exceptions import InvalidParametersError
from .income import IncomeEvent, SalariedIncome, SelfEmployedIncome
from .models import (
    CENT,
    ZERO,
    GenerationOptions,
    Statement,
    StatementMeta,
    Transaction,
    TransactionKind,
    to_money,
)
from .reference import build_reference
from .scheduling import (
    Period,
    StatementWindow,
    allocate_budget,
    in_blackout,
    resolve_window,
    snap_to_weekday,
    split_share,
)
from .schemas import SalariedParams, SelfEmployedParams, StatementParams

logger = get_logger(__name__)

SALARIED_INTEREST_RANGE = (35, 420)
SELF_EMPLOYED_INTEREST_RATE = (0.003, 0.006)
MIN_SELF_EMPLOYED_INTEREST = 25
SALARIED_INTEREST_NARRATION = "INT. CREDIT"
SELF_EMPLOYED_INTEREST_NARRATION = "INT.CREDIT"

TURNOVER_CREDIT_SHARE = 0.6
BUSINESS_DEBIT_RATIO = (0.4, 0.9)
BUSINESS_DEBIT_LAG_DAYS = (1, 4)
DEFAULT_SELF_EMPLOYED_COUNT = (100, 300)

EXTRA_CREDIT_SPREAD_DAYS = 2
CASH_DEPOSIT_EARLY_DAYS = (10, 20)
CASH_DEPOSIT_LATE_DAYS = (2, 10)

OPENING_NARRATION = "Opening Balance Credit\nFunds Transfer"
CLOSING_CREDIT_NARRATION = "Funds Transfer Credit"
CLOSING_DEBIT_NARRATION = "Funds Transfer Debit"


@dataclass(slots=True)
class _LedgerEntry:
    """A dated, signed movement that has not been ordered or timed yet."""

    when: date
    description: str
    reference: str
    amount: Decimal
    kind: TransactionKind

    @classmethod
    def from_income(cls, event: IncomeEvent) -> "_LedgerEntry":
        return cls(event.when, event.description, event.reference, event.amount, event.kind)


def _check_params(params: StatementParams) -> None:
    if params.starting_balance < 0:
        raise InvalidParametersError(
            "starting balance cannot be negative", field="starting_balance"
        )
    if params.number_of_transactions < 0:
        raise InvalidParametersError(
            "number of transactions cannot be negative", field="number_of_transactions"
        )
    if params.closing_balance is not None and params.closing_balance < 0:
        raise InvalidParametersError(
            "closing balance cannot be negative", field="closing_balance"
        )


# --------------------------------------------------------------------------- #
# Emission                                                                     #
# --------------------------------------------------------------------------- #


def _debit_date(period: Period, payday: Optional[date], ctx: GenerationContext) -> date:
    tuning = ctx.tuning
    when = period.random_day(ctx.rng)
    attempts = 0
    while attempts < tuning.resample_attempts and in_blackout(
        when, payday, tuning.salary_blackout_before_days, tuning.salary_blackout_after_days
    ):
        when = period.random_day(ctx.rng)
        attempts += 1
    return when


def _extra_credit_date(
    period: Period,
    debit_day: date,
    payday: Optional[date],
    cash_deposit: bool,
    ctx: GenerationContext,
) -> date:
    """Date a refund-like credit near its debit.

    Cash deposits are kept out of the days just before payday; they are moved
    one to three weeks earlier, or a few days after payday when that would
    leave the period.
    """

    rng = ctx.rng
    tuning = ctx.tuning
    offset = rng.random_int(-EXTRA_CREDIT_SPREAD_DAYS, EXTRA_CREDIT_SPREAD_DAYS)
    when = period.clamp(debit_day + timedelta(days=offset))
    if not cash_deposit or payday is None:
        return when

    attempts = 0
    while attempts < tuning.resample_attempts and in_blackout(
        when,
        payday,
        tuning.cash_deposit_blackout_before_days,
        tuning.cash_deposit_blackout_after_days,
    ):
        candidate = payday - timedelta(days=rng.random_int(*CASH_DEPOSIT_EARLY_DAYS))
        if candidate < period.start:
            late = rng.random_int(*CASH_DEPOSIT_LATE_DAYS)
            candidate = period.clamp(payday + timedelta(days=late))
        when = candidate
        attempts += 1
    return when


def _salaried_interest(period: Period, ctx: GenerationContext) -> _LedgerEntry:
    rng = ctx.rng
    when = snap_to_weekday(period.random_day(rng), period.start, period.end)
    amount = to_money(rng.random_float(*SALARIED_INTEREST_RANGE))
    return _LedgerEntry(
        when=when,
        description=SALARIED_INTEREST_NARRATION,
        reference=build_reference("interest", rng),
        amount=amount,
        kind=TransactionKind.INTEREST,
    )


def _self_employed_interest(
    period: Period, balance: Decimal, ctx: GenerationContext
) -> _LedgerEntry:
    rng = ctx.rng
    when = snap_to_weekday(period.random_day(rng), period.start, period.end)
    base = float(max(balance, ZERO))
    low, high = SELF_EMPLOYED_INTEREST_RATE
    amount = max(rng.random_float(base * low, base * high), MIN_SELF_EMPLOYED_INTEREST)
    return _LedgerEntry(
        when=when,
        description=SELF_EMPLOYED_INTEREST_NARRATION,
        reference=build_reference("interest", rng),
        amount=to_money(amount),
        kind=TransactionKind.INTEREST,
    )


def _salaried_entries(
    params: SalariedParams,
    window: StatementWindow,
    profile: BankStyleProfile,
    ctx: GenerationContext,
) -> list[_LedgerEntry]:
    rng = ctx.rng
    tuning = ctx.tuning
    income = SalariedIncome.for_employer(
        params.salary_amount, params.employer, params.custom_employer
    )
    paydays = income.schedule(window, ctx)
    income_count = sum(1 for payday in paydays if payday is not None)
    reserved = income_count + len(window.periods)
    budgets = allocate_budget(params.number_of_transactions, len(window.periods), reserved)
    logger.debug(
        "Scheduled %d salary credits, %d rows left for spending over %d periods",
        income_count,
        sum(budgets),
        len(window.periods),
    )

    entries: list[_LedgerEntry] = []
    for period, payday, budget in zip(window.periods, paydays, budgets):
        if period.is_empty:
            continue
        if payday is not None:
            entries.append(_LedgerEntry.from_income(income.credit(payday, profile, ctx)))

        remaining = budget
        while remaining > 0:
            when = _debit_date(period, payday, ctx)
            debit = profile.generate_transaction("debit", ctx, when)
            entries.append(
                _LedgerEntry(
                    when, debit.description, debit.reference, -debit.amount, TransactionKind.DEBIT
                )
            )
            remaining -= 1

            if remaining > 0 and rng.next() > 1 - tuning.extra_credit_probability:
                credit = profile.generate_transaction("credit", ctx, when)
                credit_day = _extra_credit_date(period, when, payday, credit.cash_deposit, ctx)
                entries.append(
                    _LedgerEntry(
                        credit_day,
                        credit.description,
                        credit.reference,
                        credit.amount,
                        TransactionKind.CREDIT,
                    )
                )
                remaining -= 1

        entries.append(_salaried_interest(period, ctx))
    return entries


def _self_employed_entries(
    params: SelfEmployedParams,
    window: StatementWindow,
    profile: BankStyleProfile,
    ctx: GenerationContext,
) -> list[_LedgerEntry]:
    rng = ctx.rng
    income = SelfEmployedIncome(params.turnover)
    count = params.number_of_transactions or rng.random_int(*DEFAULT_SELF_EMPLOYED_COUNT)
    remaining = max(0, count - window.duration)
    credit_total, debit_total = split_share(remaining, TURNOVER_CREDIT_SHARE)

    periods = window.active_periods
    credit_counts = [max(1, n) for n in allocate_budget(credit_total, len(periods), 0)]
    debit_counts = allocate_budget(debit_total, len(periods), 0)
    shares = income.period_shares(len(periods))
    logger.debug(
        "Splitting turnover %s into %d receipts and %d business debits",
        format_inr(params.turnover),
        sum(credit_counts),
        sum(debit_counts),
    )

    entries: list[_LedgerEntry] = []
    balance = params.starting_balance
    for period, share, credits, debits in zip(periods, shares, credit_counts, debit_counts):
        amounts = income.split_period(share, credits, ctx)
        dates = [period.random_day(rng) for _ in amounts]
        receipts = income.receipts(amounts, dates, profile, ctx)
        for receipt in receipts:
            entries.append(_LedgerEntry.from_income(receipt))
            balance += receipt.amount

        for _ in range(debits if receipts else 0):
            source = rng.pick(receipts)
            ratio = rng.random_float(*BUSINESS_DEBIT_RATIO)
            amount = max(to_money(source.amount * Decimal(repr(ratio))), CENT)
            lag = rng.random_int(*BUSINESS_DEBIT_LAG_DAYS)
            when = period.clamp(source.when + timedelta(days=lag))
            debit = profile.generate_transaction("debit", ctx, when)
            entries.append(
                _LedgerEntry(
                    when, debit.description, debit.reference, -amount, TransactionKind.DEBIT
                )
            )
            balance -= amount

        interest = _self_employed_interest(period, balance, ctx)
        entries.append(interest)
        balance += interest.amount
    return entries


# --------------------------------------------------------------------------- #
# Finalisation                                                                 #
# --------------------------------------------------------------------------- #


def _lowest_balance(entries: Sequence[_LedgerEntry], opening: Decimal) -> Decimal:
    balance = opening
    lowest = opening
    for entry in entries:
        balance += entry.amount
        lowest = min(lowest, balance)
    return lowest


def _repair_negative_balance(
    entries: list[_LedgerEntry],
    opening: Decimal,
    window: StatementWindow,
    ctx: GenerationContext,
) -> None:
    lowest = _lowest_balance(entries, opening)
    if lowest >= 0:
        return
    amount = to_money(-lowest + ctx.tuning.negative_balance_buffer)
    earliest = entries[0].when if entries else window.start
    when = max(window.start, earliest - timedelta(days=1))
    entries.insert(
        0,
        _LedgerEntry(
            when=when,
            description=OPENING_NARRATION,
            reference=build_reference("salary", ctx.rng),
            amount=amount,
            kind=TransactionKind.OPENING_ADJUSTMENT,
        ),
    )
    logger.debug("Balance dipped to %s, inserted opening credit of %s", lowest, amount)


def _target_closing_balance(
    entries: list[_LedgerEntry],
    opening: Decimal,
    target: Optional[Decimal],
    window: StatementWindow,
    ctx: GenerationContext,
) -> None:
    if target is None:
        return
    natural = opening + sum((entry.amount for entry in entries), ZERO)
    difference = to_money(target) - natural
    if abs(difference) <= Decimal(ctx.tuning.closing_epsilon):
        return
    is_credit = difference > 0
    entries.append(
        _LedgerEntry(
            when=entries[-1].when if entries else window.end,
            description=CLOSING_CREDIT_NARRATION if is_credit else CLOSING_DEBIT_NARRATION,
            reference=build_reference("salary" if is_credit else "expense", ctx.rng),
            amount=difference,
            kind=TransactionKind.CLOSING_ADJUSTMENT,
        )
    )
    logger.debug("Closing balance %s moved to target %s", natural, target)


def _draw_time(ctx: GenerationContext) -> time:
    rng = ctx.rng
    tuning = ctx.tuning
    span = tuning.day_end_hour - tuning.day_start_hour
    hour = tuning.day_start_hour + math.floor(rng.next() * span)
    return time(hour, rng.random_int(0, 59), rng.random_int(0, 59))


def _assign_times(entries: Sequence[_LedgerEntry], ctx: GenerationContext) -> list[datetime]:
    """Give every row a daytime timestamp, ascending within each day."""

    stamps: list[datetime] = []
    index = 0
    while index < len(entries):
        day = entries[index].when
        group_end = index
        while group_end < len(entries) and entries[group_end].when == day:
            group_end += 1
        times = sorted(_draw_time(ctx) for _ in range(group_end - index))
        stamps.extend(datetime.combine(day, moment) for moment in times)
        index = group_end
    return stamps


def _to_transactions(
    entries: Sequence[_LedgerEntry],
    stamps: Sequence[datetime],
    opening: Decimal,
    ctx: GenerationContext,
) -> list[Transaction]:
    transactions = []
    balance = opening
    for entry, stamp in zip(entries, stamps):
        balance += entry.amount
        transactions.append(
            Transaction(
                id=ctx.rng.random_id(),
                date=stamp,
                description=entry.description,
                reference=entry.reference,
                debit=-entry.amount if entry.amount < 0 else ZERO,
                credit=entry.amount if entry.amount > 0 else ZERO,
                balance=balance,
                kind=entry.kind,
            )
        )
    return transactions


def _finalise(
    entries: list[_LedgerEntry],
    params: StatementParams,
    window: StatementWindow,
    ctx: GenerationContext,
) -> list[Transaction]:
    opening = params.starting_balance
    entries.sort(key=lambda entry: entry.when)
    in_window = [entry for entry in entries if window.contains(entry.when)]
    if len(in_window) != len(entries):
        logger.debug("Dropped %d rows outside the statement window", len(entries) - len(in_window))
    _repair_negative_balance(in_window, opening, window, ctx)
    _target_closing_balance(in_window, opening, params.closing_balance, window, ctx)
    stamps = _assign_times(in_window, ctx)
    return _to_transactions(in_window, stamps, opening, ctx)


# --------------------------------------------------------------------------- #
# Public API                                                                   #
# --------------------------------------------------------------------------- #


def build_statement(
    params: StatementParams,
    options: GenerationOptions,
    *,
    settings: Optional[Settings] = None,
    today: Optional[date] = None,
) -> Statement:
    """Generate one statement.

    Args:
        params: Validated salaried or self-employed form values
        options: Carries the seed, the only source of randomness
        settings: Overrides the environment-derived settings
        today: Reference date for the default window (defaults to today)
    """

    _check_params(params)
    settings = settings or get_settings()
    today = today or date.today()
    user_type = params.user_type

    with log_context.scoped(template=params.template, user_type=user_type.value, seed=options.seed):
        with timeit("Statement build", logger=logger, level=logging.DEBUG, unit="rows") as timer:
            ctx = GenerationContext.for_build(
                options.seed,
                city=params.city,
                branch_address=params.branch_address,
                tuning=settings.tuning,
            )
            profile = get_profile(params.template)
            window = resolve_window(
                params.statement_start_date, params.statement_end_date, params.months, today
            )
            logger.debug(
                "Window %s..%s over %d months", window.start, window.end, window.duration
            )

            if isinstance(params, SelfEmployedParams):
                entries = _self_employed_entries(params, window, profile, ctx)
            else:
                entries = _salaried_entries(params, window, profile, ctx)
            transactions = _finalise(entries, params, window, ctx)
            timer.add(len(transactions))

        meta = StatementMeta(
            generated_at=datetime.now(),
            template=params.template,
            statement_period_start=window.start,
            statement_period_end=window.end,
            user_type=user_type,
            config_hash=ctx.rng.random_id(),
            seed=options.seed,
        )
        statement = Statement(
            id=ctx.rng.random_id(),
            details=params.to_details(),
            meta=meta,
            transactions=tuple(transactions),
        )
        logger.info(
            "Generated %d transactions, closing balance %s",
            len(transactions),
            format_inr(statement.closing_balance),
        )
    return statement


def generate_statement(params: StatementParams, seed: int, **kwargs) -> Statement:
    """Shorthand for :func:`build_statement` with a bare seed."""

    return build_statement(params, GenerationOptions(seed=seed), **kwargs)


def regenerate_statement(params: StatementParams, seed: int, **kwargs) -> Statement:
    """Build a fresh statement for the same parameters under a new seed.

    The earlier statement is left untouched; nothing is shared between the
    two builds.
    """

    logger.debug("Regenerating statement with seed %s", seed)
    return generate_statement(params, seed, **kwargs)
