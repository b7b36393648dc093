"""Calendar helpers: statement window, salary days and budget allocation."""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator, Optional

from .exceptions import InvalidParametersError
from .rng import SeededRng

MIN_SPAN_MONTHS = 3
MAX_SPAN_MONTHS = 6

SALARY_FIRST_DAY = 1
SALARY_LAST_DAY = 5
# (first day, last day, weight)
SALARY_DAY_RANGES = ((1, 3, 0.6), (4, 5, 0.4))

SATURDAY = 5


def month_sequence(start: date, months: int) -> Iterator[date]:
    year = start.year
    month = start.month
    for _ in range(months):
        yield date(year, month, 1)
        month += 1
        if month > 12:
            year += 1
            month = 1


def month_end(day: date) -> date:
    if day.month == 12:
        return date(day.year, 12, 31)
    next_month = date(day.year, day.month + 1, 1)
    return next_month - timedelta(days=1)


def shift_months(day: date, months: int) -> date:
    """First day of the month ``months`` away from ``day`` (may be negative)."""

    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def months_spanned(start: date, end: date) -> int:
    return (end.year - start.year) * 12 + (end.month - start.month) + 1


def is_weekday(day: date) -> bool:
    return day.weekday() < SATURDAY


@dataclass(frozen=True, slots=True)
class Period:
    """One calendar month of the statement, clipped to the window.

    A period whose clipped range is empty still counts for budgeting but
    receives no rows.
    """

    index: int
    month_start: date
    start: date
    end: date

    @property
    def is_empty(self) -> bool:
        return self.start > self.end

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def clamp(self, day: date) -> date:
        return min(max(day, self.start), self.end)

    def random_day(self, rng: SeededRng) -> date:
        return self.start + timedelta(days=rng.random_int(0, self.days - 1))


@dataclass(frozen=True, slots=True)
class StatementWindow:
    start: date
    end: date
    duration: int
    periods: tuple[Period, ...]

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    @property
    def active_periods(self) -> list[Period]:
        return [period for period in self.periods if not period.is_empty]


def resolve_window(
    start: Optional[date],
    end: Optional[date],
    duration: int,
    today: date,
) -> StatementWindow:
    """Work out the statement range and its monthly periods.

    The end date never lies in the future. With an explicit start date the
    duration becomes the number of months spanned, clamped to three..six;
    periods are always the ``duration`` calendar months ending with the end
    month.
    """

    resolved_end = min(end or today, today)
    if start is not None:
        if start > today:
            raise InvalidParametersError(
                "start date lies in the future", field="statement_start_date"
            )
        if start > resolved_end:
            raise InvalidParametersError(
                "start date is after end date", field="statement_start_date"
            )
        duration = min(max(months_spanned(start, resolved_end), MIN_SPAN_MONTHS), MAX_SPAN_MONTHS)
    elif duration < 1:
        raise InvalidParametersError("duration must be at least one month", field="duration_months")

    first_month = shift_months(resolved_end, -(duration - 1))
    resolved_start = start or first_month

    periods = []
    for index, month_start in enumerate(month_sequence(first_month, duration)):
        periods.append(
            Period(
                index=index,
                month_start=month_start,
                start=max(month_start, resolved_start),
                end=min(month_end(month_start), resolved_end),
            )
        )
    return StatementWindow(
        start=resolved_start,
        end=resolved_end,
        duration=duration,
        periods=tuple(periods),
    )


def pick_salary_day(rng: SeededRng, min_day: int, max_day: int) -> int:
    """Weighted pick favouring the first three days of the month."""

    ranges = []
    for first, last, weight in SALARY_DAY_RANGES:
        low, high = max(first, min_day), min(last, max_day)
        if low <= high:
            ranges.append((low, high, weight))
    if not ranges:
        return min_day

    total = sum(weight for _, _, weight in ranges)
    roll = rng.next() * total
    chosen = ranges[-1]
    cumulative = 0.0
    for entry in ranges:
        cumulative += entry[2]
        if roll < cumulative:
            chosen = entry
            break
    return rng.random_int(chosen[0], chosen[1])


def adjust_salary_date(day: date, min_day: int, max_day: int) -> date:
    """Move a weekend salary day onto a weekday within ``[min_day, max_day]``.

    Tries later days first, then earlier ones, then scans the whole window;
    if the window has no weekday at all the first day is used.
    """

    if is_weekday(day):
        return day
    for offset in range(1, max_day - day.day + 1):
        candidate = day + timedelta(days=offset)
        if is_weekday(candidate):
            return candidate
    for offset in range(1, day.day - min_day + 1):
        candidate = day - timedelta(days=offset)
        if is_weekday(candidate):
            return candidate
    for number in range(min_day, max_day + 1):
        candidate = day.replace(day=number)
        if is_weekday(candidate):
            return candidate
    return day.replace(day=min_day)


def salary_dates(window: StatementWindow, rng: SeededRng) -> list[Optional[date]]:
    """One salary date per period, ``None`` where the window excludes payday."""

    dates: list[Optional[date]] = []
    for period in window.periods:
        if period.is_empty:
            dates.append(None)
            continue
        min_day = period.start.day if period.start > period.month_start else SALARY_FIRST_DAY
        if min_day > SALARY_LAST_DAY:
            dates.append(None)
            continue
        max_day = max(min_day, min(SALARY_LAST_DAY, period.end.day))
        day = pick_salary_day(rng, min_day, max_day)
        dates.append(adjust_salary_date(period.month_start.replace(day=day), min_day, max_day))
    return dates


def snap_to_weekday(day: date, low: date, high: date) -> date:
    """Move a weekend day back to Friday, or on to Monday, staying in range."""

    if is_weekday(day):
        return day
    friday = day - timedelta(days=day.weekday() - 4)
    if friday >= low:
        return friday
    monday = day + timedelta(days=7 - day.weekday())
    if monday <= high:
        return monday
    return day


def in_blackout(day: date, anchor: Optional[date], before: int, after: int) -> bool:
    if anchor is None:
        return False
    return anchor - timedelta(days=before) <= day <= anchor + timedelta(days=after)


def allocate_budget(total: int, periods: int, reserved: int) -> list[int]:
    """Spread ``total - reserved`` rows evenly, extras going to early periods."""

    if periods <= 0:
        return []
    remaining = max(0, total - reserved)
    base, extra = divmod(remaining, periods)
    return [base + (1 if index < extra else 0) for index in range(periods)]


def split_share(total: int, share: float) -> tuple[int, int]:
    """Split ``total`` into ``ceil(total * share)`` and the rest."""

    first = min(total, math.ceil(total * share))
    return first, total - first
