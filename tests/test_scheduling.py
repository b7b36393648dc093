"""Tests for the statement window, salary days and budget helpers."""
from __future__ import annotations

from datetime import date

import pytest

from statement_engine.exceptions import InvalidParametersError
from statement_engine.rng import SeededRng
from statement_engine.scheduling import (
    adjust_salary_date,
    allocate_budget,
    in_blackout,
    is_weekday,
    month_end,
    months_spanned,
    pick_salary_day,
    resolve_window,
    salary_dates,
    shift_months,
    snap_to_weekday,
    split_share,
)

TODAY = date(2025, 7, 15)


def test_calendar_helpers() -> None:
    assert shift_months(date(2025, 1, 15), -1) == date(2024, 12, 1)
    assert shift_months(date(2025, 11, 3), 3) == date(2026, 2, 1)
    assert month_end(date(2024, 2, 10)) == date(2024, 2, 29)
    assert month_end(date(2025, 12, 5)) == date(2025, 12, 31)
    assert months_spanned(date(2025, 3, 10), date(2025, 6, 30)) == 4


def test_window_counts_back_from_end_date() -> None:
    window = resolve_window(None, date(2025, 6, 30), 3, TODAY)

    assert window.start == date(2025, 4, 1)
    assert window.end == date(2025, 6, 30)
    assert [period.month_start.month for period in window.periods] == [4, 5, 6]
    assert window.periods[-1].end == date(2025, 6, 30)


def test_window_never_ends_in_the_future() -> None:
    window = resolve_window(None, date(2025, 9, 1), 3, TODAY)

    assert window.end == TODAY
    assert [period.month_start.month for period in window.periods] == [5, 6, 7]
    assert window.periods[-1].end == TODAY


def test_explicit_start_sets_duration_from_months_spanned() -> None:
    window = resolve_window(date(2025, 3, 10), date(2025, 6, 30), 3, TODAY)

    assert window.duration == 4
    assert window.periods[0].start == date(2025, 3, 10)
    assert window.start == date(2025, 3, 10)


def test_short_explicit_range_keeps_minimum_duration() -> None:
    """Periods before the start date count for budgeting but stay empty."""

    window = resolve_window(date(2025, 6, 10), date(2025, 6, 30), 3, TODAY)

    assert window.duration == 3
    assert [period.is_empty for period in window.periods] == [True, True, False]
    assert len(window.active_periods) == 1


def test_long_explicit_range_is_clamped_to_six_months() -> None:
    window = resolve_window(date(2024, 1, 1), date(2025, 6, 30), 3, TODAY)
    assert window.duration == 6


@pytest.mark.parametrize(
    "start, end",
    [
        (date(2025, 8, 1), None),
        (date(2025, 6, 20), date(2025, 6, 10)),
    ],
)
def test_invalid_start_dates_are_rejected(start, end) -> None:
    with pytest.raises(InvalidParametersError):
        resolve_window(start, end, 3, TODAY)


def test_salary_dates_fall_on_early_weekdays() -> None:
    window = resolve_window(None, date(2025, 6, 30), 6, TODAY)
    for seed in range(40):
        for payday in salary_dates(window, SeededRng(seed)):
            assert payday is not None
            assert 1 <= payday.day <= 5
            assert is_weekday(payday)


def test_salary_skipped_when_window_starts_after_payday_range() -> None:
    window = resolve_window(date(2025, 4, 10), date(2025, 6, 30), 3, TODAY)
    paydays = salary_dates(window, SeededRng(1))

    assert paydays[0] is None
    assert all(payday is not None for payday in paydays[1:])


def test_pick_salary_day_stays_in_narrowed_range() -> None:
    rng = SeededRng(4)
    assert {pick_salary_day(rng, 4, 5) for _ in range(100)} == {4, 5}


def test_adjust_salary_date_prefers_later_weekday() -> None:
    # 1 March 2025 is a Saturday.
    assert adjust_salary_date(date(2025, 3, 1), 1, 5) == date(2025, 3, 3)


def test_adjust_salary_date_moves_back_at_window_edge() -> None:
    # 5 April 2025 is a Saturday and the window ends on the 5th.
    assert adjust_salary_date(date(2025, 4, 5), 1, 5) == date(2025, 4, 4)


def test_adjust_salary_date_falls_back_to_first_day() -> None:
    assert adjust_salary_date(date(2025, 3, 1), 1, 2) == date(2025, 3, 1)


def test_snap_to_weekday() -> None:
    assert snap_to_weekday(date(2025, 4, 5), date(2025, 4, 1), date(2025, 4, 30)) == date(2025, 4, 4)
    # 1 June 2025 is a Sunday; Friday would leave the month.
    assert snap_to_weekday(date(2025, 6, 1), date(2025, 6, 1), date(2025, 6, 30)) == date(2025, 6, 2)
    assert snap_to_weekday(date(2025, 6, 4), date(2025, 6, 1), date(2025, 6, 30)) == date(2025, 6, 4)


def test_in_blackout() -> None:
    payday = date(2025, 5, 5)
    assert in_blackout(date(2025, 5, 2), payday, 3, 1)
    assert in_blackout(date(2025, 5, 6), payday, 3, 1)
    assert not in_blackout(date(2025, 5, 7), payday, 3, 1)
    assert not in_blackout(date(2025, 5, 5), None, 3, 1)


def test_allocate_budget_fills_earliest_periods_first() -> None:
    assert allocate_budget(16, 3, 6) == [4, 3, 3]
    assert allocate_budget(5, 3, 6) == [0, 0, 0]
    assert allocate_budget(10, 0, 0) == []


def test_split_share_rounds_first_part_up() -> None:
    assert split_share(10, 0.6) == (6, 4)
    assert split_share(7, 0.6) == (5, 2)
    assert split_share(0, 0.6) == (0, 0)
