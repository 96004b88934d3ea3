"""Calendar arithmetic: month lengths, first weekdays, and month/year stepping."""

from __future__ import annotations

from datetime import date

import pytest

from pocket_planner.core import (
    check_month,
    days_in_month,
    first_weekday_of_month,
    iter_month_days,
    month_bounds,
    month_key,
    step_month,
    step_year,
)


def _reference_length(year: int, month: int) -> int:
    following = date(year + 1, 1, 1) if month == 11 else date(year, month + 2, 1)
    return (following - date(year, month + 1, 1)).days


def test_february_follows_the_gregorian_leap_rule() -> None:
    assert days_in_month(2024, 1) == 29
    assert days_in_month(2023, 1) == 28
    assert days_in_month(1900, 1) == 28
    assert days_in_month(2000, 1) == 29


@pytest.mark.parametrize("year", [1899, 1900, 1999, 2000, 2023, 2024, 2100, 2400])
def test_every_month_length_matches_the_calendar(year: int) -> None:
    for month in range(12):
        assert days_in_month(year, month) == _reference_length(year, month)


def test_first_weekday_counts_from_sunday() -> None:
    assert first_weekday_of_month(2025, 0) == 3  # Wed 2025-01-01
    assert first_weekday_of_month(2025, 1) == 6  # Sat 2025-02-01
    assert first_weekday_of_month(2025, 5) == 0  # Sun 2025-06-01
    assert first_weekday_of_month(2024, 8) == 0  # Sun 2024-09-01


@pytest.mark.parametrize("month", [-1, 12])
def test_months_are_zero_indexed(month: int) -> None:
    with pytest.raises(ValueError):
        days_in_month(2025, month)
    with pytest.raises(ValueError):
        first_weekday_of_month(2025, month)
    with pytest.raises(ValueError, match="between 0 and 11"):
        check_month(month)


def test_month_bounds_and_iteration() -> None:
    assert month_bounds(2025, 3) == (date(2025, 4, 1), date(2025, 4, 30))
    days = list(iter_month_days(2024, 1))
    assert len(days) == 29
    assert days[0] == date(2024, 2, 1)
    assert days[-1] == date(2024, 2, 29)
    assert month_key(date(2025, 12, 24)) == (2025, 11)


def test_step_month_carries_the_year() -> None:
    assert step_month(date(2024, 12, 15), 1) == date(2025, 1, 15)
    assert step_month(date(2025, 1, 15), -1) == date(2024, 12, 15)
    assert step_month(date(2025, 1, 15), -13) == date(2023, 12, 15)
    assert step_month(date(2025, 6, 10), 30) == date(2027, 12, 10)


def test_step_month_clamps_to_the_last_day() -> None:
    assert step_month(date(2025, 1, 31), 1) == date(2025, 2, 28)
    assert step_month(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert step_month(date(2025, 3, 31), 1) == date(2025, 4, 30)


def test_step_month_round_trip_without_clamping() -> None:
    for day in (1, 15, 28):
        origin = date(2025, 1, day)
        for delta in (1, 5, 12, 25):
            assert step_month(step_month(origin, delta), -delta) == origin


def test_step_month_round_trip_loses_the_clamped_day() -> None:
    clamped = step_month(date(2025, 1, 31), 1)
    assert clamped == date(2025, 2, 28)
    assert step_month(clamped, -1) == date(2025, 1, 28)
    assert step_month(clamped, 1) == date(2025, 3, 28)


def test_step_year() -> None:
    assert step_year(date(2025, 7, 4), 3) == date(2028, 7, 4)
    assert step_year(date(2028, 7, 4), -3) == date(2025, 7, 4)
    assert step_year(date(2024, 2, 29), 4) == date(2028, 2, 29)


def test_step_year_clamps_leap_day() -> None:
    clamped = step_year(date(2024, 2, 29), 1)
    assert clamped == date(2025, 2, 28)
    assert step_year(clamped, -1) == date(2024, 2, 28)
