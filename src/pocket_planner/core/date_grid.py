"""Calendar arithmetic on plain calendar dates.

Months are 0-indexed throughout (0 is January, 11 is December) and weekdays
are numbered from Sunday (0) to Saturday (6). Every value is a naive
``datetime.date``; "today" is always taken from the UTC clock so day
boundaries never move with the local daylight-saving offset.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta, timezone
from typing import Iterator, Tuple


def check_month(month: int) -> None:
    if not 0 <= month <= 11:
        raise ValueError(f"month must be between 0 and 11, got {month}")


def days_in_month(year: int, month: int) -> int:
    check_month(month)
    return calendar.monthrange(year, month + 1)[1]


def first_weekday_of_month(year: int, month: int) -> int:
    check_month(month)
    # date.weekday() counts from Monday.
    return (date(year, month + 1, 1).weekday() + 1) % 7


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    last_day = days_in_month(year, month)
    return date(year, month + 1, 1), date(year, month + 1, last_day)


def iter_month_days(year: int, month: int) -> Iterator[date]:
    first, last = month_bounds(year, month)
    current = first
    while current <= last:
        yield current
        current += timedelta(days=1)


def month_key(day: date) -> Tuple[int, int]:
    return day.year, day.month - 1


def clamp_day(year: int, month: int, day: int) -> date:
    """Build ``year-month-day``, pulling ``day`` back to the month's last day."""

    return date(year, month + 1, min(day, days_in_month(year, month)))


def step_month(day: date, delta: int) -> date:
    """Move ``day`` by ``delta`` months, clamping to the target month's length.

    Clamping is lossy: ``step_month(date(2025, 1, 31), 1)`` is Feb 28 and
    stepping back from there lands on Jan 28, not Jan 31.
    """

    index = day.year * 12 + (day.month - 1) + delta
    year, month = divmod(index, 12)
    return clamp_day(year, month, day.day)


def step_year(day: date, delta: int) -> date:
    return clamp_day(day.year + delta, day.month - 1, day.day)


def today_utc() -> date:
    return datetime.now(timezone.utc).date()


__all__ = [
    "check_month",
    "clamp_day",
    "days_in_month",
    "first_weekday_of_month",
    "iter_month_days",
    "month_bounds",
    "month_key",
    "step_month",
    "step_year",
    "today_utc",
]
