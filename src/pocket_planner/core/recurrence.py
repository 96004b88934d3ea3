from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Callable, Dict, List, Optional

from ..domain import Entity, Recurrence
from .date_grid import clamp_day, month_bounds

logger = logging.getLogger(__name__)

_WEEK = 7

Rule = Callable[[date, Optional[date], date, date], List[date]]


def _upper_bound(entity: Entity) -> Optional[date]:
    end = entity.end_date
    if end is None or entity.start_date is None:
        return end
    if end < entity.start_date:
        # An end before the start is treated as open-ended rather than swapped.
        logger.debug("Entity %s ends before it starts; ignoring end date %s", entity.id, end)
        return None
    return end


def _single(start: date, end: Optional[date], first: date, last: date) -> List[date]:
    return [start] if first <= start <= last else []


def _daily(start: date, end: Optional[date], first: date, last: date) -> List[date]:
    lower = max(start, first)
    upper = min(end, last) if end else last
    return [lower + timedelta(days=offset) for offset in range((upper - lower).days + 1)]


def _weekly(start: date, end: Optional[date], first: date, last: date) -> List[date]:
    lower = max(start, first)
    upper = min(end, last) if end else last
    current = lower + timedelta(days=-(lower - start).days % _WEEK)
    days: List[date] = []
    while current <= upper:
        days.append(current)
        current += timedelta(days=_WEEK)
    return days


def _monthly(start: date, end: Optional[date], first: date, last: date) -> List[date]:
    if (first.year, first.month) < (start.year, start.month):
        return []
    candidate = clamp_day(first.year, first.month - 1, start.day)
    if end and candidate > end:
        return []
    return [candidate]


def _yearly(start: date, end: Optional[date], first: date, last: date) -> List[date]:
    if first.month != start.month or first.year < start.year:
        return []
    # Bounded by the end year, not the exact end date.
    if end and first.year > end.year:
        return []
    return [clamp_day(first.year, first.month - 1, start.day)]


_RULES: Dict[Recurrence, Rule] = {
    Recurrence.NONE: _single,
    Recurrence.DAILY: _daily,
    Recurrence.WEEKLY: _weekly,
    Recurrence.MONTHLY: _monthly,
    Recurrence.YEARLY: _yearly,
}


def expand(entity: Entity, year: int, month: int) -> List[date]:
    """Return every date of the 0-indexed ``month`` on which ``entity`` occurs.

    The result is ascending and free of duplicates. Entities without a usable
    start date or with an unknown recurrence yield an empty list instead of
    raising, so one bad record never hides the rest of the calendar.
    """

    first, last = month_bounds(year, month)
    start = entity.start_date
    if start is None:
        logger.warning("Entity %s has no valid start date; skipping", entity.id)
        return []
    rule = _RULES.get(entity.recurrence) if entity.recurrence else None
    if rule is None:
        logger.warning("Entity %s has an unsupported recurrence; skipping", entity.id)
        return []
    if start > last:
        return []
    return rule(start, _upper_bound(entity), first, last)


def occurs_on(entity: Entity, day: date) -> bool:
    return day in expand(entity, day.year, day.month - 1)


__all__ = ["expand", "occurs_on"]
