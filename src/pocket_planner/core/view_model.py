from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, NamedTuple, Optional, Sequence

from ..domain import Entity, Occurrence
from ..domain.models import DEFAULT_SORT_TIME
from .date_grid import first_weekday_of_month, iter_month_days, month_key, today_utc
from .projector import index_by_date, project


@dataclass(frozen=True, slots=True)
class DayCell:
    """One square of the month grid; leading blanks carry ``date=None``."""

    date: Optional[date]
    has_events: bool = False
    has_tasks: bool = False
    event_count: int = 0
    task_count: int = 0
    is_today: bool = False

    @property
    def is_blank(self) -> bool:
        return self.date is None


class DayDetail(NamedTuple):
    events: List[Occurrence]
    tasks: List[Occurrence]


class MonthList(NamedTuple):
    events: List[Occurrence]
    tasks: List[Occurrence]

    @property
    def is_empty(self) -> bool:
        return not self.events and not self.tasks


def _by_start_time(occurrences: Iterable[Occurrence]) -> List[Occurrence]:
    return sorted(occurrences, key=lambda occurrence: occurrence.start_time or DEFAULT_SORT_TIME)


def build_month_grid(
    year: int,
    month: int,
    events: Sequence[Entity],
    tasks: Sequence[Entity],
    *,
    today: Optional[date] = None,
) -> List[DayCell]:
    reference = today or today_utc()
    event_days = index_by_date(project(events, year, month))
    task_days = index_by_date(project(tasks, year, month))

    cells = [DayCell(date=None) for _ in range(first_weekday_of_month(year, month))]
    for day in iter_month_days(year, month):
        event_count = len(event_days.get(day, ()))
        task_count = len(task_days.get(day, ()))
        cells.append(
            DayCell(
                date=day,
                has_events=event_count > 0,
                has_tasks=task_count > 0,
                event_count=event_count,
                task_count=task_count,
                is_today=day == reference,
            )
        )
    return cells


def build_day_detail(day: date, events: Sequence[Entity], tasks: Sequence[Entity]) -> DayDetail:
    year, month = month_key(day)
    return DayDetail(
        events=_by_start_time(item for item in project(events, year, month) if item.date == day),
        tasks=_by_start_time(item for item in project(tasks, year, month) if item.date == day),
    )


def build_month_list(year: int, month: int, events: Sequence[Entity], tasks: Sequence[Entity]) -> MonthList:
    return MonthList(events=project(events, year, month), tasks=project(tasks, year, month))


__all__ = [
    "DayCell",
    "DayDetail",
    "MonthList",
    "build_day_detail",
    "build_month_grid",
    "build_month_list",
]
