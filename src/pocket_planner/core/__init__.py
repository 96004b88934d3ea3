"""Recurrence expansion, occurrence projection, and month-grid view models."""

from __future__ import annotations

from .completion import InvalidOccurrenceError, is_done, mark_done, reconcile_completion
from .date_grid import (
    check_month,
    days_in_month,
    first_weekday_of_month,
    iter_month_days,
    month_bounds,
    month_key,
    step_month,
    step_year,
    today_utc,
)
from .projector import index_by_date, project
from .recurrence import expand, occurs_on
from .status import classify_occurrence, summarize_entity
from .view_model import DayCell, DayDetail, MonthList, build_day_detail, build_month_grid, build_month_list

__all__ = [
    "DayCell",
    "DayDetail",
    "InvalidOccurrenceError",
    "MonthList",
    "build_day_detail",
    "build_month_grid",
    "build_month_list",
    "check_month",
    "classify_occurrence",
    "days_in_month",
    "expand",
    "first_weekday_of_month",
    "index_by_date",
    "is_done",
    "iter_month_days",
    "mark_done",
    "month_bounds",
    "month_key",
    "occurs_on",
    "project",
    "reconcile_completion",
    "step_month",
    "step_year",
    "summarize_entity",
    "today_utc",
]
