from __future__ import annotations

from datetime import date

from conftest import make_event, make_task

from pocket_planner.core import build_day_detail, build_month_grid, build_month_list
from pocket_planner.domain import Recurrence


def test_grid_has_leading_blanks_then_every_day() -> None:
    cells = build_month_grid(2025, 1, [], [], today=date(2025, 2, 10))
    assert len(cells) == 6 + 28
    assert all(cell.is_blank for cell in cells[:6])
    assert [cell.date for cell in cells[6:]] == [date(2025, 2, day) for day in range(1, 29)]


def test_grid_without_blanks_when_month_starts_on_sunday() -> None:
    cells = build_month_grid(2025, 5, [], [], today=date(2025, 1, 1))
    assert cells[0].date == date(2025, 6, 1)
    assert len(cells) == 30


def test_grid_flags_and_counts() -> None:
    events = [
        make_event("a", start_date=date(2025, 2, 3)),
        make_event("b", start_date=date(2025, 2, 3), start_time="10:00"),
    ]
    tasks = [make_task("t", recurrence=Recurrence.WEEKLY, start_date=date(2025, 2, 3))]
    cells = {cell.date: cell for cell in build_month_grid(2025, 1, events, tasks, today=date(2025, 2, 10))}

    third = cells[date(2025, 2, 3)]
    assert (third.has_events, third.has_tasks, third.event_count, third.task_count) == (True, True, 2, 1)

    tenth = cells[date(2025, 2, 10)]
    assert (tenth.has_events, tenth.has_tasks, tenth.is_today) == (False, True, True)

    assert not cells[date(2025, 2, 4)].has_events
    assert not cells[date(2025, 2, 4)].has_tasks
    assert sum(cell.is_today for cell in cells.values()) == 1


def test_grid_without_today_in_month() -> None:
    cells = build_month_grid(2025, 1, [], [], today=date(2025, 3, 1))
    assert not any(cell.is_today for cell in cells)


def test_day_detail_orders_by_start_time() -> None:
    events = [
        make_event("evening", start_date=date(2025, 3, 4), start_time="19:00"),
        make_event("untimed", start_date=date(2025, 3, 4)),
        make_event("morning", start_date=date(2025, 3, 4), start_time="08:00"),
        make_event("other-day", start_date=date(2025, 3, 5)),
    ]
    tasks = [make_task("daily", recurrence=Recurrence.DAILY, start_date=date(2025, 2, 20), start_time="12:00")]

    events_today, tasks_today = build_day_detail(date(2025, 3, 4), events, tasks)
    assert [item.original_id for item in events_today] == ["untimed", "morning", "evening"]
    assert [(item.original_id, item.date, item.is_occurrence) for item in tasks_today] == [
        ("daily", date(2025, 3, 4), True)
    ]


def test_day_detail_empty_day() -> None:
    detail = build_day_detail(date(2025, 3, 20), [make_event(start_date=date(2025, 3, 4))], [])
    assert detail.events == []
    assert detail.tasks == []


def test_month_list_keeps_collections_apart() -> None:
    events = [make_event("e", recurrence=Recurrence.DAILY, start_date=date(2025, 3, 29))]
    tasks = [make_task("t", start_date=date(2025, 3, 15), is_completed=True)]

    listing = build_month_list(2025, 2, events, tasks)
    assert not listing.is_empty
    assert [item.date for item in listing.events] == [date(2025, 3, 29), date(2025, 3, 30), date(2025, 3, 31)]
    assert [(item.original_id, item.is_completed) for item in listing.tasks] == [("t", True)]


def test_month_list_empty() -> None:
    listing = build_month_list(2025, 3, [make_event(start_date=date(2025, 3, 1))], [])
    assert listing.is_empty
