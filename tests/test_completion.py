"""Completion tracking for single and recurring entities."""

from __future__ import annotations

from datetime import date

import pytest

from conftest import make_event, make_task

from pocket_planner.core import InvalidOccurrenceError, is_done, mark_done, project, reconcile_completion
from pocket_planner.domain import Entity, Recurrence, entity_from_record


def _apply(entity: Entity, fields: dict) -> Entity:
    return entity_from_record(entity.kind, {**entity.to_record(), **fields})


def test_single_entity_uses_its_flag() -> None:
    task = make_task(is_completed=True, completed_occurrence_dates=frozenset({date(2025, 3, 2)}))
    assert is_done(task, date(2025, 3, 1))
    assert is_done(task, date(1999, 1, 1))
    assert not is_done(make_task(), date(2025, 3, 1))


def test_single_entity_mark_done_sets_flag() -> None:
    task = make_task()
    assert mark_done(task, date(2025, 3, 1)) == {"is_completed": True}
    assert mark_done(task, date(2030, 1, 1)) == {"is_completed": True}


def test_recurring_entity_uses_date_set() -> None:
    event = make_event(
        recurrence=Recurrence.DAILY,
        is_completed=True,
        completed_occurrence_dates=frozenset({date(2025, 3, 2)}),
    )
    assert is_done(event, date(2025, 3, 2))
    assert not is_done(event, date(2025, 3, 1))


def test_mark_done_is_idempotent(daily_event: Entity) -> None:
    day = date(2025, 3, 2)
    once = mark_done(daily_event, day)
    twice = mark_done(_apply(daily_event, once), day)
    assert once == twice == {"completed_occurrences_dates": ["2025-03-02"]}


def test_mark_done_adds_to_existing_dates() -> None:
    event = make_event(
        recurrence=Recurrence.WEEKLY,
        start_date=date(2025, 1, 1),
        completed_occurrence_dates=frozenset({date(2025, 1, 8)}),
    )
    assert mark_done(event, date(2025, 1, 1)) == {"completed_occurrences_dates": ["2025-01-01", "2025-01-08"]}
    assert event.completed_occurrence_dates == frozenset({date(2025, 1, 8)})


def test_mark_done_rejects_days_without_an_occurrence() -> None:
    event = make_event(recurrence=Recurrence.WEEKLY, start_date=date(2025, 1, 1))
    with pytest.raises(InvalidOccurrenceError):
        mark_done(event, date(2025, 1, 2))
    with pytest.raises(InvalidOccurrenceError):
        mark_done(event, date(2024, 12, 25))


def test_daily_series_end_to_end(daily_event: Entity) -> None:
    occurrences = project([daily_event], 2025, 2)
    assert [item.date for item in occurrences] == [date(2025, 3, 1), date(2025, 3, 2), date(2025, 3, 3)]
    assert all(item.is_occurrence for item in occurrences)
    assert not any(item.is_completed for item in occurrences)

    updated = _apply(daily_event, mark_done(daily_event, date(2025, 3, 2)))
    assert is_done(updated, date(2025, 3, 2))
    assert not is_done(updated, date(2025, 3, 1))
    assert not is_done(updated, date(2025, 3, 3))
    assert [item.is_completed for item in project([updated], 2025, 2)] == [False, True, False]


def test_reconcile_drops_dates_a_moved_series_no_longer_hits() -> None:
    edited = make_event(
        recurrence=Recurrence.WEEKLY,
        start_date=date(2025, 1, 2),
        completed_occurrence_dates=frozenset({date(2025, 1, 1), date(2025, 1, 9), date(2025, 1, 16)}),
    )
    assert reconcile_completion(edited) == {"completed_occurrences_dates": ["2025-01-09", "2025-01-16"]}


def test_reconcile_keeps_single_flag() -> None:
    assert reconcile_completion(make_task(is_completed=True)) == {"is_completed": True}


def test_reconcile_keeps_dates_when_schedule_cannot_be_expanded() -> None:
    done = frozenset({date(2025, 3, 1), date(2025, 3, 15)})
    unreadable = make_event(recurrence=None, completed_occurrence_dates=done)
    undated = make_event(recurrence=Recurrence.WEEKLY, start_date=None, completed_occurrence_dates=done)
    expected = {"completed_occurrences_dates": ["2025-03-01", "2025-03-15"]}
    assert reconcile_completion(unreadable) == expected
    assert reconcile_completion(undated) == expected
