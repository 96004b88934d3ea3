from __future__ import annotations

from datetime import date
from typing import Any, Dict

from ..core import today_utc
from ..domain import EntityKind
from ..services import EntityNotFoundError, MarkDoneOutcome
from .registry import register_api
from .serializers import serialize_day_cell, serialize_entity, serialize_occurrences
from .state import api_state


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:  # noqa: TRY003
        raise ValueError(f"Invalid ISO date: {value}") from exc


def _parse_kind(value: str) -> EntityKind:
    try:
        return EntityKind(value)
    except ValueError as exc:  # noqa: TRY003
        raise ValueError(f"kind must be 'event' or 'task', got {value!r}") from exc


@register_api(
    "refresh_entities",
    description="Reload every event and task for the current owner from Supabase.",
    category="sync",
    tags=("sync", "supabase"),
)
def refresh_entities() -> Dict[str, Any]:
    counts = api_state.sync.refresh_all()
    return {"events": counts[EntityKind.EVENT], "tasks": counts[EntityKind.TASK]}


@register_api(
    "calendar_month_grid",
    description="Return the month grid (0-indexed month) with leading blanks and per-day event/task flags.",
    category="calendar",
    tags=("calendar", "month", "read"),
)
def calendar_month_grid(year: int, month: int) -> Dict[str, Any]:
    cells = api_state.calendar.month_grid(year, month, today=today_utc())
    return {"year": year, "month": month, "cells": [serialize_day_cell(cell) for cell in cells]}


@register_api(
    "calendar_day_detail",
    description="Return the event and task occurrences of one day, ordered by start time.",
    category="calendar",
    tags=("calendar", "day", "read"),
)
def calendar_day_detail(day: str) -> Dict[str, Any]:
    target = _parse_date(day)
    today = today_utc()
    detail = api_state.calendar.day_detail(target)
    return {
        "date": target.isoformat(),
        "events": serialize_occurrences(detail.events, today),
        "tasks": serialize_occurrences(detail.tasks, today),
    }


@register_api(
    "calendar_month_list",
    description="Return every event and task occurrence of a month (0-indexed), ordered by date and time.",
    category="calendar",
    tags=("calendar", "month", "list", "read"),
)
def calendar_month_list(year: int, month: int) -> Dict[str, Any]:
    today = today_utc()
    listing = api_state.calendar.month_list(year, month)
    return {
        "year": year,
        "month": month,
        "events": serialize_occurrences(listing.events, today),
        "tasks": serialize_occurrences(listing.tasks, today),
    }


@register_api(
    "entity_detail",
    description="Return one event or task from the current snapshot with its overall status.",
    category="calendar",
    tags=("calendar", "read"),
)
def entity_detail(kind: str, entity_id: str) -> Dict[str, Any]:
    entity_kind = _parse_kind(kind)
    entity = api_state.context.snapshot.find(entity_kind, entity_id)
    if entity is None:
        raise EntityNotFoundError(f"{entity_kind.value.capitalize()} '{entity_id}' not found.")
    return {"entity": serialize_entity(entity, today_utc())}


@register_api(
    "mark_occurrence_done",
    description="Mark one dated occurrence of an event or task as done.",
    category="calendar",
    tags=("calendar", "write"),
)
def mark_occurrence_done(kind: str, entity_id: str, day: str) -> Dict[str, Any]:
    entity_kind = _parse_kind(kind)
    target = _parse_date(day)
    outcome = api_state.calendar.mark_occurrence_done(entity_kind, entity_id, target)
    if outcome is MarkDoneOutcome.NOT_FOUND:
        raise EntityNotFoundError(f"Original {entity_kind.value} '{entity_id}' not found.")
    return {"kind": entity_kind.value, "id": entity_id, "date": target.isoformat(), "outcome": outcome.value}
