from __future__ import annotations

from datetime import date
from typing import Any, Dict, Iterable, List

from ..core import DayCell, classify_occurrence, summarize_entity
from ..domain import Entity, Occurrence, format_iso_date
from .models import DayCellPayload, EntityPayload, OccurrencePayload


def serialize_entity(entity: Entity, today: date) -> Dict[str, Any]:
    record = entity.to_record()
    payload = EntityPayload(
        id=entity.id,
        kind=entity.kind.value,
        user_id=entity.user_id,
        name=entity.name,
        description=entity.description,
        additional_info=entity.additional_info,
        start_date=record["start_date"],
        start_time=entity.start_time,
        end_date=record["end_date"],
        end_time=entity.end_time,
        recurrence=record["recurrence"],
        is_completed=entity.is_completed,
        completed_occurrences_dates=record["completed_occurrences_dates"],
        type=record.get("type"),
        status=summarize_entity(entity, today).value,
    )
    return payload.model_dump(by_alias=True)


def serialize_occurrence(occurrence: Occurrence, today: date) -> Dict[str, Any]:
    entity = occurrence.entity
    payload = OccurrencePayload(
        original_id=occurrence.original_id,
        kind=occurrence.kind.value,
        date=occurrence.date.isoformat(),
        name=entity.name,
        description=entity.description,
        start_time=entity.start_time,
        end_time=entity.end_time,
        is_occurrence=occurrence.is_occurrence,
        is_completed=occurrence.is_completed,
        status=classify_occurrence(occurrence, today).value,
        type=getattr(entity, "type", None),
    )
    return payload.model_dump(by_alias=True)


def serialize_occurrences(occurrences: Iterable[Occurrence], today: date) -> List[Dict[str, Any]]:
    return [serialize_occurrence(occurrence, today) for occurrence in occurrences]


def serialize_day_cell(cell: DayCell) -> Dict[str, Any]:
    payload = DayCellPayload(
        date=format_iso_date(cell.date),
        has_events=cell.has_events,
        has_tasks=cell.has_tasks,
        event_count=cell.event_count,
        task_count=cell.task_count,
        is_today=cell.is_today,
    )
    return payload.model_dump(by_alias=True)
