from __future__ import annotations

from datetime import date
from typing import Optional

from ..domain import Entity, EntityStatus, Occurrence, OccurrenceStatus
from .date_grid import today_utc


def classify_occurrence(occurrence: Occurrence, today: Optional[date] = None) -> OccurrenceStatus:
    reference = today or today_utc()
    if occurrence.is_completed:
        return OccurrenceStatus.COMPLETED
    if occurrence.date < reference:
        return OccurrenceStatus.OVERDUE
    if occurrence.date == reference:
        return OccurrenceStatus.TODAY
    return OccurrenceStatus.UPCOMING


def summarize_entity(entity: Entity, today: Optional[date] = None) -> EntityStatus:
    """Headline status for an entity as a whole rather than one occurrence."""

    reference = today or today_utc()
    started = entity.start_date is not None and entity.start_date < reference
    if not entity.is_recurring:
        if entity.is_completed:
            return EntityStatus.COMPLETED
        return EntityStatus.OVERDUE if started else EntityStatus.UPCOMING
    if entity.completed_occurrence_dates:
        return EntityStatus.HAS_COMPLETED_OCCURRENCES
    return EntityStatus.PARTIALLY_OVERDUE if started else EntityStatus.UPCOMING


__all__ = ["classify_occurrence", "summarize_entity"]
