from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Iterable

from ..domain import Entity
from .recurrence import occurs_on

logger = logging.getLogger(__name__)

COMPLETED_FLAG_FIELD = "is_completed"
COMPLETED_DATES_FIELD = "completed_occurrences_dates"


class InvalidOccurrenceError(ValueError):
    """Raised when a recurring entity is marked done on a day it does not occur."""


def _dates_field(days: Iterable[date]) -> Dict[str, Any]:
    return {COMPLETED_DATES_FIELD: sorted(day.isoformat() for day in set(days))}


def is_done(entity: Entity, day: date) -> bool:
    if not entity.is_recurring:
        return entity.is_completed
    return day in entity.completed_occurrence_dates


def mark_done(entity: Entity, day: date) -> Dict[str, Any]:
    """Return the persisted fields that record ``day`` as done for ``entity``.

    Nothing is written here; the caller hands the result to the store.
    Marking an already completed occurrence returns the same fields again.
    """

    if not entity.is_recurring:
        return {COMPLETED_FLAG_FIELD: True}
    if day not in entity.completed_occurrence_dates and not occurs_on(entity, day):
        raise InvalidOccurrenceError(f"{entity.kind.value} '{entity.id}' does not occur on {day.isoformat()}")
    return _dates_field(entity.completed_occurrence_dates | {day})


def reconcile_completion(entity: Entity) -> Dict[str, Any]:
    """Drop completed dates that an edited schedule no longer produces."""

    if not entity.is_recurring:
        return {COMPLETED_FLAG_FIELD: entity.is_completed}
    if entity.recurrence is None or entity.start_date is None:
        logger.warning("Keeping completed dates of unexpandable %s '%s'", entity.kind.value, entity.id)
        return _dates_field(entity.completed_occurrence_dates)
    kept = {day for day in entity.completed_occurrence_dates if occurs_on(entity, day)}
    dropped = len(entity.completed_occurrence_dates) - len(kept)
    if dropped:
        logger.info("Dropping %d stale completed dates from %s '%s'", dropped, entity.kind.value, entity.id)
    return _dates_field(kept)


__all__ = [
    "COMPLETED_DATES_FIELD",
    "COMPLETED_FLAG_FIELD",
    "InvalidOccurrenceError",
    "is_done",
    "mark_done",
    "reconcile_completion",
]
