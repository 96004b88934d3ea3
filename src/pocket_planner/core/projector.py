from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Iterable, List

from ..domain import Entity, Occurrence
from .completion import is_done
from .date_grid import check_month
from .recurrence import expand

logger = logging.getLogger(__name__)


def _occurrences_for(entity: Entity, year: int, month: int) -> List[Occurrence]:
    try:
        days = expand(entity, year, month)
    except Exception:  # noqa: BLE001
        logger.exception("Failed to expand %s '%s'", getattr(entity, "kind", "entity"), entity.id)
        return []
    return [
        Occurrence(
            entity=entity,
            date=day,
            is_occurrence=entity.is_recurring,
            is_completed=is_done(entity, day),
        )
        for day in days
    ]


def project(entities: Iterable[Entity], year: int, month: int) -> List[Occurrence]:
    """Expand ``entities`` over the 0-indexed ``month`` and sort the result.

    Ordering is by date, then start time (a missing time counts as
    ``"00:00"``); entities sharing a key keep their input order.
    """

    check_month(month)
    occurrences: List[Occurrence] = []
    for entity in entities:
        occurrences.extend(_occurrences_for(entity, year, month))
    occurrences.sort(key=lambda occurrence: occurrence.sort_key)
    return occurrences


def index_by_date(occurrences: Iterable[Occurrence]) -> Dict[date, List[Occurrence]]:
    indexed: Dict[date, List[Occurrence]] = {}
    for occurrence in occurrences:
        indexed.setdefault(occurrence.date, []).append(occurrence)
    return indexed


__all__ = ["index_by_date", "project"]
