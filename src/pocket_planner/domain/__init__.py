"""Domain models for events, tasks, and their calendar occurrences."""

from __future__ import annotations

from .enums import EntityKind, EntityStatus, OccurrenceStatus, Recurrence
from .models import (
    DEFAULT_TASK_TYPE,
    PREDEFINED_TASK_TYPES,
    Entity,
    Event,
    Occurrence,
    Task,
    entities_from_records,
    entity_from_record,
    format_iso_date,
    parse_iso_date,
)

__all__ = [
    "DEFAULT_TASK_TYPE",
    "PREDEFINED_TASK_TYPES",
    "Entity",
    "EntityKind",
    "EntityStatus",
    "Event",
    "Occurrence",
    "OccurrenceStatus",
    "Recurrence",
    "Task",
    "entities_from_records",
    "entity_from_record",
    "format_iso_date",
    "parse_iso_date",
]
