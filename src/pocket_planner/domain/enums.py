from __future__ import annotations

from enum import Enum


class EntityKind(str, Enum):
    EVENT = "event"
    TASK = "task"


class Recurrence(str, Enum):
    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class OccurrenceStatus(str, Enum):
    COMPLETED = "completed"
    OVERDUE = "overdue"
    TODAY = "today"
    UPCOMING = "upcoming"


class EntityStatus(str, Enum):
    COMPLETED = "completed"
    OVERDUE = "overdue"
    UPCOMING = "upcoming"
    HAS_COMPLETED_OCCURRENCES = "has_completed_occurrences"
    PARTIALLY_OVERDUE = "partially_overdue"
