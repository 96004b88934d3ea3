from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, ClassVar, Dict, FrozenSet, Iterable, Optional, Tuple, Type

from .enums import EntityKind, Recurrence

logger = logging.getLogger(__name__)

DEFAULT_TASK_TYPE = "Other"
PREDEFINED_TASK_TYPES: Tuple[str, ...] = (
    "Payment",
    "Medication",
    "Groceries",
    "Workout",
    "Meeting",
    DEFAULT_TASK_TYPE,
)
DEFAULT_SORT_TIME = "00:00"
_TRUE_STRINGS = frozenset({"true", "t", "yes", "y", "1"})

# Documents exported from the older document store use camelCase keys.
_CAMEL_CASE_KEYS = {
    "userId": "user_id",
    "additionalInfo": "additional_info",
    "startDate": "start_date",
    "startTime": "start_time",
    "endDate": "end_date",
    "endTime": "end_time",
    "isCompleted": "is_completed",
    "completedOccurrencesDates": "completed_occurrences_dates",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}


def parse_iso_date(value: Any) -> Optional[date]:
    """Return the calendar date for ``value`` or ``None`` when it cannot be read."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            logger.debug("Ignoring unreadable timestamp %r", value)
    return None


def _parse_recurrence(value: Any) -> Optional[Recurrence]:
    if value is None or value == "":
        return Recurrence.NONE
    try:
        return Recurrence(str(value).strip().lower())
    except ValueError:
        logger.warning("Unrecognised recurrence value %r", value)
        return None


def _parse_time(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _parse_date_set(values: Any) -> FrozenSet[date]:
    if not isinstance(values, (list, tuple, set, frozenset)):
        return frozenset()
    parsed = (parse_iso_date(item) for item in values)
    return frozenset(item for item in parsed if item is not None)


def _normalize_keys(record: Dict[str, Any]) -> Dict[str, Any]:
    normalized = dict(record)
    for legacy, current in _CAMEL_CASE_KEYS.items():
        if legacy in normalized and current not in normalized:
            normalized[current] = normalized.pop(legacy)
    return normalized


def format_iso_date(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass(frozen=True, slots=True)
class Entity:
    """Fields shared by events and tasks.

    ``is_completed`` is only consulted for non-recurring entities and
    ``completed_occurrence_dates`` only for recurring ones. A ``recurrence``
    of ``None`` marks a stored value that could not be understood.
    """

    kind: ClassVar[EntityKind]

    id: str
    user_id: Optional[str] = None
    name: str = ""
    description: str = ""
    additional_info: str = ""
    start_date: Optional[date] = None
    start_time: Optional[str] = None
    end_date: Optional[date] = None
    end_time: Optional[str] = None
    recurrence: Optional[Recurrence] = Recurrence.NONE
    is_completed: bool = False
    completed_occurrence_dates: FrozenSet[date] = frozenset()
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_recurring(self) -> bool:
        return self.recurrence is not Recurrence.NONE

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Entity":
        data = _normalize_keys(record)
        return cls(
            id=str(data["id"]),
            user_id=str(data["user_id"]) if data.get("user_id") else None,
            name=str(data.get("name") or ""),
            description=str(data.get("description") or ""),
            additional_info=str(data.get("additional_info") or ""),
            start_date=parse_iso_date(data.get("start_date")),
            start_time=_parse_time(data.get("start_time")),
            end_date=parse_iso_date(data.get("end_date")),
            end_time=_parse_time(data.get("end_time")),
            recurrence=_parse_recurrence(data.get("recurrence")),
            is_completed=_parse_flag(data.get("is_completed")),
            completed_occurrence_dates=_parse_date_set(data.get("completed_occurrences_dates")),
            created_at=_parse_timestamp(data.get("created_at")),
            updated_at=_parse_timestamp(data.get("updated_at")),
            **cls._extra_kwargs(data),
        )

    @classmethod
    def _extra_kwargs(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        return {}

    def _extra_fields(self) -> Dict[str, Any]:
        return {}

    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "description": self.description,
            "additional_info": self.additional_info,
            "start_date": format_iso_date(self.start_date),
            "start_time": self.start_time,
            "end_date": format_iso_date(self.end_date),
            "end_time": self.end_time,
            "recurrence": self.recurrence.value if self.recurrence else None,
            "is_completed": self.is_completed,
            "completed_occurrences_dates": sorted(day.isoformat() for day in self.completed_occurrence_dates),
        }
        record.update(self._extra_fields())
        return record


@dataclass(frozen=True, slots=True)
class Event(Entity):
    kind: ClassVar[EntityKind] = EntityKind.EVENT


@dataclass(frozen=True, slots=True)
class Task(Entity):
    kind: ClassVar[EntityKind] = EntityKind.TASK

    type: str = DEFAULT_TASK_TYPE

    @classmethod
    def _extra_kwargs(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        return {"type": str(data.get("type") or DEFAULT_TASK_TYPE)}

    def _extra_fields(self) -> Dict[str, Any]:
        return {"type": self.type}


_ENTITY_TYPES: Dict[EntityKind, Type[Entity]] = {
    EntityKind.EVENT: Event,
    EntityKind.TASK: Task,
}


def entity_from_record(kind: EntityKind | str, record: Dict[str, Any]) -> Entity:
    return _ENTITY_TYPES[EntityKind(kind)].from_record(record)


def entities_from_records(kind: EntityKind | str, records: Iterable[Dict[str, Any]]) -> list[Entity]:
    return [entity_from_record(kind, record) for record in records]


@dataclass(frozen=True, slots=True)
class Occurrence:
    """One entity projected onto one calendar date of a requested month."""

    entity: Entity
    date: date
    is_occurrence: bool
    is_completed: bool

    @property
    def original_id(self) -> str:
        return self.entity.id

    @property
    def kind(self) -> EntityKind:
        return self.entity.kind

    @property
    def name(self) -> str:
        return self.entity.name

    @property
    def start_time(self) -> Optional[str]:
        return self.entity.start_time

    @property
    def sort_key(self) -> Tuple[date, str]:
        return (self.date, self.entity.start_time or DEFAULT_SORT_TIME)
