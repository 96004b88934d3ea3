from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from ..core import (
    DayCell,
    DayDetail,
    MonthList,
    build_day_detail,
    build_month_grid,
    build_month_list,
    is_done,
    mark_done,
    reconcile_completion,
)
from ..domain import Entity, EntityKind, entity_from_record
from .context import ServiceContext
from .sync import SyncService

logger = logging.getLogger(__name__)


class EntityNotFoundError(KeyError):
    """Raised at the API boundary when a requested event or task does not exist."""


class MarkDoneOutcome(str, Enum):
    COMPLETED = "completed"
    ALREADY_COMPLETED = "already_completed"
    NOT_FOUND = "not_found"


@dataclass(slots=True)
class CalendarService:
    context: ServiceContext
    sync: SyncService

    def month_grid(self, year: int, month: int, *, today: Optional[date] = None) -> List[DayCell]:
        return build_month_grid(year, month, self.sync.get_events(), self.sync.get_tasks(), today=today)

    def day_detail(self, day: date) -> DayDetail:
        return build_day_detail(day, self.sync.get_events(), self.sync.get_tasks())

    def month_list(self, year: int, month: int) -> MonthList:
        return build_month_list(year, month, self.sync.get_events(), self.sync.get_tasks())

    def mark_occurrence_done(self, kind: EntityKind | str, entity_id: str, day: date) -> MarkDoneOutcome:
        """Record ``day`` as done for the stored entity, then refresh its collection.

        The entity is read from the store rather than the snapshot so the
        write is based on the latest completion state.
        """

        kind = EntityKind(kind)
        user_id = self.context.gateway.current_user_id()
        repository = self.context.repository(kind)
        entity = repository.fetch(user_id, entity_id)
        if entity is None:
            logger.warning("Cannot mark %s '%s' done: not found", kind.value, entity_id)
            return MarkDoneOutcome.NOT_FOUND
        if is_done(entity, day):
            logger.debug("%s '%s' already done on %s", kind.value, entity_id, day)
            return MarkDoneOutcome.ALREADY_COMPLETED

        updated = repository.update_fields(user_id, entity_id, mark_done(entity, day))
        if updated is None:
            logger.warning("%s '%s' disappeared before it could be marked done", kind.value, entity_id)
            return MarkDoneOutcome.NOT_FOUND
        self.sync.refresh(kind)
        return MarkDoneOutcome.COMPLETED

    def save_entity(self, entity: Entity) -> Entity:
        user_id = self.context.gateway.current_user_id()
        record = {
            **entity.to_record(),
            **reconcile_completion(entity),
            "id": entity.id or str(uuid4()),
            "user_id": entity.user_id or user_id,
        }
        if entity.kind is EntityKind.TASK and not record.get("type"):
            record["type"] = self.context.settings.calendar.default_task_type
        saved = self.context.repository(entity.kind).upsert(entity_from_record(entity.kind, record))
        self.sync.refresh(entity.kind)
        return saved

    def delete_entity(self, kind: EntityKind | str, entity_id: str) -> bool:
        kind = EntityKind(kind)
        user_id = self.context.gateway.current_user_id()
        deleted = self.context.repository(kind).delete(user_id, entity_id)
        if deleted:
            self.sync.refresh(kind)
        return deleted
