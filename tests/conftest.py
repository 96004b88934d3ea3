"""Shared fixtures: entity builders, settings without environment lookups, and an in-memory repository."""

from __future__ import annotations

import typing as t
from datetime import date, timedelta
from pathlib import Path

import pytest

from pocket_planner.config import (
    AppSettings,
    CalendarSettings,
    LoggingSettings,
    StorageSettings,
    SupabaseSettings,
    SyncSettings,
)
from pocket_planner.domain import Entity, EntityKind, Event, Recurrence, Task, entity_from_record
from pocket_planner.services import CalendarService, ServiceContext, SyncService

OWNER = "user-1"


def make_event(entity_id: str = "evt-1", **fields: t.Any) -> Event:
    fields.setdefault("name", f"Event {entity_id}")
    fields.setdefault("start_date", date(2025, 3, 1))
    fields.setdefault("user_id", OWNER)
    return Event(id=entity_id, **fields)


def make_task(entity_id: str = "tsk-1", **fields: t.Any) -> Task:
    fields.setdefault("name", f"Task {entity_id}")
    fields.setdefault("start_date", date(2025, 3, 1))
    fields.setdefault("user_id", OWNER)
    return Task(id=entity_id, **fields)


class FakeRepository:
    """Stands in for EntityRepository, keeping rows as plain records."""

    def __init__(self, kind: EntityKind, entities: t.Iterable[Entity] = ()) -> None:
        self.kind = kind
        self.records: dict[str, dict[str, t.Any]] = {entity.id: entity.to_record() for entity in entities}
        self.updates: list[tuple[str, dict[str, t.Any]]] = []
        self.fail_writes = False

    def list_for_user(self, user_id: str) -> list[Entity]:
        return [
            entity_from_record(self.kind, record)
            for record in self.records.values()
            if record.get("user_id") == user_id
        ]

    def fetch(self, user_id: str, entity_id: str) -> Entity | None:
        record = self.records.get(entity_id)
        if record is None or record.get("user_id") != user_id:
            return None
        return entity_from_record(self.kind, record)

    def update_fields(self, user_id: str, entity_id: str, fields: dict[str, t.Any]) -> Entity | None:
        if self.fail_writes:
            raise RuntimeError("store unavailable")
        if self.fetch(user_id, entity_id) is None:
            return None
        self.updates.append((entity_id, dict(fields)))
        self.records[entity_id].update(fields)
        return entity_from_record(self.kind, self.records[entity_id])

    def upsert(self, entity: Entity) -> Entity:
        if self.fail_writes:
            raise RuntimeError("store unavailable")
        self.records[entity.id] = entity.to_record()
        return entity_from_record(self.kind, self.records[entity.id])

    def delete(self, user_id: str, entity_id: str) -> bool:
        if self.fetch(user_id, entity_id) is None:
            return False
        del self.records[entity_id]
        return True


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return AppSettings(
        supabase=SupabaseSettings(url=None, anon_key=None, owner_id=OWNER),
        storage=StorageSettings(events_table="planner_events", tasks_table="planner_tasks"),
        sync=SyncSettings(refresh_interval=timedelta(seconds=60)),
        logging=LoggingSettings(level="DEBUG", directory=tmp_path / "logs"),
        calendar=CalendarSettings(default_task_type="Other"),
    )


@pytest.fixture
def event_repository() -> FakeRepository:
    return FakeRepository(EntityKind.EVENT)


@pytest.fixture
def task_repository() -> FakeRepository:
    return FakeRepository(EntityKind.TASK)


@pytest.fixture
def context(settings: AppSettings, event_repository: FakeRepository, task_repository: FakeRepository) -> ServiceContext:
    return ServiceContext(
        settings=settings,
        repositories={EntityKind.EVENT: event_repository, EntityKind.TASK: task_repository},
    )


@pytest.fixture
def sync(context: ServiceContext) -> SyncService:
    return SyncService(context)


@pytest.fixture
def calendar_service(context: ServiceContext, sync: SyncService) -> CalendarService:
    return CalendarService(context, sync)


@pytest.fixture
def daily_event() -> Event:
    return make_event(
        "evt-daily",
        recurrence=Recurrence.DAILY,
        start_date=date(2025, 3, 1),
        end_date=date(2025, 3, 3),
    )
