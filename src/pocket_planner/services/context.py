from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from ..config import AppSettings, get_settings
from ..data import EntityRepository, EntitySnapshot, SupabaseGateway
from ..domain import EntityKind


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for services to share settings, gateway, repositories, and the snapshot."""

    settings: AppSettings = field(default_factory=get_settings)
    repositories: Dict[EntityKind, EntityRepository] = field(default_factory=dict)
    snapshot: EntitySnapshot = field(default_factory=EntitySnapshot)
    gateway: SupabaseGateway = field(init=False)

    def __post_init__(self) -> None:
        self.gateway = SupabaseGateway(self.settings.supabase)
        tables = {
            EntityKind.EVENT: self.settings.storage.events_table,
            EntityKind.TASK: self.settings.storage.tasks_table,
        }
        for kind, table_name in tables.items():
            self.repositories.setdefault(
                kind,
                EntityRepository(gateway=self.gateway, table_name=table_name, kind=kind),
            )

    def repository(self, kind: EntityKind) -> EntityRepository:
        return self.repositories[EntityKind(kind)]
