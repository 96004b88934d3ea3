from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from ...domain import Entity, EntityKind, entity_from_record
from ..supabase import SupabaseGateway

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EntityRepository:
    """Rows of one entity kind in one Supabase table, scoped by owner."""

    gateway: SupabaseGateway
    table_name: str
    kind: EntityKind

    def _table(self):
        return self.gateway.table(self.table_name)

    def _hydrate(self, records: Iterable[Dict[str, Any]]) -> List[Entity]:
        entities: list[Entity] = []
        for record in records:
            try:
                entities.append(entity_from_record(self.kind, record))
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping malformed %s record %r", self.kind.value, record.get("id"))
        return entities

    def list_for_user(self, user_id: str) -> List[Entity]:
        response = (
            self._table()
            .select("*")
            .eq("user_id", user_id)
            .order("start_date", desc=False)
            .execute()
        )
        return self._hydrate(response.data or [])

    def fetch(self, user_id: str, entity_id: str) -> Optional[Entity]:
        response = (
            self._table()
            .select("*")
            .eq("user_id", user_id)
            .eq("id", entity_id)
            .limit(1)
            .execute()
        )
        entities = self._hydrate(response.data or [])
        return entities[0] if entities else None

    def update_fields(self, user_id: str, entity_id: str, fields: Dict[str, Any]) -> Optional[Entity]:
        payload = {**fields, "updated_at": datetime.now(timezone.utc).isoformat()}
        response = (
            self._table()
            .update(payload)
            .eq("user_id", user_id)
            .eq("id", entity_id)
            .execute()
        )
        entities = self._hydrate(response.data or [])
        return entities[0] if entities else None

    def upsert(self, entity: Entity) -> Entity:
        payload = {**entity.to_record(), "updated_at": datetime.now(timezone.utc).isoformat()}
        if entity.recurrence is None:
            # Leave an unreadable stored rule untouched.
            payload.pop("recurrence")
        response = self._table().upsert(payload, on_conflict="id").execute()
        records = response.data or [payload]
        return entity_from_record(self.kind, records[0])

    def delete(self, user_id: str, entity_id: str) -> bool:
        response = (
            self._table()
            .delete()
            .eq("user_id", user_id)
            .eq("id", entity_id)
            .execute()
        )
        deleted = response.data or []
        return bool(deleted)
