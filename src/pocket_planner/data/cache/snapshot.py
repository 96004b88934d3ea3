from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from ...domain import Entity, EntityKind

Collection = Tuple[Entity, ...]
Subscriber = Callable[[Collection], None]


def _empty_collections() -> Dict[EntityKind, Collection]:
    return {kind: () for kind in EntityKind}


def _empty_subscribers() -> Dict[EntityKind, List[Subscriber]]:
    return {kind: [] for kind in EntityKind}


@dataclass
class EntitySnapshot:
    """Latest complete event and task collections pulled from the store.

    Every update replaces a whole collection; nothing is patched in place, so
    readers never see a half-applied refresh.
    """

    collections: Dict[EntityKind, Collection] = field(default_factory=_empty_collections)
    subscribers: Dict[EntityKind, List[Subscriber]] = field(default_factory=_empty_subscribers)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def get(self, kind: EntityKind) -> Collection:
        with self._lock:
            return self.collections[kind]

    def find(self, kind: EntityKind, entity_id: str) -> Optional[Entity]:
        for entity in self.get(kind):
            if entity.id == entity_id:
                return entity
        return None

    def replace(self, kind: EntityKind, entities: Iterable[Entity]) -> Collection:
        collection = tuple(entities)
        with self._lock:
            self.collections[kind] = collection
            listeners = list(self.subscribers[kind])
        for callback in listeners:
            callback(collection)
        return collection

    def subscribe(self, kind: EntityKind, callback: Subscriber) -> Callable[[], None]:
        with self._lock:
            self.subscribers[kind].append(callback)

        def _unsubscribe() -> None:
            with self._lock:
                if callback in self.subscribers[kind]:
                    self.subscribers[kind].remove(callback)

        return _unsubscribe

    def clear(self) -> None:
        for kind in EntityKind:
            self.replace(kind, ())
