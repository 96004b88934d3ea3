from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Callable, Dict, Optional, Tuple

from ..data.cache.snapshot import Collection, Subscriber
from ..domain import Entity, EntityKind
from .context import ServiceContext

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SyncService:
    """Keeps the snapshot in step with the store by full-collection refreshes."""

    context: ServiceContext
    _stop: threading.Event = field(default_factory=threading.Event, init=False, repr=False)
    _worker: Optional[threading.Thread] = field(default=None, init=False, repr=False)

    def get_events(self) -> Tuple[Entity, ...]:
        return self.context.snapshot.get(EntityKind.EVENT)

    def get_tasks(self) -> Tuple[Entity, ...]:
        return self.context.snapshot.get(EntityKind.TASK)

    def subscribe(self, kind: EntityKind | str, callback: Subscriber) -> Callable[[], None]:
        return self.context.snapshot.subscribe(EntityKind(kind), callback)

    def refresh(self, kind: EntityKind | str) -> Collection:
        kind = EntityKind(kind)
        user_id = self.context.gateway.current_user_id()
        entities = self.context.repository(kind).list_for_user(user_id)
        logger.info("Refreshed %d %s records", len(entities), kind.value)
        return self.context.snapshot.replace(kind, entities)

    def refresh_all(self) -> Dict[EntityKind, int]:
        return {kind: len(self.refresh(kind)) for kind in EntityKind}

    def start_polling(self, interval: Optional[timedelta] = None) -> None:
        if self._worker is not None and self._worker.is_alive():
            return
        seconds = (interval or self.context.settings.sync.refresh_interval).total_seconds()
        self._stop.clear()
        self._worker = threading.Thread(
            target=self._poll,
            args=(seconds,),
            name="pocket-planner-sync",
            daemon=True,
        )
        self._worker.start()
        logger.debug("Polling the store every %.0f seconds", seconds)

    def _poll(self, seconds: float) -> None:
        while not self._stop.wait(seconds):
            try:
                self.refresh_all()
            except Exception:  # noqa: BLE001
                logger.exception("Background refresh failed")

    def stop_polling(self, timeout: Optional[float] = None) -> None:
        self._stop.set()
        if self._worker is not None:
            self._worker.join(timeout)
            self._worker = None
