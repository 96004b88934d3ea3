"""Application services orchestrating data access and the calendar core."""

from __future__ import annotations

from .calendar import CalendarService, EntityNotFoundError, MarkDoneOutcome
from .context import ServiceContext
from .sync import SyncService

__all__ = ["CalendarService", "EntityNotFoundError", "MarkDoneOutcome", "ServiceContext", "SyncService"]
