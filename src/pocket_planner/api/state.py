from __future__ import annotations

from dataclasses import dataclass, field

from ..services import CalendarService, ServiceContext, SyncService


@dataclass(slots=True)
class ApiState:
    context: ServiceContext = field(default_factory=ServiceContext)
    sync: SyncService = field(init=False)
    calendar: CalendarService = field(init=False)

    def __post_init__(self) -> None:
        self.sync = SyncService(self.context)
        self.calendar = CalendarService(self.context, self.sync)


api_state = ApiState()
