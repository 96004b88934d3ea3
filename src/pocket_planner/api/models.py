from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel, frozen=True)


class EntityPayload(_CamelModel):
    id: str
    kind: str
    user_id: Optional[str] = Field(default=None)
    name: str = Field(default="")
    description: str = Field(default="")
    additional_info: str = Field(default="")
    start_date: Optional[str] = Field(default=None)
    start_time: Optional[str] = Field(default=None)
    end_date: Optional[str] = Field(default=None)
    end_time: Optional[str] = Field(default=None)
    recurrence: Optional[str] = Field(default=None)
    is_completed: bool = Field(default=False)
    completed_occurrences_dates: List[str] = Field(default_factory=list)
    type: Optional[str] = Field(default=None)
    status: str


class OccurrencePayload(_CamelModel):
    original_id: str
    kind: str
    date: str
    name: str
    description: str = Field(default="")
    start_time: Optional[str] = Field(default=None)
    end_time: Optional[str] = Field(default=None)
    is_occurrence: bool
    is_completed: bool
    status: str
    type: Optional[str] = Field(default=None)


class DayCellPayload(_CamelModel):
    date: Optional[str] = Field(default=None)
    has_events: bool = Field(default=False)
    has_tasks: bool = Field(default=False)
    event_count: int = Field(default=0)
    task_count: int = Field(default=0)
    is_today: bool = Field(default=False)
