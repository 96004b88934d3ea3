from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from platformdirs import user_log_dir

from ..domain import DEFAULT_TASK_TYPE

load_dotenv()

APP_NAME = "Pocket Planner"
APP_AUTHOR = "PocketPlanner"


@dataclass(frozen=True)
class SupabaseSettings:
    url: Optional[str]
    anon_key: Optional[str]
    owner_id: Optional[str]

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.anon_key)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.url:
            missing.append("SUPABASE_URL")
        if not self.anon_key:
            missing.append("SUPABASE_ANON_KEY")
        return missing


@dataclass(frozen=True)
class StorageSettings:
    events_table: str
    tasks_table: str


@dataclass(frozen=True)
class SyncSettings:
    refresh_interval: timedelta


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Path


@dataclass(frozen=True)
class CalendarSettings:
    default_task_type: str


@dataclass(frozen=True)
class AppSettings:
    supabase: SupabaseSettings
    storage: StorageSettings
    sync: SyncSettings
    logging: LoggingSettings
    calendar: CalendarSettings


def _seconds_from_env(name: str, default_seconds: int) -> timedelta:
    raw = os.getenv(name)
    if not raw:
        return timedelta(seconds=default_seconds)
    try:
        seconds = float(raw)
    except ValueError:
        return timedelta(seconds=default_seconds)
    return timedelta(seconds=max(seconds, 1.0))


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    supabase = SupabaseSettings(
        url=os.getenv("SUPABASE_URL"),
        anon_key=os.getenv("SUPABASE_ANON_KEY"),
        owner_id=os.getenv("POCKET_PLANNER_USER_ID"),
    )

    storage = StorageSettings(
        events_table=os.getenv("SUPABASE_EVENTS_TABLE", "planner_events"),
        tasks_table=os.getenv("SUPABASE_TASKS_TABLE", "planner_tasks"),
    )

    sync = SyncSettings(
        refresh_interval=_seconds_from_env("POCKET_PLANNER_REFRESH_SECONDS", 60),
    )

    logging_settings = LoggingSettings(
        level=os.getenv("POCKET_PLANNER_LOG_LEVEL", "INFO").upper(),
        directory=Path(os.getenv("POCKET_PLANNER_LOG_DIR") or user_log_dir(APP_NAME, APP_AUTHOR)),
    )

    calendar = CalendarSettings(
        default_task_type=os.getenv("POCKET_PLANNER_DEFAULT_TASK_TYPE", DEFAULT_TASK_TYPE),
    )

    return AppSettings(
        supabase=supabase,
        storage=storage,
        sync=sync,
        logging=logging_settings,
        calendar=calendar,
    )
