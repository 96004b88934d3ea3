"""Data access layer."""

from __future__ import annotations

from .cache import EntitySnapshot
from .repositories import EntityRepository
from .supabase import SupabaseGateway, SupabaseNotInitializedError, SupabaseSessionMissingError

__all__ = [
    "EntityRepository",
    "EntitySnapshot",
    "SupabaseGateway",
    "SupabaseNotInitializedError",
    "SupabaseSessionMissingError",
]
