"""Supabase repositories for events and tasks."""

from __future__ import annotations

from .entities import EntityRepository

__all__ = ["EntityRepository"]
