from __future__ import annotations

from .snapshot import EntitySnapshot

__all__ = ["EntitySnapshot"]
