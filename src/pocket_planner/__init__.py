"""Pocket Planner application package."""

from __future__ import annotations

from .core import build_day_detail, build_month_grid, build_month_list

__all__ = ["build_day_detail", "build_month_grid", "build_month_list", "main"]


def main() -> None:
    from .cli import main as cli_main

    cli_main()
