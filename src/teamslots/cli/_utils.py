"""CLI helper utilities for teamslots."""

from __future__ import annotations

from collections.abc import Sequence

import typer

from teamslots.core.errors import ScheduleParseError, TeamSlotsValueError
from teamslots.core.types import WEEKDAYS, Minutes, Weekday
from teamslots.scheduling.clock import time_to_minutes


def parse_days(values: Sequence[str] | None) -> list[Weekday]:
    """Resolve repeatable ``--day`` options; no values means the whole working week."""
    if not values:
        return list(WEEKDAYS)
    days: list[Weekday] = []
    for value in values:
        try:
            day = Weekday.parse(value)
        except TeamSlotsValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
        if day not in days:
            days.append(day)
    return sorted(days, key=WEEKDAYS.index)


def parse_clock(value: str, option: str) -> Minutes:
    """Convert an ``HH:MM`` option value, reporting failures as CLI usage errors."""
    try:
        return time_to_minutes(value)
    except ScheduleParseError as exc:
        raise typer.BadParameter(f"{option}: {exc}") from exc


__all__ = ["parse_days", "parse_clock"]
