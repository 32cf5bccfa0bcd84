"""Roster lint checks reported alongside loading."""

from __future__ import annotations

from typing import List

from teamslots.core.types import WEEKDAYS
from teamslots.scenario.contract import Roster
from teamslots.scheduling.intervals import dropped_tokens


def validate_roster(roster: Roster) -> list[str]:
    """Return warnings for skipped free-time tokens and people with no availability."""

    warnings: List[str] = []
    for person in roster.people:
        has_any = False
        for day in WEEKDAYS:
            for token in dropped_tokens(person.free_time(day)):
                warnings.append(f"{person.name} {day.value}: ignored malformed entry {token!r}")
            if person.intervals(day):
                has_any = True
        if not has_any:
            warnings.append(f"{person.name}: no availability entered for any weekday")
    return warnings


__all__ = ["validate_roster"]
