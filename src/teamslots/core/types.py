"""Shared engine constants and the weekday enumeration."""

from __future__ import annotations

from enum import Enum

from .errors import TeamSlotsValueError

Minutes = int  # minutes since midnight

SLOT_MINUTES: Minutes = 30
HORIZON_MINUTES: Minutes = 18 * 60 + 30
PARTIAL_OVERLAP_MINUTES: Minutes = 30
FULL_WEIGHT = 10
MAX_SLOTS_PER_DAY = 2


class Weekday(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"

    @classmethod
    def parse(cls, value: str | Weekday) -> Weekday:
        """Resolve a weekday from its name (case-insensitive) or three-letter prefix."""
        if isinstance(value, Weekday):
            return value
        key = str(value).strip().lower()
        for day in cls:
            if key in (day.value.lower(), day.value.lower()[:3]):
                return day
        raise TeamSlotsValueError(
            f"Unknown weekday {value!r}; expected one of {', '.join(d.value for d in cls)}"
        )


WEEKDAYS: tuple[Weekday, ...] = tuple(Weekday)

__all__ = [
    "Minutes",
    "SLOT_MINUTES",
    "HORIZON_MINUTES",
    "PARTIAL_OVERLAP_MINUTES",
    "FULL_WEIGHT",
    "MAX_SLOTS_PER_DAY",
    "Weekday",
    "WEEKDAYS",
]
