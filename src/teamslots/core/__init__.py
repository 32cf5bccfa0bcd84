"""Core utilities shared across teamslots modules."""

from .errors import QueryRangeError, RosterShapeError, ScheduleParseError, TeamSlotsValueError
from .types import (
    FULL_WEIGHT,
    HORIZON_MINUTES,
    MAX_SLOTS_PER_DAY,
    PARTIAL_OVERLAP_MINUTES,
    SLOT_MINUTES,
    WEEKDAYS,
    Minutes,
    Weekday,
)

__all__ = [
    "TeamSlotsValueError",
    "ScheduleParseError",
    "QueryRangeError",
    "RosterShapeError",
    "Minutes",
    "SLOT_MINUTES",
    "HORIZON_MINUTES",
    "PARTIAL_OVERLAP_MINUTES",
    "FULL_WEIGHT",
    "MAX_SLOTS_PER_DAY",
    "Weekday",
    "WEEKDAYS",
]
