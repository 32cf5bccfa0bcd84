"""Clock-time helpers: ``HH:MM`` strings to minute offsets and back."""

from __future__ import annotations

from teamslots.core.errors import ScheduleParseError
from teamslots.core.types import HORIZON_MINUTES, SLOT_MINUTES, Minutes

PICKER_START: Minutes = 7 * 60
PICKER_END: Minutes = HORIZON_MINUTES


def time_to_minutes(text: str) -> Minutes:
    """Convert ``"HH:MM"`` (or a bare ``"HH"``) into minutes since midnight.

    Raises
    ------
    ScheduleParseError
        If the hour or minute component is not a non-negative integer.
    """
    parts = str(text).strip().split(":")
    if len(parts) > 2:
        raise ScheduleParseError(f"Invalid clock time {text!r}")
    hours_text = parts[0].strip()
    minutes_text = parts[1].strip() if len(parts) == 2 else ""
    if not (hours_text.isascii() and hours_text.isdigit()):
        raise ScheduleParseError(f"Invalid hour in clock time {text!r}")
    if minutes_text and not (minutes_text.isascii() and minutes_text.isdigit()):
        raise ScheduleParseError(f"Invalid minutes in clock time {text!r}")
    return int(hours_text) * 60 + (int(minutes_text) if minutes_text else 0)


def minutes_to_time(minutes: Minutes) -> str:
    """Format minutes since midnight as a zero-padded ``HH:MM`` string."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def as_minutes(value: str | Minutes) -> Minutes:
    """Accept either a clock string or an integer minute offset."""
    if isinstance(value, int):
        return value
    return time_to_minutes(value)


def format_duration(minutes: Minutes) -> str:
    """Render a duration in hours the way the exports show it (``2h``, ``1.5h``)."""
    return f"{minutes / 60:g}h"


def picker_times() -> list[str]:
    """Return the selectable start/end times (07:00 to 18:30 in 30-minute steps)."""
    return [
        minutes_to_time(value) for value in range(PICKER_START, PICKER_END + 1, SLOT_MINUTES)
    ]


def is_picker_time(value: str | Minutes) -> bool:
    minutes = as_minutes(value)
    return PICKER_START <= minutes <= PICKER_END and minutes % SLOT_MINUTES == 0


__all__ = [
    "PICKER_START",
    "PICKER_END",
    "time_to_minutes",
    "minutes_to_time",
    "as_minutes",
    "format_duration",
    "picker_times",
    "is_picker_time",
]
