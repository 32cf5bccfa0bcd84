"""Scheduling utilities (clock arithmetic, interval parsing)."""

from .clock import (
    as_minutes,
    format_duration,
    is_picker_time,
    minutes_to_time,
    picker_times,
    time_to_minutes,
)
from .intervals import Interval, dropped_tokens, parse_day_schedule

__all__ = [
    "Interval",
    "parse_day_schedule",
    "dropped_tokens",
    "time_to_minutes",
    "minutes_to_time",
    "as_minutes",
    "format_duration",
    "picker_times",
    "is_picker_time",
]
