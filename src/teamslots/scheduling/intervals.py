"""Free-time interval parsing for a single person and day."""

from __future__ import annotations

from dataclasses import dataclass

from teamslots.core.errors import ScheduleParseError
from teamslots.core.types import Minutes

from .clock import minutes_to_time, time_to_minutes

TOKEN_SEPARATOR = ";"
RANGE_SEPARATOR = "-"


@dataclass(frozen=True, slots=True)
class Interval:
    """Half-open availability span ``[start, end)`` in minutes since midnight."""

    start: Minutes
    end: Minutes

    @property
    def duration(self) -> Minutes:
        return self.end - self.start

    def contains(self, start: Minutes, end: Minutes) -> bool:
        """Return ``True`` when ``[start, end)`` lies entirely inside this interval."""
        return self.start <= start and self.end >= end

    def overlap(self, start: Minutes, end: Minutes) -> Minutes:
        """Minutes shared with ``[start, end)`` (zero when disjoint)."""
        return max(0, min(self.end, end) - max(self.start, start))

    def label(self) -> str:
        return f"{minutes_to_time(self.start)}-{minutes_to_time(self.end)}"


def _parse_token(token: str) -> Interval | None:
    start_text, _, end_text = token.partition(RANGE_SEPARATOR)
    start_text = start_text.strip()
    end_text = end_text.strip()
    if not start_text or not end_text:
        return None
    try:
        start = time_to_minutes(start_text)
        end = time_to_minutes(end_text)
    except ScheduleParseError:
        return None
    if start >= end:
        return None
    return Interval(start=start, end=end)


def parse_day_schedule(raw_text: str | None) -> list[Interval]:
    """Parse ``"09:00-10:30;14:00-15:00"`` into intervals, in input order.

    Malformed, empty, or reversed tokens are skipped rather than failing the whole day, and
    overlapping or duplicate intervals are kept as given.
    """
    if raw_text is None or not raw_text.strip():
        return []
    intervals: list[Interval] = []
    for token in raw_text.split(TOKEN_SEPARATOR):
        interval = _parse_token(token)
        if interval is not None:
            intervals.append(interval)
    return intervals


def dropped_tokens(raw_text: str | None) -> list[str]:
    """Return the non-blank tokens that :func:`parse_day_schedule` would discard."""
    if raw_text is None or not raw_text.strip():
        return []
    return [
        token.strip()
        for token in raw_text.split(TOKEN_SEPARATOR)
        if token.strip() and _parse_token(token) is None
    ]


__all__ = ["Interval", "parse_day_schedule", "dropped_tokens"]
