"""Point queries: classify the roster for one caller-chosen window."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from teamslots.core.errors import QueryRangeError
from teamslots.core.types import Minutes, Weekday
from teamslots.scenario.contract import Roster
from teamslots.scheduling.clock import as_minutes, minutes_to_time

from .availability import AvailabilitySet, PersonIntervals, classify


@dataclass(frozen=True, slots=True)
class QueryResult:
    """Availability for a queried window plus the echoed day and range."""

    day: Weekday
    start: Minutes
    end: Minutes
    availability: AvailabilitySet

    @property
    def time_range(self) -> str:
        return f"{minutes_to_time(self.start)} - {minutes_to_time(self.end)}"


def query_availability(
    people: Sequence[PersonIntervals],
    day: Weekday | str,
    start_time: str | Minutes,
    end_time: str | Minutes,
) -> QueryResult:
    """Classify ``people`` for ``[start_time, end_time)`` on ``day``.

    Raises
    ------
    QueryRangeError
        If the window does not start strictly before it ends.
    """
    weekday = Weekday.parse(day)
    start = as_minutes(start_time)
    end = as_minutes(end_time)
    if start >= end:
        raise QueryRangeError(
            f"End time must be after start time "
            f"(got {minutes_to_time(start)} - {minutes_to_time(end)})"
        )
    return QueryResult(day=weekday, start=start, end=end, availability=classify(people, start, end))


def query_roster(
    roster: Roster, day: Weekday | str, start_time: str | Minutes, end_time: str | Minutes
) -> QueryResult:
    """Run :func:`query_availability` against the roster's schedules for ``day``."""
    weekday = Weekday.parse(day)
    return query_availability(roster.day_schedules(weekday), weekday, start_time, end_time)


__all__ = ["QueryResult", "query_availability", "query_roster"]
