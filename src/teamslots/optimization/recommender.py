"""Greedy meeting-slot recommender.

Every 30-minute base start between the earliest start and the 18:30 horizon seeds its own
candidate window. A window that has at least one fully-available person is widened in 30-minute
steps for as long as the fully-available group stays exactly the same, then scored as
``10 * fully + partially``. Candidates from neighbouring base starts may overlap; they are ranked
together and the best two are kept.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from teamslots.core.types import (
    FULL_WEIGHT,
    HORIZON_MINUTES,
    MAX_SLOTS_PER_DAY,
    SLOT_MINUTES,
    WEEKDAYS,
    Minutes,
    Weekday,
)
from teamslots.evaluation.availability import AvailabilitySet, PersonIntervals, classify
from teamslots.scenario.contract import Roster
from teamslots.scheduling.clock import as_minutes, format_duration, minutes_to_time


@dataclass(frozen=True, slots=True)
class RecommendedSlot:
    """One ranked candidate window for a weekday."""

    day: Weekday
    start: Minutes
    end: Minutes
    score: int
    availability: AvailabilitySet

    @property
    def duration(self) -> Minutes:
        return self.end - self.start

    @property
    def start_time(self) -> str:
        return minutes_to_time(self.start)

    @property
    def end_time(self) -> str:
        return minutes_to_time(self.end)

    @property
    def duration_label(self) -> str:
        return format_duration(self.duration)

    @property
    def fully_available(self) -> list[str]:
        return self.availability.fully_available

    @property
    def partially_available(self) -> list[str]:
        return self.availability.partially_available

    @property
    def not_available(self) -> list[str]:
        return self.availability.not_available


WeekRecommendations = dict[Weekday, list[RecommendedSlot]]


def score_availability(availability: AvailabilitySet) -> int:
    return FULL_WEIGHT * len(availability.fully_available) + len(
        availability.partially_available
    )


def extend_slot(
    people: Sequence[PersonIntervals], day: Weekday, base_start: Minutes
) -> RecommendedSlot | None:
    """Grow the window seeded at ``base_start`` while its fully-available group is stable.

    Returns ``None`` when nobody is fully available for the initial 30-minute window or when that
    window already ends past the horizon.
    """
    end = base_start + SLOT_MINUTES
    if end > HORIZON_MINUTES:
        return None
    current = classify(people, base_start, end)
    if len(current.fully_available) == 0:
        return None
    while end + SLOT_MINUTES <= HORIZON_MINUTES:
        widened = classify(people, base_start, end + SLOT_MINUTES)
        if widened.fully_key() != current.fully_key():
            break
        end += SLOT_MINUTES
        current = widened
    return RecommendedSlot(
        day=day,
        start=base_start,
        end=end,
        score=score_availability(current),
        availability=current,
    )


def candidate_slots(
    people: Sequence[PersonIntervals], day: Weekday | str, earliest_start: str | Minutes
) -> list[RecommendedSlot]:
    """Return every extended candidate for ``day`` in base-start order (unranked)."""
    weekday = Weekday.parse(day)
    candidates: list[RecommendedSlot] = []
    for base_start in range(as_minutes(earliest_start), HORIZON_MINUTES, SLOT_MINUTES):
        slot = extend_slot(people, weekday, base_start)
        if slot is not None:
            candidates.append(slot)
    return candidates


def recommend(
    people: Sequence[PersonIntervals],
    day: Weekday | str,
    earliest_start: str | Minutes,
    *,
    limit: int = MAX_SLOTS_PER_DAY,
) -> list[RecommendedSlot]:
    """Rank the day's candidates by score (stable for ties) and keep the best ``limit``.

    An empty list means no window had anyone fully available.
    """
    ranked = sorted(
        candidate_slots(people, day, earliest_start), key=lambda slot: slot.score, reverse=True
    )
    return ranked[:limit]


def recommend_week(roster: Roster, earliest_start: str | Minutes) -> WeekRecommendations:
    """Run :func:`recommend` for Monday through Friday."""
    return {day: recommend(roster.day_schedules(day), day, earliest_start) for day in WEEKDAYS}


__all__ = [
    "RecommendedSlot",
    "WeekRecommendations",
    "score_availability",
    "extend_slot",
    "candidate_slots",
    "recommend",
    "recommend_week",
]
