"""Per-person availability classification for a candidate meeting window."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from teamslots.core.types import PARTIAL_OVERLAP_MINUTES, Minutes
from teamslots.scheduling.intervals import Interval

PersonIntervals = tuple[str, Sequence[Interval]]


@dataclass(frozen=True, slots=True)
class AvailabilitySet:
    """Partition of a roster into fully, partially, and not available names.

    Each list keeps the order in which people were encountered.
    """

    fully_available: list[str] = field(default_factory=list)
    partially_available: list[str] = field(default_factory=list)
    not_available: list[str] = field(default_factory=list)

    def fully_key(self) -> frozenset[str]:
        """Order-independent identity of the fully-available group."""
        return frozenset(self.fully_available)

    def names(self) -> list[str]:
        return [*self.fully_available, *self.partially_available, *self.not_available]

    def counts(self) -> dict[str, int]:
        return {
            "fully_available": len(self.fully_available),
            "partially_available": len(self.partially_available),
            "not_available": len(self.not_available),
        }


def is_fully_available(intervals: Sequence[Interval], start: Minutes, end: Minutes) -> bool:
    """A single interval must contain the whole window; intervals are not unioned."""
    return any(interval.contains(start, end) for interval in intervals)


def is_partially_available(
    intervals: Sequence[Interval], start: Minutes, end: Minutes
) -> bool:
    return any(interval.overlap(start, end) >= PARTIAL_OVERLAP_MINUTES for interval in intervals)


def classify(
    people: Sequence[PersonIntervals], window_start: Minutes, window_end: Minutes
) -> AvailabilitySet:
    """Classify every person for the window ``[window_start, window_end)``.

    Parameters
    ----------
    people:
        ``(name, intervals)`` pairs for one weekday; intervals may overlap or be unordered.
    window_start, window_end:
        Window bounds in minutes since midnight.

    Returns
    -------
    AvailabilitySet
        Full availability takes precedence over partial (at least 30 minutes of overlap with a
        single interval); everyone else, including people with no intervals, is not available.
    """
    result = AvailabilitySet()
    for name, intervals in people:
        if len(intervals) == 0:
            result.not_available.append(name)
        elif is_fully_available(intervals, window_start, window_end):
            result.fully_available.append(name)
        elif is_partially_available(intervals, window_start, window_end):
            result.partially_available.append(name)
        else:
            result.not_available.append(name)
    return result


__all__ = [
    "AvailabilitySet",
    "PersonIntervals",
    "classify",
    "is_fully_available",
    "is_partially_available",
]
