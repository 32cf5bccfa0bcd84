"""Availability classification and point queries."""

from .availability import (
    AvailabilitySet,
    PersonIntervals,
    classify,
    is_fully_available,
    is_partially_available,
)
from .query import QueryResult, query_availability, query_roster

__all__ = [
    "AvailabilitySet",
    "PersonIntervals",
    "classify",
    "is_fully_available",
    "is_partially_available",
    "QueryResult",
    "query_availability",
    "query_roster",
]
