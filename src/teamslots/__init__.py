"""teamslots: shared meeting-window recommendations from weekly availability."""

from teamslots.core import QueryRangeError, RosterShapeError, ScheduleParseError, Weekday
from teamslots.evaluation import AvailabilitySet, QueryResult, classify, query_availability
from teamslots.optimization import RecommendedSlot, recommend, recommend_week
from teamslots.scenario.contract import Person, Roster
from teamslots.scenario.io import load_roster
from teamslots.scheduling import Interval, minutes_to_time, parse_day_schedule, time_to_minutes

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Weekday",
    "ScheduleParseError",
    "QueryRangeError",
    "RosterShapeError",
    "Interval",
    "parse_day_schedule",
    "time_to_minutes",
    "minutes_to_time",
    "AvailabilitySet",
    "classify",
    "QueryResult",
    "query_availability",
    "RecommendedSlot",
    "recommend",
    "recommend_week",
    "Person",
    "Roster",
    "load_roster",
]
