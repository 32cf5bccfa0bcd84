"""Tabular exports for recommendations, point queries, and roster previews."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from teamslots.core.types import WEEKDAYS
from teamslots.evaluation.query import QueryResult
from teamslots.optimization.recommender import WeekRecommendations
from teamslots.scenario.contract import Roster
from teamslots.scheduling.clock import minutes_to_time

__all__ = [
    "RECOMMENDATION_COLUMNS",
    "QUERY_COLUMNS",
    "DEFAULT_RECOMMENDATIONS_FILENAME",
    "recommendations_dataframe",
    "recommendation_records",
    "summarize_recommendations",
    "export_recommendations",
    "query_dataframe",
    "default_query_filename",
    "export_query",
    "roster_dataframe",
]

RECOMMENDATION_COLUMNS = [
    "Day",
    "Rank",
    "Start Time",
    "End Time",
    "Duration",
    "Fully Available Count",
    "Fully Available Names",
]
QUERY_COLUMNS = ["Query Day", "Query Time Range", "Availability Status", "Names"]
DEFAULT_RECOMMENDATIONS_FILENAME = "top-meeting-recommendations.csv"
NAME_JOINER = ", "


def recommendations_dataframe(results: WeekRecommendations) -> pd.DataFrame:
    """Flatten ranked slots into one row per (day, rank); days without slots add no rows."""

    rows: list[dict[str, object]] = []
    for day, slots in results.items():
        for index, slot in enumerate(slots):
            rows.append(
                {
                    "Day": day.value,
                    "Rank": f"#{index + 1}",
                    "Start Time": slot.start_time,
                    "End Time": slot.end_time,
                    "Duration": slot.duration_label,
                    "Fully Available Count": len(slot.fully_available),
                    "Fully Available Names": NAME_JOINER.join(slot.fully_available),
                }
            )
    return pd.DataFrame(rows, columns=RECOMMENDATION_COLUMNS)


def recommendation_records(results: WeekRecommendations) -> dict[str, list[dict[str, object]]]:
    """JSON-friendly mapping of weekday name to ranked slot dictionaries."""

    payload: dict[str, list[dict[str, object]]] = {}
    for day, slots in results.items():
        payload[day.value] = [
            {
                "rank": index + 1,
                "start": slot.start_time,
                "end": slot.end_time,
                "duration": slot.duration_label,
                "score": slot.score,
                "fully_available": list(slot.fully_available),
                "partially_available": list(slot.partially_available),
                "not_available": list(slot.not_available),
            }
            for index, slot in enumerate(slots)
        ]
    return payload


def summarize_recommendations(results: WeekRecommendations) -> dict[str, object]:
    """Headline metrics for a recommendation run (used by telemetry and the CLI)."""

    all_slots = [slot for slots in results.values() for slot in slots]
    return {
        "days": len(results),
        "days_with_slots": sum(1 for slots in results.values() if slots),
        "slot_count": len(all_slots),
        "best_score": max((slot.score for slot in all_slots), default=0),
        "best_fully_available": max(
            (len(slot.fully_available) for slot in all_slots), default=0
        ),
    }


def export_recommendations(results: WeekRecommendations, path: str | Path) -> Path:
    """Write :func:`recommendations_dataframe` as CSV; a directory gets the default filename."""

    target = Path(path)
    if target.is_dir():
        target = target / DEFAULT_RECOMMENDATIONS_FILENAME
    target.parent.mkdir(parents=True, exist_ok=True)
    recommendations_dataframe(results).to_csv(target, index=False)
    return target


def query_dataframe(result: QueryResult) -> pd.DataFrame:
    """Three rows (fully / partially / not available) for a point query."""

    availability = result.availability
    groups = [
        ("Fully Available", availability.fully_available),
        ("Partially Available", availability.partially_available),
        ("Not Available", availability.not_available),
    ]
    rows = [
        {
            "Query Day": result.day.value,
            "Query Time Range": result.time_range,
            "Availability Status": status,
            "Names": NAME_JOINER.join(names),
        }
        for status, names in groups
    ]
    return pd.DataFrame(rows, columns=QUERY_COLUMNS)


def default_query_filename(result: QueryResult) -> str:
    start, end = minutes_to_time(result.start), minutes_to_time(result.end)
    return f"availability-query-{result.day.value}-{start}-{end}.csv"


def export_query(result: QueryResult, path: str | Path) -> Path:
    """Write :func:`query_dataframe` as CSV; a directory gets the default filename."""

    target = Path(path)
    if target.is_dir():
        target = target / default_query_filename(result)
    target.parent.mkdir(parents=True, exist_ok=True)
    query_dataframe(result).to_csv(target, index=False)
    return target


def roster_dataframe(roster: Roster) -> pd.DataFrame:
    """Roster preview in the input layout (``Name`` followed by the weekday columns)."""

    columns = ["Name", *(day.value for day in WEEKDAYS)]
    rows = [
        {"Name": person.name, **{day.value: person.free_time(day) for day in WEEKDAYS}}
        for person in roster.people
    ]
    return pd.DataFrame(rows, columns=columns)
