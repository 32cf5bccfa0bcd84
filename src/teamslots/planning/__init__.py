"""Reporting helpers that turn engine results into tables and CSV exports."""

from teamslots.planning.reporting import (
    DEFAULT_RECOMMENDATIONS_FILENAME,
    QUERY_COLUMNS,
    RECOMMENDATION_COLUMNS,
    default_query_filename,
    export_query,
    export_recommendations,
    query_dataframe,
    recommendation_records,
    recommendations_dataframe,
    roster_dataframe,
    summarize_recommendations,
)

__all__ = [
    "DEFAULT_RECOMMENDATIONS_FILENAME",
    "QUERY_COLUMNS",
    "RECOMMENDATION_COLUMNS",
    "default_query_filename",
    "export_query",
    "export_recommendations",
    "query_dataframe",
    "recommendation_records",
    "recommendations_dataframe",
    "roster_dataframe",
    "summarize_recommendations",
]
