"""Meeting-slot recommendation."""

from .recommender import (
    RecommendedSlot,
    WeekRecommendations,
    candidate_slots,
    extend_slot,
    recommend,
    recommend_week,
    score_availability,
)

__all__ = [
    "RecommendedSlot",
    "WeekRecommendations",
    "candidate_slots",
    "extend_slot",
    "recommend",
    "recommend_week",
    "score_availability",
]
