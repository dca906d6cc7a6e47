"""Deterministic itinerary construction."""

from tripplan.planner.builder import ItineraryBuilder, make_stop
from tripplan.planner.capacity import coerce_pace, count_days, per_day_target
from tripplan.planner.core import generate_plan
from tripplan.planner.distance import distance_km, haversine, walking_minutes
from tripplan.planner.fallback import CandidatePool, popular_pool, select_candidates
from tripplan.planner.filtering import filter_by_interests, matches_interests

__all__ = [
    "CandidatePool",
    "ItineraryBuilder",
    "coerce_pace",
    "count_days",
    "distance_km",
    "filter_by_interests",
    "generate_plan",
    "haversine",
    "make_stop",
    "matches_interests",
    "per_day_target",
    "popular_pool",
    "select_candidates",
    "walking_minutes",
]
