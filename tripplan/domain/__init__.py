"""Domain package exports."""

from tripplan.domain.constants import (
    DEFAULT_PACE,
    EARTH_RADIUS_KM,
    MAX_PER_CATEGORY,
    MAX_WALK_KM,
    PACE_POI_COUNT,
    WALKING_SPEED_KMH,
)
from tripplan.domain.enums import Category, Interest, Pace, StopKind
from tripplan.domain.exceptions import DomainError, InvalidTripRequest
from tripplan.domain.models import (
    POI,
    City,
    Coordinate,
    ErrorResponse,
    GeoPoint,
    Plan,
    PlanResult,
    ScheduledStop,
    StopDetails,
    TripRequest,
)

__all__ = [
    "Category",
    "City",
    "Coordinate",
    "DomainError",
    "ErrorResponse",
    "GeoPoint",
    "Interest",
    "InvalidTripRequest",
    "Pace",
    "Plan",
    "PlanResult",
    "POI",
    "ScheduledStop",
    "StopDetails",
    "StopKind",
    "TripRequest",
    "DEFAULT_PACE",
    "EARTH_RADIUS_KM",
    "MAX_PER_CATEGORY",
    "MAX_WALK_KM",
    "PACE_POI_COUNT",
    "WALKING_SPEED_KMH",
]
