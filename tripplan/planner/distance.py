"""Great-circle distance and walking-time estimation."""

from __future__ import annotations

import math

from tripplan.domain.constants import EARTH_RADIUS_KM, WALKING_SPEED_KMH
from tripplan.domain.models import Coordinate


def haversine(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(dlng / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance_km(a: Coordinate, b: Coordinate) -> float:
    return haversine(a.lat, a.lng, b.lat, b.lng)


def walking_minutes(km: float) -> int:
    """Minutes on foot at 4.5 km/h, halves rounded up."""
    return int(math.floor(km / WALKING_SPEED_KMH * 60 + 0.5))
