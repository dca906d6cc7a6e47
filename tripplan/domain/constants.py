"""Domain constants shared by deterministic logic."""

from tripplan.domain.enums import Pace

PACE_POI_COUNT = {
    Pace.EASY: 3,
    Pace.BALANCED: 4,
    Pace.PACKED: 5,
}

DEFAULT_PACE = Pace.BALANCED

EARTH_RADIUS_KM = 6371.0
WALKING_SPEED_KMH = 4.5

# Max hop between consecutive primary-pass stops.
MAX_WALK_KM = 3.5
MAX_PER_CATEGORY = 2
