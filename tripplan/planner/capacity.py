"""Pace to per-day capacity mapping."""

from __future__ import annotations

import datetime as dt
from typing import Any

from tripplan.domain.constants import DEFAULT_PACE, PACE_POI_COUNT
from tripplan.domain.enums import Pace
from tripplan.domain.models import inclusive_day_count
from tripplan.infrastructure.logging import get_logger


def per_day_target(pace: Pace) -> int:
    if not isinstance(pace, Pace):
        raise TypeError(f"per_day_target expects Pace, got {pace!r}")
    return PACE_POI_COUNT[pace]


def coerce_pace(value: Any) -> Pace:
    """Map raw input onto a Pace; anything unrecognised becomes the default."""
    if isinstance(value, Pace):
        return value
    raw = str(value or "").strip().lower()
    try:
        return Pace(raw)
    except ValueError:
        if raw:
            get_logger().warning("capacity", "unknown pace, using default", pace=raw)
        return DEFAULT_PACE


def count_days(start: dt.date, end: dt.date) -> int:
    return inclusive_day_count(start, end)
