"""Pydantic domain models."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterator
from typing import Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from tripplan.domain.enums import Category, Interest, Pace, StopKind


class Coordinate(Protocol):
    lat: float
    lng: float


def inclusive_day_count(start: dt.date, end: dt.date) -> int:
    """Calendar days from start to end inclusive; a reversed range counts as one day."""
    if end < start:
        return 1
    return (end - start).days + 1


class _Frozen(BaseModel):
    # Dataset and export payloads use camelCase keys.
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class GeoPoint(_Frozen):
    lat: float
    lng: float


class POI(_Frozen):
    id: str
    name: str
    category: Optional[Category] = None
    lat: float
    lng: float
    rating: Optional[float] = None
    kid_friendly: bool = False


class City(_Frozen):
    key: str
    display_name: str
    center: GeoPoint
    pois: list[POI] = Field(default_factory=list)


class TripRequest(_Frozen):
    city: str
    start_date: dt.date
    end_date: dt.date
    interests: frozenset[Interest] = frozenset()
    pace: Pace = Pace.BALANCED

    @property
    def day_count(self) -> int:
        return inclusive_day_count(self.start_date, self.end_date)


class StopDetails(_Frozen):
    category: Optional[Category] = None
    rating: Optional[float] = None


class ScheduledStop(_Frozen):
    id: str
    kind: StopKind = StopKind.POI
    title: str
    start_ts: Optional[str] = None
    end_ts: Optional[str] = None
    poi_id: str
    details: StopDetails = Field(default_factory=StopDetails)
    lat: float
    lng: float


class Plan(_Frozen):
    city: str
    start_date: dt.date
    end_date: dt.date
    days: list[list[ScheduledStop]] = Field(default_factory=list)

    def stops(self) -> Iterator[tuple[int, ScheduledStop]]:
        for day_index, day in enumerate(self.days):
            for stop in day:
                yield day_index, stop

    def poi_ids(self) -> list[str]:
        return [stop.poi_id for _, stop in self.stops()]


class PlanResult(_Frozen):
    plan: Plan
    used_fallback: bool = False


class ErrorResponse(BaseModel):
    error: bool = True
    code: str = "UNKNOWN"
    message: str = ""
    details: list[str] = Field(default_factory=list)
