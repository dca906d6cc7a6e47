"""Greedy per-day POI assignment."""

from __future__ import annotations

import uuid
from collections import Counter
from collections.abc import Sequence
from typing import Callable, Optional

from tripplan.domain.constants import MAX_PER_CATEGORY, MAX_WALK_KM
from tripplan.domain.enums import StopKind
from tripplan.domain.models import POI, ScheduledStop, StopDetails
from tripplan.infrastructure.logging import StructuredLogger, get_logger
from tripplan.planner.distance import distance_km

IdFactory = Callable[[], str]


def _uuid_hex() -> str:
    return uuid.uuid4().hex


def make_stop(poi: POI, stop_id: str) -> ScheduledStop:
    return ScheduledStop(
        id=stop_id,
        kind=StopKind.POI,
        title=poi.name,
        poi_id=poi.id,
        details=StopDetails(category=poi.category, rating=poi.rating),
        lat=poi.lat,
        lng=poi.lng,
    )


class ItineraryBuilder:
    """Two-pass greedy assignment of POIs to days.

    The primary pass keeps consecutive stops within walking range and caps each
    category per day. A relaxed pass then tops the day up from whatever is left,
    ignoring both constraints. A POI is placed at most once per build.
    """

    def __init__(
        self,
        id_factory: Optional[IdFactory] = None,
        *,
        max_walk_km: float = MAX_WALK_KM,
        max_per_category: int = MAX_PER_CATEGORY,
    ):
        self._new_id = id_factory or _uuid_hex
        self.max_walk_km = max_walk_km
        self.max_per_category = max_per_category

    def build(
        self,
        pois: Sequence[POI],
        num_days: int,
        per_day: int,
        *,
        logger: Optional[StructuredLogger] = None,
    ) -> list[list[ScheduledStop]]:
        logger = logger or get_logger()
        used: set[str] = set()
        days: list[list[ScheduledStop]] = []
        for day_index in range(max(0, num_days)):
            day = self._primary_pass(pois, per_day, used)
            placed = len(day)
            day.extend(self._relaxed_pass(pois, per_day - len(day), used))
            if len(day) < per_day:
                logger.debug(
                    "build",
                    "day short of target",
                    day=day_index + 1,
                    placed=len(day),
                    target=per_day,
                )
            elif len(day) > placed:
                logger.debug("build", "relaxed pass used", day=day_index + 1, relaxed=len(day) - placed)
            days.append(day)
        return days

    def _primary_pass(self, pois: Sequence[POI], per_day: int, used: set[str]) -> list[ScheduledStop]:
        day: list[ScheduledStop] = []
        last: Optional[POI] = None
        category_count: Counter = Counter()
        for poi in pois:
            if len(day) >= per_day:
                break
            if poi.id in used:
                continue
            if last is not None and distance_km(last, poi) > self.max_walk_km:
                continue
            if poi.category is not None:
                if category_count[poi.category] >= self.max_per_category:
                    continue
                category_count[poi.category] += 1
            day.append(make_stop(poi, self._new_id()))
            used.add(poi.id)
            last = poi
        return day

    def _relaxed_pass(self, pois: Sequence[POI], missing: int, used: set[str]) -> list[ScheduledStop]:
        extra: list[ScheduledStop] = []
        for poi in pois:
            if len(extra) >= missing:
                break
            if poi.id in used:
                continue
            extra.append(make_stop(poi, self._new_id()))
            used.add(poi.id)
        return extra
