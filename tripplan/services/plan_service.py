"""Application service holding the current plan."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable
from pathlib import Path
from typing import Any, NamedTuple, Optional

from tripplan.adapters.poi import get_city
from tripplan.domain.enums import Interest
from tripplan.domain.exceptions import InvalidTripRequest
from tripplan.domain.models import City, PlanResult, TripRequest
from tripplan.planner.builder import ItineraryBuilder
from tripplan.planner.capacity import coerce_pace
from tripplan.planner.core import generate_plan
from tripplan.services.export_formatter import render_plan_ics, render_plan_json
from tripplan.shared.exceptions import NoPlanError


def _parse_date(value: Any, field: str) -> Optional[dt.date]:
    if value is None or value == "":
        return None
    if isinstance(value, dt.date):
        return value
    try:
        return dt.date.fromisoformat(str(value).strip())
    except ValueError as exc:
        raise InvalidTripRequest(f"{field} is not an ISO date: {value!r}") from exc


def _parse_interests(values: Iterable[Any] | None) -> frozenset[Interest]:
    parsed: set[Interest] = set()
    for value in values or ():
        try:
            parsed.add(value if isinstance(value, Interest) else Interest(str(value).strip().lower()))
        except ValueError as exc:
            raise InvalidTripRequest(f"Unknown interest: {value!r}") from exc
    return frozenset(parsed)


def build_trip_request(
    city: str,
    *,
    start: Any = None,
    end: Any = None,
    interests: Iterable[Any] | None = None,
    pace: Any = None,
    today: Optional[dt.date] = None,
) -> TripRequest:
    """Turn raw form values into a TripRequest.

    A missing start date means today; a missing end date means a one-day trip.
    """
    start_date = _parse_date(start, "start") or today or dt.date.today()
    end_date = _parse_date(end, "end") or start_date
    return TripRequest(
        city=city,
        start_date=start_date,
        end_date=end_date,
        interests=_parse_interests(interests),
        pace=coerce_pace(pace),
    )


class GeneratedPlan(NamedTuple):
    result: PlanResult
    city: City


class PlanService:
    """Generates plans and keeps the latest one for export.

    Each generation replaces the previous plan. The stored plan and its city
    are swapped together, so readers should take one `snapshot()` and use it.
    """

    def __init__(self, data_file: Optional[Path] = None, builder: Optional[ItineraryBuilder] = None):
        self._data_file = data_file
        self._builder = builder
        self._current: Optional[GeneratedPlan] = None

    def snapshot(self) -> Optional[GeneratedPlan]:
        return self._current

    @property
    def current(self) -> Optional[PlanResult]:
        snap = self._current
        return snap.result if snap is not None else None

    @property
    def current_city(self) -> Optional[City]:
        snap = self._current
        return snap.city if snap is not None else None

    def generate_with_city(self, request: TripRequest) -> GeneratedPlan:
        city = get_city(request.city, self._data_file)
        generated = GeneratedPlan(generate_plan(city, request, builder=self._builder), city)
        self._current = generated
        return generated

    def generate(self, request: TripRequest) -> PlanResult:
        return self.generate_with_city(request).result

    def reset(self) -> None:
        self._current = None

    def require_snapshot(self) -> GeneratedPlan:
        snap = self._current
        if snap is None:
            raise NoPlanError("No plan has been generated yet")
        return snap

    def export_json(self) -> str:
        return render_plan_json(self.require_snapshot().result.plan)

    def export_ics(self) -> str:
        return render_plan_ics(self.require_snapshot().result.plan)


__all__ = ["GeneratedPlan", "PlanService", "build_trip_request"]

