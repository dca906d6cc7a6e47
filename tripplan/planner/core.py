"""Filter, size and build a multi-day plan for one city."""

from __future__ import annotations

from typing import Optional

from tripplan.domain.models import City, Plan, PlanResult, TripRequest
from tripplan.infrastructure.logging import StructuredLogger
from tripplan.planner.builder import ItineraryBuilder
from tripplan.planner.capacity import per_day_target
from tripplan.planner.fallback import select_candidates


def generate_plan(
    city: City,
    request: TripRequest,
    *,
    builder: Optional[ItineraryBuilder] = None,
    logger: Optional[StructuredLogger] = None,
) -> PlanResult:
    # One logger per call: own trace id and stage timers.
    logger = logger or StructuredLogger()

    logger.stage_start("filter", city=city.key, interests=sorted(tag.value for tag in request.interests))
    pool = select_candidates(city.pois, request.interests)
    logger.stage_end("filter", candidates=len(pool.pois), used_fallback=pool.used_fallback)
    if pool.used_fallback:
        logger.warning("filter", "no POI matched interests, using popular picks", city=city.key)

    num_days = request.day_count
    per_day = per_day_target(request.pace)

    logger.stage_start("build", days=num_days, per_day=per_day)
    days = (builder or ItineraryBuilder()).build(pool.pois, num_days, per_day, logger=logger)
    logger.stage_end("build", stops=sum(len(day) for day in days))

    plan = Plan(
        city=city.key,
        start_date=request.start_date,
        end_date=request.end_date,
        days=days,
    )
    logger.summary(city=city.key, days=len(days), stops=len(plan.poi_ids()), used_fallback=pool.used_fallback)
    return PlanResult(plan=plan, used_fallback=pool.used_fallback)
