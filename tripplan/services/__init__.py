"""Service layer public exports."""

from tripplan.services.export_formatter import render_plan_ics, render_plan_json
from tripplan.services.itinerary_presenter import present_plan, render_plan_text
from tripplan.services.plan_service import GeneratedPlan, PlanService, build_trip_request

__all__ = [
    "GeneratedPlan",
    "PlanService",
    "build_trip_request",
    "present_plan",
    "render_plan_ics",
    "render_plan_json",
    "render_plan_text",
]
