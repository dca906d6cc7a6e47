"""Presentation payloads for the timeline and map views."""

from __future__ import annotations

import datetime as dt
from typing import Any

from tripplan.domain.models import Plan, PlanResult, ScheduledStop
from tripplan.planner.distance import distance_km, walking_minutes
from tripplan.services.i18n import DEFAULT_LOCALE, t, text_direction


def fallback_notice(locale: str = DEFAULT_LOCALE) -> str:
    return f"{t('noResults', locale)} {t('showingPopular', locale)}"


def _badge(stop: ScheduledStop) -> str:
    category = stop.details.category
    return category.value if category is not None else stop.kind.value


def _present_stop(stop: ScheduledStop, prev: ScheduledStop | None, locale: str) -> dict[str, Any]:
    row: dict[str, Any] = {
        "id": stop.id,
        "title": stop.title,
        "badge": _badge(stop),
        "lat": stop.lat,
        "lng": stop.lng,
    }
    if prev is None:
        row.update({"walk_minutes": None, "distance_km": None, "annotation": t("start", locale)})
        return row
    km = distance_km(prev, stop)
    minutes = walking_minutes(km)
    row.update(
        {
            "walk_minutes": minutes,
            "distance_km": round(km, 1),
            "annotation": t("walk", locale, minutes=minutes, km=f"{km:.1f}"),
        }
    )
    return row


def present_day(stops: list[ScheduledStop], *, index: int, date: dt.date, locale: str) -> dict[str, Any]:
    rows = [_present_stop(stop, stops[i - 1] if i > 0 else None, locale) for i, stop in enumerate(stops)]
    return {
        "day_number": index + 1,
        "label": f"{t('day', locale)} {index + 1}",
        "date": date.isoformat(),
        "stops": rows,
    }


def present_plan(result: PlanResult, locale: str = DEFAULT_LOCALE) -> dict[str, Any]:
    plan = result.plan
    return {
        "city": plan.city,
        "locale": locale,
        "direction": text_direction(locale),
        "notice": fallback_notice(locale) if result.used_fallback else None,
        "days": [
            present_day(stops, index=i, date=plan.start_date + dt.timedelta(days=i), locale=locale)
            for i, stops in enumerate(plan.days)
        ],
    }


def map_markers(plan: Plan) -> list[dict[str, Any]]:
    return [{"name": stop.title, "lat": stop.lat, "lng": stop.lng} for _, stop in plan.stops()]


def render_plan_text(result: PlanResult, locale: str = DEFAULT_LOCALE) -> str:
    """Plain-text timeline, one block per day."""
    presented = present_plan(result, locale)
    lines: list[str] = []
    if presented["notice"]:
        lines.append(presented["notice"])
        lines.append("")
    for day in presented["days"]:
        lines.append(f"{day['label']} ({day['date']})")
        lines.append("-" * 40)
        if not day["stops"]:
            lines.append("  -")
        for stop in day["stops"]:
            lines.append(f"  [{stop['badge']}] {stop['title']}")
            lines.append(f"      {stop['annotation']}")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


__all__ = ["fallback_notice", "map_markers", "present_day", "present_plan", "render_plan_text"]
