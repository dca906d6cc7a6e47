"""Plan export renderers."""

from __future__ import annotations

import datetime as dt
import json

from tripplan.domain.models import Plan

ICS_PRODID = "-//Mindtrip Lite//MVP//EN"
ICS_LINE_END = "\r\n"


def export_filename(plan: Plan, ext: str) -> str:
    return f"itinerary-{plan.city}.{ext}"


def render_plan_json(plan: Plan) -> str:
    payload = plan.model_dump(mode="json", by_alias=True)
    return json.dumps(payload, ensure_ascii=False, indent=2)


def _ics_escape(text: str) -> str:
    return (
        text.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def _ics_timestamp(day: dt.date) -> str:
    # Stops carry no time of day; every event sits at midnight UTC of its day.
    return f"{day:%Y%m%d}T000000Z"


def render_plan_ics(plan: Plan) -> str:
    lines = ["BEGIN:VCALENDAR", "VERSION:2.0", f"PRODID:{ICS_PRODID}"]
    for day_index, stop in plan.stops():
        stamp = _ics_timestamp(plan.start_date + dt.timedelta(days=day_index))
        lines.extend(
            [
                "BEGIN:VEVENT",
                f"UID:{stop.id}",
                f"DTSTAMP:{stamp}",
                f"DTSTART:{stamp}",
                f"SUMMARY:{_ics_escape(stop.title)}",
                "END:VEVENT",
            ]
        )
    lines.append("END:VCALENDAR")
    return ICS_LINE_END.join(lines)


__all__ = ["ICS_PRODID", "export_filename", "render_plan_ics", "render_plan_json"]
