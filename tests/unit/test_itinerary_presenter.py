"""Timeline presentation tests."""

import datetime as dt

from tripplan.domain.enums import Category
from tripplan.domain.models import Plan, PlanResult, ScheduledStop, StopDetails
from tripplan.services.itinerary_presenter import (
    fallback_notice,
    map_markers,
    present_plan,
    render_plan_text,
)


def _stop(sid: str, lat: float, category: Category | None = None) -> ScheduledStop:
    return ScheduledStop(
        id=sid,
        title=f"Stop {sid}",
        poi_id=sid,
        details=StopDetails(category=category),
        lat=lat,
        lng=0.0,
    )


def _result(*, used_fallback: bool = False) -> PlanResult:
    plan = Plan(
        city="testville",
        start_date=dt.date(2024, 5, 1),
        end_date=dt.date(2024, 5, 2),
        days=[
            [_stop("a", 0.0, Category.CULTURE), _stop("b", 0.01)],
            [_stop("c", 0.05, Category.FOOD)],
        ],
    )
    return PlanResult(plan=plan, used_fallback=used_fallback)


def test_first_stop_of_each_day_is_start():
    payload = present_plan(_result())
    for day in payload["days"]:
        first = day["stops"][0]
        assert first["annotation"] == "Start"
        assert first["walk_minutes"] is None
        assert first["distance_km"] is None


def test_following_stop_gets_walk_annotation():
    payload = present_plan(_result())
    second = payload["days"][0]["stops"][1]
    assert second["walk_minutes"] == 15
    assert second["distance_km"] == 1.1
    assert second["annotation"] == "15 min walk · 1.1 km"


def test_badges_and_labels():
    payload = present_plan(_result())
    day1, day2 = payload["days"]
    assert day1["label"] == "Day 1"
    assert day1["date"] == "2024-05-01"
    assert day2["label"] == "Day 2"
    assert day2["date"] == "2024-05-02"
    assert [stop["badge"] for stop in day1["stops"]] == ["culture", "poi"]
    assert payload["notice"] is None
    assert payload["direction"] == "ltr"


def test_fallback_notice_is_localized():
    assert present_plan(_result(used_fallback=True))["notice"] == "No results. Showing popular picks instead."
    payload = present_plan(_result(used_fallback=True), locale="he")
    assert payload["notice"] == fallback_notice("he")
    assert payload["direction"] == "rtl"
    assert payload["days"][0]["label"] == "יום 1"


def test_unknown_locale_falls_back_to_english():
    payload = present_plan(_result(), locale="fr")
    assert payload["days"][0]["label"] == "Day 1"


def test_map_markers_cover_every_stop():
    markers = map_markers(_result().plan)
    assert markers == [
        {"name": "Stop a", "lat": 0.0, "lng": 0.0},
        {"name": "Stop b", "lat": 0.01, "lng": 0.0},
        {"name": "Stop c", "lat": 0.05, "lng": 0.0},
    ]


def test_render_plan_text():
    text = render_plan_text(_result(used_fallback=True))
    assert text.startswith("No results.")
    assert "Day 1 (2024-05-01)" in text
    assert "[culture] Stop a" in text
    assert "15 min walk" in text
