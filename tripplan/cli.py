"""tripplan CLI entry point."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from tripplan.adapters.poi import list_cities
from tripplan.config.settings import SUPPORTED_LOCALES, resolve_settings
from tripplan.domain.enums import Interest, Pace
from tripplan.domain.exceptions import InvalidTripRequest
from tripplan.services.booking_links import booking_links
from tripplan.services.itinerary_presenter import render_plan_text
from tripplan.services.plan_service import PlanService, build_trip_request
from tripplan.shared.exceptions import DataSourceError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tripplan", description="Build a multi-day city itinerary.")
    parser.add_argument("--city", help="city key, see --list-cities")
    parser.add_argument("--start", help="start date (YYYY-MM-DD), defaults to today")
    parser.add_argument("--end", help="end date (YYYY-MM-DD, inclusive), defaults to start")
    parser.add_argument(
        "--interest",
        action="append",
        default=[],
        choices=[item.value for item in Interest],
        help="repeatable",
    )
    parser.add_argument("--pace", default=Pace.BALANCED.value, choices=[item.value for item in Pace])
    parser.add_argument("--locale", choices=list(SUPPORTED_LOCALES))
    parser.add_argument("--data", type=Path, help="alternate city dataset JSON")
    parser.add_argument("--json", dest="json_path", type=Path, help="write the plan as JSON")
    parser.add_argument("--ics", dest="ics_path", type=Path, help="write the plan as an iCalendar file")
    parser.add_argument("--list-cities", action="store_true")
    return parser


def _write(path: Path, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    print(f"--- saved {path} ---")


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    args = _build_parser().parse_args(argv)
    settings = resolve_settings()
    data_file = args.data or settings.data_file
    locale = args.locale or settings.default_locale

    try:
        if args.list_cities:
            for city in list_cities(data_file):
                print(f"{city.key}\t{city.display_name}\t{len(city.pois)} POIs")
            return 0

        if not args.city:
            print("error: --city is required (see --list-cities)", file=sys.stderr)
            return 2

        service = PlanService(data_file)
        request = build_trip_request(
            args.city,
            start=args.start,
            end=args.end,
            interests=args.interest,
            pace=args.pace,
        )
        generated = service.generate_with_city(request)
    except (DataSourceError, InvalidTripRequest) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(render_plan_text(generated.result, locale))
    for link in booking_links(generated.city.display_name, locale):
        print(f"{link['label']}: {link['url']}")

    if args.json_path:
        _write(args.json_path, service.export_json())
    if args.ics_path:
        _write(args.ics_path, service.export_ics())
    return 0


if __name__ == "__main__":
    sys.exit(main())
