"""FastAPI application."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware

from tripplan import __version__
from tripplan.adapters.poi import list_cities
from tripplan.api.schemas import CityResponse, HealthResponse, PlanRequest, PlanResponse
from tripplan.config.settings import resolve_settings
from tripplan.domain.exceptions import InvalidTripRequest
from tripplan.domain.models import City, ErrorResponse, PlanResult
from tripplan.services.booking_links import booking_links
from tripplan.services.export_formatter import export_filename, render_plan_ics, render_plan_json
from tripplan.services.itinerary_presenter import map_markers, present_plan
from tripplan.services.plan_service import PlanService, build_trip_request
from tripplan.shared.exceptions import DataSourceError, NoPlanError, UnknownCityError

_api_logger = logging.getLogger("tripplan.api")

load_dotenv()

settings = resolve_settings()

app = FastAPI(
    title="tripplan",
    version=__version__,
    docs_url="/docs" if settings.enable_docs else None,
    redoc_url=None,
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store"
        return response


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["*"],
)

service = PlanService(settings.data_file)


def _error(status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponse(code=code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(UnknownCityError)
async def _unknown_city(request: Request, exc: UnknownCityError):
    return _error(404, "UNKNOWN_CITY", str(exc))


@app.exception_handler(NoPlanError)
async def _no_plan(request: Request, exc: NoPlanError):
    return _error(404, "NO_PLAN", str(exc))


@app.exception_handler(InvalidTripRequest)
async def _invalid_trip(request: Request, exc: InvalidTripRequest):
    return _error(422, "INVALID_TRIP", str(exc))


@app.exception_handler(DataSourceError)
async def _data_source(request: Request, exc: DataSourceError):
    _api_logger.error("data source failure: %s", exc)
    return _error(500, "DATA_SOURCE", "City dataset is unavailable")


def _plan_response(result: PlanResult, city: City, locale: str) -> PlanResponse:
    timeline = present_plan(result, locale)
    return PlanResponse(
        plan=result.plan.model_dump(mode="json", by_alias=True),
        used_fallback=result.used_fallback,
        notice=timeline["notice"],
        timeline=timeline,
        booking_links=booking_links(city.display_name, locale),
        markers=map_markers(result.plan),
        center=city.center.model_dump(),
    )


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")


@app.get("/cities", response_model=list[CityResponse])
def cities():
    return [
        CityResponse(
            key=city.key,
            display_name=city.display_name,
            center=city.center.model_dump(),
            poi_count=len(city.pois),
        )
        for city in list_cities(settings.data_file)
    ]


@app.post("/plan", response_model=PlanResponse)
def plan(req: PlanRequest):
    trip = build_trip_request(
        req.city,
        start=req.start_date,
        end=req.end_date,
        interests=req.interests,
        pace=req.pace,
    )
    generated = service.generate_with_city(trip)
    return _plan_response(generated.result, generated.city, req.locale or settings.default_locale)


@app.get("/plan/current", response_model=PlanResponse)
def current_plan(locale: str | None = None):
    snap = service.require_snapshot()
    return _plan_response(snap.result, snap.city, locale or settings.default_locale)


@app.delete("/plan", response_model=HealthResponse)
def reset_plan():
    service.reset()
    return HealthResponse(status="reset")


def _download(content: str, filename: str, media_type: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.get("/plan/export.json")
def export_json():
    plan = service.require_snapshot().result.plan
    return _download(render_plan_json(plan), export_filename(plan, "json"), "application/json")


@app.get("/plan/export.ics")
def export_ics():
    plan = service.require_snapshot().result.plan
    return _download(render_plan_ics(plan), export_filename(plan, "ics"), "text/calendar")
