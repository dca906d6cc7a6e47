"""API request/response models."""

from __future__ import annotations

import datetime as dt
from typing import Any, Optional

from pydantic import BaseModel, Field

from tripplan.domain.enums import Interest

_LOCALE_PATTERN = r"^[a-z]{2}$"


class PlanRequest(BaseModel):
    city: str = Field(min_length=1, max_length=64, description="City key from the dataset")
    start_date: Optional[dt.date] = Field(default=None, description="ISO date; defaults to today")
    end_date: Optional[dt.date] = Field(default=None, description="ISO date, inclusive; defaults to start")
    interests: list[Interest] = Field(default_factory=list)
    pace: Optional[str] = Field(default=None, max_length=32, description="easy / balanced / packed")
    locale: Optional[str] = Field(default=None, pattern=_LOCALE_PATTERN)


class CityResponse(BaseModel):
    key: str
    display_name: str
    center: dict[str, float]
    poi_count: int


class PlanResponse(BaseModel):
    plan: dict[str, Any]
    used_fallback: bool = False
    notice: Optional[str] = None
    timeline: dict[str, Any] = Field(default_factory=dict)
    booking_links: list[dict[str, str]] = Field(default_factory=list)
    markers: list[dict[str, Any]] = Field(default_factory=list)
    center: dict[str, float] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    status: str = "ok"
