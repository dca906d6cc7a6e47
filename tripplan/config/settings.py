"""Environment-driven settings."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}
DEFAULT_DATA_FILE = Path(__file__).resolve().parents[1] / "data" / "pois.json"
SUPPORTED_LOCALES = ("en", "he")


def _is_enabled(value: str | None) -> bool:
    return bool(value and value.strip().lower() in _TRUTHY)


def resolve_data_file() -> Path:
    raw = str(os.getenv("TRIPPLAN_DATA_FILE") or "").strip()
    return Path(raw) if raw else DEFAULT_DATA_FILE


def resolve_default_locale() -> str:
    raw = str(os.getenv("TRIPPLAN_DEFAULT_LOCALE") or "").strip().lower()
    return raw if raw in SUPPORTED_LOCALES else "en"


def resolve_cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [item.strip() for item in raw.split(",") if item.strip()] or ["*"]


class AppSettings(BaseModel):
    data_file: Path = Field(default=DEFAULT_DATA_FILE)
    default_locale: str = Field(default="en")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    enable_docs: bool = Field(default=False)


def resolve_settings() -> AppSettings:
    return AppSettings(
        data_file=resolve_data_file(),
        default_locale=resolve_default_locale(),
        cors_origins=resolve_cors_origins(),
        enable_docs=_is_enabled(os.getenv("ENABLE_DOCS")),
    )


__all__ = ["AppSettings", "SUPPORTED_LOCALES", "resolve_settings"]
