"""City dataset loader backed by a local JSON file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from tripplan.config.settings import resolve_data_file
from tripplan.domain.models import City
from tripplan.shared.exceptions import DataSourceError, UnknownCityError

_cache: dict[Path, dict[str, City]] = {}


def _read(path: Path) -> dict:
    if not path.exists():
        raise DataSourceError(f"Data file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as exc:
        raise DataSourceError(f"Data file is not valid JSON: {path} ({exc})") from exc


def load_cities(path: Optional[Path] = None) -> dict[str, City]:
    """Load every city once per data file; later calls hit the cache."""
    resolved = Path(path) if path is not None else resolve_data_file()
    if resolved in _cache:
        return _cache[resolved]

    raw = _read(resolved)
    cities_raw = raw.get("cities") if isinstance(raw, dict) else None
    if not isinstance(cities_raw, dict):
        raise DataSourceError(f"Data file has no 'cities' mapping: {resolved}")

    cities: dict[str, City] = {}
    for key, record in cities_raw.items():
        if not isinstance(record, dict):
            raise DataSourceError(f"Invalid city record '{key}': expected an object")
        try:
            cities[key] = City.model_validate({**record, "key": key})
        except ValidationError as exc:
            raise DataSourceError(f"Invalid city record '{key}': {exc}") from exc

    _cache[resolved] = cities
    return cities


def get_city(key: str, path: Optional[Path] = None) -> City:
    cities = load_cities(path)
    city = cities.get(key)
    if city is None:
        raise UnknownCityError(key)
    return city


def list_cities(path: Optional[Path] = None) -> list[City]:
    return list(load_cities(path).values())


def reset_cache() -> None:
    _cache.clear()
