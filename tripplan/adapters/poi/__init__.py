"""POI data source."""

from tripplan.adapters.poi.source import get_city, list_cities, load_cities, reset_cache

__all__ = ["get_city", "list_cities", "load_cities", "reset_cache"]
