"""Shared cross-layer types and exceptions."""

from tripplan.shared.exceptions import DataSourceError, NoPlanError, ToolError, UnknownCityError

__all__ = ["ToolError", "DataSourceError", "NoPlanError", "UnknownCityError"]
