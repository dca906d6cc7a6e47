"""Runtime configuration helpers."""

from tripplan.config.settings import AppSettings, resolve_settings

__all__ = ["AppSettings", "resolve_settings"]
