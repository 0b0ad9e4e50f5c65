"""Application settings loading."""

from .app import ClientErrorSettings, get_settings


__all__ = ["ClientErrorSettings", "get_settings"]
