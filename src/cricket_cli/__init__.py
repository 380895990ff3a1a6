"""Cricket CLI - live scores and fixtures from the CricketData API."""

from .config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
