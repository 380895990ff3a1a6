"""CricketData API client."""

from .cricapi_client import CricAPIClient

__all__ = [
    "CricAPIClient",
]
