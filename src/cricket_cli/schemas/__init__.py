"""Pydantic schemas for API payloads."""

from .matches import ApiResponse, Match, Score, TeamInfo

__all__ = [
    "ApiResponse",
    "Match",
    "Score",
    "TeamInfo",
]
