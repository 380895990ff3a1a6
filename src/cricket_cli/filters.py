"""Match classification by free-text status and team name.

The API exposes no status enumeration, so every classifier is a substring test
over the status text. The tests are case-sensitive.
"""

from __future__ import annotations

from typing import Iterable, List

from .schemas import Match


NOT_STARTED = "Match not started"


def has_ended(match: Match) -> bool:
    return "won" in match.status


def is_upcoming(match: Match) -> bool:
    return NOT_STARTED in match.status


def is_ongoing(match: Match) -> bool:
    return "not" not in match.status and not has_ended(match)


def matches_team(match: Match, name: str) -> bool:
    """Case-insensitive containment over the match name, team names and short names."""
    needle = name.strip().lower()
    candidates = [match.name, *match.teams[:2]]
    candidates.extend(info.shortname for info in match.team_info[:2])
    return any(needle in candidate.lower() for candidate in candidates if candidate)


def filter_by_team(matches: Iterable[Match], name: str) -> List[Match]:
    return [m for m in matches if matches_team(m, name)]


def filter_ongoing(matches: Iterable[Match]) -> List[Match]:
    return [m for m in matches if is_ongoing(m)]


def filter_upcoming(matches: Iterable[Match]) -> List[Match]:
    return [m for m in matches if is_upcoming(m)]


def filter_recent(matches: Iterable[Match]) -> List[Match]:
    return [m for m in matches if has_ended(m)]
