"""Shared fixtures for cricket CLI tests."""
import io
from typing import Callable, List, Optional, Sequence

import pytest
from rich.console import Console

from cricket_cli.schemas import Match


def make_match(
    status: str = "India need 20 runs",
    name: str = "India vs Australia, 1st T20I",
    venue: str = "Wankhede Stadium, Mumbai",
    teams: Optional[List[str]] = None,
    shortnames: Optional[List[Optional[str]]] = None,
    score: Optional[List[dict]] = None,
    date_time_gmt: str = "2024-03-10T14:00:00",
) -> Match:
    teams = teams if teams is not None else ["India", "Australia"]
    shortnames = shortnames if shortnames is not None else ["IND", "AUS"]
    team_info = [{"name": t, "shortname": s} for t, s in zip(teams, shortnames)]
    return Match.model_validate({
        "id": "m-1",
        "name": name,
        "status": status,
        "venue": venue,
        "dateTimeGMT": date_time_gmt,
        "teams": teams,
        "teamInfo": team_info,
        "score": score if score is not None else [],
    })


class ScriptedPrompter:
    """Prompter that replays canned answers and records the questions."""

    def __init__(self, answers: Sequence[str] = (), confirms: Sequence[bool] = (), choice: str = ""):
        self.answers = list(answers)
        self.confirms = list(confirms)
        self.choice = choice
        self.asked: List[str] = []
        self.confirmed: List[str] = []

    def ask(self, message: str) -> str:
        self.asked.append(message)
        return self.answers.pop(0)

    def confirm(self, message: str) -> bool:
        self.confirmed.append(message)
        return self.confirms.pop(0) if self.confirms else True

    def choose(self, message: str, choices: Sequence[str]) -> str:
        return self.choice


@pytest.fixture
def match_factory() -> Callable[..., Match]:
    return make_match


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def scripted_prompter():
    return ScriptedPrompter


@pytest.fixture
def console_text(console: Console) -> Callable[[], str]:
    """Return a reader for everything printed so far."""
    return lambda: console.file.getvalue()
