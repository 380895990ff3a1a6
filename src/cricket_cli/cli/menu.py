"""Main menu and the four match views."""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from rich.console import Console

from ..api import CricAPIClient
from ..config import Settings
from ..credentials import CredentialStore, load_or_prompt
from ..display import (
    LiveScoreBoard,
    render_ongoing_card,
    render_recent_card,
    render_upcoming_card,
    show_paginated,
)
from ..display.pages import next_page_prompt
from ..errors import AbortError, NoMatchesError
from ..filters import filter_by_team, filter_ongoing, filter_recent, filter_upcoming


logger = logging.getLogger(__name__)

LIVE_SCORES = "Live Scores"
ONGOING_MATCHES = "Ongoing Matches"
UPCOMING_MATCHES = "Upcoming Matches"
RECENT_MATCHES = "Recent Matches"

MENU_OPTIONS = [LIVE_SCORES, ONGOING_MATCHES, UPCOMING_MATCHES, RECENT_MATCHES]


class Prompter(Protocol):
    def ask(self, message: str) -> str: ...

    def confirm(self, message: str) -> bool: ...

    def choose(self, message: str, choices: Sequence[str]) -> str: ...


async def show_live_scores(
    console: Console,
    prompter: Prompter,
    client: CricAPIClient,
    api_key: str,
    settings: Settings,
) -> LiveScoreBoard:
    """Ask for a team and keep its current matches on screen until one ends."""
    team_name = prompter.ask("Enter team name to filter matches:")
    matches = filter_by_team(await client.fetch_current(api_key), team_name)
    if not matches:
        raise NoMatchesError("No matches found for the specified team.")

    board = LiveScoreBoard(console, matches, interval=settings.display.refresh_interval)
    board.start()
    try:
        await board.wait()
    finally:
        board.stop()
    return board


async def show_ongoing(console, prompter, client, api_key, settings) -> int:
    matches = filter_ongoing(await client.fetch_current(api_key))
    if not matches:
        raise NoMatchesError("No ongoing matches found.")
    page_size = settings.display.page_size
    return show_paginated(
        console, matches, "Ongoing Matches", render_ongoing_card, prompter.confirm,
        page_size=page_size, prompt=next_page_prompt(page_size),
    )


async def show_upcoming(console, prompter, client, api_key, settings) -> int:
    matches = filter_upcoming(await client.fetch_upcoming(api_key))
    if not matches:
        raise NoMatchesError("No upcoming matches found.")
    page_size = settings.display.page_size
    return show_paginated(
        console, matches, "Upcoming Matches", render_upcoming_card, prompter.confirm,
        page_size=page_size, prompt=next_page_prompt(page_size),
    )


async def show_recent(console, prompter, client, api_key, settings) -> int:
    matches = filter_recent(await client.fetch_current(api_key))
    if not matches:
        raise NoMatchesError("No recent matches found.")
    page_size = settings.display.page_size
    return show_paginated(
        console, matches, "Recent Matches", render_recent_card, prompter.confirm,
        page_size=page_size, prompt=next_page_prompt(page_size, "recent matches"),
    )


VIEWS = {
    LIVE_SCORES: show_live_scores,
    ONGOING_MATCHES: show_ongoing,
    UPCOMING_MATCHES: show_upcoming,
    RECENT_MATCHES: show_recent,
}


async def run_menu(
    console: Console,
    prompter: Prompter,
    client: CricAPIClient,
    store: CredentialStore,
    settings: Settings,
) -> None:
    """Ask for a view, resolve the API key and run the view."""
    option = prompter.choose("Choose an option:", MENU_OPTIONS)
    view = VIEWS.get(option)
    if view is None:
        raise AbortError("Invalid option.")

    logger.debug(f"Selected menu option: {option}")
    api_key = await load_or_prompt(store, client, prompter.ask, console)
    await view(console, prompter, client, api_key, settings)
