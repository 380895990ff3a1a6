"""Match cards printed by the paginated and live views."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.markup import escape

from ..schemas import Match, Score


def standard_time(now: datetime) -> str:
    """Format ``now`` as a 12-hour clock, e.g. ``3:07:09 PM``."""
    hours = now.hour % 12 or 12
    period = "AM" if now.hour < 12 else "PM"
    return f"{hours}:{now.minute:02d}:{now.second:02d} {period}"


def format_start(date_time_gmt: Optional[str]) -> str:
    if not date_time_gmt:
        return "TBA"
    return " ".join(date_time_gmt.split("T"))


def _value(value, default: str) -> str:
    # Zero and missing values both fall back to the default
    return str(value) if value else default


def score_line(team_label: str, score: Optional[Score], default: str = "0") -> str:
    """Markup for ``SHORT : runs/wickets(overs)``."""
    runs = _value(score.r if score else None, default)
    wickets = _value(score.w if score else None, default)
    overs = _value(score.o if score else None, default)
    return (
        f" [bold blue]{escape(team_label)}[/bold blue] : "
        f"[bold yellow]{runs}[/bold yellow]/[bold yellow]{wickets}[/bold yellow]"
        f"([bold yellow]{overs}[/bold yellow])"
    )


def separator(width: int) -> str:
    return f"[bold bright_black]{'-' * max(width, 0)}[/bold bright_black]"


def card_separator(match: Match) -> str:
    """Rule sized to the longer of the match name and venue."""
    return separator(max(len(match.name), len(match.venue)))


def live_separator(match: Match) -> str:
    """Rule 20 dashes wider than the match name."""
    return separator(len(match.name) + 20)


def _print_header(console: Console, match: Match, venue_label: str = "Venue") -> None:
    console.print(f" [bold green]{escape(match.name)}[/bold green]")
    console.print(f" Date - [bold cyan]{escape(format_start(match.date_time_gmt))}[/bold cyan]")
    if venue_label:
        console.print(f" {venue_label} - [bold green]{escape(match.venue)}[/bold green]")


def _print_present_scores(console: Console, match: Match) -> None:
    for index in (0, 1):
        score = match.innings_score(index)
        if score is not None:
            console.print(score_line(match.team_label(index), score))


def _print_footer(console: Console, match: Match) -> None:
    console.print()
    console.print(card_separator(match))
    console.print()


def render_ongoing_card(console: Console, match: Match) -> None:
    _print_header(console, match)
    _print_present_scores(console, match)
    console.print(f" [bold cyan]{escape(match.status)}[/bold cyan]")
    _print_footer(console, match)


def render_upcoming_card(console: Console, match: Match) -> None:
    _print_header(console, match)
    _print_footer(console, match)


def render_recent_card(console: Console, match: Match) -> None:
    _print_header(console, match, venue_label="")
    _print_present_scores(console, match)
    console.print(f" [bold cyan]{escape(match.status)}[/bold cyan]")
    _print_footer(console, match)


def render_live_card(console: Console, match: Match, updated_at: str) -> None:
    """Score card for the live view; missing innings render as zeros."""
    rule = live_separator(match)
    console.print(f"\n[bold green]Last Update[/bold green] - {updated_at}:")
    console.print(rule)
    console.print(f" [bold green]{escape(match.name)}[/bold green]")
    console.print(score_line(match.team_label(0), match.innings_score(0)))
    console.print(score_line(match.team_label(1), match.innings_score(1)))
    console.print(f" [bold cyan]{escape(match.status)}[/bold cyan]")
    console.print(rule)
