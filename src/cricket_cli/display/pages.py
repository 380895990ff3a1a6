"""Paginated match listings."""

from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Optional, Sequence

from rich.console import Console

from ..schemas import Match


logger = logging.getLogger(__name__)

RenderCard = Callable[[Console, Match], None]


def paginate(matches: Sequence[Match], size: int) -> Iterator[List[Match]]:
    """Yield successive pages of at most ``size`` matches."""
    if size < 1:
        raise ValueError("Page size must be at least 1")
    for start in range(0, len(matches), size):
        yield list(matches[start:start + size])


def next_page_prompt(page_size: int, noun: str = "matches") -> str:
    return f"Show next {page_size} {noun}?"


def show_paginated(
    console: Console,
    matches: Sequence[Match],
    title: str,
    render_card: RenderCard,
    confirm: Callable[[str], bool],
    page_size: int = 3,
    prompt: Optional[str] = None,
) -> int:
    """Print ``matches`` one page at a time and return the number of pages shown.

    The user is asked before each following page; a "no" stops the listing.
    """
    prompt = prompt or next_page_prompt(page_size)
    pages = list(paginate(matches, page_size))
    shown = 0

    for index, page in enumerate(pages):
        console.clear()
        console.print(f"[bold yellow]\n\n{title}:\n[/bold yellow]")
        for match in page:
            render_card(console, match)
        shown += 1

        if index == len(pages) - 1:
            break
        if not confirm(prompt):
            logger.debug(f"Pagination stopped by user after page {shown}")
            break

    return shown
