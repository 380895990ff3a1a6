"""Periodically refreshed live score board."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Callable, List, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from ..filters import has_ended
from ..schemas import Match
from .render import render_live_card, standard_time


logger = logging.getLogger(__name__)


class LiveScoreBoard:
    """Redraws a fixed set of matches every ``interval`` seconds.

    The board works on the snapshot it was given; it does not re-fetch.
    The refresh task stops itself once a match has a result.
    """

    def __init__(
        self,
        console: Console,
        matches: Sequence[Match],
        interval: float = 60.0,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.console = console
        self.matches: List[Match] = list(matches)
        self.interval = interval
        self.clock = clock
        self.ended = False
        self.refreshes = 0
        self._task: Optional[asyncio.Task] = None

    def render_once(self) -> bool:
        """Draw every match once; return True if a match has ended."""
        self.console.clear()
        self.refreshes += 1
        updated_at = standard_time(self.clock())

        for match in self.matches:
            if has_ended(match):
                self.console.print("[bold yellow]Match Has Been Ended[/bold yellow]")
                self.console.print(f" {escape(match.status)}")
                logger.info(f"Match ended: {match.name}")
                self.ended = True
                return True
            render_live_card(self.console, match, updated_at)

        return False

    async def _run(self) -> None:
        while not self.render_once():
            await asyncio.sleep(self.interval)

    def start(self) -> asyncio.Task:
        """Schedule the refresh task on the running loop."""
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self._run(), name="live-score-board")
        return self._task

    def stop(self) -> None:
        if self._task is not None and not self._task.done():
            logger.debug("Cancelling live score refresh")
            self._task.cancel()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def wait(self) -> None:
        """Wait for the board to finish; a cancelled board returns quietly."""
        if self._task is None:
            return
        await asyncio.wait([self._task])
        if not self._task.cancelled():
            self._task.result()
