"""Terminal rendering of match lists and live scores."""

from .live import LiveScoreBoard
from .pages import paginate, show_paginated
from .render import (
    render_live_card,
    render_ongoing_card,
    render_recent_card,
    render_upcoming_card,
)

__all__ = [
    "LiveScoreBoard",
    "paginate",
    "show_paginated",
    "render_live_card",
    "render_ongoing_card",
    "render_recent_card",
    "render_upcoming_card",
]
