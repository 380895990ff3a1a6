"""Tests for paginated listings."""
import math

import pytest

from cricket_cli.display.pages import next_page_prompt, paginate, show_paginated
from cricket_cli.display.render import render_ongoing_card, render_upcoming_card


def _matches(factory, n):
    return [factory(name=f"Match {i}") for i in range(n)]


class TestPaginate:
    """Page slicing."""

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 6, 7, 10])
    def test_page_count_and_sizes(self, match_factory, n):
        pages = list(paginate(_matches(match_factory, n), 3))

        assert len(pages) == math.ceil(n / 3)
        assert all(len(page) == 3 for page in pages[:-1])
        assert 1 <= len(pages[-1]) <= 3

    def test_preserves_order(self, match_factory):
        matches = _matches(match_factory, 5)
        flat = [m for page in paginate(matches, 2) for m in page]
        assert flat == matches

    def test_empty(self):
        assert list(paginate([], 3)) == []

    def test_rejects_zero_size(self, match_factory):
        with pytest.raises(ValueError):
            list(paginate(_matches(match_factory, 1), 0))


class TestShowPaginated:
    """Interactive paging."""

    @pytest.mark.parametrize("n", [1, 3, 4, 7, 9])
    def test_prompts_once_less_than_pages(self, console, match_factory, scripted_prompter, n):
        prompter = scripted_prompter()
        shown = show_paginated(console, _matches(match_factory, n), "Ongoing Matches", render_ongoing_card, prompter.confirm)

        pages = math.ceil(n / 3)
        assert shown == pages
        assert len(prompter.confirmed) == pages - 1

    def test_stops_on_no(self, console, console_text, match_factory, scripted_prompter):
        prompter = scripted_prompter(confirms=[False])
        shown = show_paginated(console, _matches(match_factory, 7), "Upcoming Matches", render_upcoming_card, prompter.confirm)

        assert shown == 1
        assert prompter.confirmed == ["Show next 3 matches?"]
        out = console_text()
        assert "Match 2" in out
        assert "Match 3" not in out

    def test_prints_title_and_cards(self, console, console_text, match_factory, scripted_prompter):
        prompter = scripted_prompter()
        show_paginated(console, _matches(match_factory, 2), "Recent Matches", render_upcoming_card, prompter.confirm)

        out = console_text()
        assert "Recent Matches:" in out
        assert "Match 0" in out and "Match 1" in out

    def test_custom_prompt(self, console, match_factory, scripted_prompter):
        prompter = scripted_prompter()
        prompt = next_page_prompt(2, "recent matches")
        show_paginated(console, _matches(match_factory, 3), "Recent Matches", render_upcoming_card,
                       prompter.confirm, page_size=2, prompt=prompt)

        assert prompter.confirmed == ["Show next 2 recent matches?"]
