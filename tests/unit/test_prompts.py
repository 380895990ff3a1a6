"""Tests for the rich-backed prompter."""
import io

from rich.console import Console

from cricket_cli.cli.prompts import RichPrompter


def _prompter(monkeypatch, *typed):
    answers = iter(typed)
    monkeypatch.setattr("builtins.input", lambda *args: next(answers))
    return RichPrompter(Console(file=io.StringIO(), width=120, color_system=None))


def test_choose_returns_selected_option(monkeypatch):
    prompter = _prompter(monkeypatch, "3")
    assert prompter.choose("Choose an option:", ["Live Scores", "Ongoing Matches", "Upcoming Matches"]) == "Upcoming Matches"


def test_choose_lists_options(monkeypatch):
    prompter = _prompter(monkeypatch, "1")
    prompter.choose("Choose an option:", ["Live Scores", "Recent Matches"])

    out = prompter.console.file.getvalue()
    assert "1. Live Scores" in out
    assert "2. Recent Matches" in out


def test_choose_reasks_on_invalid_input(monkeypatch):
    prompter = _prompter(monkeypatch, "9", "2")
    assert prompter.choose("Choose an option:", ["Live Scores", "Recent Matches"]) == "Recent Matches"


def test_confirm(monkeypatch):
    assert _prompter(monkeypatch, "n").confirm("Show next 3 matches?") is False
    assert _prompter(monkeypatch, "y").confirm("Show next 3 matches?") is True


def test_ask(monkeypatch):
    assert _prompter(monkeypatch, "India").ask("Enter team name to filter matches:") == "India"
