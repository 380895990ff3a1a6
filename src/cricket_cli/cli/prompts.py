"""Interactive prompts backed by rich."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.prompt import Confirm, Prompt


class RichPrompter:
    """Text, yes/no and single-choice prompts on a rich console."""

    def __init__(self, console: Console):
        self.console = console

    def ask(self, message: str) -> str:
        return Prompt.ask(f"[bold]{message}[/bold]", console=self.console, default="", show_default=False)

    def confirm(self, message: str) -> bool:
        return Confirm.ask(message, console=self.console, default=True)

    def choose(self, message: str, choices: Sequence[str]) -> str:
        """Show a numbered list and return the selected choice."""
        self.console.print(f"[bold blue on white]{message}[/bold blue on white]")
        for number, choice in enumerate(choices, start=1):
            self.console.print(f"  [cyan]{number}[/cyan]. {choice}")
        numbers = [str(n) for n in range(1, len(choices) + 1)]
        picked = Prompt.ask("Option", console=self.console, choices=numbers, default="1")
        return choices[int(picked) - 1]
