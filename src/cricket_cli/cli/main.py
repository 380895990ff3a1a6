"""Main CLI interface for the cricket score client."""

import asyncio
import logging
from typing import List, Optional

import typer
from loguru import logger as loguru_logger
from rich.console import Console
from rich.markup import escape
from rich.logging import RichHandler

from ..api import CricAPIClient
from ..config import Settings, get_settings
from ..credentials import CredentialStore
from ..errors import AbortError
from .menu import Prompter, run_menu
from .prompts import RichPrompter

# Initialize rich console
console = Console()

logger = logging.getLogger(__name__)


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _log_handlers(log_level: int, log_file: Optional[str]) -> List[logging.Handler]:
    """Rich console handler, plus a plain file handler when a path is given."""
    handlers: List[logging.Handler] = [RichHandler(console=console, show_time=True, show_path=False)]
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)
    for handler in handlers:
        handler.setLevel(log_level)
    return handlers


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> int:
    """Route stdlib logging and loguru into the same handlers; return the level used."""
    log_level = getattr(logging, level.upper(), logging.WARNING)
    handlers = _log_handlers(log_level, log_file)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)

    # The HTTP client logs through loguru
    loguru_logger.remove()
    for handler in handlers:
        loguru_logger.add(handler, level=log_level, format="{message}")
    return log_level


async def run(console: Console, prompter: Prompter, settings: Settings) -> None:
    """Run one interactive session against the configured API."""
    store = CredentialStore(settings.credentials_file)
    async with CricAPIClient.from_settings(settings.api) as client:
        await run_menu(console, prompter, client, store, settings)


app = typer.Typer(
    name="cricket-cli",
    help="Live cricket scores and fixtures in your terminal",
    add_completion=False,
)


@app.command()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Log file path"),
):
    """Show live scores, ongoing, upcoming or recent cricket matches."""
    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.logging.level
    setup_logging(log_level, log_file or settings.logging.file)

    try:
        asyncio.run(run(console, RichPrompter(console), settings))
    except AbortError as e:
        console.print(f"[bold red]{escape(str(e))}[/bold red]")
        raise typer.Exit(0)
    except KeyboardInterrupt:
        console.print()
        raise typer.Exit(130)
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)
